# flagparse — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines all custom exception classes used by flagparse.

Registration errors are raised while a `FlagSet` is being built, decode errors
while a `FlagSet` is being built from a dataclass, and parse errors while the
command line tokens are consumed. Every parse error stops parsing at the first
violation.

All exceptions inherit from `FlagparseError`, the base exception for the package.

Exception Hierarchy:
- FlagparseError
    ├── RegistrationError
    │   └── PositionalNArgsError (also an ArityError)
    ├── DecodeError
    ├── ArityError
    └── ParseError
        ├── UnknownFlagError
        ├── DuplicateFlagError
        ├── NotEnoughArgumentsError (also an ArityError)
        ├── ConversionError (also a ValueError)
        ├── UnrecognizedArgumentError
        └── MissingRequiredArgumentError

The help flag is not an error; see `flagparse.signals.HelpSignal`.
"""
from __future__ import annotations


class FlagparseError(Exception):
    """Base exception for flagparse."""


class RegistrationError(FlagparseError):
    """Exception raised when a flag cannot be registered in a FlagSet."""


class DecodeError(FlagparseError):
    """Exception raised when a FlagSet cannot be built from a dataclass."""


class ArityError(FlagparseError):
    """Exception raised when the number of arguments of a flag is not acceptable."""


class PositionalNArgsError(RegistrationError, ArityError):
    """Exception raised when a positional flag is given zero arguments."""

    def __init__(self, message: str = "nargs cannot be 0 for positional flag"):
        super().__init__(message)


class ParseError(FlagparseError):
    """Base exception for errors found while parsing command line tokens."""


class UnknownFlagError(ParseError):
    """Exception raised when an optional-looking token matches no registered name."""

    def __init__(self, token: str):
        self.token = token
        super().__init__(f"unknown optional flag: {token}")


class DuplicateFlagError(ParseError):
    """Exception raised when an optional flag is given more than once."""

    def __init__(self, token: str):
        self.token = token
        super().__init__(f"flag '{token}' already given")


class NotEnoughArgumentsError(ParseError, ArityError):
    """Exception raised when too few tokens remain for a flag."""

    def __init__(self, flag: str, required: int, given: int):
        self.flag = flag
        self.required = required
        self.given = given
        required_text = "at least one" if required < 0 else str(required)
        super().__init__(
            f"invalid no. of arguments for flag '{flag}'; "
            f"required: {required_text}, given: {given}"
        )


class ConversionError(ParseError, ValueError):
    """
    Exception raised when a token cannot be converted into the type of a value.

    Attributes:
        token (str): The offending token.
        type_name (str): Name of the target type.
        reason (str): Why the conversion failed.
        flag (str | None): Name of the flag being set, once known.
    """

    def __init__(
        self, token: str, type_name: str, reason: str, flag: str | None = None
    ):
        self.token = token
        self.type_name = type_name
        self.reason = reason
        self.flag = flag
        message = f"cannot parse '{token}' as type '{type_name}': {reason}"
        if flag:
            message = f"error while setting flag '{flag}': {message}"
        super().__init__(message)

    def with_flag(self, flag: str) -> ConversionError:
        """Return a copy of this error naming the flag being set."""
        return ConversionError(self.token, self.type_name, self.reason, flag=flag)


class UnrecognizedArgumentError(ParseError):
    """Exception raised when a bare token has no positional flag left to receive it."""

    def __init__(self, token: str):
        self.token = token
        super().__init__(f"unknown positional flag: {token}")


class MissingRequiredArgumentError(ParseError):
    """Exception raised when positional flags were not given a value."""

    def __init__(self, names: list[str]):
        self.names = names
        plural = "s" if len(names) > 1 else ""
        quoted = ", ".join(f"'{name}'" for name in names)
        super().__init__(f"value for positional flag{plural} {quoted} not given")
