# flagparse — (c) 2025 rtj.dev LLC — MIT Licensed
"""
This module implements `FlagSet`, the registry of flags and the parser that
consumes command line tokens into them.

Positional flags are matched purely by registration order: each bare token opens
the next unfilled positional flag. Optional flags are matched purely by name and
may appear anywhere. Each flag consumes exactly `nargs` tokens, none for switches,
or every remaining token when its `nargs` is negative.

Public Interface:
- `add(flag, name, *aliases)`: Register a flag under a name (and aliases for
  optional flags).
- `parse_args(args)`: Parse tokens into the registered value cells, raising on the
  first violation. Never prints or exits.
- `parse(args)`: Command line wrapper around `parse_args()` that shows usage and
  exits with `EXIT_HELP` or `EXIT_ERROR`.
- `get_usage()` / `render_help()`: Usage synopsis and rich-styled help.

Example Usage:
    count, name, verbose = Int(), String("anon"), Bool()
    flag_set = FlagSet(description="Greets people.")
    flag_set.add(Flag.positional_flag(count, "Number of greetings"), "count")
    flag_set.add(Flag.optional_flag(name, "Who to greet"), "--name", "-n")
    flag_set.add(Flag.switch_flag(verbose, "Talk more"), "--verbose")

    flag_set.parse_args(["42", "--name", "alice", "--verbose"])
    # count.get() == 42, name.get() == "alice", verbose.get() is True
"""
from __future__ import annotations

import re
import sys
from types import MappingProxyType
from typing import Callable, Mapping, Sequence

from rich.console import Console
from rich.markup import escape

from flagparse.console import console as default_console
from flagparse.exceptions import (
    ConversionError,
    DuplicateFlagError,
    FlagparseError,
    MissingRequiredArgumentError,
    NotEnoughArgumentsError,
    RegistrationError,
    UnknownFlagError,
    UnrecognizedArgumentError,
)
from flagparse.flag import Flag
from flagparse.logger import logger
from flagparse.parser_types import ParseSession, ParseState
from flagparse.signals import HelpSignal
from flagparse.utils import get_program_invocation

EXIT_HELP = 1
EXIT_ERROR = 2

POSITIONAL_NAME = re.compile(r"^[A-Za-z0-9][-A-Za-z0-9]*$")


class FlagSet:
    """
    An ordered collection of positional flags and a name-indexed collection of
    optional flags, together with the parser that fills them.

    Args:
        name (str | None): Program name shown in usage. Defaults to the invocation.
        description (str): Text shown under the usage line.
        args (Sequence[str] | None): Tokens to parse. Defaults to `sys.argv[1:]`.
        option_prefix (str): Prefix that marks a token as an optional flag.
        help_flag (str): Reserved flag that stops parsing and requests usage.
        continue_on_error (bool): If True, `parse()` re-raises instead of exiting.
        console (Console | None): Sink for usage and error output.
        usage (Callable[[], None] | None): Replaces `render_help()` in `parse()`.
    """

    def __init__(
        self,
        name: str | None = None,
        description: str = "",
        args: Sequence[str] | None = None,
        option_prefix: str = "-",
        help_flag: str = "--help",
        continue_on_error: bool = False,
        console: Console | None = None,
        usage: Callable[[], None] | None = None,
    ) -> None:
        if not option_prefix:
            raise RegistrationError("option prefix cannot be empty")
        if not help_flag.startswith(option_prefix) or help_flag == option_prefix:
            raise RegistrationError(
                f"help flag {help_flag!r} must start with the option prefix {option_prefix!r}"
            )
        self.name: str = name or get_program_invocation()
        self.description: str = description
        self.args: list[str] = list(sys.argv[1:] if args is None else args)
        self.option_prefix: str = option_prefix
        self.help_flag: str = help_flag
        self.continue_on_error: bool = continue_on_error
        self.console: Console = console or default_console
        self.usage: Callable[[], None] | None = usage
        self._positional: list[tuple[str, Flag]] = []
        self._optional: dict[str, Flag] = {}
        self._optional_name = re.compile(
            rf"^{re.escape(option_prefix)}-*[A-Za-z0-9][-A-Za-z0-9]*$"
        )

    @property
    def positional_flags(self) -> list[tuple[str, Flag]]:
        """Registered positional flags as `(name, flag)` pairs, in matching order."""
        return list(self._positional)

    @property
    def optional_flags(self) -> Mapping[str, Flag]:
        """Read-only mapping of every optional name and alias to its flag."""
        return MappingProxyType(self._optional)

    def get(self, name: str) -> Flag | None:
        """Return the flag registered under `name`, positional or optional."""
        if name in self._optional:
            return self._optional[name]
        return next((flag for pos, flag in self._positional if pos == name), None)

    def add(self, flag: Flag | None, name: str, *aliases: str) -> None:
        """
        Register `flag` under `name`.

        Optional flags may be given alias names; all of them map to the same flag.
        Registering `None` does nothing, so conditionally built flags need no branching.

        Raises:
            RegistrationError: On an invalid or duplicate name, a collision with the
                help flag, or a positional flag following an unlimited one.
        """
        if flag is None:
            return
        if flag.positional:
            self._add_positional(flag, name, aliases)
        else:
            self._add_optional(flag, (name, *aliases))

    def _add_positional(self, flag: Flag, name: str, aliases: tuple[str, ...]) -> None:
        if aliases:
            raise RegistrationError(f"positional flag {name!r} cannot have aliases")
        if not POSITIONAL_NAME.match(name):
            raise RegistrationError(f"{name!r} is not a valid positional flag name")
        for existing_name, existing in self._positional:
            if existing_name == name:
                raise RegistrationError(
                    f"positional flag with name {name!r} already exists"
                )
            if existing is flag:
                raise RegistrationError(
                    f"flag is already registered as positional flag {existing_name!r}"
                )
        if self._positional and self._positional[-1][1].is_unlimited:
            raise RegistrationError(
                f"positional flag {name!r} cannot follow {self._positional[-1][0]!r} "
                "which takes unlimited arguments"
            )
        self._positional.append((name, flag))

    def _add_optional(self, flag: Flag, names: tuple[str, ...]) -> None:
        seen: set[str] = set()
        for name in names:
            if not self._optional_name.match(name):
                raise RegistrationError(f"{name!r} is not a valid optional flag name")
            if name == self.help_flag:
                raise RegistrationError(f"{name!r} is reserved for help")
            if name in self._optional or name in seen:
                raise RegistrationError(
                    f"optional flag with name {name!r} already exists"
                )
            seen.add(name)
        for name in names:
            self._optional[name] = flag

    def _validate_positionals(self) -> None:
        for name, flag in self._positional[:-1]:
            if flag.is_unlimited:
                raise RegistrationError(
                    f"only the last positional flag can take unlimited arguments, "
                    f"not {name!r}"
                )

    def parse_args(self, args: Sequence[str] | None = None) -> None:
        """
        Parse tokens into the registered flags.

        Values are stored in the flags' cells as they are consumed. Parsing stops at
        the first error; flags consumed before it keep their new values.

        Args:
            args (Sequence[str] | None): Tokens to parse. Defaults to `self.args`.

        Raises:
            HelpSignal: The help flag was found.
            ParseError: The tokens do not match the registered flags.
            RegistrationError: A positional flag follows an unlimited one.
        """
        self._validate_positionals()
        session = ParseSession(list(self.args if args is None else args))
        while session.state is not ParseState.DONE:
            if session.state is ParseState.IDLE:
                self._dispatch(session)
            elif session.state is ParseState.CONSUMING_POSITIONAL:
                self._consume_positional(session)
            else:
                self._consume_optional(session)

        missing = [
            name for name, flag in self._positional if not session.is_visited(flag)
        ]
        if missing:
            raise MissingRequiredArgumentError(missing)

    def _dispatch(self, session: ParseSession) -> None:
        if session.exhausted:
            session.state = ParseState.DONE
            return

        token = session.tokens[session.cursor]
        if token == self.help_flag:
            raise HelpSignal()

        if token.startswith(self.option_prefix):
            flag = self._optional.get(token)
            if flag is None:
                raise UnknownFlagError(token)
            if session.is_visited(flag):
                raise DuplicateFlagError(token)
            session.open(ParseState.CONSUMING_OPTIONAL, flag, token)
            return

        if session.position < len(self._positional):
            name, flag = self._positional[session.position]
            session.open(ParseState.CONSUMING_POSITIONAL, flag, name)
            return

        raise UnrecognizedArgumentError(token)

    def _consume_positional(self, session: ParseSession) -> None:
        flag, name = session.current, session.current_name
        assert flag is not None, "no positional flag is open"
        if flag.is_unlimited:
            values = session.tokens[session.cursor :]
        else:
            if session.remaining < flag.nargs:
                raise NotEnoughArgumentsError(name, flag.nargs, session.remaining)
            values = session.tokens[session.cursor : session.cursor + flag.nargs]
        self._set_value(flag, name, values)
        session.cursor += len(values)
        session.position += 1
        session.close()

    def _consume_optional(self, session: ParseSession) -> None:
        flag, name = session.current, session.current_name
        assert flag is not None, "no optional flag is open"
        start = session.cursor + 1
        given = session.remaining - 1
        if flag.is_switch:
            values = []
        elif flag.is_unlimited:
            if given < 1:
                raise NotEnoughArgumentsError(name, flag.nargs, given)
            values = session.tokens[start:]
        else:
            if given < flag.nargs:
                raise NotEnoughArgumentsError(name, flag.nargs, given)
            values = session.tokens[start : start + flag.nargs]
        self._set_value(flag, name, values)
        session.cursor = start + len(values)
        session.close()

    def _set_value(self, flag: Flag, name: str, values: list[str]) -> None:
        try:
            flag.value.set(*values)
        except ConversionError as error:
            raise error.with_flag(name) from error
        except ValueError as error:
            raise ConversionError(
                " ".join(values), flag.type_name, str(error), flag=name
            ) from error

    def parse(self, args: Sequence[str] | None = None) -> None:
        """
        Parse tokens the way a command line program wants to.

        On the help flag the usage is shown and the program exits with `EXIT_HELP`.
        On any other error the error and the usage are shown and the program exits
        with `EXIT_ERROR`. With `continue_on_error` the signal or error is re-raised
        instead of exiting.
        """
        try:
            self.parse_args(args)
        except HelpSignal:
            logger.debug("Help requested for '%s'.", self.name)
            self.show_usage()
            if self.continue_on_error:
                raise
            sys.exit(EXIT_HELP)
        except FlagparseError as error:
            logger.debug("Parsing failed for '%s': %s", self.name, error)
            self.console.print(f"[bold red]error:[/bold red] {escape(str(error))}")
            self.show_usage()
            if self.continue_on_error:
                raise
            sys.exit(EXIT_ERROR)

    def show_usage(self) -> None:
        """Call the custom `usage` callable if one is set, else `render_help()`."""
        if self.usage is None:
            self.render_help()
        else:
            self.usage()

    def option_groups(self) -> list[tuple[list[str], Flag]]:
        """Optional flags with their aliases merged, sorted by primary name."""
        groups: list[tuple[list[str], Flag]] = []
        for name, flag in self._optional.items():
            for names, existing in groups:
                if existing is flag:
                    names.append(name)
                    break
            else:
                groups.append(([name], flag))
        return sorted(groups, key=lambda group: group[0][0])

    def _metavar(self, name: str) -> str:
        return name.lstrip(self.option_prefix).replace("-", "_").upper()

    def _arguments_text(self, flag: Flag, metavar: str) -> str:
        if flag.is_switch:
            return ""
        if flag.is_unlimited:
            return f"{metavar} [{metavar} ...]"
        return " ".join([metavar] * flag.nargs)

    def get_usage(self, plain_text: bool = False) -> str:
        """
        Render the usage synopsis of this flag set.

        Returns:
            str: e.g. `prog [--help] [--name NAME] [--verbose] count`.
        """
        options_list = [f"[{self.help_flag}]"]
        for names, flag in self.option_groups():
            arguments = self._arguments_text(flag, self._metavar(names[0]))
            if arguments:
                options_list.append(f"[{names[0]} {arguments}]")
            else:
                options_list.append(f"[{names[0]}]")
        for name, flag in self._positional:
            options_list.append(self._arguments_text(flag, name))

        usage = " ".join([self.name, *options_list])
        if plain_text:
            return usage
        return escape(usage)

    def render_help(self) -> None:
        """
        Print formatted help for this flag set using Rich output.

        Includes usage, description, positional flags and optional flags with their
        types and defaults.
        """
        self.console.print(f"[bold]usage: {self.get_usage()}[/bold]\n")

        if self.description:
            self.console.print(escape(self.description) + "\n")

        if self._positional:
            self.console.print("[bold]positional:[/bold]")
            for name, flag in self._positional:
                self._print_flag_line(f"{name} {flag.type_name}", flag.usage)

        self.console.print("[bold]options:[/bold]")
        self._print_flag_line(self.help_flag, "Show this usage message and exit")
        for names, flag in self.option_groups():
            flags = ", ".join(names)
            help_text = flag.usage
            if not flag.is_switch:
                flags = f"{flags} {flag.type_name}"
                help_text = f"{help_text} (default: {flag.default})".strip()
            self._print_flag_line(flags, help_text)

    def _print_flag_line(self, flags: str, help_text: str) -> None:
        arg_line = f"  {flags:<30} "
        if help_text and len(flags) > 30:
            help_text = f"\n{'':<33}{help_text}"
        self.console.print(escape(f"{arg_line}{help_text}"))

    def __str__(self) -> str:
        """Return a human-readable summary of the flag set."""
        return (
            f"FlagSet(name={self.name!r}, positional={len(self._positional)}, "
            f"optional={len(self.option_groups())}, names={len(self._optional)})"
        )

    def __repr__(self) -> str:
        return str(self)
