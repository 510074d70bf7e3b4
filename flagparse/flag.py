# flagparse — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `Flag`, the descriptor pairing a value cell with the way it is matched on
the command line.

A flag is either positional (matched by its position among the bare tokens) or
optional (matched by a prefixed name such as `--name`). Its `nargs` is the number
of tokens it consumes:

- `nargs > 0`: exactly that many tokens.
- `nargs == 0`: a switch; only legal for optional flags. The value is set with no
  tokens, so a `Bool` becomes True.
- `nargs < 0`: one or more tokens, running to the end of the input.

Flags are created through `Flag.positional_flag()`, `Flag.optional_flag()` and
`Flag.switch_flag()` and registered under a name with `FlagSet.add()`.
"""
from __future__ import annotations

from flagparse.exceptions import PositionalNArgsError
from flagparse.protocols import ValueProtocol


class Flag:
    """
    A command line flag.

    Attributes:
        value (ValueProtocol): Cell the parsed tokens are stored in.
        positional (bool): True for positional flags, False for optional ones.
        nargs (int): Number of tokens consumed; 0 for switches, negative for unlimited.
        usage (str): Help text shown in usage output.
        default (str): Rendering of the value at construction, empty for switches.
    """

    def __init__(
        self,
        value: ValueProtocol,
        positional: bool = False,
        usage: str = "",
        nargs: int = 1,
    ) -> None:
        self.value: ValueProtocol = value
        self.positional: bool = positional
        self.usage: str = usage
        self._nargs: int = 1
        self.default: str = str(value)
        self.set_nargs(nargs)

    @classmethod
    def positional_flag(cls, value: ValueProtocol | None, usage: str = "") -> Flag | None:
        """Create a positional flag consuming one token, or None if `value` is None."""
        if value is None:
            return None
        return cls(value, positional=True, usage=usage)

    @classmethod
    def optional_flag(cls, value: ValueProtocol | None, usage: str = "") -> Flag | None:
        """Create an optional flag consuming one token, or None if `value` is None."""
        if value is None:
            return None
        return cls(value, positional=False, usage=usage)

    @classmethod
    def switch_flag(cls, value: ValueProtocol | None, usage: str = "") -> Flag | None:
        """Create an optional flag consuming no tokens, or None if `value` is None."""
        if value is None:
            return None
        return cls(value, positional=False, usage=usage, nargs=0)

    @property
    def nargs(self) -> int:
        return self._nargs

    def set_nargs(self, nargs: int) -> None:
        """
        Change the number of tokens this flag consumes.

        Turning an optional flag into a switch clears its default rendering; turning
        a switch back into a regular flag recomputes it from the current value.

        Raises:
            PositionalNArgsError: If `nargs` is 0 and the flag is positional.
        """
        if nargs == 0 and self.positional:
            raise PositionalNArgsError()
        if nargs == 0:
            self.default = ""
        elif self._nargs == 0:
            self.default = str(self.value)
        self._nargs = nargs

    @property
    def is_switch(self) -> bool:
        return not self.positional and self._nargs == 0

    @property
    def is_unlimited(self) -> bool:
        return self._nargs < 0

    @property
    def type_name(self) -> str:
        """Name of the value's type, as shown in usage output."""
        return getattr(self.value, "type_name", type(self.value).__name__)

    def __str__(self) -> str:
        kind = "positional" if self.positional else "optional"
        return f"Flag({kind}, nargs={self._nargs}, value={self.value})"

    def __repr__(self) -> str:
        return str(self)
