# flagparse — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Parses flag tag strings attached to dataclass fields.

A tag is a comma separated list of items. A literal comma inside a value is
escaped with a backslash (`usage=hello\\, world`); backslashes themselves are
dropped. Empty items are ignored.

Recognized items:
- `name=<name>[:<alias>...]`: Flag name and aliases (letters, digits and `-`).
- `usage=<text>` or `help=<text>`: Usage text.
- `nargs=<int>`: Number of arguments; negative means unlimited.
- `positional`: Create a positional flag instead of an optional one.
- `switch`: Create a switch (an optional flag taking no arguments).

Functions:
- split_escaped: Escape-aware split used for the item list.
- parse_tag: Decode a tag string into a `FlagTag`.
"""
from __future__ import annotations

import re
from dataclasses import dataclass, field

from flagparse.exceptions import ConversionError, DecodeError
from flagparse.utils import parse_int

TAG_SEPARATOR = ","
NAME_SEPARATOR = ":"
ESCAPE = "\\"

VALID_ITEMS = {
    "name": re.compile(r"^name=([-A-Za-z0-9]+(?::[-A-Za-z0-9]+)*)$"),
    "usage": re.compile(r"^(?:usage|help)=(.+)$", re.DOTALL),
    "nargs": re.compile(r"^nargs=(-?[0-9]+)$"),
}
BARE_ITEMS = ("positional", "switch")


@dataclass
class FlagTag:
    """Decoded contents of a flag tag."""

    names: list[str] = field(default_factory=list)
    usage: str = ""
    nargs: int | None = None
    positional: bool = False
    switch: bool = False

    @property
    def effective_nargs(self) -> int:
        if self.switch:
            return 0
        return 1 if self.nargs is None else self.nargs


def split_escaped(source: str, separator: str = TAG_SEPARATOR) -> list[str]:
    """Split `source` on `separator`, honoring backslash escapes and dropping empty parts."""
    parts: list[str] = []
    current: list[str] = []
    previous = ""
    for char in source:
        if char == ESCAPE:
            pass
        elif char == separator and previous != ESCAPE:
            if current:
                parts.append("".join(current))
                current = []
        else:
            current.append(char)
        previous = char
    if current:
        parts.append("".join(current))
    return parts


def parse_tag(tag: str) -> FlagTag:
    """
    Decode a tag string.

    Raises:
        DecodeError: On an unknown item, a malformed value, or a switch combined with
            `positional` or a nonzero `nargs`.
    """
    result = FlagTag()
    for item in split_escaped(tag):
        if item in BARE_ITEMS:
            setattr(result, item, True)
            continue
        for key, regex in VALID_ITEMS.items():
            match = regex.match(item)
            if match:
                _apply(result, key, match.group(1))
                break
        else:
            raise DecodeError(f"unknown key and/or invalid value: {item}")

    if result.switch and result.positional:
        raise DecodeError("a positional flag cannot be a switch")
    if result.switch and result.nargs not in (None, 0):
        raise DecodeError(f"a switch cannot take arguments (nargs={result.nargs})")
    return result


def _apply(result: FlagTag, key: str, raw: str) -> None:
    if key == "name":
        result.names = raw.split(NAME_SEPARATOR)
    elif key == "usage":
        result.usage = raw
    elif key == "nargs":
        try:
            result.nargs = parse_int(raw)
        except ConversionError as error:
            raise DecodeError(str(error)) from error
