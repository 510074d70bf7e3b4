# flagparse — (c) 2025 rtj.dev LLC — MIT Licensed
"""
State models for the `FlagSet` parser.

Contents:
- `ParseState`: The states of the token-consuming state machine.
- `ParseSession`: Per-call parsing state (tokens, cursor, positional index and the
  flags that already received a value). Created by `FlagSet.parse_args()` and
  discarded when it returns.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from flagparse.flag import Flag


class ParseState(Enum):
    """States of the parser."""

    IDLE = "idle"
    CONSUMING_POSITIONAL = "consuming_positional"
    CONSUMING_OPTIONAL = "consuming_optional"
    DONE = "done"

    def __str__(self) -> str:
        return self.value


@dataclass
class ParseSession:
    """Tracks the progress of one `parse_args()` call."""

    tokens: list[str]
    cursor: int = 0
    position: int = 0
    state: ParseState = ParseState.IDLE
    current: Flag | None = None
    current_name: str = ""
    visited: set[int] = field(default_factory=set)

    @property
    def remaining(self) -> int:
        """Number of tokens from the cursor to the end of the input."""
        return len(self.tokens) - self.cursor

    @property
    def exhausted(self) -> bool:
        return self.cursor >= len(self.tokens)

    def open(self, state: ParseState, flag: Flag, name: str) -> None:
        """Bind `flag` as the flag being consumed."""
        self.state = state
        self.current = flag
        self.current_name = name

    def close(self) -> None:
        """Mark the bound flag as visited and return to idle."""
        assert self.current is not None, "no flag is open"
        self.visited.add(id(self.current))
        self.state = ParseState.IDLE
        self.current = None
        self.current_name = ""

    def is_visited(self, flag: Flag) -> bool:
        return id(flag) in self.visited
