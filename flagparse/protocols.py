# flagparse — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines structural protocols for flagparse extension points.

These runtime-checkable `Protocol` classes specify the interface a caller type
must provide to be used without subclassing `flagparse.value.Value`.

Protocols:
- ValueProtocol: Anything that can be set from tokens, read back and rendered.
"""
from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class ValueProtocol(Protocol):
    def set(self, *tokens: str) -> None: ...

    def get(self) -> Any: ...

    def __str__(self) -> str: ...
