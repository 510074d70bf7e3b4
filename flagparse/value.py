# flagparse — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines the `Value` family: typed cells that convert command line tokens into
native Python values and store them.

A value cell is a view over storage owned by the caller. Built-in cells either
bind to an attribute of a caller object (`Int.bind(config, "count")`), reading
and writing through `getattr`/`setattr`, or own a private slot when constructed
directly (`Int(5)`).

Every cell supports three operations:
- `set(*tokens)`: Convert the tokens and store the result. Either the whole call
  succeeds or the stored value is left untouched.
- `get()`: Return the current native value.
- `str(cell)`: Render the current value, used for default-value display.

Built-in kinds:
- Scalars: `Bool`, `String`, `Int`, `Float`. Only the first token is used and an
  empty call keeps the previous value, except for `Bool` where it stores `True`.
- Lists: `BoolList`, `StringList`, `IntList`, `FloatList`. All tokens are used and
  always replace the previous contents.

Any object satisfying `ValueProtocol` can be used in place of a built-in cell.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Callable, Generic, TypeVar, get_args, get_origin

from flagparse.protocols import ValueProtocol
from flagparse.utils import format_float, parse_bool, parse_float, parse_int

T = TypeVar("T")


class Value(ABC, Generic[T]):
    """Base class for command line value cells."""

    type_name: str = "value"

    @abstractmethod
    def set(self, *tokens: str) -> None:
        """Convert `tokens` and store the result."""

    @abstractmethod
    def get(self) -> T:
        """Return the current value."""

    @abstractmethod
    def __str__(self) -> str: ...

    def render(self) -> str:
        return str(self)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.get()!r})"


class BuiltinValue(Value[T]):
    """
    Shared storage logic of the built-in kinds.

    Args:
        initial (T | None): Starting value. Kind-specific zero when omitted. When bound,
            an explicit `initial` is written to the target attribute.
        target (Any): Object owning the attribute the cell is a view of.
        attr (str | None): Name of that attribute.
    """

    def __init__(
        self,
        initial: T | None = None,
        *,
        target: Any = None,
        attr: str | None = None,
    ) -> None:
        if (target is None) != (attr is None):
            raise TypeError("target and attr must be given together")
        self._target = target
        self._attr = attr
        self._value: T | None = None
        if target is None:
            self._value = self._zero() if initial is None else self._copy(initial)
        elif initial is not None:
            setattr(target, attr, self._copy(initial))
        elif not hasattr(target, attr):
            setattr(target, attr, self._zero())

    @classmethod
    def bind(cls, target: Any, attr: str):
        """Create a cell reading and writing `target.<attr>`."""
        return cls(target=target, attr=attr)

    @property
    def bound(self) -> bool:
        return self._target is not None

    def get(self) -> T:
        if self._target is None:
            return self._value  # type: ignore[return-value]
        return getattr(self._target, self._attr)  # type: ignore[arg-type]

    def _store(self, value: T) -> None:
        if self._target is None:
            self._value = value
        else:
            setattr(self._target, self._attr, value)  # type: ignore[arg-type]

    @abstractmethod
    def _zero(self) -> T: ...

    def _copy(self, value: T) -> T:
        return value


class ScalarValue(BuiltinValue[T]):
    zero: Any = None
    convert: Callable[[str], Any]
    format: Callable[[Any], str] = str

    def _zero(self) -> T:
        return self.zero

    def set(self, *tokens: str) -> None:
        if not tokens:
            return
        self._store(self.convert(tokens[0]))

    def __str__(self) -> str:
        return self.format(self.get())


def format_bool(value: bool) -> str:
    return "true" if value else "false"


class Bool(ScalarValue[bool]):
    """A bool cell; `set()` with no tokens stores True so it can back a switch."""

    type_name = "bool"
    zero = False
    convert = staticmethod(parse_bool)
    format = staticmethod(format_bool)

    def set(self, *tokens: str) -> None:
        if not tokens:
            tokens = ("true",)
        self._store(self.convert(tokens[0]))


class String(ScalarValue[str]):
    type_name = "str"
    zero = ""
    convert = staticmethod(str)


class Int(ScalarValue[int]):
    type_name = "int"
    zero = 0
    convert = staticmethod(parse_int)


class Float(ScalarValue[float]):
    type_name = "float"
    zero = 0.0
    convert = staticmethod(parse_float)
    format = staticmethod(format_float)


class ListValue(BuiltinValue[list]):
    """A list cell; every `set` replaces the contents with the converted tokens."""

    item: type[ScalarValue]

    def _zero(self) -> list:
        return []

    def _copy(self, value: list) -> list:
        return list(value)

    def set(self, *tokens: str) -> None:
        values = [self.item.convert(token) for token in tokens]
        self._store(values)

    def __str__(self) -> str:
        return f"[{' '.join(self.item.format(item) for item in self.get())}]"


class BoolList(ListValue):
    type_name = "list[bool]"
    item = Bool


class StringList(ListValue):
    type_name = "list[str]"
    item = String


class IntList(ListValue):
    type_name = "list[int]"
    item = Int


class FloatList(ListValue):
    type_name = "list[float]"
    item = Float


SCALAR_KINDS: dict[type, type[ScalarValue]] = {
    bool: Bool,
    str: String,
    int: Int,
    float: Float,
}

LIST_KINDS: dict[type, type[ListValue]] = {
    bool: BoolList,
    str: StringList,
    int: IntList,
    float: FloatList,
}


def kind_for(annotation: Any) -> type[BuiltinValue] | None:
    """Return the built-in cell class for a type annotation, if there is one."""
    if get_origin(annotation) is list:
        args = get_args(annotation)
        if len(args) != 1:
            return None
        return LIST_KINDS.get(args[0])
    if annotation is list:
        return None
    return SCALAR_KINDS.get(annotation)


def _infer_annotation(current: Any) -> Any:
    if isinstance(current, list):
        item_types = {type(item) for item in current}
        if len(item_types) == 1:
            return list[item_types.pop()]
        return list
    return type(current)


def new_value(target: Any, attr: str, annotation: Any = None) -> ValueProtocol:
    """
    Return a value cell for `target.<attr>`.

    If the attribute already holds a `ValueProtocol` object it is returned as-is.
    Otherwise the built-in kind is picked from `annotation`, or from the current
    attribute value when no annotation is given.

    Raises:
        TypeError: If no built-in kind matches.
    """
    current = getattr(target, attr, None)
    if isinstance(current, ValueProtocol):
        return current
    if annotation is None:
        annotation = _infer_annotation(current)
    kind = kind_for(annotation)
    if kind is None:
        name = getattr(annotation, "__name__", None) or str(annotation)
        raise TypeError(f"unsupported type: {name}")
    return kind.bind(target, attr)
