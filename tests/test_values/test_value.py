import sys

import pytest

from flagparse.exceptions import ConversionError
from flagparse.value import (
    Bool,
    BoolList,
    Float,
    FloatList,
    Int,
    IntList,
    String,
    StringList,
    Value,
    new_value,
)


class Holder:
    def __init__(self):
        self.count = 7
        self.ratio = 0.5
        self.name = "anon"
        self.debug = False
        self.ids = [1, 2]


@pytest.mark.parametrize(
    "cell, token, expected",
    [
        (Bool(), "true", True),
        (Bool(), "F", False),
        (Bool(), "1", True),
        (String(), "hello", "hello"),
        (String(), "", ""),
        (Int(), "42", 42),
        (Int(), "-10", -10),
        (Int(), "0x1f", 31),
        (Int(), "0755", 493),
        (Float(), "3.14", 3.14),
        (Float(), "1e3", 1000.0),
    ],
)
def test_scalar_set(cell, token, expected):
    cell.set(token)
    assert cell.get() == expected


@pytest.mark.parametrize(
    "cell, token",
    [
        (Bool(), "true"),
        (Bool(), "false"),
        (String(), "hello"),
        (Int(), "0"),
        (Int(), "-10"),
        (Float(), "3.14"),
        (Float(), "-0.5"),
    ],
)
def test_scalar_render_round_trip(cell, token):
    cell.set(token)
    assert str(cell) == token
    assert cell.render() == token


def test_float_render_drops_trailing_zero():
    cell = Float()
    cell.set("1.0")
    assert str(cell) == "1"
    assert cell.get() == 1.0


def test_scalar_set_without_tokens_keeps_value():
    cell = Int(5)
    cell.set()
    assert cell.get() == 5

    text = String("anon")
    text.set()
    assert text.get() == "anon"


def test_bool_set_without_tokens_is_true():
    cell = Bool()
    assert cell.get() is False
    cell.set()
    assert cell.get() is True


def test_scalar_uses_first_token_only():
    cell = Int()
    cell.set("1", "2", "3")
    assert cell.get() == 1


@pytest.mark.parametrize(
    "cell, token",
    [
        (Bool(), "hello"),
        (Bool(), "tru"),
        (Bool(), "yes"),
        (Int(), "hello"),
        (Int(), "1.1"),
        (Int(), "true"),
        (Int(), "666666666666666666666666"),
        (Int(), " 5"),
        (Int(), "٣"),
        (Float(), "abc"),
        (Float(), "1e400"),
        (Float(), "1_0"),
    ],
)
def test_scalar_invalid_tokens(cell, token):
    before = cell.get()
    with pytest.raises(ConversionError) as excinfo:
        cell.set(token)
    assert excinfo.value.token == token
    assert excinfo.value.type_name == cell.type_name
    assert cell.get() == before


def test_int_overflow_reason():
    with pytest.raises(ConversionError) as excinfo:
        Int().set(str(sys.maxsize + 1))
    assert excinfo.value.reason == "value out of range"
    assert "cannot parse" in str(excinfo.value)
    assert "'int'" in str(excinfo.value)


def test_int_accepts_platform_limits():
    cell = IntList()
    cell.set(str(sys.maxsize), str(-sys.maxsize - 1))
    assert cell.get() == [sys.maxsize, -sys.maxsize - 1]


def test_float_accepts_inf_spelling():
    cell = Float()
    cell.set("inf")
    assert cell.get() == float("inf")


@pytest.mark.parametrize(
    "cell, tokens, expected, rendered",
    [
        (BoolList(), ["true", "false"], [True, False], "[true false]"),
        (StringList(), ["hello", ""], ["hello", ""], "[hello ]"),
        (IntList(), ["0", "10", "-10"], [0, 10, -10], "[0 10 -10]"),
        (FloatList(), ["1.5", "2"], [1.5, 2.0], "[1.5 2]"),
    ],
)
def test_list_set_and_render(cell, tokens, expected, rendered):
    cell.set(*tokens)
    assert cell.get() == expected
    assert str(cell) == rendered


def test_list_set_replaces_contents():
    cell = IntList([9, 9, 9])
    cell.set("1", "2")
    assert cell.get() == [1, 2]
    cell.set("3")
    assert cell.get() == [3]


def test_list_set_without_tokens_empties():
    cell = StringList(["a", "b"])
    cell.set()
    assert cell.get() == []
    assert str(cell) == "[]"


def test_list_set_is_atomic():
    cell = IntList([1, 2])
    with pytest.raises(ConversionError) as excinfo:
        cell.set("3", "oops", "5")
    assert excinfo.value.token == "oops"
    assert cell.get() == [1, 2]


def test_list_initial_value_is_copied():
    initial = [1, 2]
    cell = IntList(initial)
    cell.set("3")
    assert initial == [1, 2]


def test_bound_cell_writes_through():
    holder = Holder()
    cell = Int.bind(holder, "count")
    assert cell.bound
    assert cell.get() == 7
    cell.set("12")
    assert holder.count == 12
    holder.count = 3
    assert cell.get() == 3
    assert str(cell) == "3"


def test_bound_cell_missing_attribute_gets_zero():
    holder = Holder()
    cell = FloatList.bind(holder, "weights")
    assert holder.weights == []
    cell.set("0.25")
    assert holder.weights == [0.25]


def test_target_and_attr_required_together():
    with pytest.raises(TypeError):
        Int(target=Holder())


@pytest.mark.parametrize(
    "attr, annotation, kind",
    [
        ("count", int, Int),
        ("ratio", float, Float),
        ("name", str, String),
        ("debug", bool, Bool),
        ("ids", list[int], IntList),
        ("count", None, Int),
        ("debug", None, Bool),
        ("ids", None, IntList),
    ],
)
def test_new_value_picks_kind(attr, annotation, kind):
    holder = Holder()
    cell = new_value(holder, attr, annotation)
    assert type(cell) is kind
    assert cell.get() == getattr(holder, attr)


def test_new_value_unsupported_type():
    holder = Holder()
    holder.mapping = {"a": 1}
    with pytest.raises(TypeError) as excinfo:
        new_value(holder, "mapping")
    assert "unsupported type" in str(excinfo.value)

    with pytest.raises(TypeError):
        new_value(holder, "ids", list[dict])

    holder.empty = []
    with pytest.raises(TypeError):
        new_value(holder, "empty")


class Upper(Value[str]):
    type_name = "upper"

    def __init__(self):
        self.text = ""

    def set(self, *tokens: str) -> None:
        if tokens:
            self.text = tokens[0].upper()

    def get(self) -> str:
        return self.text

    def __str__(self) -> str:
        return self.text


class DuckValue:
    def __init__(self):
        self.seen = []

    def set(self, *tokens):
        self.seen = list(tokens)

    def get(self):
        return self.seen

    def __str__(self):
        return ",".join(self.seen)


def test_new_value_returns_user_defined_values():
    holder = Holder()
    holder.shout = Upper()
    holder.duck = DuckValue()
    assert new_value(holder, "shout") is holder.shout
    assert new_value(holder, "duck", list[int]) is holder.duck


def test_repr():
    assert repr(Int(3)) == "Int(3)"
    assert repr(StringList(["a"])) == "StringList(['a'])"
