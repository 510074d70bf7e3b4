# flagparse — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Builds a `FlagSet` from a dataclass instance whose fields carry flag tags.

Each field tagged through `flag_field()` (or with `TAG` in its metadata) becomes a
flag bound to that field of the instance, so parsing writes straight into the
dataclass. Untagged fields and fields whose name starts with `_` are ignored.

Example:
    @dataclass
    class Config:
        count: int = flag_field("positional,usage=Number of greetings", default=0)
        name: str = flag_field("name=name:n,usage=Who to greet", default="anon")
        verbose: bool = flag_field("switch", default=False)

    config = Config()
    flag_set = flag_set_from(config)
    flag_set.parse_args(["3", "-n", "alice"])
    # config == Config(count=3, name="alice", verbose=False)

The field type picks the value kind (`bool`, `str`, `int`, `float` or a list of
one of those). A field whose value is already a value cell is used as-is.
"""
from __future__ import annotations

from dataclasses import Field, field, fields, is_dataclass
from typing import Any, get_type_hints

from flagparse.exceptions import DecodeError, FlagparseError
from flagparse.flag import Flag
from flagparse.flag_set import FlagSet
from flagparse.logger import logger
from flagparse.tags import parse_tag
from flagparse.value import new_value

TAG = "flagparse"


def flag_field(tag: str = "", **kwargs: Any) -> Any:
    """
    Declare a dataclass field that becomes a flag.

    Accepts the same keyword arguments as `dataclasses.field`.
    """
    metadata = dict(kwargs.pop("metadata", None) or {})
    metadata[TAG] = tag
    return field(metadata=metadata, **kwargs)


def default_name(field_name: str) -> str:
    return field_name.lower().replace("_", "-")


def option_name(name: str, prefix: str) -> str:
    """Prefix an optional flag name unless it already carries the prefix."""
    if name.startswith(prefix):
        return name
    if prefix == "-" and len(name) > 1:
        return f"--{name}"
    return f"{prefix}{name}"


def _flag_from_field(
    instance: Any, dataclass_field: Field, annotation: Any, prefix: str
) -> tuple[Flag, list[str]]:
    try:
        value = new_value(instance, dataclass_field.name, annotation)
    except TypeError as error:
        raise DecodeError(str(error)) from error

    tag = parse_tag(dataclass_field.metadata[TAG])
    flag = Flag(
        value,
        positional=tag.positional,
        usage=tag.usage,
        nargs=tag.effective_nargs,
    )
    names = tag.names or [default_name(dataclass_field.name)]
    if not tag.positional:
        names = [option_name(name, prefix) for name in names]
    return flag, names


def flag_set_from(instance: Any, **flag_set_kwargs: Any) -> FlagSet:
    """
    Create a `FlagSet` whose flags are bound to the tagged fields of `instance`.

    Args:
        instance: A dataclass instance. Parsing writes into its fields.
        **flag_set_kwargs: Passed to `FlagSet`.

    Raises:
        DecodeError: If `instance` is not a dataclass instance, a tag is malformed,
            a field type has no value kind, or a flag cannot be registered.
    """
    if instance is None or not is_dataclass(instance) or isinstance(instance, type):
        raise DecodeError("source must be a dataclass instance")
    try:
        hints = get_type_hints(type(instance))
    except (NameError, TypeError) as error:
        raise DecodeError(
            f"cannot resolve field types of {type(instance).__name__}: {error}"
        ) from error

    flag_set = FlagSet(**flag_set_kwargs)
    for dataclass_field in fields(instance):
        if TAG not in dataclass_field.metadata:
            continue
        if dataclass_field.name.startswith("_"):
            logger.debug("Skipping private field '%s'.", dataclass_field.name)
            continue
        try:
            flag, names = _flag_from_field(
                instance,
                dataclass_field,
                hints.get(dataclass_field.name),
                flag_set.option_prefix,
            )
            flag_set.add(flag, *names)
        except FlagparseError as error:
            raise DecodeError(
                f"error while creating flag from field '{dataclass_field.name}': {error}"
            ) from error
        logger.debug(
            "Created %s flag %s from field '%s'.",
            "positional" if flag.positional else "optional",
            names,
            dataclass_field.name,
        )
    return flag_set


def parse_dataclass(
    instance: Any, args: list[str] | None = None, **flag_set_kwargs: Any
) -> FlagSet:
    """
    Decode `instance` into a `FlagSet` and run the command line wrapper on it.

    Returns the flag set so callers can render usage later.
    """
    flag_set = flag_set_from(instance, **flag_set_kwargs)
    flag_set.parse(args)
    return flag_set
