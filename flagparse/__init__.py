"""
flagparse

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from .decoder import TAG, flag_field, flag_set_from, parse_dataclass
from .exceptions import (
    ArityError,
    ConversionError,
    DecodeError,
    DuplicateFlagError,
    FlagparseError,
    MissingRequiredArgumentError,
    NotEnoughArgumentsError,
    ParseError,
    PositionalNArgsError,
    RegistrationError,
    UnknownFlagError,
    UnrecognizedArgumentError,
)
from .flag import Flag
from .flag_set import EXIT_ERROR, EXIT_HELP, FlagSet
from .logger import logger
from .protocols import ValueProtocol
from .signals import FlowSignal, HelpSignal
from .utils import setup_logging
from .value import (
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

__all__ = [
    "ArityError",
    "Bool",
    "BoolList",
    "ConversionError",
    "DecodeError",
    "DuplicateFlagError",
    "EXIT_ERROR",
    "EXIT_HELP",
    "Flag",
    "FlagSet",
    "FlagparseError",
    "Float",
    "FloatList",
    "FlowSignal",
    "HelpSignal",
    "Int",
    "IntList",
    "MissingRequiredArgumentError",
    "NotEnoughArgumentsError",
    "ParseError",
    "PositionalNArgsError",
    "RegistrationError",
    "String",
    "StringList",
    "TAG",
    "UnknownFlagError",
    "UnrecognizedArgumentError",
    "Value",
    "ValueProtocol",
    "flag_field",
    "flag_set_from",
    "logger",
    "new_value",
    "parse_dataclass",
    "setup_logging",
]
