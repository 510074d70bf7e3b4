# flagparse — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Token conversion and environment helpers for flagparse.

Functions:
- parse_bool / parse_int / parse_float: Strict conversion of a single command line
  token, raising `ConversionError` with the offending token, the target type name
  and the reason.
- format_float: Shortest round-tripping rendering of a float.
- get_program_invocation: Program name shown in usage text.
- setup_logging: Rich or JSON logging for applications built on flagparse.
"""
from __future__ import annotations

import logging
import math
import os
import re
import shutil
import sys

import pythonjsonlogger.json
from rich.logging import RichHandler

from flagparse.exceptions import ConversionError

TRUE_TOKENS = frozenset({"1", "t", "T", "TRUE", "true", "True"})
FALSE_TOKENS = frozenset({"0", "f", "F", "FALSE", "false", "False"})

INT_LITERAL = re.compile(
    r"[+-]?(?:0[xX](?:_?[0-9a-fA-F])+"
    r"|0[oO](?:_?[0-7])+"
    r"|0[bB](?:_?[01])+"
    r"|(?P<octal>0(?:_?[0-7])+)"
    r"|0"
    r"|[1-9](?:_?[0-9])*)"
)
FLOAT_LITERAL = re.compile(
    r"[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf(?:inity)?)|nan",
    re.IGNORECASE | re.ASCII,
)


def parse_bool(token: str) -> bool:
    """
    Convert a token to a boolean.

    Accepts `1`, `t`, `T`, `TRUE`, `true`, `True` and their false counterparts
    `0`, `f`, `F`, `FALSE`, `false`, `False`. Anything else is rejected.

    Raises:
        ConversionError: If the token is not a recognized boolean spelling.
    """
    if token in TRUE_TOKENS:
        return True
    if token in FALSE_TOKENS:
        return False
    raise ConversionError(token, "bool", "invalid syntax")


def parse_int(token: str) -> int:
    """
    Convert a token to an integer.

    Accepted spellings are ASCII only: an optional sign followed by a decimal
    number, a base-prefixed number (`0x`, `0o`, `0b`) or a legacy octal number
    with a leading zero (`0755`). Underscores may separate digits. The result must
    fit in the platform's native signed integer.

    Raises:
        ConversionError: On invalid syntax or when the value is out of range.
    """
    match = INT_LITERAL.fullmatch(token)
    if match is None:
        raise ConversionError(token, "int", "invalid syntax")
    digits = token.replace("_", "")
    value = int(digits, 8) if match.group("octal") else int(digits, 0)
    if not -sys.maxsize - 1 <= value <= sys.maxsize:
        raise ConversionError(token, "int", "value out of range")
    return value


def parse_float(token: str) -> float:
    """
    Convert a token to a float.

    ASCII decimal and scientific notation are accepted, as are the `inf`,
    `infinity` and `nan` spellings in any case. A finite literal too large to
    represent is rejected.

    Raises:
        ConversionError: On invalid syntax or when the value is out of range.
    """
    if FLOAT_LITERAL.fullmatch(token) is None:
        raise ConversionError(token, "float", "invalid syntax")
    value = float(token)
    if math.isinf(value) and "inf" not in token.lower():
        raise ConversionError(token, "float", "value out of range")
    return value


def format_float(value: float) -> str:
    """Render a float in its shortest form, dropping a trailing `.0`."""
    text = repr(value)
    if text.endswith(".0"):
        return text[:-2]
    return text


def get_program_invocation() -> str:
    """Returns the recommended program invocation prefix."""
    script = sys.argv[0]
    program = shutil.which(script)
    if program:
        return os.path.basename(program)

    executable = sys.executable
    if "python" in executable:
        return f"python {script}"
    return script


def running_in_container() -> bool:
    try:
        with open("/proc/1/cgroup", "r", encoding="UTF-8") as f:
            content = f.read()
            return (
                "docker" in content
                or "kubepods" in content
                or "containerd" in content
                or "podman" in content
            )
    except OSError:
        return False


def setup_logging(
    mode: str | None = None,
    log_filename: str | None = None,
    json_log_to_file: bool = False,
    file_log_level: int = logging.DEBUG,
    console_log_level: int = logging.WARNING,
) -> None:
    """
    Configure logging for applications built on flagparse.

    Sets up a console handler, either Rich (human readable) or JSON (machine
    readable), and an optional file handler.

    Args:
        mode (str | None):
            Logging output mode. Can be:
                - "cli": human-readable Rich console logs (default outside containers)
                - "json": machine-readable JSON logs (default inside containers)
            If not provided, the `FLAGPARSE_LOG_MODE` environment variable is used,
            falling back to container detection.
        log_filename (str | None):
            Path of a log file. No file handler is installed when omitted.
        json_log_to_file (bool):
            Whether to format file logs as JSON instead of plain text.
        file_log_level (int):
            Logging level for file output. Defaults to `logging.DEBUG`.
        console_log_level (int):
            Logging level for console output. Defaults to `logging.WARNING`.

    Raises:
        ValueError: If an invalid logging `mode` is passed.
    """
    if not mode:
        mode = os.getenv("FLAGPARSE_LOG_MODE") or (
            "json" if running_in_container() else "cli"
        )

    root = logging.getLogger()
    root.setLevel(logging.DEBUG)
    if root.hasHandlers():
        root.handlers.clear()

    if mode == "cli":
        console_handler: RichHandler | logging.StreamHandler = RichHandler(
            rich_tracebacks=True,
            show_time=True,
            show_level=True,
            show_path=False,
            markup=True,
            log_time_format="[%Y-%m-%d %H:%M:%S]",
        )
    elif mode == "json":
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(
            pythonjsonlogger.json.JsonFormatter(
                "%(asctime)s %(name)s %(levelname)s %(message)s"
            )
        )
    else:
        raise ValueError(f"Invalid log mode: {mode}")

    console_handler.setLevel(console_log_level)
    root.addHandler(console_handler)

    if log_filename:
        file_handler = logging.FileHandler(log_filename, "a", "UTF-8")
        file_handler.setLevel(file_log_level)
        if json_log_to_file:
            file_handler.setFormatter(
                pythonjsonlogger.json.JsonFormatter(
                    "%(asctime)s %(name)s %(levelname)s %(message)s"
                )
            )
        else:
            file_handler.setFormatter(
                logging.Formatter(
                    "%(asctime)s [%(name)s] [%(levelname)s] %(message)s",
                    datefmt="%Y-%m-%d %H:%M:%S",
                )
            )
        root.addHandler(file_handler)

    logger = logging.getLogger("flagparse")
    logger.propagate = True
    logger.debug("Logging initialized in '%s' mode.", mode)
