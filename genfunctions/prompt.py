"""Typed, validated reading of a single line of user input."""

from __future__ import annotations

import enum
import math
import re
import struct
import sys
from typing import TextIO

from genfunctions.chararray import STRING_SIZE

INT_MAX = 2**31 - 1
FLT_MAX = struct.unpack("<f", b"\xff\xff\x7f\x7f")[0]
DBL_MAX = sys.float_info.max

_WS = " \t\n\v\f\r"

_INT_RE = re.compile(r"[ \t\n\v\f\r]*[+-]?\d+")
_DEC_RE = re.compile(
    r"[+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan(?:\([0-9A-Za-z_]*\))?)",
    re.IGNORECASE,
)
_HEX_RE = re.compile(
    r"[+-]?0[xX](?:[0-9a-fA-F]+\.?[0-9a-fA-F]*|\.[0-9a-fA-F]+)(?:[pP][+-]?\d+)?"
)


class InputType(enum.Enum):
    """Kinds of value that can be read."""

    INT = "int"
    STR = "str"
    FLOAT = "float"
    DOUBLE = "double"


class InputError(ValueError):
    """Base class for rejected input; ``code`` is the numeric error code."""

    code = 0


class NumberRangeError(InputError):
    """The number is malformed, negative or out of range."""

    code = 2


class EmptyInputError(InputError):
    """A string was expected but the line was empty."""

    code = 3


class InvalidInputTypeError(InputError):
    """The requested kind of input is not supported."""

    code = 4


def _parse_real(text: str) -> float:
    if text == "":
        return 0.0
    body = text.lstrip(_WS)
    if _HEX_RE.fullmatch(body):
        try:
            return float.fromhex(body)
        except OverflowError:
            return -math.inf if body.startswith("-") else math.inf
    if _DEC_RE.fullmatch(body):
        lowered = body.lower()
        if "nan" in lowered:
            return -math.nan if lowered.startswith("-") else math.nan
        return float(body)
    raise NumberRangeError(f"not a number: {text!r}")


def _to_single(value: float) -> float:
    try:
        return struct.unpack("<f", struct.pack("<f", value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


def parse_input(text: str, kind: InputType | str) -> int | float | str:
    """Convert one line of input to the requested kind, or raise an InputError."""
    try:
        kind = InputType(kind)
    except ValueError:
        raise InvalidInputTypeError(f"unsupported input type: {kind!r}") from None

    if kind is InputType.INT:
        if text == "":
            return 0
        if not _INT_RE.fullmatch(text):
            raise NumberRangeError(f"not an integer: {text!r}")
        value = int(text.lstrip(_WS))
        if value < 0 or value > INT_MAX:
            raise NumberRangeError(f"integer out of range: {text!r}")
        return value

    if kind is InputType.DOUBLE:
        value = _parse_real(text)
        if value < 0.0 or value > DBL_MAX:
            raise NumberRangeError(f"number out of range: {text!r}")
        return value

    if kind is InputType.FLOAT:
        value = _to_single(_parse_real(text))
        if value < 0.0 or value > FLT_MAX:
            raise NumberRangeError(f"number out of range: {text!r}")
        return value

    if text == "":
        raise EmptyInputError("empty input")
    return text


def read_input(
    message: str,
    kind: InputType | str,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
) -> int | float | str:
    """Show ``message``, read one line and return it parsed as ``kind``.

    At most ``STRING_SIZE - 1`` characters are read; the line ends at the
    first newline. Raises EOFError when no input is left.
    """
    stdin = sys.stdin if stdin is None else stdin
    stdout = sys.stdout if stdout is None else stdout
    stdout.write(message)
    stdout.flush()
    line = stdin.readline(STRING_SIZE - 1)
    if line == "":
        raise EOFError("no input available")
    return parse_input(line.split("\n", 1)[0], kind)