"""Classify a literal and show it as char, int, float and double."""

from __future__ import annotations

import math
import re
import struct
import sys
from enum import Enum, auto

INT_MIN = -2147483648
INT_MAX = 2147483647
FLT_MAX = (2 - 2**-23) * 2.0**127

_SPACE = " \t\n\v\f\r"
_SPECIALS = frozenset({"-inff", "+inff", "nanf", "-inf", "+inf", "nan"})
_INTEGER = re.compile(r"[+-]?[0-9]+")
_NUMBER = re.compile(
    r"""
    (?P<sign>[+-]?)
    (?:
        (?P<hex>0x(?:[0-9a-f]+\.?[0-9a-f]*|\.[0-9a-f]+)(?:p[+-]?[0-9]+)?)
      | (?P<dec>(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:e[+-]?[0-9]+)?)
      | (?P<inf>inf(?:inity)?)
      | (?P<nan>nan(?:\([0-9a-z_]*\))?)
    )
    """,
    re.VERBOSE | re.IGNORECASE,
)

NON_DISPLAYABLE = "Non displayable"
IMPOSSIBLE = "Impossible"


class ScalarType(Enum):
    """The kind of literal a string holds."""

    CHARACTER = auto()
    INTEGER = auto()
    FLOAT = auto()
    DOUBLE = auto()
    OTHER = auto()
    SPECIAL = auto()


def _skip_space(text: str) -> int:
    return len(text) - len(text.lstrip(_SPACE))


def _parse_prefix(text: str) -> tuple[float, int] | None:
    """Read the longest leading floating literal; return its value and end."""
    match = _NUMBER.match(text, _skip_space(text))
    if match is None:
        return None
    if match.group("hex"):
        try:
            value = float.fromhex(match.group("hex"))
        except OverflowError:
            value = math.inf
    elif match.group("dec"):
        value = float(match.group("dec"))
    elif match.group("inf"):
        value = math.inf
    else:
        value = math.nan
    if match.group("sign") == "-":
        value = math.copysign(value, -1.0)
    return value, match.end()


def _to_float32(value: float) -> float:
    try:
        return struct.unpack("f", struct.pack("f", value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


def _is_char(text: str) -> bool:
    return len(text) == 1 and text not in "0123456789"


def _is_integer(text: str) -> bool:
    match = _INTEGER.match(text, _skip_space(text))
    if match is None or match.end() != len(text):
        return False
    return INT_MIN <= int(match.group()) <= INT_MAX


def _is_float(text: str) -> bool:
    parsed = _parse_prefix(text)
    return parsed is not None and text[parsed[1]:] == "f"


def _is_double(text: str) -> bool:
    parsed = _parse_prefix(text)
    return parsed is not None and parsed[1] == len(text)


def classify(text: str) -> ScalarType:
    """Return the kind of literal ``text`` is."""
    if text in _SPECIALS:
        return ScalarType.SPECIAL
    if _is_char(text):
        return ScalarType.CHARACTER
    if _is_integer(text):
        return ScalarType.INTEGER
    if _is_float(text):
        return ScalarType.FLOAT
    if _is_double(text):
        return ScalarType.DOUBLE
    return ScalarType.OTHER


def precision_of(text: str) -> int:
    """Digits to show: those after the first '.', up to 'f', at most 6."""
    _, dot, rest = text.partition(".")
    if not dot:
        return 1
    return min(len(rest.split("f", 1)[0]), 6)


def _fixed(value: float, precision: int) -> str:
    if math.isnan(value):
        return "-nan" if math.copysign(1.0, value) < 0 else "nan"
    return f"{value:.{precision}f}"


def _char_line(value: float) -> str:
    if 32 <= value <= 126:
        return f"char: '{chr(int(value))}'"
    return f"char: {NON_DISPLAYABLE}"


def _int_line(value: float, upper: float) -> str:
    if not INT_MIN <= value <= upper:
        return f"int: {NON_DISPLAYABLE}"
    number = int(value)
    if number > INT_MAX:
        number = INT_MIN
    return f"int: {number}"


def _from_char(text: str) -> list[str]:
    code = ord(text[0])
    return [
        f"char: '{text[0]}'",
        f"int: {code}",
        f"float: {_fixed(float(code), 1)}f",
        f"double: {_fixed(float(code), 1)}",
    ]


def _from_integer(text: str) -> list[str]:
    number = int(text.strip(_SPACE))
    return [
        _char_line(number),
        f"int: {number}",
        f"float: {_fixed(_to_float32(number), 1)}f",
        f"double: {_fixed(float(number), 1)}",
    ]


def _from_float(text: str) -> list[str]:
    value = _to_float32(_parse_prefix(text)[0])
    precision = precision_of(text)
    return [
        _char_line(value),
        _int_line(value, _to_float32(INT_MAX)),
        f"float: {_fixed(value, precision)}f",
        f"double: {_fixed(value, precision)}",
    ]


def _from_double(text: str) -> list[str]:
    value = _parse_prefix(text)[0]
    precision = precision_of(text)
    if -FLT_MAX <= value <= FLT_MAX:
        float_line = f"float: {_fixed(_to_float32(value), precision)}f"
    else:
        float_line = f"float: {NON_DISPLAYABLE}"
    return [
        _char_line(value),
        _int_line(value, float(INT_MAX)),
        float_line,
        f"double: {_fixed(value, precision)}",
    ]


def _from_special(text: str) -> list[str]:
    pairs = {"-inff": "-inf", "+inff": "+inf", "nanf": "nan"}
    if text in pairs:
        float_part, double_part = text, pairs[text]
    else:
        float_part, double_part = IMPOSSIBLE, text
    return [
        f"char: {IMPOSSIBLE}",
        f"int: {IMPOSSIBLE}",
        f"float: {float_part}",
        f"double: {double_part}",
    ]


def convert(text: str) -> list[str]:
    """Return the four output lines (char, int, float, double) for ``text``."""
    match classify(text):
        case ScalarType.SPECIAL:
            return _from_special(text)
        case ScalarType.CHARACTER:
            return _from_char(text)
        case ScalarType.INTEGER:
            return _from_integer(text)
        case ScalarType.FLOAT:
            return _from_float(text)
        case ScalarType.DOUBLE:
            return _from_double(text)
        case _:
            return [f"{label}: {NON_DISPLAYABLE}" for label in ("char", "int", "float", "double")]


def main(argv: list[str] | None = None) -> int:
    """Convert the single command-line argument and print the result."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        print("Error")
        return 1
    for line in convert(args[0]):
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())