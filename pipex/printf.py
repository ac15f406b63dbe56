"""A small printf supporting the conversions c, s, p, d, i, u, x, X and %."""

from __future__ import annotations

import sys
from typing import Any, Iterator

DECIMAL = "0123456789"
HEX_LOWER = "0123456789abcdef"
HEX_UPPER = "0123456789ABCDEF"

_UINT_RANGE = 1 << 32
_POINTER_RANGE = 1 << 64


def to_base(number: int, digits: str) -> str:
    """Write a non-negative *number* using the characters of *digits* as digits."""
    if number < 0:
        raise ValueError("number must not be negative")
    base = len(digits)
    if base < 2:
        raise ValueError("a base needs at least two digits")
    out = []
    while True:
        number, rest = divmod(number, base)
        out.append(digits[rest])
        if number == 0:
            break
    return "".join(reversed(out))


def _as_int(value: int) -> int:
    """Wrap a value to a signed 32-bit integer."""
    return (value + (1 << 31)) % _UINT_RANGE - (1 << 31)


def _as_char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError("%c expects a single character")
        return value
    return chr(value % 256)


def _as_pointer(value: Any) -> str:
    if not value:
        return "(nil)"
    return "0x" + to_base(value % _POINTER_RANGE, HEX_LOWER)


def _convert(spec: str, args: Iterator[Any]) -> str:
    def take() -> Any:
        try:
            return next(args)
        except StopIteration:
            raise ValueError(f"not enough arguments for %{spec}") from None

    if spec == "c":
        return _as_char(take())
    if spec == "s":
        value = take()
        return "(null)" if value is None else str(value)
    if spec == "p":
        return _as_pointer(take())
    if spec in ("d", "i"):
        value = _as_int(take())
        sign = "-" if value < 0 else ""
        return sign + to_base(abs(value), DECIMAL)
    if spec == "u":
        return to_base(take() % _UINT_RANGE, DECIMAL)
    if spec == "x":
        return to_base(take() % _UINT_RANGE, HEX_LOWER)
    if spec == "X":
        return to_base(take() % _UINT_RANGE, HEX_UPPER)
    if spec == "%":
        return "%"
    # Unknown conversions and a lone trailing '%' produce nothing.
    return ""


def format_string(fmt: str, *args: Any) -> str:
    """Return *fmt* with its conversions replaced by the given arguments."""
    values = iter(args)
    out = []
    chars = iter(fmt)
    for char in chars:
        if char == "%":
            out.append(_convert(next(chars, ""), values))
        else:
            out.append(char)
    return "".join(out)


def print_formatted(fmt: str, *args: Any) -> int:
    """Write the formatted text to standard output and return its length."""
    text = format_string(fmt, *args)
    sys.stdout.write(text)
    sys.stdout.flush()
    return len(text)