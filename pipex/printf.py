"""A small formatted printer supporting the conversions c, s, d, i, u, x, X, p and %."""

from __future__ import annotations

import sys
from collections.abc import Iterator
from typing import Any

_UINT_MASK = (1 << 32) - 1
_ULONG_MASK = (1 << 64) - 1
_INT_SIGN = 1 << 31


def _as_int(value: Any, spec: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"%{spec} requires an integer, got {type(value).__name__}")
    return value


def _signed32(value: int) -> int:
    value &= _UINT_MASK
    return value - (1 << 32) if value & _INT_SIGN else value


def _char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise TypeError("%c requires a single character")
        return value
    return chr(_as_int(value, "c") & 0xFF)


def _string(value: Any) -> str:
    if value is None:
        return "(null)"
    if not isinstance(value, str):
        raise TypeError(f"%s requires a string, got {type(value).__name__}")
    return value


def _pointer(value: Any) -> str:
    if value is None or value == 0:
        return "(nil)"
    address = value if isinstance(value, int) and not isinstance(value, bool) else id(value)
    return f"0x{address & _ULONG_MASK:x}"


def _convert(spec: str, args: Iterator[Any]) -> str:
    if spec == "%":
        return "%"
    if spec not in "csdiupxX":
        return ""
    try:
        value = next(args)
    except StopIteration:
        raise TypeError(f"not enough arguments for %{spec}") from None
    if spec == "c":
        return _char(value)
    if spec == "s":
        return _string(value)
    if spec == "p":
        return _pointer(value)
    number = _as_int(value, spec)
    if spec in "di":
        return str(_signed32(number))
    unsigned = number & _UINT_MASK
    if spec == "u":
        return str(unsigned)
    if spec == "x":
        return f"{unsigned:x}"
    return f"{unsigned:X}"


def _pieces(fmt: str, args: tuple[Any, ...]) -> Iterator[str]:
    arg_iter = iter(args)
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            yield ch
            continue
        spec = next(chars, None)
        if spec is None:
            return
        yield _convert(spec, arg_iter)


def render(fmt: str, *args: Any) -> str:
    """Format ``args`` according to ``fmt`` and return the text.

    Unknown conversions produce nothing and consume no argument; a lone
    trailing ``%`` is dropped. Extra arguments are ignored.
    """
    if fmt is None:
        raise TypeError("format must not be None")
    return "".join(_pieces(fmt, args))


def printf(fmt: str, *args: Any) -> int:
    """Write the formatted text to standard output and return its length."""
    text = render(fmt, *args)
    sys.stdout.write(text)
    return len(text)