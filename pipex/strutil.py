"""String helpers for command parsing and environment lookup."""

from __future__ import annotations

from itertools import islice, zip_longest

_INT_BITS = 32
_INT_MIN = -(1 << (_INT_BITS - 1))
_INT_MAX = (1 << (_INT_BITS - 1)) - 1
_WHITESPACE = frozenset(" \t\n\v\f\r")


def _wrap_int(value: int) -> int:
    """Wrap an integer into the signed 32-bit range."""
    value &= (1 << _INT_BITS) - 1
    if value > _INT_MAX:
        value -= 1 << _INT_BITS
    return value


def atoi(text: str) -> int:
    """Parse a leading decimal integer the way C ``atoi`` does.

    Leading whitespace is skipped, a single ``+`` or ``-`` is accepted, and
    parsing stops at the first non-digit. Text without digits gives 0.
    The result wraps into the signed 32-bit range.
    """
    pos = 0
    length = len(text)
    while pos < length and text[pos] in _WHITESPACE:
        pos += 1
    sign = 1
    if pos < length and text[pos] in "+-":
        if text[pos] == "-":
            sign = -1
        pos += 1
    start = pos
    while pos < length and "0" <= text[pos] <= "9":
        pos += 1
    digits = text[start:pos]
    value = int(digits) if digits else 0
    return _wrap_int(sign * value)


def split(text: str, sep: str) -> list[str]:
    """Split ``text`` on the single character ``sep``, dropping empty fields."""
    if len(sep) != 1:
        raise ValueError("separator must be a single character")
    return [part for part in text.split(sep) if part]


def strtrim(text: str, charset: str) -> str:
    """Remove every leading and trailing character found in ``charset``."""
    if not charset:
        return text
    return text.strip(charset)


def substr(text: str, start: int, length: int) -> str:
    """Return up to ``length`` characters of ``text`` starting at ``start``.

    A start past the end of the text gives an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start > len(text):
        return ""
    return text[start:start + length]


def strnstr(haystack: str, needle: str, length: int) -> int | None:
    """Find ``needle`` wholly inside the first ``length`` characters.

    Returns the index of the first match, 0 for an empty needle, or None
    when there is no match.
    """
    if length < 0:
        raise ValueError("length must not be negative")
    if not needle:
        return 0
    index = haystack.find(needle, 0, length)
    return None if index < 0 else index


def itoa(n: int) -> str:
    """Format a signed 32-bit integer in decimal."""
    if not _INT_MIN <= n <= _INT_MAX:
        raise OverflowError(f"{n} does not fit in a signed 32-bit integer")
    return str(n)


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters, returning the first difference.

    The shorter string is treated as ending in a NUL character, so the
    result is negative, zero or positive like C ``strncmp``.
    """
    if n < 0:
        raise ValueError("n must not be negative")
    pairs = zip_longest(s1, s2, fillvalue="\0")
    for a, b in islice(pairs, n):
        if a != b:
            return ord(a) - ord(b)
    return 0