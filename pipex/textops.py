"""String helpers used by the pipeline runner: splitting, comparing, trimming."""

from __future__ import annotations

_SPACE = " \t\n\v\f\r"
_DIGITS = "0123456789"


def _check_separator(sep: str) -> None:
    if len(sep) != 1:
        raise ValueError("separator must be a single character")


def split_words(text: str, sep: str) -> list[str]:
    """Split *text* on the character *sep*, dropping empty pieces."""
    _check_separator(sep)
    return [word for word in text.split(sep) if word]


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most *n* characters of two strings.

    The result is the difference of the code points at the first position
    where the strings differ or one of them ends, and 0 if the first *n*
    characters are equal.
    """
    if n < 0:
        raise ValueError("n must not be negative")
    for pos in range(n):
        c1 = s1[pos] if pos < len(s1) else "\0"
        c2 = s2[pos] if pos < len(s2) else "\0"
        if c1 != c2 or c1 == "\0" or c2 == "\0":
            return ord(c1) - ord(c2)
    return 0


def atoi(text: str) -> int:
    """Read a leading decimal integer, after optional white space and sign.

    Characters after the digits are ignored; text without digits gives 0.
    """
    stripped = text.lstrip(_SPACE)
    sign = 1
    if stripped[:1] in ("+", "-"):
        if stripped[0] == "-":
            sign = -1
        stripped = stripped[1:]
    result = 0
    for char in stripped:
        if char not in _DIGITS:
            break
        result = result * 10 + _DIGITS.index(char)
    return sign * result


def itoa(n: int) -> str:
    """Return the decimal representation of *n*."""
    if not isinstance(n, int) or isinstance(n, bool):
        raise TypeError("itoa expects an int")
    return str(n)


def trim(text: str, chars: str) -> str:
    """Remove every character of *chars* from both ends of *text*."""
    return text.strip(chars)


def substr(text: str, start: int, length: int) -> str:
    """Return at most *length* characters of *text* beginning at *start*.

    A start past the end of the text gives an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    return text[start:start + length]


def strnstr(haystack: str, needle: str, length: int) -> int | None:
    """Find *needle* within the first *length* characters of *haystack*.

    Return the index of the first match, or None. An empty needle matches
    at index 0.
    """
    if length < 0:
        raise ValueError("length must not be negative")
    if not needle:
        return 0
    index = haystack[:length].find(needle)
    return None if index < 0 else index