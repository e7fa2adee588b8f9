"""String helpers: integer parsing and formatting, splitting, trimming and searching.

Positions are returned as indices into the given string, and ``None`` stands
for "not found". Comparisons are done on character codes, and the end of a
string counts as the code 0.
"""

from __future__ import annotations

from itertools import zip_longest
from typing import List, Optional, Union

_WHITESPACE = frozenset(" \t\n\v\f\r")
_INT_BITS = 32


def _as_char(char: Union[str, int]) -> str:
    """Return *char* as a one-character string; integer codes are converted."""
    if isinstance(char, bool):
        raise TypeError("expected a character or an integer code, not bool")
    if isinstance(char, int):
        return chr(char)
    if isinstance(char, str):
        if len(char) != 1:
            raise ValueError(f"expected a single character, got {len(char)}")
        return char
    raise TypeError(f"expected a character or an integer code, not {type(char).__name__}")


def _require_non_negative(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")


def _wrap_int(value: int) -> int:
    """Reduce *value* to a signed 32-bit integer, as a C int would hold it."""
    modulus = 1 << _INT_BITS
    value %= modulus
    if value >= modulus >> 1:
        value -= modulus
    return value


def atoi(text: str) -> int:
    """Parse the leading integer of *text*, ignoring anything after it.

    Leading whitespace is skipped and one optional sign is accepted. Text
    without digits gives 0; no error is ever raised for bad input. The result
    is kept within the range of a signed 32-bit integer.
    """
    rest = text.lstrip("".join(_WHITESPACE))
    negative = False
    if rest[:1] in ("-", "+"):
        negative = rest[0] == "-"
        rest = rest[1:]
    digits = []
    for char in rest:
        if not "0" <= char <= "9":
            break
        digits.append(char)
    value = int("".join(digits)) if digits else 0
    return _wrap_int(-value if negative else value)


def itoa(number: int) -> str:
    """Return the decimal representation of *number*."""
    if isinstance(number, bool) or not isinstance(number, int):
        raise TypeError(f"expected an integer, not {type(number).__name__}")
    return str(number)


def split(text: str, sep: Union[str, int]) -> List[str]:
    """Split *text* on the character *sep*, dropping empty pieces."""
    separator = _as_char(sep)
    return [piece for piece in text.split(separator) if piece]


def strtrim(text: str, charset: str) -> str:
    """Remove every character in *charset* from both ends of *text*."""
    if not charset:
        return text
    return text.strip(charset)


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Find *needle* lying wholly within the first *length* characters of *haystack*.

    Returns the index of the first such occurrence, 0 for an empty needle,
    or ``None`` when there is none.
    """
    _require_non_negative("length", length)
    if not needle:
        return 0
    index = haystack.find(needle, 0, length)
    return None if index < 0 else index


def strncmp(first: str, second: str, n: int) -> int:
    """Compare at most *n* characters of two strings.

    Returns the difference of the codes at the first position where they
    differ, or 0 when they match up to *n* characters or to their end.
    """
    _require_non_negative("n", n)
    for a, b in zip_longest(first[:n], second[:n], fillvalue="\0"):
        if a != b:
            return ord(a) - ord(b)
        if a == "\0":
            return 0
    return 0


def substr(text: str, start: int, length: int) -> str:
    """Return at most *length* characters of *text* beginning at *start*.

    A start at or beyond the end of *text* gives an empty string.
    """
    _require_non_negative("start", start)
    _require_non_negative("length", length)
    if start >= len(text):
        return ""
    return text[start:start + length]


def strchr(text: str, char: Union[str, int]) -> Optional[int]:
    """Index of the first *char* in *text*, or ``None``.

    Searching for the NUL character finds the end of the string.
    """
    target = _as_char(char)
    if target == "\0":
        return len(text)
    index = text.find(target)
    return None if index < 0 else index


def strrchr(text: str, char: Union[str, int]) -> Optional[int]:
    """Index of the last *char* in *text*, or ``None``.

    Searching for the NUL character finds the end of the string.
    """
    target = _as_char(char)
    if target == "\0":
        return len(text)
    index = text.rfind(target)
    return None if index < 0 else index