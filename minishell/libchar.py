"""ASCII character classification and case conversion.

Every function accepts either a one-character string or an integer
character code. Only the 7-bit ASCII ranges count, whatever the locale.
"""

from __future__ import annotations

from typing import Union

Char = Union[str, int]


def _code(char: Char) -> int:
    """Return the integer code of *char*, rejecting anything but one character."""
    if isinstance(char, bool):
        raise TypeError("expected a character or an integer code, not bool")
    if isinstance(char, int):
        return char
    if isinstance(char, str):
        if len(char) != 1:
            raise ValueError(f"expected a single character, got {len(char)}")
        return ord(char)
    raise TypeError(f"expected a character or an integer code, not {type(char).__name__}")


def _like(char: Char, code: int) -> Char:
    """Return *code* in the same form (str or int) that *char* was given in."""
    return chr(code) if isinstance(char, str) else code


def isalpha(char: Char) -> bool:
    """True for the ASCII letters A-Z and a-z."""
    code = _code(char)
    return 65 <= code <= 90 or 97 <= code <= 122


def isdigit(char: Char) -> bool:
    """True for the ASCII digits 0-9."""
    return 48 <= _code(char) <= 57


def isalnum(char: Char) -> bool:
    """True for an ASCII letter or digit."""
    return isalpha(char) or isdigit(char)


def isascii(char: Char) -> bool:
    """True for a code in the 7-bit ASCII range 0-127."""
    return 0 <= _code(char) < 128


def isprint(char: Char) -> bool:
    """True for printable ASCII, space included (32-126)."""
    return 32 <= _code(char) <= 126


def tolower(char: Char) -> Char:
    """Map A-Z to a-z; return anything else unchanged."""
    code = _code(char)
    if 65 <= code <= 90:
        return _like(char, code + 32)
    return char


def toupper(char: Char) -> Char:
    """Map a-z to A-Z; return anything else unchanged."""
    code = _code(char)
    if 97 <= code <= 122:
        return _like(char, code - 32)
    return char