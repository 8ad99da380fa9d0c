"""Character classification and integer/text conversion helpers."""

from __future__ import annotations

_WHITESPACE = frozenset(" \t\n\v\f\r")
_DIGITS = "0123456789"


def _code(char: str | int) -> int:
    """Return the code point of a one-character string, or the integer itself."""
    if isinstance(char, int):
        return char
    if len(char) != 1:
        raise ValueError(f"expected a single character, got {char!r}")
    return ord(char)


def atoi(text: str) -> int:
    """Parse a leading decimal integer, skipping whitespace and one sign.

    Parsing stops at the first non-digit; text without digits yields 0.
    """
    position = 0
    length = len(text)
    while position < length and text[position] in _WHITESPACE:
        position += 1
    sign = 1
    if position < length and text[position] in "+-":
        if text[position] == "-":
            sign = -1
        position += 1
    result = 0
    while position < length and text[position] in _DIGITS:
        result = result * 10 + _DIGITS.index(text[position])
        position += 1
    return sign * result


def itoa(number: int) -> str:
    """Return the decimal representation of ``number``."""
    return str(number)


def intlen(number: int) -> int:
    """Return the number of characters ``number`` takes in decimal, sign included."""
    return len(str(number))


def is_alpha(char: str | int) -> bool:
    """True for an ASCII letter."""
    code = _code(char)
    return ord("A") <= code <= ord("Z") or ord("a") <= code <= ord("z")


def is_digit(char: str | int) -> bool:
    """True for an ASCII decimal digit."""
    return ord("0") <= _code(char) <= ord("9")


def is_alnum(char: str | int) -> bool:
    """True for an ASCII letter or digit."""
    return is_alpha(char) or is_digit(char)


def is_ascii(char: str | int) -> bool:
    """True for a code point in the 7-bit ASCII range."""
    return 0 <= _code(char) <= 127


def is_print(char: str | int) -> bool:
    """True for a printable ASCII character (space through tilde)."""
    return 32 <= _code(char) <= 126


def to_lower(char: str | int) -> str | int:
    """Lower-case an ASCII upper-case letter; anything else is returned unchanged."""
    code = _code(char)
    if ord("A") <= code <= ord("Z"):
        code += 32
    return code if isinstance(char, int) else chr(code)


def to_upper(char: str | int) -> str | int:
    """Upper-case an ASCII lower-case letter; anything else is returned unchanged."""
    code = _code(char)
    if ord("a") <= code <= ord("z"):
        code -= 32
    return code if isinstance(char, int) else chr(code)