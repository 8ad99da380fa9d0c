"""String helpers: splitting, trimming, slicing, comparison and searching.

Positions are returned as indexes into the given text, and ``None`` means
"not found".  Comparisons return the difference of the first differing code
points, where the end of a string counts as code point 0.
"""

from __future__ import annotations

from typing import List, Optional, Tuple

_NUL = "\0"


def _single_char(char: str) -> str:
    if len(char) != 1:
        raise ValueError(f"expected a single character, got {char!r}")
    return char


def _non_negative(value: int, name: str) -> int:
    if value < 0:
        raise ValueError(f"{name} must not be negative")
    return value


def _code_at(text: str, index: int) -> int:
    return ord(text[index]) if index < len(text) else 0


def split(text: str, separator: str) -> List[str]:
    """Split ``text`` on ``separator``, dropping empty pieces."""
    return [piece for piece in text.split(_single_char(separator)) if piece]


def strtrim(text: str, charset: str) -> str:
    """Remove every leading and trailing character that appears in ``charset``."""
    if not charset:
        return text
    return text.strip(charset)


def substr(text: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``text`` from ``start`` on.

    A start at or past the end yields an empty string.
    """
    _non_negative(start, "start")
    _non_negative(length, "length")
    if start >= len(text):
        return ""
    return text[start : start + length]


def strncmp(first: str, second: str, limit: int) -> int:
    """Compare at most ``limit`` characters.

    Returns 0 when they agree, otherwise the code point of ``first`` minus
    that of ``second`` at the first difference.
    """
    _non_negative(limit, "limit")
    for index in range(limit):
        left = _code_at(first, index)
        right = _code_at(second, index)
        if left != right:
            return left - right
        if left == 0:
            break
    return 0


def strcmp(first: str, second: str) -> int:
    """Compare two strings in full.

    Returns 0 when they are equal, otherwise the code point of ``second``
    minus that of ``first`` at the first difference; the sign is therefore
    positive when ``first`` sorts before ``second``.
    """
    index = 0
    while index < len(first) and index < len(second) and first[index] == second[index]:
        index += 1
    return _code_at(second, index) - _code_at(first, index)


def strnstr(haystack: str, needle: str, limit: int) -> Optional[int]:
    """Find ``needle`` wholly inside the first ``limit`` characters of ``haystack``.

    An empty needle is found at 0.
    """
    _non_negative(limit, "limit")
    if not needle:
        return 0
    found = haystack[:limit].find(needle)
    return None if found < 0 else found


def strchr(text: str, char: str) -> Optional[int]:
    """Return the index of the first ``char`` in ``text``.

    Searching for the NUL character finds the end of the text.
    """
    found = text.find(_single_char(char))
    if found >= 0:
        return found
    return len(text) if char == _NUL else None


def strrchr(text: str, char: str) -> Optional[int]:
    """Return the index of the last ``char`` in ``text``.

    Searching for the NUL character finds the end of the text.
    """
    if _single_char(char) == _NUL:
        return len(text)
    found = text.rfind(char)
    return None if found < 0 else found


def strlcpy(source: str, size: int) -> Tuple[str, int]:
    """Copy ``source`` into a buffer of ``size`` characters, terminator included.

    Returns the copied text (at most ``size - 1`` characters) and the full
    length of ``source``; a result shorter than that length means truncation.
    """
    _non_negative(size, "size")
    if size == 0:
        return "", len(source)
    return source[: size - 1], len(source)


def strlcat(destination: str, source: str, size: int) -> Tuple[str, int]:
    """Append ``source`` to ``destination`` within a buffer of ``size`` characters.

    Returns the resulting text and the length the full concatenation would
    need, counting ``destination`` as at most ``size`` characters long.
    """
    _non_negative(size, "size")
    dest_len = len(destination)
    result = destination
    if size > 0 and size - 1 >= dest_len:
        result = destination + source[: size - 1 - dest_len]
    return result, min(size, dest_len) + len(source)