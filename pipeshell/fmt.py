"""A small printf-style formatter covering %c %s %p %d %i %u %x %X and %%.

Integer conversions follow C's 32-bit ``int`` / ``unsigned int`` argument
handling: ``%d`` and ``%i`` wrap to a signed 32-bit value, ``%u``, ``%x`` and
``%X`` to an unsigned one.  An unknown conversion character produces no
output and consumes no argument.
"""

from __future__ import annotations

import sys
from typing import Any, Iterator, Optional, TextIO

_UINT_MASK = 0xFFFFFFFF
_INT_SIGN = 0x80000000
_LOWER_DIGITS = "0123456789abcdef"
_UPPER_DIGITS = "0123456789ABCDEF"


def _as_unsigned(value: int) -> int:
    return int(value) & _UINT_MASK


def _as_signed(value: int) -> int:
    unsigned = _as_unsigned(value)
    return unsigned - (1 << 32) if unsigned & _INT_SIGN else unsigned


def _hex(value: int, digits: str) -> str:
    if value == 0:
        return digits[0]
    out = []
    while value:
        value, remainder = divmod(value, 16)
        out.append(digits[remainder])
    return "".join(reversed(out))


def _char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c expects a single character, got {value!r}")
        return value
    return chr(int(value) & 0xFF)


def _pointer(value: Optional[int]) -> str:
    if not value:
        return "(nil)"
    return "0x" + _hex(int(value) & 0xFFFFFFFFFFFFFFFF, _LOWER_DIGITS)


def _convert(spec: str, args: Iterator[Any]) -> str:
    if spec == "%":
        return "%"
    if spec not in "cspdiuxX":
        return ""
    try:
        value = next(args)
    except StopIteration:
        raise TypeError(f"not enough arguments for %{spec}") from None
    if spec == "c":
        return _char(value)
    if spec == "s":
        return "(null)" if value is None else str(value)
    if spec == "p":
        return _pointer(value)
    if spec in "di":
        return str(_as_signed(value))
    if spec == "u":
        return str(_as_unsigned(value))
    if spec == "x":
        return _hex(_as_unsigned(value), _LOWER_DIGITS)
    return _hex(_as_unsigned(value), _UPPER_DIGITS)


def format_string(template: str, *args: Any) -> str:
    """Expand ``template`` with ``args`` and return the resulting text."""
    if template is None:
        raise TypeError("template must not be None")
    remaining = iter(args)
    pieces = []
    chars = iter(template)
    for char in chars:
        if char != "%":
            pieces.append(char)
            continue
        spec = next(chars, None)
        if spec is None:
            raise ValueError("template ends with a lone '%'")
        pieces.append(_convert(spec, remaining))
    return "".join(pieces)


def printf(template: str, *args: Any, stream: Optional[TextIO] = None) -> int:
    """Write the expanded ``template`` to ``stream`` (stdout by default).

    Returns the number of characters written.
    """
    text = format_string(template, *args)
    target = sys.stdout if stream is None else stream
    target.write(text)
    return len(text)