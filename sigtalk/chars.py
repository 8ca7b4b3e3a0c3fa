"""Character classification, case mapping and integer/text conversion."""

from __future__ import annotations

from typing import Union

CharLike = Union[int, str]

_INT_BITS = 32
_INT_MOD = 1 << _INT_BITS
_INT_MIN = -(1 << (_INT_BITS - 1))
_INT_MAX = (1 << (_INT_BITS - 1)) - 1

_SPACE_CODES = frozenset({9, 10, 11, 12, 13, 32})


def _code(c: CharLike) -> int:
    """Return the integer code of a character given as an int or a one-char str."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected an int or a single character, got {type(c).__name__}")
    return c


def _wrap_int(value: int) -> int:
    """Wrap an integer into the signed 32-bit range."""
    value %= _INT_MOD
    return value - _INT_MOD if value > _INT_MAX else value


def is_alpha(c: CharLike) -> bool:
    """True for ASCII letters."""
    code = _code(c)
    return ord("a") <= code <= ord("z") or ord("A") <= code <= ord("Z")


def is_digit(c: CharLike) -> bool:
    """True for the ASCII decimal digits."""
    return ord("0") <= _code(c) <= ord("9")


def is_alnum(c: CharLike) -> bool:
    """True for ASCII letters and digits."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: CharLike) -> bool:
    """True for codes 0 through 127."""
    return 0 <= _code(c) <= 127


def is_print(c: CharLike) -> bool:
    """True for printable ASCII, space through tilde."""
    return 32 <= _code(c) <= 126


def _map_case(c: CharLike, low: str, high: str, delta: int) -> CharLike:
    code = _code(c)
    if ord(low) <= code <= ord(high):
        code += delta
    return chr(code) if isinstance(c, str) else code


def to_lower(c: CharLike) -> CharLike:
    """Map an ASCII upper-case letter to lower case; anything else is returned as is."""
    return _map_case(c, "A", "Z", ord("a") - ord("A"))


def to_upper(c: CharLike) -> CharLike:
    """Map an ASCII lower-case letter to upper case; anything else is returned as is."""
    return _map_case(c, "a", "z", ord("A") - ord("a"))


def atoi(text: str) -> int:
    """Parse a leading decimal integer, C style.

    Leading whitespace (tab through carriage return, and space) is skipped,
    one optional sign is accepted, and digits are read until the first
    non-digit. Text without digits yields 0. The result wraps like a signed
    32-bit integer.
    """
    pos = 0
    length = len(text)
    while pos < length and ord(text[pos]) in _SPACE_CODES:
        pos += 1
    sign = 1
    if pos < length and text[pos] in "+-":
        if text[pos] == "-":
            sign = -1
        pos += 1
    result = 0
    while pos < length and "0" <= text[pos] <= "9":
        result = _wrap_int(result * 10 + (ord(text[pos]) - ord("0")))
        pos += 1
    return _wrap_int(result * sign)


def itoa(n: int) -> str:
    """Render an integer in decimal, with a leading '-' when negative."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an int, got {type(n).__name__}")
    return str(n)