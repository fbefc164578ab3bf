"""Character classification, case conversion and integer/text conversion."""

from __future__ import annotations

from typing import TypeVar

CharLike = TypeVar("CharLike", int, str)

_WHITESPACE = frozenset("\t\n\v\f\r ")
_INT_BITS = 32


def _code(c: int | str) -> int:
    """Return the character code of a one-character string or an int code."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    if isinstance(c, int):
        return c
    raise TypeError(f"expected a character or an int, got {type(c).__name__}")


def _wrap_int32(value: int) -> int:
    """Wrap an integer into the signed 32-bit range."""
    value &= (1 << _INT_BITS) - 1
    if value >= 1 << (_INT_BITS - 1):
        value -= 1 << _INT_BITS
    return value


def is_alpha(c: int | str) -> bool:
    """True for ASCII letters."""
    code = _code(c)
    return ord("a") <= code <= ord("z") or ord("A") <= code <= ord("Z")


def is_digit(c: int | str) -> bool:
    """True for ASCII decimal digits."""
    return ord("0") <= _code(c) <= ord("9")


def is_alnum(c: int | str) -> bool:
    """True for ASCII letters and digits."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: int | str) -> bool:
    """True for codes 0 to 127."""
    return 0 <= _code(c) <= 127


def is_print(c: int | str) -> bool:
    """True for printable ASCII characters, space included."""
    return 32 <= _code(c) <= 126


def _convert(c: CharLike, code: int) -> CharLike:
    return chr(code) if isinstance(c, str) else code


def to_lower(c: CharLike) -> CharLike:
    """Lower-case an ASCII upper-case letter; anything else is returned as is."""
    code = _code(c)
    if ord("A") <= code <= ord("Z"):
        return _convert(c, code + 32)
    return c


def to_upper(c: CharLike) -> CharLike:
    """Upper-case an ASCII lower-case letter; anything else is returned as is."""
    code = _code(c)
    if ord("a") <= code <= ord("z"):
        return _convert(c, code - 32)
    return c


def atoi(text: str) -> int:
    """Parse a leading decimal integer the way a C int parser does.

    Leading whitespace is skipped, then one optional sign, then digits up to
    the first non-digit. Text without digits gives 0. The result wraps to the
    signed 32-bit range.
    """
    rest = text
    index = 0
    while index < len(rest) and rest[index] in _WHITESPACE:
        index += 1
    sign = 1
    if index < len(rest) and rest[index] in "+-":
        if rest[index] == "-":
            sign = -1
        index += 1
    result = 0
    for ch in rest[index:]:
        if not is_digit(ch):
            break
        result = _wrap_int32(result * 10 + ord(ch) - ord("0"))
    return _wrap_int32(sign * result)


def itoa(n: int) -> str:
    """Render an integer in decimal, with a leading minus when negative."""
    if not isinstance(n, int):
        raise TypeError(f"expected an int, got {type(n).__name__}")
    return str(n)