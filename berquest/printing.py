"""Formatted output with a small set of C-style conversions, plus simple writers."""

from __future__ import annotations

import re
import sys
from collections.abc import Callable, Iterator
from typing import TextIO

_UINT32_MASK = (1 << 32) - 1
_ULONG_MASK = (1 << 64) - 1
_NULL_STRING = "(null)"
_NULL_POINTER = "(nil)"

_SPEC_PATTERN = re.compile(r"%(.)|[^%]+|%", re.DOTALL)


def _require_int(value: object, conversion: str) -> int:
    if not isinstance(value, int):
        raise TypeError(
            f"%{conversion} expects an int, got {type(value).__name__}"
        )
    return value


def _to_int32(value: int) -> int:
    value &= _UINT32_MASK
    return value - (1 << 32) if value >= 1 << 31 else value


def _as_char(value: object) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"expected a single character, got {value!r}")
        return value
    if isinstance(value, int):
        return chr(value & 0xFF)
    raise TypeError(f"%c expects a character or an int, got {type(value).__name__}")


def format_unsigned(n: int) -> str:
    """Decimal text of ``n`` read as an unsigned 32-bit value."""
    return str(_require_int(n, "u") & _UINT32_MASK)


def format_hex(n: int, upper: bool = False) -> str:
    """Hexadecimal text of ``n`` read as an unsigned 32-bit value."""
    text = format(_require_int(n, "x") & _UINT32_MASK, "x")
    return text.upper() if upper else text


def format_pointer(address: int) -> str:
    """Pointer text: ``0x`` and lower-case hex, or ``(nil)`` for zero."""
    value = _require_int(address, "p") & _ULONG_MASK
    if not value:
        return _NULL_POINTER
    return "0x" + format(value, "x")


def _format_string(value: object) -> str:
    if value is None:
        return _NULL_STRING
    if not isinstance(value, str):
        raise TypeError(f"%s expects a string, got {type(value).__name__}")
    return value


def _format_signed(value: object) -> str:
    return str(_to_int32(_require_int(value, "d")))


_CONVERSIONS: dict[str, Callable[[object], str]] = {
    "s": _format_string,
    "c": _as_char,
    "p": format_pointer,  # type: ignore[dict-item]
    "d": _format_signed,
    "i": _format_signed,
    "u": format_unsigned,  # type: ignore[dict-item]
    "x": lambda value: format_hex(value, upper=False),  # type: ignore[arg-type]
    "X": lambda value: format_hex(value, upper=True),  # type: ignore[arg-type]
}


def _render(fmt: str, args: tuple[object, ...]) -> Iterator[str]:
    pending = iter(args)
    for match in _SPEC_PATTERN.finditer(fmt):
        conversion = match.group(1)
        if conversion is None:
            yield match.group(0)
        elif conversion == "%":
            yield "%"
        elif conversion in _CONVERSIONS:
            try:
                value = next(pending)
            except StopIteration:
                raise TypeError(
                    f"not enough arguments for %{conversion}"
                ) from None
            yield _CONVERSIONS[conversion](value)
        # Unknown conversions print nothing and take no argument.


def c_format(fmt: str, *args: object) -> str:
    """Expand ``%s %c %p %d %i %u %x %X %%`` in ``fmt`` with ``args``.

    An unknown conversion prints nothing; a lone ``%`` at the end is printed.
    """
    return "".join(_render(fmt, args))


def printf(fmt: str, *args: object, stream: TextIO | None = None) -> int:
    """Write the expansion of ``fmt`` to ``stream`` and return its length."""
    text = c_format(fmt, *args)
    (stream if stream is not None else sys.stdout).write(text)
    return len(text)


def _write(text: str, stream: TextIO | None) -> int:
    (stream if stream is not None else sys.stdout).write(text)
    return len(text)


def put_char(c: str | int, stream: TextIO | None = None) -> int:
    """Write one character."""
    return _write(_as_char(c), stream)


def put_str(s: str, stream: TextIO | None = None) -> int:
    """Write a string as is."""
    if not isinstance(s, str):
        raise TypeError(f"expected a string, got {type(s).__name__}")
    return _write(s, stream)


def put_endl(s: str, stream: TextIO | None = None) -> int:
    """Write a string followed by a newline."""
    if not isinstance(s, str):
        raise TypeError(f"expected a string, got {type(s).__name__}")
    return _write(s + "\n", stream)


def put_nbr(n: int, stream: TextIO | None = None) -> int:
    """Write an integer, wrapped to the signed 32-bit range, in decimal."""
    return _write(_format_signed(n), stream)