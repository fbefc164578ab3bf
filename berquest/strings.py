"""String searching, comparison, slicing, splitting and bounded copying."""

from __future__ import annotations

from collections.abc import Callable, MutableSequence

_NUL = "\0"


def _require_char(c: str) -> str:
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    return c


def _code_at(s: str, index: int) -> int:
    """Character code at ``index``, or 0 past the end of the string."""
    return ord(s[index]) if index < len(s) else 0


def str_chr(s: str | None, c: str) -> int | None:
    """Index of the first ``c`` in ``s``.

    Searching for the NUL character gives the length of ``s``, where the
    terminator would sit. Returns None when ``s`` is None or ``c`` is absent.
    """
    _require_char(c)
    if s is None:
        return None
    if c == _NUL:
        return len(s)
    index = s.find(c)
    return None if index < 0 else index


def str_rchr(s: str, c: str) -> int | None:
    """Index of the last ``c`` in ``s``; NUL gives the length of ``s``."""
    _require_char(c)
    if c == _NUL:
        return len(s)
    index = s.rfind(c)
    return None if index < 0 else index


def str_cmp(first: str, second: str) -> int:
    """Difference of the first differing character codes, or 0 when equal.

    The shorter string compares as if followed by a code of 0.
    """
    for left, right in zip(first, second):
        if left != right:
            return ord(left) - ord(right)
    common = min(len(first), len(second))
    return _code_at(first, common) - _code_at(second, common)


def str_ncmp(first: str, second: str, n: int) -> int:
    """Like :func:`str_cmp` but looking at no more than ``n`` characters."""
    if n < 0:
        raise ValueError(f"n must not be negative, got {n}")
    if n == 0:
        return 0
    return str_cmp(first[:n], second[:n])


def str_nstr(haystack: str, needle: str, length: int) -> int | None:
    """Index of ``needle`` lying wholly within the first ``length`` characters.

    An empty needle is found at index 0.
    """
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    if not needle:
        return 0
    index = haystack[:length].find(needle)
    return None if index < 0 else index


def str_join(first: str | None, second: str | None) -> str | None:
    """Concatenate two strings; a missing one yields the other unchanged."""
    if second is None:
        return first
    if first is None:
        return second
    return first + second


def substr(s: str | None, start: int, length: int) -> str:
    """Up to ``length`` characters of ``s`` from ``start``.

    An absent string, a zero length or a start beyond the end give "".
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if not s or not length or start > len(s):
        return ""
    return s[start:start + length]


def str_trim(s: str, charset: str) -> str:
    """Strip characters found in ``charset`` from both ends of ``s``."""
    if not isinstance(s, str) or not isinstance(charset, str):
        raise TypeError("str_trim expects two strings")
    if not charset:
        return s
    return s.strip(charset)


def split(s: str, sep: str) -> list[str]:
    """Split ``s`` on ``sep``, dropping the empty pieces between separators."""
    _require_char(sep)
    return [part for part in s.split(sep) if part]


def str_iteri(
    chars: MutableSequence[str],
    func: Callable[[int, str], str | None],
) -> None:
    """Call ``func(index, char)`` for each character, in place.

    A returned character replaces the one at that index; None keeps it.
    """
    for index, char in enumerate(chars):
        replacement = func(index, char)
        if replacement is not None:
            chars[index] = _require_char(replacement)


def str_mapi(s: str, func: Callable[[int, str], str]) -> str:
    """New string made of ``func(index, char)`` for each character of ``s``."""
    return "".join(_require_char(func(index, char)) for index, char in enumerate(s))


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters, terminator included.

    Returns the text that fits and the full length of ``src``.
    """
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    copied = src[:size - 1] if size > 0 else ""
    return copied, len(src)


def strlcat(dest: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dest`` within a buffer of ``size`` characters.

    Returns the resulting text and the length the full result would have had,
    counting ``dest`` as at most ``size`` characters long.
    """
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    result = dest
    if size > 0 and len(dest) < size - 1:
        result = dest + src[:size - 1 - len(dest)]
    return result, min(len(dest), size) + len(src)