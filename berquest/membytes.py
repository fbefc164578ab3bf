"""Byte-buffer helpers: filling, zeroing, allocation, copying, searching, comparing."""

from __future__ import annotations

import sys
from collections.abc import Sequence


def _check_count(count: int, *buffers: Sequence[int]) -> None:
    if count < 0:
        raise ValueError(f"count must not be negative, got {count}")
    for buffer in buffers:
        if count > len(buffer):
            raise ValueError(
                f"count {count} exceeds buffer length {len(buffer)}"
            )


def mem_set(buffer: bytearray, value: int, count: int) -> bytearray:
    """Set the first ``count`` bytes of ``buffer`` to ``value`` (taken modulo 256)."""
    _check_count(count, buffer)
    buffer[:count] = bytes([value & 0xFF]) * count
    return buffer


def bzero(buffer: bytearray, count: int) -> None:
    """Zero the first ``count`` bytes of ``buffer``."""
    mem_set(buffer, 0, count)


def calloc(count: int, size: int) -> bytearray:
    """Allocate a zeroed buffer of ``count * size`` bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    total = count * size
    if total > sys.maxsize:
        raise MemoryError(f"cannot allocate {count} x {size} bytes")
    return bytearray(total)


def mem_copy(dest: bytearray, src: Sequence[int], count: int) -> bytearray:
    """Copy the first ``count`` bytes of ``src`` to the start of ``dest``."""
    _check_count(count, dest, src)
    dest[:count] = bytes(src[:count])
    return dest


def mem_move(dest: bytearray, src: Sequence[int], count: int) -> bytearray:
    """Copy ``count`` bytes like :func:`mem_copy`, safe when the two overlap."""
    _check_count(count, dest, src)
    chunk = bytes(src[:count])
    dest[:count] = chunk
    return dest


def mem_chr(data: Sequence[int], value: int, count: int) -> int | None:
    """Index of the first byte equal to ``value`` (modulo 256) within ``count`` bytes."""
    if count <= 0:
        return None
    _check_count(count, data)
    target = value & 0xFF
    for index, byte in enumerate(data[:count]):
        if byte == target:
            return index
    return None


def mem_cmp(first: Sequence[int], second: Sequence[int], count: int) -> int:
    """Difference of the first differing bytes within ``count`` bytes, else 0."""
    if count == 0:
        return 0
    _check_count(count, first, second)
    for left, right in zip(first[:count], second[:count]):
        if left != right:
            return left - right
    return 0