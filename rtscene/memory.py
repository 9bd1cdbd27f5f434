"""Byte-buffer helpers: fill, copy, move, search, compare and zeroed allocation."""

from __future__ import annotations

from typing import Optional, Union

Buffer = Union[bytes, bytearray, memoryview]


def _check_length(length: int, *buffers: Buffer) -> None:
    if length < 0:
        raise ValueError("length must not be negative")
    for buf in buffers:
        if length > len(buf):
            raise ValueError(f"length {length} exceeds buffer size {len(buf)}")


def mem_set(buf: bytearray, value: int, length: int) -> bytearray:
    """Fill the first ``length`` bytes of ``buf`` with the low byte of ``value``."""
    _check_length(length, buf)
    buf[:length] = bytes([value & 0xFF]) * length
    return buf


def bzero(buf: bytearray, length: int) -> bytearray:
    """Zero the first ``length`` bytes of ``buf``."""
    return mem_set(buf, 0, length)


def mem_copy(dst: bytearray, src: Buffer, length: int) -> bytearray:
    """Copy ``length`` bytes from ``src`` to the start of ``dst``."""
    if dst is src:
        return dst
    _check_length(length, dst, src)
    dst[:length] = bytes(src[:length])
    return dst


def mem_move(buf: bytearray, dst: int, src: int, length: int) -> bytearray:
    """Move ``length`` bytes inside ``buf`` from offset ``src`` to ``dst``; regions may overlap."""
    if min(dst, src, length) < 0:
        raise ValueError("offsets and length must not be negative")
    if max(dst, src) + length > len(buf):
        raise ValueError("move reaches past the end of the buffer")
    buf[dst:dst + length] = bytes(buf[src:src + length])
    return buf


def mem_chr(data: Buffer, value: int, length: int) -> Optional[int]:
    """Index of the first byte equal to ``value`` among the first ``length``, or None."""
    _check_length(length, data)
    index = bytes(data[:length]).find(value & 0xFF)
    return None if index < 0 else index


def mem_cmp(a: Buffer, b: Buffer, length: int) -> int:
    """Difference of the first unequal bytes within ``length``, or 0 when equal."""
    _check_length(length, a, b)
    for x, y in zip(bytes(a[:length]), bytes(b[:length])):
        if x != y:
            return x - y
    return 0


def calloc(count: int, size: int) -> bytearray:
    """A zero-filled buffer of ``count * size`` bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    return bytearray(count * size)