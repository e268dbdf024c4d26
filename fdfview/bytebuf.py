"""Raw byte-buffer helpers: filling, copying, searching and comparing."""

from __future__ import annotations

import operator
from typing import Optional, Union

SIZE_MAX = 2**64 - 1

BytesLike = Union[bytes, bytearray, memoryview]


def _check_span(buf: BytesLike, start: int, length: int, what: str) -> None:
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    if start < 0 or start + length > len(buf):
        raise IndexError(
            f"{what}: span of {length} bytes at offset {start} exceeds "
            f"a buffer of {len(buf)} bytes"
        )


def memset(buf: bytearray, value: int, length: int) -> bytearray:
    """Set the first ``length`` bytes of ``buf`` to ``value`` reduced to a byte."""
    length = operator.index(length)
    _check_span(buf, 0, length, "memset")
    byte = operator.index(value) & 0xFF
    buf[:length] = bytes([byte]) * length
    return buf


def bzero(buf: bytearray, length: int) -> bytearray:
    """Set the first ``length`` bytes of ``buf`` to zero."""
    return memset(buf, 0, length)


def memcpy(
    dst: Optional[bytearray], src: Optional[BytesLike], length: int
) -> Optional[bytearray]:
    """Copy ``length`` bytes from ``src`` to the start of ``dst``.

    When both buffers are None, None is returned; when only one is, a
    TypeError is raised.
    """
    if dst is None and src is None:
        return None
    if dst is None or src is None:
        raise TypeError("memcpy needs both a destination and a source")
    length = operator.index(length)
    _check_span(dst, 0, length, "memcpy destination")
    _check_span(src, 0, length, "memcpy source")
    dst[:length] = bytes(src[:length])
    return dst


def memmove(buf: bytearray, dst: int, src: int, length: int) -> bytearray:
    """Move ``length`` bytes inside ``buf`` from offset ``src`` to ``dst``.

    The regions may overlap; the result is as if the source bytes were
    first copied aside.
    """
    dst = operator.index(dst)
    src = operator.index(src)
    length = operator.index(length)
    _check_span(buf, dst, length, "memmove destination")
    _check_span(buf, src, length, "memmove source")
    buf[dst : dst + length] = bytes(buf[src : src + length])
    return buf


def memchr(data: BytesLike, value: int, length: int) -> Optional[int]:
    """Offset of the first byte equal to ``value`` within ``length`` bytes.

    ``value`` is reduced to a byte first. A byte that is not found gives
    None.
    """
    length = operator.index(length)
    _check_span(data, 0, length, "memchr")
    byte = operator.index(value) & 0xFF
    index = bytes(data[:length]).find(bytes([byte]))
    return index if index >= 0 else None


def memcmp(a: BytesLike, b: BytesLike, length: int) -> int:
    """Compare ``length`` bytes as unsigned values.

    Returns the difference of the first pair of differing bytes, or 0.
    """
    length = operator.index(length)
    _check_span(a, 0, length, "memcmp first operand")
    _check_span(b, 0, length, "memcmp second operand")
    for x, y in zip(bytes(a[:length]), bytes(b[:length])):
        if x != y:
            return x - y
    return 0


def calloc(count: int, size: int) -> bytearray:
    """A zero-filled buffer of ``count * size`` bytes.

    Raises OverflowError when the total would exceed the platform's
    largest object size.
    """
    count = operator.index(count)
    size = operator.index(size)
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    if count != 0 and SIZE_MAX // count < size:
        raise OverflowError(f"{count} * {size} bytes is too large to allocate")
    return bytearray(count * size)