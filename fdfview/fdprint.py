"""Writing characters, strings and numbers to streams, and printf-style formatting."""

from __future__ import annotations

import operator
import sys
from typing import Any, Iterator, Optional, TextIO, Union

from fdfview.intconv import itoa, itoa_long

_UINT_SPAN = 1 << 32
_INT_HALF = 1 << 31


def _target(stream: Optional[TextIO]) -> TextIO:
    return sys.stdout if stream is None else stream


def _as_int(value: int) -> int:
    """Reduce a value to a signed 32-bit integer."""
    value = operator.index(value)
    return (value + _INT_HALF) % _UINT_SPAN - _INT_HALF


def _as_uint(value: int) -> int:
    """Reduce a value to an unsigned 32-bit integer."""
    return operator.index(value) % _UINT_SPAN


def _as_char(value: Union[str, int]) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"expected a single character, got {value!r}")
        return value
    return chr(operator.index(value) % 256)


def put_char(c: Union[str, int], stream: Optional[TextIO] = None) -> None:
    """Write one character to ``stream`` (standard output by default)."""
    _target(stream).write(_as_char(c))


def put_str(s: Optional[str], stream: Optional[TextIO] = None) -> None:
    """Write ``s`` to ``stream``; None writes nothing."""
    if s:
        _target(stream).write(s)


def put_endl(s: Optional[str], stream: Optional[TextIO] = None) -> None:
    """Write ``s`` followed by a newline; None writes nothing at all."""
    if s is None:
        return
    _target(stream).write(s + "\n")


def put_nbr(n: int, stream: Optional[TextIO] = None) -> None:
    """Write the decimal text of a signed 32-bit integer."""
    _target(stream).write(itoa(n))


def format_hex(n: int, upper: bool = False) -> str:
    """Hexadecimal digits of a non-negative integer, without prefix."""
    n = operator.index(n)
    if n < 0:
        raise ValueError(f"hexadecimal conversion needs a non-negative value, got {n}")
    return format(n, "X" if upper else "x")


def format_pointer(address: Optional[int]) -> str:
    """An address as ``0x`` followed by lowercase hex; None or 0 gives ``0x0``."""
    if not address:
        return "0x0"
    return "0x" + format_hex(address)


def _convert(spec: str, args: Iterator[Any]) -> str:
    try:
        value = next(args)
    except StopIteration:
        raise TypeError(f"not enough arguments for conversion %{spec}") from None
    if spec == "c":
        return _as_char(value)
    if spec == "s":
        return "(null)" if value is None else str(value)
    if spec == "p":
        return format_pointer(value)
    if spec in "di":
        return itoa(_as_int(value))
    if spec == "u":
        return itoa_long(_as_uint(value))
    return format_hex(_as_uint(value), upper=spec == "X")


def sprintf(fmt: str, *args: Any) -> str:
    """Format ``args`` by the conversions %c %s %p %d %i %u %x %X and %%.

    A lone ``%`` at the end of the format is dropped. Any other conversion
    character raises ValueError.
    """
    values = iter(args)
    pieces = []
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            pieces.append(ch)
            continue
        spec = next(chars, None)
        if spec is None:
            break
        if spec == "%":
            pieces.append("%")
        elif spec in "cspdiuxX":
            pieces.append(_convert(spec, values))
        else:
            raise ValueError(f"unsupported conversion %{spec}")
    return "".join(pieces)


def printf(fmt: str, *args: Any) -> int:
    """Format as :func:`sprintf` does, write to standard output, return the length."""
    text = sprintf(fmt, *args)
    if text:
        sys.stdout.write(text)
        sys.stdout.flush()
    return len(text)