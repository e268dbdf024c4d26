"""Conversions between decimal text and machine-sized integers."""

from __future__ import annotations

import itertools
import operator
from typing import Iterable, Optional, Tuple

INT_MAX = 2**31 - 1
INT_MIN = -(2**31)
LONG_MAX = 2**63 - 1
_UINT_MASK = 0xFFFFFFFF
_WHITESPACE = "\t\n\v\f\r "


class AtoiError(ValueError):
    """Raised when text does not convert cleanly to a 32-bit integer.

    ``code`` tells what went wrong: 1 for stray characters or a wrapped
    negative value, 2 for a wrapped positive value, 3 for a value outside
    the 32-bit range (the strict :func:`atoi_safe` uses 1 for every case).
    """

    def __init__(self, code: int, text: str) -> None:
        self.code = code
        self.text = text
        super().__init__(f"cannot convert {text!r} to an integer (error {code})")


def _wrap(value: int, bits: int) -> int:
    span = 1 << bits
    value &= span - 1
    return value - span if value >= span >> 1 else value


def _split_sign(text: str) -> Optional[Tuple[bool, str]]:
    """Strip leading whitespace and one sign; None when no number can start."""
    stripped = text.lstrip(_WHITESPACE)
    if not stripped:
        return None
    first = stripped[0]
    if "0" <= first <= "9":
        return False, stripped
    if first == "-":
        return True, stripped[1:]
    if first == "+":
        return False, stripped[1:]
    return None


def _leading_digits(text: str) -> Iterable[int]:
    return (int(ch) for ch in itertools.takewhile(lambda ch: "0" <= ch <= "9", text))


def atoi(text: str) -> int:
    """Lenient conversion: whitespace, one sign, digits, anything after.

    Text that starts with no number gives 0. A magnitude beyond the 64-bit
    range gives 0 for negative and -1 for positive input; anything else is
    wrapped to a signed 32-bit value.
    """
    parsed = _split_sign(text)
    if parsed is None:
        return 0
    negative, rest = parsed
    result = 0
    for digit in _leading_digits(rest):
        result = result * 10 + digit
        if result > LONG_MAX:
            return 0 if negative else -1
    return _wrap(-result if negative else result, 32)


def _checked_value(text: str, rest: str, negative: bool, strict: bool) -> int:
    limit = INT_MAX + 1 if negative else INT_MAX
    result = 0
    for digit in _leading_digits(rest):
        temp = (result * 10 + digit) & _UINT_MASK
        code = 0
        if temp // 10 != result:
            code = 1 if strict or negative else 2
        if temp > limit:
            code = 1 if strict else 3
        if code:
            raise AtoiError(code, text)
        result = temp
    return -result if negative else result


def atoi_safe(text: str) -> int:
    """Strict conversion: after the sign only digits may follow.

    Text that starts with no number gives 0. Stray characters after the
    sign or a value outside the 32-bit range raise :class:`AtoiError`
    with code 1.
    """
    parsed = _split_sign(text)
    if parsed is None:
        return 0
    negative, rest = parsed
    if any(not "0" <= ch <= "9" for ch in rest):
        raise AtoiError(1, text)
    return _checked_value(text, rest, negative, strict=True)


def atoi_safe2(text: str) -> int:
    """Range-checked conversion that tolerates characters after the digits.

    Text that starts with no number gives 0. Overflow raises
    :class:`AtoiError` with code 1, 2 or 3.
    """
    parsed = _split_sign(text)
    if parsed is None:
        return 0
    negative, rest = parsed
    return _checked_value(text, rest, negative, strict=False)


def itoa(n: int) -> str:
    """Decimal text of a signed 32-bit integer."""
    n = operator.index(n)
    if not INT_MIN <= n <= INT_MAX:
        raise OverflowError(f"{n} does not fit in 32 bits")
    return str(n)


def itoa_long(n: int) -> str:
    """Decimal text of a signed 64-bit integer whose magnitude fits."""
    n = operator.index(n)
    if not -LONG_MAX <= n <= LONG_MAX:
        raise OverflowError(f"{n} does not fit in 64 bits")
    return str(n)