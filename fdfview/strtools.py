"""String helpers with bounded copies, searches, splitting and trimming."""

from __future__ import annotations

import operator
from typing import Callable, List, MutableSequence, Optional, Tuple, Union

CharLike = Union[str, int]


def _char_target(c: CharLike) -> Tuple[str, bool]:
    """Return the character searched for and whether the terminator matches.

    An integer is reduced to a byte the way a C ``char`` conversion does;
    only a non-negative value that reduces to zero matches the end of the
    string.
    """
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        code = ord(c)
        return c, code == 0
    code = operator.index(c)
    if code >= 0:
        code %= 256
        return chr(code), code == 0
    return chr(code % 256), False


def bounded_copy(src: str, size: int) -> Tuple[str, int]:
    """Copy at most ``size - 1`` characters of ``src``.

    Returns the copied text and the full length of ``src``, which tells
    the caller whether the copy was truncated. A size below 1 copies
    nothing.
    """
    copied = src[: size - 1] if size >= 1 else ""
    return copied, len(src)


def bounded_concat(dst: str, src: str, size: int) -> Tuple[str, int]:
    """Append ``src`` to ``dst`` so the result has fewer than ``size`` characters.

    Returns the new text and the length the concatenation tried to make.
    With a size below 1 the text is unchanged and the length of ``src`` is
    returned; when ``dst`` already fills the size, ``dst`` is unchanged and
    ``size + len(src)`` is returned.
    """
    if size < 1:
        return dst, len(src)
    if len(dst) >= size:
        return dst, size + len(src)
    room = size - len(dst) - 1
    return dst + src[:room], len(dst) + len(src)


def find_char(s: str, c: CharLike) -> Optional[int]:
    """Index of the first occurrence of ``c`` in ``s``.

    Searching for the NUL character gives ``len(s)``; a missing character
    gives None.
    """
    target, matches_end = _char_target(c)
    index = s.find(target)
    if index >= 0:
        return index
    return len(s) if matches_end else None


def find_last_char(s: str, c: CharLike) -> Optional[int]:
    """Index of the last occurrence of ``c`` in ``s``.

    Searching for the NUL character gives ``len(s)``; a missing character
    gives None.
    """
    target, matches_end = _char_target(c)
    if matches_end:
        return len(s)
    index = s.rfind(target)
    return index if index >= 0 else None


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters.

    A differing character gives the difference of the two code points; a
    string that ends first compares as smaller, giving 1 or -1.
    """
    compared = 0
    for a, b in zip(s1, s2):
        if compared >= n:
            return 0
        if a != b:
            return ord(a) - ord(b)
        compared += 1
    if compared >= n:
        return 0
    if len(s1) > compared:
        return 1
    if len(s2) > compared:
        return -1
    return 0


def strnstr(haystack: str, needle: str, n: int) -> Optional[int]:
    """Index of ``needle`` in the first ``n`` characters of ``haystack``.

    An empty needle is found at index 0; a missing one gives None.
    """
    if not haystack and needle:
        return None
    if (not haystack and n < 1) or not needle:
        return 0
    remaining = n
    for index in range(len(haystack)):
        if remaining < len(needle):
            break
        if haystack.startswith(needle, index):
            return index
        remaining -= 1
    return None


def substr(s: str, start: int, length: int) -> str:
    """Up to ``length`` characters of ``s`` from ``start``; empty past the end."""
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start >= len(s):
        return ""
    return s[start : start + length]


def strjoin(s1: str, s2: str) -> str:
    """The two strings one after the other."""
    return s1 + s2


def strtrim(s: str, charset: str) -> str:
    """Remove characters found in ``charset`` from both ends of ``s``.

    When trimming from the end reaches the first character, the result is
    empty.
    """
    if not s:
        return ""
    if not charset:
        return s
    end = len(s) - 1
    while s[end] in charset:
        end -= 1
        if end < 1:
            return ""
    start = 0
    while s[start] in charset:
        start += 1
    return s[start : end + 1]


def split(s: str, sep: str) -> List[str]:
    """Split ``s`` on the single character ``sep``, dropping empty pieces."""
    if len(sep) != 1:
        raise ValueError(f"separator must be a single character, got {sep!r}")
    return [piece for piece in s.split(sep) if piece]


def strmapi(s: str, func: Callable[[int, str], str]) -> str:
    """Build a string from ``func(index, char)`` applied to each character."""
    return "".join(func(index, ch) for index, ch in enumerate(s))


def striteri(s: MutableSequence[str], func: Callable[[int, MutableSequence[str]], None]) -> None:
    """Call ``func(index, s)`` for each position of a mutable character sequence.

    ``func`` may change ``s[index]`` in place.
    """
    for index in range(len(s)):
        func(index, s)