"""Reading height maps from text: one row per line, points separated by spaces.

A point is a decimal height, optionally followed by a comma and a colour
written as ``0xRRGGBB``.
"""

from __future__ import annotations

import os
from typing import Iterable, List, Optional, Union

from fdfview.intconv import AtoiError, atoi_safe2
from fdfview.model import DEFAULT_COLOR, HeightMap, Point
from fdfview.strtools import split

_HEX_DIGITS = "0123456789abcdef"


class MapError(ValueError):
    """Raised when map text cannot be turned into a height map."""


def hex_digit(char: str) -> Optional[int]:
    """Value of one hexadecimal digit of either case, or None."""
    if len(char) != 1:
        return None
    index = _HEX_DIGITS.find(char.lower())
    return index if index >= 0 else None


def parse_color(text: str) -> int:
    """An RGBA colour from ``0xRRGGBB`` text, with full opacity.

    The two-character prefix is skipped and hex digits are read until the
    first character that is not one; the result is the RGB value shifted
    left by one byte with alpha 255, kept to 32 bits.
    """
    color = 0
    for char in text[2:]:
        digit = hex_digit(char)
        if digit is None:
            break
        color = (color * 16 + digit) & 0xFFFFFFFF
    return ((color << 8) + 255) & 0xFFFFFFFF


def parse_point(text: str) -> Point:
    """A point from ``height`` or ``height,0xRRGGBB`` text."""
    pieces = split(text, ",")
    if not pieces:
        raise MapError(f"no height in point {text!r}")
    try:
        depth = atoi_safe2(pieces[0])
    except AtoiError as exc:
        raise MapError(f"bad height in point {text!r} (error {exc.code})") from exc
    color = parse_color(pieces[1]) if len(pieces) > 1 else DEFAULT_COLOR
    return Point(depth=float(depth), color=color)


def count_columns(line: str) -> int:
    """Number of leading space-separated fields that start a number.

    Counting stops at the first field that does not begin with a digit or a
    sign, such as a trailing newline.
    """
    count = 0
    for field in split(line, " "):
        if not (field[0].isdigit() and field[0].isascii()) and field[0] not in "+-":
            break
        count += 1
    return count


def _parse_row(line: str, cols: int) -> List[Point]:
    fields = split(line, " ")
    if len(fields) < cols:
        raise MapError(f"row has {len(fields)} fields, expected {cols}: {line!r}")
    return [parse_point(field) for field in fields[:cols]]


def read_map(lines: Iterable[str]) -> HeightMap:
    """Build a height map from lines of text.

    The first line fixes the number of columns; every row takes that many
    points and ignores any fields beyond them.
    """
    iterator = iter(lines)
    first = next(iterator, None)
    if first is None:
        raise MapError("the map is empty")
    cols = count_columns(first)
    rows = [_parse_row(first, cols)]
    rows.extend(_parse_row(line, cols) for line in iterator)
    return HeightMap(rows)


def load_map(path: Union[str, "os.PathLike[str]"]) -> HeightMap:
    """Read a height map from a file.

    Raises OSError when the file cannot be opened and MapError when its
    content is not a valid map.
    """
    with open(path, encoding="utf-8", errors="replace") as handle:
        return read_map(handle)