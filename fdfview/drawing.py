"""An RGBA pixel canvas and wireframe drawing with colour gradients."""

from __future__ import annotations

import math

from fdfview.model import HeightMap

_CHANNEL_SHIFTS = {"r": 24, "g": 16, "b": 8, "a": 0}


class Canvas:
    """A width by height image of 32-bit RGBA pixels, stored as R, G, B, A bytes."""

    def __init__(self, width: int, height: int) -> None:
        if width < 0 or height < 0:
            raise ValueError(f"canvas size must not be negative: {width}x{height}")
        self.width = width
        self.height = height
        self.data = bytearray(width * height * 4)

    def _offset(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) is outside a {self.width}x{self.height} canvas")
        return (y * self.width + x) * 4

    def put_pixel(self, x: int, y: int, color: int) -> None:
        """Set one pixel to a 0xRRGGBBAA colour."""
        offset = self._offset(x, y)
        self.data[offset : offset + 4] = (color & 0xFFFFFFFF).to_bytes(4, "big")

    def get_pixel(self, x: int, y: int) -> int:
        """The 0xRRGGBBAA colour of one pixel."""
        offset = self._offset(x, y)
        return int.from_bytes(self.data[offset : offset + 4], "big")

    def fill(self, color: int) -> None:
        """Set every pixel to ``color``."""
        self.data[:] = (color & 0xFFFFFFFF).to_bytes(4, "big") * (self.width * self.height)


def channel(rgba: int, name: str) -> int:
    """One 8-bit channel (``r``, ``g``, ``b`` or ``a``) of a 0xRRGGBBAA colour.

    An unknown channel name gives 0.
    """
    shift = _CHANNEL_SHIFTS.get(name)
    if shift is None:
        return 0
    return (rgba >> shift) & 0xFF


def _gradient(x: int, y: int, xb: int, yb: int, total: float, color_a: int, color_b: int) -> int:
    share = math.hypot(xb - x, yb - y) / total
    result = 0
    for name in "rgba":
        mixed = channel(color_a, name) * share + channel(color_b, name) * (1 - share)
        result = (result << 8) + math.trunc(mixed)
    return result & 0xFFFFFFFF


def draw_line(
    canvas: Canvas, xa: int, ya: int, xb: int, yb: int, color_a: int, color_b: int
) -> None:
    """Draw a line from (xa, ya) towards (xb, yb) with Bresenham's algorithm.

    The colour fades from ``color_a`` at the start towards ``color_b``. The
    end pixel itself is not drawn, and drawing stops at the first pixel
    that falls outside the canvas.
    """
    dx = abs(xb - xa)
    dy = -abs(yb - ya)
    inc_x = 1 if xa < xb else -1
    inc_y = 1 if ya < yb else -1
    total = math.hypot(dx, dy)
    err = dx + dy
    x, y = xa, ya
    while x != xb or y != yb:
        if not (0 <= x < canvas.width and 0 <= y < canvas.height):
            break
        canvas.put_pixel(x, y, _gradient(x, y, xb, yb, total, color_a, color_b))
        doubled = 2 * err
        if doubled >= dy:
            err += dy
            x += inc_x
        if doubled <= dx:
            err += dx
            y += inc_y


def _lround(value: float) -> int:
    """Round to the nearest integer, halves away from zero."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def connect_points(hmap: HeightMap, canvas: Canvas) -> None:
    """Draw the wireframe: each point joined to its right and lower neighbour."""
    rows = hmap.rows
    for y, row in enumerate(rows):
        below = rows[y + 1] if y + 1 < len(rows) else None
        for x, point in enumerate(row):
            start_x = _lround(point.screen_x)
            start_y = _lround(point.screen_y)
            neighbours = []
            if x + 1 < len(row):
                neighbours.append(row[x + 1])
            if below is not None:
                neighbours.append(below[x])
            for other in neighbours:
                draw_line(
                    canvas,
                    start_x,
                    start_y,
                    _lround(other.screen_x),
                    _lround(other.screen_y),
                    point.color,
                    other.color,
                )