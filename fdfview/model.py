"""The height map: a grid of points with depth, colour and screen position."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, List, Tuple

DEFAULT_COLOR = 0xFFFFFFFF


@dataclass
class Point:
    """One grid point: projected screen position, height and RGBA colour."""

    screen_x: float = 0.0
    screen_y: float = 0.0
    depth: float = 0.0
    color: int = DEFAULT_COLOR


class HeightMap:
    """A rectangular grid of points, stored row by row."""

    def __init__(self, rows: Iterable[Iterable[Point]]) -> None:
        self.rows: List[List[Point]] = [list(row) for row in rows]
        widths = {len(row) for row in self.rows}
        if len(widths) > 1:
            raise ValueError(f"rows differ in length: {sorted(widths)}")

    @property
    def cols(self) -> int:
        """Number of points in each row."""
        return len(self.rows[0]) if self.rows else 0

    @property
    def row_count(self) -> int:
        """Number of rows."""
        return len(self.rows)

    def points(self) -> Iterator[Point]:
        """Every point, row by row."""
        for row in self.rows:
            yield from row

    def _screen_coords(self) -> Tuple[List[float], List[float]]:
        xs = [p.screen_x for p in self.points()]
        ys = [p.screen_y for p in self.points()]
        if not xs:
            raise ValueError("the map has no points")
        return xs, ys

    def min_coords(self) -> Tuple[float, float]:
        """The smallest screen x and screen y over all points."""
        xs, ys = self._screen_coords()
        return min(xs), min(ys)

    def max_coords(self) -> Tuple[float, float]:
        """The largest screen x and screen y over all points."""
        xs, ys = self._screen_coords()
        return max(xs), max(ys)

    def flatten(self, factor: float) -> None:
        """Divide every point's depth by ``factor``."""
        for point in self.points():
            point.depth /= factor