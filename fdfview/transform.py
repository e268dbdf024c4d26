"""Projecting a height map to screen space and fitting it into an image."""

from __future__ import annotations

import math

from fdfview.model import HeightMap

_ANGLE = math.radians(30)
_AXIS_ANGLE = math.radians(120)


def to_isometric(hmap: HeightMap) -> None:
    """Set every point's screen position from its grid position and depth.

    The x axis runs at 30 degrees, the y axis at 150 degrees and the depth
    axis at -90 degrees, so greater heights move a point up the screen.
    """
    x_axis = (math.cos(_ANGLE), math.sin(_ANGLE))
    y_axis = (math.cos(_ANGLE + _AXIS_ANGLE), math.sin(_ANGLE + _AXIS_ANGLE))
    z_axis = (math.cos(_ANGLE - _AXIS_ANGLE), math.sin(_ANGLE - _AXIS_ANGLE))
    for y, row in enumerate(hmap.rows):
        for x, point in enumerate(row):
            point.screen_x = x * x_axis[0] + y * y_axis[0] + point.depth * z_axis[0]
            point.screen_y = x * x_axis[1] + y * y_axis[1] + point.depth * z_axis[1]


def zoom(hmap: HeightMap, factor: float) -> None:
    """Scale every screen position by ``factor`` about the origin."""
    for point in hmap.points():
        point.screen_x *= factor
        point.screen_y *= factor


def shift_top_left(hmap: HeightMap, ymargin: float, xmargin: float) -> None:
    """Move the map so its smallest screen coordinates equal the margins."""
    min_x, min_y = hmap.min_coords()
    xshift = -min_x + xmargin
    yshift = -min_y + ymargin
    for point in hmap.points():
        point.screen_x += xshift
        point.screen_y += yshift


def fit_to_image(hmap: HeightMap, width: float, height: float) -> None:
    """Zoom the map in or out so its extent just fits ``width`` by ``height``.

    A map with no extent along either axis is left unchanged.
    """
    min_x, min_y = hmap.min_coords()
    max_x, max_y = hmap.max_coords()
    ratio_y = abs(max_y - min_y) / height
    ratio_x = abs(max_x - min_x) / width
    if ratio_y <= 0 or ratio_x <= 0:
        return
    zoom(hmap, min(1 / ratio_y, 1 / ratio_x))