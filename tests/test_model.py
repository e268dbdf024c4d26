import pytest

from fdfview.model import DEFAULT_COLOR, HeightMap, Point


def _grid():
    return HeightMap(
        [
            [Point(screen_x=1.0, screen_y=5.0, depth=2.0), Point(screen_x=-3.0, screen_y=2.0, depth=4.0)],
            [Point(screen_x=7.0, screen_y=-1.0, depth=6.0), Point(screen_x=0.5, screen_y=9.0, depth=8.0)],
        ]
    )


def test_point_defaults_to_opaque_white():
    assert Point().color == 0xFFFFFFFF
    assert DEFAULT_COLOR == 0xFFFFFFFF


def test_dimensions():
    hmap = _grid()
    assert hmap.cols == 2
    assert hmap.row_count == 2


def test_points_are_row_major():
    hmap = _grid()
    depths = [p.depth for p in hmap.points()]
    assert depths == [2.0, 4.0, 6.0, 8.0]


def test_min_coords():
    assert _grid().min_coords() == (-3.0, -1.0)


def test_max_coords():
    assert _grid().max_coords() == (7.0, 9.0)


def test_min_not_above_max():
    hmap = _grid()
    min_x, min_y = hmap.min_coords()
    max_x, max_y = hmap.max_coords()
    assert min_x <= max_x and min_y <= max_y


def test_flatten_by_one_keeps_depth():
    hmap = _grid()
    hmap.flatten(1)
    assert [p.depth for p in hmap.points()] == [2.0, 4.0, 6.0, 8.0]


def test_flatten_divides_depth():
    hmap = _grid()
    hmap.flatten(2)
    assert [p.depth for p in hmap.points()] == [1.0, 2.0, 3.0, 4.0]


def test_ragged_rows_rejected():
    with pytest.raises(ValueError):
        HeightMap([[Point(), Point()], [Point()]])


def test_empty_map_has_no_extremes():
    hmap = HeightMap([])
    assert hmap.cols == 0
    with pytest.raises(ValueError):
        hmap.min_coords()
    with pytest.raises(ValueError):
        hmap.max_coords()