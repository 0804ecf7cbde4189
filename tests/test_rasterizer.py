import pytest

from geometrize.rasterizer import (
    bresenham,
    scanline_pixels,
    scanlines_contain,
    scanlines_for_polygon,
    scanlines_overlap,
)
from geometrize.scanline import Scanline


LINE_CASES = [
    (0, 0, 5, 2),
    (5, 2, 0, 0),
    (0, 0, 2, 7),
    (3, 3, -4, -1),
    (-2, 5, 6, -3),
    (1, 1, 1, 9),
    (0, 0, 10, 0),
]


def test_bresenham_single_point():
    assert bresenham(2, 5, 2, 5) == [(2, 5)]


def test_bresenham_horizontal():
    assert bresenham(0, 0, 3, 0) == [(0, 0), (1, 0), (2, 0), (3, 0)]


def test_bresenham_vertical_downwards():
    assert bresenham(1, 3, 1, 0) == [(1, 3), (1, 2), (1, 1), (1, 0)]


def test_bresenham_diagonal():
    assert bresenham(0, 0, 2, 2) == [(0, 0), (1, 1), (2, 2)]


@pytest.mark.parametrize("x1,y1,x2,y2", LINE_CASES)
def test_bresenham_endpoints_and_length(x1, y1, x2, y2):
    points = bresenham(x1, y1, x2, y2)
    assert points[0] == (x1, y1)
    assert points[-1] == (x2, y2)
    assert len(points) == max(abs(x2 - x1), abs(y2 - y1)) + 1


@pytest.mark.parametrize("x1,y1,x2,y2", LINE_CASES)
def test_bresenham_steps_are_adjacent(x1, y1, x2, y2):
    points = bresenham(x1, y1, x2, y2)
    for (ax, ay), (bx, by) in zip(points, points[1:]):
        assert max(abs(bx - ax), abs(by - ay)) == 1


def test_polygon_rectangle():
    lines = scanlines_for_polygon([(0, 0), (3, 0), (3, 2), (0, 2)])
    assert lines == [Scanline(0, 0, 3), Scanline(1, 0, 3), Scanline(2, 0, 3)]


def test_polygon_truncates_coordinates():
    truncated = scanlines_for_polygon([(0.9, 0.2), (3.7, 0.8), (3.1, 2.9), (0.4, 2.5)])
    exact = scanlines_for_polygon([(0, 0), (3, 0), (3, 2), (0, 2)])
    assert truncated == exact


def test_polygon_empty():
    assert scanlines_for_polygon([]) == []


def test_polygon_rows_sorted_and_unique():
    lines = scanlines_for_polygon([(2, 0), (9, 4), (1, 8)])
    ys = [line.y for line in lines]
    assert ys == sorted(set(ys))
    assert ys[0] == 0 and ys[-1] == 8
    assert all(line.x1 <= line.x2 for line in lines)


def test_polygon_covers_vertices():
    vertices = [(2, 0), (9, 4), (1, 8)]
    lines = scanlines_for_polygon(vertices)
    pixels = set(scanline_pixels(lines))
    assert all(v in pixels for v in vertices)


def test_overlap_detected():
    first = [Scanline(1, 0, 4)]
    second = [Scanline(1, 4, 8)]
    assert scanlines_overlap(first, second) is True


def test_overlap_different_rows():
    assert scanlines_overlap([Scanline(1, 0, 4)], [Scanline(2, 0, 4)]) is False


def test_overlap_adjacent_is_not_overlap():
    assert scanlines_overlap([Scanline(1, 0, 3)], [Scanline(1, 4, 8)]) is False


def test_overlap_with_generators():
    first = (line for line in [Scanline(0, 0, 1), Scanline(3, 2, 5)])
    second = (line for line in [Scanline(3, 5, 6)])
    assert scanlines_overlap(first, second) is True


def test_contain_true():
    first = [Scanline(0, 0, 10), Scanline(1, 0, 10)]
    second = [Scanline(0, 2, 5), Scanline(1, 0, 10)]
    assert scanlines_contain(first, second) is True


def test_contain_partial_is_false():
    first = [Scanline(0, 0, 5)]
    second = [Scanline(0, 3, 6)]
    assert scanlines_contain(first, second) is False


def test_contain_missing_row_is_false():
    assert scanlines_contain([Scanline(0, 0, 5)], [Scanline(1, 0, 1)]) is False


def test_contain_empty_second_is_true():
    assert scanlines_contain([], []) is True


def test_contain_self():
    lines = scanlines_for_polygon([(2, 0), (9, 4), (1, 8)])
    assert scanlines_contain(lines, lines) is True


def test_scanline_pixels_order():
    pixels = list(scanline_pixels([Scanline(2, 1, 3), Scanline(0, 5, 5)]))
    assert pixels == [(1, 2), (2, 2), (3, 2), (5, 0)]


def test_scanline_pixels_empty_for_reversed_line():
    assert list(scanline_pixels([Scanline(0, 4, 2)])) == []


def test_scanline_pixels_count_matches_widths():
    lines = scanlines_for_polygon([(0, 0), (6, 1), (3, 7)])
    pixels = list(scanline_pixels(lines))
    assert len(pixels) == sum(line.x2 - line.x1 + 1 for line in lines)
    assert len(set(pixels)) == len(pixels)