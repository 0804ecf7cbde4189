"""Line drawing, polygon scan conversion and scanline set queries."""

from __future__ import annotations

from collections import defaultdict
from typing import Iterable, Iterator, Sequence

from .scanline import Scanline

Point = tuple[int, int]


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def bresenham(x1: int, y1: int, x2: int, y2: int) -> list[Point]:
    """Return the pixels on the line from (x1, y1) to (x2, y2), both ends included."""
    ix = _sign(x2 - x1)
    dx = abs(x2 - x1) << 1
    iy = _sign(y2 - y1)
    dy = abs(y2 - y1) << 1

    points = [(x1, y1)]
    if dx >= dy:
        error = dy - (dx >> 1)
        while x1 != x2:
            if error >= 0 and (error or ix > 0):
                error -= dx
                y1 += iy
            error += dy
            x1 += ix
            points.append((x1, y1))
    else:
        error = dx - (dy >> 1)
        while y1 != y2:
            if error >= 0 and (error or iy > 0):
                error -= dy
                x1 += ix
            error += dx
            y1 += iy
            points.append((x1, y1))
    return points


def scanlines_for_polygon(points: Sequence[tuple[float, float]]) -> list[Scanline]:
    """Return scanlines covering the polygon with the given vertices.

    Vertex coordinates are truncated towards zero. Each row gets one scanline
    running from the leftmost to the rightmost outline pixel on that row,
    and rows are returned in ascending order of y.
    """
    vertices = [(int(x), int(y)) for x, y in points]
    xs_by_y: defaultdict[int, set[int]] = defaultdict(set)
    for start, end in zip(vertices, vertices[1:] + vertices[:1]):
        for x, y in bresenham(*start, *end):
            xs_by_y[y].add(x)
    return [Scanline(y, min(xs), max(xs)) for y, xs in sorted(xs_by_y.items())]


def scanlines_overlap(first: Iterable[Scanline], second: Iterable[Scanline]) -> bool:
    """Return True if any scanline of ``first`` shares a pixel with one of ``second``."""
    second = list(second)
    return any(
        f.y == s.y and f.x1 <= s.x2 and f.x2 >= s.x1 for f in first for s in second
    )


def scanlines_contain(first: Iterable[Scanline], second: Iterable[Scanline]) -> bool:
    """Return True if every scanline of ``second`` lies within a single one of ``first``."""
    first = list(first)
    return all(
        any(f.y == s.y and f.x1 <= s.x1 and f.x2 >= s.x2 for f in first)
        for s in second
    )


def scanline_pixels(scanlines: Iterable[Scanline]) -> Iterator[Point]:
    """Yield the (x, y) of every pixel covered by the scanlines, in order."""
    for line in scanlines:
        for x in range(line.x1, line.x2 + 1):
            yield (x, line.y)