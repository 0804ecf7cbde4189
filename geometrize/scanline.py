"""Scanlines: horizontal runs of pixels."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable


@dataclass(frozen=True, slots=True)
class Scanline:
    """A row of pixels at ``y`` spanning ``x1`` to ``x2`` inclusive."""

    y: int
    x1: int
    x2: int


def _clamp(value: int, lower: int, upper: int) -> int:
    return max(lower, min(value, upper))


def trim_scanlines(
    scanlines: Iterable[Scanline], min_x: int, min_y: int, max_x: int, max_y: int
) -> list[Scanline]:
    """Crop scanlines to the area [min_x, max_x) x [min_y, max_y).

    Scanlines outside the vertical range or with x1 > x2 are dropped.
    """
    return [
        Scanline(
            line.y,
            _clamp(line.x1, min_x, max_x - 1),
            _clamp(line.x2, min_x, max_x - 1),
        )
        for line in scanlines
        if min_y <= line.y < max_y and line.x1 <= line.x2
    ]