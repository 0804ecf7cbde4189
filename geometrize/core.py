"""Colour fitting and error measures used to score candidate shapes."""

from __future__ import annotations

import math
from typing import Callable, Sequence

from .bitmap import Bitmap
from .color import Rgba
from .commonutil import clamp
from .drawing import copy_lines, draw_lines
from .scanline import Scanline

EnergyFunction = Callable[
    [Sequence[Scanline], int, Bitmap, Bitmap, Bitmap, float], float
]
"""Signature of an energy function: lower energy means a better shape."""

_U64_MASK = (1 << 64) - 1


def _trunc_div(numerator: int, denominator: int) -> int:
    quotient = abs(numerator) // denominator
    return quotient if numerator >= 0 else -quotient


def compute_color(
    target: Bitmap, current: Bitmap, lines: Sequence[Scanline], alpha: int
) -> Rgba:
    """Return the colour that, drawn with ``alpha`` over ``current``, best matches ``target``.

    The average is taken over the pixels covered by ``lines``. With no
    covered pixels the result is fully transparent black.
    """
    lines = list(lines)
    if not lines:
        return Rgba(0, 0, 0, 0)
    if not 0 < alpha <= 255:
        raise ValueError(f"alpha must be in the range 1-255, got {alpha}")

    a = 65535 // alpha
    total_r = total_g = total_b = 0
    count = 0
    for line in lines:
        y = line.y
        for x in range(line.x1, line.x2 + 1):
            t = target.get_pixel(x, y)
            c = current.get_pixel(x, y)
            total_r += (t.r - c.r) * a + c.r * 257
            total_g += (t.g - c.g) * a + c.g * 257
            total_b += (t.b - c.b) * a + c.b * 257
            count += 1

    if count == 0:
        return Rgba(0, 0, 0, 0)

    def channel(total: int) -> int:
        return clamp(_trunc_div(total, count) >> 8, 0, 255)

    return Rgba(channel(total_r), channel(total_g), channel(total_b), alpha)


def _check_same_size(first: Bitmap, second: Bitmap) -> None:
    if first.width != second.width or first.height != second.height:
        raise ValueError(
            f"bitmap sizes differ: {first.width}x{first.height} "
            f"and {second.width}x{second.height}"
        )


def difference_full(first: Bitmap, second: Bitmap) -> float:
    """Return the root-mean-square error between two bitmaps, scaled to 0-1."""
    _check_same_size(first, second)
    channels = first.width * first.height * 4
    if channels == 0:
        raise ValueError("cannot compare empty bitmaps")
    total = sum((f - s) ** 2 for f, s in zip(first.data, second.data))
    return math.sqrt(total / channels) / 255.0


def difference_partial(
    target: Bitmap,
    before: Bitmap,
    after: Bitmap,
    score: float,
    lines: Sequence[Scanline],
) -> float:
    """Update ``score`` (the error of ``before`` against ``target``) for ``after``.

    Only the pixels covered by ``lines`` are assumed to differ between
    ``before`` and ``after``.
    """
    channels = target.width * target.height * 4
    if channels == 0:
        raise ValueError("cannot compare empty bitmaps")
    total = int((score * 255.0) * (score * 255.0) * channels)
    for line in lines:
        y = line.y
        for x in range(line.x1, line.x2 + 1):
            t = target.get_pixel(x, y)
            b = before.get_pixel(x, y)
            a = after.get_pixel(x, y)
            total -= sum((tc - bc) ** 2 for tc, bc in zip(t, b))
            total += sum((tc - ac) ** 2 for tc, ac in zip(t, a))
    total &= _U64_MASK
    return math.sqrt(total / channels) / 255.0


def default_energy_function(
    lines: Sequence[Scanline],
    alpha: int,
    target: Bitmap,
    current: Bitmap,
    buffer: Bitmap,
    score: float,
) -> float:
    """Score the improvement of drawing a shape covering ``lines``; lower is better.

    ``buffer`` is overwritten under ``lines`` with ``current`` blended with the
    best-fitting colour.
    """
    lines = list(lines)
    color = compute_color(target, current, lines, alpha)
    copy_lines(buffer, current, lines)
    draw_lines(buffer, color, lines)
    return difference_partial(target, current, buffer, score, lines)