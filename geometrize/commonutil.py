"""Shared helpers: seeded randomness, clamping and image utilities."""

from __future__ import annotations

import math
import random
import threading
from dataclasses import dataclass
from typing import Iterable, TypeVar

from .bitmap import Bitmap
from .color import Rgba
from .scanline import Scanline, trim_scanlines

T = TypeVar("T")

_local = threading.local()


def _generator() -> random.Random:
    rng = getattr(_local, "rng", None)
    if rng is None:
        rng = random.Random()
        _local.rng = rng
    return rng


def seed_random_generator(seed: int) -> None:
    """Seed the thread-local random number generator."""
    _generator().seed(seed)


def random_range(lower: int, upper: int) -> int:
    """Return a random integer in [lower, upper] from the thread-local generator."""
    if lower > upper:
        raise ValueError(f"lower bound {lower} exceeds upper bound {upper}")
    return _generator().randint(lower, upper)


def clamp(value: T, lower: T, upper: T) -> T:
    """Clamp ``value`` into the range [lower, upper]."""
    return max(lower, min(value, upper))


@dataclass(frozen=True, slots=True)
class Bounds:
    """An inclusive pixel rectangle."""

    x_min: int
    y_min: int
    x_max: int
    y_max: int


@dataclass(slots=True)
class ShapeBoundsOptions:
    """Restricts shape placement to a region given in percent of the image."""

    enabled: bool = False
    x_min_percent: float = 0.0
    y_min_percent: float = 0.0
    x_max_percent: float = 100.0
    y_max_percent: float = 100.0


def average_image_color(image: Bitmap) -> Rgba:
    """Return the average RGB colour of the image, fully opaque.

    An empty image yields fully transparent black.
    """
    if len(image) == 0:
        return Rgba(0, 0, 0, 0)
    count = image.pixel_count()
    data = image.data
    return Rgba(
        sum(data[0::4]) // count,
        sum(data[1::4]) // count,
        sum(data[2::4]) // count,
        255,
    )


def scanlines_contain_transparent_pixels(
    scanlines: Iterable[Scanline], image: Bitmap, min_alpha: int
) -> bool:
    """Return True if any pixel under the scanlines has alpha below ``min_alpha``.

    The rightmost pixel of each scanline is not examined.
    """
    trimmed = trim_scanlines(scanlines, 0, 0, image.width, image.height)
    return any(
        image.get_pixel(x, line.y).a < min_alpha
        for line in trimmed
        for x in range(line.x1, line.x2)
    )


def _round_half_away(value: float) -> int:
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def map_shape_bounds_to_image(options: ShapeBoundsOptions, image: Bitmap) -> Bounds:
    """Map percentage bounds onto the image.

    Disabled options, or bounds one pixel wide or narrower along an axis,
    give the full image extent along that axis.
    """
    last_x = image.width - 1
    last_y = image.height - 1
    if not options.enabled:
        return Bounds(0, 0, last_x, last_y)

    x_min_px = options.x_min_percent / 100.0 * last_x
    y_min_px = options.y_min_percent / 100.0 * last_y
    x_max_px = options.x_max_percent / 100.0 * last_x
    y_max_px = options.y_max_percent / 100.0 * last_y

    x_min = _round_half_away(min(x_min_px, x_max_px, float(last_x)))
    y_min = _round_half_away(min(y_min_px, y_max_px, float(last_y)))
    x_max = _round_half_away(min(max(x_min_px, x_max_px), float(last_x)))
    y_max = _round_half_away(min(max(y_min_px, y_max_px), float(last_y)))

    if x_max - x_min <= 1:
        x_min, x_max = 0, last_x
    if y_max - y_min <= 1:
        y_min, y_max = 0, last_y

    return Bounds(x_min, y_min, x_max, y_max)