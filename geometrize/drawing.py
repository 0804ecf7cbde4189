"""Blending and copying of scanline-covered pixels."""

from __future__ import annotations

from typing import Iterable

from .bitmap import Bitmap
from .color import Rgba
from .scanline import Scanline

_U8_MAX = 0xFF
_U16_MAX = 0xFFFF
_U32_MASK = 0xFFFFFFFF


def _premultiplied(channel: int, alpha: int) -> int:
    return ((channel | (channel << 8)) * alpha) // _U8_MAX


def draw_lines(image: Bitmap, color: Rgba, lines: Iterable[Scanline]) -> None:
    """Alpha-blend ``color`` over every pixel of ``image`` covered by ``lines``.

    Scanlines are inclusive at both ends. A pixel outside the image raises
    IndexError.
    """
    sr = _premultiplied(color.r, color.a)
    sg = _premultiplied(color.g, color.a)
    sb = _premultiplied(color.b, color.a)
    sa = color.a | (color.a << 8)

    m = _U16_MAX
    aa = (m - sa) * 257

    def blend(dest: int, source: int) -> int:
        return ((((dest * aa + source * m) & _U32_MASK) // m) >> 8) & _U8_MAX

    for line in lines:
        for x in range(line.x1, line.x2 + 1):
            d = image.get_pixel(x, line.y)
            image.set_pixel(
                x,
                line.y,
                Rgba(blend(d.r, sr), blend(d.g, sg), blend(d.b, sb), blend(d.a, sa)),
            )


def copy_lines(destination: Bitmap, source: Bitmap, lines: Iterable[Scanline]) -> None:
    """Copy the pixels covered by ``lines`` from ``source`` into ``destination``.

    A pixel outside either bitmap raises IndexError.
    """
    for line in lines:
        for x in range(line.x1, line.x2 + 1):
            destination.set_pixel(x, line.y, source.get_pixel(x, line.y))