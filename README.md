# geometrize

Building blocks for approximating an image with simple geometric shapes.
The package holds RGBA bitmaps, turns polygons and lines into scanlines,
blends scanlines into an image, picks the best colour for a region and
measures how far one image is from another. It is pure Python and needs no
third-party libraries.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Overview

| Module | Contents |
| --- | --- |
| `geometrize.color` | `Rgba`, an immutable RGBA8888 colour (channels checked to be 0-255) |
| `geometrize.bitmap` | `Bitmap`, a width × height row-major RGBA pixel buffer |
| `geometrize.scanline` | `Scanline` and `trim_scanlines` |
| `geometrize.commonutil` | `seed_random_generator`, `random_range`, `clamp`, `average_image_color`, `scanlines_contain_transparent_pixels`, `Bounds`, `ShapeBoundsOptions`, `map_shape_bounds_to_image` |
| `geometrize.rasterizer` | `bresenham`, `scanlines_for_polygon`, `scanlines_overlap`, `scanlines_contain`, `scanline_pixels` |
| `geometrize.drawing` | `draw_lines` (alpha blending) and `copy_lines` |
| `geometrize.core` | `compute_color`, `difference_full`, `difference_partial`, `default_energy_function` |
| `geometrize.exporters` | `export_bmp` and `export_bitmap_data` |

Scanlines are inclusive at both ends. `trim_scanlines` drops scanlines
outside the vertical range or with `x1 > x2` and clamps the rest into the
area. Reading or writing a pixel outside a bitmap raises `IndexError`;
`difference_full` raises `ValueError` for bitmaps of different sizes.

## Example

```python
from geometrize.bitmap import Bitmap
from geometrize.color import Rgba
from geometrize.commonutil import average_image_color
from geometrize.core import compute_color, difference_full, difference_partial
from geometrize.drawing import draw_lines
from geometrize.exporters import export_bmp
from geometrize.rasterizer import scanlines_for_polygon
from geometrize.scanline import trim_scanlines

target = Bitmap.filled(64, 64, Rgba(200, 40, 40, 255))
current = Bitmap.filled(64, 64, average_image_color(target))
score = difference_full(target, current)

# Rasterize a triangle and keep only the part that lies inside the image.
lines = trim_scanlines(
    scanlines_for_polygon([(5.0, 5.0), (60.0, 10.0), (30.0, 58.0)]),
    0, 0, 64, 64,
)

# Find the colour that best fits the target under the triangle, then draw it.
color = compute_color(target, current, lines, 128)
before = current.copy()
draw_lines(current, color, lines)
score = difference_partial(target, before, current, score, lines)

with open("out.bmp", "wb") as handle:
    handle.write(export_bmp(current))
```

`export_bmp` writes a 24-bit uncompressed BMP, discarding alpha and padding
each row to a multiple of four bytes. `export_bitmap_data` returns the raw
RGBA8888 bytes, row by row.

Random numbers come from `random_range`, which draws from a generator that
belongs to the current thread. Call `seed_random_generator` first to get the
same results on every run.

## What the package does not do

There are no shape classes (rectangles, circles, ellipses, Béziers and so
on), no search loop that generates, mutates and picks shapes, and no
command-line tool. Images are not read from files, and the only outputs are
BMP files and raw RGBA bytes: there is no SVG or JSON export. The pieces
here score and draw scanline regions; putting them together into a full
image approximation is left to the caller.