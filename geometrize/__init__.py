"""Building blocks for approximating images with shapes: bitmaps, scanlines, colour fitting, error measures and BMP export."""

__version__ = "0.1.0"

__all__ = ["bitmap", "color", "commonutil", "core", "drawing", "exporters", "rasterizer", "scanline"]