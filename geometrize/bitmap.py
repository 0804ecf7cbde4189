"""A simple RGBA8888 bitmap."""

from __future__ import annotations

from .color import Rgba

_DEPTH = 4


class Bitmap:
    """A width x height image stored as row-major RGBA8888 bytes."""

    __slots__ = ("width", "height", "data")

    def __init__(self, width: int, height: int, data: bytes | bytearray) -> None:
        if width < 0 or height < 0:
            raise ValueError(f"bitmap dimensions must be non-negative: {width}x{height}")
        expected = width * height * _DEPTH
        if len(data) != expected:
            raise ValueError(
                f"bitmap data must be {expected} bytes for {width}x{height}, got {len(data)}"
            )
        self.width = width
        self.height = height
        self.data = bytearray(data)

    @classmethod
    def filled(cls, width: int, height: int, color: Rgba) -> Bitmap:
        """Create a bitmap with every pixel set to ``color``."""
        if width < 0 or height < 0:
            raise ValueError(f"bitmap dimensions must be non-negative: {width}x{height}")
        return cls(width, height, color.to_bytes() * (width * height))

    def copy(self) -> Bitmap:
        """Return an independent copy of this bitmap."""
        return Bitmap(self.width, self.height, self.data)

    def _index(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(
                f"pixel ({x}, {y}) outside {self.width}x{self.height} bitmap"
            )
        return (self.width * y + x) * _DEPTH

    def get_pixel(self, x: int, y: int) -> Rgba:
        """Return the colour of the pixel at (x, y)."""
        index = self._index(x, y)
        return Rgba(*self.data[index : index + _DEPTH])

    def set_pixel(self, x: int, y: int, color: Rgba) -> None:
        """Set the pixel at (x, y) to ``color``."""
        index = self._index(x, y)
        self.data[index : index + _DEPTH] = color.to_bytes()

    def fill(self, color: Rgba) -> None:
        """Set every pixel to ``color``."""
        self.data[:] = color.to_bytes() * self.pixel_count()

    def pixel_count(self) -> int:
        """Return the number of pixels in the bitmap."""
        return self.width * self.height

    def __len__(self) -> int:
        """Return the size of the pixel data in bytes."""
        return len(self.data)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Bitmap):
            return NotImplemented
        return (
            self.width == other.width
            and self.height == other.height
            and self.data == other.data
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Bitmap(width={self.width}, height={self.height})"