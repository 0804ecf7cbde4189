"""RGBA8888 colour values."""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Iterator


@dataclass(frozen=True, slots=True)
class Rgba:
    """An immutable RGBA colour with 8-bit channels (0-255)."""

    r: int
    g: int
    b: int
    a: int

    def __post_init__(self) -> None:
        for field in fields(self):
            value = getattr(self, field.name)
            if not isinstance(value, int) or isinstance(value, bool):
                raise TypeError(f"channel {field.name} must be an int, got {value!r}")
            if not 0 <= value <= 255:
                raise ValueError(f"channel {field.name} out of range 0-255: {value}")

    def __iter__(self) -> Iterator[int]:
        yield self.r
        yield self.g
        yield self.b
        yield self.a

    def to_bytes(self) -> bytes:
        """Return the colour as four bytes in R, G, B, A order."""
        return bytes((self.r, self.g, self.b, self.a))