"""Export bitmaps as BMP files or raw RGBA data."""

from __future__ import annotations

import struct

from .bitmap import Bitmap

_FILE_HEADER_SIZE = 14
_INFO_HEADER_SIZE = 40
_BMP_TYPE = 19778  # "BM" read as a little-endian 16-bit value
_BITS_PER_PIXEL = 24


def export_bmp(bitmap: Bitmap) -> bytes:
    """Encode the bitmap as a 24-bit uncompressed BMP file.

    Rows are written in the bitmap's own order (top row first) and padded
    to a multiple of four bytes; alpha is discarded.
    """
    width = bitmap.width
    height = bitmap.height
    row_bytes = width * 3
    padding = (4 - row_bytes % 4) % 4
    image_size = ((((row_bytes + padding) & 0x0000FFFC) * height)) & 0xFFFFFFFF
    offset = _INFO_HEADER_SIZE + _FILE_HEADER_SIZE
    file_size = (offset + image_size) & 0xFFFFFFFF

    header = struct.pack(
        "<HIHHI",
        _BMP_TYPE,
        file_size,
        0,
        0,
        offset,
    )
    info = struct.pack(
        "<IIIHHIIIIII",
        _INFO_HEADER_SIZE,
        width,
        height,
        1,
        _BITS_PER_PIXEL,
        0,
        image_size,
        0,
        0,
        0,
        0,
    )

    out = bytearray(header)
    out += info
    pad = bytes(padding)
    data = bitmap.data
    stride = width * 4
    for y in range(height):
        row = data[y * stride : (y + 1) * stride]
        for x in range(0, stride, 4):
            r, g, b = row[x], row[x + 1], row[x + 2]
            out += bytes((b, g, r))
        out += pad
    return bytes(out)


def export_bitmap_data(bitmap: Bitmap) -> bytes:
    """Return the bitmap's pixels as raw row-major RGBA8888 bytes."""
    return bytes(bitmap.data)