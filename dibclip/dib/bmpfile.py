from __future__ import annotations

import struct

from .constants import BITMAPFILEHEADER_SIZE, BITMAPINFOHEADER_SIZE, CHANNEL_MASKS_SIZE
from .headers import BitmapFileHeader

_SIZE_FIELDS = struct.Struct("<I 16x I")


def dib_to_bmp(dib: bytes) -> bytes:
    """Prefix a DIB produced by this package with a BITMAPFILEHEADER.

    The pixel offset accounts for a trailing channel mask block, which is
    detected from the stream length and the declared image size.
    """
    if len(dib) < BITMAPINFOHEADER_SIZE:
        raise ValueError(f"DIB too short: {len(dib)} bytes")
    header_size, size_image = _SIZE_FIELDS.unpack_from(dib, 0)
    extra = len(dib) - header_size - size_image
    if extra not in (0, CHANNEL_MASKS_SIZE):
        raise ValueError(f"Unexpected DIB layout: {extra} bytes between header and pixels")
    pixel_offset = BITMAPFILEHEADER_SIZE + header_size + extra
    file_header = BitmapFileHeader(file_size=BITMAPFILEHEADER_SIZE + len(dib), pixel_offset=pixel_offset)
    return file_header.pack() + dib
