from __future__ import annotations

import struct

from ..errors import AllocationFailure
from ..raster.types import RasterBuffer
from .constants import (
    BLUE_MASK,
    CHANNEL_MASKS,
    GREEN_MASK,
    RED_MASK,
    GamutMappingIntent,
    LogicalColorSpace,
)
from .headers import BitmapInfoHeader, BitmapV5Header

_MASKS = struct.Struct("<3I")


def write_channel_masks(out: bytearray) -> None:
    """Append the red/green/blue bit-field masks (12 bytes, little-endian)."""
    out += _MASKS.pack(*CHANNEL_MASKS)


def write_pixel_rows(out: bytearray, raster: RasterBuffer) -> None:
    """Append all rows bottom-up: last logical row first, row 0 last."""
    for y in range(raster.height - 1, -1, -1):
        out += raster.row_bytes(y)


def build_legacy_dib(raster: RasterBuffer) -> bytes:
    """Encode a raster as BITMAPINFOHEADER + channel masks + pixels.

    Raises ValueError when the dimensions do not fit the header fields and
    AllocationFailure when the output buffer cannot be built.
    """
    header = BitmapInfoHeader(
        width=raster.width,
        height=raster.height,
        size_image=raster.byte_size,
    )
    packed = header.pack()
    try:
        out = bytearray(packed)
        # BI_BITFIELDS under a 40-byte header needs the masks right after it.
        write_channel_masks(out)
        write_pixel_rows(out, raster)
        return bytes(out)
    except MemoryError as exc:
        raise AllocationFailure("Cannot allocate legacy DIB buffer") from exc


def build_extended_dib(raster: RasterBuffer, include_palette: bool) -> bytes:
    """Encode a raster as BITMAPV5HEADER [+ channel masks] + pixels.

    The masks are always embedded in the header; ``include_palette`` adds the
    trailing 12-byte copy some consumers expect. Alpha is not serialized, so
    the alpha mask stays zero. Raises ValueError and AllocationFailure like
    build_legacy_dib.
    """
    header = BitmapV5Header(
        width=raster.width,
        height=raster.height,
        size_image=raster.byte_size,
        clr_used=0,
        red_mask=RED_MASK,
        green_mask=GREEN_MASK,
        blue_mask=BLUE_MASK,
        alpha_mask=0,
        cs_type=LogicalColorSpace.LCS_sRGB,
        intent=GamutMappingIntent.LCS_GM_IMAGES,
    )
    packed = header.pack()
    try:
        out = bytearray(packed)
        if include_palette:
            write_channel_masks(out)
        write_pixel_rows(out, raster)
        return bytes(out)
    except MemoryError as exc:
        raise AllocationFailure("Cannot allocate extended DIB buffer") from exc
