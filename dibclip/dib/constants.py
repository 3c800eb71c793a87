from __future__ import annotations

import enum
from typing import Tuple

BITMAPFILEHEADER_SIZE = 14
BITMAPINFOHEADER_SIZE = 40
BITMAPV5HEADER_SIZE = 124

BITS_PER_PIXEL = 32
PLANES = 1

RED_MASK = 0x00FF0000
GREEN_MASK = 0x0000FF00
BLUE_MASK = 0x000000FF
ALPHA_MASK = 0xFF000000

# Order in which the masks appear on the wire.
CHANNEL_MASKS: Tuple[int, int, int] = (RED_MASK, GREEN_MASK, BLUE_MASK)
CHANNEL_MASKS_SIZE = 12


class Compression(enum.IntEnum):
    BI_RGB = 0x0000
    BI_RLE8 = 0x0001
    BI_RLE4 = 0x0002
    BI_BITFIELDS = 0x0003
    BI_JPEG = 0x0004
    BI_PNG = 0x0005


class LogicalColorSpace(enum.IntEnum):
    LCS_CALIBRATED_RGB = 0x00000000
    LCS_sRGB = 0x73524742
    LCS_WINDOWS_COLOR_SPACE = 0x57696E20
    LCS_PROFILE_LINKED = 0x4C494E4B
    LCS_PROFILE_EMBEDDED = 0x4D424544


class GamutMappingIntent(enum.IntEnum):
    LCS_GM_BUSINESS = 0x00000001
    LCS_GM_GRAPHICS = 0x00000002
    LCS_GM_IMAGES = 0x00000004
    LCS_GM_ABS_COLORIMETRIC = 0x00000008


class ClipboardFormat(enum.IntEnum):
    """Standard Win32 clipboard format identifiers produced by the encoders."""

    CF_DIB = 8
    CF_DIBV5 = 17
