from .bmpfile import dib_to_bmp
from .constants import CHANNEL_MASKS, ClipboardFormat, Compression, GamutMappingIntent, LogicalColorSpace
from .encoding import build_extended_dib, build_legacy_dib, write_channel_masks, write_pixel_rows
from .formats import DibFormat, DibVariant, EncodedDescriptor, clipboard_format_for, encode_for_clipboard
from .headers import BitmapFileHeader, BitmapInfoHeader, BitmapV5Header

__all__ = [
    "BitmapFileHeader",
    "BitmapInfoHeader",
    "BitmapV5Header",
    "build_extended_dib",
    "build_legacy_dib",
    "CHANNEL_MASKS",
    "ClipboardFormat",
    "clipboard_format_for",
    "Compression",
    "DibFormat",
    "DibVariant",
    "dib_to_bmp",
    "encode_for_clipboard",
    "EncodedDescriptor",
    "GamutMappingIntent",
    "LogicalColorSpace",
    "write_channel_masks",
    "write_pixel_rows",
]
