from .copy_job import CopyJobBuilder, CopySettings, Payload, publish_payloads
from .dib import ClipboardFormat, DibFormat, build_extended_dib, build_legacy_dib, encode_for_clipboard
from .errors import AllocationFailure, DibClipError, OutOfRangeAccess, SinkUnavailable
from .raster import NAMED_COLORS, RasterBuffer, Rgba, make_demo_image

__version__ = "0.1.0"

__all__ = [
    "AllocationFailure",
    "build_extended_dib",
    "build_legacy_dib",
    "ClipboardFormat",
    "CopyJobBuilder",
    "CopySettings",
    "DibClipError",
    "DibFormat",
    "encode_for_clipboard",
    "make_demo_image",
    "NAMED_COLORS",
    "OutOfRangeAccess",
    "Payload",
    "publish_payloads",
    "RasterBuffer",
    "Rgba",
    "SinkUnavailable",
]
