from .demo import make_demo_image
from .palette import NAMED_COLORS, color_by_name
from .types import BYTES_PER_PIXEL, WHITE, RasterBuffer, Rgba, ScanLine

__all__ = [
    "BYTES_PER_PIXEL",
    "color_by_name",
    "make_demo_image",
    "NAMED_COLORS",
    "RasterBuffer",
    "Rgba",
    "ScanLine",
    "WHITE",
]
