from __future__ import annotations

from .palette import NAMED_COLORS
from .types import RasterBuffer, Rgba

DEMO_WIDTH = 12
DEMO_HEIGHT = 10


def make_demo_image(background: Rgba, width: int = DEMO_WIDTH, height: int = DEMO_HEIGHT) -> RasterBuffer:
    """Build the framed test image: yellow left, blue right, red top, green bottom."""
    if width < 2 or height < 2:
        raise ValueError("Demo image needs at least 2x2 pixels")
    image = RasterBuffer(width, height, background)
    x0, x9 = 0, image.width - 1
    y0, y9 = 0, image.height - 1
    for y in range(1, y9):
        image[y, x0] = NAMED_COLORS["YELLOW"]
        image[y, x9] = NAMED_COLORS["BLUE"]
    image.scan_line(y0).fill(NAMED_COLORS["RED"])
    image.scan_line(y9).fill(NAMED_COLORS["GREEN"])
    return image
