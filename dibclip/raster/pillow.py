from __future__ import annotations

import struct

from PIL import Image, ImageOps

from .types import RasterBuffer, Rgba


def raster_from_image(img: Image.Image) -> RasterBuffer:
    """Copy a Pillow image of any mode into a RasterBuffer."""
    if img.mode != "RGBA":
        img = img.convert("RGBA")
    width, height = img.size
    data = img.tobytes("raw", "BGRA")
    samples = [Rgba(b, g, r, a) for b, g, r, a in struct.iter_unpack("4B", data)]
    return RasterBuffer.from_samples(width, height, samples)


def raster_to_image(raster: RasterBuffer) -> Image.Image:
    """Build an RGBA Pillow image holding the raster's samples."""
    data = b"".join(sample.to_bytes() for sample in raster.samples())
    return Image.frombytes("RGBA", raster.size, data, "raw", "BGRA")


def load_raster(path: str) -> RasterBuffer:
    with Image.open(path) as img:
        img = ImageOps.exif_transpose(img)
        return raster_from_image(img)
