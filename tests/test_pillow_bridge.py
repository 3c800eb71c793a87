from __future__ import annotations

from PIL import Image

from dibclip.raster import Rgba
from dibclip.raster.pillow import load_raster, raster_from_image, raster_to_image


def test_raster_to_image(gradient):
    img = raster_to_image(gradient)
    assert img.mode == "RGBA"
    assert img.size == gradient.size
    sample = gradient[2, 3]
    assert img.getpixel((3, 2)) == (sample.r, sample.g, sample.b, sample.a)


def test_raster_from_rgb_image_is_opaque():
    img = Image.new("RGB", (3, 2), (10, 20, 30))
    img.putpixel((2, 1), (1, 2, 3))
    raster = raster_from_image(img)
    assert raster.size == (3, 2)
    assert raster[0, 0] == Rgba(b=30, g=20, r=10, a=255)
    assert raster[1, 2] == Rgba(b=3, g=2, r=1, a=255)


def test_image_round_trip(gradient):
    assert raster_from_image(raster_to_image(gradient)).samples() == gradient.samples()


def test_load_raster(tmp_path):
    path = tmp_path / "in.png"
    Image.new("RGBA", (4, 3), (1, 2, 3, 4)).save(path)
    raster = load_raster(str(path))
    assert raster.size == (4, 3)
    assert raster[2, 3] == Rgba(b=3, g=2, r=1, a=4)
