from __future__ import annotations

import struct
from typing import Dict

import pytest

from dibclip.raster import NAMED_COLORS, RasterBuffer, Rgba, make_demo_image
from dibclip.settings import FORMATS_ENV_VAR, OUTPUT_ENV_VAR

LEGACY_FIELDS = (
    "size",
    "width",
    "height",
    "planes",
    "bit_count",
    "compression",
    "size_image",
    "x_pels_per_meter",
    "y_pels_per_meter",
    "clr_used",
    "clr_important",
)
V5_EXTRA_FIELDS = ("red_mask", "green_mask", "blue_mask", "alpha_mask", "cs_type")


def decode_header(dib: bytes) -> Dict[str, int]:
    """Reference decoder for the header fields the encoders populate."""
    fields = dict(zip(LEGACY_FIELDS, struct.unpack_from("<I ii HH I I ii II", dib, 0)))
    if fields["size"] == 124:
        fields.update(zip(V5_EXTRA_FIELDS, struct.unpack_from("<IIII I", dib, 40)))
        fields["intent"] = struct.unpack_from("<I", dib, 108)[0]
        fields["tail"] = dib[60:108] + dib[112:124]
    return fields


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    monkeypatch.delenv(OUTPUT_ENV_VAR, raising=False)
    monkeypatch.delenv(FORMATS_ENV_VAR, raising=False)


@pytest.fixture
def demo_white() -> RasterBuffer:
    return make_demo_image(NAMED_COLORS["WHITE"])


@pytest.fixture
def gradient() -> RasterBuffer:
    """5x3 raster where every sample is distinct."""
    raster = RasterBuffer(5, 3, Rgba())
    for y in range(raster.height):
        for x in range(raster.width):
            raster[y, x] = Rgba(b=x * 10, g=y * 20, r=100 + x + y, a=200 - y)
    return raster
