from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from .types import Rgba

NAMED_COLORS: Mapping[str, Rgba] = MappingProxyType(
    {
        "WHITE": Rgba(b=0xFF, g=0xFF, r=0xFF),
        "AQUA": Rgba(b=0xFF, g=0xFF, r=0x00),
        "MISTY": Rgba(b=0xE1, g=0xE4, r=0xFF),
        "SEMI_BLACK": Rgba(b=0x00, g=0x00, r=0x00, a=0x40),
        "SEMI_AQUA": Rgba(b=0xFF, g=0xFF, r=0x00, a=0x40),
        "SEMI_PINK": Rgba(b=0xFF, g=0x00, r=0xFF, a=0x40),
        "RED": Rgba(b=0x00, g=0x00, r=0xFF),
        "GREEN": Rgba(b=0x00, g=0xAA, r=0x00),
        "BLUE": Rgba(b=0xFF, g=0x00, r=0x00),
        "YELLOW": Rgba(b=0x00, g=0xD7, r=0xFF),
    }
)


def color_by_name(name: str) -> Rgba:
    """Look up a named color, ignoring case and dashes."""
    key = name.strip().upper().replace("-", "_")
    color = NAMED_COLORS.get(key)
    if color is None:
        raise ValueError(f"Unknown color '{name}'. Known colors: " + ", ".join(sorted(NAMED_COLORS)))
    return color
