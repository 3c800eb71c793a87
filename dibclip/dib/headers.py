from __future__ import annotations

import struct
from dataclasses import astuple, dataclass
from typing import ClassVar

from .constants import (
    BITMAPINFOHEADER_SIZE,
    BITMAPV5HEADER_SIZE,
    BITS_PER_PIXEL,
    PLANES,
    Compression,
)


def _pack(layout: struct.Struct, *values: int) -> bytes:
    try:
        return layout.pack(*[int(v) for v in values])
    except struct.error as exc:
        raise ValueError(f"Header field out of range: {exc}") from exc


@dataclass
class BitmapInfoHeader:
    """BITMAPINFOHEADER: the 40-byte legacy DIB header."""

    _struct_: ClassVar[struct.Struct] = struct.Struct("<I ii HH I I ii II")

    width: int = 0
    height: int = 0
    planes: int = PLANES
    bit_count: int = BITS_PER_PIXEL
    compression: int = Compression.BI_BITFIELDS
    size_image: int = 0
    x_pels_per_meter: int = 0
    y_pels_per_meter: int = 0
    clr_used: int = 0
    clr_important: int = 0

    @property
    def size(self) -> int:
        return BITMAPINFOHEADER_SIZE

    def pack(self) -> bytes:
        return _pack(self._struct_, self.size, *astuple(self))

    @classmethod
    def calcsize(cls) -> int:
        return cls._struct_.size


@dataclass
class BitmapV5Header:
    """BITMAPV5HEADER: the 124-byte extended DIB header.

    Endpoints, gamma and profile fields are always written as zero.
    """

    _struct_: ClassVar[struct.Struct] = struct.Struct("<I ii HH I I ii II IIII I 9I III I II I")

    width: int = 0
    height: int = 0
    planes: int = PLANES
    bit_count: int = BITS_PER_PIXEL
    compression: int = Compression.BI_BITFIELDS
    size_image: int = 0
    x_pels_per_meter: int = 0
    y_pels_per_meter: int = 0
    clr_used: int = 0
    clr_important: int = 0
    red_mask: int = 0
    green_mask: int = 0
    blue_mask: int = 0
    alpha_mask: int = 0
    cs_type: int = 0
    intent: int = 0

    @property
    def size(self) -> int:
        return BITMAPV5HEADER_SIZE

    def pack(self) -> bytes:
        endpoints = (0,) * 9
        gamma = (0, 0, 0)
        profile_data = profile_size = reserved = 0
        return _pack(
            self._struct_,
            self.size,
            self.width,
            self.height,
            self.planes,
            self.bit_count,
            self.compression,
            self.size_image,
            self.x_pels_per_meter,
            self.y_pels_per_meter,
            self.clr_used,
            self.clr_important,
            self.red_mask,
            self.green_mask,
            self.blue_mask,
            self.alpha_mask,
            self.cs_type,
            *endpoints,
            *gamma,
            self.intent,
            profile_data,
            profile_size,
            reserved,
        )

    @classmethod
    def calcsize(cls) -> int:
        return cls._struct_.size


@dataclass
class BitmapFileHeader:
    """BITMAPFILEHEADER: the 14-byte prefix of a .bmp file."""

    _struct_: ClassVar[struct.Struct] = struct.Struct("<2s I HH I")

    file_size: int = 0
    pixel_offset: int = 0

    def pack(self) -> bytes:
        try:
            return self._struct_.pack(b"BM", self.file_size, 0, 0, self.pixel_offset)
        except struct.error as exc:
            raise ValueError(f"Header field out of range: {exc}") from exc

    @classmethod
    def calcsize(cls) -> int:
        return cls._struct_.size

