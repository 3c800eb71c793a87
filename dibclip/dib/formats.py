from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Tuple

from ..raster.types import RasterBuffer
from .constants import ClipboardFormat
from .encoding import build_extended_dib, build_legacy_dib


class DibVariant(enum.Enum):
    LEGACY = "legacy"
    EXTENDED = "extended"


@dataclass(frozen=True)
class EncodedDescriptor:
    variant: DibVariant
    include_palette: bool


class DibFormat(enum.Enum):
    """Formats a raster can be published in."""

    LEGACY_DIB = "legacy"
    EXTENDED_DIB_SHORT = "v5-short"
    EXTENDED_DIB_LONG = "v5-long"

    @property
    def cli_name(self) -> str:
        return self.value

    def descriptor(self) -> EncodedDescriptor:
        if self is DibFormat.LEGACY_DIB:
            return EncodedDescriptor(DibVariant.LEGACY, include_palette=True)
        return EncodedDescriptor(DibVariant.EXTENDED, include_palette=self is DibFormat.EXTENDED_DIB_LONG)

    @classmethod
    def from_name(cls, name: str) -> "DibFormat":
        key = name.strip().lower()
        for fmt in cls:
            if fmt.value == key or fmt.name.lower() == key:
                return fmt
        raise ValueError(f"Unknown format '{name}'. Known formats: " + ", ".join(f.value for f in cls))


def clipboard_format_for(fmt: DibFormat) -> ClipboardFormat:
    if not isinstance(fmt, DibFormat):
        raise ValueError(f"Unsupported format: {fmt!r}")
    if fmt.descriptor().variant is DibVariant.LEGACY:
        return ClipboardFormat.CF_DIB
    return ClipboardFormat.CF_DIBV5


def encode_descriptor(raster: RasterBuffer, descriptor: EncodedDescriptor) -> bytes:
    if descriptor.variant is DibVariant.LEGACY:
        return build_legacy_dib(raster)
    return build_extended_dib(raster, descriptor.include_palette)


def encode_for_clipboard(raster: RasterBuffer, fmt: DibFormat) -> Tuple[ClipboardFormat, bytes]:
    """Encode ``raster`` in ``fmt`` and return the clipboard format id with the bytes.

    Raises ValueError for an unknown format or oversized raster and
    AllocationFailure when the output cannot be built.
    """
    format_id = clipboard_format_for(fmt)
    return format_id, encode_descriptor(raster, fmt.descriptor())
