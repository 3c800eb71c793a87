from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

from .dib.constants import ClipboardFormat
from .dib.formats import DibFormat, encode_for_clipboard
from .raster.pillow import load_raster
from .raster.types import RasterBuffer
from .transport.types import Sink

SUPPORTED_EXTENSIONS = {".png", ".jpg", ".jpeg", ".gif", ".bmp", ".tif", ".tiff"}
DEFAULT_FORMATS: Tuple[DibFormat, ...] = (DibFormat.LEGACY_DIB, DibFormat.EXTENDED_DIB_LONG)
DEFAULT_MAX_PIXELS = 1 << 26


@dataclass(frozen=True)
class Payload:
    format: DibFormat
    format_id: ClipboardFormat
    data: bytes


@dataclass
class CopySettings:
    formats: Tuple[DibFormat, ...] = DEFAULT_FORMATS
    max_pixels: int = DEFAULT_MAX_PIXELS


class CopyJobBuilder:
    def __init__(self, settings: Optional[CopySettings] = None) -> None:
        self.settings = settings or CopySettings()

    def build_from_raster(self, raster: RasterBuffer) -> List[Payload]:
        """Encode ``raster`` once per configured format.

        Every payload is built before anything is returned, so a failure
        (ValueError, AllocationFailure) leaves nothing half-encoded.
        """
        self._check_size(raster)
        if not self.settings.formats:
            raise ValueError("No output formats selected")
        payloads: List[Payload] = []
        for fmt in self.settings.formats:
            format_id, data = encode_for_clipboard(raster, fmt)
            payloads.append(Payload(fmt, format_id, data))
        return payloads

    def build_from_file(self, path: str) -> List[Payload]:
        self._validate_input_path(path)
        return self.build_from_raster(load_raster(path))

    def _check_size(self, raster: RasterBuffer) -> None:
        if raster.area > self.settings.max_pixels:
            raise ValueError(
                f"Image of {raster.width}x{raster.height} exceeds the limit of {self.settings.max_pixels} pixels"
            )

    @staticmethod
    def _validate_input_path(path: str) -> None:
        ext = os.path.splitext(path)[1].lower()
        if ext not in SUPPORTED_EXTENSIONS:
            raise ValueError("Supported formats: " + ", ".join(sorted(SUPPORTED_EXTENSIONS)))
        if not os.path.isfile(path):
            raise FileNotFoundError(f"File not found: {path}")


def publish_payloads(sink: Sink, payloads: Iterable[Payload]) -> int:
    """Open ``sink``, publish every payload and release it on every exit path."""
    payloads = list(payloads)
    count = 0
    with sink:
        for payload in payloads:
            sink.publish(payload.format_id, payload.data)
            count += 1
    return count
