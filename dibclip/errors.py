from __future__ import annotations


class DibClipError(Exception):
    """Base class for every error raised by dibclip."""


class OutOfRangeAccess(DibClipError, IndexError):
    """Row or column index outside the raster bounds."""


class AllocationFailure(DibClipError, MemoryError):
    """Storage for a raster, an encoded buffer or clipboard memory could not be obtained."""


class SinkUnavailable(DibClipError, RuntimeError):
    """The publish target cannot be acquired or has already been released."""
