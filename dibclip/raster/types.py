from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, List, Tuple

from ..errors import AllocationFailure, OutOfRangeAccess

BYTES_PER_PIXEL = 4


@dataclass(frozen=True)
class Rgba:
    """One 32-bit color sample, fields in wire order (blue, green, red, alpha)."""

    b: int = 0xFF
    g: int = 0xFF
    r: int = 0xFF
    a: int = 0xFF

    def __post_init__(self) -> None:
        for name in ("b", "g", "r", "a"):
            value = getattr(self, name)
            if not isinstance(value, int) or not 0 <= value <= 0xFF:
                raise ValueError(f"Channel {name} must be an int in 0..255, got {value!r}")

    def to_bytes(self) -> bytes:
        return bytes((self.b, self.g, self.r, self.a))

    @classmethod
    def from_rgba(cls, r: int, g: int, b: int, a: int = 0xFF) -> "Rgba":
        return cls(b=b, g=g, r=r, a=a)


WHITE = Rgba()


def _require_rgba(color: object) -> Rgba:
    if not isinstance(color, Rgba):
        raise TypeError(f"Expected an Rgba sample, got {type(color).__name__}")
    return color


class ScanLine:
    """Live view over one logical row of a RasterBuffer.

    The view is bound to the storage it was taken from; after the buffer is
    resized every access raises OutOfRangeAccess.
    """

    def __init__(self, raster: "RasterBuffer", y: int) -> None:
        self._raster = raster
        self._samples = raster._samples
        self._width = raster.width
        self._start = y * raster.width
        self.y = y

    def __len__(self) -> int:
        return self._width

    def __iter__(self) -> Iterator[Rgba]:
        self._check_live()
        return iter(self._samples[self._start : self._start + self._width])

    def __getitem__(self, x: int) -> Rgba:
        self._check(x)
        return self._samples[self._start + x]

    def __setitem__(self, x: int, color: Rgba) -> None:
        self._check(x)
        self._samples[self._start + x] = _require_rgba(color)

    def fill(self, color: Rgba) -> None:
        """Set every sample of the row to ``color``."""
        self._check_live()
        color = _require_rgba(color)
        self._samples[self._start : self._start + self._width] = [color] * self._width

    def to_bytes(self) -> bytes:
        return b"".join(sample.to_bytes() for sample in self)

    def _check_live(self) -> None:
        if self._raster._samples is not self._samples:
            raise OutOfRangeAccess(f"Scan line {self.y} belongs to storage replaced by resize")

    def _check(self, x: int) -> None:
        self._check_live()
        if x < 0 or x >= self._width:
            raise OutOfRangeAccess(f"x out of range: {x} (width {self._width})")


class RasterBuffer:
    """Row-major, top-down grid of Rgba samples.

    Indices are valid for ``0 <= y < height`` and ``0 <= x < width``;
    anything else raises OutOfRangeAccess.
    """

    def __init__(self, width: int = 0, height: int = 0, color: Rgba = WHITE) -> None:
        self._width = 0
        self._height = 0
        self._samples: List[Rgba] = []
        self.resize(width, height, color)

    def resize(self, width: int, height: int, color: Rgba) -> None:
        """Replace the storage with ``width*height`` copies of ``color``.

        Raises ValueError for negative dimensions, TypeError when ``color`` is
        not an Rgba and AllocationFailure when the storage cannot be built.
        On failure the buffer is left unchanged.
        """
        if width < 0 or height < 0:
            raise ValueError(f"Dimensions must not be negative, got {width}x{height}")
        color = _require_rgba(color)
        try:
            samples = [color] * (width * height)
        except (MemoryError, OverflowError) as exc:
            raise AllocationFailure(f"Cannot allocate {width}x{height} raster") from exc
        self._samples = samples
        self._width = width
        self._height = height

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def size(self) -> Tuple[int, int]:
        return (self._width, self._height)

    @property
    def area(self) -> int:
        return self._width * self._height

    @property
    def byte_size(self) -> int:
        return self.area * BYTES_PER_PIXEL

    def at(self, y: int, x: int) -> Rgba:
        return self._samples[self._index(y, x)]

    def put(self, y: int, x: int, color: Rgba) -> None:
        self._samples[self._index(y, x)] = _require_rgba(color)

    def __getitem__(self, key: Tuple[int, int]) -> Rgba:
        y, x = key
        return self.at(y, x)

    def __setitem__(self, key: Tuple[int, int], color: Rgba) -> None:
        y, x = key
        self.put(y, x, color)

    def scan_line(self, y: int) -> ScanLine:
        self._check_row(y)
        return ScanLine(self, y)

    def row_bytes(self, y: int) -> bytes:
        """Return the in-memory bytes of logical row ``y``."""
        return self.scan_line(y).to_bytes()

    def samples(self) -> List[Rgba]:
        return list(self._samples)

    @classmethod
    def from_samples(cls, width: int, height: int, samples: Iterable[Rgba]) -> "RasterBuffer":
        """Build a buffer from row-major samples; the count must be ``width*height``."""
        samples = [_require_rgba(sample) for sample in samples]
        if width < 0 or height < 0 or len(samples) != width * height:
            raise ValueError(f"Expected {width}x{height} samples, got {len(samples)}")
        raster = cls()
        raster._samples = samples
        raster._width = width
        raster._height = height
        return raster

    def copy(self) -> "RasterBuffer":
        clone = RasterBuffer()
        clone._width = self._width
        clone._height = self._height
        clone._samples = list(self._samples)
        return clone

    def _index(self, y: int, x: int) -> int:
        if y < 0 or y >= self._height or x < 0 or x >= self._width:
            raise OutOfRangeAccess(f"y/x out of range: ({y}, {x}) in {self._width}x{self._height}")
        return y * self._width + x

    def _check_row(self, y: int) -> None:
        if y < 0 or y >= self._height:
            raise OutOfRangeAccess(f"y out of range: {y} (height {self._height})")
