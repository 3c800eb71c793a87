from __future__ import annotations

from pathlib import Path
from typing import List, Union

from ..dib.bmpfile import dib_to_bmp
from ..dib.constants import ClipboardFormat
from ..errors import SinkUnavailable


class BmpDirectorySink:
    """Writes every published DIB as a .bmp file in a directory."""

    def __init__(self, directory: Union[str, Path], stem: str = "clipboard") -> None:
        self._directory = Path(directory)
        self._stem = stem
        self._open = False
        self.paths: List[Path] = []

    def __enter__(self) -> "BmpDirectorySink":
        try:
            self._directory.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise SinkUnavailable(f"Cannot use output directory {self._directory}: {exc}") from exc
        self._open = True
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self._open = False

    def publish(self, format_id: int, data: bytes) -> None:
        if not self._open:
            raise SinkUnavailable("Directory sink is not open")
        path = self._directory / f"{self._stem}-{len(self.paths) + 1}-{self._tag(format_id)}.bmp"
        try:
            path.write_bytes(dib_to_bmp(data))
        except OSError as exc:
            raise SinkUnavailable(f"Cannot write {path}: {exc}") from exc
        self.paths.append(path)

    @staticmethod
    def _tag(format_id: int) -> str:
        try:
            return ClipboardFormat(format_id).name
        except ValueError:
            return str(int(format_id))
