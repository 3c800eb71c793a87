from __future__ import annotations

from typing import List, Tuple

from ..errors import SinkUnavailable


class MemorySink:
    """Records published buffers instead of sending them anywhere."""

    def __init__(self) -> None:
        self.records: List[Tuple[int, bytes]] = []
        self._open = False

    def __enter__(self) -> "MemorySink":
        if self._open:
            raise SinkUnavailable("Memory sink is already open")
        self._open = True
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self._open = False

    def publish(self, format_id: int, data: bytes) -> None:
        if not self._open:
            raise SinkUnavailable("Memory sink is not open")
        self.records.append((int(format_id), bytes(data)))
