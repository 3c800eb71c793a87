from __future__ import annotations

from types import TracebackType
from typing import Any, Optional, Protocol, Type


class Sink(Protocol):
    """Publish target for encoded buffers, acquired with ``with``."""

    def __enter__(self) -> Any: ...

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> Optional[bool]: ...

    def publish(self, format_id: int, data: bytes) -> None: ...
