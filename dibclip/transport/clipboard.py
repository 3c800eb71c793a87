from __future__ import annotations

import sys

from ..errors import AllocationFailure, SinkUnavailable


def _pywin32_missing_message() -> str:
    return "Clipboard support requires the 'pywin32' package on Windows. Install with: pip install pywin32"


def _win32_imports():
    if sys.platform != "win32":
        raise SinkUnavailable("The clipboard sink is only available on Windows; use --output instead")
    try:
        import pywintypes
        import win32clipboard
    except Exception as exc:
        raise SinkUnavailable(_pywin32_missing_message()) from exc
    return win32clipboard, pywintypes


def clipboard_available() -> bool:
    try:
        _win32_imports()
    except SinkUnavailable:
        return False
    return True


class ClipboardSink:
    """Windows clipboard, held open for the duration of a ``with`` block.

    The clipboard is emptied once, before the first buffer is published, so
    several formats of the same image end up on it together.
    """

    def __init__(self) -> None:
        self._clipboard = None
        self._error = None
        self._need_clear = True

    def __enter__(self) -> "ClipboardSink":
        win32clipboard, pywintypes = _win32_imports()
        try:
            win32clipboard.OpenClipboard()
        except pywintypes.error as exc:
            raise SinkUnavailable(f"Cannot open clipboard: {exc}") from exc
        self._clipboard = win32clipboard
        self._error = pywintypes.error
        self._need_clear = True
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        clipboard = self._clipboard
        self._clipboard = None
        if clipboard is not None:
            clipboard.CloseClipboard()

    def publish(self, format_id: int, data: bytes) -> None:
        clipboard = self._clipboard
        if clipboard is None:
            raise SinkUnavailable("Clipboard is not open")
        try:
            if self._need_clear:
                clipboard.EmptyClipboard()
                self._need_clear = False
            clipboard.SetClipboardData(int(format_id), bytes(data))
        except self._error as exc:
            raise AllocationFailure(f"Cannot place {len(data)} bytes on the clipboard: {exc}") from exc
