from .clipboard import ClipboardSink, clipboard_available
from .files import BmpDirectorySink
from .memory import MemorySink
from .types import Sink

__all__ = ["BmpDirectorySink", "clipboard_available", "ClipboardSink", "MemorySink", "Sink"]
