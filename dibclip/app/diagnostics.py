from __future__ import annotations

import sys

from ..transport.clipboard import clipboard_available


def emit_startup_warnings(needs_clipboard: bool) -> None:
    if needs_clipboard and not clipboard_available():
        print(
            "WARNING: the Windows clipboard is not usable here (needs Windows and pywin32). "
            "Use --output DIR or --dry-run.",
            file=sys.stderr,
        )
