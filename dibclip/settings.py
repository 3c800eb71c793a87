from __future__ import annotations

import os
from typing import Optional, Tuple

from .copy_job import DEFAULT_FORMATS
from .dib.formats import DibFormat

OUTPUT_ENV_VAR = "DIBCLIP_OUTPUT"
FORMATS_ENV_VAR = "DIBCLIP_FORMATS"
DEFAULT_BACKGROUND = "SEMI_AQUA"


def default_output_dir() -> Optional[str]:
    value = os.environ.get(OUTPUT_ENV_VAR, "").strip()
    return value or None


def parse_formats(value: str) -> Tuple[DibFormat, ...]:
    names = [part for part in (p.strip() for p in value.split(",")) if part]
    if not names:
        raise ValueError("Empty format list")
    return tuple(DibFormat.from_name(name) for name in names)


def default_formats() -> Tuple[DibFormat, ...]:
    value = os.environ.get(FORMATS_ENV_VAR, "").strip()
    if not value:
        return DEFAULT_FORMATS
    try:
        return parse_formats(value)
    except ValueError as exc:
        raise ValueError(f"Invalid ${FORMATS_ENV_VAR}: {exc}") from exc
