from __future__ import annotations

import pytest

from dibclip.copy_job import DEFAULT_FORMATS
from dibclip.dib.formats import DibFormat
from dibclip.settings import FORMATS_ENV_VAR, OUTPUT_ENV_VAR, default_formats, default_output_dir, parse_formats


def test_defaults_without_environment():
    assert default_output_dir() is None
    assert default_formats() == DEFAULT_FORMATS


def test_environment_overrides(monkeypatch, tmp_path):
    monkeypatch.setenv(OUTPUT_ENV_VAR, str(tmp_path))
    monkeypatch.setenv(FORMATS_ENV_VAR, "v5-short, legacy")
    assert default_output_dir() == str(tmp_path)
    assert default_formats() == (DibFormat.EXTENDED_DIB_SHORT, DibFormat.LEGACY_DIB)


def test_invalid_environment(monkeypatch):
    monkeypatch.setenv(FORMATS_ENV_VAR, "legacy,gif")
    with pytest.raises(ValueError, match=FORMATS_ENV_VAR):
        default_formats()


def test_parse_formats_rejects_empty():
    with pytest.raises(ValueError):
        parse_formats(" , ")
