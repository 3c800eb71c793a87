from __future__ import annotations

import types

import pytest
from PIL import Image

from dibclip.dib.constants import ClipboardFormat
from dibclip.dib.formats import DibFormat, encode_for_clipboard
from dibclip.errors import AllocationFailure, SinkUnavailable
from dibclip.transport import BmpDirectorySink, ClipboardSink, MemorySink, clipboard_available
from dibclip.transport import clipboard as clipboard_module


class FakeWin32Error(Exception):
    pass


class FakeClipboard:
    def __init__(self, fail_open=False, fail_set=False):
        self.calls = []
        self.fail_open = fail_open
        self.fail_set = fail_set

    def OpenClipboard(self):
        self.calls.append("open")
        if self.fail_open:
            raise FakeWin32Error("busy")

    def EmptyClipboard(self):
        self.calls.append("empty")

    def SetClipboardData(self, fmt, data):
        self.calls.append(("set", fmt, len(data)))
        if self.fail_set:
            raise FakeWin32Error("no memory")

    def CloseClipboard(self):
        self.calls.append("close")


@pytest.fixture
def fake_win32(monkeypatch):
    def install(**kwargs):
        fake = FakeClipboard(**kwargs)
        pywintypes = types.SimpleNamespace(error=FakeWin32Error)
        monkeypatch.setattr(clipboard_module, "_win32_imports", lambda: (fake, pywintypes))
        return fake

    return install


def test_memory_sink_records():
    sink = MemorySink()
    with sink:
        sink.publish(ClipboardFormat.CF_DIB, b"abc")
    assert sink.records == [(8, b"abc")]
    with pytest.raises(SinkUnavailable):
        sink.publish(ClipboardFormat.CF_DIB, b"late")


def test_memory_sink_cannot_be_held_twice():
    sink = MemorySink()
    with sink:
        with pytest.raises(SinkUnavailable):
            sink.__enter__()


def test_directory_sink_writes_bmp_files(tmp_path, demo_white):
    sink = BmpDirectorySink(tmp_path / "out")
    with sink:
        for fmt in DibFormat:
            sink.publish(*encode_for_clipboard(demo_white, fmt))
    names = [path.name for path in sink.paths]
    assert names == ["clipboard-1-CF_DIB.bmp", "clipboard-2-CF_DIBV5.bmp", "clipboard-3-CF_DIBV5.bmp"]
    for path in sink.paths:
        with Image.open(path) as img:
            assert img.size == (12, 10)


def test_directory_sink_unavailable_when_path_is_a_file(tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("x")
    with pytest.raises(SinkUnavailable):
        with BmpDirectorySink(blocker / "out"):
            pass


def test_clipboard_unavailable_off_windows(monkeypatch):
    monkeypatch.setattr(clipboard_module.sys, "platform", "linux")
    assert clipboard_available() is False
    with pytest.raises(SinkUnavailable):
        with ClipboardSink():
            pass


def test_clipboard_empties_once_and_closes(fake_win32):
    fake = fake_win32()
    with ClipboardSink() as sink:
        sink.publish(ClipboardFormat.CF_DIB, b"1234")
        sink.publish(ClipboardFormat.CF_DIBV5, b"123456")
    assert fake.calls == ["open", "empty", ("set", 8, 4), ("set", 17, 6), "close"]


def test_clipboard_open_failure(fake_win32):
    fake = fake_win32(fail_open=True)
    with pytest.raises(SinkUnavailable):
        with ClipboardSink():
            pass
    assert "close" not in fake.calls


def test_clipboard_closes_on_error(fake_win32):
    fake = fake_win32(fail_set=True)
    with pytest.raises(AllocationFailure):
        with ClipboardSink() as sink:
            sink.publish(ClipboardFormat.CF_DIB, b"1234")
    assert fake.calls[-1] == "close"


def test_clipboard_publish_requires_open_sink():
    with pytest.raises(SinkUnavailable):
        ClipboardSink().publish(ClipboardFormat.CF_DIB, b"")
