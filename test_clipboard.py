"""
Tests for the clipboard bridge.
"""

import pytest

from photosidebar.core.errors import CopyError, ReadError, UnsupportedFormatError
from photosidebar.services.clipboard_service import copy_to_clipboard, decode_bitmap


def test_decode_raster(pics_dir):
    img = decode_bitmap(str(pics_dir / "b.png"))
    assert img.size == (24, 32)


def test_decode_svg_is_unsupported(svg_file):
    with pytest.raises(UnsupportedFormatError):
        decode_bitmap(str(svg_file))


def test_decode_empty_file_is_unsupported(temp_dir):
    empty = temp_dir / "empty.png"
    empty.write_bytes(b"")
    with pytest.raises(UnsupportedFormatError):
        decode_bitmap(str(empty))


def test_decode_missing_file_is_read_error(temp_dir):
    with pytest.raises(ReadError):
        decode_bitmap(str(temp_dir / "missing.png"))


def test_copy_raster_succeeds(qapp, pics_dir):
    messages = []
    error = copy_to_clipboard(str(pics_dir / "A.JPG"), notify=messages.append)

    assert error is None
    assert messages == ["✅ Image copied to clipboard"]


def test_copy_svg_reports_unsupported_format(qapp, svg_file):
    messages = []
    error = copy_to_clipboard(str(svg_file), notify=messages.append)

    assert isinstance(error, UnsupportedFormatError)
    assert isinstance(error, CopyError)
    assert len(messages) == 1
    assert messages[0].startswith("❌ Copy failed: ")


def test_copy_missing_file_never_raises(qapp, temp_dir):
    messages = []
    error = copy_to_clipboard(str(temp_dir / "missing.png"), notify=messages.append)

    assert isinstance(error, ReadError)
    assert messages[0].startswith("❌ Copy failed: ")
