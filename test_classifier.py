"""
Tests for extension-based image classification.
"""

from photosidebar.core.classifier import content_type_of, is_supported_image


def test_supported_extensions_case_insensitive():
    """Extensions match regardless of case."""
    assert is_supported_image("a.PNG")
    assert is_supported_image("/pics/Holiday.JpEg")
    assert is_supported_image("drawing.svg")
    assert is_supported_image("anim.webp")


def test_unsupported_paths():
    assert not is_supported_image("a.txt")
    assert not is_supported_image("archive.png.zip")
    assert not is_supported_image("noextension")
    assert not is_supported_image("")
    assert not is_supported_image("folder.png/")


def test_content_types():
    assert content_type_of("x.jpg") == "image/jpeg"
    assert content_type_of("x.JPEG") == "image/jpeg"
    assert content_type_of("x.png") == "image/png"
    assert content_type_of("x.gif") == "image/gif"
    assert content_type_of("x.bmp") == "image/bmp"
    assert content_type_of("x.webp") == "image/webp"
    assert content_type_of("x.svg") == "image/svg+xml"


def test_unknown_extension_is_generic_binary():
    assert content_type_of("x.tiff") == "application/octet-stream"
    assert content_type_of("README") == "application/octet-stream"
