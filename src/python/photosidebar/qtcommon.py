"""Common Qt helpers for Photo Sidebar."""

from __future__ import annotations

from PIL import Image, ImageQt
from PySide6 import QtGui

from .core.models import DisplayableImage


def pil_image_to_qimage(image: Image.Image) -> QtGui.QImage:
    """Convert a PIL Image into a QImage that owns its pixel data."""
    if image.mode not in ("RGB", "RGBA"):
        image = image.convert("RGBA")
    # ImageQt borrows the PIL buffer; copy so the result outlives it.
    return ImageQt.ImageQt(image).copy()


def displayable_to_qpixmap(image: DisplayableImage) -> QtGui.QPixmap:
    """Decode a DisplayableImage into a QPixmap; null if Qt cannot decode it."""
    pixmap = QtGui.QPixmap()
    pixmap.loadFromData(image.to_bytes())
    return pixmap

