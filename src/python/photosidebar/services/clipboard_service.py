"""
Clipboard bridge and shell integration for Photo Sidebar.
"""

import io
import logging
from typing import Callable, Optional

from PIL import Image, UnidentifiedImageError
from PySide6.QtCore import QUrl
from PySide6.QtGui import QDesktopServices, QGuiApplication

from ..core.errors import CopyError, ReadError, UnsupportedFormatError
from ..qtcommon import pil_image_to_qimage

logger = logging.getLogger(__name__)


def decode_bitmap(path: str) -> Image.Image:
    """
    Read a file and decode it as a raster bitmap.

    Vector formats such as SVG cannot be decoded and raise
    UnsupportedFormatError, as do empty or corrupt files.
    """
    try:
        with open(path, 'rb') as f:
            data = f.read()
    except OSError as e:
        raise ReadError(path, e.strerror or str(e)) from e

    if not data:
        raise UnsupportedFormatError(path)
    try:
        with io.BytesIO(data) as stream:
            img = Image.open(stream)
            img.load()
    except (UnidentifiedImageError, OSError, ValueError) as e:
        raise UnsupportedFormatError(path) from e
    if img.width == 0 or img.height == 0:
        raise UnsupportedFormatError(path)
    return img


def copy_to_clipboard(path: str,
                      notify: Optional[Callable[[str], None]] = None) -> Optional[CopyError]:
    """
    Copy an image file to the system clipboard as a bitmap.

    Never raises: failures are logged, reported through notify and returned.

    Returns:
        None on success, otherwise the CopyError that occurred
    """
    try:
        qimage = pil_image_to_qimage(decode_bitmap(path))
        if qimage.isNull():
            raise UnsupportedFormatError(path)
        QGuiApplication.clipboard().setImage(qimage)
    except CopyError as e:
        logger.error("Copy failed for %s: %s", path, e)
        if notify is not None:
            notify(f"❌ Copy failed: {str(e) or 'Unknown error'}")
        return e

    logger.info("Copied %s to clipboard", path)
    if notify is not None:
        notify("✅ Image copied to clipboard")
    return None


def open_externally(path: str) -> bool:
    """Open path with the OS default application (fire-and-forget)."""
    opened = QDesktopServices.openUrl(QUrl.fromLocalFile(path))
    if not opened:
        logger.warning("Could not open %s externally", path)
    return opened
