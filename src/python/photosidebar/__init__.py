"""
Photo Sidebar package initialization.
"""

from .config import CONFIG
from .core.models import DisplayableImage, GallerySettings, GalleryState
from .core.classifier import content_type_of, is_supported_image
from .core.scanner import scan

__version__ = CONFIG["APP_VERSION"]

__all__ = [
    "CONFIG",
    "DisplayableImage",
    "GallerySettings",
    "GalleryState",
    "content_type_of",
    "is_supported_image",
    "scan",
]
