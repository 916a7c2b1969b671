"""
Core layer for Photo Sidebar: models, errors, classification and scanning.
"""

from .classifier import content_type_of, is_supported_image
from .errors import (
    CopyError,
    MaterializeError,
    PhotoSidebarError,
    ReadError,
    RootMissingError,
    ScanStepError,
    UnsupportedFormatError,
    WatchUnavailableError,
)
from .models import (
    DisplayableImage,
    GallerySettings,
    GalleryState,
    LoadResult,
    RootStatus,
    WatchSubscription,
)
from .scanner import root_status, scan

__all__ = [
    "content_type_of",
    "is_supported_image",
    "scan",
    "root_status",
    "DisplayableImage",
    "GallerySettings",
    "GalleryState",
    "LoadResult",
    "RootStatus",
    "WatchSubscription",
    "PhotoSidebarError",
    "ScanStepError",
    "MaterializeError",
    "CopyError",
    "ReadError",
    "UnsupportedFormatError",
    "WatchUnavailableError",
    "RootMissingError",
]
