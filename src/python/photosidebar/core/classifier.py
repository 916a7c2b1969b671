"""Extension-based image classification."""

import os

from ..config import CONFIG


def _extension(path: str) -> str:
    if not path or path.endswith(('/', '\\')):
        return ""
    return os.path.splitext(path)[1].lower()


def is_supported_image(path: str) -> bool:
    """Check if a file is a supported image based on its extension."""
    return _extension(path) in CONFIG["IMAGE_EXTENSIONS"]


def content_type_of(path: str) -> str:
    """Content type for a path, falling back to a generic binary type."""
    return CONFIG["CONTENT_TYPES"].get(_extension(path), CONFIG["DEFAULT_CONTENT_TYPE"])
