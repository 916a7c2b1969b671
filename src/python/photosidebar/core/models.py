"""
Data models for Photo Sidebar core layer.
"""

import base64
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional

from ..config import CONFIG

# An absolute path to a supported image; identity is the path string.
ImagePath = str
ScanResult = List[ImagePath]


class GalleryState(Enum):
    """States of the gallery panel."""
    EMPTY = "empty"
    INVALID = "invalid"
    LOADED = "loaded"


class RootStatus(Enum):
    """Result of checking the configured root before a scan."""
    UNSET = "unset"
    MISSING = "missing"
    UNREADABLE = "unreadable"
    OK = "ok"


@dataclass
class DisplayableImage:
    """A content type plus a base64 payload, ready to embed in an image element."""
    path: str
    content_type: str
    payload: str

    @property
    def data_uri(self) -> str:
        return f"data:{self.content_type};base64,{self.payload}"

    def to_bytes(self) -> bytes:
        """Decode the payload back into the file's bytes."""
        return base64.b64decode(self.payload)


@dataclass
class LoadResult:
    """Result of an asynchronous materialization."""
    success: bool
    data: Optional[DisplayableImage] = None
    error_message: str = ""
    path: Optional[str] = None


def _clamp_thumb_size(value: Any) -> int:
    try:
        size = int(value)
    except (TypeError, ValueError):
        size = CONFIG["DEFAULT_SETTINGS"]["thumbSize"]
    return max(CONFIG["THUMB_SIZE_MIN"], min(CONFIG["THUMB_SIZE_MAX"], size))


_TRUE_STRINGS = ("true", "1", "yes", "on")
_FALSE_STRINGS = ("false", "0", "no", "off")


def _coerce_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, int) and value in (0, 1):
        return bool(value)
    if isinstance(value, str):
        text = value.strip().lower()
        if text in _TRUE_STRINGS:
            return True
        if text in _FALSE_STRINGS:
            return False
    return CONFIG["DEFAULT_SETTINGS"]["recursive"]


@dataclass
class GallerySettings:
    """Gallery settings model, persisted as {folderPath, recursive, thumbSize}."""
    folder_path: str = ""
    recursive: bool = True
    thumb_size: int = 96

    def __post_init__(self):
        self.folder_path = (self.folder_path or "").strip()
        self.recursive = _coerce_bool(self.recursive)
        self.thumb_size = _clamp_thumb_size(self.thumb_size)

    @property
    def thumb_height(self) -> int:
        return round(self.thumb_size * CONFIG["THUMB_ASPECT"])

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> 'GallerySettings':
        """Create GallerySettings from a stored record, defaults merged in."""
        merged = dict(CONFIG["DEFAULT_SETTINGS"])
        if data:
            merged.update({k: v for k, v in data.items() if k in merged and v is not None})
        return cls(
            folder_path=str(merged["folderPath"]),
            recursive=merged["recursive"],
            thumb_size=merged["thumbSize"],
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert GallerySettings to the stored record."""
        return {
            'folderPath': self.folder_path,
            'recursive': self.recursive,
            'thumbSize': self.thumb_size,
        }


@dataclass
class WatchSubscription:
    """A live filesystem-notification handle bound to one root."""
    root: str
    recursive: bool
    effective_recursive: bool
    token: int
    observer: Any = field(default=None, repr=False)
    active: bool = True

    @property
    def degraded(self) -> bool:
        return self.recursive and not self.effective_recursive
