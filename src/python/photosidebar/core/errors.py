"""
Error taxonomy for Photo Sidebar.

None of these errors may terminate the panel: scan and materialize errors are
absorbed locally, copy errors become user notifications and watch errors
degrade to manual refresh.
"""


class PhotoSidebarError(Exception):
    """Base class for all Photo Sidebar errors."""


class ScanStepError(PhotoSidebarError):
    """A single directory could not be listed during a scan."""

    def __init__(self, directory: str, reason: str):
        super().__init__(f"Cannot list {directory}: {reason}")
        self.directory = directory
        self.reason = reason


class MaterializeError(PhotoSidebarError):
    """A single file could not be turned into a displayable image."""


class CopyError(PhotoSidebarError):
    """Copying an image to the clipboard failed."""


class ReadError(MaterializeError, CopyError):
    """A file is unreadable, vanished, not a regular file or too large."""

    def __init__(self, path: str, reason: str):
        super().__init__(reason)
        self.path = path
        self.reason = reason


class UnsupportedFormatError(CopyError):
    """File bytes could not be decoded into a bitmap."""

    def __init__(self, path: str, reason: str = "Unsupported image format or empty buffer"):
        super().__init__(reason)
        self.path = path
        self.reason = reason


class WatchUnavailableError(PhotoSidebarError):
    """Filesystem change notifications could not be set up."""


class RootMissingError(PhotoSidebarError):
    """The configured root folder does not exist or cannot be listed."""

    def __init__(self, root: str, unreadable: bool = False):
        status = "not readable" if unreadable else "not found"
        super().__init__(f"Folder {status}: {root}")
        self.root = root
