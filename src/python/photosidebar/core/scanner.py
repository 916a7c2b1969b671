"""
Directory scanning - collects image paths below a root folder.
"""

import logging
import os
from typing import Callable, List, Optional

from .classifier import is_supported_image
from .errors import ScanStepError
from .models import RootStatus, ScanResult

logger = logging.getLogger(__name__)


def root_status(root: str) -> RootStatus:
    """Check the configured root before scanning it."""
    if not root:
        return RootStatus.UNSET
    if not os.path.isdir(root):
        return RootStatus.MISSING
    try:
        with os.scandir(root):
            pass
    except OSError:
        return RootStatus.UNREADABLE
    return RootStatus.OK


def scan(root: str, recursive: bool = True,
         on_error: Optional[Callable[[ScanStepError], None]] = None) -> ScanResult:
    """
    Scan root for supported images.

    Uses an explicit stack of pending directories so deep trees cannot
    exhaust the call stack. Unlistable directories are skipped; a missing
    root simply yields an empty list.

    Args:
        root: Folder to scan
        recursive: Descend into sub-directories
        on_error: Optional callback receiving a ScanStepError per skipped directory

    Returns:
        Image paths sorted by plain string comparison
    """
    found: List[str] = []
    if not root:
        return found
    stack = [os.path.abspath(os.fspath(root))]

    while stack:
        current = stack.pop()
        try:
            with os.scandir(current) as it:
                entries = list(it)
        except OSError as e:
            error = ScanStepError(current, e.strerror or str(e))
            logger.debug("Skipping directory: %s", error)
            if on_error is not None:
                on_error(error)
            continue

        for entry in entries:
            try:
                # Directory symlinks are not followed, so link loops cannot cycle.
                if entry.is_dir(follow_symlinks=False):
                    if recursive:
                        stack.append(entry.path)
                elif entry.is_file() and is_supported_image(entry.name):
                    found.append(entry.path)
            except OSError as e:
                logger.debug("Skipping entry %s: %s", entry.path, e)

    found.sort()
    return found
