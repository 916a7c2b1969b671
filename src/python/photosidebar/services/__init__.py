"""
Service layer package for Photo Sidebar.
Services sit between the UI layer and the core layer and own the
threads, watchers and platform integrations.
"""

from .config_service import ConfigService
from .materializer import MaterializeService, load
from .watch_service import WatchController
from .clipboard_service import copy_to_clipboard, decode_bitmap, open_externally

__all__ = [
    'ConfigService',
    'MaterializeService',
    'WatchController',
    'load',
    'copy_to_clipboard',
    'decode_bitmap',
    'open_externally',
]
