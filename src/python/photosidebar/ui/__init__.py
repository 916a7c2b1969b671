"""
UI layer package for Photo Sidebar.
This package contains all user interface components.
"""

from .main_window import MainWindow
from .viewer_window import FullImageDialog, ZoomModel
from .gallery_view import GalleryView
from .dialogs import SettingsDialog
