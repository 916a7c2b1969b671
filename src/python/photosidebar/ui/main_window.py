"""
Main window implementation for Photo Sidebar UI layer.

The window is the host the gallery panel plugs into: it registers the
dockable panel, exposes the open-panel command, runs modal dialogs and shows
transient notifications.
"""

import logging
from typing import Callable, Dict, Optional

from PySide6.QtWidgets import (
    QDialog, QDockWidget, QLabel, QMainWindow, QStatusBar, QWidget
)
from PySide6.QtCore import Qt, QTimer
from PySide6.QtGui import QAction, QKeySequence

from ..config import CONFIG
from ..core.models import GallerySettings
from ..services.clipboard_service import copy_to_clipboard, open_externally
from ..services.config_service import ConfigService
from ..services.materializer import MaterializeService
from ..services.watch_service import WatchController
from .dialogs import SettingsDialog
from .gallery_view import GalleryView
from .viewer_window import FullImageDialog

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    """Host window for the photo sidebar panel."""

    def __init__(self, config_service: ConfigService):
        super().__init__()

        self.config_service = config_service
        self.settings: GallerySettings = config_service.load_gallery_settings()
        self.panels: Dict[str, QDockWidget] = {}
        self.gallery_view: Optional[GalleryView] = None
        self._layout_ready = False

        self._initialize_services()
        self._setup_ui()
        self.register_panel(CONFIG["PANEL_ID"], self._create_gallery_view)
        self._apply_dark_theme()

    def _initialize_services(self):
        """Initialize all required services."""
        self.materialize_service = MaterializeService(CONFIG)
        self.watch_controller = WatchController(parent=self)

    def _setup_ui(self):
        """Setup the user interface."""
        self.setWindowTitle(f"{CONFIG['APP_NAME']} {CONFIG['APP_VERSION']}")
        self.resize(*CONFIG["WINDOW_SIZE"])

        self.welcome_label = QLabel(
            f"{CONFIG['APP_NAME']}\n\nUse \"{CONFIG['OPEN_COMMAND_NAME']}\" to show the panel."
        )
        self.welcome_label.setAlignment(Qt.AlignCenter)
        self.setCentralWidget(self.welcome_label)

        self._setup_actions()

        self.status_bar = QStatusBar()
        self.setStatusBar(self.status_bar)

    def _setup_actions(self):
        """Register the commands in the menu bar and the toolbar."""
        self.open_panel_action = QAction(CONFIG["OPEN_COMMAND_NAME"], self)
        self.open_panel_action.setObjectName(CONFIG["OPEN_COMMAND_ID"])
        self.open_panel_action.setShortcut(QKeySequence("Ctrl+Shift+P"))
        self.open_panel_action.triggered.connect(self.activate_view)

        self.settings_action = QAction("&Settings...", self)
        self.settings_action.setShortcut(QKeySequence.Preferences)
        self.settings_action.triggered.connect(self._open_settings)

        self.refresh_action = QAction("&Refresh", self)
        self.refresh_action.setShortcut(QKeySequence.Refresh)
        self.refresh_action.triggered.connect(self._refresh_gallery)

        exit_action = QAction('E&xit', self)
        exit_action.setShortcut(QKeySequence.Quit)
        exit_action.triggered.connect(self.close)

        file_menu = self.menuBar().addMenu('&File')
        file_menu.addAction(self.settings_action)
        file_menu.addSeparator()
        file_menu.addAction(exit_action)

        view_menu = self.menuBar().addMenu('&View')
        view_menu.addAction(self.open_panel_action)
        view_menu.addAction(self.refresh_action)

        toolbar = self.addToolBar('Main')
        toolbar.setMovable(False)
        toolbar.addAction(self.open_panel_action)
        toolbar.addAction(self.settings_action)

    def _apply_dark_theme(self):
        self.setStyleSheet("""
            QMainWindow, QDockWidget {
                background-color: #2b2b2b;
                color: #e0e0e0;
            }
            QLabel {
                color: #e0e0e0;
            }
            QStatusBar {
                background-color: #3c3f41;
                color: #bbbbbb;
                border-top: 1px solid #555555;
            }
        """)

    # Host contract

    def register_panel(self, panel_id: str, factory: Callable[[], QWidget]) -> QDockWidget:
        """Create a dockable panel on the right dock area."""
        dock = QDockWidget(CONFIG["PANEL_TITLE"], self)
        dock.setObjectName(panel_id)
        dock.setAllowedAreas(Qt.LeftDockWidgetArea | Qt.RightDockWidgetArea)
        widget = factory()
        dock.setWidget(widget)
        if hasattr(widget, "close_view"):
            dock.visibilityChanged.connect(
                lambda visible: self._on_panel_visibility(widget, visible))
        dock.hide()
        self.addDockWidget(Qt.RightDockWidgetArea, dock)
        self.panels[panel_id] = dock
        return dock

    def show_modal(self, dialog: QDialog) -> int:
        """Run a dialog modally."""
        return dialog.exec()

    def notify_user(self, message: str):
        """Show a transient notification."""
        logger.info(message)
        self.status_bar.showMessage(message, CONFIG["NOTICE_TIMEOUT_MS"])

    # Panel

    def _create_gallery_view(self) -> GalleryView:
        self.gallery_view = GalleryView(
            self.settings, self.materialize_service, self.watch_controller
        )
        self.gallery_view.imageActivated.connect(self.open_full_view)
        self.gallery_view.copyRequested.connect(self.copy_image)
        return self.gallery_view

    def activate_view(self):
        """Reveal the panel and render it from the current settings."""
        dock = self.panels[CONFIG["PANEL_ID"]]
        if dock.isVisible():
            self.gallery_view.reload()
        else:
            dock.show()
        dock.raise_()

    def _on_panel_visibility(self, widget, visible: bool):
        # Hidden panels (closed or tabbed away) must not keep a watch alive.
        if visible:
            widget.reload()
        else:
            widget.close_view()

    def _reveal_panel(self, *_args):
        dock = self.panels[CONFIG["PANEL_ID"]]
        if not dock.isVisible():
            dock.show()
        dock.raise_()

    def _refresh_gallery(self):
        if self.gallery_view is not None and self.panels[CONFIG["PANEL_ID"]].isVisible():
            self.gallery_view.refresh()

    def _on_settings_changed(self, settings: GallerySettings):
        self.settings = settings
        if self.panels[CONFIG["PANEL_ID"]].isVisible():
            self.gallery_view.apply_settings(settings)

    def _open_settings(self):
        dialog = SettingsDialog(self.settings, self.config_service,
                                notify=self.notify_user, parent=self)
        dialog.settingsChanged.connect(self._on_settings_changed)
        dialog.folderChanged.connect(self._reveal_panel)
        self.show_modal(dialog)

    def copy_image(self, path: str):
        copy_to_clipboard(path, notify=self.notify_user)

    def open_full_view(self, path: str):
        dialog = FullImageDialog(
            path,
            self.materialize_service,
            copy_func=self.copy_image,
            open_func=open_externally,
            parent=self,
        )
        self.show_modal(dialog)
        dialog.deleteLater()

    # Lifecycle

    def showEvent(self, event):
        """Activate the panel once the layout is ready."""
        super().showEvent(event)
        if not self._layout_ready:
            self._layout_ready = True
            QTimer.singleShot(0, self.activate_view)

    def closeEvent(self, event):
        """Stop watching and shut the worker thread down."""
        if self.gallery_view is not None:
            self.gallery_view.close_view()
        self.watch_controller.stop_watching()
        self.materialize_service.stop_service()
        super().closeEvent(event)
