"""
Gallery view implementation for Photo Sidebar UI layer.
Mirrors the configured folder as a grid of thumbnails.
"""

import logging
import os
from typing import Dict, List, Optional

from PySide6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QGridLayout,
    QLabel, QScrollArea, QFrame, QSizePolicy, QPushButton,
)
from PySide6.QtCore import QEvent, QObject, Qt, Signal, Slot
from PySide6.QtGui import QPixmap

from ..core.errors import RootMissingError
from ..core.models import GallerySettings, GalleryState, LoadResult, RootStatus
from ..core.scanner import root_status, scan
from ..qtcommon import displayable_to_qpixmap
from ..services.materializer import MaterializeService
from ..services.watch_service import WatchController

logger = logging.getLogger(__name__)


class GalleryCard(QFrame):
    """One thumbnail plus its file name."""

    CARD_PADDING = 6

    def __init__(self, path: str, thumb_size: int, thumb_height: int,
                 on_clicked, on_right_clicked):
        super().__init__()

        self.path = path
        self.thumb_size = thumb_size
        self.thumb_height = thumb_height
        self.on_clicked = on_clicked
        self.on_right_clicked = on_right_clicked
        self.thumbnail_pixmap: Optional[QPixmap] = None

        self.setObjectName("galleryCard")
        self.setCursor(Qt.PointingHandCursor)
        self.setSizePolicy(QSizePolicy.Fixed, QSizePolicy.Fixed)
        self.setToolTip(path)

        self._setup_ui()
        self._apply_styles()
        self.show_loading_state()

    def _setup_ui(self):
        layout = QVBoxLayout(self)
        layout.setSpacing(4)
        layout.setContentsMargins(self.CARD_PADDING, self.CARD_PADDING,
                                  self.CARD_PADDING, self.CARD_PADDING)

        self.thumbnail_label = QLabel()
        self.thumbnail_label.setObjectName("thumbnail")
        self.thumbnail_label.setAlignment(Qt.AlignCenter)
        self.thumbnail_label.setFixedSize(self.thumb_size, self.thumb_height)
        layout.addWidget(self.thumbnail_label)

        filename = os.path.basename(self.path)
        self.name_label = QLabel()
        self.name_label.setObjectName("cardTitle")
        self.name_label.setFixedWidth(self.thumb_size)
        self.name_label.setText(
            self.name_label.fontMetrics().elidedText(filename, Qt.ElideMiddle, self.thumb_size)
        )
        layout.addWidget(self.name_label)

    def _apply_styles(self):
        self.setStyleSheet("""
            QFrame#galleryCard {
                background-color: #3c3f41;
                border: 1px solid #555555;
                border-radius: 6px;
            }
            QFrame#galleryCard:hover {
                border-color: #4b6eaf;
            }
            QLabel#thumbnail {
                background-color: #2b2b2b;
                color: #bbbbbb;
                font-size: 18px;
            }
            QLabel#cardTitle {
                color: #e0e0e0;
                font-size: 11px;
            }
        """)

    def show_loading_state(self):
        self.thumbnail_pixmap = None
        self.thumbnail_label.clear()
        self.thumbnail_label.setText("⏳")

    def show_error_state(self, text: str = "Preview failed"):
        self.thumbnail_pixmap = None
        self.thumbnail_label.clear()
        self.thumbnail_label.setText("⚠️")
        self.thumbnail_label.setToolTip(text)

    def set_thumbnail(self, pixmap: QPixmap):
        # The box keeps its fixed shape; the image keeps its own aspect ratio.
        self.thumbnail_pixmap = pixmap
        scaled = pixmap.scaled(self.thumb_size, self.thumb_height,
                               Qt.KeepAspectRatio, Qt.SmoothTransformation)
        self.thumbnail_label.setPixmap(scaled)

    def mousePressEvent(self, event):
        if event.button() == Qt.LeftButton:
            self.on_clicked(self.path)
        elif event.button() == Qt.RightButton:
            self.on_right_clicked(self.path)
        super().mousePressEvent(event)


class GalleryView(QFrame):
    """
    Thumbnail grid over the configured root folder.

    States: EMPTY (no root configured), INVALID (root missing or not
    readable) and LOADED (root scanned and rendered). The watch is running
    only while the view is LOADED.
    """

    imageActivated = Signal(str)   # left click: open full view
    copyRequested = Signal(str)    # right click: copy to clipboard
    stateChanged = Signal(object)  # GalleryState

    GRID_SPACING = 8

    def __init__(
        self,
        settings: GallerySettings,
        materialize_service: MaterializeService,
        watch_controller: WatchController,
        parent: Optional[QWidget] = None,
    ):
        super().__init__(parent)

        self.settings = settings
        self.materialize_service = materialize_service
        self.watch_controller = watch_controller

        self.state: Optional[GalleryState] = None
        self.image_paths: List[str] = []
        self.cards: List[GalleryCard] = []
        self.card_mapping: Dict[str, GalleryCard] = {}
        self.current_columns = 1
        # Fresh ticket per render; results tagged with an older one are stale.
        self._generation = 0

        self._setup_ui()
        self.materialize_service.imageMaterialized.connect(self._on_image_materialized)

    def _setup_ui(self):
        """Setup the gallery view UI."""
        layout = QVBoxLayout(self)
        layout.setContentsMargins(8, 8, 8, 8)
        layout.setSpacing(6)

        header_layout = QHBoxLayout()
        self.title_label = QLabel("External Photos")
        self.title_label.setStyleSheet("font-size: 15px; font-weight: 600; color: #e0e0e0;")
        header_layout.addWidget(self.title_label)
        header_layout.addStretch()

        self.refresh_button = QPushButton("Refresh")
        self.refresh_button.clicked.connect(self.refresh)
        header_layout.addWidget(self.refresh_button)
        layout.addLayout(header_layout)

        self.info_label = QLabel()
        self.info_label.setWordWrap(True)
        self.info_label.setStyleSheet("color: #bbbbbb; font-size: 12px;")
        layout.addWidget(self.info_label)

        self.message_label = QLabel()
        self.message_label.setAlignment(Qt.AlignCenter)
        self.message_label.setStyleSheet("color: #bbbbbb; font-size: 12px;")
        self.message_label.hide()
        layout.addWidget(self.message_label)

        self.scroll_area = QScrollArea()
        self.scroll_area.setWidgetResizable(True)
        self.scroll_area.setHorizontalScrollBarPolicy(Qt.ScrollBarAlwaysOff)
        self.scroll_area.setStyleSheet("QScrollArea { border: none; background-color: #2b2b2b; }")

        self.grid_widget = QWidget()
        self.grid_layout = QGridLayout(self.grid_widget)
        self.grid_layout.setSpacing(self.GRID_SPACING)
        self.grid_layout.setContentsMargins(0, 0, 0, 0)
        self.grid_layout.setAlignment(Qt.AlignTop | Qt.AlignLeft)

        self.scroll_area.setWidget(self.grid_widget)
        self.scroll_area.viewport().installEventFilter(self)
        layout.addWidget(self.scroll_area, 1)

    # State machine

    def _set_state(self, state: GalleryState):
        if state != self.state:
            logger.debug("Gallery state %s -> %s", self.state, state)
            self.state = state
            self.stateChanged.emit(state)

    def apply_settings(self, settings: GallerySettings):
        """Adopt edited settings and re-render."""
        self.settings = settings
        self.reload()

    @Slot()
    def refresh(self):
        """Manual or watch-triggered refresh: a full re-scan."""
        self.reload()

    def reload(self):
        """Re-evaluate the state from the settings and render it."""
        self.materialize_service.retire(self._generation)
        self._generation = self.materialize_service.next_ticket()
        self._clear_grid()
        self.message_label.hide()

        root = self.settings.folder_path
        status = root_status(root)

        if status == RootStatus.UNSET:
            self.watch_controller.stop_watching()
            self.info_label.setText("Set a folder path in settings.")
            self._set_state(GalleryState.EMPTY)
            return

        if status in (RootStatus.MISSING, RootStatus.UNREADABLE):
            self.watch_controller.stop_watching()
            error = RootMissingError(root, unreadable=status == RootStatus.UNREADABLE)
            self.info_label.setText(str(error))
            self._set_state(GalleryState.INVALID)
            return

        recursive = self.settings.recursive
        self.info_label.setText(("Recursive: " if recursive else "Folder: ") + root)
        self.image_paths = scan(root, recursive)
        self._ensure_watching(root, recursive)
        self._set_state(GalleryState.LOADED)

        if not self.image_paths:
            self.message_label.setText("No images found.")
            self.message_label.show()
            return

        self.populate()

    def _ensure_watching(self, root: str, recursive: bool):
        current = self.watch_controller.subscription
        if (current is not None and current.active
                and current.root == root and current.recursive == recursive):
            return
        self.watch_controller.start_watching(root, recursive, self.refresh)

    def close_view(self):
        """Stop watching and drop rendered content; pending loads are discarded."""
        self.watch_controller.stop_watching()
        self.materialize_service.retire(self._generation)
        self._generation = 0
        self._clear_grid()

    # Grid

    def _clear_grid(self):
        for card in self.cards:
            self.grid_layout.removeWidget(card)
            card.setParent(None)
            card.deleteLater()
        self.cards.clear()
        self.card_mapping.clear()
        self.image_paths = []

    def populate(self):
        """Create one card per scanned image and request its thumbnail."""
        thumb_size = self.settings.thumb_size
        thumb_height = self.settings.thumb_height
        ticket = self._generation

        for path in self.image_paths:
            card = GalleryCard(
                path=path,
                thumb_size=thumb_size,
                thumb_height=thumb_height,
                on_clicked=self.imageActivated.emit,
                on_right_clicked=self.copyRequested.emit,
            )
            self.cards.append(card)
            self.card_mapping[path] = card

        self._rearrange_cards()

        for path in self.image_paths:
            self.materialize_service.request(ticket, path)

    def _calculate_columns(self) -> int:
        card_width = self.settings.thumb_size + 2 * GalleryCard.CARD_PADDING + 2
        viewport_width = self.scroll_area.viewport().width()
        return max(1, (viewport_width + self.GRID_SPACING) // (card_width + self.GRID_SPACING))

    def _rearrange_cards(self):
        for card in self.cards:
            self.grid_layout.removeWidget(card)

        columns = self._calculate_columns()
        for index, card in enumerate(self.cards):
            self.grid_layout.addWidget(card, index // columns, index % columns)
        self.current_columns = columns

    def eventFilter(self, watched: QObject, event: QEvent) -> bool:
        """Re-flow the grid once the viewport itself has been resized."""
        if (event.type() == QEvent.Resize
                and watched is self.scroll_area.viewport()
                and self.cards
                and self._calculate_columns() != self.current_columns):
            self._rearrange_cards()
        return super().eventFilter(watched, event)

    @Slot(int, str, object)
    def _on_image_materialized(self, ticket: int, path: str, result: LoadResult):
        if ticket != self._generation:
            return
        card = self.card_mapping.get(path)
        if card is None:
            return

        if not result.success or result.data is None:
            card.show_error_state(result.error_message or "Preview failed")
            return

        pixmap = displayable_to_qpixmap(result.data)
        if pixmap.isNull():
            logger.warning("Cannot display %s", path)
            card.show_error_state("Cannot display image")
            return
        card.set_thumbnail(pixmap)
