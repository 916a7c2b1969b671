"""
Full image viewer for Photo Sidebar UI layer.
"""

import os
from typing import Callable, Optional

from PySide6.QtWidgets import (
    QDialog, QGraphicsPixmapItem, QGraphicsScene, QGraphicsView, QLabel,
    QVBoxLayout, QHBoxLayout, QPushButton
)
from PySide6.QtCore import QEvent, QObject, Qt, Slot
from PySide6.QtGui import QGuiApplication, QPixmap, QTransform

from ..config import CONFIG
from ..core.models import LoadResult
from ..qtcommon import displayable_to_qpixmap
from ..services.materializer import MaterializeService


class ZoomModel:
    """Continuous zoom factor moved in fixed steps and clamped to a range."""

    def __init__(self, step: float = CONFIG["VIEWER_ZOOM_STEP"],
                 min_zoom: float = CONFIG["VIEWER_MIN_ZOOM"],
                 max_zoom: float = CONFIG["VIEWER_MAX_ZOOM"]):
        self.step = step
        self.min_zoom = min_zoom
        self.max_zoom = max_zoom
        self.factor = 1.0

    def _set(self, value: float) -> float:
        self.factor = round(max(self.min_zoom, min(self.max_zoom, value)), 4)
        return self.factor

    def zoom_in(self) -> float:
        return self._set(self.factor + self.step)

    def zoom_out(self) -> float:
        return self._set(self.factor - self.step)

    def apply_wheel(self, delta_y: int) -> float:
        """Scrolling up zooms in, scrolling down zooms out."""
        if delta_y > 0:
            return self.zoom_in()
        if delta_y < 0:
            return self.zoom_out()
        return self.factor

    def reset(self):
        self.factor = 1.0


class FullImageDialog(QDialog):
    """Modal viewer for a single image with Ctrl+wheel zoom."""

    def __init__(
        self,
        file_path: str,
        materialize_service: MaterializeService,
        copy_func: Callable[[str], object],
        open_func: Callable[[str], object],
        parent=None
    ):
        super().__init__(parent)

        self.file_path = file_path
        self.materialize_service = materialize_service
        self.copy_func = copy_func
        self.open_func = open_func
        self.zoom = ZoomModel()
        self._ticket: Optional[int] = None

        self.setModal(True)
        self.setWindowTitle(os.path.basename(file_path))
        self._setup_ui()
        self._apply_dark_theme()
        self._fit_to_screen()

        self.materialize_service.imageMaterialized.connect(self._on_image_materialized)
        self.finished.connect(self._release)
        self._request_image()

    def _setup_ui(self):
        layout = QVBoxLayout(self)
        layout.setContentsMargins(8, 8, 8, 8)

        header = QHBoxLayout()
        self.title_label = QLabel(os.path.basename(self.file_path))
        self.title_label.setObjectName("modalTitle")
        header.addWidget(self.title_label)
        header.addStretch()

        self.copy_button = QPushButton("Copy to Clipboard")
        self.copy_button.clicked.connect(lambda: self.copy_func(self.file_path))
        header.addWidget(self.copy_button)

        self.open_button = QPushButton("Open Externally")
        self.open_button.clicked.connect(lambda: self.open_func(self.file_path))
        header.addWidget(self.open_button)
        layout.addLayout(header)

        self.message_label = QLabel("⏳")
        self.message_label.setAlignment(Qt.AlignLeft | Qt.AlignTop)
        layout.addWidget(self.message_label)

        # The pixmap is kept at its natural size; zoom is a view transform.
        self.scene = QGraphicsScene(self)
        self.pixmap_item = QGraphicsPixmapItem()
        self.pixmap_item.setTransformationMode(Qt.SmoothTransformation)
        self.scene.addItem(self.pixmap_item)

        self.view = QGraphicsView(self.scene)
        self.view.setAlignment(Qt.AlignLeft | Qt.AlignTop)
        self.view.setTransformationAnchor(QGraphicsView.NoAnchor)
        self.view.setResizeAnchor(QGraphicsView.NoAnchor)
        self.view.setDragMode(QGraphicsView.ScrollHandDrag)
        self.view.viewport().installEventFilter(self)
        layout.addWidget(self.view, 1)

    def _apply_dark_theme(self):
        self.setStyleSheet("""
            QDialog {
                background-color: #2b2b2b;
            }
            QLabel {
                background-color: #2b2b2b;
                color: #e0e0e0;
            }
            QLabel#modalTitle {
                font-size: 14px;
                font-weight: 600;
            }
            QGraphicsView {
                background-color: #2b2b2b;
                border: none;
            }
            QPushButton {
                background-color: #3c3f41;
                color: #bbbbbb;
                border: 1px solid #555555;
                border-radius: 4px;
                padding: 6px 12px;
            }
            QPushButton:hover {
                background-color: #4b6eaf;
            }
        """)

    def _fit_to_screen(self):
        screen = self.screen() or QGuiApplication.primaryScreen()
        if screen is None:
            return
        available = screen.availableGeometry()
        fraction = CONFIG["VIEWER_SCREEN_FRACTION"]
        self.resize(int(available.width() * fraction), int(available.height() * fraction))

    def _request_image(self):
        self._ticket = self.materialize_service.next_ticket()
        self.materialize_service.request(self._ticket, self.file_path, priority=True)

    def _show_message(self, text: str):
        self.message_label.setText(text)
        self.message_label.show()

    @Slot(int, str, object)
    def _on_image_materialized(self, ticket: int, path: str, result: LoadResult):
        if self._ticket is None or ticket != self._ticket:
            return

        if not result.success or result.data is None:
            self._show_message(f"⚠️ {result.error_message or 'Cannot load image'}")
            return

        pixmap = displayable_to_qpixmap(result.data)
        if pixmap.isNull():
            self._show_message("⚠️ Cannot display image")
            return
        self.message_label.hide()
        self.pixmap_item.setPixmap(pixmap)
        self.scene.setSceneRect(self.pixmap_item.boundingRect())
        self._update_display()

    def _update_display(self):
        """Apply the zoom factor as a scale transform anchored at the top-left."""
        factor = self.zoom.factor
        self.view.setTransform(QTransform.fromScale(factor, factor))

    def eventFilter(self, watched: QObject, event: QEvent) -> bool:
        if (event.type() == QEvent.Wheel
                and watched is self.view.viewport()
                and event.modifiers() & Qt.ControlModifier):
            self.zoom.apply_wheel(event.angleDelta().y())
            self._update_display()
            event.accept()
            return True
        return super().eventFilter(watched, event)

    @Slot()
    def _release(self):
        """Drop all rendered content; late results are ignored."""
        if self._ticket is not None:
            self.materialize_service.retire(self._ticket)
        self._ticket = None
        self.pixmap_item.setPixmap(QPixmap())
        self.zoom.reset()
        self.view.resetTransform()
