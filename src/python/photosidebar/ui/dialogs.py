"""
Dialog implementations for Photo Sidebar UI layer.
"""

from typing import Callable, Optional

from PySide6.QtWidgets import (
    QDialog, QVBoxLayout, QHBoxLayout, QFormLayout, QLabel, QCheckBox,
    QPushButton, QGroupBox, QLineEdit, QSlider, QFileDialog
)
from PySide6.QtCore import Qt, Signal

from ..config import CONFIG
from ..core.models import GallerySettings
from ..services.config_service import ConfigService


class SettingsDialog(QDialog):
    """
    Settings form for the photo sidebar.

    Edits apply immediately: every change updates the shared settings
    object, saves it and emits settingsChanged.
    """

    settingsChanged = Signal(object)  # GallerySettings
    folderChanged = Signal(str)

    def __init__(self, settings: GallerySettings, config_service: ConfigService,
                 notify: Optional[Callable[[str], None]] = None, parent=None):
        super().__init__(parent)

        self.settings = settings
        self.config_service = config_service
        self.notify = notify
        self.setWindowTitle(CONFIG["APP_NAME"])
        self.setModal(True)
        self.resize(480, 240)

        self._setup_ui()
        self._populate_settings()
        self._connect_signals()
        self._apply_dark_theme()

    def _setup_ui(self):
        """Setup the settings dialog UI."""
        layout = QVBoxLayout(self)

        folder_group = QGroupBox("Folder")
        folder_layout = QFormLayout(folder_group)

        path_row = QHBoxLayout()
        self.folder_edit = QLineEdit()
        self.folder_edit.setPlaceholderText(r"C:\Users\Me\Pictures")
        self.folder_edit.setToolTip("Folder path (outside the application)")
        path_row.addWidget(self.folder_edit)
        self.browse_button = QPushButton("Browse…")
        path_row.addWidget(self.browse_button)
        folder_layout.addRow("Folder path:", path_row)

        self.recursive_checkbox = QCheckBox("Include subfolders")
        folder_layout.addRow("Recursive:", self.recursive_checkbox)

        layout.addWidget(folder_group)

        display_group = QGroupBox("Display")
        display_layout = QFormLayout(display_group)

        slider_row = QHBoxLayout()
        self.thumb_slider = QSlider(Qt.Horizontal)
        self.thumb_slider.setRange(CONFIG["THUMB_SIZE_MIN"], CONFIG["THUMB_SIZE_MAX"])
        self.thumb_slider.setSingleStep(CONFIG["THUMB_SIZE_STEP"])
        self.thumb_slider.setPageStep(CONFIG["THUMB_SIZE_STEP"] * 4)
        self.thumb_slider.setTickInterval(CONFIG["THUMB_SIZE_STEP"] * 8)
        self.thumb_slider.setTickPosition(QSlider.TicksBelow)
        slider_row.addWidget(self.thumb_slider)
        self.thumb_value_label = QLabel()
        self.thumb_value_label.setMinimumWidth(48)
        slider_row.addWidget(self.thumb_value_label)
        display_layout.addRow("Thumbnail size (px):", slider_row)

        layout.addWidget(display_group)

        buttons_layout = QHBoxLayout()
        buttons_layout.addStretch()
        close_button = QPushButton("Close")
        close_button.clicked.connect(self.accept)
        close_button.setDefault(True)
        buttons_layout.addWidget(close_button)
        layout.addLayout(buttons_layout)

    def _populate_settings(self):
        """Populate dialog with current settings."""
        self.folder_edit.setText(self.settings.folder_path)
        self.recursive_checkbox.setChecked(self.settings.recursive)
        self.thumb_slider.setValue(self.settings.thumb_size)
        self.thumb_value_label.setText(f"{self.settings.thumb_size} px")

    def _connect_signals(self):
        self.folder_edit.editingFinished.connect(self._on_folder_edited)
        self.browse_button.clicked.connect(self._browse_folder)
        self.recursive_checkbox.toggled.connect(self._on_recursive_toggled)
        self.thumb_slider.valueChanged.connect(self._on_thumb_size_changed)

    def _save(self):
        self.config_service.save_gallery_settings(self.settings)
        self.settingsChanged.emit(self.settings)

    def set_folder_path(self, path: str):
        """Apply a new folder path, save it and announce it."""
        path = path.strip()
        if path == self.settings.folder_path:
            return
        self.settings.folder_path = path
        if self.folder_edit.text() != path:
            self.folder_edit.setText(path)
        self._save()
        if self.notify is not None:
            self.notify("Folder path saved")
        self.folderChanged.emit(path)

    def _on_folder_edited(self):
        self.set_folder_path(self.folder_edit.text())

    def _browse_folder(self):
        directory = QFileDialog.getExistingDirectory(
            self, "Select image folder", self.settings.folder_path or ""
        )
        if directory:
            self.set_folder_path(directory)

    def _on_recursive_toggled(self, checked: bool):
        self.settings.recursive = checked
        self._save()

    def _on_thumb_size_changed(self, value: int):
        step = CONFIG["THUMB_SIZE_STEP"]
        snapped = CONFIG["THUMB_SIZE_MIN"] + round((value - CONFIG["THUMB_SIZE_MIN"]) / step) * step
        snapped = min(snapped, CONFIG["THUMB_SIZE_MAX"])
        if snapped != value:
            self.thumb_slider.setValue(snapped)
            return
        self.thumb_value_label.setText(f"{value} px")
        self.thumb_slider.setToolTip(f"{value} px")
        if value != self.settings.thumb_size:
            self.settings.thumb_size = value
            self._save()

    def _apply_dark_theme(self):
        """Apply dark theme to the settings dialog."""
        self.setStyleSheet("""
            QDialog {
                background-color: #2b2b2b;
                color: #e0e0e0;
            }
            QGroupBox {
                background-color: #3c3f41;
                border: 1px solid #555555;
                border-radius: 4px;
                margin-top: 8px;
                color: #bbbbbb;
                padding-top: 16px;
            }
            QGroupBox::title {
                subcontrol-origin: margin;
                subcontrol-position: top left;
                left: 8px;
                padding: 0 4px;
            }
            QLabel, QCheckBox {
                color: #e0e0e0;
            }
            QLineEdit {
                background-color: #45494a;
                color: #e0e0e0;
                border: 1px solid #555555;
                border-radius: 4px;
                padding: 4px;
            }
            QPushButton {
                background-color: #3c3f41;
                color: #bbbbbb;
                border: 1px solid #555555;
                border-radius: 4px;
                padding: 6px 12px;
                min-width: 60px;
            }
            QPushButton:hover {
                background-color: #4b6eaf;
            }
        """)
