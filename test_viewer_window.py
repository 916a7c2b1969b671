"""
Tests for the full image viewer dialog.
"""

import pytest
from PySide6.QtCore import QPoint, QPointF, Qt
from PySide6.QtGui import QWheelEvent
from PySide6.QtWidgets import QApplication

from conftest import make_image
from photosidebar.core.models import LoadResult
from photosidebar.services.materializer import MaterializeService, load
from photosidebar.ui.viewer_window import FullImageDialog


@pytest.fixture
def viewer(qapp):
    service = MaterializeService()
    dialogs = []
    calls = {"copy": [], "open": []}

    def _make(path) -> FullImageDialog:
        dialog = FullImageDialog(
            str(path),
            service,
            copy_func=calls["copy"].append,
            open_func=calls["open"].append,
        )
        dialogs.append(dialog)
        return dialog

    yield _make, calls
    for dialog in dialogs:
        dialog.close()
        dialog.deleteLater()
    service.stop_service()


def wheel(widget, delta_y: int, modifiers=Qt.NoModifier):
    event = QWheelEvent(
        QPointF(10, 10), QPointF(10, 10), QPoint(0, 0), QPoint(0, delta_y),
        Qt.NoButton, modifiers, Qt.NoScrollPhase, False,
    )
    QApplication.sendEvent(widget, event)


def loaded(dialog) -> bool:
    return not dialog.pixmap_item.pixmap().isNull()


def test_header_shows_name_and_buttons_pass_path(viewer, pics_dir):
    make, calls = viewer
    path = str(pics_dir / "b.png")
    dialog = make(path)

    assert dialog.title_label.text() == "b.png"
    assert dialog.isModal()

    dialog.copy_button.click()
    dialog.open_button.click()

    assert calls["copy"] == [path]
    assert calls["open"] == [path]


def test_ctrl_wheel_zooms_by_transform(viewer, temp_dir, wait_for):
    make, _ = viewer
    path = make_image(temp_dir / "big.png", "PNG", size=(400, 300))
    dialog = make(path)
    assert wait_for(lambda: loaded(dialog))

    for _ in range(3):
        wheel(dialog.view.viewport(), 120, Qt.ControlModifier)

    assert dialog.zoom.factor == pytest.approx(1.3)
    assert dialog.view.transform().m11() == pytest.approx(1.3)
    assert dialog.pixmap_item.pixmap().width() == 400
    assert dialog.pixmap_item.pixmap().height() == 300

    wheel(dialog.view.viewport(), -120, Qt.ControlModifier)

    assert dialog.zoom.factor == pytest.approx(1.2)


def test_wheel_without_ctrl_leaves_zoom(viewer, pics_dir, wait_for):
    make, _ = viewer
    dialog = make(pics_dir / "A.JPG")
    assert wait_for(lambda: loaded(dialog))

    wheel(dialog.view.viewport(), 120)

    assert dialog.zoom.factor == 1.0
    assert dialog.view.transform().m11() == 1.0


def test_closing_releases_content_and_retires_ticket(viewer, pics_dir, wait_for):
    make, _ = viewer
    dialog = make(pics_dir / "b.png")
    assert wait_for(lambda: loaded(dialog))
    ticket = dialog._ticket
    dialog.zoom.zoom_in()
    dialog._update_display()

    dialog.reject()

    assert dialog._ticket is None
    assert not loaded(dialog)
    assert dialog.zoom.factor == 1.0
    assert dialog.view.transform().isIdentity()
    assert not dialog.materialize_service.is_live(ticket)


def test_result_after_close_is_ignored(viewer, pics_dir):
    make, _ = viewer
    path = str(pics_dir / "b.png")
    dialog = make(path)
    ticket = dialog._ticket

    dialog.reject()
    dialog._on_image_materialized(ticket, path, LoadResult(True, load(path), path=path))

    assert not loaded(dialog)


def test_missing_file_shows_warning(viewer, temp_dir, wait_for):
    make, _ = viewer
    dialog = make(temp_dir / "gone.png")

    assert wait_for(lambda: dialog.message_label.text().startswith("⚠️"))
    assert not loaded(dialog)
