"""
Pytest configuration and fixtures for Photo Sidebar tests.
"""
import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import shutil
import tempfile
import time
from pathlib import Path

import pytest
from PIL import Image


@pytest.fixture(scope="session")
def qapp():
    """A QApplication shared by all Qt tests."""
    from PySide6.QtWidgets import QApplication
    app = QApplication.instance() or QApplication([])
    yield app


@pytest.fixture
def wait_for(qapp):
    """Process Qt events until a condition holds or the timeout expires."""
    def _wait(condition, timeout: float = 5.0) -> bool:
        deadline = time.monotonic() + timeout
        while time.monotonic() < deadline:
            qapp.processEvents()
            if condition():
                return True
            time.sleep(0.01)
        qapp.processEvents()
        return condition()
    return _wait


@pytest.fixture
def temp_dir():
    """Create a temporary directory for testing."""
    temp_path = tempfile.mkdtemp()
    yield Path(temp_path)
    shutil.rmtree(temp_path, ignore_errors=True)


def make_image(path: Path, fmt: str, size=(24, 32), color=(200, 30, 30)) -> Path:
    """Write a small solid-color raster image."""
    path.parent.mkdir(parents=True, exist_ok=True)
    Image.new("RGB", size, color=color).save(path, fmt)
    return path


SVG_DOCUMENT = (
    '<svg xmlns="http://www.w3.org/2000/svg" width="10" height="10">'
    '<rect width="10" height="10" fill="red"/></svg>'
)


@pytest.fixture
def pics_dir(temp_dir):
    """The /pics layout: b.png, A.JPG and sub/c.gif, plus a non-image file."""
    root = temp_dir / "pics"
    root.mkdir()
    make_image(root / "b.png", "PNG")
    make_image(root / "A.JPG", "JPEG")
    make_image(root / "sub" / "c.gif", "GIF")
    (root / "notes.txt").write_text("not an image")
    return root


@pytest.fixture
def svg_file(temp_dir):
    path = temp_dir / "logo.svg"
    path.write_text(SVG_DOCUMENT)
    return path


class FakeObserver:
    """Stand-in for a watchdog observer that records its lifecycle."""

    def __init__(self, fail_recursive: bool = False, fail_all: bool = False):
        self.fail_recursive = fail_recursive
        self.fail_all = fail_all
        self.daemon = False
        self.started = False
        self.stop_count = 0
        self.scheduled = []

    def start(self):
        self.started = True

    def schedule(self, event_handler, path, recursive=False):
        if self.fail_all or (recursive and self.fail_recursive):
            raise OSError("recursive watch not supported")
        self.scheduled.append((event_handler, path, recursive))

    def stop(self):
        self.stop_count += 1

    def join(self, timeout=None):
        pass

    @property
    def live(self) -> bool:
        return self.started and self.stop_count == 0 and bool(self.scheduled)


@pytest.fixture
def fake_observers():
    """A list of created FakeObservers plus a factory that appends to it."""
    created = []

    def factory(**kwargs):
        def _make():
            observer = FakeObserver(**kwargs)
            created.append(observer)
            return observer
        return _make

    return created, factory
