"""
Materializer service for Photo Sidebar.
Turns image files into self-contained, embeddable data blobs on demand.
"""

import base64
import logging
import os
from collections import deque
from typing import Callable, Set

from PySide6.QtCore import QMutex, QObject, QThread, Signal, Slot

from ..config import CONFIG, parse_human_size
from ..core.classifier import content_type_of
from ..core.errors import MaterializeError, ReadError
from ..core.models import DisplayableImage, LoadResult

logger = logging.getLogger(__name__)


def load(path: str, max_size: int = CONFIG["MAX_MATERIALIZE_SIZE"]) -> DisplayableImage:
    """
    Read a file and encode it, with its content type, as a DisplayableImage.

    Raises:
        ReadError: the file is missing, not a regular file, unreadable or
            larger than max_size
    """
    if not os.path.isfile(path):
        raise ReadError(path, f"Not a regular file: {path}")
    try:
        file_size = os.path.getsize(path)
        if file_size > max_size:
            raise ReadError(
                path,
                f"Image too large ({parse_human_size(file_size)}, "
                f"limit {parse_human_size(max_size)})"
            )
        with open(path, 'rb') as f:
            raw = f.read()
        payload = base64.b64encode(raw).decode('ascii')
    except OSError as e:
        raise ReadError(path, e.strerror or str(e)) from e
    except MemoryError as e:
        raise ReadError(path, "Not enough memory to load image") from e

    return DisplayableImage(path=path, content_type=content_type_of(path), payload=payload)


class MaterializeWorker(QObject):
    """
    Worker object that materializes images in a separate thread.

    Requests wait in a queue owned by the worker; each wake signal processes
    one of them. Priority requests jump the queue and requests whose ticket
    has been retired are dropped without touching the file.
    """
    imageMaterialized = Signal(int, str, object)  # ticket, path, LoadResult
    wake = Signal()

    def __init__(self, max_size: int, is_live: Callable[[int], bool]):
        super().__init__()
        self.max_size = max_size
        self.is_live = is_live
        self.running = True
        self._pending = deque()
        self._mutex = QMutex()

    def enqueue(self, ticket: int, path: str, priority: bool = False):
        self._mutex.lock()
        try:
            if priority:
                self._pending.appendleft((ticket, path))
            else:
                self._pending.append((ticket, path))
        finally:
            self._mutex.unlock()
        self.wake.emit()

    @Slot()
    def process_next(self):
        if not self.running:
            return
        self._mutex.lock()
        try:
            if not self._pending:
                return
            ticket, path = self._pending.popleft()
        finally:
            self._mutex.unlock()

        if not self.is_live(ticket):
            logger.debug("Skipping %s: ticket %d retired", path, ticket)
            return
        try:
            image = load(path, self.max_size)
            result = LoadResult(success=True, data=image, path=path)
        except MaterializeError as e:
            logger.warning("Cannot materialize %s: %s", path, e)
            result = LoadResult(success=False, error_message=str(e), path=path)
        self.imageMaterialized.emit(ticket, path, result)


class MaterializeService(QObject):
    """
    Loads images off the GUI thread.

    Results arrive through imageMaterialized on the GUI thread, tagged with
    the ticket given at request time. A ticket stays live from next_ticket()
    until retire(); queued work for a retired ticket is skipped, and
    receivers still drop any result whose ticket is no longer their own.
    """

    imageMaterialized = Signal(int, str, object)  # ticket, path, LoadResult

    def __init__(self, config=None):
        super().__init__()
        config = config or CONFIG
        self.max_size = int(config.get("MAX_MATERIALIZE_SIZE", CONFIG["MAX_MATERIALIZE_SIZE"]))
        self._last_ticket = 0
        self._live_tickets: Set[int] = set()
        self._tickets_mutex = QMutex()

        self.thread = QThread()
        self.worker = MaterializeWorker(self.max_size, self.is_live)
        self.worker.moveToThread(self.thread)

        self.worker.imageMaterialized.connect(self._on_image_materialized)
        self.worker.wake.connect(self.worker.process_next)

        self.thread.start()

    def next_ticket(self) -> int:
        """Allocate a live ticket for a new render or request batch."""
        self._tickets_mutex.lock()
        try:
            self._last_ticket += 1
            self._live_tickets.add(self._last_ticket)
            return self._last_ticket
        finally:
            self._tickets_mutex.unlock()

    def retire(self, ticket: int):
        """Mark ticket superseded; its queued requests will not be loaded."""
        self._tickets_mutex.lock()
        try:
            self._live_tickets.discard(ticket)
        finally:
            self._tickets_mutex.unlock()

    def is_live(self, ticket: int) -> bool:
        self._tickets_mutex.lock()
        try:
            return ticket in self._live_tickets
        finally:
            self._tickets_mutex.unlock()

    def request(self, ticket: int, path: str, priority: bool = False):
        """Request materialization of path; the result is emitted later."""
        if self.thread.isRunning():
            self.worker.enqueue(ticket, path, priority)

    @Slot(int, str, object)
    def _on_image_materialized(self, ticket: int, path: str, result: LoadResult):
        self.imageMaterialized.emit(ticket, path, result)

    def stop_service(self):
        """Stop the worker thread; pending requests are dropped."""
        self.worker.running = False
        self.thread.quit()
        self.thread.wait()
