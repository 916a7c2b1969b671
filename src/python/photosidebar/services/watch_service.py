"""
Watch service - filesystem change notifications for the gallery root.
"""

import logging
import os
from typing import Callable, Optional

from PySide6.QtCore import QObject, QTimer, Signal, Slot
from watchdog.events import FileSystemEventHandler
from watchdog.observers import Observer

from ..config import CONFIG
from ..core.errors import WatchUnavailableError
from ..core.models import WatchSubscription

logger = logging.getLogger(__name__)


class RootEventHandler(FileSystemEventHandler):
    """Forwards every event under the root to the GUI thread."""

    def __init__(self, controller: 'WatchController', token: int):
        super().__init__()
        self.controller = controller
        self.token = token

    def on_any_event(self, event):
        # Runs on the observer thread; the signal is queued to the GUI thread.
        self.controller.rootChanged.emit(self.token)


class WatchController(QObject):
    """
    Keeps at most one watchdog subscription alive for a view.

    Every change notification, whatever its type, is debounced and then
    reported through the on_change callback with no arguments; callers
    re-scan the whole root.
    """

    rootChanged = Signal(int)  # subscription token

    def __init__(self, observer_factory: Callable = Observer,
                 debounce_ms: int = CONFIG["WATCH_DEBOUNCE_MS"], parent=None):
        super().__init__(parent)
        self.observer_factory = observer_factory
        self.subscription: Optional[WatchSubscription] = None
        self._on_change: Optional[Callable[[], None]] = None
        self._next_token = 0

        self._debounce_timer = QTimer(self)
        self._debounce_timer.setSingleShot(True)
        self._debounce_timer.setInterval(debounce_ms)
        self._debounce_timer.timeout.connect(self._emit_change)

        self.rootChanged.connect(self._on_root_changed)

    @property
    def active(self) -> bool:
        return self.subscription is not None and self.subscription.active

    def _start_observer(self, root: str, recursive: bool, token: int):
        observer = self.observer_factory()
        observer.daemon = True
        observer.start()
        try:
            observer.schedule(RootEventHandler(self, token), root, recursive=recursive)
        except Exception:
            self._shutdown_observer(observer)
            raise
        return observer

    @staticmethod
    def _shutdown_observer(observer):
        try:
            observer.stop()
            observer.join()
        except Exception as e:
            logger.debug("Error while stopping observer: %s", e)

    def start_watching(self, root: str, recursive: bool,
                       on_change: Callable[[], None]) -> Optional[WatchSubscription]:
        """
        Subscribe to changes below root, replacing any active subscription.

        Falls back to a non-recursive watch when a recursive one cannot be
        set up. Returns None when watching is unavailable; the view then
        relies on manual refresh.
        """
        self.stop_watching()
        self._on_change = on_change
        self._next_token += 1
        token = self._next_token

        try:
            if not root or not os.path.isdir(root):
                raise WatchUnavailableError(f"Folder not found: {root}")
            try:
                observer = self._start_observer(root, recursive, token)
                effective = recursive
            except Exception as e:
                if not recursive:
                    raise WatchUnavailableError(str(e)) from e
                logger.warning("Recursive watch failed for %s, falling back to "
                               "non-recursive: %s", root, e)
                try:
                    observer = self._start_observer(root, False, token)
                except Exception as inner:
                    raise WatchUnavailableError(str(inner)) from inner
                effective = False
        except WatchUnavailableError as e:
            logger.warning("Watching unavailable for %s: %s", root, e)
            self._on_change = None
            return None

        self.subscription = WatchSubscription(
            root=root,
            recursive=recursive,
            effective_recursive=effective,
            token=token,
            observer=observer,
        )
        logger.debug("Watching %s (recursive=%s)", root, effective)
        return self.subscription

    def stop_watching(self, subscription: Optional[WatchSubscription] = None):
        """Tear down the given (or the active) subscription. Never raises."""
        target = subscription or self.subscription
        if target is None:
            return
        if target.active:
            target.active = False
            self._shutdown_observer(target.observer)
            logger.debug("Stopped watching %s", target.root)
        if target is self.subscription:
            self.subscription = None
            self._on_change = None
            self._debounce_timer.stop()

    @Slot(int)
    def _on_root_changed(self, token: int):
        if self.subscription is None or token != self.subscription.token:
            return
        self._debounce_timer.start()

    def _emit_change(self):
        if self._on_change is not None and self.active:
            self._on_change()
