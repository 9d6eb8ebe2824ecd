"""QTimer-backed scheduler used by Qt front ends.

Each scheduled callback gets its own single-shot ``QTimer``. Timers can be
parented to a ``QObject`` (typically the widget hosting the toasts) so Qt
tears them down together with the widget tree.

Requires a running (or at least constructed) ``QCoreApplication``; timers
only fire while its event loop is processing events.
"""

from __future__ import annotations

import logging
from typing import Optional

from PyQt6.QtCore import QObject, QTimer

from .scheduler import TimerCallback, TimerHandle

__all__ = ["QtScheduler"]

logger = logging.getLogger(__name__)


class QtScheduler:
    """Production ``Scheduler`` implementation on top of ``QTimer``."""

    def __init__(self, parent: Optional[QObject] = None) -> None:
        self._parent = parent
        self._live: set[TimerHandle] = set()

    def schedule(self, delay_ms: int, callback: TimerCallback) -> TimerHandle:
        handle = TimerHandle(delay_ms, callback)
        timer = QTimer(self._parent)
        timer.setSingleShot(True)
        timer.setInterval(max(0, int(delay_ms)))
        timer.timeout.connect(lambda h=handle: self._on_timeout(h))  # type: ignore
        handle.backend_ref = timer
        self._live.add(handle)
        timer.start()
        return handle

    def cancel(self, handle: TimerHandle) -> None:
        handle.cancel()
        self._release(handle)

    @property
    def pending_count(self) -> int:
        return sum(1 for h in self._live if h.active)

    def _on_timeout(self, handle: TimerHandle) -> None:
        # TimerHandle refuses to run once cancelled, so a queued timeout
        # that races a cancel() is dropped here.
        try:
            handle.fire()
        finally:
            self._release(handle)

    def _release(self, handle: TimerHandle) -> None:
        self._live.discard(handle)
        timer = handle.backend_ref
        if timer is None:
            return
        handle.backend_ref = None
        if timer.isActive():
            timer.stop()
        timer.deleteLater()
        logger.debug("Released QTimer for %r", handle)
