"""Scheduler abstraction for auto-dismiss timers.

A scheduler runs a callback after a delay and hands back a cancellable
``TimerHandle``. Production code uses ``QtScheduler`` (``qt_scheduler``
module, backed by ``QTimer``); tests use
``toastqueue.testing.VirtualScheduler`` which advances a virtual clock
deterministically.

Guarantees shared by every backend (enforced by ``TimerHandle`` itself, so a
backend only has to call ``handle.fire()`` when its runtime timer elapses):
 - A callback runs at most once.
 - A callback never runs after ``cancel`` returned, even if the runtime
   timer was already in flight.
 - ``cancel`` is idempotent, including after the callback already ran.
"""

from __future__ import annotations

from typing import Any, Callable, Optional, Protocol

__all__ = ["TimerCallback", "TimerHandle", "Scheduler"]

TimerCallback = Callable[[], None]


class TimerHandle:
    """One scheduled callback; owned by the scheduler that created it."""

    __slots__ = ("delay_ms", "_callback", "_cancelled", "_fired", "backend_ref")

    def __init__(self, delay_ms: int, callback: TimerCallback) -> None:
        self.delay_ms = delay_ms
        self._callback: Optional[TimerCallback] = callback
        self._cancelled = False
        self._fired = False
        # Backend-specific payload (QTimer instance, heap entry, ...).
        self.backend_ref: Any = None

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    @property
    def fired(self) -> bool:
        return self._fired

    @property
    def active(self) -> bool:
        return not (self._cancelled or self._fired)

    def cancel(self) -> bool:
        """Mark the handle cancelled. Returns True if it was still active."""
        if not self.active:
            return False
        self._cancelled = True
        self._callback = None
        return True

    def fire(self) -> bool:
        """Run the callback if still active. Returns True if it ran."""
        if not self.active:
            return False
        self._fired = True
        callback, self._callback = self._callback, None
        if callback is not None:
            callback()
        return True

    def __repr__(self) -> str:  # pragma: no cover - trivial
        state = "cancelled" if self._cancelled else "fired" if self._fired else "pending"
        return f"TimerHandle(delay_ms={self.delay_ms}, {state})"


class Scheduler(Protocol):
    def schedule(self, delay_ms: int, callback: TimerCallback) -> TimerHandle:
        """Run ``callback`` once after ``delay_ms`` milliseconds."""
        ...  # pragma: no cover - structural

    def cancel(self, handle: TimerHandle) -> None:
        """Cancel ``handle``; safe to call repeatedly or after it fired."""
        ...  # pragma: no cover - structural
