"""Bounded, time-expiring toast queue.

``ToastStore`` owns the ordered collection of active toasts together with the
timer-handle table that drives auto-dismissal. It is framework-agnostic: UI
bindings (Qt widgets, a CLI, a test harness) call ``add`` / ``remove`` /
``list`` and ``subscribe`` to state changes.

Lifecycle rules:
 - ``add`` inserts at the tail, evicts from the head while over capacity,
   arms a timer for surviving non-persistent toasts, then notifies
   subscribers exactly once.
 - Timer expiry, ``remove``, eviction and ``clear`` share one removal path
   that cancels the pending timer in the same step as deleting the record.
 - ``dispose`` cancels every timer synchronously and drops the records
   without notifying; the store stays callable afterwards but never arms a
   new timer.

Single-threaded by contract: the only re-entry is a scheduler callback on a
later event loop turn, so no locking is done.
"""

from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass, field
from typing import (
    Any,
    Callable,
    Deque,
    Dict,
    Iterator,
    List,
    Optional,
    Tuple,
)

from ..config.settings import ToastSettings
from .announcement import AnnouncementComputer
from .eviction import FifoEvictionPolicy
from .id_issuer import IdIssuer
from .scheduler import Scheduler, TimerHandle

__all__ = [
    "Toast",
    "ToastAction",
    "ToastState",
    "StateListener",
    "ToastStore",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ToastAction:
    """Optional inline action. Opaque to the store, which never invokes it."""

    label: str
    on_invoke: Callable[[], Any] = field(compare=False, repr=False)


@dataclass(frozen=True)
class Toast:
    """Immutable toast record.

    Attributes
    ----------
    id: str
        Unique id issued by the owning store.
    variant: str
        One of success|error|warning|info|neutral.
    title: str
        Short headline text.
    description: Optional[str]
        Longer body text.
    action: Optional[ToastAction]
        Inline action passed through verbatim.
    duration_ms: int
        Auto-dismiss delay; 0 = persistent.
    created_at: int
        Per-store insertion sequence number.
    """

    id: str
    variant: str
    title: str
    description: Optional[str] = None
    action: Optional[ToastAction] = None
    duration_ms: int = 0
    created_at: int = 0

    @property
    def persistent(self) -> bool:
        return self.duration_ms == 0


@dataclass(frozen=True)
class ToastState:
    """Snapshot handed to subscribers after each state change."""

    toasts: Tuple[Toast, ...]
    announcement: str
    politeness: str

    @property
    def count(self) -> int:
        return len(self.toasts)

    @property
    def ids(self) -> List[str]:
        return [t.id for t in self.toasts]


StateListener = Callable[[ToastState], None]


@dataclass(eq=False)
class _Subscription:
    callback: StateListener
    active: bool = True


class ToastStore:
    """Ordered, capacity-bound collection of toasts with auto-dismiss timers."""

    ERROR_HISTORY_CAPACITY = 20

    def __init__(
        self,
        scheduler: Scheduler,
        settings: Optional[ToastSettings] = None,
        *,
        eviction_policy: Optional[FifoEvictionPolicy] = None,
        announcer: Optional[AnnouncementComputer] = None,
    ) -> None:
        self._settings = settings or ToastSettings()
        self._scheduler = scheduler
        self._eviction = eviction_policy or FifoEvictionPolicy()
        self._announcer = announcer or AnnouncementComputer(self._settings.announcement_noun)
        self._ids = IdIssuer(self._settings.id_prefix)
        # dict keeps insertion order -> oldest first
        self._toasts: Dict[str, Toast] = {}
        self._timers: Dict[str, TimerHandle] = {}
        self._subscribers: List[_Subscription] = []
        self._subscriber_errors: Deque[Tuple[ToastState, Exception]] = deque(
            maxlen=self.ERROR_HISTORY_CAPACITY
        )
        self._sequence = 0
        # Bumped per dispatch; a nested dispatch supersedes the outer one.
        self._generation = 0
        self._disposed = False
        self._state = self._build_state()

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def add(
        self,
        variant: str,
        title: str,
        *,
        description: Optional[str] = None,
        action: Optional[ToastAction] = None,
        duration_ms: Optional[int] = None,
    ) -> str:
        duration = int(self._settings.duration_for(variant, duration_ms))
        if duration < 0:
            logger.warning(
                "Negative duration %d for toast %r clamped to 0 (persistent)", duration, title
            )
            duration = 0
        toast_id = self._issue_id()
        self._sequence += 1
        toast = Toast(
            id=toast_id,
            variant=variant,
            title=title,
            description=description,
            action=action,
            duration_ms=duration,
            created_at=self._sequence,
        )
        self._toasts[toast_id] = toast
        logger.debug("Added toast %s (%s, %d ms)", toast_id, variant, duration)
        self._evict_overflow()
        if toast_id in self._toasts and duration > 0 and not self._disposed:
            self._arm_timer(toast_id, duration)
        self._notify()
        return toast_id

    def remove(self, toast_id: str) -> bool:
        """Remove a toast. Unknown ids are a no-op and return False."""
        if self._remove_entry(toast_id) is None:
            return False
        logger.debug("Removed toast %s", toast_id)
        self._notify()
        return True

    def clear(self) -> int:
        """Remove every toast with a single notification; returns the count."""
        ids = list(self._toasts)
        for toast_id in ids:
            self._remove_entry(toast_id)
        if ids:
            logger.debug("Cleared %d toasts", len(ids))
            self._notify()
        return len(ids)

    def list(self) -> List[Toast]:
        """Active toasts, oldest first. The returned list is a fresh copy."""
        return list(self._toasts.values())  # defensive copy

    def get(self, toast_id: str) -> Optional[Toast]:
        return self._toasts.get(toast_id)

    def subscribe(self, callback: StateListener) -> Callable[[], None]:
        """Register ``callback`` for state changes; returns an unsubscribe function."""
        sub = _Subscription(callback)
        self._subscribers.append(sub)

        def unsubscribe() -> None:
            sub.active = False
            if sub in self._subscribers:
                self._subscribers.remove(sub)

        return unsubscribe

    def reset_ids(self) -> None:
        self._ids.reset()

    def dispose(self) -> None:
        """Cancel all pending timers and drop state without notifying."""
        if self._disposed:
            return
        self._disposed = True
        handles = list(self._timers.values())
        self._timers.clear()
        for handle in handles:
            self._scheduler.cancel(handle)
        self._toasts.clear()
        for sub in self._subscribers:
            sub.active = False
        self._subscribers.clear()
        self._state = self._build_state()
        logger.debug("Disposed toast store (%d timers cancelled)", len(handles))

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------
    @property
    def settings(self) -> ToastSettings:
        return self._settings

    @property
    def max_toasts(self) -> int:
        return self._settings.max_toasts

    @property
    def state(self) -> ToastState:
        return self._state

    @property
    def announcement(self) -> str:
        return self._state.announcement

    @property
    def pending_timer_count(self) -> int:
        return len(self._timers)

    @property
    def disposed(self) -> bool:
        return self._disposed

    @property
    def subscriber_count(self) -> int:
        return len(self._subscribers)

    @property
    def subscriber_errors(self) -> List[Tuple[ToastState, Exception]]:
        return list(self._subscriber_errors)

    def __len__(self) -> int:
        return len(self._toasts)

    def __contains__(self, toast_id: object) -> bool:
        return toast_id in self._toasts

    def __iter__(self) -> Iterator[Toast]:
        return iter(self.list())

    def __repr__(self) -> str:  # pragma: no cover - trivial
        return (
            f"ToastStore(active={len(self._toasts)}, max={self.max_toasts}, "
            f"timers={len(self._timers)}, disposed={self._disposed})"
        )

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------
    def _issue_id(self) -> str:
        toast_id = self._ids.next_id()
        # Only reachable after reset_ids() while older toasts are still active.
        while toast_id in self._toasts:
            toast_id = self._ids.next_id()
        return toast_id

    def _remove_entry(self, toast_id: str) -> Optional[Toast]:
        handle = self._timers.pop(toast_id, None)
        if handle is not None:
            self._scheduler.cancel(handle)
        return self._toasts.pop(toast_id, None)

    def _evict_overflow(self) -> None:
        victims = self._eviction.select_victims(list(self._toasts), self.max_toasts)
        for victim in victims:
            if self._remove_entry(victim) is not None:
                logger.debug("Evicted toast %s (capacity %d)", victim, self.max_toasts)

    def _arm_timer(self, toast_id: str, delay_ms: int) -> None:
        def expire() -> None:
            self._on_timer(toast_id, handle)

        handle = self._scheduler.schedule(delay_ms, expire)
        self._timers[toast_id] = handle

    def _on_timer(self, toast_id: str, handle: TimerHandle) -> None:
        if self._disposed or self._timers.get(toast_id) is not handle:
            logger.debug("Ignoring stale timer for toast %s", toast_id)
            return
        logger.debug("Toast %s expired", toast_id)
        self.remove(toast_id)

    def _build_state(self) -> ToastState:
        toasts = tuple(self._toasts.values())
        return ToastState(
            toasts=toasts,
            announcement=self._announcer.summarize(toasts),
            politeness=self._announcer.politeness(toasts),
        )

    def _notify(self) -> None:
        state = self._build_state()
        self._state = state
        self._generation += 1
        generation = self._generation
        # Snapshot first so callbacks may (un)subscribe or mutate the store.
        for sub in list(self._subscribers):
            if self._generation != generation:
                # A nested change already delivered newer state to everyone.
                break
            if not sub.active:
                continue
            try:
                sub.callback(state)
            except Exception as exc:  # noqa: BLE001 - isolate subscriber failures
                logger.exception("Toast subscriber %r failed", sub.callback)
                self._subscriber_errors.append((state, exc))
