"""Convenience facade over a single ``ToastStore``.

Mirrors what UI code typically wants from a toast context: one-liners per
variant (``success``, ``error``...), dismissal helpers and teardown via the
context-manager protocol::

    with ToastProvider(scheduler=QtScheduler(window)) as toasts:
        toasts.success("Profile created", '"dev" has been created.')
        ...
    # leaving the block disposes the store (all timers cancelled)

Unlike the store, ``toast`` validates the variant id; this is the layer that
sanitizes caller input.
"""

from __future__ import annotations

import logging
from typing import Callable, List, Optional

from ..config.settings import ToastSettings
from ..design.variants import get_variant_style
from .scheduler import Scheduler
from .toast_store import StateListener, Toast, ToastAction, ToastState, ToastStore

__all__ = ["ToastProvider"]

logger = logging.getLogger(__name__)


class ToastProvider:
    def __init__(
        self,
        settings: Optional[ToastSettings] = None,
        scheduler: Optional[Scheduler] = None,
    ) -> None:
        if scheduler is None:
            # PyQt6 is only imported when no scheduler is supplied.
            from .qt_scheduler import QtScheduler

            scheduler = QtScheduler()
        self._settings = settings or ToastSettings()
        self._store = ToastStore(scheduler, self._settings)

    # Generic -----------------------------------------------------------
    def toast(
        self,
        variant: str,
        title: str,
        description: Optional[str] = None,
        *,
        action: Optional[ToastAction] = None,
        duration_ms: Optional[int] = None,
    ) -> str:
        get_variant_style(variant)  # raises UnknownVariantError
        return self._store.add(
            variant,
            title,
            description=description,
            action=action,
            duration_ms=duration_ms,
        )

    # Per-variant shortcuts --------------------------------------------
    def success(self, title: str, description: Optional[str] = None, **kwargs) -> str:
        return self.toast("success", title, description, **kwargs)

    def error(self, title: str, description: Optional[str] = None, **kwargs) -> str:
        return self.toast("error", title, description, **kwargs)

    def warning(self, title: str, description: Optional[str] = None, **kwargs) -> str:
        return self.toast("warning", title, description, **kwargs)

    def info(self, title: str, description: Optional[str] = None, **kwargs) -> str:
        return self.toast("info", title, description, **kwargs)

    def neutral(self, title: str, description: Optional[str] = None, **kwargs) -> str:
        return self.toast("neutral", title, description, **kwargs)

    # Dismissal ----------------------------------------------------------
    def dismiss(self, toast_id: str) -> bool:
        return self._store.remove(toast_id)

    def dismiss_all(self) -> int:
        return self._store.clear()

    # State ---------------------------------------------------------------
    @property
    def store(self) -> ToastStore:
        return self._store

    @property
    def toasts(self) -> List[Toast]:
        return self._store.list()

    @property
    def state(self) -> ToastState:
        return self._store.state

    @property
    def announcement(self) -> str:
        return self._store.announcement

    @property
    def region_label(self) -> str:
        return self._settings.region_label

    @property
    def dismiss_label(self) -> str:
        return self._settings.dismiss_label

    def subscribe(self, callback: StateListener) -> Callable[[], None]:
        return self._store.subscribe(callback)

    def reset_ids(self) -> None:
        self._store.reset_ids()

    # Teardown --------------------------------------------------------
    def dispose(self) -> None:
        self._store.dispose()

    def __enter__(self) -> "ToastProvider":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.dispose()
        logger.debug("ToastProvider torn down")
