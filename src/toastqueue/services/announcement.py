"""Screen-reader announcement text derived from queue state.

The store recomputes the summary after every state change and ships it in
the ``ToastState`` payload; an external live region renders it. Nothing here
touches the DOM / widgets.
"""

from __future__ import annotations

from typing import Iterable, Sequence, TYPE_CHECKING

from ..config.settings import DEFAULT_ANNOUNCEMENT_NOUN
from ..design.variants import LIVE_ASSERTIVE, LIVE_POLITE, get_aria_live

if TYPE_CHECKING:  # pragma: no cover
    from .toast_store import Toast

__all__ = ["AnnouncementComputer"]


class AnnouncementComputer:
    """Pure helpers mapping the active toasts to live-region text."""

    def __init__(self, noun: str = DEFAULT_ANNOUNCEMENT_NOUN, plural: str | None = None) -> None:
        self._noun = noun
        self._plural = plural or f"{noun}s"

    def summarize(self, toasts: Sequence["Toast"]) -> str:
        count = len(toasts)
        if count == 0:
            return f"No {self._plural}"
        if count == 1:
            return f"1 {self._noun}"
        return f"{count} {self._plural}"

    def politeness(self, toasts: Iterable["Toast"]) -> str:
        """'assertive' if any active toast demands interruption, else 'polite'."""
        for toast in toasts:
            if get_aria_live(toast.variant) == LIVE_ASSERTIVE:
                return LIVE_ASSERTIVE
        return LIVE_POLITE
