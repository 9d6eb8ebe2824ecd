"""Per-store toast id issuer.

Ids are a prefix plus a monotonically increasing counter (``toast-1``,
``toast-2``, ...). The counter lives on the issuer instance, and every
``ToastStore`` owns its own issuer, so independent queues never share state.
``reset()`` exists for test determinism only.
"""

from __future__ import annotations

from ..config.settings import DEFAULT_ID_PREFIX

__all__ = ["IdIssuer"]


class IdIssuer:
    def __init__(self, prefix: str = DEFAULT_ID_PREFIX, start: int = 1) -> None:
        self._prefix = prefix
        self._start = start
        self._next = start

    @property
    def prefix(self) -> str:
        return self._prefix

    @property
    def issued_count(self) -> int:
        return self._next - self._start

    def next_id(self) -> str:
        value = self._next
        self._next += 1
        return f"{self._prefix}{value}"

    def peek(self) -> str:
        """Return the id ``next_id`` would issue, without consuming it."""
        return f"{self._prefix}{self._next}"

    def reset(self) -> None:
        self._next = self._start

    def __repr__(self) -> str:  # pragma: no cover - trivial
        return f"IdIssuer(prefix={self._prefix!r}, next={self._next})"
