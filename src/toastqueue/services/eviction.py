"""Overflow eviction policy.

Strict FIFO: when the queue holds more than ``max_toasts`` entries, the oldest
ones go first. There is no variant-based priority and no pinning. A capacity
of zero (or less) evicts everything, including the toast just inserted; the
store still emits its single ``add`` notification in that case.
"""

from __future__ import annotations

from typing import List, Sequence

__all__ = ["FifoEvictionPolicy"]


class FifoEvictionPolicy:
    def select_victims(self, active_ids: Sequence[str], max_toasts: int) -> List[str]:
        """Return the ids to evict, oldest first, so the rest fits capacity."""
        limit = max(0, max_toasts)
        overflow = len(active_ids) - limit
        if overflow <= 0:
            return []
        return list(active_ids[:overflow])
