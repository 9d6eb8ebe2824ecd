"""Testing utilities for toast queues.

Headless and Qt-free: nothing here imports PyQt, so queue behavior can be
asserted against virtual time without an event loop.
"""

from __future__ import annotations

__all__ = ["VirtualScheduler"]

from .virtual_scheduler import VirtualScheduler  # noqa: E402
