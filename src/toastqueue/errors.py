"""Exception hierarchy for the toast queue.

Only configuration and registry lookups raise. Queue operations (add, remove,
dispose) are always-completing and never raise for application-level misuse.
"""

from __future__ import annotations

__all__ = ["ToastQueueError", "UnknownVariantError", "ConfigurationError"]


class ToastQueueError(Exception):
    """Base class for all toast queue errors."""


class UnknownVariantError(ToastQueueError, KeyError):
    """Raised when a variant id is not present in the variant registry."""


class ConfigurationError(ToastQueueError, ValueError):
    """Raised when settings (or their environment overrides) are malformed."""
