"""Construction-time configuration for toast queues."""

from .settings import (  # noqa: F401
    DEFAULT_DURATION_MS,
    DEFAULT_ERROR_DURATION_MS,
    DEFAULT_MAX_TOASTS,
    DEFAULT_REGION_LABEL,
    DEFAULT_DISMISS_LABEL,
    DEFAULT_ID_PREFIX,
    ToastSettings,
)
