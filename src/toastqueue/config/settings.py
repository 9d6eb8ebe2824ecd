"""Global configuration and constants for toast queues."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Final, Mapping, Optional

from ..design.variants import uses_error_duration
from ..errors import ConfigurationError

__all__ = [
    "DEFAULT_DURATION_MS",
    "DEFAULT_ERROR_DURATION_MS",
    "DEFAULT_MAX_TOASTS",
    "DEFAULT_REGION_LABEL",
    "DEFAULT_DISMISS_LABEL",
    "DEFAULT_ID_PREFIX",
    "DEFAULT_ANNOUNCEMENT_NOUN",
    "ENV_DEFAULT_DURATION_MS",
    "ENV_DEFAULT_ERROR_DURATION_MS",
    "ENV_MAX_TOASTS",
    "ToastSettings",
]

DEFAULT_DURATION_MS: Final = 5000
DEFAULT_ERROR_DURATION_MS: Final = 8000  # errors stay visible longer
DEFAULT_MAX_TOASTS: Final = 5
DEFAULT_REGION_LABEL: Final = "Notifications"
DEFAULT_DISMISS_LABEL: Final = "Dismiss notification"
DEFAULT_ID_PREFIX: Final = "toast-"
DEFAULT_ANNOUNCEMENT_NOUN: Final = "notification"

ENV_DEFAULT_DURATION_MS: Final = "TOASTQUEUE_DEFAULT_DURATION_MS"
ENV_DEFAULT_ERROR_DURATION_MS: Final = "TOASTQUEUE_DEFAULT_ERROR_DURATION_MS"
ENV_MAX_TOASTS: Final = "TOASTQUEUE_MAX_TOASTS"


def _env_int(env: Mapping[str, str], key: str, default: int) -> int:
    raw = env.get(key)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw.strip())
    except ValueError:
        raise ConfigurationError(f"{key} must be an integer, got {raw!r}") from None


@dataclass(frozen=True)
class ToastSettings:
    """Settings supplied once when a queue is constructed.

    Attributes:
        max_toasts: Capacity of the queue. Values <= 0 are accepted and make
            every new toast evicted right after insertion.
        default_duration_ms: Auto-dismiss delay for non-error variants.
        error_duration_ms: Auto-dismiss delay for the ``error`` variant.
        region_label: Accessible label for the live region that renders
            the announcement string.
        dismiss_label: Accessible label for each toast's dismiss control.
        id_prefix: Prefix used by the id issuer (``toast-1``, ``toast-2``...).
        announcement_noun: Singular noun used by the announcement summary.
    """

    max_toasts: int = DEFAULT_MAX_TOASTS
    default_duration_ms: int = DEFAULT_DURATION_MS
    error_duration_ms: int = DEFAULT_ERROR_DURATION_MS
    region_label: str = DEFAULT_REGION_LABEL
    dismiss_label: str = DEFAULT_DISMISS_LABEL
    id_prefix: str = DEFAULT_ID_PREFIX
    announcement_noun: str = DEFAULT_ANNOUNCEMENT_NOUN

    def __post_init__(self) -> None:
        if self.default_duration_ms < 0:
            raise ConfigurationError("default_duration_ms must be >= 0")
        if self.error_duration_ms < 0:
            raise ConfigurationError("error_duration_ms must be >= 0")
        if not self.announcement_noun:
            raise ConfigurationError("announcement_noun must be non-empty")

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None, **overrides) -> "ToastSettings":
        """Build settings from ``TOASTQUEUE_*`` environment variables.

        Explicit keyword overrides win over the environment.
        """
        source = os.environ if env is None else env
        values = {
            "max_toasts": _env_int(source, ENV_MAX_TOASTS, DEFAULT_MAX_TOASTS),
            "default_duration_ms": _env_int(
                source, ENV_DEFAULT_DURATION_MS, DEFAULT_DURATION_MS
            ),
            "error_duration_ms": _env_int(
                source, ENV_DEFAULT_ERROR_DURATION_MS, DEFAULT_ERROR_DURATION_MS
            ),
        }
        values.update(overrides)
        return cls(**values)

    def duration_for(self, variant: str, override: Optional[int] = None) -> int:
        """Resolve the auto-dismiss delay for ``variant``.

        An explicit ``override`` is returned unchanged (clamping is the
        store's job); otherwise the per-variant default applies.
        """
        if override is not None:
            return override
        if uses_error_duration(variant):
            return self.error_duration_ms
        return self.default_duration_ms
