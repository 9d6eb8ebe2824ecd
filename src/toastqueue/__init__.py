"""toastqueue public API.

Curated surface for UI bindings and tests. It covers the queue core, its
settings and the variant registry. PyQt6 is not imported here. The Qt-backed
scheduler lives in ``toastqueue.services.qt_scheduler`` and the deterministic
test scheduler in ``toastqueue.testing``.
"""

from __future__ import annotations

__version__ = "0.1.0"

from .errors import (  # noqa: F401
    ToastQueueError,
    UnknownVariantError,
    ConfigurationError,
)
from .config.settings import (  # noqa: F401
    DEFAULT_DURATION_MS,
    DEFAULT_ERROR_DURATION_MS,
    DEFAULT_MAX_TOASTS,
    DEFAULT_REGION_LABEL,
    DEFAULT_DISMISS_LABEL,
    ToastSettings,
)
from .design.variants import (  # noqa: F401
    VARIANT_IDS,
    VariantStyle,
    get_variant_style,
    get_aria_role,
    get_aria_live,
)
from .services import (  # noqa: F401
    Scheduler,
    TimerHandle,
    IdIssuer,
    FifoEvictionPolicy,
    AnnouncementComputer,
    Toast,
    ToastAction,
    ToastState,
    ToastStore,
    ToastProvider,
)
