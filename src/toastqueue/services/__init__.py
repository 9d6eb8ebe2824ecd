"""Service layer exports.

Responsibilities:
 - ``ToastStore`` queue core (add / remove / list / subscribe / dispose)
 - Collaborators: scheduler protocol, id issuer, eviction, announcements
 - ``ToastProvider`` convenience facade

``QtScheduler`` is not re-exported here because importing it pulls in PyQt6.
Use ``from toastqueue.services.qt_scheduler import QtScheduler``.
"""

from .scheduler import Scheduler, TimerHandle  # noqa: F401
from .id_issuer import IdIssuer  # noqa: F401
from .eviction import FifoEvictionPolicy  # noqa: F401
from .announcement import AnnouncementComputer  # noqa: F401
from .toast_store import Toast, ToastAction, ToastState, ToastStore  # noqa: F401
from .toast_provider import ToastProvider  # noqa: F401

__all__ = [
    "Scheduler",
    "TimerHandle",
    "IdIssuer",
    "FifoEvictionPolicy",
    "AnnouncementComputer",
    "Toast",
    "ToastAction",
    "ToastState",
    "ToastStore",
    "ToastProvider",
]
