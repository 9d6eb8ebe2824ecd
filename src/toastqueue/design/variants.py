"""Toast variant registry.

Defines the closed set of toast variants and the semantic metadata attached
to each: accessibility role, live-region politeness, icon key and whether the
variant uses the longer error dismissal delay.

Scope is data-only; actual durations live in ``config.settings`` so they can
be tuned per deployment, and rendering (colors, icons, classes) belongs to
the presentation layer.

Variant Model
-------------
 - ``error`` is announced assertively (role ``alert``) and keeps the longer
   default duration.
 - Every other variant is announced politely (role ``status``).
 - Lookups through ``get_aria_role`` / ``get_aria_live`` are lenient: unknown
   ids fall back to the polite ``status`` semantics instead of raising.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Tuple

from ..errors import UnknownVariantError

__all__ = [
    "VariantStyle",
    "VARIANT_IDS",
    "list_variant_styles",
    "get_variant_style",
    "is_known_variant",
    "uses_error_duration",
    "get_aria_role",
    "get_aria_live",
    "ROLE_ALERT",
    "ROLE_STATUS",
    "LIVE_ASSERTIVE",
    "LIVE_POLITE",
]

ROLE_ALERT = "alert"
ROLE_STATUS = "status"
LIVE_ASSERTIVE = "assertive"
LIVE_POLITE = "polite"


@dataclass(frozen=True)
class VariantStyle:
    """Semantic variant definition.

    Attributes
    ----------
    id: str
        Stable variant identifier (e.g., 'info', 'error').
    role: str
        ARIA role of an individual toast ('alert' or 'status').
    politeness: str
        aria-live value ('assertive' or 'polite').
    icon: str
        Icon registry key used by the rendering layer.
    uses_error_duration: bool
        If True, the error default duration applies when none is given.
    """

    id: str
    role: str
    politeness: str
    icon: str
    uses_error_duration: bool

    @property
    def assertive(self) -> bool:
        return self.politeness == LIVE_ASSERTIVE


_REGISTRY: Dict[str, VariantStyle] = {}


def _register(vs: VariantStyle) -> None:
    if vs.id in _REGISTRY:
        raise ValueError(f"Duplicate toast variant id: {vs.id}")
    _REGISTRY[vs.id] = vs


_register(
    VariantStyle(
        id="success",
        role=ROLE_STATUS,
        politeness=LIVE_POLITE,
        icon="status-success",
        uses_error_duration=False,
    )
)
_register(
    VariantStyle(
        id="error",
        role=ROLE_ALERT,
        politeness=LIVE_ASSERTIVE,
        icon="status-error",
        uses_error_duration=True,
    )
)
_register(
    VariantStyle(
        id="warning",
        role=ROLE_STATUS,
        politeness=LIVE_POLITE,
        icon="status-warning",
        uses_error_duration=False,
    )
)
_register(
    VariantStyle(
        id="info",
        role=ROLE_STATUS,
        politeness=LIVE_POLITE,
        icon="status-info",
        uses_error_duration=False,
    )
)
_register(
    VariantStyle(
        id="neutral",
        role=ROLE_STATUS,
        politeness=LIVE_POLITE,
        icon="status-neutral",
        uses_error_duration=False,
    )
)

VARIANT_IDS: Tuple[str, ...] = tuple(_REGISTRY)


def list_variant_styles() -> List[VariantStyle]:
    """Return styles in registration order."""
    return list(_REGISTRY.values())


def get_variant_style(variant_id: str) -> VariantStyle:
    vs = _REGISTRY.get(variant_id)
    if vs is None:
        raise UnknownVariantError(f"Unknown toast variant: {variant_id}")
    return vs


def is_known_variant(variant_id: str) -> bool:
    return variant_id in _REGISTRY


def uses_error_duration(variant_id: str) -> bool:
    vs = _REGISTRY.get(variant_id)
    return bool(vs and vs.uses_error_duration)


def get_aria_role(variant_id: str) -> str:
    vs = _REGISTRY.get(variant_id)
    return vs.role if vs else ROLE_STATUS


def get_aria_live(variant_id: str) -> str:
    vs = _REGISTRY.get(variant_id)
    return vs.politeness if vs else LIVE_POLITE
