"""Design-level metadata for toasts (variants, accessibility semantics)."""

from .variants import (  # noqa: F401
    VariantStyle,
    list_variant_styles,
    get_variant_style,
    is_known_variant,
    uses_error_duration,
    get_aria_role,
    get_aria_live,
    VARIANT_IDS,
)
