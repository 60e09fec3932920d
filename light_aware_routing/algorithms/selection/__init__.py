"""
Route variant selection.
"""

from .variant_selector import (
    RouteVariant,
    RouteVariantSelector,
    select_route_variants,
    VARIANT_LABELS,
    FASTEST,
    BALANCED,
    MOST_LIT
)

__all__ = [
    'RouteVariant',
    'RouteVariantSelector',
    'select_route_variants',
    'VARIANT_LABELS',
    'FASTEST',
    'BALANCED',
    'MOST_LIT'
]
