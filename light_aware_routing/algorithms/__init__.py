"""
Scoring and selection algorithms.

This module contains:
- Light scoring strategies (multi-term and legacy density)
- Route variant selection (fastest, balanced, most-lit)
"""

from .light_scoring import (
    BaseLightScorer,
    AdvancedLightScorer,
    DensityLightScorer,
    LightScoreBreakdown,
    LightScorerFactory,
    LightScoringMethod,
    create_scorer_from_string,
    create_scorer_from_config
)
from .selection import RouteVariant, RouteVariantSelector, select_route_variants

__all__ = [
    'BaseLightScorer',
    'AdvancedLightScorer',
    'DensityLightScorer',
    'LightScoreBreakdown',
    'LightScorerFactory',
    'LightScoringMethod',
    'create_scorer_from_string',
    'create_scorer_from_config',
    'RouteVariant',
    'RouteVariantSelector',
    'select_route_variants'
]
