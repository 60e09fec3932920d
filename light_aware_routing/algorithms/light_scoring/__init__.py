"""
Light scoring strategies for route candidates.
"""

from .base_scorer import BaseLightScorer
from .advanced_scorer import AdvancedLightScorer, LightScoreBreakdown
from .density_scorer import DensityLightScorer
from .scorer_factory import (
    LightScorerFactory,
    LightScoringMethod,
    create_scorer_from_string,
    create_scorer_from_config
)

__all__ = [
    'BaseLightScorer',
    'AdvancedLightScorer',
    'LightScoreBreakdown',
    'DensityLightScorer',
    'LightScorerFactory',
    'LightScoringMethod',
    'create_scorer_from_string',
    'create_scorer_from_config'
]
