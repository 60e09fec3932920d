"""
Factory for creating different light scoring strategies.

This makes it easy to switch between scoring formulas through
simple configuration rather than code changes.
"""

from enum import Enum
from typing import Dict, Optional

from ...config.scoring_config import LightScoringConfig
from .advanced_scorer import AdvancedLightScorer
from .base_scorer import BaseLightScorer
from .density_scorer import DensityLightScorer


class LightScoringMethod(Enum):
    """Available light scoring methods."""
    ADVANCED = "advanced"
    DENSITY = "density"


class LightScorerFactory:
    """
    Factory for creating light scoring strategies.

    Centralizes scorer construction so the index and variant selector
    never depend on a concrete formula.
    """

    _SCORERS = {
        LightScoringMethod.ADVANCED: AdvancedLightScorer,
        LightScoringMethod.DENSITY: DensityLightScorer,
    }

    @staticmethod
    def create_scorer(method: LightScoringMethod,
                      config: Optional[LightScoringConfig] = None) -> BaseLightScorer:
        """
        Create a light scorer using the specified method.

        Args:
            method: Scoring method to use
            config: Scoring configuration

        Returns:
            Configured scorer instance

        Raises:
            ValueError: If method is not supported
        """
        if config is None:
            config = LightScoringConfig()

        scorer_cls = LightScorerFactory._SCORERS.get(method)
        if scorer_cls is None:
            raise ValueError(f"Unsupported light scoring method: {method}")
        return scorer_cls(config)

    @staticmethod
    def get_available_methods() -> Dict[str, str]:
        """
        Get available scoring methods with descriptions.

        Returns:
            Dictionary mapping method names to descriptions
        """
        return {
            LightScoringMethod.ADVANCED.value: "Density, closeness, dark zones, lit crossings and road speed",
            LightScoringMethod.DENSITY.value: "Average lights per waypoint only (legacy formula)"
        }


def create_scorer_from_string(method_name: str,
                              config: Optional[LightScoringConfig] = None) -> BaseLightScorer:
    """
    Create scorer from string name.

    Args:
        method_name: Name of the method ('advanced' or 'density')
        config: Scoring configuration

    Returns:
        Configured scorer
    """
    try:
        method = LightScoringMethod(method_name.lower())
    except ValueError:
        available = list(LightScorerFactory.get_available_methods().keys())
        raise ValueError(f"Unknown method '{method_name}'. Available: {available}")
    return LightScorerFactory.create_scorer(method, config)


def create_scorer_from_config(config: Optional[LightScoringConfig] = None) -> BaseLightScorer:
    """Create the scorer named by ``config.scoring_method``."""
    config = config or LightScoringConfig()
    config.validate()
    return create_scorer_from_string(config.scoring_method, config)
