"""
Configuration management for light-aware routing.
"""

from .scoring_config import LightScoringConfig

__all__ = ['LightScoringConfig']
