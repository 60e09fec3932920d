"""
Data processing and utilities for light-aware routing.

This module contains:
- Streetlight data loading
- Distance calculations
- Route and point value types
"""

from .models import GeoPoint, RouteCandidate, ScoredCandidate
from .data_loader import (
    load_streetlights,
    load_streetlight_features,
    features_to_points,
    default_streetlights_path
)
from .distance_utils import haversine_distance, distance_meters

__all__ = [
    'GeoPoint',
    'RouteCandidate',
    'ScoredCandidate',
    'load_streetlights',
    'load_streetlight_features',
    'features_to_points',
    'default_streetlights_path',
    'haversine_distance',
    'distance_meters'
]
