"""
Distance calculation utilities for streetlight lookups.
"""

import math
from typing import Dict, Iterable

from .models import GeoPoint

# Earth's radius in meters
EARTH_RADIUS_M = 6371000.0


def haversine_distance(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """
    Calculate the great circle distance between two points on Earth.

    Args:
        lat1, lon1: First point coordinates
        lat2, lon2: Second point coordinates

    Returns:
        Distance in meters, NaN if any coordinate is NaN or infinite
    """
    if not all(math.isfinite(v) for v in (lat1, lon1, lat2, lon2)):
        return math.nan

    # Convert to radians
    lat1_rad = math.radians(lat1)
    lat2_rad = math.radians(lat2)
    delta_lat = math.radians(lat2 - lat1)
    delta_lon = math.radians(lon2 - lon1)

    # Haversine formula
    a = (math.sin(delta_lat / 2) ** 2 +
         math.cos(lat1_rad) * math.cos(lat2_rad) * math.sin(delta_lon / 2) ** 2)
    # rounding can push a just outside [0, 1] for near-antipodal points
    a = min(1.0, max(0.0, a))
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))

    return EARTH_RADIUS_M * c


def distance_meters(a: GeoPoint, b: GeoPoint) -> float:
    """Great-circle distance in meters between two GeoPoints."""
    return haversine_distance(a.latitude, a.longitude, b.latitude, b.longitude)


def get_points_bounds(points: Iterable[GeoPoint]) -> Dict[str, float]:
    """
    Get the geographic bounds of a set of points.

    Args:
        points: GeoPoints to bound

    Returns:
        Dictionary with lat_min, lat_max, lon_min, lon_max

    Raises:
        ValueError: If no points are given
    """
    points = list(points)
    if not points:
        raise ValueError("Cannot compute bounds of an empty point set")

    lats = [p.latitude for p in points]
    lons = [p.longitude for p in points]

    return {
        'lat_min': min(lats),
        'lat_max': max(lats),
        'lon_min': min(lons),
        'lon_max': max(lons)
    }
