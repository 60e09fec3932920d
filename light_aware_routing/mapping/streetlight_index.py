"""
Immutable spatial index over streetlight locations.

Queries are answered with a KD-tree over unit-sphere Cartesian coordinates
as a pre-filter, and every hit is confirmed with the exact haversine
distance, so results match a brute-force scan of the dataset.
"""

import logging
import math
from typing import Any, Dict, Iterable, Optional, Tuple

import numpy as np
from scipy.spatial import cKDTree

from ..data.data_loader import features_to_points, load_streetlights
from ..data.distance_utils import EARTH_RADIUS_M, distance_meters, get_points_bounds
from ..data.models import GeoPoint

logger = logging.getLogger(__name__)

# Relative slack applied to chord radii before exact haversine confirmation
_CHORD_SLACK = 1e-9
_CHORD_SLACK_M = 1e-6


def _to_cartesian(latitudes: np.ndarray, longitudes: np.ndarray) -> np.ndarray:
    """Project lat/lon degrees onto a sphere of Earth's radius, [N, 3] in meters."""
    lat_rad = np.radians(latitudes)
    lon_rad = np.radians(longitudes)
    cos_lat = np.cos(lat_rad)
    return np.column_stack((
        EARTH_RADIUS_M * cos_lat * np.cos(lon_rad),
        EARTH_RADIUS_M * cos_lat * np.sin(lon_rad),
        EARTH_RADIUS_M * np.sin(lat_rad),
    ))


def _chord_for_arc(arc_m: float) -> float:
    """Straight-line chord length matching a great-circle arc length."""
    if arc_m >= math.pi * EARTH_RADIUS_M:
        return 2 * EARTH_RADIUS_M * (1 + _CHORD_SLACK) + _CHORD_SLACK_M
    chord = 2 * EARTH_RADIUS_M * math.sin(arc_m / (2 * EARTH_RADIUS_M))
    return chord * (1 + _CHORD_SLACK) + _CHORD_SLACK_M


class StreetlightIndex:
    """
    Read-only collection of streetlight locations with radius and
    nearest-neighbour queries.

    Instances are never mutated after construction; to change the dataset
    build a new index (see ``from_geojson``) and swap the reference.
    """

    def __init__(self, points: Iterable[GeoPoint] = ()):
        """
        Build the index.

        Args:
            points: Streetlight locations; non-finite points are discarded
        """
        valid_points = [p for p in points if p.is_finite()]
        self._points: Tuple[GeoPoint, ...] = tuple(valid_points)

        if self._points:
            latitudes = np.array([p.latitude for p in self._points], dtype=float)
            longitudes = np.array([p.longitude for p in self._points], dtype=float)
            self._tree: Optional[cKDTree] = cKDTree(_to_cartesian(latitudes, longitudes))
            logger.debug(f"Spatial index built with {len(self._points)} streetlights")
        else:
            self._tree = None
            logger.debug("Streetlight index is empty")

    @classmethod
    def from_features(cls, features: Iterable[Any]) -> 'StreetlightIndex':
        """Build from raw GeoJSON point features, dropping malformed entries."""
        return cls(features_to_points(features))

    @classmethod
    def from_geojson(cls, data_path: Optional[str] = None) -> 'StreetlightIndex':
        """
        Build from a GeoJSON file.

        Unreadable or malformed files yield an empty index; the failure is logged.
        """
        return cls(load_streetlights(data_path))

    def __len__(self) -> int:
        return len(self._points)

    def __iter__(self):
        return iter(self._points)

    @property
    def is_empty(self) -> bool:
        return not self._points

    @property
    def points(self) -> Tuple[GeoPoint, ...]:
        return self._points

    def bounds(self) -> Optional[Dict[str, float]]:
        """Bounding box of the dataset, or None when empty."""
        if self.is_empty:
            return None
        return get_points_bounds(self._points)

    def count_within_radius(self, point: GeoPoint, radius_m: float) -> int:
        """
        Count streetlights whose distance to ``point`` is <= ``radius_m``.

        Args:
            point: Query location
            radius_m: Search radius in meters (boundary inclusive)

        Returns:
            Number of streetlights within the radius
        """
        if self._tree is None or not point.is_finite() or not radius_m >= 0:
            return 0

        query = _to_cartesian(np.array([point.latitude]), np.array([point.longitude]))[0]
        candidates = self._tree.query_ball_point(query, _chord_for_arc(radius_m))

        return sum(
            1 for i in candidates
            if distance_meters(point, self._points[i]) <= radius_m
        )

    def nearest_distance(self, point: GeoPoint) -> float:
        """
        Distance in meters from ``point`` to the closest streetlight.

        Returns:
            Minimum distance, ``inf`` for an empty index, ``nan`` for a
            non-finite query point
        """
        if self._tree is None:
            return math.inf
        if not point.is_finite():
            return math.nan

        query = _to_cartesian(np.array([point.latitude]), np.array([point.longitude]))[0]
        chord, _ = self._tree.query(query, k=1)

        # Re-check every point tied with the chord nearest using exact haversine
        tied = self._tree.query_ball_point(query, chord * (1 + _CHORD_SLACK) + _CHORD_SLACK_M)
        return min(distance_meters(point, self._points[i]) for i in tied)

    def points_within_bounds(self, lat_min: float, lat_max: float,
                             lon_min: float, lon_max: float) -> Tuple[GeoPoint, ...]:
        """Streetlights inside an axis-aligned lat/lon box (inclusive)."""
        return tuple(
            p for p in self._points
            if lat_min <= p.latitude <= lat_max and lon_min <= p.longitude <= lon_max
        )
