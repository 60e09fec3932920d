"""
Streetlight data loader with filtering and validation of GeoJSON point features.
"""

import json
import logging
import math
import os
from typing import Any, Dict, Iterable, List, Optional

from .models import GeoPoint

logger = logging.getLogger(__name__)


def default_streetlights_path() -> str:
    """Default location of the streetlight GeoJSON file inside the package."""
    current_dir = os.path.dirname(os.path.abspath(__file__))
    return os.path.join(current_dir, 'street_lights.geojson')


def load_streetlight_features(data_path: Optional[str] = None) -> List[Dict[str, Any]]:
    """
    Read the raw point features of a streetlight GeoJSON file.

    Args:
        data_path: Path to the GeoJSON FeatureCollection

    Returns:
        The list stored under the collection's 'features' key

    Raises:
        FileNotFoundError: If the data file does not exist
        ValueError: If the file is not JSON or has no 'features' array
    """
    if data_path is None:
        data_path = default_streetlights_path()

    if not os.path.exists(data_path):
        raise FileNotFoundError(f"Streetlight data file not found: {data_path}")

    logger.info(f"Loading street lights from: {data_path}")

    try:
        with open(data_path, 'r', encoding='utf-8') as f:
            geojson_data = json.load(f)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON format in streetlight data file: {e}")

    if not isinstance(geojson_data, dict) or not isinstance(geojson_data.get('features'), list):
        raise ValueError("Streetlight data must be GeoJSON with a 'features' array")

    return geojson_data['features']


def feature_to_point(feature: Any) -> Optional[GeoPoint]:
    """
    Convert one point feature to a GeoPoint.

    GeoJSON coordinates are ordered [longitude, latitude]. Returns None for
    features without a usable coordinate pair.
    """
    if not isinstance(feature, dict):
        return None

    geometry = feature.get('geometry')
    if not isinstance(geometry, dict):
        return None

    coords = geometry.get('coordinates')
    if not isinstance(coords, (list, tuple)) or len(coords) < 2:
        return None

    try:
        lon, lat = float(coords[0]), float(coords[1])
    except (TypeError, ValueError):
        return None

    if not (math.isfinite(lat) and math.isfinite(lon)):
        return None

    return GeoPoint(lat, lon)


def features_to_points(features: Iterable[Any]) -> List[GeoPoint]:
    """Convert features to GeoPoints, silently dropping malformed entries."""
    points = []
    skipped = 0

    for feature in features:
        point = feature_to_point(feature)
        if point is None:
            skipped += 1
            continue
        points.append(point)

    if skipped:
        logger.debug(f"Skipped {skipped} streetlight features without a valid coordinate pair")

    return points


def load_streetlights(data_path: Optional[str] = None) -> List[GeoPoint]:
    """
    Load streetlight locations, degrading to an empty list on failure.

    A missing or malformed file is logged but never raised, so callers keep
    serving neutral light scores instead of crashing.

    Args:
        data_path: Path to the GeoJSON file (package default if None)

    Returns:
        Valid streetlight locations
    """
    try:
        features = load_streetlight_features(data_path)
    except FileNotFoundError as e:
        logger.warning(f"{e} - continuing without streetlight data")
        return []
    except (OSError, ValueError) as e:
        logger.error(f"Failed to load street lights: {e}")
        return []

    points = features_to_points(features)
    logger.info(f"Loaded {len(points)} street lights")
    return points
