"""
Shared fixtures for light-aware routing tests.
"""

import json
import math

import pytest

from light_aware_routing.data import GeoPoint
from light_aware_routing.data.distance_utils import EARTH_RADIUS_M
from light_aware_routing.mapping import StreetlightIndex

# Ottawa, Parliament Hill
ORIGIN = GeoPoint(45.4236, -75.7009)


def offset(point: GeoPoint, north_m: float = 0.0, east_m: float = 0.0) -> GeoPoint:
    """Move a point by approximately the given meters north and east."""
    dlat = math.degrees(north_m / EARTH_RADIUS_M)
    dlon = math.degrees(east_m / (EARTH_RADIUS_M * math.cos(math.radians(point.latitude))))
    return GeoPoint(point.latitude + dlat, point.longitude + dlon)


def point_feature(lon, lat):
    return {"type": "Feature", "geometry": {"type": "Point", "coordinates": [lon, lat]}, "properties": {}}


@pytest.fixture
def origin():
    return ORIGIN


@pytest.fixture
def move():
    return offset


@pytest.fixture
def lit_street():
    """Streetlights every 25m along a 500m east-west street starting at ORIGIN."""
    return [offset(ORIGIN, east_m=25 * i) for i in range(21)]


@pytest.fixture
def lit_index(lit_street):
    return StreetlightIndex(lit_street)


@pytest.fixture
def empty_index():
    return StreetlightIndex([])


@pytest.fixture
def streetlights_geojson(tmp_path, lit_street):
    """GeoJSON file with the lit street plus a few malformed features."""
    features = [point_feature(p.longitude, p.latitude) for p in lit_street]
    features += [
        {"type": "Feature", "geometry": None},
        {"type": "Feature", "geometry": {"type": "Point", "coordinates": [-75.7]}},
        {"type": "Feature"},
    ]
    path = tmp_path / "street_lights.geojson"
    path.write_text(json.dumps({"type": "FeatureCollection", "features": features}))
    return str(path)
