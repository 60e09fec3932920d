import json

from light_aware_routing.data import GeoPoint, features_to_points, load_streetlights
from light_aware_routing.data.data_loader import feature_to_point


def test_coordinates_are_read_as_lon_lat():
    point = feature_to_point({"geometry": {"type": "Point", "coordinates": [-75.69, 45.42]}})
    assert point == GeoPoint(45.42, -75.69)


def test_extra_coordinates_are_ignored():
    point = feature_to_point({"geometry": {"coordinates": [-75.69, 45.42, 70.0]}})
    assert point == GeoPoint(45.42, -75.69)


def test_malformed_features_are_dropped():
    features = [
        {"geometry": {"coordinates": [-75.69, 45.42]}},
        {"geometry": {"coordinates": [-75.69]}},
        {"geometry": {"coordinates": []}},
        {"geometry": None},
        {"properties": {"id": 3}},
        {"geometry": {"coordinates": ["east", "north"]}},
        {"geometry": {"coordinates": [float('nan'), 45.0]}},
        {"geometry": {"type": "LineString", "coordinates": [[-75.6, 45.4], [-75.7, 45.5]]}},
        None,
        {"geometry": {"coordinates": [-75.70, 45.43]}},
    ]
    assert features_to_points(features) == [GeoPoint(45.42, -75.69), GeoPoint(45.43, -75.70)]


def test_load_streetlights_from_file(streetlights_geojson, lit_street):
    assert load_streetlights(streetlights_geojson) == lit_street


def test_missing_file_degrades_to_empty(tmp_path):
    assert load_streetlights(str(tmp_path / "nope.geojson")) == []


def test_invalid_json_degrades_to_empty(tmp_path):
    path = tmp_path / "broken.geojson"
    path.write_text("{not json")
    assert load_streetlights(str(path)) == []


def test_missing_features_array_degrades_to_empty(tmp_path):
    path = tmp_path / "no_features.geojson"
    path.write_text(json.dumps({"type": "FeatureCollection", "features": "oops"}))
    assert load_streetlights(str(path)) == []

    path.write_text(json.dumps([1, 2, 3]))
    assert load_streetlights(str(path)) == []
