import math

import pytest

from api.settings import ApiSettings
from light_aware_routing.config import LightScoringConfig
from light_aware_routing.data import GeoPoint, RouteCandidate, ScoredCandidate


def test_geopoint_from_dict_key_variants():
    assert GeoPoint.from_dict({"lat": 1, "lng": 2}) == GeoPoint(1.0, 2.0)
    assert GeoPoint.from_dict({"latitude": 1, "longitude": 2}) == GeoPoint(1.0, 2.0)
    assert GeoPoint.from_dict({"lat": 1, "lon": 2}).to_dict() == {"lat": 1.0, "lng": 2.0}


def test_candidate_from_dict():
    candidate = RouteCandidate.from_dict({
        "path": [{"lat": 45.0, "lng": -75.0}],
        "distance_km": "1.5",
        "duration_minutes": 12,
        "intersections": [],
        "max_speed": 40,
    })

    assert candidate.distance_km == 1.5
    assert candidate.intersections == []
    assert candidate.max_speed == 40.0
    assert candidate.raw is None


@pytest.mark.parametrize("kwargs", [
    {"distance_km": -0.1},
    {"distance_km": float('nan')},
    {"duration_minutes": -1},
    {"max_speed": float('inf')},
    {"path": [GeoPoint(float('nan'), 0)]},
    {"intersections": [GeoPoint(0, float('inf'))]},
])
def test_validate_rejects_bad_numbers(kwargs):
    values = {"path": [GeoPoint(45.0, -75.0)]}
    values.update(kwargs)
    with pytest.raises(ValueError):
        RouteCandidate(**values).validate()


def test_validate_accepts_missing_optionals():
    RouteCandidate(path=[], distance_km=None, duration_minutes=0).validate()


def test_scored_candidate_copies_fields():
    candidate = RouteCandidate(path=[GeoPoint(1, 2)], distance_km=2.0, duration_minutes=5,
                               raw={"summary": "Main St"})

    scored = ScoredCandidate.from_candidate(candidate, 7.5)

    assert scored.light_score == 7.5
    assert scored.raw == {"summary": "Main St"}
    assert scored.path == candidate.path


class TestLightScoringConfig:

    def test_default_is_valid(self):
        LightScoringConfig.create_default_config().validate()

    @pytest.mark.parametrize("field_name, value", [
        ("near_light_radius", 0),
        ("dark_zone_threshold", -5),
        ("scoring_method", "moonlight"),
    ])
    def test_invalid_values(self, field_name, value):
        with pytest.raises(ValueError):
            LightScoringConfig(**{field_name: value}).validate()


def test_settings_from_env(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("GOOGLE_MAPS_API_KEY", "secret")
    monkeypatch.setenv("STREETLIGHTS_PATH", "/data/lights.geojson")
    monkeypatch.setenv("LIGHT_SCORING_METHOD", "density")
    monkeypatch.setenv("PORT", "9000")
    monkeypatch.delenv("DIRECTIONS_TIMEOUT", raising=False)

    settings = ApiSettings.from_env()

    assert settings.google_maps_api_key == "secret"
    assert settings.streetlights_path == "/data/lights.geojson"
    assert settings.scoring_method == "density"
    assert settings.port == 9000
    assert math.isclose(settings.directions_timeout, 10.0)


def test_empty_api_key_means_unset(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("GOOGLE_MAPS_API_KEY", "")
    assert ApiSettings.from_env().google_maps_api_key is None
