import pytest
from fastapi.testclient import TestClient

from light_aware_routing.data import RouteCandidate
from light_aware_routing.providers import DirectionsError, GoogleDirectionsClient
from light_aware_routing.providers import google_directions
from api.main import create_app
from api.services.routing_service import LightRoutingService, NoRoutesFoundError
from api.settings import ApiSettings


class FakeDirectionsClient:
    """Directions stand-in returning canned candidates."""

    is_configured = True

    def __init__(self, candidates=None, error=None):
        self.candidates = candidates or []
        self.error = error

    def fetch_candidates(self, start, end):
        if self.error is not None:
            raise self.error
        return list(self.candidates)


def street_candidates(origin, move):
    lit_path = [move(origin, east_m=50 * i) for i in range(11)]
    dark_path = [move(origin, north_m=600, east_m=50 * i) for i in range(11)]
    mixed_path = [move(origin, north_m=60 * (i % 2), east_m=50 * i) for i in range(11)]
    return [
        RouteCandidate(path=dark_path, distance_km=0.5, duration_minutes=6, raw={"id": "dark"}),
        RouteCandidate(path=lit_path, distance_km=0.6, duration_minutes=8, raw={"id": "lit"}),
        RouteCandidate(path=mixed_path, distance_km=0.55, duration_minutes=7, raw={"id": "mixed"}),
    ]


@pytest.fixture
def service(lit_index, origin, move):
    candidates = street_candidates(origin, move)
    return LightRoutingService(lit_index, directions_client=FakeDirectionsClient(candidates))


@pytest.fixture
def client(service):
    with TestClient(create_app(service=service)) as test_client:
        yield test_client


class TestRoutingService:

    def test_variants_from_provider(self, service):
        variants = {v.id: v for v in service.get_route_variants("a", "b")}

        assert variants['fastest'].duration_minutes == 6
        assert variants['most-lit'].duration_minutes == 8
        assert variants['balanced'].duration_minutes == 7
        assert variants['most-lit'].light_score > variants['fastest'].light_score

    def test_no_routes(self, lit_index):
        service = LightRoutingService(lit_index, directions_client=FakeDirectionsClient([]))
        with pytest.raises(NoRoutesFoundError):
            service.get_route_variants("a", "b")

    def test_empty_index_scores_neutral(self, empty_index, origin, move):
        service = LightRoutingService(empty_index, directions_client=FakeDirectionsClient())
        scored = service.score_candidates(street_candidates(origin, move))
        assert [s.light_score for s in scored] == [5, 5, 5]
        assert service.get_health_status().status == "degraded"

    def test_reload_streetlights(self, empty_index, streetlights_geojson, lit_street):
        service = LightRoutingService(empty_index, directions_client=FakeDirectionsClient())
        old_index = service.index

        count = service.reload_streetlights(streetlights_geojson)

        assert count == len(lit_street)
        assert service.index is not old_index
        assert old_index.is_empty
        assert service.get_health_status().status == "healthy"

    def test_from_settings(self, streetlights_geojson):
        settings = ApiSettings(
            google_maps_api_key=None,
            streetlights_path=streetlights_geojson,
            scoring_method='density'
        )
        service = LightRoutingService.from_settings(settings)

        health = service.get_health_status()
        assert health.streetlights_loaded
        assert health.scoring_method == 'density'
        assert not health.directions_configured

    def test_variants_to_geojson(self, service):
        collection = service.variants_to_geojson(service.get_route_variants("a", "b"))

        assert collection["type"] == "FeatureCollection"
        assert len(collection["features"]) == 3
        first = collection["features"][0]
        assert first["geometry"]["type"] == "LineString"
        assert first["properties"]["id"] == "fastest"


class TestRoutesEndpoint:

    def test_routes(self, client):
        response = client.get("/api/routes", params={"start": "Parliament Hill", "end": "ByWard Market"})

        assert response.status_code == 200
        data = response.json()
        assert data["start"] == "Parliament Hill"
        assert [r["id"] for r in data["routes"]] == ["fastest", "balanced", "most-lit"]
        assert all("raw" not in r for r in data["routes"])
        assert all(0 <= r["light_score"] <= 10 for r in data["routes"])

    def test_missing_params(self, client):
        response = client.get("/api/routes", params={"start": "somewhere"})
        assert response.status_code == 400
        assert response.json() == {"error": "Missing query params: start, end"}

    def test_no_routes(self, lit_index):
        service = LightRoutingService(lit_index, directions_client=FakeDirectionsClient([]))
        with TestClient(create_app(service=service)) as client:
            response = client.get("/api/routes", params={"start": "a", "end": "b"})
        assert response.status_code == 404
        assert response.json() == {"error": "No routes found"}

    def test_provider_failure(self, lit_index):
        failing = FakeDirectionsClient(error=DirectionsError("Directions status REQUEST_DENIED: bad key"))
        service = LightRoutingService(lit_index, directions_client=failing)
        with TestClient(create_app(service=service)) as client:
            response = client.get("/api/routes", params={"start": "a", "end": "b"})
        assert response.status_code == 500
        assert response.json()["error"] == "Failed to compute routes"
        assert "bad key" in response.json()["details"]

    def test_malformed_provider_route(self, lit_index, monkeypatch):
        class Response:
            ok = True
            status_code = 200

            def json(self):
                return {"status": "OK", "routes": ["not a route"]}

        monkeypatch.setattr(google_directions.requests, "get", lambda *a, **kw: Response())
        service = LightRoutingService(lit_index, directions_client=GoogleDirectionsClient(api_key="k"))

        with TestClient(create_app(service=service)) as client:
            response = client.get("/api/routes", params={"start": "a", "end": "b"})

        assert response.status_code == 500
        assert response.json()["error"] == "Failed to compute routes"
        assert "must be an object" in response.json()["details"]

    def test_geojson(self, client):
        response = client.get("/api/routes/geojson", params={"start": "a", "end": "b"})
        assert response.status_code == 200
        assert response.json()["type"] == "FeatureCollection"

    def test_variants_from_supplied_candidates(self, client, origin, move):
        street = [move(origin, east_m=50 * i) for i in range(11)]
        body = {
            "candidates": [
                {"path": [{"lat": p.latitude, "lng": p.longitude} for p in street],
                 "distance_km": 0.5, "duration_minutes": 5},
                {"path": [], "duration_minutes": 3},
            ]
        }
        response = client.post("/api/routes/variants", json=body)

        assert response.status_code == 200
        routes = {r["id"]: r for r in response.json()["routes"]}
        assert routes["fastest"]["duration_minutes"] == 3
        assert routes["fastest"]["light_score"] == 5
        assert routes["most-lit"]["duration_minutes"] == 5
        assert routes["most-lit"]["light_score"] == pytest.approx(6.5)

    def test_variants_require_candidates(self, client):
        response = client.post("/api/routes/variants", json={"candidates": []})
        assert response.status_code == 422

    def test_health(self, client, lit_street):
        response = client.get("/api/routes/health")
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["streetlight_count"] == len(lit_street)
        assert data["scoring_method"] == "advanced"

        assert client.get("/health").json()["service_status"] == "healthy"


class TestContentEndpoints:

    def test_safety_tips(self, client):
        tips = client.get("/api/safety-tips").json()["tips"]
        assert len(tips) == 4
        assert {"id", "category", "text"} <= set(tips[0])

    def test_info(self, client):
        info = client.get("/api/info").json()
        assert info["title"] == "How we calculate lighting"
        assert info["steps"] and info["limitations"]

    def test_feedback_round_trip(self, client):
        response = client.post("/api/feedback", json={"rating": 4, "flags": ["dark-segment"],
                                                      "route_id": "most-lit"})
        assert response.status_code == 201
        feedback = response.json()["feedback"]
        assert feedback["rating"] == 4
        assert feedback["flags"] == ["dark-segment"]
        assert feedback["comment"] == ""

        listing = client.get("/api/feedback").json()
        assert listing["count"] == 1
        assert listing["feedback"][0]["route_id"] == "most-lit"

    def test_feedback_requires_rating(self, client):
        response = client.post("/api/feedback", json={"comment": "nice"})
        assert response.status_code == 400
        assert response.json() == {"error": "rating is required (0-5)"}

    def test_feedback_rating_out_of_range(self, client):
        response = client.post("/api/feedback", json={"rating": 9})
        assert response.status_code == 422
        assert response.json()["error"] == "Request validation failed"
