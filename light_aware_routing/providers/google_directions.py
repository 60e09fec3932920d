"""
Google Directions adapter.

Sole responsibility: talk to the Directions API over HTTP and turn its
walking routes into RouteCandidates. No scoring happens here.
"""

import logging
from typing import Any, Dict, List, Optional

import requests

from ..data.models import GeoPoint, RouteCandidate

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://maps.googleapis.com/maps/api/directions/json"


class DirectionsError(Exception):
    """Raised when the directions provider cannot supply routes."""
    pass


def _lat_lng(location: Dict[str, Any]) -> GeoPoint:
    return GeoPoint(float(location['lat']), float(location['lng']))


def _speed_limit(step: Dict[str, Any]) -> Optional[float]:
    """Speed limit value of a step, if the provider supplied one."""
    limit = step.get('speed_limit')
    if isinstance(limit, dict):
        limit = limit.get('value')
    if limit is None:
        return None
    try:
        return float(limit)
    except (TypeError, ValueError):
        return None


def route_to_candidate(route: Dict[str, Any]) -> RouteCandidate:
    """
    Convert one provider route into a RouteCandidate.

    Only the first leg is used. The path is every step's start location
    followed by the leg's end location; the end of every step except the
    last is treated as an intersection.

    Args:
        route: A single entry of the provider's 'routes' array

    Returns:
        Validated RouteCandidate keeping the provider route as ``raw``

    Raises:
        DirectionsError: If the route is not an object or has no usable leg
        ValueError: If the leg carries negative or non-finite numbers
    """
    if not isinstance(route, dict):
        raise DirectionsError(f"Directions route must be an object, got {type(route).__name__}")

    legs = route.get('legs') or []
    if not legs:
        raise DirectionsError("Directions route has no legs")

    try:
        leg = legs[0]
        distance_km = leg['distance']['value'] / 1000   # m -> km
        duration_minutes = leg['duration']['value'] / 60  # s -> min
        steps = leg.get('steps') or []

        path = [_lat_lng(step['start_location']) for step in steps]
        path.append(_lat_lng(leg['end_location']))

        intersections = [_lat_lng(step['end_location']) for step in steps[:-1]]
    except (KeyError, IndexError, TypeError, ValueError) as e:
        raise DirectionsError(f"Malformed directions leg: {e}")

    speed_limits = [s for s in (_speed_limit(step) for step in steps) if s is not None]

    candidate = RouteCandidate(
        path=path,
        distance_km=float(distance_km),
        duration_minutes=float(duration_minutes),
        intersections=intersections,
        max_speed=max(speed_limits) if speed_limits else None,
        distance_text=leg['distance'].get('text'),
        duration_text=leg['duration'].get('text'),
        raw=route,
    )
    candidate.validate()
    return candidate


class GoogleDirectionsClient:
    """
    Google Directions client for walking routes with alternatives.
    """

    def __init__(self, api_key: Optional[str] = None,
                 base_url: str = DEFAULT_BASE_URL,
                 timeout: float = 10.0):
        """
        Args:
            api_key: Directions API key; requests fail with DirectionsError when unset
            base_url: Directions JSON endpoint
            timeout: Seconds to wait for the provider before giving up
        """
        self.api_key = api_key
        self.base_url = base_url
        self.timeout = timeout

    @property
    def is_configured(self) -> bool:
        return bool(self.api_key)

    def fetch_routes(self, start: str, end: str) -> List[Dict[str, Any]]:
        """
        Fetch alternative walking routes between two places.

        Args:
            start: Origin (address or "lat,lng")
            end: Destination (address or "lat,lng")

        Returns:
            The provider's 'routes' array (possibly empty)

        Raises:
            DirectionsError: On missing key, HTTP or transport failure, or a non-OK status
        """
        if not self.api_key:
            raise DirectionsError("GOOGLE_MAPS_API_KEY is not set")

        params = {
            'origin': start,
            'destination': end,
            'mode': 'walking',
            'alternatives': 'true',
            'key': self.api_key,
        }

        try:
            response = requests.get(self.base_url, params=params, timeout=self.timeout)
        except requests.RequestException as e:
            raise DirectionsError(f"Directions request failed: {e}")

        if not response.ok:
            raise DirectionsError(f"Directions HTTP error {response.status_code}")

        try:
            data = response.json()
        except ValueError as e:
            raise DirectionsError(f"Directions returned invalid JSON: {e}")

        if not isinstance(data, dict):
            raise DirectionsError("Directions response is not a JSON object")

        status = data.get('status')
        if status == 'ZERO_RESULTS':
            return []
        if status != 'OK':
            raise DirectionsError(f"Directions status {status}: {data.get('error_message', '')}")

        routes = data.get('routes') or []
        if not isinstance(routes, list):
            raise DirectionsError("Directions 'routes' is not a list")
        logger.info(f"Directions returned {len(routes)} routes from '{start}' to '{end}'")
        return routes

    def fetch_candidates(self, start: str, end: str) -> List[RouteCandidate]:
        """Fetch routes and convert each to a RouteCandidate."""
        return [route_to_candidate(route) for route in self.fetch_routes(start, end)]
