"""
Value types shared by the index, the scorers and the variant selector.
"""

import math
from dataclasses import dataclass, field, fields
from typing import Any, Dict, List, Optional


@dataclass(frozen=True)
class GeoPoint:
    """Immutable geographic point in decimal degrees."""

    latitude: float
    longitude: float

    def is_finite(self) -> bool:
        return math.isfinite(self.latitude) and math.isfinite(self.longitude)

    def to_dict(self) -> Dict[str, float]:
        return {'lat': self.latitude, 'lng': self.longitude}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'GeoPoint':
        """
        Build a point from a ``{lat, lng}`` mapping.

        ``latitude``/``longitude`` and ``lon`` keys are accepted as well.
        """
        lat = data['lat'] if 'lat' in data else data['latitude']
        if 'lng' in data:
            lon = data['lng']
        elif 'lon' in data:
            lon = data['lon']
        else:
            lon = data['longitude']
        return cls(float(lat), float(lon))


@dataclass
class RouteCandidate:
    """One alternative walking route between a start and end point."""

    path: List[GeoPoint]
    distance_km: Optional[float] = None
    duration_minutes: float = 0.0
    intersections: Optional[List[GeoPoint]] = None
    max_speed: Optional[float] = None

    # Human readable values exactly as supplied by the directions provider
    distance_text: Optional[str] = None
    duration_text: Optional[str] = None

    # Opaque provider payload, never serialised
    raw: Optional[Dict[str, Any]] = field(default=None, repr=False, compare=False)

    def validate(self) -> None:
        """
        Reject candidates whose numbers would make the light score meaningless.

        Raises:
            ValueError: On negative or non-finite distance/duration/speed,
                or non-finite coordinates
        """
        if self.distance_km is not None:
            if not math.isfinite(self.distance_km) or self.distance_km < 0:
                raise ValueError(f"distance_km must be a non-negative finite number, got {self.distance_km}")
        if not math.isfinite(self.duration_minutes) or self.duration_minutes < 0:
            raise ValueError(f"duration_minutes must be a non-negative finite number, got {self.duration_minutes}")
        if self.max_speed is not None:
            if not math.isfinite(self.max_speed) or self.max_speed < 0:
                raise ValueError(f"max_speed must be a non-negative finite number, got {self.max_speed}")

        for point in self.path:
            if not point.is_finite():
                raise ValueError(f"Path contains a non-finite coordinate: {point}")
        for point in self.intersections or []:
            if not point.is_finite():
                raise ValueError(f"Intersections contain a non-finite coordinate: {point}")

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'RouteCandidate':
        """Build a candidate from a plain JSON object (CLI input files)."""
        if not isinstance(data, dict):
            raise ValueError(f"Candidate must be a JSON object, got {type(data).__name__}")
        intersections = data.get('intersections')
        max_speed = data.get('max_speed')
        distance_km = data.get('distance_km')

        return cls(
            path=[GeoPoint.from_dict(p) for p in data.get('path', [])],
            distance_km=float(distance_km) if distance_km is not None else None,
            duration_minutes=float(data.get('duration_minutes', 0.0)),
            intersections=([GeoPoint.from_dict(p) for p in intersections]
                           if intersections is not None else None),
            max_speed=float(max_speed) if max_speed is not None else None,
            distance_text=data.get('distance_text'),
            duration_text=data.get('duration_text'),
        )


@dataclass
class ScoredCandidate(RouteCandidate):
    """A RouteCandidate carrying its light score in [0, 10]."""

    light_score: float = 5.0

    @classmethod
    def from_candidate(cls, candidate: RouteCandidate, light_score: float) -> 'ScoredCandidate':
        values = {f.name: getattr(candidate, f.name) for f in fields(RouteCandidate)}
        return cls(light_score=light_score, **values)
