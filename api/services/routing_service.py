"""
Service layer for light-aware routing API.
"""

import logging
from typing import Any, Dict, List, Optional, Sequence

import geojson

from light_aware_routing.algorithms import (
    BaseLightScorer,
    RouteVariant,
    RouteVariantSelector,
    create_scorer_from_config
)
from light_aware_routing.config import LightScoringConfig
from light_aware_routing.data import RouteCandidate, ScoredCandidate
from light_aware_routing.mapping import StreetlightIndex
from light_aware_routing.providers import GoogleDirectionsClient
from api.schemas.routing import HealthResponse
from api.settings import ApiSettings

logger = logging.getLogger(__name__)

API_VERSION = "1.0.0"


class NoRoutesFoundError(Exception):
    """Raised when the directions provider returns no candidate routes."""
    pass


class LightRoutingService:
    """
    Service class that scores route candidates and picks route variants for the API.

    Holds the one StreetlightIndex shared by every request. The index is
    never mutated; ``reload_streetlights`` swaps in a freshly built one.
    """

    def __init__(self, index: StreetlightIndex,
                 scorer: Optional[BaseLightScorer] = None,
                 selector: Optional[RouteVariantSelector] = None,
                 directions_client: Optional[GoogleDirectionsClient] = None,
                 streetlights_path: Optional[str] = None):
        """Initialize the routing service."""
        self.index = index
        self.scorer = scorer or create_scorer_from_config(LightScoringConfig())
        self.selector = selector or RouteVariantSelector()
        self.directions_client = directions_client or GoogleDirectionsClient()
        self.streetlights_path = streetlights_path

        if self.index.is_empty:
            logger.warning("Routing service has no streetlight data - all routes will score neutral")
        else:
            logger.info(f"Routing service initialized with {len(self.index)} streetlights")

    @classmethod
    def from_settings(cls, settings: ApiSettings) -> 'LightRoutingService':
        """Wire the index, scorer and directions client from API settings."""
        logger.info("Initializing light-aware routing service...")
        config = LightScoringConfig(scoring_method=settings.scoring_method)

        return cls(
            index=StreetlightIndex.from_geojson(settings.streetlights_path),
            scorer=create_scorer_from_config(config),
            directions_client=GoogleDirectionsClient(
                api_key=settings.google_maps_api_key,
                timeout=settings.directions_timeout
            ),
            streetlights_path=settings.streetlights_path
        )

    def reload_streetlights(self, data_path: Optional[str] = None) -> int:
        """
        Rebuild the streetlight index from disk and swap it in.

        Args:
            data_path: GeoJSON file to load (the current path if None)

        Returns:
            Number of streetlights in the new index
        """
        path = data_path or self.streetlights_path
        new_index = StreetlightIndex.from_geojson(path)
        self.index = new_index
        self.streetlights_path = path

        logger.info(f"Streetlight index reloaded with {len(new_index)} streetlights")
        return len(new_index)

    def score_candidates(self, candidates: Sequence[RouteCandidate]) -> List[ScoredCandidate]:
        """Attach a light score to every candidate."""
        index = self.index
        return [
            ScoredCandidate.from_candidate(candidate, self.scorer.score(candidate, index))
            for candidate in candidates
        ]

    def select_variants(self, candidates: Sequence[RouteCandidate]) -> List[RouteVariant]:
        """
        Score candidates and pick the fastest, balanced and most-lit variants.

        Raises:
            ValueError: If no candidates are given
        """
        scored = self.score_candidates(candidates)
        variants = self.selector.select(scored)

        logger.info("Selected variants: " + ", ".join(
            f"{v.id}={v.light_score:.1f}" for v in variants
        ))
        return variants

    def get_route_variants(self, start: str, end: str) -> List[RouteVariant]:
        """
        Fetch walking routes between two places and return the three variants.

        Args:
            start: Origin
            end: Destination

        Returns:
            Fastest, balanced and most-lit RouteVariants

        Raises:
            NoRoutesFoundError: If the provider has no routes
            DirectionsError: If the provider call fails
        """
        logger.info(f"Calculating route variants from '{start}' to '{end}'")

        candidates = self.directions_client.fetch_candidates(start, end)
        if not candidates:
            raise NoRoutesFoundError(f"No routes found from '{start}' to '{end}'")

        return self.select_variants(candidates)

    def get_health_status(self) -> HealthResponse:
        """Get the health status of the routing service."""
        loaded = not self.index.is_empty
        return HealthResponse(
            status="healthy" if loaded else "degraded",
            version=API_VERSION,
            streetlights_loaded=loaded,
            streetlight_count=len(self.index),
            scoring_method=self.scorer.name,
            directions_configured=self.directions_client.is_configured
        )

    def variants_to_geojson(self, variants: Sequence[RouteVariant]) -> Dict[str, Any]:
        """
        Convert variants to a GeoJSON FeatureCollection of LineStrings.

        Args:
            variants: Route variants

        Returns:
            GeoJSON FeatureCollection (coordinates ordered lon, lat)
        """
        features = []
        for variant in variants:
            coords = [(p.longitude, p.latitude) for p in variant.path]
            features.append(geojson.Feature(
                geometry=geojson.LineString(coords),
                properties={
                    "id": variant.id,
                    "label": variant.label,
                    "light_score": variant.light_score,
                    "distance_km": variant.distance_km,
                    "duration_minutes": variant.duration_minutes
                }
            ))

        return geojson.FeatureCollection(features)
