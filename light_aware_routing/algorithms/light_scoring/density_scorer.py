"""
Legacy density-only light scoring.
"""

import logging

from .base_scorer import BaseLightScorer
from ...data.models import RouteCandidate
from ...mapping.streetlight_index import StreetlightIndex

logger = logging.getLogger(__name__)


class DensityLightScorer(BaseLightScorer):
    """
    Score a route purely by the average number of lights near each waypoint.

    0 lights per point maps to ``legacy_min_score`` (2 by default) and
    ``legacy_lights_per_point_for_max`` or more maps to ``max_score``.
    """

    name = 'density'

    def _score_path(self, candidate: RouteCandidate, index: StreetlightIndex) -> float:
        cfg = self.config

        total_lights = sum(
            index.count_within_radius(point, cfg.near_light_radius) for point in candidate.path
        )
        avg_lights_per_point = total_lights / len(candidate.path)

        span = cfg.max_score - cfg.legacy_min_score
        score = (avg_lights_per_point / cfg.legacy_lights_per_point_for_max) * span + cfg.legacy_min_score
        score = max(cfg.legacy_min_score, min(cfg.max_score, score))

        logger.debug(f"Density light score {score:.2f} ({avg_lights_per_point:.2f} lights per point)")
        return score
