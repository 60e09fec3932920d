"""
Multi-term light scoring: density, closeness, dark zones, lit crossings and road speed.

The raw score blends five independent proxies for how lit a walk is:

- density: lights within the near-light radius per route kilometre (0-40)
- closeness: average distance to the nearest light (0-25)
- dark-zone penalty: waypoints far from any light (0-20, subtracted)
- intersection bonus: crossings with a light nearby (0-10)
- speed penalty: routes along fast roads (0 or 5, subtracted)

The sum is divided by 10 and clamped into [0, 10].
"""

import logging
from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional

import numpy as np

from .base_scorer import BaseLightScorer
from ...data.models import RouteCandidate
from ...mapping.streetlight_index import StreetlightIndex

logger = logging.getLogger(__name__)


@dataclass
class LightScoreBreakdown:
    """Per-term contributions behind one light score."""

    score: float
    density: float = 0.0
    closeness: float = 0.0
    dark_penalty: float = 0.0
    intersection_bonus: float = 0.0
    speed_penalty: float = 0.0
    raw: float = 0.0
    lights_per_km: float = 0.0
    average_nearest_m: float = 0.0
    dark_points: int = 0
    lit_intersections: int = 0
    neutral_reason: Optional[str] = None

    @property
    def neutral(self) -> bool:
        return self.neutral_reason is not None

    def to_dict(self) -> Dict[str, Any]:
        summary = asdict(self)
        summary['neutral'] = self.neutral
        return summary


class AdvancedLightScorer(BaseLightScorer):
    """
    Composite light scorer combining five weighted terms.

    All radii, weights and caps come from ``LightScoringConfig``; the
    defaults give a 30m near-light radius and an 80m dark-zone threshold.
    """

    name = 'advanced'

    def _score_path(self, candidate: RouteCandidate, index: StreetlightIndex) -> float:
        return self._compute_breakdown(candidate, index).score

    def score_breakdown(self, candidate: RouteCandidate,
                        index: StreetlightIndex) -> LightScoreBreakdown:
        """
        Calculate every scoring term for a candidate.

        Args:
            candidate: Route to score
            index: Streetlight locations

        Returns:
            LightScoreBreakdown; neutral candidates carry only the neutral score
        """
        reason = self.neutral_reason(candidate, index)
        if reason is not None:
            return LightScoreBreakdown(score=self.config.neutral_score, neutral_reason=reason)
        return self._compute_breakdown(candidate, index)

    def _compute_breakdown(self, candidate: RouteCandidate,
                           index: StreetlightIndex) -> LightScoreBreakdown:
        cfg = self.config
        path = candidate.path

        nearest = [index.nearest_distance(point) for point in path]
        lights_near_path = sum(
            index.count_within_radius(point, cfg.near_light_radius) for point in path
        )

        # Only absent/zero distances fall back; negative or NaN values flow through
        distance_km = candidate.distance_km or cfg.default_distance_km
        lights_per_km = lights_near_path / distance_km
        density = min(lights_per_km / cfg.density_target_per_km, 1) * cfg.density_weight

        average_nearest = sum(nearest) / len(nearest)
        closeness = max(0, (cfg.closeness_cutoff - average_nearest) / cfg.closeness_cutoff) * cfg.closeness_weight

        dark_points = sum(1 for d in nearest if d > cfg.dark_zone_threshold)
        dark_penalty = min(dark_points * cfg.dark_zone_penalty_per_point, cfg.dark_zone_penalty_cap)

        lit_intersections = 0
        intersection_bonus = 0.0
        if candidate.intersections is not None:
            lit_intersections = sum(
                1 for point in candidate.intersections
                if index.nearest_distance(point) < cfg.near_light_radius
            )
            intersection_bonus = min(lit_intersections * cfg.intersection_bonus_per_lit,
                                     cfg.intersection_bonus_cap)

        speed_penalty = 0.0
        if candidate.max_speed is not None and candidate.max_speed > cfg.speed_limit_threshold:
            speed_penalty = cfg.speed_penalty

        raw = density + closeness + intersection_bonus - dark_penalty - speed_penalty
        # np.clip keeps NaN as NaN instead of pinning it to a bound
        score = float(np.clip(raw / cfg.raw_score_divisor, 0.0, cfg.max_score))

        logger.debug(
            f"Light score {score:.2f} (density={density:.1f}, closeness={closeness:.1f}, "
            f"intersections=+{intersection_bonus:.0f}, dark=-{dark_penalty:.0f}, "
            f"speed=-{speed_penalty:.0f}) over {len(path)} points"
        )

        return LightScoreBreakdown(
            score=score,
            density=float(density),
            closeness=float(closeness),
            dark_penalty=float(dark_penalty),
            intersection_bonus=float(intersection_bonus),
            speed_penalty=float(speed_penalty),
            raw=float(raw),
            lights_per_km=float(lights_per_km),
            average_nearest_m=float(average_nearest),
            dark_points=dark_points,
            lit_intersections=lit_intersections,
        )
