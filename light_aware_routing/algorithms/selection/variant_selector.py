"""
Selection of the fastest, balanced and most-lit route variants.
"""

import logging
from dataclasses import dataclass, fields
from typing import Any, Dict, List, Optional, Sequence

from ...data.models import GeoPoint, ScoredCandidate

logger = logging.getLogger(__name__)

FASTEST = 'fastest'
BALANCED = 'balanced'
MOST_LIT = 'most-lit'

VARIANT_LABELS = {
    FASTEST: 'Fastest route',
    BALANCED: 'Balanced route',
    MOST_LIT: 'Most Well Lit route',
}


@dataclass
class RouteVariant:
    """A labeled route choice; carries the scored candidate's fields without the raw payload."""

    id: str
    label: str
    path: List[GeoPoint]
    distance_km: Optional[float]
    duration_minutes: float
    light_score: float
    intersections: Optional[List[GeoPoint]] = None
    max_speed: Optional[float] = None
    distance_text: Optional[str] = None
    duration_text: Optional[str] = None

    @classmethod
    def from_scored(cls, variant_id: str, candidate: ScoredCandidate) -> 'RouteVariant':
        values = {
            f.name: getattr(candidate, f.name)
            for f in fields(cls)
            if f.name not in ('id', 'label')
        }
        return cls(id=variant_id, label=VARIANT_LABELS[variant_id], **values)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'id': self.id,
            'label': self.label,
            'distance_km': self.distance_km,
            'duration_minutes': self.duration_minutes,
            'distance_text': self.distance_text,
            'duration_text': self.duration_text,
            'light_score': self.light_score,
            'max_speed': self.max_speed,
            'path': [p.to_dict() for p in self.path],
            'intersections': ([p.to_dict() for p in self.intersections]
                              if self.intersections is not None else None),
        }


class RouteVariantSelector:
    """
    Stateless ranking of scored candidates into three labeled variants.

    Candidates are told apart by their position in the input, so equal
    values at different positions are still different candidates.
    """

    def select_indices(self, candidates: Sequence[ScoredCandidate]) -> Dict[str, int]:
        """
        Pick the input positions of the fastest, balanced and most-lit candidates.

        Args:
            candidates: Non-empty scored candidates

        Returns:
            Mapping of variant id to candidate position

        Raises:
            ValueError: If no candidates are given
        """
        if not candidates:
            raise ValueError("At least one scored candidate is required to select route variants")

        fastest = 0
        most_lit = 0
        for i, candidate in enumerate(candidates):
            # Strict comparisons keep the first candidate on ties
            if candidate.duration_minutes < candidates[fastest].duration_minutes:
                fastest = i
            if candidate.light_score > candidates[most_lit].light_score:
                most_lit = i

        balanced = next(
            (i for i in range(len(candidates)) if i not in (fastest, most_lit)),
            fastest
        )

        return {FASTEST: fastest, BALANCED: balanced, MOST_LIT: most_lit}

    def select(self, candidates: Sequence[ScoredCandidate]) -> List[RouteVariant]:
        """
        Build the fastest, balanced and most-lit variants.

        Args:
            candidates: Non-empty scored candidates

        Returns:
            Exactly three RouteVariants in fastest, balanced, most-lit order
        """
        indices = self.select_indices(candidates)
        logger.debug(f"Selected variants from {len(candidates)} candidates: {indices}")

        return [
            RouteVariant.from_scored(variant_id, candidates[indices[variant_id]])
            for variant_id in (FASTEST, BALANCED, MOST_LIT)
        ]


def select_route_variants(candidates: Sequence[ScoredCandidate]) -> List[RouteVariant]:
    """Convenience wrapper around ``RouteVariantSelector.select``."""
    return RouteVariantSelector().select(candidates)
