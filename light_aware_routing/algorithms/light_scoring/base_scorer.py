"""
Base abstract class for light scoring strategies.
"""

from abc import ABC, abstractmethod
from typing import Optional

from ...config.scoring_config import LightScoringConfig
from ...data.models import RouteCandidate
from ...mapping.streetlight_index import StreetlightIndex

NEUTRAL_EMPTY_PATH = 'empty_path'
NEUTRAL_NO_LIGHT_DATA = 'no_light_data'


class BaseLightScorer(ABC):
    """
    Abstract base class for light scoring strategies.

    Every strategy maps a route candidate and a streetlight index to a score
    in [0, max_score]. The two neutral early exits are shared: a candidate
    without a path, and an index without data, both score ``neutral_score``.
    Missing data is not the same as darkness.
    """

    name = 'base'

    def __init__(self, config: Optional[LightScoringConfig] = None):
        """
        Initialize the scorer.

        Args:
            config: Scoring configuration parameters
        """
        self.config = config or LightScoringConfig()

    def neutral_reason(self, candidate: RouteCandidate,
                       index: StreetlightIndex) -> Optional[str]:
        """Return why the candidate gets the neutral score, or None."""
        if not candidate.path:
            return NEUTRAL_EMPTY_PATH
        if index is None or index.is_empty:
            return NEUTRAL_NO_LIGHT_DATA
        return None

    def score(self, candidate: RouteCandidate, index: StreetlightIndex) -> float:
        """
        Calculate the light score of a route candidate.

        Args:
            candidate: Route to score
            index: Streetlight locations

        Returns:
            Light score (higher = better lit)
        """
        if self.neutral_reason(candidate, index) is not None:
            return self.config.neutral_score
        return self._score_path(candidate, index)

    @abstractmethod
    def _score_path(self, candidate: RouteCandidate, index: StreetlightIndex) -> float:
        """
        Score a candidate with a non-empty path against a non-empty index.

        Args:
            candidate: Route to score
            index: Streetlight locations

        Returns:
            Light score
        """
        pass
