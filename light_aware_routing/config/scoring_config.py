"""
Configuration management for light scoring and route variant parameters.
"""

from dataclasses import dataclass, field
from typing import Dict


@dataclass
class LightScoringConfig:
    """Configuration parameters for light-aware route scoring."""

    # Scoring Strategy
    scoring_method: str = 'advanced'  # 'advanced' or 'density'

    # Distances
    near_light_radius: float = 30.0    # meters - a light within this radius illuminates a point
    dark_zone_threshold: float = 80.0  # meters - farther than this from any light is a dark zone
    closeness_cutoff: float = 100.0    # meters - average nearest distance giving zero closeness
    default_distance_km: float = 1.0   # used when a candidate has no (or zero) distance

    # Term weights (maximum contribution of each term before the /10 scaling)
    density_weight: float = 40.0
    density_target_per_km: float = 10.0  # lights per km that earn the full density weight
    closeness_weight: float = 25.0
    dark_zone_penalty_per_point: float = 2.0
    dark_zone_penalty_cap: float = 20.0
    intersection_bonus_per_lit: float = 2.0
    intersection_bonus_cap: float = 10.0
    speed_limit_threshold: float = 50.0  # km/h - faster roads are penalised
    speed_penalty: float = 5.0

    # Output range
    neutral_score: float = 5.0  # returned when there is no path or no light data
    max_score: float = 10.0
    raw_score_divisor: float = 10.0  # raw term sum is divided by this before clamping

    # Legacy density-only formula
    legacy_min_score: float = 2.0
    legacy_lights_per_point_for_max: float = 10.0

    # Visualization
    map_style: str = 'OpenStreetMap'
    variant_colors: Dict[str, str] = field(default_factory=lambda: {
        'fastest': '#E74C3C',   # red
        'balanced': '#3498DB',  # blue
        'most-lit': '#F1C40F'   # yellow
    })
    streetlight_marker_color: str = '#F39C12'
    map_streetlight_buffer: float = 0.002  # degrees (~200m) around routes for streetlight markers

    def validate(self) -> None:
        """Validate configuration parameters."""
        if self.scoring_method not in ('advanced', 'density'):
            raise ValueError("scoring_method must be 'advanced' or 'density'")
        if self.near_light_radius <= 0:
            raise ValueError("near_light_radius must be positive")
        if self.dark_zone_threshold < self.near_light_radius:
            raise ValueError("dark_zone_threshold must be >= near_light_radius")
        if self.closeness_cutoff <= 0:
            raise ValueError("closeness_cutoff must be positive")
        if self.default_distance_km <= 0:
            raise ValueError("default_distance_km must be positive")
        if self.density_target_per_km <= 0:
            raise ValueError("density_target_per_km must be positive")
        if self.raw_score_divisor <= 0:
            raise ValueError("raw_score_divisor must be positive")
        if not 0 <= self.neutral_score <= self.max_score:
            raise ValueError("neutral_score must be between 0 and max_score")
        for name in ('density_weight', 'closeness_weight', 'dark_zone_penalty_per_point',
                     'dark_zone_penalty_cap', 'intersection_bonus_per_lit',
                     'intersection_bonus_cap', 'speed_penalty'):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must be non-negative")

    @classmethod
    def create_default_config(cls) -> 'LightScoringConfig':
        """Create the default multi-term scoring configuration."""
        return cls()

    @classmethod
    def create_density_only_config(cls) -> 'LightScoringConfig':
        """Create configuration selecting the legacy density-only formula."""
        return cls(scoring_method='density')
