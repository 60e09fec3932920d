"""
Light-Aware Routing

Estimates how well pedestrian routes are lit using public streetlight
locations, and picks fastest, balanced and most-lit variants from a set of
candidate walking routes.

## Quick Start

```python
from light_aware_routing import (
    StreetlightIndex, AdvancedLightScorer, RouteVariantSelector,
    RouteCandidate, ScoredCandidate, GeoPoint
)

index = StreetlightIndex.from_geojson("path/to/street_lights.geojson")
scorer = AdvancedLightScorer()

candidate = RouteCandidate(
    path=[GeoPoint(45.4215, -75.6972), GeoPoint(45.4231, -75.6950)],
    distance_km=0.3,
    duration_minutes=4
)
scored = ScoredCandidate.from_candidate(candidate, scorer.score(candidate, index))
variants = RouteVariantSelector().select([scored])
```

## Main Components

- **StreetlightIndex**: immutable radius / nearest-light lookups
- **AdvancedLightScorer**: multi-term light score in [0, 10]
- **DensityLightScorer**: legacy density-only score
- **RouteVariantSelector**: fastest / balanced / most-lit selection
- **GoogleDirectionsClient**: walking route candidates from Google Directions
- **RouteVisualizer**: interactive map generation

## Architecture

- `algorithms/`: light scoring strategies and variant selection
- `mapping/`: streetlight spatial index
- `data/`: value types, data loading and distance utilities
- `providers/`: directions provider adapters
- `visualization/`: map generation
- `config/`: configuration management
"""

from .algorithms import (
    AdvancedLightScorer,
    BaseLightScorer,
    DensityLightScorer,
    LightScoreBreakdown,
    LightScorerFactory,
    LightScoringMethod,
    RouteVariant,
    RouteVariantSelector,
    create_scorer_from_config,
    create_scorer_from_string,
    select_route_variants
)
from .config import LightScoringConfig
from .data import GeoPoint, RouteCandidate, ScoredCandidate, distance_meters, load_streetlights
from .mapping import StreetlightIndex
from .providers import DirectionsError, GoogleDirectionsClient
from .visualization import RouteVisualizer

# Version information
__version__ = "1.0.0"

__all__ = [
    # Value types
    'GeoPoint',
    'RouteCandidate',
    'ScoredCandidate',
    'RouteVariant',

    # Core components
    'StreetlightIndex',
    'BaseLightScorer',
    'AdvancedLightScorer',
    'DensityLightScorer',
    'LightScoreBreakdown',
    'RouteVariantSelector',
    'select_route_variants',

    # Configuration
    'LightScoringConfig',
    'LightScorerFactory',
    'LightScoringMethod',
    'create_scorer_from_config',
    'create_scorer_from_string',

    # Integrations
    'GoogleDirectionsClient',
    'DirectionsError',
    'RouteVisualizer',

    # Utilities
    'distance_meters',
    'load_streetlights',

    # Metadata
    '__version__'
]
