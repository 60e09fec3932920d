"""
Environment-driven settings for the light-aware routing API.
"""

import os
from dataclasses import dataclass, field
from typing import Optional

from dotenv import load_dotenv

from light_aware_routing.data import default_streetlights_path


@dataclass
class ApiSettings:
    """Runtime settings, usually read from the environment or a .env file."""

    google_maps_api_key: Optional[str] = None
    streetlights_path: str = field(default_factory=default_streetlights_path)
    scoring_method: str = 'advanced'
    directions_timeout: float = 10.0
    host: str = '0.0.0.0'
    port: int = 8000

    @classmethod
    def from_env(cls) -> 'ApiSettings':
        """Build settings from environment variables after loading ``.env``."""
        load_dotenv()
        defaults = cls()
        return cls(
            google_maps_api_key=os.getenv('GOOGLE_MAPS_API_KEY') or None,
            streetlights_path=os.getenv('STREETLIGHTS_PATH', defaults.streetlights_path),
            scoring_method=os.getenv('LIGHT_SCORING_METHOD', defaults.scoring_method),
            directions_timeout=float(os.getenv('DIRECTIONS_TIMEOUT', defaults.directions_timeout)),
            host=os.getenv('HOST', defaults.host),
            port=int(os.getenv('PORT', defaults.port)),
        )
