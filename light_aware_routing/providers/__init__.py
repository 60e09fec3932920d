"""
Directions providers supplying route candidates.
"""

from .google_directions import GoogleDirectionsClient, DirectionsError, route_to_candidate

__all__ = ['GoogleDirectionsClient', 'DirectionsError', 'route_to_candidate']
