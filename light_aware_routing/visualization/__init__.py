"""
Visualization tools for route variants and streetlight data.
"""

from .route_visualizer import RouteVisualizer

__all__ = ['RouteVisualizer']
