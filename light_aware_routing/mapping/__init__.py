"""
Spatial lookup structures for streetlight data.
"""

from .streetlight_index import StreetlightIndex

__all__ = ['StreetlightIndex']
