"""
Route visualization tools for creating interactive HTML maps with streetlight overlay.
"""

import logging
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

import folium
import numpy as np
from folium.plugins import MarkerCluster

from ..algorithms.selection.variant_selector import RouteVariant
from ..config.scoring_config import LightScoringConfig
from ..mapping.streetlight_index import StreetlightIndex

logger = logging.getLogger(__name__)


class RouteVisualizer:
    """
    Create interactive HTML maps comparing the three route variants.
    """

    def __init__(self, config: Optional[LightScoringConfig] = None):
        """
        Initialize route visualizer.

        Args:
            config: Scoring configuration for styling options
        """
        self.config = config or LightScoringConfig()

    def create_variant_map(self, variants: Sequence[RouteVariant],
                           index: Optional[StreetlightIndex] = None,
                           max_streetlights: int = 2000) -> folium.Map:
        """
        Create interactive map comparing route variants.

        Args:
            variants: Route variants to draw
            index: Streetlights to overlay near the routes
            max_streetlights: Upper bound on streetlight markers

        Returns:
            Folium map object
        """
        if not variants:
            raise ValueError("No route variants provided for visualization")

        all_coords = self._variant_coordinates(variants)
        center = self._calculate_map_center(all_coords)

        m = folium.Map(location=center, zoom_start=15, tiles=self.config.map_style)

        if index is not None and not index.is_empty and all_coords:
            self._add_streetlights(m, index, all_coords, max_streetlights)

        for variant in variants:
            self._add_variant_layer(m, variant)

        self._add_start_end_markers(m, variants)
        self._add_legend(m, variants)
        self._fit_map_to_coords(m, all_coords)

        return m

    def _variant_coordinates(self, variants: Sequence[RouteVariant]) -> List[Tuple[float, float]]:
        coords = []
        for variant in variants:
            coords.extend((p.latitude, p.longitude) for p in variant.path)
        return coords

    def _calculate_map_center(self, coords: List[Tuple[float, float]]) -> Tuple[float, float]:
        """Calculate map center from route coordinates."""
        if not coords:
            return (45.4215, -75.6972)  # Ottawa city centre

        lats = [c[0] for c in coords]
        lons = [c[1] for c in coords]
        return (float(np.mean(lats)), float(np.mean(lons)))

    def _add_streetlights(self, m: folium.Map, index: StreetlightIndex,
                          coords: List[Tuple[float, float]], max_points: int) -> None:
        """Add streetlight markers inside the routes' buffered bounding box."""
        buffer = self.config.map_streetlight_buffer
        lats = [c[0] for c in coords]
        lons = [c[1] for c in coords]

        nearby = index.points_within_bounds(
            min(lats) - buffer, max(lats) + buffer,
            min(lons) - buffer, max(lons) + buffer
        )
        if len(nearby) > max_points:
            logger.debug(f"Limiting streetlight markers from {len(nearby)} to {max_points}")
            nearby = nearby[:max_points]

        cluster = MarkerCluster(name='Streetlights')
        for point in nearby:
            folium.CircleMarker(
                location=[point.latitude, point.longitude],
                radius=3,
                popup='Streetlight',
                color=self.config.streetlight_marker_color,
                fill=True,
                fillOpacity=0.7
            ).add_to(cluster)
        cluster.add_to(m)

        logger.debug(f"Added {len(nearby)} streetlight markers")

    def _add_variant_layer(self, m: folium.Map, variant: RouteVariant) -> None:
        """Add a variant as a colored line on the map."""
        if not variant.path:
            logger.debug(f"Skipping {variant.id} variant without a path")
            return

        color = self.config.variant_colors.get(variant.id, '#000000')
        folium.PolyLine(
            locations=[(p.latitude, p.longitude) for p in variant.path],
            color=color,
            weight=5,
            opacity=0.8,
            tooltip=variant.label,
            popup=self._create_variant_popup(variant)
        ).add_to(m)

    def _create_variant_popup(self, variant: RouteVariant) -> str:
        distance = variant.distance_text or (
            f"{variant.distance_km:.2f} km" if variant.distance_km is not None else "n/a"
        )
        duration = variant.duration_text or f"{variant.duration_minutes:.0f} min"

        return f"""
        <div style="width: 200px;">
            <h4>{variant.label}</h4>
            <p><strong>Light score:</strong> {variant.light_score:.1f} / 10</p>
            <p><strong>Distance:</strong> {distance}</p>
            <p><strong>Duration:</strong> {duration}</p>
        </div>
        """

    def _add_start_end_markers(self, m: folium.Map, variants: Sequence[RouteVariant]) -> None:
        """Add start and end point markers."""
        first = next((v for v in variants if v.path), None)
        if first is None:
            return

        start = first.path[0]
        end = first.path[-1]

        folium.Marker(
            location=[start.latitude, start.longitude],
            popup='Start Point',
            icon=folium.Icon(color='green', icon='play')
        ).add_to(m)

        folium.Marker(
            location=[end.latitude, end.longitude],
            popup='End Point',
            icon=folium.Icon(color='red', icon='stop')
        ).add_to(m)

    def _add_legend(self, m: folium.Map, variants: Sequence[RouteVariant]) -> None:
        legend_items = []
        for variant in variants:
            color = self.config.variant_colors.get(variant.id, '#000000')
            legend_items.append(f"""
                <div style="margin-bottom: 8px;">
                    <span style="background-color: {color};
                                 width: 20px; height: 4px;
                                 display: inline-block; margin-right: 8px;"></span>
                    <strong>{variant.label}</strong><br>
                    <small>{variant.duration_minutes:.0f} min &bull; Light: {variant.light_score:.1f}</small>
                </div>
            """)

        legend_html = f"""
        <div style="position: fixed;
                   bottom: 50px; left: 50px; width: 220px; height: auto;
                   background-color: white; border:2px solid grey; z-index:9999;
                   font-size:14px; padding: 10px;">
            <h4 style="margin-top: 0;">Route Variants</h4>
            {''.join(legend_items)}
        </div>
        """
        m.get_root().add_child(folium.Element(legend_html))

    def _fit_map_to_coords(self, m: folium.Map, coords: List[Tuple[float, float]]) -> None:
        """Adjust map zoom and center to show all routes."""
        if len(coords) < 2:
            return

        lats = [c[0] for c in coords]
        lons = [c[1] for c in coords]
        lat_buffer = (max(lats) - min(lats)) * 0.1
        lon_buffer = (max(lons) - min(lons)) * 0.1

        m.fit_bounds([
            [min(lats) - lat_buffer, min(lons) - lon_buffer],
            [max(lats) + lat_buffer, max(lons) + lon_buffer]
        ])

    def save_map(self, map_obj: folium.Map, filepath: str) -> None:
        """
        Save interactive map to HTML file.

        Args:
            map_obj: Folium map object
            filepath: Output file path
        """
        try:
            Path(filepath).parent.mkdir(parents=True, exist_ok=True)
            map_obj.save(filepath)
            logger.info(f"Interactive map saved to {filepath}")
        except OSError as e:
            logger.error(f"Failed to save map to {filepath}: {e}")
            raise
