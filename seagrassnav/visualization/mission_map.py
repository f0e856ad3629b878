# seagrassnav/visualization/mission_map.py
"""
Interactive Folium preview of a sector: its boundary, the planned coverage
path, planted seeds and, when a live snapshot is given, the trail, seed drops
and current robot position. Every layer gets its own toggleable group.
"""
import folium
import logging
from typing import Iterable, List, Optional, Sequence, Tuple

from ..coverage_planner.data_models import Mission, SeedPoint
from ..geometry.core import compute_polygon_center
from ..geometry.data_models import GeoPoint, as_ring
from ..live_mission.data_models import LiveFeedSnapshot, TelemetryFrame

logger = logging.getLogger(__name__)

def _latlon(points: Iterable[GeoPoint]) -> List[Tuple[float, float]]:
    """Folium wants (lat, lon); the engine stores (lon, lat)."""
    return [(p.lat, p.lon) for p in points]

class MissionMapVisualizer:
    """Creates Folium maps for a single sector."""

    def __init__(self, tiles: str = "CartoDB positron", zoom_start: int = 16):
        self.tiles = tiles
        self.zoom_start = zoom_start

    def create_sector_map(
        self,
        boundary: Sequence,
        path: Optional[Sequence[GeoPoint]] = None,
        seeds: Optional[Sequence[SeedPoint]] = None,
        snapshot: Optional[LiveFeedSnapshot] = None,
        missions: Optional[Sequence[Mission]] = None,
        sector_name: str = "Sector"
    ) -> folium.Map:
        ring = as_ring(boundary)
        center = compute_polygon_center(ring)
        sector_map = folium.Map(location=[center.lat, center.lon], zoom_start=self.zoom_start, tiles=self.tiles)

        boundary_group = folium.FeatureGroup(name=f"{sector_name} Boundary", show=True).add_to(sector_map)
        folium.Polygon(
            locations=_latlon(ring), color="#34d399", weight=2,
            fill=True, fill_color="#34d399", fill_opacity=0.1,
            tooltip=sector_name
        ).add_to(boundary_group)

        if path:
            path_group = folium.FeatureGroup(name="Planned Path", show=True).add_to(sector_map)
            folium.PolyLine(
                locations=_latlon(path), color="#38bdf8", weight=2, opacity=0.7,
                tooltip=f"Coverage path ({len(path)} waypoints)"
            ).add_to(path_group)

        if seeds:
            self._add_seed_layer(sector_map, seeds, missions)

        if snapshot is not None:
            self._add_live_layers(sector_map, snapshot)

        folium.LayerControl(collapsed=False).add_to(sector_map)
        logger.info(f"Sector map created for '{sector_name}'")
        return sector_map

    def _add_seed_layer(self, sector_map: folium.Map, seeds: Sequence[SeedPoint], missions: Optional[Sequence[Mission]]) -> None:
        colors = {m.id: m.color for m in missions} if missions else {}
        seeds_group = folium.FeatureGroup(name="Planted Seeds", show=True).add_to(sector_map)
        for seed in seeds:
            color = colors.get(seed.mission, "#fbbf24")
            folium.CircleMarker(
                location=[seed.position.lat, seed.position.lon], radius=2,
                color=color, fill=True, fill_color=color, fill_opacity=0.9,
                tooltip=f"{seed.mission_name}: {seed.depth} m"
            ).add_to(seeds_group)

    def _add_live_layers(self, sector_map: folium.Map, snapshot: LiveFeedSnapshot) -> None:
        if len(snapshot.path_trail) >= 2:
            trail_group = folium.FeatureGroup(name="Live Trail", show=True).add_to(sector_map)
            folium.PolyLine(
                locations=_latlon(snapshot.path_trail), color="#E41A1C", weight=3, opacity=0.9,
                tooltip="Completed path"
            ).add_to(trail_group)

        if snapshot.seed_drops:
            drops_group = folium.FeatureGroup(name="Live Seed Drops", show=True).add_to(sector_map)
            for drop in snapshot.seed_drops:
                folium.CircleMarker(
                    location=[drop.position.lat, drop.position.lon], radius=3,
                    color="#c084fc", fill=True, fill_opacity=0.9,
                    tooltip=f"{drop.id}: {drop.depth} m"
                ).add_to(drops_group)

        if snapshot.robot_position is not None:
            robot_group = folium.FeatureGroup(name="Robot", show=True).add_to(sector_map)
            frame = snapshot.robot_position
            folium.Marker(
                location=[frame.position.lat, frame.position.lon],
                popup=self._create_popup_html(frame),
                tooltip="Robot",
                icon=folium.Icon(color="green", icon="location-arrow", prefix="fa")
            ).add_to(robot_group)

    def _create_popup_html(self, frame: TelemetryFrame) -> str:
        return f"""
        <b>Robot</b><br>
        Heading: {frame.heading}&deg;<br>
        Depth: {frame.depth} m<br>
        Speed: {frame.speed} m/s<br>
        Battery: {frame.battery}%<br>
        Signal: {frame.signal_strength}%
        """
