# seagrassnav/geometry/projection.py
"""
Local equirectangular projection. One degree of latitude is a fixed number of
meters and one degree of longitude shrinks with cos(latitude). Only valid for
small extents away from the poles; this is the single meters<->degrees
conversion used by the rectangle builder, the planner and the simulator.
"""
import numpy as np
from typing import Tuple

from ..constants.projection import ProjectionConstants
from .data_models import GeoPoint
from .exceptions import InvalidBoundaryError

class LocalProjection:
    """Flat-earth scaling anchored at a reference latitude."""

    def __init__(self, origin_lat: float, meters_per_deg_lat: float = ProjectionConstants.METERS_PER_DEG_LAT):
        if not np.isfinite(origin_lat) or abs(origin_lat) > ProjectionConstants.MAX_ABS_LATITUDE:
            raise InvalidBoundaryError(
                f"Latitude {origin_lat} is outside the local projection's valid range",
                reason="latitude"
            )
        self.origin_lat = origin_lat
        self.meters_per_deg_lat = meters_per_deg_lat
        self.meters_per_deg_lon = meters_per_deg_lat * float(np.cos(np.radians(origin_lat)))

    def offset_to_degrees(self, east_m: float, north_m: float) -> Tuple[float, float]:
        """Converts an east/north offset in meters to (dlon, dlat) in degrees."""
        return east_m / self.meters_per_deg_lon, north_m / self.meters_per_deg_lat

    def delta_to_meters(self, dlon: float, dlat: float) -> Tuple[float, float]:
        """Converts a (dlon, dlat) difference in degrees to east/north meters."""
        return dlon * self.meters_per_deg_lon, dlat * self.meters_per_deg_lat

    def distance_m(self, a: GeoPoint, b: GeoPoint) -> float:
        east, north = self.delta_to_meters(b.lon - a.lon, b.lat - a.lat)
        return float(np.hypot(east, north))

    def translate(self, point: GeoPoint, east_m: float, north_m: float) -> GeoPoint:
        dlon, dlat = self.offset_to_degrees(east_m, north_m)
        return GeoPoint(lon=point.lon + dlon, lat=point.lat + dlat)

def segment_lengths_m(points, meters_per_deg_lat: float = ProjectionConstants.METERS_PER_DEG_LAT) -> np.ndarray:
    """
    Lengths in meters of each consecutive segment of a polyline. The longitude
    scale of every segment is taken at the latitude of its start point.
    """
    coords = np.array([(p.lon, p.lat) for p in points], dtype=float).reshape(-1, 2)
    if len(coords) < 2:
        return np.zeros(0)
    d = np.diff(coords, axis=0)
    east = d[:, 0] * meters_per_deg_lat * np.cos(np.radians(coords[:-1, 1]))
    north = d[:, 1] * meters_per_deg_lat
    return np.sqrt(east * east + north * north)
