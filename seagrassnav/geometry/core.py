# seagrassnav/geometry/core.py
"""
Rectangle sectors and boundary rings.

Sectors are drawn as rectangles given in meters (center, rotation, length,
width) and stored as closed 5-point rings of GeoPoints. The coverage planner
only trusts rings that pass validate_boundary().
"""
import math
from typing import Optional, Sequence

import numpy as np

from ..constants.projection import ProjectionConstants
from .data_models import BoundaryRing, GeoPoint, as_ring
from .exceptions import InvalidBoundaryError, InvalidDimensionError
from .projection import LocalProjection

def compute_rect_boundary(
    center: GeoPoint,
    angle_deg: float,
    length_m: float,
    width_m: float,
    meters_per_deg_lat: float = ProjectionConstants.METERS_PER_DEG_LAT
) -> BoundaryRing:
    """
    Builds a closed rectangle ring around a center point.

    Args:
        center: Rectangle center.
        angle_deg: Rotation in degrees applied to the east/north corners; 0 keeps
            the length axis pointing north.
        length_m: Extent along the rotated north axis, in meters.
        width_m: Extent along the rotated east axis, in meters.

    Returns:
        Five points; the last is the same object as the first.
    """
    for name, value in (("length_m", length_m), ("width_m", width_m)):
        if not np.isfinite(value) or value <= 0:
            raise InvalidDimensionError(name, value)

    center = center if isinstance(center, GeoPoint) else GeoPoint.from_pair(center)
    projection = LocalProjection(center.lat, meters_per_deg_lat)
    rad = math.radians(angle_deg)
    cos_a, sin_a = math.cos(rad), math.sin(rad)
    half_l, half_w = length_m / 2, width_m / 2

    # x = east, y = north, before rotation
    local_corners = [(-half_w, half_l), (half_w, half_l), (half_w, -half_l), (-half_w, -half_l)]

    ring = []
    for x, y in local_corners:
        rx = x * cos_a - y * sin_a
        ry = x * sin_a + y * cos_a
        ring.append(projection.translate(center, rx, ry))
    ring.append(ring[0])
    return tuple(ring)

def compute_polygon_center(boundary: Sequence) -> GeoPoint:
    """
    Arithmetic mean of the ring's corners. The closing point is skipped only
    when it equals the first point on both coordinates. An empty boundary gives
    GeoPoint(nan, nan); callers must check for it.
    """
    points = as_ring(boundary)
    if (len(points) > 1
            and points[0].lon == points[-1].lon
            and points[0].lat == points[-1].lat):
        points = points[:-1]
    if not points:
        return GeoPoint(lon=math.nan, lat=math.nan)

    lon = sum(p.lon for p in points)
    lat = sum(p.lat for p in points)
    return GeoPoint(lon=lon / len(points), lat=lat / len(points))

def validate_boundary(
    boundary: Sequence,
    parallelogram_tolerance: Optional[float] = ProjectionConstants.PARALLELOGRAM_TOLERANCE,
    meters_per_deg_lat: float = ProjectionConstants.METERS_PER_DEG_LAT
) -> BoundaryRing:
    """
    Checks that a ring is a usable coverage sector and returns it as GeoPoints.

    The planner sweeps using only the corners adjacent to p0, so the far corner
    p2 must lie within `parallelogram_tolerance` x (shorter edge) of
    p1 + p3 - p0. Pass None to skip that check.
    """
    ring = as_ring(boundary)
    if len(ring) != 5:
        raise InvalidBoundaryError(f"Boundary must have 5 points, got {len(ring)}", reason="point_count")
    if not all(np.isfinite(p.lon) and np.isfinite(p.lat) for p in ring):
        raise InvalidBoundaryError("Boundary contains non-finite coordinates", reason="non_finite")
    if ring[0] != ring[4]:
        raise InvalidBoundaryError("Boundary ring is not closed", reason="not_closed")
    if len(set(ring[:4])) != 4:
        raise InvalidBoundaryError("Boundary needs 4 distinct corners", reason="duplicate_corners")

    p0, p1, p2, p3 = ring[:4]
    projection = LocalProjection(p0.lat, meters_per_deg_lat)
    e01 = projection.delta_to_meters(p1.lon - p0.lon, p1.lat - p0.lat)
    e03 = projection.delta_to_meters(p3.lon - p0.lon, p3.lat - p0.lat)
    len01, len03 = math.hypot(*e01), math.hypot(*e03)
    if len01 == 0 or len03 == 0:
        raise InvalidBoundaryError("Boundary has a zero-length edge", reason="zero_length_edge")

    cross = e01[0] * e03[1] - e01[1] * e03[0]
    if abs(cross) <= 1e-9 * len01 * len03:
        raise InvalidBoundaryError("Boundary edges from the first corner are collinear", reason="collinear")

    if parallelogram_tolerance is not None:
        expected = GeoPoint(lon=p1.lon + p3.lon - p0.lon, lat=p1.lat + p3.lat - p0.lat)
        deviation = projection.distance_m(expected, p2)
        if deviation > parallelogram_tolerance * min(len01, len03):
            raise InvalidBoundaryError(
                f"Far corner is {deviation:.1f} m from the parallelogram completion",
                reason="not_parallelogram"
            )
    return ring
