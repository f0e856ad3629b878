# seagrassnav/geometry/data_models.py
"""
Value types shared by the geometry, planner and simulator modules.
Coordinates are always ordered (lon, lat) to match GeoJSON.
"""
from dataclasses import dataclass
from typing import Iterator, Sequence, Tuple

@dataclass(frozen=True)
class GeoPoint:
    """A (longitude, latitude) pair in decimal degrees."""
    lon: float
    lat: float

    def __iter__(self) -> Iterator[float]:
        yield self.lon
        yield self.lat

    def as_tuple(self) -> Tuple[float, float]:
        return (self.lon, self.lat)

    @classmethod
    def from_pair(cls, pair: Sequence[float]) -> "GeoPoint":
        """Builds a point from a [lon, lat] pair as found in GeoJSON."""
        return cls(lon=float(pair[0]), lat=float(pair[1]))

# Closed quadrilateral ring: 4 corners plus the first corner repeated.
BoundaryRing = Tuple[GeoPoint, ...]

def as_ring(points: Sequence) -> BoundaryRing:
    """Coerces a sequence of GeoPoints or [lon, lat] pairs into a ring tuple."""
    return tuple(p if isinstance(p, GeoPoint) else GeoPoint.from_pair(p) for p in points)
