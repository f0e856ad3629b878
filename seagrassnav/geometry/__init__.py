"""
geometry - Local projection, rectangle sectors and boundary rings.
"""

from .core import compute_rect_boundary, compute_polygon_center, validate_boundary
from .data_models import GeoPoint, BoundaryRing, as_ring
from .exceptions import GeometryError, InvalidBoundaryError, InvalidDimensionError
from .projection import LocalProjection, segment_lengths_m

__all__ = [
    'compute_rect_boundary',
    'compute_polygon_center',
    'validate_boundary',
    'GeoPoint',
    'BoundaryRing',
    'as_ring',
    'GeometryError',
    'InvalidBoundaryError',
    'InvalidDimensionError',
    'LocalProjection',
    'segment_lengths_m'
]
