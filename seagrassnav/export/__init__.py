"""
export - GeoJSON-shaped feature dicts for an external rendering layer.
"""

from .geojson import (
    boundary_to_feature, path_to_feature, seeds_to_feature_collection,
    seed_drops_to_feature_collection, telemetry_to_feature, trail_to_feature,
    snapshot_to_dict, to_json
)

__all__ = [
    "boundary_to_feature",
    "path_to_feature",
    "seeds_to_feature_collection",
    "seed_drops_to_feature_collection",
    "telemetry_to_feature",
    "trail_to_feature",
    "snapshot_to_dict",
    "to_json"
]
