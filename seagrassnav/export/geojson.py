# seagrassnav/export/geojson.py
"""
Converts engine records into plain GeoJSON dicts (RFC 7946 shapes, [lon, lat]
coordinate order). Nothing here mutates its inputs.
"""
import json
from typing import Any, Dict, Iterable, List, Optional, Sequence

from ..coverage_planner.data_models import SeedPoint
from ..geometry.data_models import GeoPoint, as_ring
from ..live_mission.data_models import LiveFeedSnapshot, SeedDropEvent, TelemetryFrame

def _coords(points: Iterable[GeoPoint]) -> List[List[float]]:
    return [[p.lon, p.lat] for p in points]

def _feature(geometry: Dict[str, Any], properties: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    return {"type": "Feature", "properties": properties or {}, "geometry": geometry}

def _collection(features: List[Dict[str, Any]]) -> Dict[str, Any]:
    return {"type": "FeatureCollection", "features": features}

def boundary_to_feature(boundary: Sequence, properties: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    return _feature({"type": "Polygon", "coordinates": [_coords(as_ring(boundary))]}, properties)

def path_to_feature(path: Iterable[GeoPoint]) -> Dict[str, Any]:
    return _feature({"type": "LineString", "coordinates": _coords(path)})

def trail_to_feature(trail: Iterable[GeoPoint]) -> Dict[str, Any]:
    return path_to_feature(trail)

def seeds_to_feature_collection(seeds: Iterable[SeedPoint]) -> Dict[str, Any]:
    return _collection([
        _feature(
            {"type": "Point", "coordinates": [s.position.lon, s.position.lat]},
            {"mission": s.mission, "missionName": s.mission_name, "depth": s.depth, "date": s.date}
        )
        for s in seeds
    ])

def seed_drops_to_feature_collection(
    drops: Iterable[SeedDropEvent],
    mission_id: int = 4,
    mission_name: str = "Live Mission"
) -> Dict[str, Any]:
    return _collection([
        _feature(
            {"type": "Point", "coordinates": [d.position.lon, d.position.lat]},
            {"id": d.id, "depth": d.depth, "timestamp": d.timestamp_ms,
             "mission": mission_id, "missionName": mission_name}
        )
        for d in drops
    ])

def telemetry_to_feature(frame: TelemetryFrame) -> Dict[str, Any]:
    return _feature(
        {"type": "Point", "coordinates": [frame.position.lon, frame.position.lat]},
        {
            "depth": frame.depth,
            "speed": frame.speed,
            "heading": frame.heading,
            "battery": frame.battery,
            "signalStrength": frame.signal_strength,
            "timestamp": frame.timestamp_ms
        }
    )

def snapshot_to_dict(snapshot: LiveFeedSnapshot, mission_id: int = 4, mission_name: str = "Live Mission") -> Dict[str, Any]:
    """The full poll payload: robot, drops, trail, stats and recent drops."""
    stats = snapshot.stats
    return {
        "robotPosition": telemetry_to_feature(snapshot.robot_position) if snapshot.robot_position else None,
        "seedDrops": seed_drops_to_feature_collection(snapshot.seed_drops, mission_id, mission_name),
        "pathTrail": trail_to_feature(snapshot.path_trail),
        "stats": {
            "totalSeeds": stats.total_seeds,
            "distanceCovered": stats.distance_covered_km,
            "elapsedTime": stats.elapsed_ms,
            "currentSpeed": stats.current_speed,
            "avgDepth": stats.avg_depth,
            "pathProgress": stats.path_progress
        },
        "connectionStatus": snapshot.connection_status.value,
        "recentDrops": [
            {"id": d.id, "lng": d.position.lon, "lat": d.position.lat,
             "depth": d.depth, "timestamp": d.timestamp_ms}
            for d in snapshot.recent_drops
        ]
    }

def to_json(obj: Dict[str, Any], indent: Optional[int] = None) -> str:
    return json.dumps(obj, indent=indent)
