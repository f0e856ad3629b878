# seagrassnav/live_mission/data_models.py
"""
Records produced by the live mission simulator. Telemetry frames and stats
are recomputed on every poll; seed drop events are append-only history.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from ..geometry.data_models import GeoPoint

class MissionState(Enum):
    IDLE = "idle"
    RUNNING = "running"
    DISPOSED = "disposed"

class ConnectionStatus(Enum):
    CONNECTING = "connecting"
    CONNECTED = "connected"

@dataclass(frozen=True)
class PathPose:
    """Interpolated position on the path and the heading of its segment."""
    position: GeoPoint
    heading: float

@dataclass(frozen=True)
class TelemetryFrame:
    """One snapshot of simulated robot sensor state."""
    position: GeoPoint
    heading: int           # degrees, [0, 360)
    depth: float           # meters
    speed: float           # m/s
    battery: float         # percent
    signal_strength: int   # percent
    timestamp_ms: float

@dataclass(frozen=True)
class SeedDropEvent:
    """A single simulated planting action."""
    id: str
    position: GeoPoint
    depth: float
    timestamp_ms: float
    distance_m: float

@dataclass(frozen=True)
class MissionStats:
    total_seeds: int = 0
    distance_covered_km: float = 0.0
    elapsed_ms: float = 0.0
    current_speed: float = 0.0
    avg_depth: float = 0.0
    path_progress: float = 0.0

@dataclass
class LiveFeedSnapshot:
    """Everything one poll hands to the rendering layer."""
    robot_position: Optional[TelemetryFrame] = None
    seed_drops: List[SeedDropEvent] = field(default_factory=list)
    path_trail: List[GeoPoint] = field(default_factory=list)
    stats: MissionStats = field(default_factory=MissionStats)
    connection_status: ConnectionStatus = ConnectionStatus.CONNECTING
    recent_drops: List[SeedDropEvent] = field(default_factory=list)
