# seagrassnav/live_mission/config.py
from dataclasses import dataclass

from ..constants.projection import ProjectionConstants
from .exceptions import ConfigurationError

@dataclass
class LiveMissionConfig:
    """Configuration for the live mission simulator and its poll loop."""

    # Motion
    robot_speed_mps: float = 0.8
    seed_interval_m: float = 15.0
    mission_duration_ms: float = 60 * 60 * 1000   # battery drains over this window

    # Poll loop
    poll_interval_ms: float = 1500
    connect_delay_ms: float = 800
    recent_drop_count: int = 10

    # Depth model: base + amplitude * sin(distance / wavelength) + jitter
    base_depth_m: float = 3.0
    depth_amplitude_m: float = 4.0
    depth_wavelength_m: float = 200.0
    depth_jitter_m: float = 1.0   # full width of the uniform jitter

    speed_jitter_mps: float = 0.2

    # Signal strength (%): start - decay * progress + jitter, floored
    signal_start_pct: float = 95.0
    signal_decay_pct: float = 30.0
    signal_jitter_pct: float = 10.0
    signal_floor_pct: float = 40.0

    seed_position_jitter_deg: float = 0.0003

    # Also handed to the planner when the simulator plans its own path
    meters_per_deg_lat: float = ProjectionConstants.METERS_PER_DEG_LAT

    mission_id: int = 4
    mission_name: str = "Live Mission"

    def __post_init__(self):
        for name in ("robot_speed_mps", "seed_interval_m", "mission_duration_ms",
                     "poll_interval_ms", "depth_wavelength_m", "meters_per_deg_lat"):
            value = getattr(self, name)
            if value <= 0:
                raise ConfigurationError(name, value, "Value must be positive")
        for name in ("connect_delay_ms", "depth_jitter_m", "speed_jitter_mps",
                     "signal_jitter_pct", "seed_position_jitter_deg", "recent_drop_count"):
            value = getattr(self, name)
            if value < 0:
                raise ConfigurationError(name, value, "Value must not be negative")

    @property
    def poll_interval_s(self) -> float:
        return self.poll_interval_ms / 1000.0
