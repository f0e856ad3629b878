# seagrassnav/live_mission/generators/sensors.py

# Standard Libraries
import math
from typing import Optional, Tuple

# Third Party
import numpy as np

# Local Imports
from ..config import LiveMissionConfig

class SensorModel:
    """Synthesizes depth, speed, battery and signal readings with bounded jitter."""

    def __init__(self, config: Optional[LiveMissionConfig] = None, rng: Optional[np.random.Generator] = None):
        self.config = config or LiveMissionConfig()
        self.rng = rng if rng is not None else np.random.default_rng()

    def _jitter(self, width: float) -> float:
        """Uniform noise in [-width/2, width/2)."""
        return (self.rng.random() - 0.5) * width

    def nominal_depth(self, distance_m: float) -> float:
        cfg = self.config
        return cfg.base_depth_m + cfg.depth_amplitude_m * math.sin(distance_m / cfg.depth_wavelength_m)

    def depth(self, distance_m: float) -> float:
        return self.nominal_depth(distance_m) + self._jitter(self.config.depth_jitter_m)

    def speed(self) -> float:
        return self.config.robot_speed_mps + self._jitter(self.config.speed_jitter_mps)

    def battery(self, elapsed_ms: float) -> float:
        return max(0.0, 100.0 - (elapsed_ms / self.config.mission_duration_ms) * 100.0)

    def signal_strength(self, progress: float) -> float:
        cfg = self.config
        signal = cfg.signal_start_pct - progress * cfg.signal_decay_pct + self._jitter(cfg.signal_jitter_pct)
        return max(cfg.signal_floor_pct, signal)

    def drop_offset(self) -> Tuple[float, float]:
        """Positional scatter (dlon, dlat) in degrees for a seed drop."""
        width = self.config.seed_position_jitter_deg
        return self._jitter(width), self._jitter(width)
