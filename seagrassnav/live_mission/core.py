# seagrassnav/live_mission/core.py
"""
Live mission simulator. A robot moves along a precomputed coverage path at a
constant nominal speed measured from a wall-clock epoch; position, telemetry
and seed drops are derived from elapsed time on every query, so delayed or
skipped polls never lose drops.
"""
import logging
import math
import time
from typing import Callable, List, Optional, Sequence

import numpy as np

from ..coverage_planner.core import CoveragePlanner
from ..coverage_planner.data_models import PlannerConfig
from ..geometry.data_models import GeoPoint
from ..geometry.projection import segment_lengths_m
from ..utils.numeric import round_half_up
from .config import LiveMissionConfig
from .data_models import (
    ConnectionStatus, LiveFeedSnapshot, MissionState, MissionStats,
    PathPose, SeedDropEvent, TelemetryFrame
)
from .exceptions import (
    EmptyPathError, LiveMissionError, SimulationDisposedError, SimulationNotStartedError
)
from .generators.sensors import SensorModel

logger = logging.getLogger(__name__)

class LiveMissionSimulator:
    """
    Simulates one robot covering one sector. The instance is owned by a single
    caller; start() it once, poll() it as often as needed, dispose() it when
    the sector is closed.
    """

    def __init__(
        self,
        path: Sequence[GeoPoint],
        config: Optional[LiveMissionConfig] = None,
        rng: Optional[np.random.Generator] = None,
        clock: Optional[Callable[[], float]] = None
    ):
        """
        Args:
            path: Waypoints to follow (a CoveragePath or any GeoPoint sequence).
            config: Speeds, intervals and sensor model constants.
            rng: Random source for sensor jitter. Seed it for repeatable output.
            clock: Returns the current time in seconds. Defaults to time.time.
        """
        self.path = tuple(path)
        if not self.path:
            raise EmptyPathError()

        self.config = config or LiveMissionConfig()
        self.sensors = SensorModel(self.config, rng)
        self.clock = clock or time.time

        segments = segment_lengths_m(self.path, self.config.meters_per_deg_lat)
        self.path_lengths = np.concatenate(([0.0], np.cumsum(segments)))
        self.total_path_length = float(self.path_lengths[-1])

        self.state = MissionState.IDLE
        self.epoch = 0.0
        self._seeds: List[SeedDropEvent] = []
        self.last_drop_distance = 0.0

    @classmethod
    def from_boundary(
        cls,
        boundary: Sequence,
        config: Optional[LiveMissionConfig] = None,
        rng: Optional[np.random.Generator] = None,
        clock: Optional[Callable[[], float]] = None,
        planner_config: Optional[PlannerConfig] = None
    ) -> "LiveMissionSimulator":
        """Plans the coverage path for a sector boundary and simulates it."""
        config = config or LiveMissionConfig()
        if planner_config is None:
            planner_config = PlannerConfig(meters_per_deg_lat=config.meters_per_deg_lat)
        path = CoveragePlanner(planner_config).generate_path(boundary)
        return cls(path, config=config, rng=rng, clock=clock)

    # --- Lifecycle ---

    @property
    def started(self) -> bool:
        return self.state == MissionState.RUNNING

    @property
    def planned_path(self) -> List[GeoPoint]:
        return list(self.path)

    def start(self) -> None:
        """Records the mission epoch and clears the drop history."""
        if self.state == MissionState.DISPOSED:
            raise SimulationDisposedError()
        if self.state == MissionState.RUNNING:
            raise LiveMissionError("Simulation is already running")

        self.epoch = self.clock()
        self._seeds = []
        self.last_drop_distance = 0.0
        self.state = MissionState.RUNNING
        logger.info(
            f"Live mission {self.config.mission_id} started: {len(self.path)} waypoints, "
            f"{self.total_path_length:.0f}m path"
        )

    def dispose(self) -> None:
        if self.state == MissionState.DISPOSED:
            return
        self.state = MissionState.DISPOSED
        self._seeds = []
        logger.info(f"Live mission {self.config.mission_id} disposed")

    def _require_running(self) -> None:
        if self.state == MissionState.IDLE:
            raise SimulationNotStartedError()
        if self.state == MissionState.DISPOSED:
            raise SimulationDisposedError()

    def _now(self, now: Optional[float]) -> float:
        self._require_running()
        return self.clock() if now is None else now

    # --- Geometry along the path ---

    def distance_covered(self, now: Optional[float] = None) -> float:
        """Meters travelled since start. Not clamped to the path length."""
        now = self._now(now)
        return (now - self.epoch) * self.config.robot_speed_mps

    def progress_at(self, distance_m: float) -> float:
        if self.total_path_length <= 0:
            return 0.0
        return min(max(distance_m / self.total_path_length, 0.0), 1.0)

    def position_at_distance(self, distance_m: float) -> PathPose:
        """Interpolates position along the path; heading snaps to the segment direction."""
        clamped = max(0.0, min(distance_m, self.total_path_length))
        if len(self.path) < 2:
            return PathPose(position=self.path[-1], heading=0.0)

        i = max(1, int(np.searchsorted(self.path_lengths, clamped, side='left')))
        i = min(i, len(self.path) - 1)
        seg_start = self.path_lengths[i - 1]
        seg_len = self.path_lengths[i] - seg_start
        t = (clamped - seg_start) / seg_len if seg_len > 0 else 0.0

        a, b = self.path[i - 1], self.path[i]
        position = GeoPoint(lon=a.lon + t * (b.lon - a.lon), lat=a.lat + t * (b.lat - a.lat))
        heading = (math.degrees(math.atan2(b.lon - a.lon, b.lat - a.lat)) + 360) % 360
        return PathPose(position=position, heading=heading)

    # --- Simulated endpoints ---

    def robot_position(self, now: Optional[float] = None) -> TelemetryFrame:
        """Current robot pose with freshly synthesized sensor readings."""
        now = self._now(now)
        distance = self.distance_covered(now)
        pose = self.position_at_distance(distance)
        elapsed_ms = (now - self.epoch) * 1000

        speed = self.sensors.speed()
        depth = self.sensors.depth(distance)
        signal = self.sensors.signal_strength(self.progress_at(distance))

        return TelemetryFrame(
            position=pose.position,
            heading=round_half_up(pose.heading) % 360,
            depth=round_half_up(depth, 1),
            speed=round_half_up(speed, 2),
            battery=round_half_up(self.sensors.battery(elapsed_ms), 1),
            signal_strength=round_half_up(signal),
            timestamp_ms=now * 1000
        )

    def seed_drops(self, now: Optional[float] = None) -> List[SeedDropEvent]:
        """
        Emits every drop whose interval threshold has been passed since the
        previous call, then returns a copy of the full drop history.
        """
        distance = self.distance_covered(now)
        interval = self.config.seed_interval_m
        emitted = 0

        while self.last_drop_distance + interval < distance:
            self.last_drop_distance += interval
            pose = self.position_at_distance(self.last_drop_distance)
            depth = self.sensors.depth(self.last_drop_distance)
            dlon, dlat = self.sensors.drop_offset()
            self._seeds.append(SeedDropEvent(
                id=f"seed-{len(self._seeds)}",
                position=GeoPoint(lon=pose.position.lon + dlon, lat=pose.position.lat + dlat),
                depth=round_half_up(depth, 1),
                timestamp_ms=(self.epoch + self.last_drop_distance / self.config.robot_speed_mps) * 1000,
                distance_m=self.last_drop_distance
            ))
            emitted += 1

        if emitted:
            logger.debug(f"Emitted {emitted} seed drop(s); {len(self._seeds)} total")
        return list(self._seeds)

    def path_trail(self, now: Optional[float] = None) -> List[GeoPoint]:
        """The traversed part of the path, ending at the current position."""
        distance = self.distance_covered(now)
        trail = []
        for i, cumulative in enumerate(self.path_lengths):
            if cumulative <= distance:
                trail.append(self.path[i])
            else:
                trail.append(self.position_at_distance(distance).position)
                break
        return trail

    def stats(self, now: Optional[float] = None, current_speed: Optional[float] = None) -> MissionStats:
        """Aggregate mission statistics over the drops emitted so far."""
        now = self._now(now)
        distance = self.distance_covered(now)
        if current_speed is None:
            current_speed = round_half_up(self.sensors.speed(), 2)
        depths = [s.depth for s in self._seeds]
        return MissionStats(
            total_seeds=len(self._seeds),
            distance_covered_km=round_half_up(distance) / 1000,
            elapsed_ms=(now - self.epoch) * 1000,
            current_speed=current_speed,
            avg_depth=sum(depths) / len(depths) if depths else 0.0,
            path_progress=self.progress_at(distance)
        )

    def recent_drops(self, count: Optional[int] = None) -> List[SeedDropEvent]:
        """The newest drops first."""
        self._require_running()
        count = self.config.recent_drop_count if count is None else count
        if count <= 0:
            return []
        return list(reversed(self._seeds[-count:]))

    def poll(
        self,
        now: Optional[float] = None,
        connection_status: ConnectionStatus = ConnectionStatus.CONNECTED
    ) -> LiveFeedSnapshot:
        """Evaluates every endpoint at a single instant."""
        now = self._now(now)
        frame = self.robot_position(now)
        drops = self.seed_drops(now)
        return LiveFeedSnapshot(
            robot_position=frame,
            seed_drops=drops,
            path_trail=self.path_trail(now),
            stats=self.stats(now, current_speed=frame.speed),
            connection_status=connection_status,
            recent_drops=self.recent_drops()
        )
