# seagrassnav/live_mission/feed.py
"""
Fixed-interval observation loop around a LiveMissionSimulator. The feed is
the only owner of its simulator: switching sectors or disabling the feed
disposes the current instance before anything new is built.
"""
import logging
import time
from typing import Callable, Optional, Sequence

import numpy as np

from ..coverage_planner.core import CoveragePlanner
from ..coverage_planner.data_models import PlannerConfig
from ..geometry.exceptions import GeometryError
from .config import LiveMissionConfig
from .core import LiveMissionSimulator
from .data_models import ConnectionStatus, LiveFeedSnapshot

logger = logging.getLogger(__name__)

class LiveFeed:
    """Polls a simulated robot for one sector and hands out snapshots."""

    def __init__(
        self,
        boundary: Sequence,
        enabled: bool = True,
        config: Optional[LiveMissionConfig] = None,
        rng: Optional[np.random.Generator] = None,
        clock: Optional[Callable[[], float]] = None,
        sleep: Optional[Callable[[float], None]] = None,
        planner_config: Optional[PlannerConfig] = None
    ):
        self.config = config or LiveMissionConfig()
        self.rng = rng if rng is not None else np.random.default_rng()
        self.clock = clock or time.time
        self.sleep = sleep or time.sleep
        if planner_config is None:
            planner_config = PlannerConfig(meters_per_deg_lat=self.config.meters_per_deg_lat)
        self.planner = CoveragePlanner(planner_config)

        self.boundary = boundary
        self.enabled = False
        self.simulator: Optional[LiveMissionSimulator] = None
        self._opened_at = 0.0
        self._running = False
        self.last_snapshot = LiveFeedSnapshot()

        if enabled:
            self.set_enabled(True)

    def _open(self, boundary: Sequence) -> None:
        """
        Plans and starts a simulator for a boundary. Nothing on the feed
        changes unless planning succeeds; on failure the feed is left disabled.
        """
        try:
            path = self.planner.generate_path(boundary)
            simulator = LiveMissionSimulator(path, config=self.config, rng=self.rng, clock=self.clock)
            simulator.start()
        except GeometryError:
            self.enabled = False
            logger.error("Live feed could not plan a path for the sector; feed disabled")
            raise
        self.boundary = boundary
        self.simulator = simulator
        self.enabled = True
        self._opened_at = self.clock()

    def _close(self) -> None:
        if self.simulator is not None:
            self.simulator.dispose()
            self.simulator = None

    @property
    def connection_status(self) -> ConnectionStatus:
        if self.simulator is None:
            return ConnectionStatus.CONNECTING
        if (self.clock() - self._opened_at) * 1000 >= self.config.connect_delay_ms:
            return ConnectionStatus.CONNECTED
        return ConnectionStatus.CONNECTING

    def set_enabled(self, enabled: bool) -> LiveFeedSnapshot:
        """Starts or tears down the simulator. Disabling resets to an empty snapshot."""
        if enabled and not self.enabled:
            self._open(self.boundary)
            logger.info("Live feed enabled")
        elif not enabled and self.enabled:
            self.enabled = False
            self._running = False
            self._close()
            self.last_snapshot = LiveFeedSnapshot()
            logger.info("Live feed disabled")
        return self.last_snapshot

    def switch_sector(self, boundary: Sequence) -> None:
        """Disposes the current simulator, then builds one for the new boundary."""
        self._close()
        self.last_snapshot = LiveFeedSnapshot()
        if self.enabled:
            self._open(boundary)
            logger.info("Live feed switched sector")
        else:
            self.boundary = boundary

    def poll(self) -> LiveFeedSnapshot:
        """One poll tick: every state change happens inside this call."""
        if self.simulator is None:
            return self.last_snapshot
        self.last_snapshot = self.simulator.poll(connection_status=self.connection_status)
        stats = self.last_snapshot.stats
        logger.debug(
            f"Poll: {stats.total_seeds} seeds, {stats.distance_covered_km:.3f} km, "
            f"progress {stats.path_progress:.1%}"
        )
        return self.last_snapshot

    def run(
        self,
        max_polls: Optional[int] = None,
        on_snapshot: Optional[Callable[[LiveFeedSnapshot], None]] = None
    ) -> LiveFeedSnapshot:
        """
        Polls every poll_interval until stop() is called, the feed is disabled
        or max_polls ticks have run.
        """
        self._running = True
        polls = 0
        while self._running and self.enabled and (max_polls is None or polls < max_polls):
            self.sleep(self.config.poll_interval_s)
            snapshot = self.poll()
            polls += 1
            if on_snapshot is not None:
                on_snapshot(snapshot)
        self._running = False
        return self.last_snapshot

    def stop(self) -> None:
        self._running = False

    def dispose(self) -> None:
        self.stop()
        self.set_enabled(False)
