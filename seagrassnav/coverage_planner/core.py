# seagrassnav/coverage_planner/core.py
"""
Boustrophedon ("lawnmower") coverage paths over a quadrilateral sector.

The sweep runs along the longer of the two edges leaving the first corner and
steps between parallel passes along the shorter one. Only p0, p1 and p3 are
used to build the grid, so the boundary must be (close to) a parallelogram;
validate_boundary() rejects anything else before planning starts.
"""
import logging
import math
from typing import List, Optional, Sequence, Tuple

import numpy as np

from ..geometry.core import validate_boundary
from ..geometry.data_models import GeoPoint
from ..geometry.projection import LocalProjection
from ..utils.numeric import round_half_up
from .data_models import CoveragePath, PlannerConfig
from .exceptions import InvalidTargetCountError

logger = logging.getLogger(__name__)

class CoveragePlanner:
    """Generates zig-zag coverage paths for validated sector boundaries."""

    def __init__(self, config: Optional[PlannerConfig] = None):
        self.config = config or PlannerConfig()

    def generate_path(self, boundary: Sequence, target_count: Optional[int] = None) -> CoveragePath:
        """
        Builds the waypoint grid for a closed 5-point boundary ring.

        Args:
            boundary: [p0, p1, p2, p3, p0] as GeoPoints or [lon, lat] pairs.
            target_count: Optional minimum waypoint count. When the nominal grid
                is smaller, both grid dimensions are scaled up by
                sqrt(target / nominal). The result approximates the target.

        Returns:
            CoveragePath with (num_passes + 1) * (points_per_pass + 1) waypoints.
        """
        if target_count is not None:
            if isinstance(target_count, bool) or not isinstance(target_count, (int, np.integer)) or target_count <= 0:
                raise InvalidTargetCountError(target_count)

        ring = validate_boundary(
            boundary, self.config.parallelogram_tolerance, self.config.meters_per_deg_lat
        )
        p0, p1, p3 = ring[0], ring[1], ring[3]

        edge01 = (p1.lon - p0.lon, p1.lat - p0.lat)
        edge03 = (p3.lon - p0.lon, p3.lat - p0.lat)
        projection = LocalProjection(p0.lat, self.config.meters_per_deg_lat)
        len01 = projection.distance_m(p0, p1)
        len03 = projection.distance_m(p0, p3)

        if len01 >= len03:
            sweep_axis, sweep_len = edge01, len01
            step_axis, step_len = edge03, len03
        else:
            sweep_axis, sweep_len = edge03, len03
            step_axis, step_len = edge01, len01

        num_passes, points_per_pass = self._grid_size(sweep_len, step_len, target_count)
        waypoints = self._build_waypoints(p0, sweep_axis, step_axis, num_passes, points_per_pass)

        logger.info(
            f"Coverage path: {num_passes + 1} passes x {points_per_pass + 1} points "
            f"({len(waypoints)} waypoints) over {sweep_len:.0f}m x {step_len:.0f}m"
        )
        return CoveragePath(
            waypoints=tuple(waypoints),
            num_passes=num_passes,
            points_per_pass=points_per_pass,
            sweep_length_m=sweep_len,
            step_length_m=step_len,
            origin=p0,
            sweep_axis=sweep_axis,
            step_axis=step_axis
        )

    def _grid_size(self, sweep_len: float, step_len: float, target_count: Optional[int]) -> Tuple[int, int]:
        cfg = self.config
        num_passes = max(cfg.min_passes, round_half_up(step_len / cfg.pass_spacing_m))
        points_per_pass = max(cfg.min_points_per_pass, round_half_up(sweep_len / cfg.waypoint_spacing_m))

        if target_count is not None:
            naive = (num_passes + 1) * (points_per_pass + 1)
            if naive < target_count:
                factor = math.sqrt(target_count / naive)
                num_passes = math.ceil(num_passes * factor)
                points_per_pass = math.ceil(points_per_pass * factor)
                logger.debug(f"Densified grid by {factor:.3f} towards {target_count} waypoints")
        return num_passes, points_per_pass

    def _build_waypoints(
        self,
        origin: GeoPoint,
        sweep_axis: Tuple[float, float],
        step_axis: Tuple[float, float],
        num_passes: int,
        points_per_pass: int
    ) -> List[GeoPoint]:
        inset = self.config.inset
        span = 1 - 2 * inset
        waypoints = []
        for pass_idx in range(num_passes + 1):
            t_step = inset + (pass_idx / num_passes) * span
            forward = pass_idx % 2 == 0
            for pt in range(points_per_pass + 1):
                frac = pt / points_per_pass if forward else 1 - pt / points_per_pass
                t_sweep = inset + frac * span
                waypoints.append(GeoPoint(
                    lon=origin.lon + sweep_axis[0] * t_sweep + step_axis[0] * t_step,
                    lat=origin.lat + sweep_axis[1] * t_sweep + step_axis[1] * t_step
                ))
        return waypoints

    @staticmethod
    def sweep_parameters(path: CoveragePath) -> List[Tuple[float, float]]:
        """
        Recovers (t_sweep, t_step) for every waypoint by solving
        waypoint - origin = sweep_axis * t_sweep + step_axis * t_step.
        """
        basis = np.array([path.sweep_axis, path.step_axis], dtype=float).T
        offsets = np.array(
            [(p.lon - path.origin.lon, p.lat - path.origin.lat) for p in path.waypoints],
            dtype=float
        )
        solved = np.linalg.solve(basis, offsets.T).T
        return [(float(ts), float(tt)) for ts, tt in solved]

def generate_path(
    boundary: Sequence,
    target_count: Optional[int] = None,
    config: Optional[PlannerConfig] = None
) -> CoveragePath:
    """Convenience wrapper around CoveragePlanner.generate_path()."""
    return CoveragePlanner(config).generate_path(boundary, target_count)
