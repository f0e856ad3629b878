# seagrassnav/coverage_planner/seeds.py
"""
Seed layouts for executed and planned sectors. Each mission plants an equal
consecutive slice of the coverage path; per-mission counts are scaled so the
sector reaches its target total.
"""
import logging
import math
from dataclasses import replace
from typing import List, Optional, Sequence

import numpy as np

from ..geometry.data_models import GeoPoint
from ..utils.numeric import round_half_up
from .constants import SeedConstants
from .core import CoveragePlanner
from .data_models import Mission, PlannerConfig, SeedPoint, Sector, SectorPlan
from .exceptions import InvalidTargetCountError

logger = logging.getLogger(__name__)

DEFAULT_MISSIONS = (
    Mission(id=0, name="Mission Alpha", date="Jan 12, 2026", color="#34d399", seed_count=218),
    Mission(id=1, name="Mission Bravo", date="Jan 26, 2026", color="#38bdf8", seed_count=244),
    Mission(id=2, name="Mission Charlie", date="Feb 3, 2026", color="#fbbf24", seed_count=206),
    Mission(id=3, name="Mission Delta", date="Feb 9, 2026", color="#c084fc", seed_count=179),
)

def _count_scale(missions: Sequence[Mission], total_count: Optional[int]) -> float:
    if total_count is not None and total_count < 0:
        raise InvalidTargetCountError(total_count)
    base_total = sum(m.seed_count for m in missions)
    if total_count is None or base_total <= 0:
        return 1.0
    return total_count / base_total

def scale_missions(missions: Sequence[Mission], total_count: Optional[int]) -> List[Mission]:
    """Returns copies of the missions with seed counts scaled to total_count."""
    scale = _count_scale(missions, total_count)
    return [replace(m, seed_count=round_half_up(m.seed_count * scale)) for m in missions]

def generate_seeds(
    path: Sequence[GeoPoint],
    total_count: Optional[int] = None,
    missions: Sequence[Mission] = DEFAULT_MISSIONS,
    rng: Optional[np.random.Generator] = None
) -> List[SeedPoint]:
    """Spreads each mission's seeds evenly along its slice of the path."""
    rng = rng if rng is not None else np.random.default_rng()
    waypoints = list(path)
    scale = _count_scale(missions, total_count)
    counts = [round_half_up(m.seed_count * scale) for m in missions]

    seeds = []
    for m, mission in enumerate(missions):
        s0 = math.floor(m / len(missions) * len(waypoints))
        s1 = math.floor((m + 1) / len(missions) * len(waypoints))
        segment = waypoints[s0:s1]
        if not segment:
            logger.warning(f"{mission.name} has no path slice; skipping {counts[m]} seeds")
            continue

        for s in range(counts[m]):
            idx = min(math.floor(s / counts[m] * len(segment)), len(segment) - 1)
            base = segment[idx]
            seeds.append(SeedPoint(
                position=GeoPoint(
                    lon=base.lon + rng.uniform(-0.5, 0.5) * SeedConstants.POSITION_JITTER_DEG,
                    lat=base.lat + rng.uniform(-0.5, 0.5) * SeedConstants.POSITION_JITTER_DEG
                ),
                mission=m,
                mission_name=mission.name,
                depth=round_half_up(SeedConstants.MIN_DEPTH_M + rng.random() * SeedConstants.DEPTH_RANGE_M, 1),
                date=mission.date
            ))
    return seeds

def plan_sector(
    sector: Sector,
    rng: Optional[np.random.Generator] = None,
    config: Optional[PlannerConfig] = None,
    missions: Sequence[Mission] = DEFAULT_MISSIONS
) -> SectorPlan:
    """
    Generates the coverage path and seed layout for a sector. Planned sectors
    densify their path towards the target count so each planned placement
    gets its own waypoint.
    """
    densify_to = sector.target_count if sector.status == "planned" else None
    path = CoveragePlanner(config).generate_path(sector.boundary, target_count=densify_to)
    scaled = scale_missions(missions, sector.target_count)
    seeds = generate_seeds(path, None, scaled, rng)
    logger.info(f"Sector '{sector.id}': {len(path)} waypoints, {len(seeds)} seeds")
    return SectorPlan(sector=sector, path=path, missions=scaled, seeds=seeds)
