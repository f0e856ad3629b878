# seagrassnav/coverage_planner/data_models.py
"""
Data structures produced by the coverage planner and the sector seeding
helpers. Paths are immutable once built; a new boundary or target count means
a new CoveragePath.
"""
from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Tuple

from ..constants.projection import ProjectionConstants
from ..geometry.data_models import BoundaryRing, GeoPoint
from .constants import PlannerConstants
from .exceptions import PlannerConfigurationError

@dataclass
class PlannerConfig:
    """Tunable spacing parameters for boustrophedon path generation."""
    pass_spacing_m: float = PlannerConstants.PASS_SPACING_M
    waypoint_spacing_m: float = PlannerConstants.WAYPOINT_SPACING_M
    min_passes: int = PlannerConstants.MIN_PASSES
    min_points_per_pass: int = PlannerConstants.MIN_POINTS_PER_PASS
    inset: float = PlannerConstants.BOUNDARY_INSET
    parallelogram_tolerance: Optional[float] = ProjectionConstants.PARALLELOGRAM_TOLERANCE
    meters_per_deg_lat: float = ProjectionConstants.METERS_PER_DEG_LAT

    def __post_init__(self):
        for name in ("pass_spacing_m", "waypoint_spacing_m", "meters_per_deg_lat"):
            value = getattr(self, name)
            if not value > 0:
                raise PlannerConfigurationError(name, value, "Value must be positive")
        for name in ("min_passes", "min_points_per_pass"):
            value = getattr(self, name)
            if not isinstance(value, int) or value < 1:
                raise PlannerConfigurationError(name, value, "Value must be an integer of at least 1")
        if not 0 <= self.inset < 0.5:
            raise PlannerConfigurationError("inset", self.inset, "Inset must lie in [0, 0.5)")
        if self.parallelogram_tolerance is not None and self.parallelogram_tolerance < 0:
            raise PlannerConfigurationError(
                "parallelogram_tolerance", self.parallelogram_tolerance, "Value must not be negative"
            )

@dataclass(frozen=True)
class CoveragePath:
    """
    An ordered boustrophedon waypoint list plus the grid it was built from.
    Waypoint = origin + sweep_axis * t_sweep + step_axis * t_step, with both
    axes given as (dlon, dlat) edge vectors in degrees.
    """
    waypoints: Tuple[GeoPoint, ...]
    num_passes: int
    points_per_pass: int
    sweep_length_m: float
    step_length_m: float
    origin: GeoPoint
    sweep_axis: Tuple[float, float]
    step_axis: Tuple[float, float]

    def __len__(self) -> int:
        return len(self.waypoints)

    def __iter__(self) -> Iterator[GeoPoint]:
        return iter(self.waypoints)

    def __getitem__(self, index):
        return self.waypoints[index]

    def coordinates(self) -> List[Tuple[float, float]]:
        return [p.as_tuple() for p in self.waypoints]

@dataclass(frozen=True)
class Mission:
    """A historical planting run; seeds from it share a color and date."""
    id: int
    name: str
    date: str
    color: str
    seed_count: int

@dataclass(frozen=True)
class SeedPoint:
    """A single planted seed or shoot."""
    position: GeoPoint
    mission: int
    mission_name: str
    depth: float
    date: str

@dataclass
class Sector:
    """A bounded restoration plot inside a study site."""
    id: str
    name: str
    center: GeoPoint
    boundary: BoundaryRing
    status: str = "planned"   # "planned" | "executed"
    target_count: Optional[int] = None
    color: str = "#34d399"

@dataclass
class SectorPlan:
    """Everything generated for one sector: its path and its seed layout."""
    sector: Sector
    path: CoveragePath
    missions: List[Mission]
    seeds: List[SeedPoint] = field(default_factory=list)

    @property
    def total_seeds(self) -> int:
        return len(self.seeds)
