"""
coverage_planner - Boustrophedon coverage paths and sector seed layouts.
"""

from .core import CoveragePlanner, generate_path
from .data_models import CoveragePath, PlannerConfig, Mission, SeedPoint, Sector, SectorPlan
from .exceptions import PlannerError, PlannerConfigurationError, InvalidTargetCountError
from .seeds import DEFAULT_MISSIONS, generate_seeds, plan_sector, scale_missions

__all__ = [
    'CoveragePlanner',
    'generate_path',
    'CoveragePath',
    'PlannerConfig',
    'Mission',
    'SeedPoint',
    'Sector',
    'SectorPlan',
    'PlannerError',
    'PlannerConfigurationError',
    'InvalidTargetCountError',
    'DEFAULT_MISSIONS',
    'generate_seeds',
    'plan_sector',
    'scale_missions'
]
