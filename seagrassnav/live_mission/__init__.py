"""
live_mission - Simulated robot telemetry and seed drops along a coverage path
"""

# Local Imports
from .core import LiveMissionSimulator
from .feed import LiveFeed
from .config import LiveMissionConfig
from .data_models import (
    ConnectionStatus, LiveFeedSnapshot, MissionState, MissionStats,
    PathPose, SeedDropEvent, TelemetryFrame
)
from .exceptions import (
    LiveMissionError, SimulationNotStartedError, SimulationDisposedError,
    EmptyPathError, ConfigurationError
)

__all__ = [
    'LiveMissionSimulator',
    'LiveFeed',
    'LiveMissionConfig',
    'ConnectionStatus',
    'LiveFeedSnapshot',
    'MissionState',
    'MissionStats',
    'PathPose',
    'SeedDropEvent',
    'TelemetryFrame',
    'LiveMissionError',
    'SimulationNotStartedError',
    'SimulationDisposedError',
    'EmptyPathError',
    'ConfigurationError'
]
