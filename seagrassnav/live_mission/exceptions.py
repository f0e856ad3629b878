# seagrassnav/live_mission/exceptions.py

class LiveMissionError(Exception):
    """Base exception for live mission simulation errors."""
    pass

class SimulationNotStartedError(LiveMissionError):
    """Raised when telemetry is requested before start() was called."""
    def __init__(self, message: str = "Simulation has not been started"):
        super().__init__(message)

class SimulationDisposedError(LiveMissionError):
    """Raised when a disposed simulator is used again."""
    def __init__(self, message: str = "Simulation has been disposed"):
        super().__init__(message)

class EmptyPathError(LiveMissionError):
    """Raised when a simulator is built over a path with no waypoints."""
    def __init__(self, message: str = "Cannot simulate a mission over an empty path"):
        super().__init__(message)

class ConfigurationError(LiveMissionError):
    """Invalid simulation configuration detected"""
    def __init__(self, config_name: str, value, message: str = "Configuration error"):
        self.config_name = config_name
        self.value = value
        super().__init__(f"{message}: {config_name}={value}")
