# seagrassnav/coverage_planner/exceptions.py

class PlannerError(Exception):
    """Base exception for coverage planning errors."""
    pass

class InvalidTargetCountError(PlannerError):
    """Raised when a waypoint or seed target count is not a positive integer."""
    def __init__(self, value, message: str = "Target count must be a positive integer"):
        self.value = value
        super().__init__(f"{message}: {value}")

class PlannerConfigurationError(PlannerError):
    """Invalid planner configuration detected"""
    def __init__(self, config_name: str, value, message: str = "Configuration error"):
        self.config_name = config_name
        self.value = value
        super().__init__(f"{message}: {config_name}={value}")
