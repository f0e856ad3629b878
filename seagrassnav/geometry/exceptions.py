# seagrassnav/geometry/exceptions.py

class GeometryError(Exception):
    """Base exception for local projection and boundary geometry errors."""
    pass

class InvalidDimensionError(GeometryError):
    """Raised when a rectangle is requested with a non-positive length or width."""
    def __init__(self, name: str, value: float, message: str = "Rectangle dimension must be positive"):
        self.name = name
        self.value = value
        super().__init__(f"{message}: {name}={value}")

class InvalidBoundaryError(GeometryError):
    """Raised when a boundary ring cannot be used as a coverage sector."""
    def __init__(self, message: str = "Invalid boundary", reason: str = None):
        self.reason = reason
        super().__init__(f"{message} [Reason: {reason}]" if reason else message)
