from .sensors import SensorModel

__all__ = ["SensorModel"]
