from .mission_map import MissionMapVisualizer

__all__ = ["MissionMapVisualizer"]
