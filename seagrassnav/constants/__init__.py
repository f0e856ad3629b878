from .projection import ProjectionConstants

__all__ = ["ProjectionConstants"]
