# seagrassnav/coverage_planner/constants.py

class PlannerConstants:
    # Nominal spacing between parallel passes and between waypoints on a pass
    PASS_SPACING_M: float = 30.0
    WAYPOINT_SPACING_M: float = 10.0

    # Floors so even tiny sectors get a usable grid
    MIN_PASSES: int = 2
    MIN_POINTS_PER_PASS: int = 4

    # Fraction of each axis kept clear on both sides
    BOUNDARY_INSET: float = 0.05

class SeedConstants:
    # ~3 m of scatter so planted points don't stack on the path line
    POSITION_JITTER_DEG: float = 0.00005
    MIN_DEPTH_M: float = 1.5
    DEPTH_RANGE_M: float = 22.0
