# seagrassnav/constants/projection.py

class ProjectionConstants:
    """Shared constants for the local flat-earth projection."""

    # Meters per degree of latitude (and of longitude at the equator)
    METERS_PER_DEG_LAT = 111_320.0

    # cos(lat) is unusable this close to the poles
    MAX_ABS_LATITUDE = 89.9

    # Allowed distance of a ring's far corner from the parallelogram
    # completion, as a fraction of the shorter edge
    PARALLELOGRAM_TOLERANCE = 0.25
