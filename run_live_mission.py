# run_live_mission.py
import logging
import os
import sys

# Add the project root to the Python path to ensure imports work correctly
project_root = os.path.dirname(os.path.abspath(__file__))
sys.path.insert(0, project_root)

import numpy as np

from seagrassnav.coverage_planner import Sector, plan_sector
from seagrassnav.export import snapshot_to_dict, to_json
from seagrassnav.geometry import GeoPoint, GeometryError, compute_polygon_center, compute_rect_boundary
from seagrassnav.live_mission import LiveFeed, LiveMissionConfig, LiveMissionError
from seagrassnav.visualization import MissionMapVisualizer

def main():
    """
    Plans a rectangular sector off Dale, Wales, then follows a simulated robot
    across it for a handful of polls.
    """
    # --- Configuration ---
    SECTOR_CENTER = GeoPoint(lon=-5.163, lat=51.713)
    SECTOR_ANGLE_DEG = 20.0
    SECTOR_LENGTH_M, SECTOR_WIDTH_M = 440.0, 280.0
    TARGET_SEEDS = 1000
    NUM_POLLS = 5
    RANDOM_SEED = 42
    MAP_OUTPUT = os.path.join(project_root, "live_mission_map.html")

    logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')
    rng = np.random.default_rng(RANDOM_SEED)

    try:
        boundary = compute_rect_boundary(SECTOR_CENTER, SECTOR_ANGLE_DEG, SECTOR_LENGTH_M, SECTOR_WIDTH_M)
        sector = Sector(
            id="dale-west", name="West Plot",
            center=compute_polygon_center(boundary), boundary=boundary,
            status="planned", target_count=TARGET_SEEDS
        )
        plan = plan_sector(sector, rng=rng)
    except GeometryError as e:
        logging.error(f"Could not plan sector: {e}")
        return 1

    print(f"--- Sector '{sector.name}' ---")
    print(f"Path: {plan.path.num_passes + 1} passes, {len(plan.path)} waypoints")
    print(f"Seeds: {plan.total_seeds} across {len(plan.missions)} missions")
    print("-" * 40)

    # Poll faster than real time so the demo finishes quickly
    config = LiveMissionConfig(poll_interval_ms=200)
    feed = LiveFeed(boundary, config=config, rng=rng)

    def report(snapshot):
        stats = snapshot.stats
        frame = snapshot.robot_position
        print(
            f"  > {snapshot.connection_status.value:<10} | "
            f"Heading: {frame.heading:>3}° | Depth: {frame.depth:>4} m | "
            f"Seeds: {stats.total_seeds:>3} | Progress: {stats.path_progress:.2%}"
        )

    try:
        last = feed.run(max_polls=NUM_POLLS, on_snapshot=report)
        MissionMapVisualizer().create_sector_map(
            boundary, plan.path, plan.seeds, last, plan.missions, sector.name
        ).save(MAP_OUTPUT)
        print(to_json(snapshot_to_dict(last)["stats"], indent=2))
    except LiveMissionError as e:
        logging.error(f"Live mission failed: {e}")
        return 1
    finally:
        feed.dispose()

    print(f"\nMap written to {MAP_OUTPUT}")
    return 0

if __name__ == "__main__":
    sys.exit(main())
