#!/usr/bin/env python3
# seagrassnav/coverage_planner/tests/test_coverage_path.py
import sys
from pathlib import Path

# Add project root to Python path
project_root = Path(__file__).resolve().parent.parent.parent.parent
sys.path.append(str(project_root))

import unittest
from seagrassnav.constants import ProjectionConstants
from seagrassnav.coverage_planner import (
    CoveragePlanner, InvalidTargetCountError, PlannerConfig, PlannerConfigurationError,
    PlannerError, generate_path
)
from seagrassnav.coverage_planner.constants import PlannerConstants
from seagrassnav.geometry import GeoPoint, InvalidBoundaryError, compute_rect_boundary

class TestCoveragePath(unittest.TestCase):
    def setUp(self):
        self.planner = CoveragePlanner()
        # length runs north (p0 -> p3), width runs east (p0 -> p1)
        self.long_sector = compute_rect_boundary(GeoPoint(0.0, 0.0), 0, 1000, 200)

    def assertGridCount(self, path):
        self.assertEqual(len(path), (path.num_passes + 1) * (path.points_per_pass + 1))

    def test_long_sector_grid(self):
        """1000m x 200m sector: 7 passes of 100 intervals"""
        path = self.planner.generate_path(self.long_sector)
        self.assertEqual(path.num_passes, 7)
        self.assertEqual(path.points_per_pass, 100)
        self.assertEqual(len(path), 808)
        self.assertAlmostEqual(path.sweep_length_m, 1000, places=3)
        self.assertAlmostEqual(path.step_length_m, 200, places=3)

    def test_sweeps_along_longer_edge(self):
        """The 1000m edge (p0 -> p3) becomes the sweep axis"""
        path = self.planner.generate_path(self.long_sector)
        p0, p3 = self.long_sector[0], self.long_sector[3]
        self.assertEqual(path.sweep_axis, (p3.lon - p0.lon, p3.lat - p0.lat))

    def test_tie_goes_to_first_edge(self):
        """Equal edges: p0 -> p1 is the sweep axis"""
        square = [(0, 0), (0.001, 0), (0.001, 0.001), (0, 0.001), (0, 0)]
        path = self.planner.generate_path(square)
        self.assertEqual(path.sweep_axis, (0.001, 0.0))
        self.assertEqual(path.step_axis, (0.0, 0.001))

    def test_minimum_grid_for_tiny_sector(self):
        """A 20m square still gets 3 passes of 5 points"""
        tiny = compute_rect_boundary(GeoPoint(10.0, 45.0), 0, 20, 20)
        path = self.planner.generate_path(tiny)
        self.assertEqual(path.num_passes, 2)
        self.assertEqual(path.points_per_pass, 4)
        self.assertEqual(len(path), 15)

    def test_count_matches_grid_for_various_sectors(self):
        for angle, length, width in ((0, 1000, 200), (33, 450, 300), (120, 80, 60), (275, 2500, 900)):
            path = self.planner.generate_path(compute_rect_boundary(GeoPoint(-5.16, 51.71), angle, length, width))
            self.assertGridCount(path)

    def test_zig_zag_parity(self):
        """Even passes run forward, odd passes run backward"""
        path = self.planner.generate_path(compute_rect_boundary(GeoPoint(-5.16, 51.71), 25, 600, 240))
        params = CoveragePlanner.sweep_parameters(path)
        per_pass = path.points_per_pass + 1

        for pass_idx in range(path.num_passes + 1):
            t_sweep = [ts for ts, _ in params[pass_idx * per_pass:(pass_idx + 1) * per_pass]]
            pairs = list(zip(t_sweep, t_sweep[1:]))
            if pass_idx % 2 == 0:
                self.assertTrue(all(b >= a - 1e-12 for a, b in pairs))
            else:
                self.assertTrue(all(b <= a + 1e-12 for a, b in pairs))

    def test_path_stays_inset(self):
        """All parameters stay within [0.05, 0.95]"""
        path = self.planner.generate_path(self.long_sector)
        for ts, tt in CoveragePlanner.sweep_parameters(path):
            self.assertGreaterEqual(ts, 0.05 - 1e-9)
            self.assertLessEqual(ts, 0.95 + 1e-9)
            self.assertGreaterEqual(tt, 0.05 - 1e-9)
            self.assertLessEqual(tt, 0.95 + 1e-9)

    def test_passes_step_across_sector(self):
        """Step parameter is constant within a pass and increases between passes"""
        path = self.planner.generate_path(self.long_sector)
        params = CoveragePlanner.sweep_parameters(path)
        per_pass = path.points_per_pass + 1
        steps = [params[i * per_pass][1] for i in range(path.num_passes + 1)]
        self.assertAlmostEqual(steps[0], 0.05)
        self.assertAlmostEqual(steps[-1], 0.95)
        self.assertTrue(all(b > a for a, b in zip(steps, steps[1:])))

    def test_first_waypoint(self):
        """Path starts 5% in from p0 along both axes"""
        square = [(0, 0), (0.002, 0), (0.002, 0.001), (0, 0.001), (0, 0)]
        path = self.planner.generate_path(square)
        self.assertAlmostEqual(path[0].lon, 0.002 * 0.05)
        self.assertAlmostEqual(path[0].lat, 0.001 * 0.05)

    def test_no_flyback_between_passes(self):
        """Consecutive passes connect at the same end of the sector"""
        path = self.planner.generate_path(self.long_sector)
        params = CoveragePlanner.sweep_parameters(path)
        per_pass = path.points_per_pass + 1
        for pass_idx in range(path.num_passes):
            end_of_pass = params[(pass_idx + 1) * per_pass - 1][0]
            start_of_next = params[(pass_idx + 1) * per_pass][0]
            self.assertAlmostEqual(end_of_pass, start_of_next)

    def test_deterministic(self):
        self.assertEqual(
            self.planner.generate_path(self.long_sector).waypoints,
            generate_path(self.long_sector).waypoints
        )

    def test_densify_towards_target(self):
        """Grid scales by sqrt(target / nominal), rounding up"""
        sector = compute_rect_boundary(GeoPoint(0.0, 0.0), 0, 100, 60)
        nominal = self.planner.generate_path(sector)
        self.assertEqual((nominal.num_passes, nominal.points_per_pass), (2, 10))

        dense = self.planner.generate_path(sector, target_count=300)
        self.assertEqual((dense.num_passes, dense.points_per_pass), (7, 31))
        self.assertEqual(len(dense), 256)
        self.assertGridCount(dense)

    def test_target_below_nominal_is_ignored(self):
        sector = compute_rect_boundary(GeoPoint(0.0, 0.0), 0, 100, 60)
        self.assertEqual(len(self.planner.generate_path(sector, target_count=10)), 33)

    def test_invalid_target_count(self):
        for target in (0, -5, 2.5, True):
            with self.assertRaises(InvalidTargetCountError):
                self.planner.generate_path(self.long_sector, target_count=target)

    def test_custom_spacing(self):
        planner = CoveragePlanner(PlannerConfig(pass_spacing_m=50, waypoint_spacing_m=20))
        path = planner.generate_path(self.long_sector)
        self.assertEqual(path.num_passes, 4)
        self.assertEqual(path.points_per_pass, 50)

    def test_rejects_degenerate_boundary(self):
        with self.assertRaises(InvalidBoundaryError):
            self.planner.generate_path([(0, 0), (0, 0), (0, 0), (0, 0), (0, 0)])

    def test_rejects_non_parallelogram(self):
        with self.assertRaises(InvalidBoundaryError):
            self.planner.generate_path([(0, 0), (0.001, 0), (0.01, 0.01), (0, 0.001), (0, 0)])

class TestPlannerConfig(unittest.TestCase):
    def assertRejected(self, name, **overrides):
        with self.assertRaises(PlannerConfigurationError) as ctx:
            PlannerConfig(**overrides)
        self.assertEqual(ctx.exception.config_name, name)
        self.assertIsInstance(ctx.exception, PlannerError)

    def test_non_positive_spacing(self):
        for value in (0, -30, float('nan')):
            self.assertRejected("pass_spacing_m", pass_spacing_m=value)
            self.assertRejected("waypoint_spacing_m", waypoint_spacing_m=value)

    def test_grid_floors_below_one(self):
        self.assertRejected("min_passes", min_passes=0)
        self.assertRejected("min_points_per_pass", min_points_per_pass=0)
        self.assertRejected("min_passes", min_passes=1.5)

    def test_inset_outside_band(self):
        for value in (-0.01, 0.5, 0.7):
            self.assertRejected("inset", inset=value)

    def test_non_positive_projection_scale(self):
        self.assertRejected("meters_per_deg_lat", meters_per_deg_lat=0)

    def test_single_pass_floor_on_small_sector(self):
        """min_passes=1 on a 20m x 10m sector still plans a grid"""
        planner = CoveragePlanner(PlannerConfig(min_passes=1, min_points_per_pass=1))
        path = planner.generate_path(compute_rect_boundary(GeoPoint(0.0, 0.0), 0, 20, 10))
        self.assertEqual(path.num_passes, 1)
        self.assertEqual(path.points_per_pass, 2)
        self.assertEqual(len(path), 6)

    def test_zero_inset_reaches_edges(self):
        square = [(0, 0), (0.002, 0), (0.002, 0.001), (0, 0.001), (0, 0)]
        path = CoveragePlanner(PlannerConfig(inset=0.0)).generate_path(square)
        self.assertEqual(path[0], GeoPoint(0.0, 0.0))

    def test_single_tolerance_definition(self):
        """The parallelogram tolerance lives with the shared projection constants"""
        self.assertEqual(PlannerConfig().parallelogram_tolerance, ProjectionConstants.PARALLELOGRAM_TOLERANCE)
        self.assertFalse(hasattr(PlannerConstants, "PARALLELOGRAM_TOLERANCE"))

    def test_projection_scale_is_used_for_edge_lengths(self):
        """A doubled meters-per-degree constant doubles both edges"""
        sector = compute_rect_boundary(GeoPoint(0.0, 0.0), 0, 1000, 200)
        path = CoveragePlanner(PlannerConfig(meters_per_deg_lat=2 * 111320.0)).generate_path(sector)
        self.assertAlmostEqual(path.sweep_length_m, 2000, places=3)
        self.assertAlmostEqual(path.step_length_m, 400, places=3)
        self.assertEqual(path.num_passes, 13)
        self.assertEqual(path.points_per_pass, 200)

if __name__ == '__main__':
    unittest.main()
