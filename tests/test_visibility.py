import random
import unittest

import numpy as np

from entities.pulse import Pulse
from game.visibility import VisibilityProjector, ring_band_alpha, pulse_arrays
from maze.generator import generate
from maze.maze_core import MazeGrid, wall_segments, carve_passage


def make_pulse(x, y, radius, alpha):
    pulse = Pulse(x, y)
    pulse.radius = radius
    pulse.alpha = alpha
    return pulse


class TestProjector(unittest.TestCase):

    def setUp(self):
        self.projector = VisibilityProjector(40, 20, 30, 0.1)
        self.grid = MazeGrid(1, 1)

    def test_no_pulses_nothing_lit(self):
        result = self.projector.project(self.grid, [], (20, 20))
        self.assertEqual(result['walls'], [])
        self.assertAlmostEqual(result['exit_alpha'], 0.1)

    def test_ring_over_midpoints_lights_walls(self):
        result = self.projector.project(self.grid, [make_pulse(20, 20, 20, 0.92)], (20, 20))
        self.assertEqual(len(result['walls']), 4)
        for wall in result['walls']:
            self.assertAlmostEqual(wall[4], 0.92)

    def test_ring_far_from_midpoints(self):
        result = self.projector.project(self.grid, [make_pulse(20, 20, 100, 0.6)], (20, 20))
        self.assertEqual(result['walls'], [])

    def test_band_edge_is_exclusive(self):
        # Midpoint (20, 0) is 20px from the centre; |20 - 40| == 20 is outside the band
        alphas = self.projector.wall_alphas(self.grid, [make_pulse(20, 20, 40, 0.5)])
        self.assertTrue(all(a == 0.0 for a in alphas))
        alphas = self.projector.wall_alphas(self.grid, [make_pulse(20, 20, 39.5, 0.5)])
        self.assertTrue(all(a == 0.5 for a in alphas))

    def test_max_alpha_wins(self):
        pulses = [make_pulse(20, 20, 18, 0.3), make_pulse(20, 20, 22, 0.7), make_pulse(20, 20, 200, 0.99)]
        result = self.projector.project(self.grid, pulses, (500, 500))
        self.assertEqual(len(result['walls']), 4)
        self.assertTrue(all(abs(w[4] - 0.7) < 1e-9 for w in result['walls']))

    def test_zero_alpha_pulse_lights_nothing(self):
        result = self.projector.project(self.grid, [make_pulse(20, 20, 20, 0.0)], (20, 20))
        self.assertEqual(result['walls'], [])

    def test_open_walls_are_not_segments(self):
        grid = MazeGrid(2, 1)
        carve_passage(grid.walls, grid.cols, 0, 0, 1, 0)
        result = self.projector.project(grid, [make_pulse(40, 20, 20, 1.0)], (60, 20))
        lit = [w[:4] for w in result['walls']]
        self.assertNotIn((40.0, 0.0, 40.0, 40.0), lit)
        self.assertIn((0.0, 0.0, 40.0, 0.0), lit)


class TestExitGlow(unittest.TestCase):

    def setUp(self):
        self.projector = VisibilityProjector(40, 20, 30, 0.1)

    def test_wider_band_and_scale(self):
        # 25px off the ring: outside the wall band, inside the exit band
        alpha = self.projector.exit_alpha(100, 100, [make_pulse(100, 100, 25, 0.5)])
        self.assertAlmostEqual(alpha, 0.45)

    def test_baseline_floor(self):
        alpha = self.projector.exit_alpha(100, 100, [make_pulse(100, 100, 10, 0.05)])
        self.assertAlmostEqual(alpha, 0.1)

    def test_outside_band(self):
        alpha = self.projector.exit_alpha(100, 100, [make_pulse(100, 100, 30, 1.0)])
        self.assertAlmostEqual(alpha, 0.1)


class TestSegments(unittest.TestCase):

    def test_segment_count_of_perfect_maze(self):
        """4 sides per cell minus 2 per opened passage."""
        grid = generate(20, 15, random.Random(2))
        self.assertEqual(len(wall_segments(grid, 40)), 4 * 300 - 2 * 299)

        projector = VisibilityProjector(40, 20, 30, 0.1)
        projector.project(grid, [], (780, 580))
        self.assertEqual(projector.segment_count, 602)

    def test_cache_follows_grid(self):
        projector = VisibilityProjector(40, 20, 30, 0.1)
        projector.project(MazeGrid(1, 1), [], (20, 20))
        self.assertEqual(projector.segment_count, 4)
        projector.project(MazeGrid(2, 1), [], (20, 20))
        self.assertEqual(projector.segment_count, 8)


class TestKernel(unittest.TestCase):

    def test_baseline_without_pulses(self):
        px = np.array([0.0, 10.0])
        py = np.array([0.0, 10.0])
        cx, cy, radii, alphas = pulse_arrays([])
        out = ring_band_alpha(px, py, cx, cy, radii, alphas, 20.0, 0.25, 1.0)
        self.assertEqual(list(out), [0.25, 0.25])


if __name__ == '__main__':
    unittest.main()
