"""
Visibility projector - which walls and how much of the exit each pulse lights

A wall segment is lit while its midpoint sits inside a pulse's ring band:
|distance(midpoint, pulse centre) - pulse radius| < ring thickness.
The scan is O(segments x pulses) per frame. That is fine for the stock
20x15 grid (about 800 segments); bigger grids would want a spatial index.
"""

import math
import numpy as np
from numba import njit

from maze.maze_core import wall_segments
from utils.constants import EXIT_ALPHA_SCALE


@njit(cache=True)
def ring_band_alpha(px, py, cx, cy, radii, alphas, thickness, baseline, scale):
    """
    Max pulse alpha per point over pulses whose ring band contains the point.

    Args:
        px, py: float64 arrays of point coordinates
        cx, cy, radii, alphas: float64 arrays describing the pulses
        thickness: ring half-width
        baseline: value for points no ring touches
        scale: multiplier applied to a pulse alpha before comparing

    Returns:
        float64 array, one alpha per point
    """
    n = px.shape[0]
    m = cx.shape[0]
    out = np.empty(n, dtype=np.float64)

    for i in range(n):
        best = baseline
        for j in range(m):
            dx = px[i] - cx[j]
            dy = py[i] - cy[j]
            dist = math.sqrt(dx * dx + dy * dy)
            if abs(dist - radii[j]) < thickness:
                a = alphas[j] * scale
                if a > best:
                    best = a
        out[i] = best

    return out


def pulse_arrays(pulses):
    """Split pulses into the float64 column arrays the kernel expects"""
    count = len(pulses)
    cx = np.empty(count, dtype=np.float64)
    cy = np.empty(count, dtype=np.float64)
    radii = np.empty(count, dtype=np.float64)
    alphas = np.empty(count, dtype=np.float64)
    for i, pulse in enumerate(pulses):
        cx[i] = pulse.x
        cy[i] = pulse.y
        radii[i] = pulse.radius
        alphas[i] = pulse.alpha
    return cx, cy, radii, alphas


class VisibilityProjector:
    """
    Computes illuminated wall segments and exit glow for one frame
    """
    def __init__(self, cell_size, wall_ring_thickness, exit_ring_thickness, exit_baseline_alpha):
        self.cell_size = cell_size
        self.wall_ring_thickness = float(wall_ring_thickness)
        self.exit_ring_thickness = float(exit_ring_thickness)
        self.exit_baseline_alpha = float(exit_baseline_alpha)

        # Segment cache, rebuilt only when a new grid is projected
        self._grid = None
        self._segments = np.empty((0, 4), dtype=np.float64)
        self._mid_x = np.empty(0, dtype=np.float64)
        self._mid_y = np.empty(0, dtype=np.float64)

    @classmethod
    def from_config(cls, config):
        return cls(
            config.cell_size,
            config.wall_ring_thickness,
            config.exit_ring_thickness,
            config.exit_baseline_alpha,
        )

    def _prepare(self, grid):
        if self._grid is grid:
            return
        segments = wall_segments(grid, self.cell_size)
        self._segments = np.array(segments, dtype=np.float64).reshape(-1, 4)
        self._mid_x = (self._segments[:, 0] + self._segments[:, 2]) / 2.0
        self._mid_y = (self._segments[:, 1] + self._segments[:, 3]) / 2.0
        self._grid = grid

    @property
    def segment_count(self):
        return self._segments.shape[0]

    def wall_alphas(self, grid, pulses):
        """Alpha for every wall segment of the grid (0.0 = not lit)"""
        self._prepare(grid)
        cx, cy, radii, alphas = pulse_arrays(pulses)
        return ring_band_alpha(
            self._mid_x, self._mid_y, cx, cy, radii, alphas,
            self.wall_ring_thickness, 0.0, 1.0
        )

    def exit_alpha(self, exit_x, exit_y, pulses):
        """Exit glow alpha; never below the baseline so the exit stays faintly visible"""
        cx, cy, radii, alphas = pulse_arrays(pulses)
        point_x = np.array([exit_x], dtype=np.float64)
        point_y = np.array([exit_y], dtype=np.float64)
        result = ring_band_alpha(
            point_x, point_y, cx, cy, radii, alphas,
            self.exit_ring_thickness, self.exit_baseline_alpha, EXIT_ALPHA_SCALE
        )
        return float(result[0])

    def project(self, grid, pulses, exit_pos):
        """
        Illumination for the next paint

        Args:
            grid: MazeGrid
            pulses: Sequence of Pulse
            exit_pos: (x, y) of the exit

        Returns:
            {'walls': [(x1, y1, x2, y2, alpha), ...] lit segments only,
             'exit_alpha': float}
        """
        pulses = list(pulses)
        alphas = self.wall_alphas(grid, pulses)
        lit = np.nonzero(alphas > 0.0)[0]

        walls = []
        for i in lit:
            x1, y1, x2, y2 = self._segments[i]
            walls.append((float(x1), float(y1), float(x2), float(y2), float(alphas[i])))

        return {
            'walls': walls,
            'exit_alpha': self.exit_alpha(exit_pos[0], exit_pos[1], pulses),
        }
