"""
Collision detection against maze walls and the exit
"""

import math
from utils.constants import TOP, RIGHT, BOTTOM, LEFT
from utils.helpers import distance


class CollisionHandler:
    """
    Handles wall and exit checks for a pixel-space player

    Walls are tested one by one against position +/- radius. This is a
    margin test, not circle-segment intersection: near a corner with an
    open side the player can graze past through the margin overlap.
    """
    def __init__(self, grid, cell_size, player_radius):
        """
        Args:
            grid: MazeGrid
            cell_size: Cell edge length in pixels
            player_radius: Collision margin in pixels
        """
        self.grid = grid
        self.cell_size = cell_size
        self.player_radius = player_radius
        self.last_collision = None

    def locate_cell(self, x, y):
        """Cell containing a pixel position (may be out of bounds)"""
        return math.floor(x / self.cell_size), math.floor(y / self.cell_size)

    def check_wall_collision(self, x, y):
        """
        Check whether a player centred at (x, y) touches a wall

        Returns:
            True on collision; any position outside the grid collides
        """
        if not (math.isfinite(x) and math.isfinite(y)):
            self.last_collision = 'out_of_bounds'
            return True

        cell_x, cell_y = self.locate_cell(x, y)

        if not self.grid.in_bounds(cell_x, cell_y):
            self.last_collision = 'out_of_bounds'
            return True

        w = self.grid.walls[self.grid.idx(cell_x, cell_y)]
        left_edge = cell_x * self.cell_size
        top_edge = cell_y * self.cell_size
        margin = self.player_radius

        hit = None
        if (w & TOP) and y - margin < top_edge:
            hit = 'top'
        elif (w & BOTTOM) and y + margin > top_edge + self.cell_size:
            hit = 'bottom'
        elif (w & LEFT) and x - margin < left_edge:
            hit = 'left'
        elif (w & RIGHT) and x + margin > left_edge + self.cell_size:
            hit = 'right'

        self.last_collision = hit
        return hit is not None

    def check_exit_reached(self, player_x, player_y, exit_x, exit_y):
        """Exit is reached when the centres are closer than half a cell"""
        return distance(player_x, player_y, exit_x, exit_y) < self.cell_size / 2
