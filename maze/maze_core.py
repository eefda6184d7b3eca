"""
Core maze functions - grid model, passages, flood fill and wall segments
"""

from collections import deque
from utils.constants import TOP, RIGHT, BOTTOM, LEFT, ALL_WALLS, DIRS, DIR_TO_BITS


class Cell:
    """
    Read-only view of one grid cell with boolean wall flags
    """
    __slots__ = ('col', 'row', 'top', 'right', 'bottom', 'left')

    def __init__(self, col, row, mask):
        self.col = col
        self.row = row
        self.top = bool(mask & TOP)
        self.right = bool(mask & RIGHT)
        self.bottom = bool(mask & BOTTOM)
        self.left = bool(mask & LEFT)

    @property
    def walls(self):
        return {'top': self.top, 'right': self.right, 'bottom': self.bottom, 'left': self.left}

    def __repr__(self):
        return f"Cell({self.col}, {self.row}, walls={self.walls})"


class MazeGrid:
    """
    Maze grid with wall-based representation
    Each cell has 4 possible walls: TOP, RIGHT, BOTTOM, LEFT
    """
    def __init__(self, cols, rows, walls=None):
        if cols < 1 or rows < 1:
            raise ValueError(f"maze needs at least one cell, got {cols}x{rows}")
        self.cols = cols
        self.rows = rows
        if walls is None:
            # Initialize all walls closed
            walls = [ALL_WALLS for _ in range(cols * rows)]
        elif len(walls) != cols * rows:
            raise ValueError(f"expected {cols * rows} wall masks, got {len(walls)}")
        self.walls = walls

    def idx(self, x, y):
        """Convert 2D coordinates to 1D index"""
        return y * self.cols + x

    def in_bounds(self, x, y):
        """Check if coordinates are within grid bounds"""
        return 0 <= x < self.cols and 0 <= y < self.rows

    def cell(self, x, y):
        """Get a Cell view for (x, y)"""
        return Cell(x, y, self.walls[self.idx(x, y)])

    def __len__(self):
        return self.cols * self.rows

    def __eq__(self, other):
        if not isinstance(other, MazeGrid):
            return NotImplemented
        return (self.cols, self.rows, self.walls) == (other.cols, other.rows, other.walls)

    def __repr__(self):
        return f"MazeGrid({self.cols}x{self.rows})"


def carve_passage(walls, cols, ax, ay, bx, by):
    """Carve a passage between two adjacent cells"""
    bits = DIR_TO_BITS.get((bx - ax, by - ay))
    if bits is None:
        return
    wall_bit, opp_bit = bits
    walls[ay * cols + ax] &= ~wall_bit
    walls[by * cols + bx] &= ~opp_bit


def is_open_between(walls, cols, ax, ay, bx, by):
    """Check if passage is open between two adjacent cells"""
    bits = DIR_TO_BITS.get((bx - ax, by - ay))
    if bits is None:
        return False
    wall_bit, _ = bits
    return (walls[ay * cols + ax] & wall_bit) == 0


def neighbors_open(grid, x, y):
    """Get list of neighbour cells reachable through an open wall"""
    res = []
    w = grid.walls[grid.idx(x, y)]
    for dx, dy, wall_bit, _ in DIRS:
        nx, ny = x + dx, y + dy
        if grid.in_bounds(nx, ny) and (w & wall_bit) == 0:
            res.append((nx, ny))
    return res


def count_open_passages(grid):
    """
    Count removed wall pairs.
    Only right and bottom sides are counted so each shared wall counts once;
    border walls are never carved.
    """
    opened = 0
    for y in range(grid.rows):
        for x in range(grid.cols):
            w = grid.walls[grid.idx(x, y)]
            if x < grid.cols - 1 and (w & RIGHT) == 0:
                opened += 1
            if y < grid.rows - 1 and (w & BOTTOM) == 0:
                opened += 1
    return opened


def flood_fill(grid, start=(0, 0)):
    """
    Visit every cell reachable from start through open walls.

    Returns:
        dict mapping cell -> number of times it was reached (1 in a tree walk,
        more when the passage graph contains a cycle)
    """
    seen = {start: 1}
    q = deque([(start, None)])

    while q:
        (x, y), parent = q.popleft()
        for n in neighbors_open(grid, x, y):
            if n == parent:
                continue
            if n in seen:
                seen[n] += 1
                continue
            seen[n] = 1
            q.append((n, (x, y)))
    return seen


# ========== PATHFINDING ==========

def reconstruct_path(prev, goal):
    """Reconstruct path from prev dictionary"""
    path = []
    cur = goal
    while cur is not None:
        path.append(cur)
        cur = prev[cur]
    path.reverse()
    return path


def bfs_shortest_path(grid, start, goal):
    """BFS shortest path finder"""
    if start == goal:
        return [start]

    q = deque([start])
    prev = {start: None}

    while q:
        x, y = q.popleft()
        for n in neighbors_open(grid, x, y):
            if n not in prev:
                prev[n] = (x, y)
                if n == goal:
                    return reconstruct_path(prev, goal)
                q.append(n)
    return []


# ========== WALL SEGMENTS ==========

def wall_segments(grid, cell_size):
    """
    List every present wall side as a pixel segment (x1, y1, x2, y2).
    Each cell contributes its own sides, so a wall shared by two cells
    appears once per side.
    """
    segments = []
    for y in range(grid.rows):
        for x in range(grid.cols):
            w = grid.walls[grid.idx(x, y)]
            x0 = x * cell_size
            y0 = y * cell_size
            x1 = x0 + cell_size
            y1 = y0 + cell_size

            if w & TOP:
                segments.append((x0, y0, x1, y0))
            if w & RIGHT:
                segments.append((x1, y0, x1, y1))
            if w & BOTTOM:
                segments.append((x0, y1, x1, y1))
            if w & LEFT:
                segments.append((x0, y0, x0, y1))
    return segments
