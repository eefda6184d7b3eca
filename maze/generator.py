"""
Maze generation - randomized depth-first backtracker
"""

import random
from utils.constants import ALL_WALLS, DIRS
from maze.maze_core import MazeGrid


def idx(cols, x, y):
    """Helper to get 1D index"""
    return y * cols + x


def in_bounds(cols, rows, x, y):
    """Check if coordinates are in bounds"""
    return 0 <= x < cols and 0 <= y < rows


# ========== GENERATOR: DFS BACKTRACKER ==========

def gen_dfs_backtracker(cols, rows, rng=None):
    """
    Depth-First Search with backtracking - step generator

    Yields one state dict per carve or backtrack step:
    {"walls", "visited", "current", "carved", "done"}

    Args:
        cols, rows: Grid dimensions
        rng: Object with a choice() method; a fresh random.Random when None
    """
    if cols < 1 or rows < 1:
        raise ValueError(f"maze needs at least one cell, got {cols}x{rows}")
    if rng is None:
        rng = random.Random()

    walls = [ALL_WALLS for _ in range(cols * rows)]
    visited = [False] * (cols * rows)

    current = (0, 0)
    visited[idx(cols, 0, 0)] = True
    stack = []

    yield {"walls": walls, "visited": visited, "current": current, "carved": None, "done": False}

    while True:
        cx, cy = current
        neighbors = []

        for dx, dy, wall_bit, opp_bit in DIRS:
            nx, ny = cx + dx, cy + dy
            if in_bounds(cols, rows, nx, ny) and not visited[idx(cols, nx, ny)]:
                neighbors.append((nx, ny, wall_bit, opp_bit))

        if neighbors:
            nx, ny, wall_bit, opp_bit = rng.choice(neighbors)
            stack.append(current)
            walls[idx(cols, cx, cy)] &= ~wall_bit
            walls[idx(cols, nx, ny)] &= ~opp_bit
            visited[idx(cols, nx, ny)] = True
            current = (nx, ny)

            yield {"walls": walls, "visited": visited, "current": current, "carved": ((cx, cy), (nx, ny)), "done": False}
        elif stack:
            current = stack.pop()
            yield {"walls": walls, "visited": visited, "current": current, "carved": None, "done": False}
        else:
            break

    yield {"walls": walls, "visited": visited, "current": current, "carved": None, "done": True}


def generate(cols, rows, rng=None):
    """Generate a perfect maze instantly and return it as a MazeGrid"""
    last_state = None
    for state in gen_dfs_backtracker(cols, rows, rng):
        last_state = state
    return MazeGrid(cols, rows, last_state["walls"])
