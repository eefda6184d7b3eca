"""
Helper utility functions for Echo Maze
"""

import math


def clamp(value, min_value, max_value):
    """Clamp a value between min and max"""
    return max(min_value, min(value, max_value))


def distance(x1, y1, x2, y2):
    """Calculate Euclidean distance between two points"""
    return math.sqrt((x2 - x1) ** 2 + (y2 - y1) ** 2)


def cell_center(col, row, cell_size):
    """Pixel centre of a grid cell"""
    return col * cell_size + cell_size / 2, row * cell_size + cell_size / 2


def rgba(color, alpha):
    """Attach a 0-1 alpha to an RGB color as a 0-255 channel"""
    a = int(clamp(alpha, 0.0, 1.0) * 255)
    return (color[0], color[1], color[2], a)
