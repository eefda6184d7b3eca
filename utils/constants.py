"""
Global constants for Echo Maze
"""

# Screen settings
FPS = 60
WALL_THICK = 3

# Wall bit flags (for maze generation)
TOP = 1
RIGHT = 2
BOTTOM = 4
LEFT = 8

ALL_WALLS = TOP | RIGHT | BOTTOM | LEFT

# Direction vectors with wall bits, in neighbour scan order
DIRS = [
    (0, -1, TOP, BOTTOM),    # up
    (1, 0, RIGHT, LEFT),     # right
    (0, 1, BOTTOM, TOP),     # down
    (-1, 0, LEFT, RIGHT),    # left
]

# Direction to bit mapping
DIR_TO_BITS = {
    (0, -1): (TOP, BOTTOM),
    (1, 0): (RIGHT, LEFT),
    (0, 1): (BOTTOM, TOP),
    (-1, 0): (LEFT, RIGHT),
}

# Key families (key identifiers as delivered by the input source)
KEYS_UP = ('ArrowUp', 'w', 'W')
KEYS_DOWN = ('ArrowDown', 's', 'S')
KEYS_LEFT = ('ArrowLeft', 'a', 'A')
KEYS_RIGHT = ('ArrowRight', 'd', 'D')
KEYS_PULSE = (' ', 'Space', 'space')
KEYS_RESTART = ('r', 'R')

# Outcomes exposed to the message surface
OUTCOME_NONE = 'none'
OUTCOME_GAME_OVER = 'gameOver'
OUTCOME_LEVEL_COMPLETE = 'levelComplete'

MESSAGE_GAME_OVER = "GAME OVER - Hit a wall! Press R to restart"
MESSAGE_LEVEL_COMPLETE = "LEVEL COMPLETE! Press R to play again"

# Visibility
WALL_RING_THICKNESS = 20
EXIT_RING_THICKNESS = 30
EXIT_BASELINE_ALPHA = 0.1
EXIT_ALPHA_SCALE = 0.9
