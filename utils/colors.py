"""
Color palette for Echo Maze
"""

# Background colors
COLOR_BG = (0, 0, 0)              # Canvas background

# Maze colors
COLOR_WALL_LIT = (200, 200, 200)  # Illuminated wall stroke

# Entity colors
COLOR_PLAYER = (0, 255, 255)      # Player core and glow
COLOR_EXIT = (0, 255, 136)        # Exit glow
COLOR_PULSE = (0, 255, 136)       # Pulse outer ring
COLOR_PULSE_INNER = (0, 255, 200)  # Pulse inner ring

# UI colors
COLOR_TEXT_DIM = (150, 150, 150)  # Dimmed text
COLOR_GAME_OVER = (255, 100, 100)
COLOR_LEVEL_COMPLETE = (100, 255, 150)
COLOR_MESSAGE_BG = (30, 30, 40)
