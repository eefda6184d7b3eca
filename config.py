"""
Game configuration for Echo Maze
All tunables are fixed at startup and shared through one GameConfig object
"""

from utils.constants import (
    FPS, WALL_RING_THICKNESS, EXIT_RING_THICKNESS, EXIT_BASELINE_ALPHA
)

GAME_TITLE = "Echo Maze"
GAME_VERSION = "1.0.0"


class GameConfig:
    """Configuration for a game session"""
    def __init__(self, **kwargs):
        # Canvas and grid
        self.canvas_width = kwargs.get('canvas_width', 800)
        self.canvas_height = kwargs.get('canvas_height', 600)
        self.cell_size = kwargs.get('cell_size', 40)

        # Player
        self.player_radius = kwargs.get('player_radius', 8)
        self.move_speed = kwargs.get('move_speed', 2)

        # Pulses
        self.pulse_speed = kwargs.get('pulse_speed', 3)
        self.pulse_max_radius = kwargs.get('pulse_max_radius', 250)
        self.pulse_width = kwargs.get('pulse_width', 2)

        # Visibility
        self.wall_ring_thickness = kwargs.get('wall_ring_thickness', WALL_RING_THICKNESS)
        self.exit_ring_thickness = kwargs.get('exit_ring_thickness', EXIT_RING_THICKNESS)
        self.exit_baseline_alpha = kwargs.get('exit_baseline_alpha', EXIT_BASELINE_ALPHA)

        # Loop
        self.fps = kwargs.get('fps', FPS)

        self._validate()

    def _validate(self):
        for name in ('canvas_width', 'canvas_height', 'cell_size',
                     'pulse_speed', 'pulse_max_radius', 'fps'):
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be positive, got {getattr(self, name)}")
        if self.cols < 1 or self.rows < 1:
            raise ValueError(
                f"canvas {self.canvas_width}x{self.canvas_height} holds no "
                f"{self.cell_size}px cell"
            )

    @property
    def cols(self):
        return self.canvas_width // self.cell_size

    @property
    def rows(self):
        return self.canvas_height // self.cell_size

    def __repr__(self):
        return (f"GameConfig({self.canvas_width}x{self.canvas_height}, "
                f"cell={self.cell_size}, grid={self.cols}x{self.rows})")


DEFAULT_CONFIG = GameConfig()
