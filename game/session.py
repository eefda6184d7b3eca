"""
Game session - owns the maze, player, exit, pulses and state for one game
and advances them one tick at a time
"""

import random

from config import DEFAULT_CONFIG
from maze.generator import generate
from entities.player import Player
from entities.pulse import PulseSystem
from game.collision import CollisionHandler
from game.game_state import GameState, GameStateManager
from game.input_state import InputState, is_pulse_key, is_restart_key
from game.visibility import VisibilityProjector
from utils.helpers import cell_center


class GameSession:
    """
    One playable session. Independent sessions share nothing, so several
    can run side by side (tests do this).
    """
    def __init__(self, config=None, rng=None, seed=None):
        """
        Args:
            config: GameConfig; DEFAULT_CONFIG when None
            rng: random.Random used for every maze this session builds
            seed: Seed for a new random.Random when rng is not given
        """
        self.config = config or DEFAULT_CONFIG
        self.rng = rng if rng is not None else random.Random(seed)

        self.state_manager = GameStateManager()
        self.input = InputState()
        self.pulses = PulseSystem(self.config.pulse_speed, self.config.pulse_max_radius)
        self.projector = VisibilityProjector.from_config(self.config)

        self.grid = None
        self.collision = None
        self.player = None
        self.exit_x = 0.0
        self.exit_y = 0.0
        self.ticks = 0
        self.restarts = 0

        self.restart()

    # ========== ACTIONS ==========

    def restart(self):
        """Start over: new maze, player at the first cell, one initial pulse"""
        cfg = self.config
        self.grid = generate(cfg.cols, cfg.rows, self.rng)
        self.collision = CollisionHandler(self.grid, cfg.cell_size, cfg.player_radius)

        start_x, start_y = cell_center(0, 0, cfg.cell_size)
        if self.player is None:
            self.player = Player(start_x, start_y, cfg.player_radius)
        else:
            self.player.reset(start_x, start_y)
            self.restarts += 1

        self.exit_x, self.exit_y = cell_center(cfg.cols - 1, cfg.rows - 1, cfg.cell_size)

        self.pulses.clear()
        self.state_manager.reset()
        self.ticks = 0

        # Initial pulse so the player can see
        self.pulses.create_pulse(self.player.x, self.player.y)

    def emit_pulse(self):
        """
        Emit a pulse at the player's position

        Returns:
            True if a pulse was created (only while running)
        """
        if not self.state_manager.is_running():
            return False
        self.pulses.create_pulse(self.player.x, self.player.y)
        return True

    def set_key_state(self, key, pressed):
        """Record a key event for the movement read on the next tick"""
        self.input.set_key_state(key, pressed)

    def handle_key_down(self, key):
        """
        Key-down with action dispatch: records the key, then emits a pulse
        or restarts when the key is bound to one of those
        """
        self.set_key_state(key, True)
        if is_pulse_key(key):
            self.emit_pulse()
        elif is_restart_key(key):
            self.restart()

    def handle_key_up(self, key):
        self.set_key_state(key, False)

    # ========== TICK ==========

    def tick(self):
        """
        Advance one step

        Returns:
            Outcome string: 'none', 'gameOver' or 'levelComplete'
        """
        if not self.state_manager.is_running():
            return self.outcome

        self.ticks += 1
        dx, dy = self.input.movement()
        new_x, new_y = self.player.candidate_position(dx, dy, self.config.move_speed)

        if self.collision.check_wall_collision(new_x, new_y):
            self.state_manager.transition_to(GameState.GAME_OVER)
            return self.outcome

        self.player.move_to(new_x, new_y)

        if self.collision.check_exit_reached(self.player.x, self.player.y, self.exit_x, self.exit_y):
            self.state_manager.transition_to(GameState.LEVEL_COMPLETE)
            return self.outcome

        self.pulses.update()
        return self.outcome

    # ========== STATE ==========

    @property
    def state(self):
        return self.state_manager.current_state

    @property
    def outcome(self):
        return self.state_manager.outcome

    @property
    def message(self):
        return self.state_manager.message

    @property
    def is_game_over(self):
        return self.state_manager.is_state(GameState.GAME_OVER)

    @property
    def is_level_complete(self):
        return self.state_manager.is_state(GameState.LEVEL_COMPLETE)

    @property
    def exit_pos(self):
        return (self.exit_x, self.exit_y)

    def status_line(self):
        """
        Console summary of the session: outcome, ticks, moves and, after a
        game over, which wall was hit
        """
        if self.state_manager.is_running():
            return f"Running: {self.ticks} ticks, {self.player.moves} moves, {len(self.pulses)} pulses"
        line = f"{self.message} ({self.ticks} ticks, {self.player.moves} moves)"
        if self.is_game_over and self.collision.last_collision:
            line += f" [hit: {self.collision.last_collision}]"
        return line

    def snapshot(self):
        """
        Everything a renderer needs for one frame, as plain data

        Returns:
            {'walls': [(x1, y1, x2, y2, alpha), ...],
             'exit': {'x', 'y', 'alpha'},
             'pulses': [{'x', 'y', 'radius', 'alpha'}, ...],
             'player': {'x', 'y', 'radius'},
             'outcome', 'message', 'state'}
        """
        lighting = self.projector.project(self.grid, self.pulses, self.exit_pos)
        return {
            'walls': lighting['walls'],
            'exit': {'x': self.exit_x, 'y': self.exit_y, 'alpha': lighting['exit_alpha']},
            'pulses': [p.to_dict() for p in self.pulses],
            'player': {'x': self.player.x, 'y': self.player.y, 'radius': self.player.radius},
            'outcome': self.outcome,
            'message': self.message,
            'state': self.state.name,
        }

    def __repr__(self):
        return (f"GameSession(grid={self.grid.cols}x{self.grid.rows}, "
                f"state={self.state.name}, pulses={len(self.pulses)})")
