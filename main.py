"""
Echo Maze - navigate a dark maze by sound
Emit echo pulses to reveal nearby walls and the exit; touching a wall ends the run
"""

import os
import sys

os.environ.setdefault('SDL_VIDEO_ALLOW_SCREENSAVER', '1')

import pygame

from config import GAME_TITLE, GAME_VERSION, DEFAULT_CONFIG
from game.session import GameSession
from game.renderer import Renderer
from game.ui_manager import UIManager
from game.input_state import key_identifier
from maze.maze_core import bfs_shortest_path
from utils.constants import OUTCOME_NONE


class EchoGame:
    """
    Main game class: window, event pump and the fixed-rate loop
    """
    def __init__(self, config=None, seed=None):
        pygame.init()

        self.config = config or DEFAULT_CONFIG
        self.session = GameSession(self.config, seed=seed)
        self.renderer = Renderer(self.config)
        self.ui_manager = UIManager()

        self.screen = pygame.display.set_mode((self.config.canvas_width, self.config.canvas_height))
        pygame.display.set_caption(f"{GAME_TITLE} v{GAME_VERSION}")

        self.clock = pygame.time.Clock()
        self.running = True
        self.last_outcome = OUTCOME_NONE

        self._report_new_maze()

    def _report_new_maze(self):
        grid = self.session.grid
        path = bfs_shortest_path(grid, (0, 0), (grid.cols - 1, grid.rows - 1))
        print(f"New maze {grid.cols}x{grid.rows}, shortest path {len(path)} cells")

    def handle_events(self):
        """Handle input events"""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
                return

            if event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    self.running = False
                    return
                key = key_identifier(pygame.key.name(event.key))
                restarts = self.session.restarts
                self.session.handle_key_down(key)
                if self.session.restarts != restarts:
                    self.last_outcome = OUTCOME_NONE
                    self._report_new_maze()

            elif event.type == pygame.KEYUP:
                self.session.handle_key_up(key_identifier(pygame.key.name(event.key)))

    def update(self):
        """Advance the simulation one tick"""
        outcome = self.session.tick()
        if outcome != self.last_outcome:
            self.last_outcome = outcome
            print(self.session.status_line())

    def render(self):
        """Paint the current snapshot"""
        snapshot = self.session.snapshot()
        self.renderer.draw(self.screen, snapshot)
        self.ui_manager.draw_message(self.screen, snapshot['outcome'], snapshot['message'])
        self.ui_manager.draw_help(self.screen)
        pygame.display.flip()

    def run(self):
        """Main game loop"""
        while self.running:
            self.clock.tick(self.config.fps)

            self.handle_events()
            if not self.running:
                break
            self.update()
            self.render()

        pygame.quit()


def main():
    """Entry point"""
    seed = None
    if len(sys.argv) > 1:
        seed = int(sys.argv[1])
    game = EchoGame(seed=seed)
    game.run()


if __name__ == "__main__":
    main()
