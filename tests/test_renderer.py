import os
import unittest

os.environ.setdefault('SDL_VIDEODRIVER', 'dummy')

import pygame

from config import GameConfig
from game.renderer import Renderer, radial_gradient, _alpha_at
from game.session import GameSession
from game.ui_manager import UIManager
from utils.colors import COLOR_PLAYER, COLOR_BG


class TestGradient(unittest.TestCase):

    def test_alpha_at_stops(self):
        stops = [(0.0, 1.0), (0.5, 1.0), (1.0, 0.0)]
        self.assertEqual(_alpha_at(stops, 0.25), 1.0)
        self.assertAlmostEqual(_alpha_at(stops, 0.75), 0.5)
        self.assertEqual(_alpha_at(stops, 1.0), 0.0)

    def test_surface_size(self):
        surf = radial_gradient(16, COLOR_PLAYER, [(0.0, 1.0), (1.0, 0.0)])
        self.assertEqual(surf.get_size(), (32, 32))


class TestRenderer(unittest.TestCase):

    @classmethod
    def setUpClass(cls):
        pygame.init()

    @classmethod
    def tearDownClass(cls):
        pygame.quit()

    def test_draw_snapshot(self):
        config = GameConfig(canvas_width=160, canvas_height=120)
        session = GameSession(config, seed=1)
        for _ in range(10):
            session.tick()

        screen = pygame.Surface((160, 120))
        Renderer(config).draw(screen, session.snapshot())

        self.assertEqual(tuple(screen.get_at((20, 20)))[:3], COLOR_PLAYER)
        self.assertEqual(tuple(screen.get_at((159, 60)))[:3], COLOR_BG)

    def test_message_only_on_outcome(self):
        screen = pygame.Surface((200, 100))
        screen.fill(COLOR_BG)
        ui = UIManager()
        ui.draw_message(screen, 'none', '')
        self.assertEqual(tuple(screen.get_at((100, 50)))[:3], COLOR_BG)

        ui.draw_message(screen, 'gameOver', 'GAME OVER')
        self.assertNotEqual(tuple(screen.get_at((100, 50)))[:3], COLOR_BG)


if __name__ == '__main__':
    unittest.main()
