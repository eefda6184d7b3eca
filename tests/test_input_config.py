import unittest

from config import GameConfig, DEFAULT_CONFIG
from game.game_state import GameState, GameStateManager
from game.input_state import InputState, key_identifier, is_pulse_key, is_restart_key
from utils.constants import OUTCOME_GAME_OVER


class TestInputState(unittest.TestCase):

    def setUp(self):
        self.input = InputState()

    def test_families(self):
        for key, expected in [('ArrowUp', (0, -1)), ('W', (0, -1)), ('s', (0, 1)),
                              ('ArrowLeft', (-1, 0)), ('D', (1, 0))]:
            self.input.clear()
            self.input.set_key_state(key, True)
            self.assertEqual(self.input.movement(), expected)

    def test_opposite_keys_cancel(self):
        self.input.set_key_state('a', True)
        self.input.set_key_state('ArrowRight', True)
        self.assertEqual(self.input.movement(), (0, 0))

    def test_release_unknown_key(self):
        self.input.set_key_state('F13', False)
        self.assertEqual(self.input.pressed, set())

    def test_pygame_names(self):
        self.assertEqual(key_identifier('up'), 'ArrowUp')
        self.assertEqual(key_identifier('space'), ' ')
        self.assertEqual(key_identifier('w'), 'w')
        self.assertTrue(is_pulse_key(key_identifier('space')))
        self.assertTrue(is_restart_key('R'))
        self.assertFalse(is_restart_key('t'))


class TestGameStateManager(unittest.TestCase):

    def test_terminal_state_sticks_until_reset(self):
        manager = GameStateManager()
        self.assertTrue(manager.transition_to(GameState.GAME_OVER))
        self.assertFalse(manager.transition_to(GameState.LEVEL_COMPLETE))
        self.assertEqual(manager.outcome, OUTCOME_GAME_OVER)
        manager.reset()
        self.assertTrue(manager.is_running())


class TestGameConfig(unittest.TestCase):

    def test_defaults(self):
        self.assertEqual((DEFAULT_CONFIG.cols, DEFAULT_CONFIG.rows), (20, 15))
        self.assertEqual(DEFAULT_CONFIG.player_radius, 8)
        self.assertEqual(DEFAULT_CONFIG.pulse_speed, 3)
        self.assertEqual(DEFAULT_CONFIG.pulse_max_radius, 250)
        self.assertEqual(DEFAULT_CONFIG.wall_ring_thickness, 20)
        self.assertEqual(DEFAULT_CONFIG.exit_ring_thickness, 30)
        self.assertEqual(DEFAULT_CONFIG.move_speed, 2)

    def test_overrides(self):
        config = GameConfig(canvas_width=810, cell_size=30)
        self.assertEqual((config.cols, config.rows), (27, 20))

    def test_invalid(self):
        with self.assertRaises(ValueError):
            GameConfig(cell_size=0)
        with self.assertRaises(ValueError):
            GameConfig(cell_size=1000)
        with self.assertRaises(ValueError):
            GameConfig(pulse_max_radius=-1)


if __name__ == '__main__':
    unittest.main()
