"""
Input state - the pressed-key set shared between the event pump and ticks
"""

from utils.constants import (
    KEYS_UP, KEYS_DOWN, KEYS_LEFT, KEYS_RIGHT, KEYS_PULSE, KEYS_RESTART
)

# pygame key names that differ from the identifiers the core understands
PYGAME_KEY_NAMES = {
    'up': 'ArrowUp',
    'down': 'ArrowDown',
    'left': 'ArrowLeft',
    'right': 'ArrowRight',
    'space': ' ',
}


class InputState:
    """
    Keys currently held down
    Written by key events, only read during a tick
    """
    def __init__(self):
        self.pressed = set()

    def set_key_state(self, key, pressed):
        """Record a key-down (pressed=True) or key-up"""
        if pressed:
            self.pressed.add(key)
        else:
            self.pressed.discard(key)

    def is_held(self, keys):
        """Check if any key of a family is held"""
        return any(k in self.pressed for k in keys)

    def movement(self):
        """
        Direction vector from held keys

        Returns:
            (dx, dy) with each component in -1, 0, 1
        """
        dx = 0
        dy = 0
        if self.is_held(KEYS_UP):
            dy -= 1
        if self.is_held(KEYS_DOWN):
            dy += 1
        if self.is_held(KEYS_LEFT):
            dx -= 1
        if self.is_held(KEYS_RIGHT):
            dx += 1
        return dx, dy

    def clear(self):
        self.pressed.clear()

    def __repr__(self):
        return f"InputState(pressed={sorted(self.pressed)})"


def is_pulse_key(key):
    return key in KEYS_PULSE


def is_restart_key(key):
    return key in KEYS_RESTART


def key_identifier(pygame_name):
    """Translate a pygame key name (pygame.key.name) to a core key identifier"""
    return PYGAME_KEY_NAMES.get(pygame_name, pygame_name)
