"""
Game State Machine - running and the two terminal outcomes
"""

from enum import Enum, auto
from utils.constants import (
    OUTCOME_NONE, OUTCOME_GAME_OVER, OUTCOME_LEVEL_COMPLETE,
    MESSAGE_GAME_OVER, MESSAGE_LEVEL_COMPLETE
)


class GameState(Enum):
    """Game states"""
    RUNNING = auto()
    GAME_OVER = auto()
    LEVEL_COMPLETE = auto()


OUTCOMES = {
    GameState.RUNNING: OUTCOME_NONE,
    GameState.GAME_OVER: OUTCOME_GAME_OVER,
    GameState.LEVEL_COMPLETE: OUTCOME_LEVEL_COMPLETE,
}

MESSAGES = {
    GameState.RUNNING: "",
    GameState.GAME_OVER: MESSAGE_GAME_OVER,
    GameState.LEVEL_COMPLETE: MESSAGE_LEVEL_COMPLETE,
}


class GameStateManager:
    """
    Manages game state transitions

    RUNNING can move to either terminal state. Terminal states only leave
    through reset(), which a restart calls.
    """
    def __init__(self):
        self.current_state = GameState.RUNNING

    def transition_to(self, new_state):
        """
        Transition to a new state

        Args:
            new_state: GameState enum value

        Returns:
            True if the transition happened
        """
        if self.is_terminal():
            return False
        self.current_state = new_state
        return True

    def reset(self):
        """Return to RUNNING (session restart)"""
        self.current_state = GameState.RUNNING

    def is_state(self, state):
        """Check if current state matches"""
        return self.current_state == state

    def is_running(self):
        return self.current_state == GameState.RUNNING

    def is_terminal(self):
        return self.current_state in (GameState.GAME_OVER, GameState.LEVEL_COMPLETE)

    @property
    def outcome(self):
        """Outcome string for the message surface"""
        return OUTCOMES[self.current_state]

    @property
    def message(self):
        """Human-readable text for the current outcome"""
        return MESSAGES[self.current_state]

    def __repr__(self):
        return f"GameStateManager(state={self.current_state.name})"
