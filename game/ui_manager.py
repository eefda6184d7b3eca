"""
UI Manager - message overlay for the end-of-session outcomes
"""

import pygame
from utils.colors import (
    COLOR_TEXT_DIM, COLOR_GAME_OVER, COLOR_LEVEL_COMPLETE, COLOR_MESSAGE_BG
)
from utils.constants import OUTCOME_GAME_OVER, OUTCOME_LEVEL_COMPLETE

OUTCOME_COLORS = {
    OUTCOME_GAME_OVER: COLOR_GAME_OVER,
    OUTCOME_LEVEL_COMPLETE: COLOR_LEVEL_COMPLETE,
}


class UIManager:
    """
    Manages all UI rendering
    """
    def __init__(self):
        # Fonts
        self.font_small = None
        self.font_medium = None
        self._init_fonts()

    def _init_fonts(self):
        """Initialize fonts"""
        pygame.font.init()
        self.font_small = pygame.font.SysFont("consolas", 14)
        self.font_medium = pygame.font.SysFont("consolas", 22, bold=True)

    def draw_message(self, screen, outcome, message):
        """
        Draw the outcome banner; nothing while the game is running

        Args:
            screen: Pygame screen
            outcome: 'none', 'gameOver' or 'levelComplete'
            message: Text to show
        """
        color = OUTCOME_COLORS.get(outcome)
        if color is None or not message:
            return

        screen_w, screen_h = screen.get_size()
        text = self.font_medium.render(message, True, color)
        text_rect = text.get_rect(center=(screen_w // 2, screen_h // 2))

        # Background
        bg_rect = text_rect.inflate(30, 15)
        pygame.draw.rect(screen, COLOR_MESSAGE_BG, bg_rect, border_radius=8)
        pygame.draw.rect(screen, color, bg_rect, 2, border_radius=8)

        screen.blit(text, text_rect)

    def draw_help(self, screen):
        """Controls hint in the bottom-left corner"""
        _, screen_h = screen.get_size()
        text = self.font_small.render(
            "Arrows/WASD: move   SPACE: echo   R: restart   ESC: quit", True, COLOR_TEXT_DIM
        )
        screen.blit(text, (8, screen_h - text.get_height() - 6))
