"""
Renderer - draws a session snapshot onto a pygame surface
"""

import pygame
from utils.colors import (
    COLOR_BG, COLOR_WALL_LIT, COLOR_PLAYER, COLOR_EXIT, COLOR_PULSE, COLOR_PULSE_INNER
)
from utils.constants import WALL_THICK
from utils.helpers import rgba, clamp

GRADIENT_STEPS = 12


def radial_gradient(radius, color, stops):
    """
    Build a SRCALPHA surface with a radial gradient disc.

    pygame has no gradient fill, so the disc is painted as concentric circles
    from the rim inwards, each one carrying the alpha interpolated at its
    radius.

    Args:
        radius: Disc radius in pixels
        color: RGB color
        stops: [(offset 0-1, alpha 0-1), ...] sorted by offset

    Returns:
        pygame.Surface of size (2*radius, 2*radius)
    """
    size = max(1, int(radius * 2))
    surf = pygame.Surface((size, size), pygame.SRCALPHA)
    center = (size // 2, size // 2)

    for i in range(GRADIENT_STEPS, 0, -1):
        t = i / GRADIENT_STEPS
        alpha = _alpha_at(stops, t)
        r = max(1, int(radius * t))
        pygame.draw.circle(surf, rgba(color, alpha), center, r)

    return surf


def _alpha_at(stops, t):
    """Linear interpolation of gradient stops at offset t"""
    if t <= stops[0][0]:
        return stops[0][1]
    for (o1, a1), (o2, a2) in zip(stops, stops[1:]):
        if t <= o2:
            span = o2 - o1
            if span <= 0:
                return a2
            return a1 + (a2 - a1) * (t - o1) / span
    return stops[-1][1]


class Renderer:
    """
    Draws walls, exit glow, pulses and the player from a snapshot dict
    """
    def __init__(self, config):
        self.config = config

    def draw(self, screen, snapshot):
        """Paint one frame (order matters for layering)"""
        screen.fill(COLOR_BG)
        self._draw_walls(screen, snapshot['walls'])
        self._draw_exit(screen, snapshot['exit'])
        self._draw_pulses(screen, snapshot['pulses'])
        self._draw_player(screen, snapshot['player'])

    def _draw_walls(self, screen, walls):
        """Lit walls only; unlit walls are never drawn"""
        if not walls:
            return
        overlay = pygame.Surface(screen.get_size(), pygame.SRCALPHA)
        for x1, y1, x2, y2, alpha in walls:
            pygame.draw.line(overlay, rgba(COLOR_WALL_LIT, alpha * 0.8), (x1, y1), (x2, y2), WALL_THICK)
        screen.blit(overlay, (0, 0))

    def _draw_exit(self, screen, exit_info):
        radius = self.config.cell_size / 2
        glow = radial_gradient(radius, COLOR_EXIT, [(0.0, exit_info['alpha']), (1.0, 0.0)])
        screen.blit(glow, (int(exit_info['x'] - radius), int(exit_info['y'] - radius)))

    def _draw_pulses(self, screen, pulses):
        if not pulses:
            return
        overlay = pygame.Surface(screen.get_size(), pygame.SRCALPHA)
        for pulse in pulses:
            r = int(pulse['radius'])
            if r <= 0:
                continue
            center = (int(pulse['x']), int(pulse['y']))
            alpha = clamp(pulse['alpha'], 0.0, 1.0)
            pygame.draw.circle(overlay, rgba(COLOR_PULSE, alpha), center, r, self.config.pulse_width)
            pygame.draw.circle(overlay, rgba(COLOR_PULSE_INNER, alpha * 0.5), center, r, 1)
        screen.blit(overlay, (0, 0))

    def _draw_player(self, screen, player):
        r = player['radius']
        glow_r = r * 2
        glow = radial_gradient(glow_r, COLOR_PLAYER, [(0.0, 1.0), (0.5, 1.0), (1.0, 0.0)])
        screen.blit(glow, (int(player['x'] - glow_r), int(player['y'] - glow_r)))

        # Core
        pygame.draw.circle(screen, COLOR_PLAYER, (int(player['x']), int(player['y'])), int(r))
