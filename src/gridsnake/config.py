from __future__ import annotations

import pygame

from .state import DOWN, LEFT, RIGHT, UP

DEFAULT_SIZE = 20
TICK_MS = 140
FPS = 60

BLOCK = 24
HUD_HEIGHT = 48
FONT_SIZE = 24

BLACK = (0, 0, 0)
GRID = (24, 24, 24)
GREEN = (0, 255, 0)
RED = (255, 0, 0)
WHITE = (255, 255, 255)
GREY = (160, 160, 160)

KEY_DIRECTIONS = {
    pygame.K_UP: UP,
    pygame.K_w: UP,
    pygame.K_DOWN: DOWN,
    pygame.K_s: DOWN,
    pygame.K_LEFT: LEFT,
    pygame.K_a: LEFT,
    pygame.K_RIGHT: RIGHT,
    pygame.K_d: RIGHT,
}

# Keypad arrows act like on-screen direction buttons: they also start a paused game.
KEY_DIRECTION_BUTTONS = {
    pygame.K_KP8: UP,
    pygame.K_KP2: DOWN,
    pygame.K_KP4: LEFT,
    pygame.K_KP6: RIGHT,
}

KEY_PAUSE = pygame.K_SPACE
KEY_RESTART_IF_OVER = (pygame.K_RETURN, pygame.K_KP_ENTER)
KEY_START = pygame.K_p
KEY_RESTART = pygame.K_r
KEY_QUIT = (pygame.K_ESCAPE, pygame.K_q)
