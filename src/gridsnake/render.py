from __future__ import annotations

import pygame

from . import config
from .state import State

STATUS_RUNNING = "Running"
STATUS_PAUSED = "Paused. Press Space or Start."
STATUS_OVER = "Game over. Press Enter or Restart."


def status_text(state: State) -> str:
    if state.game_over:
        return STATUS_OVER
    if state.paused:
        return STATUS_PAUSED
    return STATUS_RUNNING


def surface_size(size: int, block: int = config.BLOCK) -> tuple[int, int]:
    return (size * block, size * block + config.HUD_HEIGHT)


def cell_rect(x: int, y: int, block: int = config.BLOCK) -> pygame.Rect:
    return pygame.Rect(x * block, config.HUD_HEIGHT + y * block, block, block)


def draw_state(
    screen: pygame.Surface,
    state: State,
    font: pygame.font.Font,
    block: int = config.BLOCK,
) -> None:
    screen.fill(config.BLACK)

    for y in range(state.size):
        for x in range(state.size):
            pygame.draw.rect(screen, config.GRID, cell_rect(x, y, block), 1)

    for x, y in state.snake:
        pygame.draw.rect(screen, config.GREEN, cell_rect(x, y, block))

    if state.food is not None:
        fx, fy = state.food
        pygame.draw.rect(screen, config.RED, cell_rect(fx, fy, block))

    score = font.render(f"Score: {state.score}", True, config.WHITE)
    screen.blit(score, (8, 4))
    status = font.render(status_text(state), True, config.GREY)
    screen.blit(status, (8, 4 + font.get_linesize()))
