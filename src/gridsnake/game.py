from __future__ import annotations

import logging

import pygame

from . import config
from .logic import RandomSource, create_initial_state, queue_direction, step_game, toggle_pause
from .render import draw_state, surface_size
from .state import State

log = logging.getLogger(__name__)

TICK_EVENT = pygame.USEREVENT


def _restart(state: State, rng: RandomSource) -> State:
    log.info("restart (previous score %d)", state.score)
    return create_initial_state(state.size, rng)


def is_quit(event: pygame.event.Event) -> bool:
    if event.type == pygame.QUIT:
        return True
    return event.type == pygame.KEYDOWN and event.key in config.KEY_QUIT


def handle_event(state: State, event: pygame.event.Event, rng: RandomSource) -> State:
    """Translate one input event into an engine transition."""
    if event.type == pygame.WINDOWFOCUSLOST:
        if not state.paused and not state.game_over:
            log.debug("focus lost, pausing")
            return toggle_pause(state)
        return state

    if event.type != pygame.KEYDOWN:
        return state

    if event.key == config.KEY_PAUSE:
        log.debug("toggle pause")
        return toggle_pause(state)

    if event.key in config.KEY_RESTART_IF_OVER:
        return _restart(state, rng) if state.game_over else state

    if event.key == config.KEY_RESTART:
        return _restart(state, rng)

    if event.key == config.KEY_START:
        if state.game_over:
            state = _restart(state, rng)
        return toggle_pause(state) if state.paused else state

    direction = config.KEY_DIRECTIONS.get(event.key)
    if direction is not None:
        return queue_direction(state, direction)

    direction = config.KEY_DIRECTION_BUTTONS.get(event.key)
    if direction is not None:
        state = queue_direction(state, direction)
        if state.paused and not state.game_over:
            state = toggle_pause(state)
        return state
    return state


def tick(state: State, rng: RandomSource) -> State:
    new_state = step_game(state, rng)
    if new_state.game_over and not state.game_over:
        log.info("game over, score %d", new_state.score)
    return new_state


def _sync_timer(state: State, ticking: bool, tick_ms: int) -> bool:
    # The timer only runs while there is something to advance.
    should_tick = not state.paused and not state.game_over
    if should_tick != ticking:
        pygame.time.set_timer(TICK_EVENT, tick_ms if should_tick else 0)
    return should_tick


def run(
    size: int,
    rng: RandomSource,
    tick_ms: int = config.TICK_MS,
    block: int = config.BLOCK,
) -> State:
    state = create_initial_state(size, rng)

    pygame.init()
    screen = pygame.display.set_mode(surface_size(size, block))
    pygame.display.set_caption("gridsnake")
    font = pygame.font.Font(None, config.FONT_SIZE)
    clock = pygame.time.Clock()
    log.info("board %dx%d, tick %d ms", size, size, tick_ms)

    ticking = False
    running = True
    while running:
        for event in pygame.event.get():
            if is_quit(event):
                running = False
                break
            if event.type == TICK_EVENT:
                state = tick(state, rng)
            else:
                state = handle_event(state, event, rng)

        ticking = _sync_timer(state, ticking, tick_ms)
        draw_state(screen, state, font, block)
        pygame.display.flip()
        clock.tick(config.FPS)

    pygame.quit()
    return state
