from __future__ import annotations

from typing import Callable, Sequence

from .state import DIRECTIONS, RIGHT, State, Vector, add_vectors, in_bounds, is_opposite

RandomSource = Callable[[], float]

MIN_SIZE = 3


def create_initial_state(size: int, rng: RandomSource) -> State:
    """Fresh paused game: a 3-cell snake centred on the board, facing right."""
    if isinstance(size, bool) or not isinstance(size, int) or size < MIN_SIZE:
        raise ValueError(f"board size must be an int >= {MIN_SIZE}, got {size!r}")

    center = size // 2
    # On a 3-wide board the head sits right of centre so the tail stays on the board.
    head_x = max(center, 2)
    snake = (
        (head_x, center),
        (head_x - 1, center),
        (head_x - 2, center),
    )
    return State(
        size=size,
        snake=snake,
        direction=RIGHT,
        queued_direction=RIGHT,
        food=place_food(size, snake, rng),
        score=0,
        game_over=False,
        paused=True,
    )


def place_food(size: int, snake: Sequence[Vector], rng: RandomSource) -> Vector | None:
    """Pick a free cell, scanning rows top to bottom. None when the board is full."""
    occupied = set(snake)
    empty = [(x, y) for y in range(size) for x in range(size) if (x, y) not in occupied]
    if not empty:
        return None
    # rng() may round up to 1.0
    idx = min(int(rng() * len(empty)), len(empty) - 1)
    return empty[idx]


def _crash(state: State) -> State:
    return state._replace(game_over=True, paused=True)


def step_game(state: State, rng: RandomSource) -> State:
    if state.game_over or state.paused:
        return state

    next_dir = state.queued_direction
    next_head = add_vectors(state.snake[0], next_dir)

    if not in_bounds(next_head, state.size):
        return _crash(state)

    # The tail moves out of the way this tick, so it is not an obstacle.
    if next_head in state.snake[:-1]:
        return _crash(state)

    ate_food = state.food is not None and next_head == state.food

    if ate_food:
        new_snake = (next_head,) + state.snake
    else:
        new_snake = (next_head,) + state.snake[:-1]

    return state._replace(
        snake=new_snake,
        direction=next_dir,
        food=place_food(state.size, new_snake, rng) if ate_food else state.food,
        score=state.score + 1 if ate_food else state.score,
    )


def queue_direction(state: State, direction: Vector) -> State:
    """Buffer a turn for the next tick.

    Only a reversal of the committed direction is refused; a turn that is
    still queued can be overwritten by anything else, including its own
    opposite.
    """
    if direction not in DIRECTIONS.values():
        raise ValueError(f"not a unit direction: {direction!r}")
    if is_opposite(state.direction, direction):
        return state
    return state._replace(queued_direction=direction)


def toggle_pause(state: State) -> State:
    if state.game_over:
        return state
    return state._replace(paused=not state.paused)
