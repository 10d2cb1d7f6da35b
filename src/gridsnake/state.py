from __future__ import annotations

from collections import namedtuple

Vector = tuple[int, int]

UP: Vector = (0, -1)
DOWN: Vector = (0, 1)
LEFT: Vector = (-1, 0)
RIGHT: Vector = (1, 0)

DIRECTIONS: dict[str, Vector] = {
    "up": UP,
    "down": DOWN,
    "left": LEFT,
    "right": RIGHT,
}

State = namedtuple(
    "State",
    ["size", "snake", "direction", "queued_direction", "food", "score", "game_over", "paused"],
)
# size: int, board is size x size
# snake: tuple[(x, y), ...], head is first element.
# direction: (dx, dy) applied on the last tick
# queued_direction: (dx, dy) applied on the next tick
# food: (x, y) or None when the board is full
# score: int
# game_over: bool
# paused: bool


def add_vectors(a: Vector, b: Vector) -> Vector:
    return (a[0] + b[0], a[1] + b[1])


def is_opposite(a: Vector, b: Vector) -> bool:
    return add_vectors(a, b) == (0, 0)


def in_bounds(cell: Vector, size: int) -> bool:
    x, y = cell
    return 0 <= x < size and 0 <= y < size
