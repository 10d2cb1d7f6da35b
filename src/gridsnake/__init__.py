from .logic import create_initial_state, place_food, queue_direction, step_game, toggle_pause
from .state import DIRECTIONS, DOWN, LEFT, RIGHT, UP, State

__all__ = [
    "State",
    "UP",
    "DOWN",
    "LEFT",
    "RIGHT",
    "DIRECTIONS",
    "create_initial_state",
    "place_food",
    "step_game",
    "queue_direction",
    "toggle_pause",
]
