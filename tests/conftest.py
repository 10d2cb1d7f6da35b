import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pytest

from gridsnake.state import RIGHT, UP, State


def fixed(value):
    return lambda: value


@pytest.fixture
def rng_zero():
    return fixed(0.0)


@pytest.fixture
def running_state():
    """Size 5, snake centred and facing right, food in the top-left corner."""
    return State(
        size=5,
        snake=((2, 2), (1, 2), (0, 2)),
        direction=RIGHT,
        queued_direction=RIGHT,
        food=(0, 0),
        score=0,
        game_over=False,
        paused=False,
    )


@pytest.fixture
def curled_state():
    # Head at (2, 1) just came up from (2, 2); turning left runs into (1, 1).
    return State(
        size=5,
        snake=((2, 1), (2, 2), (1, 2), (1, 1), (1, 0)),
        direction=UP,
        queued_direction=UP,
        food=(4, 4),
        score=2,
        game_over=False,
        paused=False,
    )
