"""Playfield geometry, tuning values and the logical keys the game reacts to."""

from enum import Enum

SCREEN_WIDTH: float = 800.0
SCREEN_HEIGHT: float = 600.0

PADDLE_WIDTH: float = 15.0
PADDLE_HEIGHT: float = 100.0
PADDLE_SPEED: float = 400.0
PADDLE_MARGIN: float = 30.0

BALL_SIZE: float = 15.0
BALL_INITIAL_SPEED: float = 300.0
BALL_SPEED_INCREASE: float = 20.0
BALL_MAX_SPEED: float = 600.0

WIN_SCORE: int = 7

PARTICLE_COUNT: int = 15
TRAIL_LENGTH: int = 10


class Key(Enum):
    """Logical keys used for menu navigation, paddle control and pausing."""

    W = "w"
    S = "s"
    UP = "up"
    DOWN = "down"
    P = "p"
    ESCAPE = "escape"
    ENTER = "enter"
    SPACE = "space"