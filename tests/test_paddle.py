import pygame
import pytest
from pygame.math import Vector2

from prismpong.consts import (
    PADDLE_HEIGHT,
    PADDLE_MARGIN,
    PADDLE_WIDTH,
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
    TRAIL_LENGTH,
)
from prismpong.paddle import Paddle, Rect

LEFT_X = PADDLE_MARGIN + PADDLE_WIDTH / 2.0
RIGHT_X = SCREEN_WIDTH - PADDLE_MARGIN - PADDLE_WIDTH / 2.0


def test_rect_overlap_is_symmetric():
    a = Rect(0, 0, 10, 10)
    b = Rect(5, 5, 10, 10)
    assert a.overlaps(b) and b.overlaps(a)


def test_rect_touching_edges_overlap():
    assert Rect(0, 0, 10, 10).overlaps(Rect(10, 0, 5, 5))


def test_rect_separated_do_not_overlap():
    assert Rect(0, 0, 10, 10).overlaps(Rect(11, 0, 5, 5)) is False
    assert Rect(0, 0, 10, 10).overlaps(Rect(0, 20, 5, 5)) is False


def test_new_paddle_is_vertically_centred():
    paddle = Paddle(LEFT_X)
    assert paddle.position == Vector2(LEFT_X, SCREEN_HEIGHT / 2.0)
    assert paddle.velocity == 0.0


def test_hue_depends_on_side():
    assert Paddle(LEFT_X).hue == 0.0
    assert Paddle(RIGHT_X).hue == 180.0


def test_get_rect_matches_paddle_size():
    rect = Paddle(LEFT_X).get_rect()
    assert (rect.w, rect.h) == (PADDLE_WIDTH, PADDLE_HEIGHT)
    assert rect.x + rect.w / 2 == pytest.approx(LEFT_X)
    assert rect.y + rect.h / 2 == pytest.approx(SCREEN_HEIGHT / 2.0)


def test_get_center_is_position():
    paddle = Paddle(RIGHT_X)
    assert paddle.get_center() == paddle.position


def test_up_key_moves_paddle_up():
    paddle = Paddle(LEFT_X)
    paddle.update(0.05, None, (True, False))
    assert paddle.velocity < 0
    assert paddle.position.y < SCREEN_HEIGHT / 2.0


def test_down_key_moves_paddle_down():
    paddle = Paddle(LEFT_X)
    paddle.update(0.05, None, (False, True))
    assert paddle.velocity > 0
    assert paddle.position.y > SCREEN_HEIGHT / 2.0


def test_both_keys_cancel():
    paddle = Paddle(LEFT_X)
    paddle.update(0.05, None, (True, True))
    assert paddle.position.y == SCREEN_HEIGHT / 2.0


def test_paddle_is_clamped_to_screen():
    paddle = Paddle(LEFT_X)
    for _ in range(200):
        paddle.update(0.05, None, (False, True))
    assert paddle.position.y == SCREEN_HEIGHT - PADDLE_HEIGHT / 2.0
    for _ in range(200):
        paddle.update(0.05, None, (True, False))
    assert paddle.position.y == PADDLE_HEIGHT / 2.0


def test_ai_follows_ball():
    paddle = Paddle(RIGHT_X, True)
    paddle.update(0.05, Vector2(RIGHT_X, SCREEN_HEIGHT - 50), (True, False))
    assert paddle.velocity > 0


def test_ai_holds_still_near_ball():
    paddle = Paddle(RIGHT_X, True)
    paddle.update(0.05, Vector2(RIGHT_X, SCREEN_HEIGHT / 2.0 + 10), (False, False))
    assert paddle.velocity == 0.0


def test_ai_without_ball_holds_still():
    paddle = Paddle(RIGHT_X, True)
    paddle.update(0.05, None, (False, True))
    assert paddle.velocity == 0.0


def test_trail_is_bounded():
    paddle = Paddle(LEFT_X)
    for _ in range(50):
        paddle.update(0.01, None, (False, False))
    assert 0 < len(paddle.trail.points) <= TRAIL_LENGTH


def test_draw_paints_paddle():
    surface = pygame.Surface((int(SCREEN_WIDTH), int(SCREEN_HEIGHT)))
    paddle = Paddle(LEFT_X)
    paddle.draw(surface, 0.0)
    pixel = surface.get_at((int(LEFT_X), int(SCREEN_HEIGHT / 2)))
    assert max(pixel.r, pixel.g, pixel.b) > 0