import math
import random

import pygame
import pytest
from pygame.math import Vector2

from prismpong.ball import Ball
from prismpong.consts import (
    BALL_INITIAL_SPEED,
    BALL_MAX_SPEED,
    BALL_SIZE,
    BALL_SPEED_INCREASE,
    PADDLE_MARGIN,
    PADDLE_WIDTH,
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
    TRAIL_LENGTH,
)
from prismpong.paddle import Paddle

LEFT_X = PADDLE_MARGIN + PADDLE_WIDTH / 2.0
RIGHT_X = SCREEN_WIDTH - PADDLE_MARGIN - PADDLE_WIDTH / 2.0


@pytest.fixture
def paddles():
    return Paddle(LEFT_X), Paddle(RIGHT_X, True)


def test_new_ball_rests_at_centre():
    ball = Ball()
    assert ball.position == Vector2(SCREEN_WIDTH / 2.0, SCREEN_HEIGHT / 2.0)
    assert ball.velocity.length() == 0
    assert ball.speed == BALL_INITIAL_SPEED


@pytest.mark.parametrize("seed", range(20))
def test_reset_serves_at_speed_within_angle(seed):
    ball = Ball(random.Random(seed))
    before = ball.hue
    ball.reset()
    assert ball.velocity.length() == pytest.approx(ball.speed)
    assert abs(ball.velocity.y) <= ball.speed * math.sin(math.radians(45)) + 1e-6
    assert ball.hue == (before + 60.0) % 360.0
    assert ball.position == Vector2(SCREEN_WIDTH / 2.0, SCREEN_HEIGHT / 2.0)


def test_reset_is_reproducible_with_seed():
    a = Ball(random.Random(3))
    b = Ball(random.Random(3))
    a.reset()
    b.reset()
    assert a.velocity == b.velocity


def test_reset_serves_both_directions():
    directions = set()
    for seed in range(30):
        ball = Ball(random.Random(seed))
        ball.reset()
        directions.add(ball.velocity.x > 0)
    assert directions == {True, False}


def test_left_paddle_hit_bounces_ball(paddles):
    left, right = paddles
    ball = Ball()
    ball.position = Vector2(50, SCREEN_HEIGHT / 2.0)
    ball.velocity = Vector2(-BALL_INITIAL_SPEED, 0)
    hue_before = ball.hue

    result = ball.update(0.01, left, right)

    assert result is not None and result.hue == ball.hue
    assert ball.velocity.x == pytest.approx(BALL_INITIAL_SPEED)
    assert ball.position.x == PADDLE_MARGIN + PADDLE_WIDTH + BALL_SIZE / 2.0
    assert ball.speed == BALL_INITIAL_SPEED + BALL_SPEED_INCREASE
    assert ball.hue == (hue_before + 30.0) % 360.0


def test_right_paddle_hit_bounces_ball(paddles):
    left, right = paddles
    ball = Ball()
    ball.position = Vector2(SCREEN_WIDTH - 50, SCREEN_HEIGHT / 2.0)
    ball.velocity = Vector2(BALL_INITIAL_SPEED, 0)

    result = ball.update(0.01, left, right)

    assert result is not None
    assert ball.velocity.x < 0
    assert ball.position.x == SCREEN_WIDTH - PADDLE_MARGIN - PADDLE_WIDTH - BALL_SIZE / 2.0


def test_off_centre_hit_deflects(paddles):
    left, right = paddles
    ball = Ball()
    ball.position = Vector2(50, SCREEN_HEIGHT / 2.0 + 30)
    ball.velocity = Vector2(-BALL_INITIAL_SPEED, 0)
    ball.update(0.01, left, right)
    assert ball.velocity.y > 0
    assert ball.velocity.length() == pytest.approx(BALL_INITIAL_SPEED)


def test_ball_moving_away_is_not_hit(paddles):
    left, right = paddles
    ball = Ball()
    ball.position = Vector2(50, SCREEN_HEIGHT / 2.0)
    ball.velocity = Vector2(BALL_INITIAL_SPEED, 0)
    assert ball.update(0.01, left, right) is None
    assert ball.speed == BALL_INITIAL_SPEED


def test_speed_is_capped(paddles):
    left, right = paddles
    ball = Ball()
    ball.speed = BALL_MAX_SPEED
    ball.position = Vector2(50, SCREEN_HEIGHT / 2.0)
    ball.velocity = Vector2(-BALL_MAX_SPEED, 0)
    ball.update(0.001, left, right)
    assert ball.speed == BALL_MAX_SPEED


def test_top_wall_bounce(paddles):
    left, right = paddles
    ball = Ball()
    ball.position = Vector2(SCREEN_WIDTH / 2.0, 10)
    ball.velocity = Vector2(0, -BALL_INITIAL_SPEED)
    ball.update(0.01, left, right)
    assert ball.velocity.y > 0
    assert ball.position.y == BALL_SIZE / 2.0


def test_bottom_wall_bounce(paddles):
    left, right = paddles
    ball = Ball()
    ball.position = Vector2(SCREEN_WIDTH / 2.0, SCREEN_HEIGHT - 10)
    ball.velocity = Vector2(0, BALL_INITIAL_SPEED)
    ball.update(0.01, left, right)
    assert ball.velocity.y < 0
    assert ball.position.y == SCREEN_HEIGHT - BALL_SIZE / 2.0


def test_scored_sides():
    ball = Ball()
    assert ball.scored() is None
    ball.position = Vector2(-1, 100)
    assert ball.scored() is False
    ball.position = Vector2(SCREEN_WIDTH + 1, 100)
    assert ball.scored() is True


def test_get_rect_is_centred_square():
    ball = Ball()
    rect = ball.get_rect()
    assert (rect.w, rect.h) == (BALL_SIZE, BALL_SIZE)
    assert rect.x + rect.w / 2 == ball.position.x
    assert rect.y + rect.h / 2 == ball.position.y


def test_trail_is_bounded(paddles):
    left, right = paddles
    ball = Ball(random.Random(1))
    ball.reset()
    for _ in range(40):
        ball.update(0.005, left, right)
    assert 0 < len(ball.trail.points) <= TRAIL_LENGTH


def test_draw_paints_ball():
    surface = pygame.Surface((int(SCREEN_WIDTH), int(SCREEN_HEIGHT)))
    ball = Ball()
    ball.draw(surface, 0.0)
    pixel = surface.get_at((int(SCREEN_WIDTH / 2), int(SCREEN_HEIGHT / 2)))
    assert max(pixel.r, pixel.g, pixel.b) > 0