"""The ball: motion, wall bounces, paddle hits and scoring."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass

import pygame
from pygame.math import Vector2

from .consts import (
    BALL_INITIAL_SPEED,
    BALL_MAX_SPEED,
    BALL_SIZE,
    BALL_SPEED_INCREASE,
    PADDLE_HEIGHT,
    PADDLE_MARGIN,
    PADDLE_WIDTH,
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
)
from .effects import Color, Trail, draw_circle, draw_glow, get_rainbow_color
from .paddle import Paddle, Rect

_MAX_BOUNCE_ANGLE = math.radians(60.0)


@dataclass
class CollisionResult:
    """Where and in which hue a paddle hit happened."""

    position: Vector2
    hue: float


class Ball:
    """A ball that speeds up on every paddle hit and changes hue as it goes."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self.position = Vector2(SCREEN_WIDTH / 2.0, SCREEN_HEIGHT / 2.0)
        self.velocity = Vector2(0.0, 0.0)
        self.speed = BALL_INITIAL_SPEED
        self.hue = 120.0
        self.trail = Trail()
        self._rng = rng or random.Random()

    def reset(self) -> None:
        """Serve from the centre at a random angle towards a random side."""
        self.position = Vector2(SCREEN_WIDTH / 2.0, SCREEN_HEIGHT / 2.0)
        angle = math.radians(self._rng.randrange(-45, 45))
        direction = -1.0 if self._rng.randrange(2) == 0 else 1.0
        self.velocity = Vector2(direction * math.cos(angle) * self.speed, math.sin(angle) * self.speed)
        self.hue = (self.hue + 60.0) % 360.0

    def update(self, dt: float, left_paddle: Paddle, right_paddle: Paddle) -> CollisionResult | None:
        """Move the ball; return the collision if it struck a paddle."""
        self.position += self.velocity * dt

        collision = self._check_paddle_collision(left_paddle, right_paddle)

        low, high = BALL_SIZE / 2.0, SCREEN_HEIGHT - BALL_SIZE / 2.0
        if self.position.y <= low or self.position.y >= high:
            self.velocity.y = -self.velocity.y
            self.position.y = min(max(self.position.y, low), high)

        self.trail.update(dt)
        self.trail.add_point(self.position, self.hue)

        return collision

    def _check_paddle_collision(self, left_paddle: Paddle, right_paddle: Paddle) -> CollisionResult | None:
        ball_rect = self.get_rect()
        if ball_rect.overlaps(left_paddle.get_rect()) and self.velocity.x < 0.0:
            self._handle_paddle_hit(left_paddle)
            return CollisionResult(Vector2(self.position), self.hue)
        if ball_rect.overlaps(right_paddle.get_rect()) and self.velocity.x > 0.0:
            self._handle_paddle_hit(right_paddle)
            return CollisionResult(Vector2(self.position), self.hue)
        return None

    def _handle_paddle_hit(self, paddle: Paddle) -> None:
        relative_y = (self.position.y - paddle.get_center().y) / (PADDLE_HEIGHT / 2.0)
        bounce_angle = relative_y * _MAX_BOUNCE_ANGLE

        self.velocity = Vector2(
            -math.copysign(1.0, self.velocity.x) * math.cos(bounce_angle) * self.speed,
            math.sin(bounce_angle) * self.speed,
        )

        if self.position.x < SCREEN_WIDTH / 2.0:
            self.position.x = PADDLE_MARGIN + PADDLE_WIDTH + BALL_SIZE / 2.0
        else:
            self.position.x = SCREEN_WIDTH - PADDLE_MARGIN - PADDLE_WIDTH - BALL_SIZE / 2.0

        self.speed = min(self.speed + BALL_SPEED_INCREASE, BALL_MAX_SPEED)
        self.hue = (self.hue + 30.0) % 360.0

    def get_rect(self) -> Rect:
        return Rect(
            self.position.x - BALL_SIZE / 2.0,
            self.position.y - BALL_SIZE / 2.0,
            BALL_SIZE,
            BALL_SIZE,
        )

    def draw(self, surface: pygame.Surface, phase: float) -> None:
        self.trail.draw(surface, phase)

        color = get_rainbow_color((self.hue + phase) % 360.0)
        draw_glow(surface, self.position, BALL_SIZE / 2.0, color, 1.5)
        draw_circle(surface, self.position.x, self.position.y, BALL_SIZE / 2.0, color)

        inner = Color(color.r * 1.3, color.g * 1.3, color.b * 1.3, 1.0)
        draw_circle(surface, self.position.x, self.position.y, BALL_SIZE / 3.0, inner)

    def scored(self) -> bool | None:
        """True if the right player scored, False if the left did, else None."""
        if self.position.x < 0.0:
            return False
        if self.position.x > SCREEN_WIDTH:
            return True
        return None