"""Player and computer controlled paddles."""

from __future__ import annotations

import math
from dataclasses import dataclass

import pygame
from pygame.math import Vector2

from .consts import PADDLE_HEIGHT, PADDLE_SPEED, PADDLE_WIDTH, SCREEN_HEIGHT, SCREEN_WIDTH
from .effects import Color, Trail, draw_glow, draw_rectangle, get_rainbow_color

_AI_THRESHOLD = 20.0
_AI_SPEED_FACTOR = 0.85
_RESPONSIVENESS = 15.0


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle given by its top-left corner and size."""

    x: float
    y: float
    w: float
    h: float

    def overlaps(self, other: Rect) -> bool:
        """True when the rectangles intersect or touch."""
        return (
            self.x <= other.x + other.w
            and self.x + self.w >= other.x
            and self.y <= other.y + other.h
            and self.y + self.h >= other.y
        )


class Paddle:
    """A vertical paddle that eases towards the speed its controller asks for."""

    def __init__(self, x: float, is_ai: bool = False) -> None:
        self.position = Vector2(x, SCREEN_HEIGHT / 2.0)
        self.velocity = 0.0
        self.hue = 0.0 if x < SCREEN_WIDTH / 2.0 else 180.0
        self.is_ai = is_ai
        self.trail = Trail()

    def update(self, dt: float, ball_position: Vector2 | None, keys: tuple[bool, bool]) -> None:
        """Advance by ``dt``; ``keys`` is the (up, down) state for a human player."""
        target = self._ai_velocity(ball_position) if self.is_ai else self._player_velocity(keys)
        self.velocity += (target - self.velocity) * _RESPONSIVENESS * dt
        self.position.y += self.velocity * dt
        self.position.y = min(max(self.position.y, PADDLE_HEIGHT / 2.0), SCREEN_HEIGHT - PADDLE_HEIGHT / 2.0)

        self.trail.update(dt)
        self.trail.add_point(self.position, self.hue)

    @staticmethod
    def _player_velocity(keys: tuple[bool, bool]) -> float:
        up, down = keys
        if up and not down:
            return -PADDLE_SPEED
        if down and not up:
            return PADDLE_SPEED
        return 0.0

    def _ai_velocity(self, ball_position: Vector2 | None) -> float:
        if ball_position is None:
            return 0.0
        diff = ball_position.y - self.position.y
        if abs(diff) > _AI_THRESHOLD:
            return math.copysign(1.0, diff) * PADDLE_SPEED * _AI_SPEED_FACTOR
        return 0.0

    def get_rect(self) -> Rect:
        return Rect(
            self.position.x - PADDLE_WIDTH / 2.0,
            self.position.y - PADDLE_HEIGHT / 2.0,
            PADDLE_WIDTH,
            PADDLE_HEIGHT,
        )

    def draw(self, surface: pygame.Surface, phase: float) -> None:
        self.trail.draw(surface, phase)

        color = get_rainbow_color((self.hue + phase) % 360.0)
        draw_glow(surface, self.position, PADDLE_HEIGHT / 2.0, color, 1.0)

        rect = self.get_rect()
        draw_rectangle(surface, rect.x, rect.y, rect.w, rect.h, color)
        inner = Color(color.r * 1.5, color.g * 1.5, color.b * 1.5, 1.0)
        draw_rectangle(surface, rect.x + 3.0, rect.y + 3.0, rect.w - 6.0, rect.h - 6.0, inner)

    def get_center(self) -> Vector2:
        return self.position