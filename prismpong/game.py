"""One match of pong: paddles, ball, scores, particles and screen shake."""

from __future__ import annotations

import random
from enum import Enum

import pygame
from pygame.math import Vector2

from .ball import Ball
from .consts import PADDLE_MARGIN, PADDLE_WIDTH, SCREEN_HEIGHT, SCREEN_WIDTH, WIN_SCORE, Key
from .effects import (
    Color,
    Particle,
    create_particle_explosion,
    draw_rectangle,
    draw_text,
    get_rainbow_color,
    measure_text,
)
from .paddle import Paddle

_SHAKE_ON_HIT = 0.3
_SHAKE_DECAY = 5.0
_SHAKE_AMPLITUDE = 10.0
_PHASE_SPEED = 50.0
_HIT_PARTICLES = 10


class GameResult(Enum):
    """Outcome of a single frame of play."""

    CONTINUE = "continue"
    LEFT_WINS = "left_wins"
    RIGHT_WINS = "right_wins"


def _to_rgba(color: Color) -> tuple[int, int, int, int]:
    return tuple(round(min(1.0, max(0.0, c)) * 255) for c in (color.r, color.g, color.b, color.a))


def _draw_gradient(surface: pygame.Surface, top: Color, bottom: Color, alpha: float) -> None:
    """Blend a vertical gradient from ``top`` to ``bottom`` over the playfield."""
    width, height = int(SCREEN_WIDTH), int(SCREEN_HEIGHT)
    layer = pygame.Surface((width, height + 1), pygame.SRCALPHA)
    for y in range(height):
        t = y / SCREEN_HEIGHT
        color = Color(
            top.r + (bottom.r - top.r) * t,
            top.g + (bottom.g - top.g) * t,
            top.b + (bottom.b - top.b) * t,
            alpha,
        )
        pygame.draw.line(layer, _to_rgba(color), (0, y), (width, y), 2)
    surface.blit(layer, (0, 0))


def _draw_centered(surface: pygame.Surface, text: str, y: float, size: float, color: Color, shift: float = 0.0) -> None:
    x = SCREEN_WIDTH / 2.0 - measure_text(text, size) / 2.0 + shift
    draw_text(surface, text, x, y + shift, size, color)


def _draw_glowing_title(
    surface: pygame.Surface, text: str, y: float, size: float, hue: float,
    layers: int, spread: float, strength: float, hue_step: float,
) -> None:
    for offset in range(layers):
        glow = get_rainbow_color((hue + offset * hue_step) % 360.0)
        alpha = strength / (offset + 1.0)
        _draw_centered(surface, text, y, size, Color(glow.r, glow.g, glow.b, alpha), offset * spread)
    _draw_centered(surface, text, y, size, get_rainbow_color(hue))


class Game:
    """A running match between a left player and a right player or computer."""

    def __init__(self, two_players: bool, rng: random.Random | None = None) -> None:
        self._rng = rng or random.Random()
        self.left_paddle = Paddle(PADDLE_MARGIN + PADDLE_WIDTH / 2.0, False)
        self.right_paddle = Paddle(SCREEN_WIDTH - PADDLE_MARGIN - PADDLE_WIDTH / 2.0, not two_players)
        self.ball = Ball(self._rng)
        self.left_score = 0
        self.right_score = 0
        self.phase = 0.0
        self.particles: list[Particle] = []
        self.screen_shake = 0.0
        self.shake_offset = Vector2(0.0, 0.0)
        self.ball.reset()

    def reset_ball(self) -> None:
        self.ball.reset()

    def update(self, dt: float, held) -> GameResult:
        """Advance one frame; ``held`` is the collection of keys currently down."""
        self.phase += dt * _PHASE_SPEED
        if self.phase >= 360.0:
            self.phase -= 360.0

        if self.screen_shake > 0.0:
            self.screen_shake -= dt * _SHAKE_DECAY
            self.shake_offset = Vector2(
                self._rng.uniform(-_SHAKE_AMPLITUDE, _SHAKE_AMPLITUDE) * self.screen_shake,
                self._rng.uniform(-_SHAKE_AMPLITUDE, _SHAKE_AMPLITUDE) * self.screen_shake,
            )
        else:
            self.shake_offset = Vector2(0.0, 0.0)

        held = set(held)
        left_keys = (Key.W in held, Key.S in held)
        right_keys = (Key.UP in held, Key.DOWN in held)
        ball_for_ai = Vector2(self.ball.position) if self.right_paddle.is_ai else None

        self.left_paddle.update(dt, None, left_keys)
        self.right_paddle.update(dt, ball_for_ai, right_keys)

        collision = self.ball.update(dt, self.left_paddle, self.right_paddle)
        if collision is not None:
            self.screen_shake = _SHAKE_ON_HIT
            self.particles.extend(create_particle_explosion(collision.position, collision.hue, _HIT_PARTICLES))

        for particle in self.particles:
            particle.update(dt)
        self.particles = [p for p in self.particles if p.is_alive()]

        scored_right = self.ball.scored()
        if scored_right is not None:
            if scored_right:
                self.right_score += 1
                if self.right_score >= WIN_SCORE:
                    return GameResult.RIGHT_WINS
            else:
                self.left_score += 1
                if self.left_score >= WIN_SCORE:
                    return GameResult.LEFT_WINS
            self.reset_ball()

        return GameResult.CONTINUE

    def draw(self, surface: pygame.Surface) -> None:
        """Render the playfield, shifted by the current screen shake."""
        shaking = self.shake_offset.length() > 0.0
        canvas = surface.copy() if shaking else surface
        self._draw_scene(canvas)
        if shaking:
            surface.blit(canvas, (round(-self.shake_offset.x), round(-self.shake_offset.y)))

    def _draw_scene(self, surface: pygame.Surface) -> None:
        _draw_gradient(
            surface,
            get_rainbow_color(self.phase),
            get_rainbow_color((self.phase + 180.0) % 360.0),
            0.05,
        )

        line = get_rainbow_color((self.phase + 90.0) % 360.0)
        dash = Color(line.r, line.g, line.b, 0.6)
        for i in range(20):
            y = (i * 30.0 + self.phase * 0.5) % SCREEN_HEIGHT
            draw_rectangle(surface, SCREEN_WIDTH / 2.0 - 2.0, y, 4.0, 15.0, dash)

        self.left_paddle.draw(surface, self.phase)
        self.right_paddle.draw(surface, self.phase)
        self.ball.draw(surface, self.phase)
        for particle in self.particles:
            particle.draw(surface, self.phase)

        borders = [get_rainbow_color((self.phase + shift) % 360.0) for shift in (0.0, 60.0, 120.0, 180.0)]
        draw_rectangle(surface, 0.0, 0.0, SCREEN_WIDTH, 5.0, borders[0])
        draw_rectangle(surface, 0.0, SCREEN_HEIGHT - 5.0, SCREEN_WIDTH, 5.0, borders[1])
        draw_rectangle(surface, 0.0, 0.0, 5.0, SCREEN_HEIGHT, borders[2])
        draw_rectangle(surface, SCREEN_WIDTH - 5.0, 0.0, 5.0, SCREEN_HEIGHT, borders[3])

        score_size = 60.0
        for text, centre, hue in (
            (str(self.left_score), SCREEN_WIDTH / 4.0, (self.phase + 30.0) % 360.0),
            (str(self.right_score), SCREEN_WIDTH * 3.0 / 4.0, (self.phase + 210.0) % 360.0),
        ):
            x = centre - measure_text(text, score_size) / 2.0
            draw_text(surface, text, x, 50.0, score_size, get_rainbow_color(hue))

    def draw_win_screen(self, surface: pygame.Surface, left_won: bool) -> None:
        _draw_gradient(
            surface,
            get_rainbow_color(self.phase),
            get_rainbow_color((self.phase + 120.0) % 360.0),
            0.3,
        )
        text = "LEFT PLAYER WINS!" if left_won else "RIGHT PLAYER WINS!"
        _draw_glowing_title(surface, text, SCREEN_HEIGHT / 2.0 - 50.0, 50.0, self.phase, 8, 3.0, 0.4, 30.0)
        _draw_centered(
            surface,
            "Press ENTER/SPACE to return to menu",
            SCREEN_HEIGHT / 2.0 + 50.0,
            25.0,
            Color(0.8, 0.8, 0.8, 0.9),
        )

    def draw_pause_screen(self, surface: pygame.Surface) -> None:
        draw_rectangle(surface, 0.0, 0.0, SCREEN_WIDTH, SCREEN_HEIGHT, Color(0.0, 0.0, 0.0, 0.7))

        _draw_glowing_title(surface, "PAUSED", SCREEN_HEIGHT / 2.0 - 100.0, 70.0, self.phase, 10, 4.0, 0.5, 25.0)
        _draw_centered(
            surface,
            "Press P or ESC to resume",
            SCREEN_HEIGHT / 2.0 + 20.0,
            28.0,
            get_rainbow_color((self.phase + 180.0) % 360.0),
        )

        info_size = 20.0
        draw_text(
            surface,
            f"Left: {self.left_score}",
            50.0,
            SCREEN_HEIGHT / 2.0 + 80.0,
            info_size,
            get_rainbow_color((self.phase + 30.0) % 360.0),
        )
        draw_text(
            surface,
            f"Right: {self.right_score}",
            SCREEN_WIDTH - 150.0,
            SCREEN_HEIGHT / 2.0 + 80.0,
            info_size,
            get_rainbow_color((self.phase + 210.0) % 360.0),
        )
        _draw_centered(
            surface,
            f"First to {WIN_SCORE} wins",
            SCREEN_HEIGHT / 2.0 + 120.0,
            info_size,
            Color(0.7, 0.7, 0.7, 0.8),
        )