"""Title screen with drifting stars, floating sparks and a mode selector."""

from __future__ import annotations

import math
import random
from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum

import pygame
from pygame.math import Vector2

from .consts import SCREEN_HEIGHT, SCREEN_WIDTH, WIN_SCORE, Key
from .effects import (
    Color,
    draw_circle,
    draw_line,
    draw_rectangle,
    draw_rectangle_lines,
    draw_text,
    get_rainbow_color,
    measure_text,
)

_STAR_COUNT = 30
_FLOATER_COUNT = 15
_PHASE_SPEED = 60.0

_OPTIONS = ("1 PLAYER", "2 PLAYERS")
_BOX_WIDTH = 300.0
_BOX_HEIGHT = 70.0
_OPTION_SIZE = 40.0
_CONTROLS_SIZE = 18.0


class MenuChoice(Enum):
    """What the player picked on this frame, if anything."""

    NONE = "none"
    ONE_PLAYER = "one_player"
    TWO_PLAYERS = "two_players"


_CHOICES = (MenuChoice.ONE_PLAYER, MenuChoice.TWO_PLAYERS)


@dataclass
class Star:
    """A twinkling star falling slowly down the title screen."""

    position: Vector2
    size: float
    brightness: float
    speed: float


@dataclass
class _Floater:
    position: Vector2
    velocity: Vector2
    hue: float


def _to_rgba(color: Color) -> tuple[int, int, int, int]:
    return tuple(round(min(1.0, max(0.0, c)) * 255) for c in (color.r, color.g, color.b, color.a))


def _lerp(a: Color, b: Color, t: float, alpha: float) -> Color:
    return Color(a.r + (b.r - a.r) * t, a.g + (b.g - a.g) * t, a.b + (b.b - a.b) * t, alpha)


class Menu:
    """The main menu: animates its backdrop and lets the player choose a mode."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng or random.Random()
        self.phase = 0.0
        self.selected_option = 0
        self.stars = [
            Star(
                position=Vector2(self._rng.uniform(0.0, SCREEN_WIDTH), self._rng.uniform(0.0, SCREEN_HEIGHT)),
                size=self._rng.uniform(2.0, 5.0),
                brightness=self._rng.uniform(0.3, 1.0),
                speed=self._rng.uniform(20.0, 50.0),
            )
            for _ in range(_STAR_COUNT)
        ]
        self.floating_particles = [
            _Floater(
                position=Vector2(self._rng.uniform(0.0, SCREEN_WIDTH), self._rng.uniform(0.0, SCREEN_HEIGHT)),
                velocity=Vector2(self._rng.uniform(-30.0, 30.0), self._rng.uniform(-30.0, 30.0)),
                hue=self._rng.uniform(0.0, 360.0),
            )
            for _ in range(_FLOATER_COUNT)
        ]

    def update(self, dt: float, pressed: Iterable[Key]) -> MenuChoice:
        """Animate by ``dt`` and react to the keys pressed this frame."""
        pressed = set(pressed)
        self.phase += dt * _PHASE_SPEED
        if self.phase >= 360.0:
            self.phase -= 360.0

        for star in self.stars:
            star.position.y += star.speed * dt
            star.brightness = math.sin(self.phase * 0.1 + star.position.y * 0.01) * 0.5 + 0.5
            if star.position.y > SCREEN_HEIGHT + 10.0:
                star.position.y = -10.0
                star.position.x = self._rng.uniform(0.0, SCREEN_WIDTH)

        for floater in self.floating_particles:
            floater.position += floater.velocity * dt
            floater.hue += dt * 30.0
            if floater.hue >= 360.0:
                floater.hue -= 360.0
            if floater.position.x < 0.0 or floater.position.x > SCREEN_WIDTH:
                floater.velocity.x = -floater.velocity.x
            if floater.position.y < 0.0 or floater.position.y > SCREEN_HEIGHT:
                floater.velocity.y = -floater.velocity.y
            floater.position.x = min(max(floater.position.x, 0.0), SCREEN_WIDTH)
            floater.position.y = min(max(floater.position.y, 0.0), SCREEN_HEIGHT)

        if Key.UP in pressed or Key.W in pressed:
            self.selected_option = 1 if self.selected_option == 0 else 0
        if Key.DOWN in pressed or Key.S in pressed:
            self.selected_option = 0 if self.selected_option == 1 else 1

        if Key.ENTER in pressed or Key.SPACE in pressed:
            return _CHOICES[self.selected_option]
        return MenuChoice.NONE

    def draw(self, surface: pygame.Surface) -> None:
        self._draw_stars(surface)
        self._draw_floaters(surface)
        self._draw_background(surface)
        self._draw_title(surface)
        for index, label in enumerate(_OPTIONS):
            self._draw_option(surface, index, label)
        self._draw_info(surface)

    def _draw_stars(self, surface: pygame.Surface) -> None:
        for star in self.stars:
            c = get_rainbow_color((self.phase + star.position.x * 0.1) % 360.0)
            x, y = star.position.x, star.position.y
            draw_circle(surface, x, y, star.size, Color(c.r, c.g, c.b, star.brightness * 0.8))
            draw_circle(surface, x, y, star.size * 0.5, Color(1.0, 1.0, 1.0, star.brightness))

    def _draw_floaters(self, surface: pygame.Surface) -> None:
        for floater in self.floating_particles:
            c = get_rainbow_color((floater.hue + self.phase) % 360.0)
            x, y = floater.position.x, floater.position.y
            draw_circle(surface, x, y, 8.0, Color(c.r, c.g, c.b, 0.6))
            draw_circle(surface, x, y, 4.0, Color(c.r * 1.5, c.g * 1.5, c.b * 1.5, 0.8))

    def _draw_background(self, surface: pygame.Surface) -> None:
        first = get_rainbow_color(self.phase)
        second = get_rainbow_color((self.phase + 120.0) % 360.0)
        third = get_rainbow_color((self.phase + 240.0) % 360.0)
        width, height = int(SCREEN_WIDTH), int(SCREEN_HEIGHT)
        layer = pygame.Surface((width, height + 1), pygame.SRCALPHA)
        for y in range(height):
            t = y / SCREEN_HEIGHT
            if t < 0.5:
                color = _lerp(first, second, t * 2.0, 0.15)
            else:
                color = _lerp(second, third, (t - 0.5) * 2.0, 0.15)
            pygame.draw.line(layer, _to_rgba(color), (0, y), (width, y), 2)
        surface.blit(layer, (0, 0))

    def _draw_title(self, surface: pygame.Surface) -> None:
        text, size = "PONG", 80.0
        x = SCREEN_WIDTH / 2.0 - measure_text(text, size) / 2.0
        y = SCREEN_HEIGHT / 2.0 - 150.0
        for offset in range(5):
            shift = offset * 2.0
            glow = get_rainbow_color((self.phase + offset * 20.0) % 360.0)
            alpha = 0.3 / (offset + 1.0)
            draw_text(surface, text, x + shift, y + shift, size, Color(glow.r, glow.g, glow.b, alpha))
        draw_text(surface, text, x, y, size, get_rainbow_color(self.phase))

    def _draw_option(self, surface: pygame.Surface, index: int, label: str) -> None:
        selected = index == self.selected_option
        y_pos = SCREEN_HEIGHT / 2.0 + index * 80.0
        hue = (self.phase + index * 60.0) % 360.0
        box_x = SCREEN_WIDTH / 2.0 - _BOX_WIDTH / 2.0
        box_y = y_pos - _BOX_HEIGHT / 2.0

        glow_size = 10.0 if selected else 0.0
        pulse = math.sin(self.phase * 2.0) * 0.3 + 0.7 if selected else 1.0

        for offset in range(5):
            glow = get_rainbow_color((hue + offset * 20.0) % 360.0)
            draw_rectangle(
                surface,
                box_x - glow_size + offset,
                box_y - glow_size + offset,
                _BOX_WIDTH + glow_size * 2.0 - offset * 2.0,
                _BOX_HEIGHT + glow_size * 2.0 - offset * 2.0,
                Color(glow.r, glow.g, glow.b, 0.3 / (offset + 1.0) * pulse),
            )

        if selected:
            box = get_rainbow_color(hue)
            fill = Color(box.r * 0.3, box.g * 0.3, box.b * 0.3, 0.6)
        else:
            fill = Color(0.2, 0.2, 0.2, 0.4)
        draw_rectangle(surface, box_x, box_y, _BOX_WIDTH, _BOX_HEIGHT, fill)
        draw_rectangle_lines(
            surface, box_x, box_y, _BOX_WIDTH, _BOX_HEIGHT, 3.0, get_rainbow_color((hue + 90.0) % 360.0)
        )

        text_x = SCREEN_WIDTH / 2.0 - measure_text(label, _OPTION_SIZE) / 2.0
        if selected:
            accent = get_rainbow_color(hue)
            for offset in range(3):
                shift = offset * 3.0
                alpha = pulse * 0.6 / (offset + 1.0)
                draw_text(
                    surface, label, text_x + shift, y_pos + shift, _OPTION_SIZE,
                    Color(accent.r, accent.g, accent.b, alpha),
                )

        base = Color(1.0, 1.0, 1.0, 1.0) if selected else Color(0.9, 0.9, 0.9, 0.9)
        draw_text(surface, label, text_x, y_pos, _OPTION_SIZE, base)

        if selected:
            draw_text(
                surface, ">", text_x - 40.0, y_pos, _OPTION_SIZE,
                get_rainbow_color((self.phase + 180.0) % 360.0),
            )

    def _draw_info(self, surface: pygame.Surface) -> None:
        phase = self.phase
        draw_text(surface, "Version 1.0", 20.0, 20.0, 16.0, get_rainbow_color((phase + 45.0) % 360.0))

        x = SCREEN_WIDTH - 200.0
        y_start = SCREEN_HEIGHT / 2.0 - 200.0
        draw_text(surface, "CONTROLS:", x, y_start, _CONTROLS_SIZE, get_rainbow_color(phase))
        draw_text(
            surface, "LEFT: W / S", x, y_start + 25.0, _CONTROLS_SIZE,
            get_rainbow_color((phase + 30.0) % 360.0),
        )

        right_y = y_start + 50.0
        right_color = get_rainbow_color((phase + 60.0) % 360.0)
        draw_text(surface, "RIGHT:", x, right_y, _CONTROLS_SIZE, right_color)

        arrow_x = x + measure_text("RIGHT: ", _CONTROLS_SIZE)
        arrow = 8.0
        up_color = get_rainbow_color((phase + 90.0) % 360.0)
        draw_line(surface, arrow_x, right_y - arrow, arrow_x, right_y, 2.0, up_color)
        draw_line(surface, arrow_x, right_y - arrow, arrow_x - arrow * 0.6, right_y - arrow * 0.3, 2.0, up_color)
        draw_line(surface, arrow_x, right_y - arrow, arrow_x + arrow * 0.6, right_y - arrow * 0.3, 2.0, up_color)

        draw_text(surface, " / ", arrow_x + 15.0, right_y, _CONTROLS_SIZE, right_color)

        down_color = get_rainbow_color((phase + 120.0) % 360.0)
        down_x = arrow_x + 35.0
        draw_line(surface, down_x, right_y + arrow, down_x, right_y, 2.0, down_color)
        draw_line(surface, down_x, right_y + arrow, down_x - arrow * 0.6, right_y + arrow * 0.3, 2.0, down_color)
        draw_line(surface, down_x, right_y + arrow, down_x + arrow * 0.6, right_y + arrow * 0.3, 2.0, down_color)

        draw_text(
            surface, f"SCORE TO {WIN_SCORE} TO WIN", x, y_start + 75.0, _CONTROLS_SIZE,
            get_rainbow_color((phase + 90.0) % 360.0),
        )

        instruction = "Use ARROWS/W-S to navigate, ENTER/SPACE to select"
        draw_text(
            surface,
            instruction,
            SCREEN_WIDTH / 2.0 - measure_text(instruction, 20.0) / 2.0,
            SCREEN_HEIGHT - 100.0,
            20.0,
            Color(0.7, 0.7, 0.7, 0.8),
        )