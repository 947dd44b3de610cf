"""Colour helpers, particles, trails and alpha-aware drawing primitives."""

from __future__ import annotations

import math
from collections import deque
from dataclasses import dataclass, field
from functools import lru_cache

import pygame
from pygame.math import Vector2

from .consts import PARTICLE_COUNT, TRAIL_LENGTH


@dataclass(frozen=True)
class Color:
    """An RGBA colour with float channels, nominally in 0..1."""

    r: float
    g: float
    b: float
    a: float = 1.0


def _channel(value: float) -> int:
    return round(min(1.0, max(0.0, value)) * 255)


def _rgba(color: Color) -> tuple[int, int, int, int]:
    return (_channel(color.r), _channel(color.g), _channel(color.b), _channel(color.a))


def hsv_to_rgb(h: float, s: float, v: float) -> tuple[float, float, float]:
    """Convert a hue in 0..1 with saturation and value to an RGB triple."""
    c = v * s
    x = c * (1.0 - abs(math.fmod(h * 6.0, 2.0) - 1.0))
    m = v - c

    if h < 1.0 / 6.0:
        r, g, b = c, x, 0.0
    elif h < 2.0 / 6.0:
        r, g, b = x, c, 0.0
    elif h < 3.0 / 6.0:
        r, g, b = 0.0, c, x
    elif h < 4.0 / 6.0:
        r, g, b = 0.0, x, c
    elif h < 5.0 / 6.0:
        r, g, b = x, 0.0, c
    else:
        r, g, b = c, 0.0, x

    return (r + m, g + m, b + m)


def get_rainbow_color(hue: float) -> Color:
    """Fully saturated, opaque colour for a hue given in degrees."""
    r, g, b = hsv_to_rgb(hue / 360.0, 1.0, 1.0)
    return Color(r, g, b, 1.0)


def draw_circle(surface: pygame.Surface, x: float, y: float, radius: float, color: Color) -> None:
    """Draw a filled circle, blending by the colour's alpha."""
    if radius <= 0:
        return
    size = math.ceil(radius * 2) + 2
    layer = pygame.Surface((size, size), pygame.SRCALPHA)
    centre = size / 2
    pygame.draw.circle(layer, _rgba(color), (centre, centre), radius)
    surface.blit(layer, (round(x - centre), round(y - centre)))


def draw_rectangle(surface: pygame.Surface, x: float, y: float, w: float, h: float, color: Color) -> None:
    """Draw a filled rectangle, blending by the colour's alpha."""
    if w <= 0 or h <= 0:
        return
    layer = pygame.Surface((math.ceil(w), math.ceil(h)), pygame.SRCALPHA)
    layer.fill(_rgba(color))
    surface.blit(layer, (round(x), round(y)))


def draw_rectangle_lines(
    surface: pygame.Surface, x: float, y: float, w: float, h: float, thickness: float, color: Color
) -> None:
    """Draw a rectangle outline whose border lies inside the given bounds."""
    if w <= 0 or h <= 0:
        return
    layer = pygame.Surface((math.ceil(w), math.ceil(h)), pygame.SRCALPHA)
    pygame.draw.rect(layer, _rgba(color), layer.get_rect(), max(1, round(thickness)))
    surface.blit(layer, (round(x), round(y)))


def draw_line(
    surface: pygame.Surface, x1: float, y1: float, x2: float, y2: float, thickness: float, color: Color
) -> None:
    """Draw a straight line segment, blending by the colour's alpha."""
    width = max(1, round(thickness))
    left = math.floor(min(x1, x2)) - width
    top = math.floor(min(y1, y2)) - width
    right = math.ceil(max(x1, x2)) + width
    bottom = math.ceil(max(y1, y2)) + width
    layer = pygame.Surface((right - left, bottom - top), pygame.SRCALPHA)
    pygame.draw.line(layer, _rgba(color), (x1 - left, y1 - top), (x2 - left, y2 - top), width)
    surface.blit(layer, (left, top))


@lru_cache(maxsize=None)
def _font(font_size: int) -> pygame.font.Font:
    if not pygame.font.get_init():
        pygame.font.init()
    return pygame.font.Font(None, int(font_size))


def measure_text(text: str, font_size: float) -> float:
    """Rendered width of ``text`` at the given font size."""
    return float(_font(int(font_size)).size(text)[0])


def draw_text(surface: pygame.Surface, text: str, x: float, y: float, font_size: float, color: Color) -> None:
    """Draw text with its baseline at ``y``."""
    font = _font(int(font_size))
    rgba = _rgba(color)
    image = font.render(text, True, rgba[:3])
    image.set_alpha(rgba[3])
    surface.blit(image, (round(x), round(y - font.get_ascent())))


def draw_glow(surface: pygame.Surface, position: Vector2, size: float, color: Color, intensity: float) -> None:
    """Draw a soft halo of concentric translucent circles."""
    for i in range(5):
        alpha = intensity * (1.0 - i / 5.0) * 0.3
        scale = 1.0 + i * 0.3
        draw_circle(surface, position.x, position.y, size * scale, Color(color.r, color.g, color.b, alpha))


@dataclass
class Particle:
    """A fading spark that drifts and slows down."""

    position: Vector2
    velocity: Vector2
    hue: float
    lifetime: float = 1.0

    def __post_init__(self) -> None:
        self.position = Vector2(self.position)
        self.velocity = Vector2(self.velocity)

    def update(self, dt: float) -> None:
        self.position += self.velocity * dt
        self.lifetime -= dt
        self.velocity *= 0.98

    def is_alive(self) -> bool:
        return self.lifetime > 0.0

    def draw(self, surface: pygame.Surface, phase: float) -> None:
        r, g, b = hsv_to_rgb(((self.hue + phase) % 360.0) / 360.0, 1.0, 1.0)
        draw_circle(surface, self.position.x, self.position.y, 3.0 * self.lifetime, Color(r, g, b, self.lifetime))


@dataclass
class TrailPoint:
    """One fading sample of a trail."""

    position: Vector2
    time: float
    hue: float


@dataclass
class Trail:
    """A bounded sequence of fading points left behind a moving object."""

    points: deque = field(default_factory=lambda: deque(maxlen=TRAIL_LENGTH))

    def add_point(self, position: Vector2, hue: float) -> None:
        self.points.append(TrailPoint(Vector2(position), 1.0, hue))

    def update(self, dt: float) -> None:
        for point in self.points:
            point.time -= dt * 2.0
        self.points = deque((p for p in self.points if p.time > 0.0), maxlen=TRAIL_LENGTH)

    def draw(self, surface: pygame.Surface, phase: float) -> None:
        for point in self.points:
            r, g, b = hsv_to_rgb(((point.hue + phase) % 360.0) / 360.0, 1.0, 1.0)
            draw_circle(
                surface,
                point.position.x,
                point.position.y,
                5.0 * point.time,
                Color(r, g, b, point.time * 0.6),
            )


def create_particle_explosion(position: Vector2, hue: float, count: int) -> list[Particle]:
    """Spread up to ``PARTICLE_COUNT`` particles evenly around a point."""
    actual = min(count, PARTICLE_COUNT)
    particles = []
    for i in range(actual):
        angle = (i / actual) * math.pi * 2.0
        speed = 100.0 + (i % 3) * 50.0
        velocity = Vector2(math.cos(angle) * speed, math.sin(angle) * speed)
        particles.append(Particle(Vector2(position), velocity, hue))
    return particles