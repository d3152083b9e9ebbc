"""Movable sprite with heading, thrust and friction."""

from __future__ import annotations

import math
from dataclasses import dataclass
from pathlib import Path

import pygame


def load_texture(filepath):
    """Load an image file into a surface."""
    path = Path(filepath)
    if not path.is_file():
        raise FileNotFoundError(f"texture not found: {path}")
    return pygame.image.load(str(path))


def _draw_rotated(surface, image, dst, angle):
    """Scale ``image`` into ``dst`` and draw it turned clockwise by ``angle`` degrees."""
    scaled = pygame.transform.scale(image, (dst.width, dst.height))
    rotated = pygame.transform.rotate(scaled, -angle)
    surface.blit(rotated, rotated.get_rect(center=dst.center))


@dataclass
class Entity:
    """A position, a heading in degrees and a speed along that heading."""

    x: float = 0.0
    y: float = 0.0
    angle: float = 0.0
    speed: float = 0.0
    max_speed: float = 0.0
    accel: float = 0.0
    friction: float = 0.0
    texture: pygame.Surface | None = None

    def turn(self, angle_delta):
        """Rotate the heading by ``angle_delta`` degrees."""
        self.angle += angle_delta

    def thrust(self, amount):
        """Change speed by ``amount``, clamped to plus or minus ``max_speed``."""
        self.speed = max(-self.max_speed, min(self.max_speed, self.speed + amount))

    def update(self):
        """Move one step along the heading, then let friction slow the entity."""
        angle_rad = math.radians(self.angle - 90.0)
        self.x += math.cos(angle_rad) * self.speed
        self.y += math.sin(angle_rad) * self.speed

        if self.speed > 0:
            self.speed = max(0.0, self.speed - self.friction)
        elif self.speed < 0:
            self.speed = min(0.0, self.speed + self.friction)

    def rect(self, width, height):
        """The screen rectangle occupied by the entity at the given size."""
        return pygame.Rect(int(self.x), int(self.y), width, height)

    def collides_with(self, other, width, height, other_width, other_height):
        """Whether the two entities' rectangles overlap."""
        a = self.rect(width, height)
        b = other.rect(other_width, other_height)
        if a.width <= 0 or a.height <= 0 or b.width <= 0 or b.height <= 0:
            return False
        return a.colliderect(b)

    def render(self, surface, width, height):
        """Draw the texture at the entity's position, rotated to its heading."""
        if self.texture is None:
            return
        _draw_rotated(surface, self.texture, self.rect(width, height), self.angle)

    def unload(self):
        """Release the texture."""
        self.texture = None