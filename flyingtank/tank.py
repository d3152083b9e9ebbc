"""The flying tank with its animated exhaust flame."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from pathlib import Path

import pygame

from .entity import Entity, load_texture
from .exhaust_flame import ExhaustFlame, load_flame

TANK_SIZE = 208
TURN_STEP = 5.0
FLAME_FRAMES = 4


@dataclass
class MountPoint:
    """Offset from the tank's centre, in the tank's own frame."""

    offset_x: float = 0.0
    offset_y: float = 53.0


@dataclass
class Tank(Entity):
    """An entity driven with the arrow keys, trailing an exhaust flame."""

    exhaust_mount: MountPoint = field(default_factory=MountPoint)
    flame: ExhaustFlame | None = None

    def handle_input(self, keystate):
        """Apply turning and forward thrust from the arrow keys, then move."""
        if keystate[pygame.K_LEFT]:
            self.turn(-TURN_STEP)
        if keystate[pygame.K_RIGHT]:
            self.turn(TURN_STEP)
        if keystate[pygame.K_UP]:
            self.thrust(self.accel)
        self.update()

    def exhaust_position(self):
        """Where the flame is drawn: the mount point rotated with the tank."""
        angle_rad = math.radians(self.angle)
        cos_a = math.cos(angle_rad)
        sin_a = math.sin(angle_rad)
        cx = self.x + TANK_SIZE // 2
        cy = self.y + TANK_SIZE // 2
        mount = self.exhaust_mount
        fx = cx + mount.offset_x * cos_a - mount.offset_y * sin_a
        fy = cy + mount.offset_x * sin_a + mount.offset_y * cos_a
        return fx, fy

    def render(self, surface, keystate, now):
        """Draw the tank, and the flame while any steering key is held."""
        super().render(surface, TANK_SIZE, TANK_SIZE)
        steering = keystate[pygame.K_LEFT] or keystate[pygame.K_RIGHT] or keystate[pygame.K_UP]
        if steering and self.flame is not None:
            fx, fy = self.exhaust_position()
            self.flame.update(now)
            self.flame.render(surface, fx, fy, self.angle)

    def unload(self):
        """Release the tank's texture and flame frames."""
        super().unload()
        if self.flame is not None:
            self.flame.unload()


def load_tank(assets_dir, now):
    """Load the tank and its flame from ``assets_dir`` and place it mid-screen."""
    assets = Path(assets_dir)
    texture = load_texture(assets / "tank.png")
    flame = load_flame(str(assets / "exhaust-flame"), FLAME_FRAMES, now)
    return Tank(
        x=500.0 - 104,
        y=375.0 - 104,
        angle=0.0,
        speed=0.0,
        max_speed=5.0,
        accel=0.3,
        friction=0.05,
        texture=texture,
        exhaust_mount=MountPoint(0.0, 53.0),
        flame=flame,
    )