"""The red car, steered with W, A, S and D."""

from __future__ import annotations

import pygame

from .entity import Entity

CAR_WIDTH = 25
CAR_HEIGHT = 50
TURN_STEP = 5.0


def make_car_texture():
    """A plain red rectangle the size of the car."""
    surface = pygame.Surface((CAR_WIDTH, CAR_HEIGHT), pygame.SRCALPHA)
    surface.fill((255, 0, 0, 255))
    return surface


class Car(Entity):
    """An entity driven forwards and backwards by the keyboard."""

    def handle_input(self, keystate):
        """Apply turning and thrust from the pressed keys, then move."""
        if keystate[pygame.K_a]:
            self.turn(-TURN_STEP)
        if keystate[pygame.K_d]:
            self.turn(TURN_STEP)
        if keystate[pygame.K_w]:
            self.thrust(self.accel)
        if keystate[pygame.K_s]:
            self.thrust(-self.accel)
        self.update()

    def render(self, surface):
        """Draw the car at its position and heading."""
        super().render(surface, CAR_WIDTH, CAR_HEIGHT)


def load_car():
    """A car at its starting place, ready to drive."""
    return Car(
        x=100.0,
        y=650.0,
        angle=0.0,
        speed=0.0,
        accel=0.2,
        max_speed=3.0,
        friction=0.03,
        texture=make_car_texture(),
    )