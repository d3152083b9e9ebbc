"""Window, main loop and collision handling for the flying tank game."""

from __future__ import annotations

import argparse

import pygame

from .car import CAR_HEIGHT, CAR_WIDTH, load_car
from .exhaust_flame import FlameLoadError
from .tank import TANK_SIZE, load_tank

WINDOW_WIDTH = 1000
WINDOW_HEIGHT = 750
FRAME_DELAY_MS = 16


def resolve_collision(tank, car):
    """Stop both vehicles if they overlap; report whether they did."""
    if not tank.collides_with(car, TANK_SIZE, TANK_SIZE, CAR_WIDTH, CAR_HEIGHT):
        return False
    print("Tank collided with Car!")
    tank.speed = 0.0
    car.speed = 0.0
    return True


def _parse_args(argv):
    parser = argparse.ArgumentParser(prog="flyingtank", description="Flying Tank")
    parser.add_argument("--assets", default="assets", help="directory holding the images")
    return parser.parse_args(argv)


def main(argv=None):
    """Run the game until the window is closed or Escape is pressed."""
    args = _parse_args(argv)
    pygame.init()
    try:
        try:
            screen = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT))
        except pygame.error as exc:
            print(f"CreateWindow Error: {exc}")
            return 1
        pygame.display.set_caption("Flying Tank")

        try:
            tank = load_tank(args.assets, pygame.time.get_ticks())
        except (OSError, pygame.error, FlameLoadError):
            print("Failed to load tank.")
            return 1

        car = load_car()

        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                    running = False

            resolve_collision(tank, car)

            keystate = pygame.key.get_pressed()
            tank.handle_input(keystate)
            car.handle_input(keystate)

            screen.fill((0, 0, 0))
            tank.render(screen, keystate, pygame.time.get_ticks())
            car.render(screen)
            pygame.display.flip()
            pygame.time.delay(FRAME_DELAY_MS)

        tank.unload()
        car.unload()
        return 0
    finally:
        pygame.quit()