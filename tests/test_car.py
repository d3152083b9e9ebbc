import pygame
import pytest

from flyingtank.car import CAR_HEIGHT, CAR_WIDTH, Car, load_car, make_car_texture


class Pressed:
    def __init__(self, *keys):
        self.keys = set(keys)

    def __getitem__(self, key):
        return key in self.keys


def test_texture_is_red_and_car_sized():
    texture = make_car_texture()
    assert texture.get_size() == (CAR_WIDTH, CAR_HEIGHT)
    assert tuple(texture.get_at((12, 25))) == (255, 0, 0, 255)


def test_load_car_starting_state():
    car = load_car()
    assert (car.x, car.y) == (100.0, 650.0)
    assert car.angle == 0.0
    assert car.speed == 0.0
    assert car.accel == pytest.approx(0.2)
    assert car.max_speed == pytest.approx(3.0)
    assert car.friction == pytest.approx(0.03)
    assert car.texture.get_size() == (25, 50)


def test_no_keys_keeps_car_still():
    car = load_car()
    car.handle_input(Pressed())
    assert (car.x, car.y, car.angle, car.speed) == (100.0, 650.0, 0.0, 0.0)


def test_w_drives_forward():
    car = load_car()
    car.handle_input(Pressed(pygame.K_w))
    assert car.y == pytest.approx(650.0 - car.accel)
    assert car.speed == pytest.approx(car.accel - car.friction)


def test_s_drives_backward():
    car = load_car()
    car.handle_input(Pressed(pygame.K_s))
    assert car.y > 650.0
    assert car.speed == pytest.approx(-(car.accel - car.friction))


def test_a_and_d_turn():
    car = load_car()
    car.handle_input(Pressed(pygame.K_d))
    car.handle_input(Pressed(pygame.K_d))
    assert car.angle == pytest.approx(10.0)
    car.handle_input(Pressed(pygame.K_a))
    assert car.angle == pytest.approx(5.0)


def test_speed_never_exceeds_max():
    car = load_car()
    for _ in range(200):
        car.handle_input(Pressed(pygame.K_w))
        assert car.speed <= car.max_speed


def test_render_draws_red_car():
    target = pygame.Surface((60, 80))
    target.fill((0, 0, 0))
    car = Car(x=10, y=10, texture=make_car_texture())
    car.render(target)
    assert tuple(target.get_at((20, 30)))[:3] == (255, 0, 0)
    assert tuple(target.get_at((50, 70)))[:3] == (0, 0, 0)