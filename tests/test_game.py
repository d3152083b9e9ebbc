import pytest

from flyingtank.car import load_car
from flyingtank.game import main, resolve_collision
from flyingtank.tank import Tank


def test_collision_stops_both(capsys):
    tank = Tank(x=0, y=0, speed=2.5)
    car = load_car()
    car.x, car.y, car.speed = 100, 100, 1.5
    assert resolve_collision(tank, car) is True
    assert tank.speed == 0.0
    assert car.speed == 0.0
    assert "Tank collided with Car!" in capsys.readouterr().out


def test_no_collision_keeps_speeds(capsys):
    tank = Tank(x=0, y=0, speed=2.5)
    car = load_car()
    car.speed = 1.5
    assert resolve_collision(tank, car) is False
    assert tank.speed == pytest.approx(2.5)
    assert car.speed == pytest.approx(1.5)
    assert capsys.readouterr().out == ""


def test_collision_edge_is_not_contact():
    tank = Tank(x=0, y=0, speed=1.0)
    car = load_car()
    car.x, car.y, car.speed = 208, 0, 1.0
    assert resolve_collision(tank, car) is False
    assert tank.speed == pytest.approx(1.0)


def test_main_fails_without_assets(tmp_path, monkeypatch, capsys):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    monkeypatch.setenv("SDL_AUDIODRIVER", "dummy")
    result = main(["--assets", str(tmp_path / "missing")])
    assert result == 1
    assert "Failed to load tank." in capsys.readouterr().out