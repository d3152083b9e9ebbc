# flyingtank

A small top-down arcade game. You drive two vehicles in the same 1000×750
window, called "Flying Tank":

- **The tank** uses the arrow keys. Left and right turn it, and Up gives it
  forward thrust. The Down key does nothing, so the tank cannot reverse.
  While Left, Right or Up is held, an animated exhaust flame shows behind
  the tank.
- **The car** uses W, A, S and D. A and D turn it, W moves it forward and
  S moves it back.

Both vehicles have a top speed and slow down on their own through friction.
When their rectangles overlap, both stop dead, and the console prints
`Tank collided with Car!`. To quit, press Escape or close the window.

## Installation

```
pip install .
```

The game needs `pygame`.

## Running

The game reads its images from an assets directory, `assets` in the current
directory by default. It must hold:

- `tank.png`: the tank sprite, drawn at 208×208.
- `exhaust-flame0.png` to `exhaust-flame3.png`: the frames of the exhaust
  flame animation, drawn at 32×32. The flame moves on to the next frame
  when more than 100 ms have passed.

The car has no image file. It is a plain red 25×50 rectangle.

Run the game with:

```
flyingtank
```

To read the images from another directory:

```
flyingtank --assets path/to/images
```

If the window cannot be opened, the game prints `CreateWindow Error: ...`
and exits with status 1. If the tank's images cannot be loaded, it prints
`Failed to load tank.` and exits with status 1.

## Using the pieces

The game logic works without a window, so you can reuse it or test it on
its own:

- `flyingtank.entity.Entity` is a moving body. It has a position (`x`, `y`),
  a heading `angle` in degrees, a `speed`, an `accel`, a `max_speed`, a
  `friction` and an optional `texture`. Its methods are `turn`, `thrust`
  (which clamps the speed to plus or minus `max_speed`), `update` (one step
  of movement, then friction), `rect`, `collides_with`, `render` and
  `unload`. `flyingtank.entity.load_texture(filepath)` loads an image and
  raises `FileNotFoundError` if the file is missing.
- `flyingtank.car.load_car()` builds the car at (100, 650).
  `Car.handle_input(keystate)` applies the W, A, S, D keys and moves the
  car one step.
- `flyingtank.tank.load_tank(assets_dir, now)` builds the tank in the
  middle of the window, with its exhaust flame. `Tank.handle_input(keystate)`
  applies the arrow keys and moves the tank one step;
  `Tank.exhaust_position()` gives the point where the flame is drawn.
- `flyingtank.exhaust_flame.load_flame(basepath, frame_count, now)` loads
  `<basepath>0.png` and onwards, at most 8 frames, and raises
  `FlameLoadError` if there are too many frames or one cannot be loaded.
- `flyingtank.game.resolve_collision(tank, car)` stops both vehicles if they
  overlap and returns whether they did.

A heading of 0 degrees points up the screen. Positive angles turn clockwise.

## What it does not do

There is no score, no level, no sound and no menu. The two vehicles only
drive, stop each other on contact, and leave the window if driven off its
edge.

## Development

```
pip install .[test]
pytest
```