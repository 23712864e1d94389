# bouncy

A small 2D physics toy. A window fills with coloured balls that move at a steady
speed and bounce off each other and off the four walls of the window. Every
collision is perfectly elastic. A ball that hits a wall keeps its speed, and its
velocity is mirrored about the wall's normal. Two balls that meet exchange
velocity according to their masses.

## Installing

```
pip install .
```

This also installs `pygame`, which draws the window.

## Running

```
bouncy
```

A 900×900 window opens with between 10 and 30 balls. Each ball gets a random
mass between 1 and 5 and a radius of `10 * sqrt(mass)`. Each ball also gets a
random colour: red, green, blue, yellow, purple or orange. Its velocity has x
and y components of 80 to 100 each, with random signs. New balls are never
placed on top of existing ones.

`bouncy --help` shows a short description. The command takes no other options.

### Keys

| Key   | Effect                                   |
|-------|------------------------------------------|
| `+`   | add a ball (Shift and `=`), up to 30     |
| `-`   | remove the oldest ball                   |
| `Esc` | quit (closing the window works too)      |

## What is not included

The package does not ship the ball image. At start-up the program reads
`assets/ball.png`, relative to the directory it is started from. Each ball is
drawn with that image, tinted to the ball's colour. If the file cannot be
loaded, the program stops with a `RuntimeError`.

## Using the pieces

The simulation parts work without a window:

```python
from bouncy.vec import Vec2
from bouncy.ball import Ball, BallColor
from bouncy.wall import Wall

a = Ball(Vec2(0, 0), 10, 1, Vec2(5, 0), BallColor.RED)
b = Ball(Vec2(15, 0), 10, 1, Vec2(-5, 0), BallColor.BLUE)
if a.is_colliding(b):
    a.collide(b)          # equal masses: the velocities are swapped

floor = Wall(Vec2(0, 100), Vec2(100, 0))
print(floor.normal())     # unit vector perpendicular to the wall
```

The parts are:

- `bouncy.vec`: `Vec2` is an immutable vector. It supports `+`, `-`, scalar
  `*` and `/`, and has `dot`, `dist`, `length` and `normalize`.
- `bouncy.wall`: `Wall(pos, direction)` has a `line` (`Line(a, b, c)` for
  `a*x + b*y + c = 0`) and a `normal()`.
- `bouncy.ball`: `Ball` and `BallColor`. `Ball` has `move`, `is_colliding` and
  `collide`, and the last two accept either another ball or a wall.
- `bouncy.rand`: `RandomGenerator(seed)` has `integer`, `uniform` and
  `boolean`.
- `bouncy.game`: `make_walls`, `create_ball`, `new_state`, `handle_events`,
  `update(state, delta_ms)`, `render` and `game_loop`. `GameState` holds the
  balls, the walls and the random generator.
- `bouncy.event`: `process_events` turns pygame events into `GameEvent` values.
- `bouncy.display`: `Display` is the window, used as a context manager.

A seeded run without a window:

```python
from bouncy.game import new_state, update
from bouncy.rand import RandomGenerator

state = new_state(900, 900, RandomGenerator(1))
for _ in range(60):
    update(state, 16)
```

## Tests

```
pip install .[test]
pytest
```