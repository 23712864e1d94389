"""Simulation state, its update step, drawing and the main loop."""

from __future__ import annotations

import math
import time
from collections.abc import Iterable
from dataclasses import dataclass, field
from itertools import combinations

import pygame

from bouncy.ball import Ball, BallColor
from bouncy.display import Display
from bouncy.event import GameEvent, process_events
from bouncy.rand import RandomGenerator
from bouncy.vec import Vec2
from bouncy.wall import Wall

OFFSET = 10.0
MAX_BALLS = 30
MIN_BALLS = 10
BALL_TEXTURE = "ball"
BALL_TEXTURE_PATH = "assets/ball.png"

_COLORS = {
    BallColor.RED: (255, 0, 0),
    BallColor.GREEN: (0, 255, 0),
    BallColor.BLUE: (0, 0, 255),
    BallColor.YELLOW: (255, 255, 0),
    BallColor.PURPLE: (255, 0, 255),
    BallColor.ORANGE: (255, 165, 0),
}


@dataclass
class GameState:
    """Everything the simulation needs between frames."""

    width: int
    height: int
    rng: RandomGenerator
    balls: list[Ball] = field(default_factory=list)
    walls: list[Wall] = field(default_factory=list)


def random_velocity(rng: RandomGenerator) -> Vec2:
    """A velocity whose components each have magnitude 80 to 100."""
    x = rng.integer(80, 100)
    y = rng.integer(80, 100)
    if rng.boolean():
        x = -x
    if rng.boolean():
        y = -y
    return Vec2(float(x), float(y))


def color_rgb(color: BallColor) -> tuple[int, int, int]:
    """The RGB triple a ball colour is drawn with."""
    try:
        return _COLORS[color]
    except (KeyError, TypeError):
        raise ValueError(f"invalid ball color: {color!r}") from None


def make_walls(width: float, height: float) -> list[Wall]:
    """The four walls enclosing the window, inset by OFFSET."""
    return [
        Wall(Vec2(OFFSET, OFFSET), Vec2(width - 2 * OFFSET, 0)),
        Wall(Vec2(width - OFFSET, OFFSET), Vec2(0, height - 2 * OFFSET)),
        Wall(Vec2(width - OFFSET, height - OFFSET), Vec2(-width + 2 * OFFSET, 0)),
        Wall(Vec2(OFFSET, height - OFFSET), Vec2(0, -height + 2 * OFFSET)),
    ]


def create_ball(
    width: float, height: float, rng: RandomGenerator, balls: list[Ball]
) -> Ball:
    """Add a random ball that overlaps none of ``balls`` and return it."""
    while True:
        mass = rng.uniform(1.0, 5.0)
        radius = 10 * math.sqrt(mass)
        x = rng.uniform(OFFSET + radius * 2, width - OFFSET - radius * 2)
        y = rng.uniform(OFFSET + radius * 2, height - OFFSET - radius * 2)
        velocity = random_velocity(rng)
        color = BallColor(rng.integer(0, 5))
        ball = Ball(Vec2(x, y), radius, mass, velocity, color)

        if not any(ball.is_colliding(other) for other in balls):
            balls.append(ball)
            return ball


def new_state(
    width: int, height: int, rng: RandomGenerator | None = None
) -> GameState:
    """A fresh simulation with walls and a random number of balls."""
    if rng is None:
        rng = RandomGenerator()
    state = GameState(width=width, height=height, rng=rng, walls=make_walls(width, height))
    for _ in range(rng.integer(MIN_BALLS, MAX_BALLS)):
        create_ball(width, height, rng, state.balls)
    return state


def handle_events(state: GameState, events: Iterable[GameEvent]) -> bool:
    """Apply game events to the state; False means the game should stop."""
    for event in events:
        if event is GameEvent.QUIT:
            return False
        if event is GameEvent.INCREASE_BALLS:
            if len(state.balls) < MAX_BALLS:
                create_ball(state.width, state.height, state.rng, state.balls)
        elif event is GameEvent.DECREASE_BALLS:
            if state.balls:
                del state.balls[0]
    return True


def update(state: GameState, delta_ms: float) -> None:
    """Advance the simulation by ``delta_ms`` milliseconds."""
    seconds = delta_ms / 1000.0
    for ball in state.balls:
        ball.move(seconds)

    for ball in state.balls:
        for wall in state.walls:
            if ball.is_colliding(wall):
                ball.collide(wall)
                ball.move(seconds)

    for one, two in combinations(state.balls, 2):
        if one.is_colliding(two):
            one.collide(two)
            one.move(seconds)
            two.move(seconds)


def _render_ball(screen: pygame.Surface, texture: pygame.Surface, ball: Ball) -> None:
    diameter = max(1, round(ball.radius * 2))
    tinted = texture.copy()
    tinted.fill((*color_rgb(ball.color), 255), special_flags=pygame.BLEND_RGBA_MULT)
    scaled = pygame.transform.scale(tinted, (diameter, diameter))
    screen.blit(scaled, (ball.pos.x - ball.radius, ball.pos.y - ball.radius))


def render(display: Display, state: GameState) -> None:
    """Draw the walls and balls and show the frame."""
    screen = display.screen
    screen.fill((0, 0, 0))

    for wall in state.walls:
        end = wall.pos + wall.direction
        pygame.draw.line(
            screen, (255, 255, 255), (wall.pos.x, wall.pos.y), (end.x, end.y)
        )

    texture = display.get_texture(BALL_TEXTURE)
    if texture is not None:
        for ball in state.balls:
            _render_ball(screen, texture, ball)

    pygame.display.flip()


def game_loop(display: Display) -> None:
    """Run the simulation until the player quits."""
    start = time.monotonic()
    width, height = display.size
    display.load_texture(BALL_TEXTURE_PATH, BALL_TEXTURE)
    state = new_state(width, height, RandomGenerator())

    prev_ms = 0.0
    while handle_events(state, process_events()):
        curr_ms = (time.monotonic() - start) * 1000.0
        delta_ms = curr_ms - prev_ms
        prev_ms = curr_ms

        update(state, delta_ms)
        render(display, state)