"""Balls that move and collide elastically."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from bouncy.vec import Vec2
from bouncy.wall import Wall


class BallColor(Enum):
    RED = 0
    GREEN = 1
    BLUE = 2
    YELLOW = 3
    PURPLE = 4
    ORANGE = 5


@dataclass(eq=False)
class Ball:
    """A ball with position, radius (m), mass (kg), velocity (m/s) and colour."""

    pos: Vec2
    radius: float
    mass: float
    velocity: Vec2
    color: BallColor

    def move(self, time: float) -> None:
        """Advance the ball by ``time`` seconds at its current velocity."""
        self.pos = self.pos + self.velocity * time

    def is_colliding(self, other: Ball | Wall) -> bool:
        """Whether this ball intersects another ball or a wall's line."""
        if isinstance(other, Ball):
            return self.pos.dist(other.pos) <= self.radius + other.radius
        if isinstance(other, Wall):
            line = other.line
            distance = abs(line.a * self.pos.x + line.b * self.pos.y + line.c) / Vec2(
                line.a, line.b
            ).length()
            return distance <= self.radius
        raise TypeError(f"cannot test collision with {type(other).__name__}")

    def collide(self, other: Ball | Wall) -> None:
        """Elastically bounce off a wall or another ball, if touching it."""
        if not self.is_colliding(other):
            return
        if isinstance(other, Wall):
            normal = other.normal()
            self.velocity = self.velocity - 2 * self.velocity.dot(normal) * normal
            return

        total = self.mass + other.mass
        ours = ((self.mass - other.mass) / total) * self.velocity + (
            2 * other.mass / total
        ) * other.velocity
        theirs = (2 * self.mass / total) * self.velocity + (
            (other.mass - self.mass) / total
        ) * other.velocity
        self.velocity = ours
        other.velocity = theirs