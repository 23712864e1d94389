"""Straight walls that balls bounce off."""

from __future__ import annotations

from dataclasses import dataclass

from bouncy.vec import Vec2


@dataclass(frozen=True, slots=True)
class Line:
    """A line in the form a*x + b*y + c = 0."""

    a: float
    b: float
    c: float


class Wall:
    """A wall segment starting at ``pos`` and extending by ``direction``."""

    __slots__ = ("pos", "direction", "line")

    def __init__(self, pos: Vec2, direction: Vec2) -> None:
        self.pos = pos
        self.direction = direction
        end = pos + direction
        self.line = Line(
            a=pos.y - end.y,
            b=end.x - pos.x,
            c=pos.x * end.y - pos.y * end.x,
        )

    def __repr__(self) -> str:
        return f"Wall(pos={self.pos!r}, direction={self.direction!r})"

    def normal(self) -> Vec2:
        """Unit vector perpendicular to the wall; reversing the wall flips it."""
        return Vec2(-self.direction.y, self.direction.x).normalize()