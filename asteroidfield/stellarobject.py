"""Two-dimensional vectors and the behaviour shared by every moving object."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator


@dataclass(frozen=True, slots=True)
class Vec2:
    """An immutable 2D vector of floats."""

    x: float = 0.0
    y: float = 0.0

    @classmethod
    def from_angle(cls, angle: float) -> Vec2:
        """Unit vector pointing along ``angle`` (radians)."""
        return cls(math.cos(angle), math.sin(angle))

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __add__(self, other: Vec2) -> Vec2:
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2) -> Vec2:
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, factor: float) -> Vec2:
        return Vec2(self.x * factor, self.y * factor)

    __rmul__ = __mul__

    def __truediv__(self, divisor: float) -> Vec2:
        return Vec2(self.x / divisor, self.y / divisor)

    def __neg__(self) -> Vec2:
        return Vec2(-self.x, -self.y)

    def length(self) -> float:
        return math.hypot(self.x, self.y)

    def normalize(self) -> Vec2:
        """Unit vector with the same direction; a zero vector has none."""
        length = self.length()
        if length == 0.0 or not math.isfinite(length):
            raise ValueError(f"cannot normalize {self!r}")
        return self / length

    def dot(self, other: Vec2) -> float:
        return self.x * other.x + self.y * other.y

    def distance(self, other: Vec2) -> float:
        return (self - other).length()

    def perpendicular(self) -> Vec2:
        """The vector rotated a quarter turn counter-clockwise."""
        return Vec2(-self.y, self.x)


def wrap_coordinate(coord: float, limit: float) -> float:
    """Fold a coordinate that left ``[0, limit]`` back towards the screen."""
    if coord < 0.0:
        return limit - coord
    if coord > limit:
        return coord - limit
    return coord


def wrap_position(position: Vec2, width: float, height: float) -> Vec2:
    """Apply :func:`wrap_coordinate` to both axes of ``position``."""
    return Vec2(wrap_coordinate(position.x, width), wrap_coordinate(position.y, height))


class StellarObject:
    """Mixin for objects with a ``position`` and a ``velocity`` that drift in space."""

    position: Vec2
    velocity: Vec2

    def advance(self) -> Vec2:
        """Move by one step of the current velocity and return the new position."""
        self.position = self.position + self.velocity
        return self.position

    def wrap_edges(self, width: float, height: float) -> Vec2:
        """Teleport the object to the opposite edge when it leaves the screen."""
        x, y = self.position
        if x > width:
            x = 0.0
        elif x < 0.0:
            x = width
        if y > height:
            y = 0.0
        elif y < 0.0:
            y = height
        self.position = Vec2(x, y)
        return self.position