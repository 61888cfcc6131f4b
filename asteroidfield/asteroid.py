"""Asteroids: creation, movement, damage and fragmentation."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass
from typing import ClassVar

from .stellarobject import StellarObject, Vec2, wrap_position

_default_rng = random.Random()

FRICTION = 0.98
FRAGMENT_OFFSET = 50.0

_RESISTANCE_BY_SIZE = {1: 1, 2: 3, 3: 5}


def resistance_for_size(size: int) -> int:
    """Number of missile hits an asteroid of ``size`` withstands."""
    return _RESISTANCE_BY_SIZE.get(size, 1)


def random_speed(rng: random.Random | None = None) -> Vec2:
    """A unit velocity in a uniformly random direction."""
    rng = rng or _default_rng
    return Vec2.from_angle(rng.uniform(0.0, 2.0 * math.pi))


def random_edge_position(
    width: float, height: float, rng: random.Random | None = None
) -> Vec2:
    """A random position close to one of the four screen edges."""
    rng = rng or _default_rng
    size = Asteroid.INITIAL_SIZE
    near = rng.uniform(size / 2.0, size)
    side = rng.randint(1, 4)  # 1 top, 2 right, 3 bottom, 4 left
    if side == 2:
        x = width - near
    elif side == 4:
        x = near
    else:
        x = rng.uniform(0.0, width)
    if side == 1:
        y = near
    elif side == 3:
        y = height - near
    else:
        y = rng.uniform(0.0, height)
    return Vec2(x, y)


def fragment_positions(missile_pos: Vec2, asteroid_pos: Vec2) -> tuple[Vec2, Vec2]:
    """Positions of the two fragments, spread either side of the impact axis."""
    direction = (asteroid_pos - missile_pos).normalize()
    offset = direction.perpendicular() * FRAGMENT_OFFSET
    return asteroid_pos + offset, asteroid_pos - offset


@dataclass
class Asteroid(StellarObject):
    """An asteroid of size 1 (small), 2 (medium) or 3 (large)."""

    INITIAL_SIZE: ClassVar[float] = 60.0

    position: Vec2
    velocity: Vec2
    min_velocity: Vec2
    size: int
    resistance: int

    @classmethod
    def random(
        cls, width: float, height: float, rng: random.Random | None = None
    ) -> Asteroid:
        """An asteroid of random size and heading near a screen edge."""
        rng = rng or _default_rng
        size = rng.randint(1, 3)
        velocity = random_speed(rng)
        return cls(
            position=random_edge_position(width, height, rng),
            velocity=velocity,
            min_velocity=velocity,
            size=size,
            resistance=resistance_for_size(size),
        )

    @classmethod
    def fragment(
        cls, size: int, position: Vec2, rng: random.Random | None = None
    ) -> Asteroid:
        """An asteroid of the given size at ``position`` with a random heading."""
        velocity = random_speed(rng)
        return cls(
            position=position,
            velocity=velocity,
            min_velocity=velocity,
            size=size,
            resistance=resistance_for_size(size),
        )

    def radius(self) -> float:
        if self.size == 1:
            return self.INITIAL_SIZE / 2.0
        if self.size == 3:
            return self.INITIAL_SIZE * 1.5
        return self.INITIAL_SIZE

    def is_destroyed(self) -> bool:
        return self.resistance == 0

    def hit(self) -> None:
        """Take one missile hit."""
        if self.resistance > 0:
            self.resistance -= 1

    def move(self, width: float, height: float) -> Vec2:
        """Advance one step, wrap around the screen and return the new position."""
        self.position = wrap_position(self.position + self.velocity, width, height)
        return self.position

    def apply_friction(self) -> None:
        """Slow down towards the original speed after being pushed."""
        if self.velocity.length() > self.min_velocity.length():
            self.velocity = self.velocity * FRICTION

    def bounce(self, collision_direction: Vec2) -> None:
        """Reflect the velocity about the collision normal."""
        normal = collision_direction.normalize()
        self.velocity = self.velocity - normal * (2.0 * self.velocity.dot(normal))