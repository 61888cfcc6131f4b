"""The player's spaceship: steering, shield and collisions with asteroids."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import ClassVar, Iterable

from .asteroid import Asteroid
from .stellarobject import StellarObject, Vec2, wrap_position

_TURN_STEP = 0.05
_THRUST = 0.2
_DRAG = 0.97
_IMPULSE_STRENGTH = 1.2
_COOLDOWN = 0.5
_BASE_ANGLE = 3.1415 * 4.0 / 5.0
_DAMAGE_BY_SIZE = {1: 10, 2: 15, 3: 25}


@dataclass(frozen=True)
class Controls:
    """Which steering keys are held during a frame."""

    left: bool = False
    right: bool = False
    up: bool = False
    down: bool = False


@dataclass
class Spaceship(StellarObject):
    """The ship, with a position, velocity, heading and shield percentage."""

    RADIUS: ClassVar[float] = 15.0
    MAX_SHIELD: ClassVar[int] = 100

    position: Vec2
    velocity: Vec2 = Vec2()
    rotation: float = 0.0
    shield: int = 100
    cooldown: float = 0.0

    @classmethod
    def centered(cls, width: float, height: float) -> Spaceship:
        """A motionless ship in the middle of the screen with a full shield."""
        return cls(position=Vec2(width / 2.0, height / 2.0))

    def recenter(self, width: float, height: float) -> None:
        """Put the ship back in the middle of the screen and stop it."""
        self.position = Vec2(width / 2.0, height / 2.0)
        self.velocity = Vec2()

    def restore_shield(self) -> None:
        self.shield = self.MAX_SHIELD

    def triangle(self) -> tuple[Vec2, Vec2, Vec2]:
        """Tip and base corners of the triangle drawn for the ship."""
        return (
            self.position + Vec2.from_angle(self.rotation) * self.RADIUS,
            self.position + Vec2.from_angle(self.rotation + _BASE_ANGLE) * self.RADIUS,
            self.position + Vec2.from_angle(self.rotation - _BASE_ANGLE) * self.RADIUS,
        )

    def update(
        self,
        controls: Controls,
        asteroids: Iterable[Asteroid],
        width: float,
        height: float,
        now: float,
    ) -> None:
        """Steer, move and resolve collisions with ``asteroids`` at time ``now``."""
        if controls.left:
            self.rotation -= _TURN_STEP
        if controls.right:
            self.rotation += _TURN_STEP
        heading = Vec2.from_angle(self.rotation) * _THRUST
        if controls.up:
            self.velocity = self.velocity + heading
        if controls.down:
            self.velocity = self.velocity - heading

        self.velocity = self.velocity * _DRAG
        self.position = wrap_position(self.position + self.velocity, width, height)

        for asteroid in asteroids:
            self._collide(asteroid, now)
            asteroid.apply_friction()

    def _collide(self, asteroid: Asteroid, now: float) -> None:
        distance = self.position.distance(asteroid.position)
        reach = self.RADIUS + asteroid.radius()
        if distance >= reach:
            return

        direction = asteroid.position - self.position
        normal = direction.normalize() if direction.length() > 0.0 else None
        if normal is not None:
            self.position = self.position - normal * (reach - distance)
            asteroid.bounce(direction)

        if now - self.cooldown > _COOLDOWN:
            self.cooldown = now
            damage = _DAMAGE_BY_SIZE.get(asteroid.size, 0)
            self.shield = max(0, self.shield - damage)

        speed = self.velocity.length()
        if speed > 0.1 and normal is not None:
            asteroid.velocity = normal * (speed * _IMPULSE_STRENGTH)

        self.velocity = self.velocity * 0.5