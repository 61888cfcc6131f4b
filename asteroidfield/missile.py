"""Missiles fired by the spaceship."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from .stellarobject import StellarObject, Vec2


@dataclass
class Missile(StellarObject):
    """A missile travelling in a straight line."""

    SPEED: ClassVar[float] = 5.0

    position: Vec2
    velocity: Vec2

    @classmethod
    def fire(cls, position: Vec2, direction: float) -> Missile:
        """A missile leaving ``position`` along the angle ``direction``."""
        return cls(position, Vec2.from_angle(direction) * cls.SPEED)