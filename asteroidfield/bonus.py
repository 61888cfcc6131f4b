"""The shield bonus that briefly appears on screen and refills the shield."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import ClassVar

from .stellarobject import Vec2

_MARGIN = 50.0


def _random_position(width: float, height: float, rng: random.Random) -> Vec2:
    return Vec2(
        rng.uniform(_MARGIN, width - _MARGIN),
        rng.uniform(_MARGIN, height - _MARGIN),
    )


@dataclass
class ShieldBonus:
    """A pick-up that restores the ship's shield while it is visible."""

    RADIUS: ClassVar[float] = 15.0
    LOW_SHIELD: ClassVar[int] = 30

    position: Vec2
    visible: bool = False
    timer: float = 0.0
    rng: random.Random = field(
        default_factory=random.Random, repr=False, compare=False
    )

    @classmethod
    def spawn(
        cls, width: float, height: float, rng: random.Random | None = None
    ) -> ShieldBonus:
        """A hidden bonus at a random position away from the screen edges."""
        rng = rng or random.Random()
        return cls(position=_random_position(width, height, rng), rng=rng)

    def update(self, delta_time: float, shield: int, width: float, height: float) -> None:
        """Count down a visible bonus, or maybe make a hidden one appear."""
        if self.visible:
            self.timer -= delta_time
            if self.timer <= 0.0:
                self.visible = False
            return

        rng = self.rng
        if rng.uniform(0.0, 150.0) >= delta_time * 5.0:
            return
        if shield < self.LOW_SHIELD:
            if rng.uniform(0.0, 1.0) < 0.2:
                self._appear(width, height, rng.uniform(10.0, 15.0))
        elif rng.randrange(10) == 0:
            self._appear(width, height, rng.uniform(5.0, 10.0))

    def _appear(self, width: float, height: float, duration: float) -> None:
        self.position = _random_position(width, height, self.rng)
        self.visible = True
        self.timer = duration

    def collect(self, ship_position: Vec2, ship_radius: float) -> bool:
        """Pick the bonus up if the ship touches it; True when collected."""
        if self.visible and ship_position.distance(self.position) < ship_radius + self.RADIUS:
            self.visible = False
            return True
        return False