"""Game state, level progression and the interactive game loop."""

from __future__ import annotations

import argparse
import logging
import random
from dataclasses import dataclass, field
from pathlib import Path
from typing import ClassVar

from .asteroid import Asteroid, fragment_positions
from .bonus import ShieldBonus
from .missile import Missile
from .spaceship import Controls, Spaceship
from .stellarobject import Vec2

logger = logging.getLogger(__name__)

INITIAL_ASTEROIDS = 8
MISSILE_RADIUS = 3.0


@dataclass
class GameState:
    """Everything that changes during a game: level, ship, asteroids, missiles, bonus."""

    LEVEL_BASE: ClassVar[int] = 4

    width: float
    height: float
    ship: Spaceship
    bonus: ShieldBonus
    asteroids: list[Asteroid] = field(default_factory=list)
    missiles: list[Missile] = field(default_factory=list)
    level: int = 1
    rng: random.Random = field(default_factory=random.Random, repr=False, compare=False)

    @classmethod
    def new(
        cls, width: float, height: float, rng: random.Random | None = None
    ) -> GameState:
        """A fresh game on level 1 with a full field of asteroids."""
        rng = rng or random.Random()
        state = cls(
            width=width,
            height=height,
            ship=Spaceship.centered(width, height),
            bonus=ShieldBonus.spawn(width, height, rng),
            rng=rng,
        )
        state.asteroids = state._random_asteroids(INITIAL_ASTEROIDS)
        return state

    def _random_asteroids(self, count: int) -> list[Asteroid]:
        return [Asteroid.random(self.width, self.height, self.rng) for _ in range(count)]

    def restart(self) -> None:
        """Start over on level 1 with a new ship and new asteroids."""
        self.asteroids = self._random_asteroids(INITIAL_ASTEROIDS)
        self.ship = Spaceship.centered(self.width, self.height)
        self.missiles.clear()
        self.level = 1

    def game_over(self) -> bool:
        return self.ship.shield == 0

    def fire(self) -> Missile:
        """Launch a missile from the ship along its heading."""
        missile = Missile.fire(self.ship.position, self.ship.rotation)
        self.missiles.append(missile)
        return missile

    def resolve_missile_hits(self) -> int:
        """Apply missile hits to asteroids; return the number of asteroids destroyed."""
        destroyed: dict[int, Asteroid] = {}
        spent: set[int] = set()
        fragments: list[Asteroid] = []

        for missile in self.missiles:
            for asteroid in self.asteroids:
                reach = MISSILE_RADIUS + asteroid.radius()
                if missile.position.distance(asteroid.position) >= reach:
                    continue
                asteroid.hit()
                if asteroid.is_destroyed():
                    logger.debug("asteroid destroyed")
                    if asteroid.size in (2, 3):
                        fragments.extend(
                            Asteroid.fragment(asteroid.size - 1, pos, self.rng)
                            for pos in self._fragment_positions(missile, asteroid)
                        )
                    destroyed[id(asteroid)] = asteroid
                spent.add(id(missile))
                break

        self.asteroids = [a for a in self.asteroids if id(a) not in destroyed]
        self.asteroids.extend(fragments)
        self.missiles = [m for m in self.missiles if id(m) not in spent]
        return len(destroyed)

    @staticmethod
    def _fragment_positions(missile: Missile, asteroid: Asteroid) -> tuple[Vec2, Vec2]:
        if missile.position == asteroid.position:
            return asteroid.position, asteroid.position
        return fragment_positions(missile.position, asteroid.position)

    def next_level_if_cleared(self) -> bool:
        """Move to the next level once every asteroid is gone; True if that happened."""
        if self.asteroids:
            return False
        self.level += 1
        self.asteroids.extend(self._random_asteroids(self.LEVEL_BASE + self.level))
        self.ship.recenter(self.width, self.height)
        self.missiles.clear()
        return True

    def move_asteroids(self) -> None:
        for asteroid in self.asteroids:
            asteroid.move(self.width, self.height)

    def step(self, controls: Controls, fire: bool, delta_time: float, now: float) -> None:
        """Advance the game by one frame; nothing moves once the game is over."""
        if self.game_over():
            return
        self.ship.update(controls, self.asteroids, self.width, self.height, now)
        self.bonus.update(delta_time, self.ship.shield, self.width, self.height)
        if self.bonus.collect(self.ship.position, Spaceship.RADIUS):
            self.ship.restore_shield()
        if fire:
            self.fire()
        for missile in self.missiles:
            missile.advance()
        self.resolve_missile_hits()
        self.next_level_if_cleared()
        self.move_asteroids()


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="asteroidfield", description="Play Asteroids.")
    parser.add_argument("--windowed", action="store_true", help="run in a window")
    parser.add_argument("--width", type=int, default=1280, help="window width")
    parser.add_argument("--height", type=int, default=720, help="window height")
    parser.add_argument(
        "--assets", type=Path, default=Path("ressources"), help="directory of images"
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Open the game window and run the game loop until Escape is pressed."""
    args = _parse_args(argv)

    import pygame

    pygame.init()
    pygame.display.set_caption("Asteroids")
    if args.windowed:
        screen = pygame.display.set_mode((args.width, args.height))
    else:
        screen = pygame.display.set_mode((0, 0), pygame.FULLSCREEN)
    width, height = screen.get_size()

    def load(name: str):
        path = args.assets / name
        try:
            return pygame.image.load(str(path)).convert_alpha()
        except (pygame.error, FileNotFoundError):
            logger.warning("could not load %s", path)
            return None

    background = load("Fond_ecran_jeu.png")
    asteroid_image = load("asteroids.png")
    shield_image = load("bouclier.png")
    if background is not None:
        background = pygame.transform.scale(background, (width, height))

    fonts = {size: pygame.font.Font(None, size) for size in (20, 25, 30, 40, 80)}
    white, red, green, gray = (255, 255, 255), (230, 41, 55), (0, 228, 48), (130, 130, 130)

    def text(message: str, size: int, color, x: float, y: float, centered: bool = False):
        surface = fonts[size].render(message, True, color)
        if centered:
            x = (width - surface.get_width()) / 2.0
        screen.blit(surface, (x, y - surface.get_height()))

    state = GameState.new(width, height)
    clock = pygame.time.Clock()
    running = True

    while running:
        delta_time = clock.tick(60) / 1000.0
        fire = enter = False
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_SPACE:
                    fire = True
                elif event.key in (pygame.K_RETURN, pygame.K_KP_ENTER):
                    enter = True
        keys = pygame.key.get_pressed()
        if keys[pygame.K_ESCAPE]:
            running = False

        screen.fill((0, 0, 0))

        if state.game_over():
            text("GAME OVER", 80, red, 0, height / 2.0 - 50.0, centered=True)
            text(f"You died on level {state.level}!", 40, white, 0, height / 2.0, centered=True)
            text(
                "Press Enter to play again or Escape to quit.",
                25, white, 0, height / 2.0 + 50.0, centered=True,
            )
            if enter:
                state.restart()
            pygame.display.flip()
            continue

        controls = Controls(
            left=keys[pygame.K_LEFT],
            right=keys[pygame.K_RIGHT],
            up=keys[pygame.K_UP],
            down=keys[pygame.K_DOWN],
        )
        state.step(controls, fire, delta_time, pygame.time.get_ticks() / 1000.0)

        if background is not None:
            screen.blit(background, (0, 0))
        text(f"Level {state.level}", 30, white, 20.0, 30.0)

        for asteroid in state.asteroids:
            radius = asteroid.radius()
            x, y = asteroid.position
            if asteroid_image is not None:
                image = pygame.transform.scale(asteroid_image, (int(radius * 2), int(radius * 2)))
                screen.blit(image, (x - radius, y - radius))
            else:
                pygame.draw.circle(screen, gray, (x, y), radius, 2)

        ship = state.ship
        pygame.draw.circle(screen, green, tuple(ship.position), int(Spaceship.RADIUS), 3)
        corners = [tuple(point) for point in ship.triangle()]
        pygame.draw.polygon(screen, gray, corners, 3)

        bar = 199.0 * ship.shield / 100.0
        pygame.draw.rect(screen, white, (width - 220.0, 20.0, 200.0, 10.0))
        pygame.draw.rect(screen, green, (width - 219.0, 21.0, bar, 8.0))
        text(f"Shield: {ship.shield}%", 20, white, width - 220.0, 52.0)

        bonus = state.bonus
        if bonus.visible:
            bx, by = bonus.position
            if shield_image is not None:
                image = pygame.transform.scale(shield_image, (30, 30))
                screen.blit(image, (bx - 15.0, by - 15.0))
            else:
                pygame.draw.circle(screen, green, (bx, by), int(ShieldBonus.RADIUS))

        for missile in state.missiles:
            pygame.draw.circle(screen, red, tuple(missile.position), 2)

        pygame.display.flip()

    pygame.quit()
    return 0