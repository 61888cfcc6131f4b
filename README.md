# asteroidfield

An arcade game in the style of Asteroids. You fly a small ship inside a
shield, fire missiles and break asteroids apart until the screen is empty,
then move on to the next level.

## Installing

```
pip install .
```

This also installs pygame, which opens the window and draws the game.

## Playing

```
asteroidfield
```

By default the game runs full screen. Options:

- `--windowed`: run in a window instead of full screen
- `--width N`, `--height N`: window size when `--windowed` is given (default 1280 × 720)
- `--assets DIR`: directory holding the images (default `ressources`)

The game looks for three images in the assets directory:
`Fond_ecran_jeu.png` (background), `asteroids.png` (asteroid) and
`bouclier.png` (shield bonus). Any image that cannot be loaded is logged as a
warning and replaced: a black background, gray outlined circles for
asteroids, a green disc for the bonus.

Controls:

- **Left / Right**: turn the ship
- **Up**: thrust forward
- **Down**: thrust backward
- **Space**: fire a missile
- **Escape**: quit
- **Enter**: start a new game from the game-over screen

## Rules

- Asteroids come in three sizes. A small one takes 1 hit, a medium one 3 hits
  and a large one 5 hits.
- A destroyed large asteroid breaks into two medium ones, a destroyed medium
  one into two small ones. Small ones simply disappear.
- Asteroids and the ship wrap around the screen edges.
- Running into an asteroid lowers the shield by 10, 15 or 25 percent,
  depending on the asteroid's size, and the asteroid bounces off the ship.
  The shield takes at most one hit every half second.
- Now and then a shield bonus appears for a few seconds. Flying into it
  brings the shield back to 100%. When the shield is below 30% it is more
  likely to appear and stays longer.
- A game starts with 8 asteroids. When every asteroid is destroyed you reach
  the next level: level *n* brings 4 + *n* new asteroids, the ship returns to
  the centre and all missiles in flight are removed.
- The game ends when the shield reaches 0; the game-over screen shows the
  level you reached.

## Using the pieces

The game logic does not depend on the display and can be driven directly:

```python
import random
from asteroidfield.game import GameState
from asteroidfield.spaceship import Controls

state = GameState.new(800, 600, random.Random(1))
state.step(Controls(up=True), fire=True, delta_time=1 / 60, now=0.0)
print(state.level, len(state.asteroids), len(state.missiles), state.ship.shield)
```

Modules:

- `asteroidfield.stellarobject`: `Vec2`, an immutable 2D vector;
  `wrap_coordinate` and `wrap_position` for screen wrapping; and the
  `StellarObject` mixin with `advance()` and `wrap_edges()`.
- `asteroidfield.asteroid`: `Asteroid` (`random()`, `fragment()`, `hit()`,
  `move()`, `bounce()`, `apply_friction()`, `radius()`, `is_destroyed()`)
  and helpers `resistance_for_size`, `random_speed`,
  `random_edge_position` and `fragment_positions`.
- `asteroidfield.missile`: `Missile.fire(position, direction)`.
- `asteroidfield.bonus`: `ShieldBonus` with `spawn()`, `update()` and
  `collect()`.
- `asteroidfield.spaceship`: `Controls` (held keys for one frame) and
  `Spaceship` with `centered()`, `update()`, `recenter()`,
  `restore_shield()` and `triangle()`.
- `asteroidfield.game`: `GameState` (`new()`, `step()`, `fire()`,
  `resolve_missile_hits()`, `next_level_if_cleared()`, `move_asteroids()`,
  `restart()`, `game_over()`) and `main()`, the `asteroidfield` command.

Pass a seeded `random.Random` to `GameState.new` to make a game repeatable.

## What it does not do

There is no score, no high-score table, no sound and no saved games. Missiles
fly on until they hit an asteroid or the level ends.

## Running the tests

```
pip install ".[test]"
pytest
```