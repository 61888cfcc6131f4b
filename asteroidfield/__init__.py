"""An Asteroids-style arcade game: ship, missiles, splitting asteroids and a shield bonus."""

__version__ = "0.1.0"
__all__ = ["asteroid", "bonus", "game", "missile", "spaceship", "stellarobject"]