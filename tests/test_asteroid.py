import random

import pytest

from asteroidfield.asteroid import (
    FRAGMENT_OFFSET,
    Asteroid,
    fragment_positions,
    random_edge_position,
    random_speed,
    resistance_for_size,
)
from asteroidfield.stellarobject import Vec2


def make(size=2, resistance=3, position=Vec2(0.0, 0.0), velocity=Vec2(1.0, 1.0)):
    return Asteroid(
        position=position,
        velocity=velocity,
        min_velocity=velocity,
        size=size,
        resistance=resistance,
    )


def test_creation_asteroid():
    asteroid = make()
    assert 1 <= asteroid.size <= 3
    assert asteroid.resistance > 0


def test_diminuer_resistance():
    asteroid = make()
    initial = asteroid.resistance
    asteroid.hit()
    assert asteroid.resistance == initial - 1


def test_est_detruit():
    asteroid = make(size=1, resistance=1, velocity=Vec2(0.0, 0.0))
    asteroid.hit()
    assert asteroid.is_destroyed()


def test_hit_never_goes_below_zero():
    asteroid = make(size=1, resistance=0)
    asteroid.hit()
    assert asteroid.resistance == 0
    assert asteroid.is_destroyed()


@pytest.mark.parametrize("size,expected", [(1, 1), (2, 3), (3, 5), (7, 1)])
def test_resistance_for_size(size, expected):
    assert resistance_for_size(size) == expected


@pytest.mark.parametrize("size,expected", [(1, 30.0), (2, 60.0), (3, 90.0), (9, 60.0)])
def test_radius(size, expected):
    assert make(size=size).radius() == expected


def test_random_asteroid_is_consistent():
    rng = random.Random(42)
    for _ in range(50):
        asteroid = Asteroid.random(800.0, 600.0, rng)
        assert asteroid.size in (1, 2, 3)
        assert asteroid.resistance == resistance_for_size(asteroid.size)
        assert asteroid.velocity.length() == pytest.approx(1.0)
        assert asteroid.min_velocity == asteroid.velocity
        assert 0.0 <= asteroid.position.x <= 800.0
        assert 0.0 <= asteroid.position.y <= 600.0


def test_random_edge_position_is_near_an_edge():
    rng = random.Random(7)
    for _ in range(100):
        pos = random_edge_position(800.0, 600.0, rng)
        near_edge = (
            30.0 <= pos.x <= 60.0
            or 740.0 <= pos.x <= 770.0
            or 30.0 <= pos.y <= 60.0
            or 540.0 <= pos.y <= 570.0
        )
        assert near_edge


def test_random_speed_is_unit():
    rng = random.Random(3)
    assert all(random_speed(rng).length() == pytest.approx(1.0) for _ in range(20))


def test_fragment_has_size_resistance_and_position():
    asteroid = Asteroid.fragment(2, Vec2(100.0, 200.0), random.Random(1))
    assert asteroid.size == 2
    assert asteroid.resistance == 3
    assert asteroid.position == Vec2(100.0, 200.0)
    assert asteroid.min_velocity == asteroid.velocity


def test_move_adds_velocity():
    asteroid = make(position=Vec2(10.0, 10.0), velocity=Vec2(1.0, 1.0))
    assert asteroid.move(100.0, 100.0) == Vec2(11.0, 11.0)
    assert asteroid.position == Vec2(11.0, 11.0)


def test_move_wraps_past_edge():
    asteroid = make(position=Vec2(99.0, 50.0), velocity=Vec2(2.0, 0.0))
    asteroid.move(100.0, 100.0)
    assert asteroid.position == Vec2(1.0, 50.0)


def test_friction_slows_pushed_asteroid():
    asteroid = make(velocity=Vec2(1.0, 0.0))
    asteroid.velocity = Vec2(4.0, 0.0)
    asteroid.apply_friction()
    assert asteroid.velocity.x == pytest.approx(4.0 * 0.98)


def test_friction_does_nothing_at_minimum_speed():
    asteroid = make(velocity=Vec2(1.0, 0.0))
    asteroid.apply_friction()
    assert asteroid.velocity == Vec2(1.0, 0.0)


def test_bounce_reflects_velocity():
    asteroid = make(velocity=Vec2(3.0, 1.0))
    asteroid.bounce(Vec2(5.0, 0.0))
    assert asteroid.velocity.x == pytest.approx(-3.0)
    assert asteroid.velocity.y == pytest.approx(1.0)


def test_bounce_preserves_speed():
    asteroid = make(velocity=Vec2(2.0, -1.5))
    before = asteroid.velocity.length()
    asteroid.bounce(Vec2(1.0, 2.0))
    assert asteroid.velocity.length() == pytest.approx(before)


def test_bounce_zero_direction_raises():
    with pytest.raises(ValueError):
        make().bounce(Vec2(0.0, 0.0))


def test_fragment_positions_are_spread_symmetrically():
    asteroid_pos = Vec2(200.0, 200.0)
    pos1, pos2 = fragment_positions(Vec2(100.0, 150.0), asteroid_pos)
    assert pos1.distance(asteroid_pos) == pytest.approx(FRAGMENT_OFFSET)
    assert pos2.distance(asteroid_pos) == pytest.approx(FRAGMENT_OFFSET)
    mid = (pos1 + pos2) / 2.0
    assert mid.x == pytest.approx(asteroid_pos.x)
    assert mid.y == pytest.approx(asteroid_pos.y)


def test_fragment_positions_perpendicular_to_impact():
    pos1, pos2 = fragment_positions(Vec2(0.0, 0.0), Vec2(100.0, 0.0))
    assert pos1 == Vec2(100.0, 50.0)
    assert pos2 == Vec2(100.0, -50.0)