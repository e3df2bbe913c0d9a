import random

import pytest

from quadgames.asteroids import (
    ASTEROID_COUNT,
    BULLET_SPEED,
    MAX_SPEED,
    SPLIT_SHRINK,
    TURN_SPEED,
    Asteroid,
    AsteroidsGame,
    Bullet,
    wrap_around,
)
from quadgames.camera_math import Vec2


def _quiet_game():
    game = AsteroidsGame(800, 600, random.Random(1), start_time=0.0)
    game.asteroids = [Asteroid(pos=Vec2(10.0, 10.0), vel=Vec2(), size=5.0, sides=3)]
    return game


def test_wrap_around_edges():
    assert wrap_around(Vec2(801.0, 50.0), 800, 600) == Vec2(0.0, 50.0)
    assert wrap_around(Vec2(-1.0, 50.0), 800, 600) == Vec2(800, 50.0)
    assert wrap_around(Vec2(50.0, 601.0), 800, 600) == Vec2(50.0, 0.0)
    assert wrap_around(Vec2(50.0, -1.0), 800, 600) == Vec2(50.0, 600)
    assert wrap_around(Vec2(50.0, 60.0), 800, 600) == Vec2(50.0, 60.0)


def test_reset_spawns_asteroids_around_centre():
    game = AsteroidsGame(800, 600, random.Random(3))
    assert len(game.asteroids) == ASTEROID_COUNT
    assert game.ship.pos == game.center
    for asteroid in game.asteroids:
        assert 3 <= asteroid.sides < 8
        assert asteroid.pos.distance(game.center) == pytest.approx(600 / 2.0)


def test_thrust_accelerates_forward():
    game = _quiet_game()
    game.update(1.0, thrust=True)
    assert game.ship.vel.y < 0
    assert game.ship.vel.x == pytest.approx(0.0)


def test_speed_is_capped():
    game = _quiet_game()
    game.ship.vel = Vec2(10.0, 0.0)
    game.update(1.0)
    assert game.ship.vel.length() == pytest.approx(MAX_SPEED)


def test_turning():
    game = _quiet_game()
    game.update(1.0, right=True)
    assert game.ship.rot == TURN_SPEED
    game.update(1.0, left=True)
    assert game.ship.rot == 0.0


def test_fire_respects_cooldown():
    game = _quiet_game()
    game.update(1.0, fire=True)
    assert len(game.bullets) == 1
    assert game.bullets[0].vel == Vec2(0.0, -BULLET_SPEED)
    game.update(1.2, fire=True)
    assert len(game.bullets) == 1
    game.update(1.6, fire=True)
    assert len(game.bullets) == 2


def test_bullet_expires():
    game = _quiet_game()
    game.bullets = [Bullet(pos=Vec2(400.0, 100.0), vel=Vec2(0.0, -7.0), shot_at=0.0)]
    game.update(1.5)
    assert game.bullets == []


def test_hit_splits_asteroid():
    game = _quiet_game()
    game.asteroids = [Asteroid(pos=Vec2(100.0, 100.0), vel=Vec2(), size=40.0, sides=5)]
    game.bullets = [Bullet(pos=Vec2(100.0, 100.0), vel=Vec2(7.0, 0.0), shot_at=1.0)]
    game.update(1.0)
    assert game.bullets == []
    assert len(game.asteroids) == 2
    for fragment in game.asteroids:
        assert fragment.sides == 4
        assert fragment.size == pytest.approx(40.0 * SPLIT_SHRINK)
        assert fragment.pos == Vec2(100.0, 100.0)
    assert not game.gameover


def test_destroying_last_asteroid_wins():
    game = _quiet_game()
    game.asteroids = [Asteroid(pos=Vec2(100.0, 100.0), vel=Vec2(), size=40.0, sides=3)]
    game.bullets = [Bullet(pos=Vec2(100.0, 100.0), vel=Vec2(7.0, 0.0), shot_at=1.0)]
    assert game.update(1.0) is True
    assert game.won


def test_ship_collision_ends_game():
    game = _quiet_game()
    game.asteroids = [Asteroid(pos=game.center, vel=Vec2(), size=20.0, sides=4)]
    assert game.update(1.0) is True
    assert not game.won
    assert len(game.asteroids) == 1