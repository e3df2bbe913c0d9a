"""Asteroids: steer a ship, shoot rocks, and split them into smaller ones."""

from __future__ import annotations

import argparse
import math
import random
from dataclasses import dataclass, field

import pygame

from quadgames.camera_math import Vec2

SHIP_HEIGHT = 25.0
SHIP_BASE = 22.0
MAX_SPEED = 5.0
THRUST = 1.0 / 3.0
FRICTION = 100.0
TURN_SPEED = 5.0
SHOT_COOLDOWN = 0.5
BULLET_SPEED = 7.0
BULLET_LIFETIME = 1.5
ASTEROID_COUNT = 10
SPLIT_SHRINK = 0.8


@dataclass
class Ship:
    pos: Vec2
    rot: float = 0.0
    vel: Vec2 = field(default_factory=Vec2)


@dataclass
class Bullet:
    pos: Vec2
    vel: Vec2
    shot_at: float
    collided: bool = False


@dataclass
class Asteroid:
    pos: Vec2
    vel: Vec2
    size: float
    sides: int
    rot: float = 0.0
    rot_speed: float = 0.0
    collided: bool = False


def wrap_around(pos: Vec2, width: float, height: float) -> Vec2:
    """Move a position that left the screen to the opposite edge."""
    x, y = pos.x, pos.y
    if x > width:
        x = 0.0
    if x < 0.0:
        x = width
    if y > height:
        y = 0.0
    if y < 0.0:
        y = height
    return Vec2(x, y)


def _random_unit(rng: random.Random) -> Vec2:
    while True:
        v = Vec2(rng.uniform(-1.0, 1.0), rng.uniform(-1.0, 1.0))
        if v.length() > 0.0:
            return v.normalize()


class AsteroidsGame:
    """Game state on a ``width`` by ``height`` screen."""

    def __init__(
        self,
        width: float,
        height: float,
        rng: random.Random | None = None,
        start_time: float = 0.0,
    ) -> None:
        self.width = width
        self.height = height
        self.rng = rng if rng is not None else random.Random()
        self.last_shot = start_time
        self.reset()

    @property
    def center(self) -> Vec2:
        return Vec2(self.width / 2.0, self.height / 2.0)

    @property
    def won(self) -> bool:
        return self.gameover and not self.asteroids

    def reset(self) -> None:
        """Put the ship in the middle and scatter a fresh ring of asteroids."""
        rng = self.rng
        self.ship = Ship(pos=self.center)
        self.bullets: list[Bullet] = []
        self.gameover = False
        radius = min(self.width, self.height)
        self.asteroids: list[Asteroid] = [
            Asteroid(
                pos=self.center + _random_unit(rng) * radius / 2.0,
                vel=Vec2(rng.uniform(-1.0, 1.0), rng.uniform(-1.0, 1.0)),
                rot_speed=rng.uniform(-2.0, 2.0),
                size=radius / 10.0,
                sides=rng.randrange(3, 8),
            )
            for _ in range(ASTEROID_COUNT)
        ]

    def _split(self, asteroid: Asteroid, bullet: Bullet) -> list[Asteroid]:
        rng = self.rng
        return [
            Asteroid(
                pos=asteroid.pos,
                vel=direction.normalize() * rng.uniform(1.0, 3.0),
                rot=rng.uniform(0.0, 360.0),
                rot_speed=rng.uniform(-2.0, 2.0),
                size=asteroid.size * SPLIT_SHRINK,
                sides=asteroid.sides - 1,
            )
            for direction in (Vec2(bullet.vel.y, -bullet.vel.x), Vec2(-bullet.vel.y, bullet.vel.x))
        ]

    def update(
        self,
        now: float,
        thrust: bool = False,
        left: bool = False,
        right: bool = False,
        fire: bool = False,
    ) -> bool:
        """Advance one frame at time ``now`` (seconds); return whether the game is over."""
        if self.gameover:
            return True
        ship = self.ship
        rotation = math.radians(ship.rot)
        heading = Vec2(math.sin(rotation), -math.cos(rotation))

        acc = -ship.vel / FRICTION
        if thrust:
            acc = heading * THRUST

        if fire and now - self.last_shot > SHOT_COOLDOWN:
            self.bullets.append(
                Bullet(pos=ship.pos + heading * SHIP_HEIGHT / 2.0, vel=heading * BULLET_SPEED, shot_at=now)
            )
            self.last_shot = now

        if right:
            ship.rot += TURN_SPEED
        elif left:
            ship.rot -= TURN_SPEED

        ship.vel = ship.vel + acc
        if ship.vel.length() > MAX_SPEED:
            ship.vel = ship.vel.normalize() * MAX_SPEED
        ship.pos = wrap_around(ship.pos + ship.vel, self.width, self.height)

        for bullet in self.bullets:
            bullet.pos = bullet.pos + bullet.vel
        for asteroid in self.asteroids:
            asteroid.pos = wrap_around(asteroid.pos + asteroid.vel, self.width, self.height)
            asteroid.rot += asteroid.rot_speed

        self.bullets = [b for b in self.bullets if b.shot_at + BULLET_LIFETIME > now]

        fragments: list[Asteroid] = []
        for asteroid in self.asteroids:
            if asteroid.pos.distance(ship.pos) < asteroid.size + SHIP_HEIGHT / 3.0:
                self.gameover = True
                break
            for bullet in self.bullets:
                if asteroid.pos.distance(bullet.pos) < asteroid.size:
                    asteroid.collided = True
                    bullet.collided = True
                    if asteroid.sides > 3:
                        fragments.extend(self._split(asteroid, bullet))
                    break

        self.bullets = [b for b in self.bullets if b.shot_at + BULLET_LIFETIME > now and not b.collided]
        self.asteroids = [a for a in self.asteroids if not a.collided] + fragments
        if not self.asteroids:
            self.gameover = True
        return self.gameover

    def ship_vertices(self) -> tuple[tuple[float, float], tuple[float, float], tuple[float, float]]:
        """Nose and two rear corners of the ship triangle."""
        pos = self.ship.pos
        r = math.radians(self.ship.rot)
        s, c = math.sin(r), math.cos(r)
        h, b = SHIP_HEIGHT / 2.0, SHIP_BASE / 2.0
        return (
            (pos.x + s * h, pos.y - c * h),
            (pos.x - c * b - s * h, pos.y - s * b + c * h),
            (pos.x + c * b - s * h, pos.y + s * b + c * h),
        )


def _polygon(asteroid: Asteroid) -> list[tuple[float, float]]:
    rot = math.radians(asteroid.rot)
    return [
        (
            asteroid.pos.x + asteroid.size * math.cos(2.0 * math.pi * i / asteroid.sides + rot),
            asteroid.pos.y + asteroid.size * math.sin(2.0 * math.pi * i / asteroid.sides + rot),
        )
        for i in range(asteroid.sides)
    ]


_LIGHTGRAY = (200, 200, 200)
_DARKGRAY = (80, 80, 80)
_BLACK = (0, 0, 0)


def main(argv: list[str] | None = None) -> int:
    """Play the game in a window."""
    parser = argparse.ArgumentParser(prog="quadgames-asteroids", description="Asteroids.")
    parser.add_argument("--width", type=int, default=800)
    parser.add_argument("--height", type=int, default=600)
    parser.add_argument("--seed", type=int, default=None)
    args = parser.parse_args(argv)

    pygame.init()
    try:
        pygame.display.set_caption("Asteroids")
        screen = pygame.display.set_mode((args.width, args.height))
        font = pygame.font.Font(None, 30)
        clock = pygame.time.Clock()
        game = AsteroidsGame(args.width, args.height, random.Random(args.seed), pygame.time.get_ticks() / 1000.0)
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT or (
                    event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE
                ):
                    running = False
            keys = pygame.key.get_pressed()
            now = pygame.time.get_ticks() / 1000.0

            if game.gameover:
                screen.fill(_LIGHTGRAY)
                text = (
                    "You Win!. Press [enter] to play again."
                    if game.won
                    else "Game Over. Press [enter] to play again."
                )
                surface = font.render(text, True, _DARKGRAY)
                screen.blit(surface, surface.get_rect(center=screen.get_rect().center))
                if keys[pygame.K_RETURN]:
                    game.reset()
            elif not game.update(
                now,
                thrust=keys[pygame.K_UP],
                left=keys[pygame.K_LEFT],
                right=keys[pygame.K_RIGHT],
                fire=keys[pygame.K_SPACE],
            ):
                screen.fill(_LIGHTGRAY)
                for bullet in game.bullets:
                    pygame.draw.circle(screen, _BLACK, (bullet.pos.x, bullet.pos.y), 2)
                for asteroid in game.asteroids:
                    pygame.draw.polygon(screen, _BLACK, _polygon(asteroid), 2)
                pygame.draw.polygon(screen, _BLACK, game.ship_vertices(), 2)

            pygame.display.flip()
            clock.tick(60)
    finally:
        pygame.quit()
    return 0