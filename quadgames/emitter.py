"""Particle emitters: spawning, simulating and retiring particles."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass, field, replace

from quadgames.particle_types import (
    AtlasConfig,
    BatchedCurve,
    BlendMode,
    Color,
    ColorCurve,
    Curve,
    EmissionShape,
    ParticleMaterial,
    ParticleShape,
    Point,
    PointEmission,
    RectangleMesh,
)


@dataclass
class EmitterConfig:
    """Everything that describes how an emitter spawns and animates particles.

    With ``local_coords`` false, particles spawn at the position passed to
    :meth:`Emitter.draw` and then live in world coordinates; with it true they
    stay relative to the emitter position.
    """

    local_coords: bool = False
    emission_shape: EmissionShape = field(default_factory=PointEmission)
    one_shot: bool = False
    lifetime: float = 1.0
    lifetime_randomness: float = 0.0
    explosiveness: float = 0.0
    amount: int = 8
    shape: ParticleShape = field(default_factory=RectangleMesh)
    emitting: bool = True
    initial_direction: Point = (0.0, -1.0)
    initial_direction_spread: float = 0.0
    initial_velocity: float = 50.0
    initial_velocity_randomness: float = 0.0
    linear_accel: float = 0.0
    initial_rotation: float = 0.0
    initial_rotation_randomness: float = 0.0
    initial_angular_velocity: float = 0.0
    initial_angular_velocity_randomness: float = 0.0
    angular_accel: float = 0.0
    angular_damping: float = 0.0
    size: float = 10.0
    size_randomness: float = 0.0
    size_curve: Curve | None = None
    blend_mode: BlendMode = BlendMode.ALPHA
    colors_curve: ColorCurve = field(default_factory=ColorCurve)
    gravity: Point = (0.0, 0.0)
    texture: object | None = None
    atlas: AtlasConfig | None = None
    material: ParticleMaterial | None = None
    post_processing: bool = False


@dataclass
class Particle:
    """One live particle: its drawn state and its simulation state."""

    x: float
    y: float
    rotation: float
    size: float
    velocity: Point
    angular_velocity: float
    lifetime: float
    initial_size: float
    index: int
    color: Color
    lived: float = 0.0
    life_fraction: float = 0.0
    frame: int = 0
    uv: tuple[float, float, float, float] = (1.0, 1.0, 0.0, 0.0)


def _randomized(base: float, randomness: float, rng: random.Random) -> float:
    return base - base * rng.uniform(0.0, randomness)


def _initial_velocity(direction: Point, spread: float, speed: float, rng: random.Random) -> Point:
    angle = rng.uniform(-spread / 2.0, spread / 2.0)
    dx, dy = direction
    cos_a, sin_a = math.cos(angle), math.sin(angle)
    return ((dx * cos_a - dy * sin_a) * speed, (dx * sin_a + dy * cos_a) * speed)


class Emitter:
    """Spawns particles according to an :class:`EmitterConfig` and simulates them."""

    MAX_PARTICLES = 10000

    def __init__(self, config: EmitterConfig | None = None, rng: random.Random | None = None) -> None:
        self.config = config if config is not None else EmitterConfig()
        self.rng = rng if rng is not None else random.Random()
        self.particles: list[Particle] = []
        self.last_emit_time = 0.0
        self.time_passed = 0.0
        self.particles_spawned = 0
        self.position: Point = (0.0, 0.0)
        self.batched_size_curve: BatchedCurve | None = None
        self.rebuild_size_curve()

    def reset(self) -> None:
        """Drop every particle and restart the emission cycle."""
        self.particles.clear()
        self.last_emit_time = 0.0
        self.time_passed = 0.0
        self.particles_spawned = 0

    def rebuild_size_curve(self) -> None:
        """Resample the configured size curve after it has changed."""
        curve = self.config.size_curve
        self.batched_size_curve = curve.batch() if curve is not None else None

    def _emit_particle(self, offset: Point) -> None:
        cfg = self.config
        rng = self.rng
        sx, sy = cfg.emission_shape.random_point(rng)
        ox, oy = offset[0] + sx, offset[1] + sy

        size = _randomized(cfg.size, cfg.size_randomness, rng)
        rotation = _randomized(cfg.initial_rotation, cfg.initial_rotation_randomness, rng)

        if cfg.local_coords:
            x, y = ox, oy
        else:
            x, y = self.position[0] + ox, self.position[1] + oy

        index = self.particles_spawned
        self.particles_spawned += 1

        speed = _randomized(cfg.initial_velocity, cfg.initial_velocity_randomness, rng)
        velocity = _initial_velocity(cfg.initial_direction, cfg.initial_direction_spread, speed, rng)
        angular_velocity = _randomized(
            cfg.initial_angular_velocity, cfg.initial_angular_velocity_randomness, rng
        )
        lifetime = _randomized(cfg.lifetime, cfg.lifetime_randomness, rng)

        self.particles.append(
            Particle(
                x=x,
                y=y,
                rotation=rotation,
                size=size,
                velocity=velocity,
                angular_velocity=angular_velocity,
                lifetime=lifetime,
                initial_size=size,
                index=index,
                color=cfg.colors_curve.start,
            )
        )

    def emit(self, pos: Point, n: int) -> None:
        """Immediately emit ``n`` particles at ``pos``, ignoring ``emitting`` and ``amount``."""
        for _ in range(n):
            self._emit_particle(pos)
            self.particles_spawned += 1

    def _spawn(self, dt: float) -> None:
        cfg = self.config
        self.time_passed += dt
        if cfg.amount <= 0:
            return
        gap = (cfg.lifetime / cfg.amount) * (1.0 - cfg.explosiveness)
        if gap < 0.001:
            spawn_amount = cfg.amount
        else:
            spawn_amount = int((self.time_passed - self.last_emit_time) / gap)

        for _ in range(spawn_amount):
            self.last_emit_time = self.time_passed
            if self.particles_spawned < cfg.amount:
                self._emit_particle((0.0, 0.0))
            if len(self.particles) >= cfg.amount:
                break

    def _advance(self, particle: Particle, dt: float) -> None:
        cfg = self.config
        vx, vy = particle.velocity
        vx += vx * cfg.linear_accel * dt
        vy += vy * cfg.linear_accel * dt
        particle.angular_velocity += particle.angular_velocity * cfg.angular_accel * dt
        particle.angular_velocity *= 1.0 - cfg.angular_damping

        t = particle.lived / particle.lifetime if particle.lifetime != 0.0 else 0.0
        particle.color = cfg.colors_curve.sample(t)

        particle.x += vx * dt
        particle.y += vy * dt
        particle.rotation += particle.angular_velocity * dt

        scale = self.batched_size_curve.get(t) if self.batched_size_curve is not None else 1.0
        particle.size = particle.initial_size * scale

        if particle.lifetime != 0.0:
            particle.life_fraction = t

        particle.lived += dt
        gx, gy = cfg.gravity
        particle.velocity = (vx + gx * dt, vy + gy * dt)

        atlas = cfg.atlas
        if atlas is not None:
            if particle.lifetime != 0.0:
                progress = particle.lived / particle.lifetime * (atlas.end_index - atlas.start_index)
                particle.frame = max(0, int(progress)) + atlas.start_index
            particle.uv = atlas.frame_uv(particle.frame)
        else:
            particle.uv = (0.0, 0.0, 1.0, 1.0)

    def update(self, dt: float) -> None:
        """Advance the emitter and every particle by ``dt`` seconds."""
        cfg = self.config
        if cfg.emitting:
            self._spawn(dt)

        if cfg.one_shot and self.time_passed > cfg.lifetime:
            self.time_passed = 0.0
            self.last_emit_time = 0.0
            cfg.emitting = False

        for particle in self.particles:
            self._advance(particle, dt)

        alive: list[Particle] = []
        for particle in self.particles:
            if particle.lived >= particle.lifetime or particle.lived > cfg.lifetime:
                if particle.lived != particle.lifetime:
                    self.particles_spawned -= 1
            else:
                alive.append(particle)
        self.particles = alive

    def draw(self, pos: Point, dt: float) -> list[Particle]:
        """Move the emitter to ``pos``, advance it by ``dt`` and return the live particles."""
        self.position = pos
        self.update(dt)
        return self.particles


class EmittersCache:
    """Many short-lived emitters sharing one configuration, recycled when they finish."""

    CACHE_DEFAULT_SIZE = 10

    def __init__(self, config: EmitterConfig, rng: random.Random | None = None) -> None:
        self.config = config
        self.rng = rng if rng is not None else random.Random()
        self.emitters_cache: list[Emitter] = [
            Emitter(replace(config, emitting=False), self.rng)
            for _ in range(self.CACHE_DEFAULT_SIZE)
        ]
        self.active_emitters: list[tuple[Emitter, Point]] = []

    def spawn(self, pos: Point) -> Emitter:
        """Start an emitter at ``pos``, reusing a cached one when possible."""
        if self.emitters_cache:
            emitter = self.emitters_cache.pop()
        else:
            emitter = Emitter(replace(self.config), self.rng)
        emitter.config.emitting = True
        emitter.reset()
        self.active_emitters.append((emitter, pos))
        return emitter

    def update(self, dt: float) -> list[tuple[Emitter, Point]]:
        """Advance every active emitter; finished ones go back to the cache."""
        still_active: list[tuple[Emitter, Point]] = []
        for emitter, pos in self.active_emitters:
            emitter.position = pos
            emitter.update(dt)
            if emitter.config.emitting:
                still_active.append((emitter, pos))
            else:
                self.emitters_cache.append(emitter)
        self.active_emitters = still_active
        return self.active_emitters