"""Ready-made particle effects and a small viewer that shows them."""

from __future__ import annotations

import argparse
import math
import random

import pygame

from quadgames.emitter import Emitter, EmitterConfig
from quadgames.particle_types import AtlasConfig, BlendMode, CircleMesh, Curve, RectangleMesh


def explosion() -> EmitterConfig:
    """A one-shot burst that waits until ``emitting`` is switched on."""
    return EmitterConfig(
        one_shot=True,
        emitting=False,
        lifetime=0.3,
        lifetime_randomness=0.7,
        explosiveness=0.95,
        amount=30,
        initial_direction_spread=2.0 * math.pi,
        initial_velocity=200.0,
        size=30.0,
        gravity=(0.0, -1000.0),
        atlas=AtlasConfig.from_range(4, 4, 8),
        blend_mode=BlendMode.ADDITIVE,
    )


def smoke() -> EmitterConfig:
    """A slow, narrow stream of smoke puffs."""
    return EmitterConfig(
        lifetime=0.8,
        amount=20,
        initial_direction_spread=0.2,
        atlas=AtlasConfig.from_range(4, 4, 0, 8),
    )


def fire() -> EmitterConfig:
    """A fast, bright stream of flames."""
    return EmitterConfig(
        lifetime=0.4,
        lifetime_randomness=0.1,
        amount=10,
        initial_direction_spread=0.5,
        initial_velocity=300.0,
        atlas=AtlasConfig.from_range(4, 4, 8),
        size=20.0,
        blend_mode=BlendMode.ADDITIVE,
    )


def fountain() -> EmitterConfig:
    """A tiny fountain whose particles grow and then shrink over their life."""
    return EmitterConfig(
        lifetime=0.5,
        amount=5,
        initial_direction_spread=0.0,
        initial_velocity=-50.0,
        size=2.0,
        size_curve=Curve(points=[(0.0, 0.5), (0.5, 1.0), (1.0, 0.0)]),
        blend_mode=BlendMode.ADDITIVE,
    )


def _channel(value: float) -> int:
    return max(0, min(255, round(value * 255)))


def render_emitter(surface: pygame.Surface, emitter: Emitter) -> int:
    """Draw the emitter's live particles onto ``surface`` and return how many were drawn."""
    cfg = emitter.config
    ox, oy = emitter.position if cfg.local_coords else (0.0, 0.0)
    additive = cfg.blend_mode is BlendMode.ADDITIVE
    aspect = cfg.shape.aspect_ratio if isinstance(cfg.shape, RectangleMesh) else 1.0
    round_shape = isinstance(cfg.shape, CircleMesh)

    drawn = 0
    for particle in emitter.particles:
        half = abs(particle.size)
        if half <= 0.0:
            continue
        width = max(1, round(half * 2.0 * abs(aspect)))
        height = max(1, round(half * 2.0))

        r, g, b, a = particle.color
        alpha = max(0.0, min(1.0, a))
        if additive:
            fill = (_channel(r * alpha), _channel(g * alpha), _channel(b * alpha), 255)
        else:
            fill = (_channel(r), _channel(g), _channel(b), _channel(alpha))

        sprite = pygame.Surface((width, height), pygame.SRCALPHA)
        if round_shape:
            pygame.draw.ellipse(sprite, fill, sprite.get_rect())
        else:
            sprite.fill(fill)

        rect = sprite.get_rect(center=(round(particle.x + ox), round(particle.y + oy)))
        if additive:
            surface.blit(sprite, rect, special_flags=pygame.BLEND_RGB_ADD)
        else:
            surface.blit(sprite, rect)
        drawn += 1
    return drawn


def _run_showcase(screen: pygame.Surface, clock: pygame.time.Clock) -> None:
    rng = random.Random()
    one_shot = Emitter(explosion(), rng)
    local = Emitter(EmitterConfig(**{**vars(smoke()), "local_coords": True}), rng)
    world = Emitter(EmitterConfig(**{**vars(fire()), "local_coords": False}), rng)
    font = pygame.font.Font(None, 30)
    width, height = screen.get_size()

    while True:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return
            if event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    return
                if event.key == pygame.K_SPACE:
                    one_shot.config.emitting = True

        dt = clock.tick(60) / 1000.0
        now = pygame.time.get_ticks() / 1000.0
        screen.fill((0, 0, 0))

        for row, (text, color) in enumerate(
            (
                ("Local coord emitter", (230, 41, 55)),
                ("World coord emitter", (0, 228, 48)),
                ("One shot emitter, press Space to emit", (253, 249, 0)),
            )
        ):
            screen.blit(font.render(text, True, color), (20, 30 * row))

        one_shot.draw((650.0, 82.0), dt)
        render_emitter(screen, one_shot)
        pygame.draw.circle(screen, (253, 249, 0), (650, 82), 15)

        local_pos = (
            math.sin(now * 0.3) * width / 2.5 + width / 2.0,
            math.cos(now * 0.5) * height / 2.5 + height / 2.0,
        )
        local.draw(local_pos, dt)
        render_emitter(screen, local)
        pygame.draw.circle(screen, (230, 41, 55), (round(local_pos[0]), round(local_pos[1])), 15)

        world_pos = (
            math.sin(now * 0.6 + 1.0) * width / 2.5 + width / 2.0,
            math.cos(now * 0.4 + 1.0) * height / 2.5 + height / 2.0,
        )
        world.draw(world_pos, dt)
        render_emitter(screen, world)
        pygame.draw.circle(screen, (0, 228, 48), (round(world_pos[0]), round(world_pos[1])), 15)

        pygame.display.flip()


def _run_fountain(screen: pygame.Surface, clock: pygame.time.Clock) -> None:
    emitter = Emitter(fountain())
    canvas = pygame.Surface((100, 100))
    while True:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return
            if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                return
        dt = clock.tick(60) / 1000.0
        canvas.fill((0, 0, 0))
        emitter.draw((50.0, 50.0), dt)
        render_emitter(canvas, emitter)
        screen.blit(pygame.transform.scale(canvas, screen.get_size()), (0, 0))
        pygame.display.flip()


def main(argv: list[str] | None = None) -> int:
    """Open a window showing the particle effects."""
    parser = argparse.ArgumentParser(prog="quadgames-effects", description="Particle effects viewer.")
    parser.add_argument("--fountain", action="store_true", help="show the single fountain emitter")
    parser.add_argument("--width", type=int, default=800)
    parser.add_argument("--height", type=int, default=600)
    args = parser.parse_args(argv)

    pygame.init()
    try:
        pygame.display.set_caption("Fountain")
        screen = pygame.display.set_mode((args.width, args.height))
        clock = pygame.time.Clock()
        if args.fountain:
            _run_fountain(screen, clock)
        else:
            _run_showcase(screen, clock)
    finally:
        pygame.quit()
    return 0