"""Sprite stress test: spawn bouncing critters and watch the frame rate."""

from __future__ import annotations

import argparse
import random
from dataclasses import dataclass

import pygame

from quadgames.camera_math import Vec2

SPAWN_BATCH = 100
SPEED_RANGE = 250.0 / 60.0

RGBA = tuple[int, int, int, int]


@dataclass
class Critter:
    pos: Vec2
    speed: Vec2
    color: RGBA


class BunnyMark:
    """A crowd of critters bouncing inside a ``width`` by ``height`` screen."""

    def __init__(
        self,
        width: float,
        height: float,
        sprite_size: tuple[float, float] = (32.0, 32.0),
        rng: random.Random | None = None,
    ) -> None:
        self.width = width
        self.height = height
        self.sprite_size = sprite_size
        self.rng = rng if rng is not None else random.Random()
        self.critters: list[Critter] = []

    def spawn(self, pos: Vec2, count: int = SPAWN_BATCH) -> None:
        """Add ``count`` critters at ``pos`` with random speeds and tints."""
        rng = self.rng
        for _ in range(count):
            self.critters.append(
                Critter(
                    pos=Vec2(pos.x, pos.y),
                    speed=Vec2(
                        rng.uniform(-250.0, 250.0) / 60.0,
                        rng.uniform(-250.0, 250.0) / 60.0,
                    ),
                    color=(rng.randrange(50, 240), rng.randrange(80, 240), rng.randrange(100, 240), 255),
                )
            )

    def update(self) -> None:
        """Move every critter one frame, bouncing off the screen edges."""
        half_w = self.sprite_size[0] / 2.0
        half_h = self.sprite_size[1] / 2.0
        for critter in self.critters:
            critter.pos = critter.pos + critter.speed
            sx, sy = critter.speed
            cx = critter.pos.x + half_w
            cy = critter.pos.y + half_h
            if cx > self.width or cx < 0.0:
                sx = -sx
            if cy > self.height or cy < 0.0:
                sy = -sy
            critter.speed = Vec2(sx, sy)


def main(argv: list[str] | None = None) -> int:
    """Open a window; hold the left mouse button to add critters."""
    parser = argparse.ArgumentParser(prog="quadgames-bunnymark", description="Sprite benchmark.")
    parser.add_argument("--width", type=int, default=800)
    parser.add_argument("--height", type=int, default=600)
    args = parser.parse_args(argv)

    mark = BunnyMark(args.width, args.height)
    w, h = (round(v) for v in mark.sprite_size)
    pygame.init()
    try:
        pygame.display.set_caption("Bunnymark")
        screen = pygame.display.set_mode((args.width, args.height))
        font = pygame.font.Font(None, 32)
        clock = pygame.time.Clock()
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT or (
                    event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE
                ):
                    running = False
            if pygame.mouse.get_pressed()[0]:
                mx, my = pygame.mouse.get_pos()
                mark.spawn(Vec2(float(mx), float(my)))
            mark.update()

            screen.fill((0, 0, 0))
            for critter in mark.critters:
                pygame.draw.rect(screen, critter.color, (critter.pos.x, critter.pos.y, w, h))
            screen.blit(font.render(f"FPS: {round(clock.get_fps())}", True, (255, 255, 255)), (0, 0))
            screen.blit(font.render(f"Critters: {len(mark.critters)}", True, (255, 255, 255)), (0, 24))
            pygame.display.flip()
            clock.tick(60)
    finally:
        pygame.quit()
    return 0