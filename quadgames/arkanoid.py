"""Breakout-style game: bounce a ball off a paddle to clear a wall of blocks."""

from __future__ import annotations

import argparse
from collections.abc import Iterator
from dataclasses import dataclass, field

import pygame

BLOCKS_W = 10
BLOCKS_H = 10
SCR_W = 20.0
SCR_H = 20.0
PLATFORM_WIDTH = 5.0
PLATFORM_HEIGHT = 0.2
PLATFORM_SPEED = 3.0
BALL_RADIUS = 0.2
BLOCK_W = SCR_W / BLOCKS_W
BLOCK_H = 7.0 / BLOCKS_H
BLOCK_GAP = 0.05
RESPAWN_Y = 10.0

Rect = tuple[float, float, float, float]


def _full_wall() -> list[list[bool]]:
    return [[True] * BLOCKS_W for _ in range(BLOCKS_H)]


@dataclass
class ArkanoidGame:
    """Game state in world units: the field is ``SCR_W`` by ``SCR_H`` with y growing downwards."""

    blocks: list[list[bool]] = field(default_factory=_full_wall)
    ball_x: float = 12.0
    ball_y: float = 7.0
    dx: float = 3.5
    dy: float = -3.5
    platform_x: float = 10.0
    stick: bool = True

    @property
    def blocks_left(self) -> int:
        return sum(row.count(True) for row in self.blocks)

    def block_rects(self) -> Iterator[Rect]:
        """Yield (x, y, width, height) of every block still standing."""
        for j, row in enumerate(self.blocks):
            for i, alive in enumerate(row):
                if alive:
                    yield (
                        i * BLOCK_W + BLOCK_GAP,
                        j * BLOCK_H + BLOCK_GAP,
                        BLOCK_W - 2 * BLOCK_GAP,
                        BLOCK_H - 2 * BLOCK_GAP,
                    )

    def update(self, dt: float, left: bool = False, right: bool = False, launch: bool = False) -> None:
        """Advance the game by ``dt`` seconds with the given keys held."""
        half = PLATFORM_WIDTH / 2.0
        if right and self.platform_x < SCR_W - half:
            self.platform_x += PLATFORM_SPEED * dt
        if left and self.platform_x > half:
            self.platform_x -= PLATFORM_SPEED * dt

        if not self.stick:
            self.ball_x += self.dx * dt
            self.ball_y += self.dy * dt
        else:
            self.ball_x = self.platform_x
            self.ball_y = SCR_H - 0.5
            self.stick = not launch

        if self.ball_x <= 0.0 or self.ball_x > SCR_W:
            self.dx = -self.dx
        on_platform = (
            self.ball_y > SCR_H - PLATFORM_HEIGHT - 0.15 / 2.0
            and self.platform_x - half <= self.ball_x <= self.platform_x + half
        )
        if self.ball_y <= 0.0 or on_platform:
            self.dy = -self.dy
        if self.ball_y >= SCR_H:
            self.ball_y = RESPAWN_Y
            self.dy = -abs(self.dy)
            self.stick = True

        for j, row in enumerate(self.blocks):
            for i, alive in enumerate(row):
                if not alive:
                    continue
                block_x = i * BLOCK_W + BLOCK_GAP
                block_y = j * BLOCK_H + BLOCK_GAP
                if (
                    block_x <= self.ball_x < block_x + BLOCK_W
                    and block_y <= self.ball_y < block_y + BLOCK_H
                ):
                    self.dy = -self.dy
                    row[i] = False


_SKYBLUE = (102, 191, 255)
_DARKBLUE = (0, 82, 172)
_RED = (230, 41, 55)
_DARKPURPLE = (112, 31, 126)
_BLACK = (0, 0, 0)


def main(argv: list[str] | None = None) -> int:
    """Play the game in a window."""
    parser = argparse.ArgumentParser(prog="quadgames-arkanoid", description="Arkanoid.")
    parser.add_argument("--size", type=int, default=640, help="window size in pixels")
    args = parser.parse_args(argv)

    game = ArkanoidGame()
    scale = args.size / SCR_W
    pygame.init()
    try:
        pygame.display.set_caption("Arkanoid")
        screen = pygame.display.set_mode((args.size, args.size))
        font = pygame.font.Font(None, max(12, round(scale)))
        clock = pygame.time.Clock()
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT or (
                    event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE
                ):
                    running = False
            dt = clock.tick(60) / 1000.0
            keys = pygame.key.get_pressed()
            was_stuck = game.stick
            game.update(dt, left=keys[pygame.K_LEFT], right=keys[pygame.K_RIGHT], launch=keys[pygame.K_SPACE])

            screen.fill(_SKYBLUE)
            if was_stuck:
                text = font.render("Press space to start", True, _BLACK)
                screen.blit(text, ((SCR_W / 2.0 - 5.0) * scale, SCR_H / 2.0 * scale - text.get_height()))
            for x, y, w, h in game.block_rects():
                pygame.draw.rect(screen, _DARKBLUE, (x * scale, y * scale, w * scale, h * scale))
            pygame.draw.circle(
                screen, _RED, (game.ball_x * scale, game.ball_y * scale), max(1, BALL_RADIUS * scale)
            )
            pygame.draw.rect(
                screen,
                _DARKPURPLE,
                (
                    (game.platform_x - PLATFORM_WIDTH / 2.0) * scale,
                    (SCR_H - PLATFORM_HEIGHT) * scale,
                    PLATFORM_WIDTH * scale,
                    max(1, PLATFORM_HEIGHT * scale),
                ),
            )
            pygame.display.flip()
    finally:
        pygame.quit()
    return 0