"""A swaying fractal tree, computed as line segments and drawn with pygame."""

from __future__ import annotations

import argparse
import math
from collections.abc import Iterator
from dataclasses import dataclass

import pygame

MAX_DEPTH = 8
BRANCH_WIDTH = 0.01
ANGLE_SHRINK = 0.7
LENGTH_SHRINK = 0.8
SWAY = 0.1


@dataclass(frozen=True)
class Segment:
    """One branch, from ``start`` to ``end`` in world units with y pointing up."""

    start: tuple[float, float]
    end: tuple[float, float]
    depth: int
    width: float = BRANCH_WIDTH


def _grow(
    time: float, depth: int, angle: float, tall: float, origin: tuple[float, float], heading: float
) -> Iterator[Segment]:
    if depth >= MAX_DEPTH:
        return
    ox, oy = origin
    end = (ox - math.sin(heading) * tall, oy + math.cos(heading) * tall)
    yield Segment(origin, end, depth)
    yield from _grow(
        time, depth + 1, angle * ANGLE_SHRINK, tall * LENGTH_SHRINK, end,
        heading + angle + math.sin(time) * SWAY,
    )
    yield from _grow(
        time, depth + 1, angle * ANGLE_SHRINK, tall * LENGTH_SHRINK, end,
        heading - angle - math.cos(time) * SWAY,
    )


def tree_segments(time: float, depth: int = 0, angle: float = 1.0, tall: float = 0.3) -> list[Segment]:
    """Branches of the tree at ``time`` seconds, trunk first, rooted at the origin."""
    return list(_grow(time, depth, angle, tall, (0.0, 0.0), 0.0))


_LIGHTGRAY = (200, 200, 200)
_DARKGRAY = (80, 80, 80)


def main(argv: list[str] | None = None) -> int:
    """Open a window showing the swaying tree."""
    parser = argparse.ArgumentParser(prog="quadgames-tree", description="Fractal tree.")
    parser.add_argument("--width", type=int, default=800)
    parser.add_argument("--height", type=int, default=600)
    args = parser.parse_args(argv)

    w, h = args.width, args.height

    def to_screen(point: tuple[float, float]) -> tuple[float, float]:
        x, y = point
        return ((x + 1.0) / 2.0 * w, (1.5 - y) / 2.0 * h)

    pygame.init()
    try:
        pygame.display.set_caption("Tree")
        screen = pygame.display.set_mode((w, h))
        clock = pygame.time.Clock()
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT or (
                    event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE
                ):
                    running = False
            now = pygame.time.get_ticks() / 1000.0
            screen.fill(_LIGHTGRAY)
            pygame.draw.circle(screen, _DARKGRAY, to_screen((0.0, 0.0)), max(1, 0.03 * w / 2.0))
            for segment in tree_segments(now):
                pygame.draw.line(
                    screen,
                    _DARKGRAY,
                    to_screen(segment.start),
                    to_screen(segment.end),
                    max(1, round(segment.width * w / 2.0)),
                )
            pygame.display.flip()
            clock.tick(60)
    finally:
        pygame.quit()
    return 0