"""Snake on a square board, with a pygame front end."""

from __future__ import annotations

import argparse
import random
from collections import deque

import pygame

Point = tuple[int, int]

UP: Point = (0, -1)
DOWN: Point = (0, 1)
RIGHT: Point = (1, 0)
LEFT: Point = (-1, 0)
DIRECTIONS = (UP, DOWN, RIGHT, LEFT)

SQUARES = 16
INITIAL_SPEED = 0.3
FRUIT_SCORE = 100
SPEED_FACTOR = 0.9


class SnakeGame:
    """Game state: the snake, the fruit, the score and the step interval."""

    def __init__(self, squares: int = SQUARES, rng: random.Random | None = None) -> None:
        if squares <= 0:
            raise ValueError("board must have at least one square")
        self.squares = squares
        self.rng = rng if rng is not None else random.Random()
        self.reset()

    def _random_cell(self) -> Point:
        return (self.rng.randrange(self.squares), self.rng.randrange(self.squares))

    def reset(self) -> None:
        """Start a new game."""
        self.head: Point = (0, 0)
        self.direction: Point = RIGHT
        self.body: deque[Point] = deque()
        self.fruit: Point = self._random_cell()
        self.score = 0
        self.speed = INITIAL_SPEED
        self.game_over = False

    def steer(self, direction: Point) -> None:
        """Turn the snake, unless that would reverse it onto itself."""
        if direction not in DIRECTIONS:
            raise ValueError(f"not a direction: {direction!r}")
        if direction != (-self.direction[0], -self.direction[1]):
            self.direction = direction

    def tick(self) -> None:
        """Move the snake one square, eating, growing and checking for collisions."""
        if self.game_over:
            return
        self.body.appendleft(self.head)
        self.head = (self.head[0] + self.direction[0], self.head[1] + self.direction[1])
        if self.head == self.fruit:
            self.fruit = self._random_cell()
            self.score += FRUIT_SCORE
            self.speed *= SPEED_FACTOR
        else:
            self.body.pop()

        x, y = self.head
        if not (0 <= x < self.squares and 0 <= y < self.squares):
            self.game_over = True
        if self.head in self.body:
            self.game_over = True


_LIGHTGRAY = (200, 200, 200)
_WHITE = (255, 255, 255)
_DARKGREEN = (0, 117, 44)
_LIME = (0, 158, 47)
_GOLD = (255, 203, 0)
_DARKGRAY = (80, 80, 80)


def _draw_board(screen: pygame.Surface, game: SnakeGame, font: pygame.font.Font) -> None:
    width, height = screen.get_size()
    screen.fill(_LIGHTGRAY)
    game_size = min(width, height)
    offset_x = (width - game_size) / 2 + 10
    offset_y = (height - game_size) / 2 + 10
    sq = (height - offset_y * 2) / game.squares

    pygame.draw.rect(screen, _WHITE, (offset_x, offset_y, game_size - 20, game_size - 20))
    for i in range(1, game.squares):
        pygame.draw.line(
            screen, _LIGHTGRAY, (offset_x, offset_y + sq * i), (width - offset_x, offset_y + sq * i), 2
        )
        pygame.draw.line(
            screen, _LIGHTGRAY, (offset_x + sq * i, offset_y), (offset_x + sq * i, height - offset_y), 2
        )

    def cell(point: Point, color: tuple[int, int, int]) -> None:
        pygame.draw.rect(screen, color, (offset_x + point[0] * sq, offset_y + point[1] * sq, sq, sq))

    cell(game.head, _DARKGREEN)
    for part in game.body:
        cell(part, _LIME)
    cell(game.fruit, _GOLD)
    screen.blit(font.render(f"SCORE: {game.score}", True, _DARKGRAY), (10, 10))


def _draw_game_over(screen: pygame.Surface, font: pygame.font.Font) -> None:
    screen.fill(_WHITE)
    text = font.render("Game Over. Press [enter] to play again.", True, _DARKGRAY)
    screen.blit(text, text.get_rect(center=screen.get_rect().center))


def main(argv: list[str] | None = None) -> int:
    """Play snake in a window."""
    parser = argparse.ArgumentParser(prog="quadgames-snake", description="Snake.")
    parser.add_argument("--size", type=int, default=640, help="window size in pixels")
    parser.add_argument("--seed", type=int, default=None)
    args = parser.parse_args(argv)

    game = SnakeGame(rng=random.Random(args.seed))
    pygame.init()
    try:
        pygame.display.set_caption("Snake")
        screen = pygame.display.set_mode((args.size, args.size))
        font = pygame.font.Font(None, 30)
        clock = pygame.time.Clock()
        last_update = pygame.time.get_ticks() / 1000.0
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT or (
                    event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE
                ):
                    running = False
            keys = pygame.key.get_pressed()
            now = pygame.time.get_ticks() / 1000.0

            if not game.game_over:
                for key, direction in (
                    (pygame.K_RIGHT, RIGHT),
                    (pygame.K_LEFT, LEFT),
                    (pygame.K_UP, UP),
                    (pygame.K_DOWN, DOWN),
                ):
                    if keys[key] and direction != (-game.direction[0], -game.direction[1]):
                        game.steer(direction)
                        break
                if now - last_update > game.speed:
                    last_update = now
                    game.tick()

            if game.game_over:
                _draw_game_over(screen, font)
                if keys[pygame.K_RETURN]:
                    game.reset()
                    last_update = now
            else:
                _draw_board(screen, game, font)

            pygame.display.flip()
            clock.tick(60)
    finally:
        pygame.quit()
    return 0