import random
from collections import deque

import pytest

from quadgames.snake import (
    DOWN,
    FRUIT_SCORE,
    INITIAL_SPEED,
    LEFT,
    RIGHT,
    SQUARES,
    UP,
    SnakeGame,
)


def _game():
    game = SnakeGame(rng=random.Random(7))
    game.fruit = (SQUARES - 1, SQUARES - 1)
    return game


def test_new_game_state():
    game = _game()
    assert game.head == (0, 0)
    assert game.direction == RIGHT
    assert len(game.body) == 0
    assert game.score == 0
    assert game.speed == INITIAL_SPEED
    assert game.game_over is False


def test_tick_moves_without_growing():
    game = _game()
    game.tick()
    assert game.head == (1, 0)
    assert len(game.body) == 0


def test_eating_fruit_grows_and_scores():
    game = _game()
    game.fruit = (1, 0)
    game.tick()
    assert game.score == FRUIT_SCORE
    assert list(game.body) == [(0, 0)]
    assert game.speed < INITIAL_SPEED
    assert 0 <= game.fruit[0] < SQUARES and 0 <= game.fruit[1] < SQUARES


def test_steer_cannot_reverse():
    game = _game()
    game.steer(LEFT)
    assert game.direction == RIGHT
    game.steer(DOWN)
    assert game.direction == DOWN
    game.steer(UP)
    assert game.direction == DOWN


def test_steer_rejects_non_direction():
    with pytest.raises(ValueError):
        _game().steer((2, 0))


def test_leaving_board_ends_game():
    game = _game()
    game.steer(UP)
    game.tick()
    assert game.game_over is True
    head = game.head
    game.tick()
    assert game.head == head


def test_running_into_body_ends_game():
    game = _game()
    game.head = (2, 2)
    game.direction = RIGHT
    game.body = deque([(2, 3), (3, 3), (3, 2), (3, 1)])
    game.tick()
    assert game.game_over is True


def test_reset_restores_start():
    game = _game()
    game.fruit = (1, 0)
    game.tick()
    game.steer(UP)
    game.tick()
    assert game.game_over is True
    game.reset()
    assert game.game_over is False
    assert game.score == 0
    assert game.head == (0, 0)
    assert len(game.body) == 0


def test_invalid_board_size():
    with pytest.raises(ValueError):
        SnakeGame(squares=0)