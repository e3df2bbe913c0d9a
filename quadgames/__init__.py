"""Small pygame games, a particle system and the game logic behind them."""

__version__ = "0.1.0"