"""Game logic module for Connect-Four."""

from .engine import GameEngine, new_game
from .grid import Grid
from .rules import Connect4Rules


__all__ = [
    "Connect4Rules",
    "GameEngine",
    "Grid",
    "new_game",
]
