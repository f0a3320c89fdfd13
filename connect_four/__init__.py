"""
Connect-Four game engine.

Grid occupancy, turn sequencing and win/tie detection for boards of any
size and match length. Rendering is left to the caller.
"""

from .core import (
    ColumnFullError,
    ColumnOutOfRangeError,
    Color,
    ConnectFourError,
    DropResult,
    GameAlreadyOverError,
    GamePhase,
    GameState,
    InvalidConfigurationError,
    Slot,
)
from .game import GameEngine, Grid, new_game


__all__ = [
    "new_game",
    "GameEngine",
    "Grid",
    "Color",
    "Slot",
    "GamePhase",
    "GameState",
    "DropResult",
    "ConnectFourError",
    "InvalidConfigurationError",
    "ColumnOutOfRangeError",
    "ColumnFullError",
    "GameAlreadyOverError",
]
__version__ = "1.0.0"
