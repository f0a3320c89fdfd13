"""Errors raised by the Connect-Four core.

Every rejection is reported synchronously to the caller and leaves the
grid and game state untouched.
"""

from .types import GameState


class ConnectFourError(Exception):
    """Base class for all game errors."""


class InvalidConfigurationError(ConnectFourError, ValueError):
    """Board dimensions or match length violate their preconditions."""


class ColumnOutOfRangeError(ConnectFourError, IndexError):
    """Column index outside ``[0, width)``."""

    def __init__(self, column: int, width: int):
        self.column = column
        self.width = width
        super().__init__(f"Column {column} is out of range (0-{width - 1})")


class ColumnFullError(ConnectFourError):
    """Move targets a column with no empty cell."""

    def __init__(self, column: int):
        self.column = column
        super().__init__(f"Column {column} is full")


class GameAlreadyOverError(ConnectFourError):
    """Move attempted after the game reached a terminal state."""

    def __init__(self, state: GameState):
        self.state = state
        super().__init__(f"Game is already over: {state}")
