"""
Shared data types for the Connect-Four core.

These types are the contracts between the engine and its presentation layer.
Coordinates are (column, row) with row 0 at the bottom of the board.
"""

from dataclasses import dataclass
from enum import Enum, auto


# ─────────────────────────────────────────────────────────────
# COLORS & CELL READINGS
# ─────────────────────────────────────────────────────────────


class Color(Enum):
    """Token color."""

    RED = "red"
    YELLOW = "yellow"

    def __str__(self) -> str:
        return self.value

    @property
    def other(self) -> "Color":
        """The opposing color."""
        return Color.RED if self is Color.YELLOW else Color.YELLOW

    @property
    def label(self) -> str:
        """Human readable name ("Red", "Yellow")."""
        return self.value.capitalize()

    @property
    def symbol(self) -> str:
        """Get emoji symbol for display."""
        return {"red": "🔴", "yellow": "🟡"}[self.value]


class Slot(Enum):
    """Cell readings that are not a token."""

    EMPTY = "empty"
    OFF_BOARD = "off_board"  # Coordinates outside the grid


class GamePhase(Enum):
    """Current phase of the game."""

    IN_PROGRESS = auto()
    WON = auto()
    TIE = auto()


# ─────────────────────────────────────────────────────────────
# BOARD POSITIONS & MOVES
# ─────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class Position:
    """Grid position (0-indexed)."""

    column: int  # 0 = left
    row: int  # 0 = bottom


@dataclass(frozen=True)
class Move:
    """A successful token drop."""

    column: int
    color: Color
    position: Position

    def __str__(self) -> str:
        return f"{self.color.symbol} → Column {self.column}"


# ─────────────────────────────────────────────────────────────
# GAME STATE
# ─────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class GameState:
    """InProgress, Won(color) or Tie.

    Won and Tie are terminal. ``winner`` is set only for WON.
    """

    phase: GamePhase = GamePhase.IN_PROGRESS
    winner: Color | None = None

    @classmethod
    def in_progress(cls) -> "GameState":
        return cls(GamePhase.IN_PROGRESS)

    @classmethod
    def won(cls, color: Color) -> "GameState":
        return cls(GamePhase.WON, color)

    @classmethod
    def tie(cls) -> "GameState":
        return cls(GamePhase.TIE)

    @property
    def is_terminal(self) -> bool:
        return self.phase is not GamePhase.IN_PROGRESS

    @property
    def message(self) -> str:
        """End-of-game text for display."""
        if self.phase is GamePhase.TIE:
            return "It's a tie!"
        if self.phase is GamePhase.WON:
            return f"{self.winner.label} has won!"
        return "Game in progress"

    def __str__(self) -> str:
        if self.phase is GamePhase.WON:
            return f"Won({self.winner.name})"
        if self.phase is GamePhase.TIE:
            return "Tie"
        return "InProgress"


@dataclass(frozen=True)
class DropResult:
    """Outcome of a successful drop."""

    row: int
    state: GameState
