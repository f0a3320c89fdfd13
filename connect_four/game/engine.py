"""Game engine for Connect-Four state management."""

import logging
from collections.abc import Callable

from ..core.bus import EventBus
from ..core.config import WinCheck
from ..core.errors import (
    ColumnFullError,
    ColumnOutOfRangeError,
    GameAlreadyOverError,
    InvalidConfigurationError,
)
from ..core.events import Event, EventType
from ..core.types import Color, DropResult, GameState, Move, Position, Slot
from .grid import Grid
from .rules import Connect4Rules


logger = logging.getLogger(__name__)

FIRST_COLOR = Color.YELLOW


class GameEngine:
    """Manages one game's state and enforces rules.

    Stateful engine that:
    - Owns the grid and whose turn it is
    - Validates moves
    - Detects wins/ties after every drop
    - Emits events for state changes on its own bus

    Won and Tie are terminal: every later drop is rejected. Restarting means
    building a new engine (see ``reset``); the old one keeps its state and
    its subscribers.
    """

    def __init__(
        self,
        width: int = 7,
        height: int = 6,
        match_length: int = 4,
        *,
        strategy: WinCheck = "last_move",
        bus: EventBus | None = None,
    ):
        """Initialize a new game.

        Args:
            width: Number of columns
            height: Number of rows
            match_length: Tokens in a row needed to win, in
                ``[1, min(width, height)]``
            strategy: ``"last_move"`` or ``"full_scan"`` win detection
            bus: Event bus (a private one is created if None)

        Raises:
            InvalidConfigurationError: If dimensions or match length are invalid
        """
        if not 1 <= match_length <= min(width, height):
            raise InvalidConfigurationError(
                f"Match length must be between 1 and {min(width, height)} "
                f"for a {width}x{height} board (got {match_length})"
            )
        if strategy not in ("last_move", "full_scan"):
            raise InvalidConfigurationError(f"Unknown win check strategy: {strategy!r}")

        self.grid = Grid(width, height)
        self.rules = Connect4Rules(match_length)
        self.strategy = strategy
        self.bus = bus or EventBus()
        self._state = GameState.in_progress()
        self._current_color = FIRST_COLOR
        self._moves: list[Move] = []
        self._winning_line: list[Position] = []

        logger.info(
            "New game: %dx%d board, %d in a row, %s check",
            width, height, match_length, strategy,
        )
        self.bus.publish(Event(
            type=EventType.GAME_STARTED,
            data={"width": width, "height": height, "match_length": match_length},
            source="game_engine"
        ))

    def drop_token(self, column: int) -> DropResult:
        """Drop the current color's token into ``column``.

        Args:
            column: Column to drop into (0 = left)

        Returns:
            Landing row and the resulting game state

        Raises:
            GameAlreadyOverError: If the game already finished
            ColumnOutOfRangeError: If column is outside the board
            ColumnFullError: If column has no empty hole
        """
        if self._state.is_terminal:
            self._reject(column, "game_over")
            raise GameAlreadyOverError(self._state)

        color = self._current_color
        try:
            row = self.grid.place(column, color)
        except (ColumnFullError, ColumnOutOfRangeError) as e:
            self._reject(column, str(e))
            raise

        position = Position(column=column, row=row)
        move = Move(column=column, color=color, position=position)
        self._moves.append(move)
        logger.debug("%s dropped into column %d, row %d", color.label, column, row)

        if self.strategy == "full_scan":
            winner, line = self.rules.check_winner(self.grid)
        else:
            winner, line = self.rules.check_last_move(self.grid, position)

        # Win is checked before tie: a line on the last free hole is a win
        if winner is not None:
            self._state = GameState.won(winner)
            self._winning_line = line
        elif self.grid.is_full():
            self._state = GameState.tie()
        else:
            self._current_color = color.other

        self.bus.publish(Event(
            type=EventType.TOKEN_DROPPED,
            data={"move": move, "state": self._state},
            source="game_engine"
        ))

        if self._state.is_terminal:
            self._finish()
        else:
            self.bus.publish(Event(
                type=EventType.TURN_CHANGED,
                data={"color": self._current_color, "turn": len(self._moves) + 1},
                source="game_engine"
            ))

        return DropResult(row=row, state=self._state)

    def _reject(self, column: int, reason: str) -> None:
        logger.debug("Rejected drop into column %d: %s", column, reason)
        self.bus.publish(Event(
            type=EventType.INVALID_MOVE,
            data={"column": column, "reason": reason},
            source="game_engine"
        ))

    def _finish(self) -> None:
        """Announce the terminal state. Called exactly once per game."""
        logger.info("Game over after %d moves: %s", len(self._moves), self._state.message)
        if self._state.winner is not None:
            self.bus.publish(Event(
                type=EventType.GAME_WON,
                data={"winner": self._state.winner, "positions": list(self._winning_line)},
                source="game_engine"
            ))
        else:
            self.bus.publish(Event(type=EventType.GAME_TIED, source="game_engine"))

        self.bus.publish(Event(
            type=EventType.GAME_FINISHED,
            data=self._state,
            source="game_engine"
        ))

    def subscribe_on_finish(self, observer: Callable[[GameState], None]) -> None:
        """Call ``observer`` with the terminal state when the game ends.

        Observers run synchronously, in registration order, before the
        finishing ``drop_token`` returns. They live as long as this engine.
        """
        def handler(event: Event) -> None:
            observer(event.data)

        self.bus.subscribe(EventType.GAME_FINISHED, handler)

    def reset(
        self,
        width: int | None = None,
        height: int | None = None,
        match_length: int | None = None,
    ) -> "GameEngine":
        """Build a fresh engine; this one is left untouched.

        Unspecified settings are taken from the current game. Subscribers
        are not carried over.
        """
        return GameEngine(
            width if width is not None else self.width,
            height if height is not None else self.height,
            match_length if match_length is not None else self.match_length,
            strategy=self.strategy,
        )

    def occupant(self, column: int, row: int) -> Color | Slot:
        """Read a cell for rendering."""
        return self.grid.occupant(column, row)

    def open_columns(self) -> list[int]:
        """Columns that accept a drop; empty once the game is over."""
        if self._state.is_terminal:
            return []
        return self.grid.open_columns()

    @property
    def state(self) -> GameState:
        """Get current game state."""
        return self._state

    @property
    def current_color(self) -> Color:
        """Color of the next token (the winner's color once won)."""
        return self._current_color

    @property
    def is_game_over(self) -> bool:
        return self._state.is_terminal

    @property
    def width(self) -> int:
        return self.grid.width

    @property
    def height(self) -> int:
        return self.grid.height

    @property
    def match_length(self) -> int:
        return self.rules.match_length

    @property
    def moves(self) -> list[Move]:
        """Successful drops in order."""
        return list(self._moves)

    @property
    def move_count(self) -> int:
        return len(self._moves)

    @property
    def winning_line(self) -> list[Position]:
        """Cells of the winning run; empty unless the game was won."""
        return list(self._winning_line)


def new_game(
    width: int,
    height: int,
    match_length: int,
    *,
    strategy: WinCheck = "last_move",
) -> GameEngine:
    """Start a game on an empty ``width`` x ``height`` board, YELLOW first."""
    return GameEngine(width, height, match_length, strategy=strategy)
