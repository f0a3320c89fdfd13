"""Connect-Four win and tie rules for any board size and match length."""

from ..core.types import Color, Position, Slot
from .grid import Grid


# Line axes as (column step, row step); each is scanned both ways.
AXES = [
    (1, 0),   # Horizontal
    (0, 1),   # Vertical
    (1, 1),   # Diagonal up-right
    (1, -1),  # Diagonal down-right
]

# Every non-zero unit step, for the full-board scan.
DIRECTIONS = [
    (dc, dr)
    for dc in (-1, 0, 1)
    for dr in (-1, 0, 1)
    if (dc, dr) != (0, 0)
]


class Connect4Rules:
    """Win detection for N-in-a-row.

    Two strategies are provided and agree on every reachable position:

    - ``check_winner`` scans every occupied cell in all 8 directions. It is
      the reference.
    - ``check_last_move`` only counts the runs through the token just placed.
    """

    def __init__(self, match_length: int = 4):
        """Initialize rules.

        Args:
            match_length: Number in a row to win. Must not exceed the
                smaller board dimension; callers clamp it beforehand.
        """
        self.match_length = match_length

    def check_winner(self, grid: Grid) -> tuple[Color | None, list[Position]]:
        """Check if there's a winner anywhere on the board.

        Returns:
            Tuple of (winner, winning_positions). Winner is None if no winner.
        """
        for col in range(grid.width):
            for row in range(grid.height):
                color = grid.occupant(col, row)
                if color is Slot.EMPTY:
                    continue

                for dc, dr in DIRECTIONS:
                    positions = self._check_direction(grid, col, row, dc, dr, color)
                    if positions:
                        return color, positions

        return None, []

    def _check_direction(
        self,
        grid: Grid,
        start_col: int,
        start_row: int,
        dc: int,
        dr: int,
        color: Color,
    ) -> list[Position]:
        """Check for match_length in a row starting at a cell.

        Returns:
            List of winning positions, or empty list if no win
        """
        positions = []

        for i in range(self.match_length):
            col = start_col + i * dc
            row = start_row + i * dr

            # Off-board cells never match a color
            if grid.occupant(col, row) != color:
                return []

            positions.append(Position(column=col, row=row))

        return positions

    def check_last_move(self, grid: Grid, last: Position) -> tuple[Color | None, list[Position]]:
        """Check for a line through the token at ``last``.

        Each axis is walked at most ``match_length - 1`` steps each way and
        the origin is counted once.

        Returns:
            Tuple of (winner, winning_positions). Winner is None if no win.
        """
        color = grid.occupant(last.column, last.row)
        if not isinstance(color, Color):
            return None, []

        for dc, dr in AXES:
            backward = self._run(grid, last, -dc, -dr, color)
            forward = self._run(grid, last, dc, dr, color)
            if len(backward) + 1 + len(forward) >= self.match_length:
                return color, backward[::-1] + [last] + forward

        return None, []

    def _run(self, grid: Grid, origin: Position, dc: int, dr: int, color: Color) -> list[Position]:
        """Same-color cells next to ``origin`` along one direction."""
        run = []
        for step in range(1, self.match_length):
            col = origin.column + step * dc
            row = origin.row + step * dr
            if grid.occupant(col, row) != color:
                break
            run.append(Position(column=col, row=row))
        return run

    def is_draw(self, grid: Grid) -> bool:
        """Check if game is a draw (board full, no winner)."""
        winner, _ = self.check_winner(grid)
        if winner:
            return False
        return grid.is_full()
