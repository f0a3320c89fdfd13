"""Board occupancy for Connect-Four."""

import numpy as np

from ..core.errors import ColumnFullError, ColumnOutOfRangeError, InvalidConfigurationError
from ..core.types import Color, Slot


class Grid:
    """A fixed ``width`` x ``height`` board of holes.

    Columns fill bottom-up. A placed token is never removed, so each
    column's fill counter only grows, from 0 up to ``height``.
    """

    def __init__(self, width: int, height: int):
        if width < 1 or height < 1:
            raise InvalidConfigurationError(
                f"Board dimensions must be at least 1x1 (got {width}x{height})"
            )
        self.width = width
        self.height = height
        self._columns: list[list[Color | Slot]] = [
            [Slot.EMPTY] * height for _ in range(width)
        ]
        self._heights = [0] * width

    def _check_column(self, column: int) -> None:
        if not 0 <= column < self.width:
            raise ColumnOutOfRangeError(column, self.width)

    def place(self, column: int, color: Color) -> int:
        """Drop ``color`` into ``column``.

        Returns:
            Row index where the token landed (0 = bottom)

        Raises:
            ColumnOutOfRangeError: If column is outside the board
            ColumnFullError: If column has no empty hole
        """
        self._check_column(column)
        row = self._heights[column]
        if row >= self.height:
            raise ColumnFullError(column)

        self._columns[column][row] = color
        self._heights[column] = row + 1
        return row

    def occupant(self, column: int, row: int) -> Color | Slot:
        """Read a cell; ``Slot.OFF_BOARD`` outside the grid."""
        if not (0 <= column < self.width and 0 <= row < self.height):
            return Slot.OFF_BOARD
        return self._columns[column][row]

    def height_of(self, column: int) -> int:
        """Number of tokens in ``column``."""
        self._check_column(column)
        return self._heights[column]

    def is_column_full(self, column: int) -> bool:
        return self.height_of(column) >= self.height

    def open_columns(self) -> list[int]:
        """Columns that can still accept a token."""
        return [col for col in range(self.width) if self._heights[col] < self.height]

    def is_full(self) -> bool:
        return all(h >= self.height for h in self._heights)

    @property
    def token_count(self) -> int:
        return sum(self._heights)

    def as_matrix(self) -> np.ndarray:
        """Convert to a numpy matrix for rendering.

        Returns:
            ``(height, width)`` array, top row first, where RED=1,
            YELLOW=-1, EMPTY=0
        """
        mapping = {Color.RED: 1, Color.YELLOW: -1, Slot.EMPTY: 0}
        matrix = np.array(
            [[mapping[cell] for cell in column] for column in self._columns],
            dtype=int,
        )
        return np.flipud(matrix.T)

    def __repr__(self) -> str:
        return f"Grid({self.width}x{self.height}, tokens={self.token_count})"
