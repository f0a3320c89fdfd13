"""Test helpers."""

from connect_four.core.types import DropResult
from connect_four.game.engine import GameEngine


def play(engine: GameEngine, columns) -> DropResult | None:
    """Drop tokens into ``columns`` in order; returns the last result."""
    result = None
    for column in columns:
        result = engine.drop_token(column)
    return result
