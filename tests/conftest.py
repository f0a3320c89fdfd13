"""Shared fixtures for the Connect-Four test suite."""

import os

import pytest

from connect_four.core.config import reset_settings
from connect_four.game.engine import GameEngine, new_game


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Isolate tests from CONNECT4_* variables in the caller's environment."""
    for key in list(os.environ):
        if key.startswith("CONNECT4_"):
            monkeypatch.delenv(key)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def engine() -> GameEngine:
    """Classic 7x6 board, 4 in a row."""
    return new_game(7, 6, 4)
