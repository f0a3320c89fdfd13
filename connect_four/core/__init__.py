"""Core infrastructure for the Connect-Four engine."""

from .bus import EventBus
from .config import (
    GameSettings,
    Settings,
    UISettings,
    clamp_match_length,
    get_settings,
    reset_settings,
)
from .errors import (
    ColumnFullError,
    ColumnOutOfRangeError,
    ConnectFourError,
    GameAlreadyOverError,
    InvalidConfigurationError,
)
from .events import Event, EventType
from .types import (
    Color,
    DropResult,
    GamePhase,
    GameState,
    Move,
    Position,
    Slot,
)


__all__ = [
    # Config
    "get_settings",
    "reset_settings",
    "clamp_match_length",
    "Settings",
    "GameSettings",
    "UISettings",
    # Types
    "Color",
    "Slot",
    "GamePhase",
    "GameState",
    "Position",
    "Move",
    "DropResult",
    # Errors
    "ConnectFourError",
    "InvalidConfigurationError",
    "ColumnOutOfRangeError",
    "ColumnFullError",
    "GameAlreadyOverError",
    # Events
    "Event",
    "EventType",
    "EventBus",
]
