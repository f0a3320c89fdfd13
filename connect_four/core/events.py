"""
Event definitions for the Connect-Four core.

The engine publishes events on its own bus; presentation code subscribes
to the ones it renders.
"""

import time
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any


class EventType(Enum):
    """Types of events in the system."""

    GAME_STARTED = auto()
    TOKEN_DROPPED = auto()
    TURN_CHANGED = auto()
    INVALID_MOVE = auto()
    GAME_WON = auto()
    GAME_TIED = auto()
    GAME_FINISHED = auto()  # Carries the terminal GameState


@dataclass
class Event:
    """
    Base event structure.

    Attributes:
        type: The type of event
        data: Event-specific payload
        timestamp: When the event was created
        source: Which module created the event
    """

    type: EventType
    data: Any = None
    timestamp: float = field(default_factory=time.time)
    source: str = "unknown"

    def __str__(self) -> str:
        return f"[{self.source}] {self.type.name}: {self.data}"
