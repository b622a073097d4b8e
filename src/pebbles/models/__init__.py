"""Pebbles game models.

This module exports the core data structures for the game.
"""

from .actions import (
    CounterTurn,
    GiveUp,
    PebblesAction,
    PebblesEvent,
    Restart,
    Turn,
    Won,
    format_event_for_display,
    parse_action,
    parse_event,
)
from .state import (
    U32_MAX,
    DifficultyLevel,
    GameState,
    MoveRecord,
    PebblesInit,
    Player,
)

__all__ = [
    # Enums
    "DifficultyLevel",
    "Player",
    # State Models
    "PebblesInit",
    "GameState",
    "MoveRecord",
    # Actions
    "PebblesAction",
    "Turn",
    "GiveUp",
    "Restart",
    # Events
    "PebblesEvent",
    "CounterTurn",
    "Won",
    # Functions
    "parse_action",
    "parse_event",
    "format_event_for_display",
    # Constants
    "U32_MAX",
]
