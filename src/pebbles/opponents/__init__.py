"""Opponent implementations for Pebbles.

This module provides the automated player at each difficulty:

1. RandomOpponent - uniform random legal move (easy)
2. OptimalOpponent - forces the opponent into a losing pile (hard)

All opponents implement the Opponent base class interface.
"""

from pebbles.opponents.base import (
    Opponent,
    get_opponent_by_difficulty,
    list_difficulty_levels,
    max_legal_removal,
)
from pebbles.opponents.deterministic import (
    OptimalOpponent,
    RandomOpponent,
    get_program_move,
    get_random_move,
    get_winning_move,
    is_losing_position,
)

__all__ = [
    # Base classes
    "Opponent",
    # Factory functions
    "get_opponent_by_difficulty",
    "list_difficulty_levels",
    # Opponents
    "RandomOpponent",
    "OptimalOpponent",
    # Move functions
    "get_program_move",
    "get_random_move",
    "get_winning_move",
    "is_losing_position",
    "max_legal_removal",
]
