"""Game state models for Pebbles.

This module defines the configuration and state models used by the game engine.
A game is a single pile of pebbles; players alternately remove between 1 and
``max_pebbles_per_turn`` pebbles and whoever removes the last pebble wins.

Losing positions for the player about to move:
- pebbles_remaining % (max_pebbles_per_turn + 1) == 0
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field

U32_MAX = 2**32 - 1


class DifficultyLevel(str, Enum):
    """Policy used by the automated opponent.

    Inherits from str for proper JSON serialization.
    """

    EASY = "easy"
    HARD = "hard"


class Player(str, Enum):
    """The two sides of a game."""

    USER = "user"
    PROGRAM = "program"


class PebblesInit(BaseModel):
    """Configuration for a new game (or a restart).

    Only wire-level bounds are enforced here. The game rules
    (at least two pebbles, at least one per turn, ceiling below the pile)
    are checked by ``validate_init`` so each violation reports its own code.

    Attributes:
        difficulty: Opponent policy
        pebbles_count: Initial pile size
        max_pebbles_per_turn: Most pebbles a single turn may remove
    """

    difficulty: DifficultyLevel = Field(default=DifficultyLevel.EASY)
    pebbles_count: int = Field(..., ge=0, le=U32_MAX)
    max_pebbles_per_turn: int = Field(..., ge=0, le=U32_MAX)


class GameState(BaseModel):
    """Complete game state.

    Attributes:
        pebbles_count: Configured starting pile size
        max_pebbles_per_turn: Configured per-turn removal ceiling
        pebbles_remaining: Live pile size
        difficulty: Active opponent policy
        first_player: Side that moved first this game
        winner: Winning side, None while the game is in progress
    """

    pebbles_count: int = Field(..., ge=0, le=U32_MAX)
    max_pebbles_per_turn: int = Field(..., ge=0, le=U32_MAX)
    pebbles_remaining: int = Field(..., ge=0, le=U32_MAX)
    difficulty: DifficultyLevel = Field(default=DifficultyLevel.EASY)
    first_player: Player = Field(default=Player.USER)
    winner: Player | None = Field(default=None)

    @property
    def is_finished(self) -> bool:
        """Whether a winner has been decided."""
        return self.winner is not None

    @property
    def pebbles_removed(self) -> int:
        """Pebbles taken from the pile so far this game."""
        return self.pebbles_count - self.pebbles_remaining

    # Serialization methods
    def to_json(self) -> str:
        """Serialize state to JSON string."""
        return self.model_dump_json(indent=2)

    @classmethod
    def from_json(cls, json_str: str) -> GameState:
        """Deserialize state from JSON string."""
        return cls.model_validate_json(json_str)

    def to_dict(self) -> dict:
        """Serialize state to a JSON-compatible dictionary."""
        return self.model_dump(mode="json")

    @classmethod
    def from_dict(cls, data: dict) -> GameState:
        """Deserialize state from dictionary."""
        return cls.model_validate(data)


class MoveRecord(BaseModel):
    """One move in the history of the current game.

    Attributes:
        player: Side that moved
        removed: Pebbles taken by the move
        pebbles_remaining: Pile size after the move
    """

    player: Player
    removed: int = Field(..., ge=1)
    pebbles_remaining: int = Field(..., ge=0)
