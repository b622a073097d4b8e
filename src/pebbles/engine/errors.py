"""Error types raised by the Pebbles engine.

Every engine operation validates before mutating, so a raised error
leaves the game state exactly as it was.
"""

from enum import Enum


class GameErrorCode(str, Enum):
    """Machine-readable reason attached to every engine error."""

    AT_LEAST_TWO_PEBBLES_TO_START = "at_least_two_pebbles_to_start"
    AT_LEAST_ONE_PEBBLE_PER_TURN_TO_START = "at_least_one_pebble_per_turn_to_start"
    INVALID_NUMBER_OF_PEBBLES_TO_BE_REMOVED = "invalid_number_of_pebbles_to_be_removed"
    GAME_ALREADY_FINISHED = "game_already_finished"
    NOT_ENOUGH_PEBBLES_REMAINING = "not_enough_pebbles_remaining"


class PebblesError(ValueError):
    """Base class for rule violations.

    Attributes:
        code: The violated rule
    """

    def __init__(self, code: GameErrorCode, message: str = ""):
        self.code = code
        super().__init__(message or code.value)

    def to_dict(self) -> dict:
        return {"error": self.code.value, "message": str(self)}


class ConfigError(PebblesError):
    """Invalid game configuration (init or restart)."""


class GameError(PebblesError):
    """Invalid move for the current game."""

