"""Base opponent interface for Pebbles.

This module defines the abstract base class for the automated opponent
along with factory functions keyed on difficulty level.
"""

from abc import ABC, abstractmethod
from typing import ClassVar

from pebbles.models.state import DifficultyLevel
from pebbles.randomness import RandomSource


def max_legal_removal(pebbles_remaining: int, max_pebbles_per_turn: int) -> int:
    """Largest removal allowed from the current pile.

    Raises:
        ValueError: If the pile is empty or the ceiling is below one
    """
    if pebbles_remaining < 1:
        raise ValueError(
            f"Program cannot move on an empty pile (pebbles_remaining={pebbles_remaining})"
        )
    if max_pebbles_per_turn < 1:
        raise ValueError(
            f"max_pebbles_per_turn must be at least 1, got {max_pebbles_per_turn}"
        )
    return min(max_pebbles_per_turn, pebbles_remaining)


class Opponent(ABC):
    """Abstract base class for the automated player.

    Opponents are stateless: the move depends only on the pile, the
    per-turn ceiling and the randomness source handed in by the engine.

    Subclasses:
        - RandomOpponent (easy)
        - OptimalOpponent (hard)
    """

    difficulty: ClassVar[DifficultyLevel]

    def __init__(self, name: str = "Program"):
        """Initialize opponent.

        Args:
            name: Display name for the opponent
        """
        self.name = name

    @abstractmethod
    def choose_removal(
        self,
        pebbles_remaining: int,
        max_pebbles_per_turn: int,
        random_source: RandomSource,
    ) -> int:
        """Choose how many pebbles to remove.

        Args:
            pebbles_remaining: Current pile size (at least 1)
            max_pebbles_per_turn: Per-turn ceiling (at least 1)
            random_source: Randomness collaborator

        Returns:
            Removal in [1, min(max_pebbles_per_turn, pebbles_remaining)]
        """
        pass

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"


def get_opponent_by_difficulty(difficulty: DifficultyLevel | str) -> Opponent:
    """Create opponent for a difficulty level.

    Args:
        difficulty: DifficultyLevel or its name ("easy", "hard")

    Returns:
        Opponent instance

    Raises:
        ValueError: If difficulty is unknown
    """
    # Import here to avoid circular imports
    from pebbles.opponents.deterministic import OptimalOpponent, RandomOpponent

    opponent_map: dict[DifficultyLevel, type[Opponent]] = {
        cls.difficulty: cls for cls in (RandomOpponent, OptimalOpponent)
    }

    if isinstance(difficulty, str) and not isinstance(difficulty, DifficultyLevel):
        try:
            difficulty = DifficultyLevel(difficulty.strip().lower())
        except ValueError:
            raise ValueError(
                f"Unknown difficulty: {difficulty}. "
                f"Valid difficulties: {list_difficulty_levels()}"
            ) from None

    return opponent_map[difficulty]()


def list_difficulty_levels() -> list[str]:
    """List all available difficulty names."""
    return [level.value for level in DifficultyLevel]
