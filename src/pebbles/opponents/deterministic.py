"""Opponent implementations for Pebbles.

The game is a bounded subtraction game: a player may remove between 1 and
``k = max_pebbles_per_turn`` pebbles and whoever takes the last pebble wins.
A pile ``p`` is lost for the player to move iff ``p % (k + 1) == 0``, since
whatever they remove, the other side can restore the multiple of ``k + 1``.

- RandomOpponent: uniform random legal move (easy)
- OptimalOpponent: always leaves a multiple of ``k + 1`` when it can (hard)
"""

from __future__ import annotations

from typing import ClassVar

from pebbles.models.state import DifficultyLevel
from pebbles.opponents.base import Opponent, get_opponent_by_difficulty, max_legal_removal
from pebbles.randomness import RandomSource, get_random_u32


def get_random_move(
    pebbles_remaining: int,
    max_pebbles_per_turn: int,
    random_source: RandomSource,
) -> int:
    """Uniform random removal in [1, min(k, p)]."""
    upper = max_legal_removal(pebbles_remaining, max_pebbles_per_turn)
    return get_random_u32(random_source) % upper + 1


def get_winning_move(pebbles_remaining: int, max_pebbles_per_turn: int) -> int:
    """Optimal removal for the player to move.

    Removes ``p % (k + 1)`` so the opponent faces a multiple of ``k + 1``.
    From a losing pile (residue 0) there is no forcing move, so take as much
    as allowed.

    Taking the last pebble wins, so this is the normal-play rule. The
    last-pebble-loses formula ``(p - 1) % (k + 1)`` is deliberately not used:
    it leaves the opponent on winning piles here (7 with k=3 would remove 2
    and hand over 5).

    Examples:
        >>> get_winning_move(7, 3)
        3
        >>> get_winning_move(9, 3)
        1
        >>> get_winning_move(8, 3)
        3
        >>> get_winning_move(2, 3)
        2
    """
    upper = max_legal_removal(pebbles_remaining, max_pebbles_per_turn)
    target = pebbles_remaining % (max_pebbles_per_turn + 1)
    if target == 0:
        return upper
    return target


def is_losing_position(pebbles_remaining: int, max_pebbles_per_turn: int) -> bool:
    """Whether the player to move loses against optimal play."""
    return pebbles_remaining % (max_pebbles_per_turn + 1) == 0


def get_program_move(
    pebbles_remaining: int,
    max_pebbles_per_turn: int,
    difficulty: DifficultyLevel,
    random_source: RandomSource,
) -> int:
    """Removal chosen by the program for ``difficulty``."""
    opponent = get_opponent_by_difficulty(difficulty)
    return opponent.choose_removal(pebbles_remaining, max_pebbles_per_turn, random_source)


class RandomOpponent(Opponent):
    """Easy opponent: picks any legal removal with equal probability."""

    difficulty: ClassVar[DifficultyLevel] = DifficultyLevel.EASY

    def __init__(self):
        super().__init__(name="Random")

    def choose_removal(
        self,
        pebbles_remaining: int,
        max_pebbles_per_turn: int,
        random_source: RandomSource,
    ) -> int:
        return get_random_move(pebbles_remaining, max_pebbles_per_turn, random_source)


class OptimalOpponent(Opponent):
    """Hard opponent: plays the winning move whenever one exists.

    Never draws from the randomness source.
    """

    difficulty: ClassVar[DifficultyLevel] = DifficultyLevel.HARD

    def __init__(self):
        super().__init__(name="Optimal")

    def choose_removal(
        self,
        pebbles_remaining: int,
        max_pebbles_per_turn: int,
        random_source: RandomSource,
    ) -> int:
        return get_winning_move(pebbles_remaining, max_pebbles_per_turn)
