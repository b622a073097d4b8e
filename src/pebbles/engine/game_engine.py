"""Core game engine for Pebbles.

This module implements the PebblesGame state machine, which owns the
authoritative game state, validates and applies moves, detects the winner
and triggers the program's counter-move.

Round Sequence:
1. VALIDATE - Reject the action without touching state
2. USER MOVE - Remove pebbles; the user wins on an empty pile
3. PROGRAM MOVE - Opponent removes pebbles; the program wins on an empty pile
4. REPLY - Fold the outcome into a single event
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Iterator, Optional

from pebbles.engine.errors import ConfigError, GameError, GameErrorCode
from pebbles.models.actions import CounterTurn, GiveUp, Restart, Turn, Won
from pebbles.models.state import GameState, MoveRecord, PebblesInit, Player
from pebbles.opponents.deterministic import get_program_move
from pebbles.randomness import RandomSource, get_default_random_source, get_random_u32

logger = logging.getLogger(__name__)


def validate_init(config: PebblesInit) -> None:
    """Check a game configuration.

    Rules are checked in order and the first failure is reported.

    Raises:
        ConfigError: If the configuration is not playable
    """
    if config.pebbles_count < 2:
        raise ConfigError(
            GameErrorCode.AT_LEAST_TWO_PEBBLES_TO_START,
            f"At least two pebbles are needed to start, got {config.pebbles_count}",
        )

    if config.max_pebbles_per_turn < 1:
        raise ConfigError(
            GameErrorCode.AT_LEAST_ONE_PEBBLE_PER_TURN_TO_START,
            f"At least one pebble per turn is needed to start, got {config.max_pebbles_per_turn}",
        )

    if config.max_pebbles_per_turn >= config.pebbles_count:
        raise ConfigError(
            GameErrorCode.INVALID_NUMBER_OF_PEBBLES_TO_BE_REMOVED,
            f"max_pebbles_per_turn ({config.max_pebbles_per_turn}) must be less than "
            f"pebbles_count ({config.pebbles_count})",
        )


def choose_first_player(random_source: RandomSource) -> Player:
    """Coin flip: user on an even draw, program on an odd one."""
    if get_random_u32(random_source) % 2 == 0:
        return Player.USER
    return Player.PROGRAM


class PebblesGame:
    """State machine for a single game.

    The game always resolves a full round in one call: a user turn that
    leaves pebbles on the pile is answered by exactly one program move
    before the method returns.

    Attributes:
        state: Current game state
        history: Moves played since the last start or restart
    """

    def __init__(
        self,
        config: PebblesInit,
        random_source: Optional[RandomSource] = None,
    ) -> None:
        """Start a new game.

        If the coin flip gives the program the first move, it is played
        before the constructor returns.

        Args:
            config: Game configuration
            random_source: Randomness collaborator (system entropy if omitted)

        Raises:
            ConfigError: If the configuration is invalid
        """
        validate_init(config)

        self._random_source = random_source or get_default_random_source()
        self.history: list[MoveRecord] = []
        self.state = self._create_initial_state(config)

        logger.info(
            f"New game: {config.pebbles_count} pebbles, up to {config.max_pebbles_per_turn} "
            f"per turn, {config.difficulty.value}, {self.state.first_player.value} moves first"
        )

        if self.state.first_player == Player.PROGRAM:
            self._make_program_move()

    @classmethod
    def from_state(
        cls,
        state: GameState,
        random_source: Optional[RandomSource] = None,
        history: Optional[list[MoveRecord]] = None,
    ) -> PebblesGame:
        """Rebuild a game from a stored snapshot.

        No coin flip and no program move take place.
        """
        game = cls.__new__(cls)
        game._random_source = random_source or get_default_random_source()
        game.history = list(history or [])
        game.state = state.model_copy(deep=True)
        return game

    def _create_initial_state(self, config: PebblesInit) -> GameState:
        """Create the state for a fresh game, rolling the first player."""
        return GameState(
            pebbles_count=config.pebbles_count,
            max_pebbles_per_turn=config.max_pebbles_per_turn,
            pebbles_remaining=config.pebbles_count,
            difficulty=config.difficulty,
            first_player=choose_first_player(self._random_source),
            winner=None,
        )

    # =========================================================================
    # Public API
    # =========================================================================

    def snapshot(self) -> GameState:
        """Get the current game state.

        Returns:
            Copy of current GameState; the game is unaffected
        """
        return self.state.model_copy(deep=True)

    def is_game_over(self) -> bool:
        """Check if the game has a winner."""
        return self.state.winner is not None

    def get_winner(self) -> Optional[Player]:
        """Winning side, or None while the game is in progress."""
        return self.state.winner

    def get_history(self) -> list[MoveRecord]:
        """Moves played since the last start or restart."""
        return list(self.history)

    def handle(self, action: Turn | GiveUp | Restart) -> CounterTurn | Won:
        """Apply any user action.

        Raises:
            GameError: For an invalid turn
            ConfigError: For an invalid restart
        """
        if isinstance(action, Turn):
            return self.apply_user_turn(action.pebbles)
        if isinstance(action, GiveUp):
            return self.apply_give_up()
        if isinstance(action, Restart):
            return self.apply_restart(action.to_init())
        raise TypeError(f"Unknown action: {action!r}")

    def apply_user_turn(self, pebbles: int) -> CounterTurn | Won:
        """Remove pebbles for the user and answer with the program's move.

        Args:
            pebbles: Number of pebbles the user removes

        Returns:
            Won(USER) if the user emptied the pile, otherwise the
            program's CounterTurn or Won(PROGRAM)

        Raises:
            GameError: If the game is over or the removal is not allowed
        """
        if self.is_game_over():
            raise GameError(GameErrorCode.GAME_ALREADY_FINISHED, "Game is already over")

        if pebbles < 1 or pebbles > self.state.max_pebbles_per_turn:
            raise GameError(
                GameErrorCode.INVALID_NUMBER_OF_PEBBLES_TO_BE_REMOVED,
                f"Must remove between 1 and {self.state.max_pebbles_per_turn} pebbles, "
                f"got {pebbles}",
            )

        if pebbles > self.state.pebbles_remaining:
            raise GameError(
                GameErrorCode.NOT_ENOUGH_PEBBLES_REMAINING,
                f"Only {self.state.pebbles_remaining} pebbles remain, cannot remove {pebbles}",
            )

        with self._rollback_on_error():
            self._remove(Player.USER, pebbles)
            if self.state.pebbles_remaining == 0:
                return self._declare_winner(Player.USER)

            return self._make_program_move()

    def apply_give_up(self) -> Won:
        """Concede the game to the program.

        Also overrides the winner of a game that is already over.
        """
        if self.state.winner == Player.USER:
            logger.warning("User gave up after winning; winner overridden to program")
        return self._declare_winner(Player.PROGRAM)

    def apply_restart(self, config: PebblesInit) -> CounterTurn | Won:
        """Start over with a new configuration.

        Args:
            config: New game configuration

        Returns:
            CounterTurn with the program's opening removal, or CounterTurn(0)
            when the user moves first

        Raises:
            ConfigError: If the configuration is invalid (state is unchanged)
        """
        validate_init(config)

        with self._rollback_on_error():
            self.state = self._create_initial_state(config)
            self.history = []

            logger.info(
                f"Restart: {config.pebbles_count} pebbles, up to {config.max_pebbles_per_turn} "
                f"per turn, {config.difficulty.value}, {self.state.first_player.value} moves first"
            )

            if self.state.first_player == Player.PROGRAM:
                return self._make_program_move()
            return CounterTurn(pebbles=0)

    # =========================================================================
    # Move Logic
    # =========================================================================

    @contextmanager
    def _rollback_on_error(self) -> Iterator[None]:
        """Restore state and history if the block raises."""
        state = self.state.model_copy(deep=True)
        history = list(self.history)
        try:
            yield
        except Exception:
            self.state = state
            self.history = history
            logger.warning("Operation failed; game state rolled back")
            raise

    def _make_program_move(self) -> CounterTurn | Won:
        """Play one move for the program."""
        if self.is_game_over():
            raise GameError(GameErrorCode.GAME_ALREADY_FINISHED, "Game is already over")

        removed = get_program_move(
            self.state.pebbles_remaining,
            self.state.max_pebbles_per_turn,
            self.state.difficulty,
            self._random_source,
        )
        self._remove(Player.PROGRAM, removed)

        if self.state.pebbles_remaining == 0:
            return self._declare_winner(Player.PROGRAM)
        return CounterTurn(pebbles=removed)

    def _remove(self, player: Player, pebbles: int) -> None:
        """Take pebbles off the pile and record the move."""
        self.state.pebbles_remaining -= pebbles
        self.history.append(
            MoveRecord(
                player=player,
                removed=pebbles,
                pebbles_remaining=self.state.pebbles_remaining,
            )
        )
        logger.debug(
            f"{player.value} removed {pebbles}, {self.state.pebbles_remaining} remaining"
        )

    def _declare_winner(self, player: Player) -> Won:
        self.state.winner = player
        logger.info(f"Game over: {player.value} wins")
        return Won(player=player)


# =============================================================================
# Factory function for creating games
# =============================================================================


def create_game(
    config: PebblesInit,
    random_source: Optional[RandomSource] = None,
    random_seed: Optional[int] = None,
) -> PebblesGame:
    """Create a new game.

    Args:
        config: Game configuration
        random_source: Randomness collaborator
        random_seed: Seed for a reproducible source (ignored if random_source is given)

    Returns:
        Initialized PebblesGame

    Raises:
        ConfigError: If the configuration is invalid
    """
    if random_source is None:
        random_source = get_default_random_source(random_seed)
    return PebblesGame(config=config, random_source=random_source)
