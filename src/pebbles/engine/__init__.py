"""Game engine module for Pebbles.

This module contains the core game logic including:
- game_engine: The PebblesGame state machine and config validation
- program: Init / handle / state entry points for embedding hosts
- errors: Typed rule violations

Usage:
    from pebbles.engine import create_game
    from pebbles.models import DifficultyLevel, PebblesInit

    game = create_game(PebblesInit(difficulty=DifficultyLevel.HARD,
                                   pebbles_count=15, max_pebbles_per_turn=3))

    # User removes two pebbles; the program answers in the same call
    event = game.apply_user_turn(2)

    if game.is_game_over():
        print(f"Winner: {game.get_winner()}")
"""

from pebbles.engine.errors import ConfigError, GameError, GameErrorCode, PebblesError
from pebbles.engine.game_engine import (
    PebblesGame,
    choose_first_player,
    create_game,
    validate_init,
)
from pebbles.engine.program import PebblesProgram, parse_init

__all__ = [
    # Game engine classes
    "PebblesGame",
    "PebblesProgram",
    "create_game",
    "choose_first_player",
    "validate_init",
    "parse_init",
    # Errors
    "GameErrorCode",
    "PebblesError",
    "ConfigError",
    "GameError",
]
