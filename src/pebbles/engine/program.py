"""Message-level entry points for embedding hosts.

PebblesProgram decodes raw payloads (dicts, JSON strings or models) into
the typed models, drives a PebblesGame and returns typed replies. It owns
exactly one live game; hosts own the program object itself.

Usage:
    program = PebblesProgram()
    state = program.init({"difficulty": "hard", "pebbles_count": 15, "max_pebbles_per_turn": 3})
    event = program.handle({"type": "turn", "pebbles": 2})
    state = program.state()
"""

from __future__ import annotations

import logging
from typing import Any, Optional

from pebbles.engine.game_engine import PebblesGame
from pebbles.models.actions import CounterTurn, GiveUp, Restart, Turn, Won, parse_action
from pebbles.models.state import GameState, PebblesInit
from pebbles.randomness import RandomSource

logger = logging.getLogger(__name__)


def parse_init(payload: Any) -> PebblesInit:
    """Decode an init payload from a dict, JSON string or model."""
    if isinstance(payload, PebblesInit):
        return payload
    if isinstance(payload, (str, bytes)):
        return PebblesInit.model_validate_json(payload)
    return PebblesInit.model_validate(payload)


class PebblesProgram:
    """Init / handle / state entry points around a single game."""

    def __init__(self, random_source: Optional[RandomSource] = None):
        self._random_source = random_source
        self._game: Optional[PebblesGame] = None

    @property
    def game(self) -> PebblesGame:
        if self._game is None:
            raise RuntimeError("Game is not initialized")
        return self._game

    def init(self, payload: Any) -> GameState:
        """Start the live game.

        Replaces any game already held by this program.

        Raises:
            pydantic.ValidationError: If the payload is malformed
            ConfigError: If the configuration is invalid
        """
        config = parse_init(payload)
        if self._game is not None:
            logger.info("Replacing the live game with a new one")
        self._game = PebblesGame(config, random_source=self._random_source)
        return self._game.snapshot()

    def handle(self, payload: Any) -> CounterTurn | Won:
        """Apply a user action to the live game.

        Raises:
            RuntimeError: If init has not been called
            pydantic.ValidationError: If the payload is malformed
            PebblesError: If the action breaks a game rule
        """
        game = self.game
        action = payload if isinstance(payload, (Turn, GiveUp, Restart)) else parse_action(payload)
        return game.handle(action)

    def state(self) -> GameState:
        """Read the live game state; the game is left in place."""
        return self.game.snapshot()
