"""Game service - runs engine operations against stored snapshots.

Each call loads the GameState snapshot, rebuilds a PebblesGame from it,
applies the operation and saves the result. Calls for the same game id are
not locked against each other; the host is expected to serialize them.
"""

from __future__ import annotations

import logging
import uuid
from typing import Any, Optional

from flask import current_app

from pebbles.engine.game_engine import PebblesGame
from pebbles.engine.program import parse_init
from pebbles.models.actions import CounterTurn, Won, parse_action
from pebbles.models.state import GameState
from pebbles.randomness import RandomSource, get_default_random_source
from pebbles.storage import SnapshotRepository, StorageBackend, open_snapshot_repository

logger = logging.getLogger(__name__)

SERVICE_EXTENSION_KEY = "pebbles_game_service"


class GameNotFoundError(LookupError):
    """No stored game with the requested id."""

    def __init__(self, game_id: str):
        self.game_id = game_id
        super().__init__(f"Game not found: {game_id}")


class GameService:
    """Init / action / state operations over a snapshot repository."""

    def __init__(
        self,
        repository: SnapshotRepository,
        random_source: Optional[RandomSource] = None,
    ):
        self.repository = repository
        self.random_source = random_source or get_default_random_source()

    def create_game(self, payload: Any) -> tuple[str, GameState]:
        """Start a game and store it.

        Raises:
            pydantic.ValidationError: If the payload is malformed
            ConfigError: If the configuration is invalid
        """
        game = PebblesGame(parse_init(payload), random_source=self.random_source)
        game_id = str(uuid.uuid4())
        state = game.snapshot()
        self.repository.save(game_id, state)
        logger.info(f"Created game {game_id}")
        return game_id, state

    def submit_action(self, game_id: str, payload: Any) -> tuple[CounterTurn | Won, GameState]:
        """Apply a user action to a stored game.

        Nothing is saved when the action is rejected.

        Raises:
            GameNotFoundError: If the game does not exist
            pydantic.ValidationError: If the payload is malformed
            PebblesError: If the action breaks a game rule
        """
        game = PebblesGame.from_state(self.get_state(game_id), random_source=self.random_source)
        event = game.handle(parse_action(payload))
        state = game.snapshot()
        self.repository.save(game_id, state)
        return event, state

    def get_state(self, game_id: str) -> GameState:
        """Current snapshot of a stored game."""
        state = self.repository.load(game_id)
        if state is None:
            raise GameNotFoundError(game_id)
        return state

    def list_games(self, status: Optional[str] = None) -> list[dict]:
        """Summaries of stored games, optionally only "in_progress" or "finished" ones."""
        games = []
        for game_id in self.repository.game_ids():
            state = self.repository.load(game_id)
            if state is None:
                continue
            game_status = "finished" if state.is_finished else "in_progress"
            if status is not None and status != game_status:
                continue
            games.append({
                "game_id": game_id,
                "status": game_status,
                "winner": state.winner.value if state.winner else None,
                "pebbles_remaining": state.pebbles_remaining,
            })
        return games

    def delete_game(self, game_id: str) -> None:
        if not self.repository.delete(game_id):
            raise GameNotFoundError(game_id)
        logger.info(f"Deleted game {game_id}")


def get_game_service() -> GameService:
    """Get the game service for the current app.

    Built on first use from the app config and cached on the app.
    """
    service = current_app.extensions.get(SERVICE_EXTENSION_KEY)
    if service is None:
        config = current_app.config
        backend = StorageBackend(config.get("STORAGE_BACKEND", "file").lower())
        location = (
            config["DATABASE_URI"] if backend == StorageBackend.SQLITE else config["GAMES_PATH"]
        )
        service = GameService(
            repository=open_snapshot_repository(backend, location),
            random_source=get_default_random_source(config.get("RANDOM_SEED")),
        )
        current_app.extensions[SERVICE_EXTENSION_KEY] = service
        logger.info(f"Game service using {backend.value} storage at {location}")
    return service
