"""Snapshot store interface for stateless hosts.

A host that does not keep PebblesGame objects alive between requests stores
the GameState after every successful operation and rebuilds the game from it
on the next request. Nothing beyond the snapshot is persisted.
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Optional

from pebbles.models.state import GameState


class StorageBackend(str, Enum):
    """Where snapshots live."""

    FILE = "file"
    SQLITE = "sqlite"


class SnapshotRepository(ABC):
    """One GameState per game id."""

    @abstractmethod
    def save(self, game_id: str, state: GameState) -> None:
        """Insert or replace the snapshot for ``game_id``."""
        pass

    @abstractmethod
    def load(self, game_id: str) -> Optional[GameState]:
        """Snapshot for ``game_id``, or None if there is none."""
        pass

    @abstractmethod
    def delete(self, game_id: str) -> bool:
        """Drop the snapshot; False if it did not exist."""
        pass

    @abstractmethod
    def game_ids(self) -> list[str]:
        """Ids of all stored games, sorted."""
        pass
