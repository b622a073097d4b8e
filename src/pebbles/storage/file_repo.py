"""Snapshots as one JSON file per game."""

from pathlib import Path
from typing import Optional

from pebbles.models.state import GameState

from .repository import SnapshotRepository


class FileSnapshotRepository(SnapshotRepository):
    """Stores ``<games_path>/<game_id>.json`` holding ``GameState.to_json()``."""

    def __init__(self, games_path: str | Path = "games"):
        self.games_path = Path(games_path)
        self.games_path.mkdir(parents=True, exist_ok=True)

    def _path(self, game_id: str) -> Path:
        return self.games_path / f"{game_id}.json"

    def save(self, game_id: str, state: GameState) -> None:
        self._path(game_id).write_text(state.to_json(), encoding="utf-8")

    def load(self, game_id: str) -> Optional[GameState]:
        path = self._path(game_id)
        if not path.exists():
            return None
        return GameState.from_json(path.read_text(encoding="utf-8"))

    def delete(self, game_id: str) -> bool:
        path = self._path(game_id)
        if not path.exists():
            return False
        path.unlink()
        return True

    def game_ids(self) -> list[str]:
        return sorted(path.stem for path in self.games_path.glob("*.json"))
