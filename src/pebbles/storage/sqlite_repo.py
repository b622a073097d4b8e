"""Snapshots in a single SQLite table.

Schema:
    snapshots(game_id TEXT PRIMARY KEY, state TEXT NOT NULL)

``state`` is the GameState JSON. Each call opens its own connection, so a
repository object can be shared across Flask requests.
"""

import sqlite3
from contextlib import closing
from pathlib import Path
from typing import Optional

from pebbles.models.state import GameState

from .repository import SnapshotRepository

_SCHEMA = """
CREATE TABLE IF NOT EXISTS snapshots (
    game_id TEXT PRIMARY KEY,
    state TEXT NOT NULL
)
"""


class SQLiteSnapshotRepository(SnapshotRepository):
    def __init__(self, database_uri: str | Path = "instance/pebbles.db"):
        self.database_path = Path(database_uri)
        self.database_path.parent.mkdir(parents=True, exist_ok=True)
        with closing(self._connect()) as conn, conn:
            conn.execute(_SCHEMA)

    def _connect(self) -> sqlite3.Connection:
        return sqlite3.connect(self.database_path)

    def save(self, game_id: str, state: GameState) -> None:
        with closing(self._connect()) as conn, conn:
            conn.execute(
                "INSERT INTO snapshots (game_id, state) VALUES (?, ?) "
                "ON CONFLICT(game_id) DO UPDATE SET state = excluded.state",
                (game_id, state.to_json()),
            )

    def load(self, game_id: str) -> Optional[GameState]:
        with closing(self._connect()) as conn:
            row = conn.execute(
                "SELECT state FROM snapshots WHERE game_id = ?", (game_id,)
            ).fetchone()
        return None if row is None else GameState.from_json(row[0])

    def delete(self, game_id: str) -> bool:
        with closing(self._connect()) as conn, conn:
            cursor = conn.execute("DELETE FROM snapshots WHERE game_id = ?", (game_id,))
            return cursor.rowcount > 0

    def game_ids(self) -> list[str]:
        with closing(self._connect()) as conn:
            rows = conn.execute("SELECT game_id FROM snapshots ORDER BY game_id").fetchall()
        return [game_id for (game_id,) in rows]
