"""Game snapshot storage.

Usage:
    from pebbles.storage import open_snapshot_repository

    snapshots = open_snapshot_repository()                # from environment
    snapshots = open_snapshot_repository("sqlite", "instance/pebbles.db")

Environment (used only for arguments left as None):
    PEBBLES_STORAGE_BACKEND: "file" or "sqlite" (default "file")
    PEBBLES_GAMES_PATH: directory for the file backend (default "games")
    PEBBLES_DATABASE_URI: database file for the sqlite backend (default "instance/pebbles.db")
"""

import os
from pathlib import Path
from typing import Optional

from .file_repo import FileSnapshotRepository
from .repository import SnapshotRepository, StorageBackend
from .sqlite_repo import SQLiteSnapshotRepository

_LOCATION_ENV = {
    StorageBackend.FILE: ("PEBBLES_GAMES_PATH", "games"),
    StorageBackend.SQLITE: ("PEBBLES_DATABASE_URI", "instance/pebbles.db"),
}


def open_snapshot_repository(
    backend: Optional[StorageBackend | str] = None,
    location: Optional[str | Path] = None,
) -> SnapshotRepository:
    """Open the snapshot store for ``backend`` at ``location``.

    Raises:
        ValueError: If the backend name is unknown
    """
    if backend is None:
        backend = os.environ.get("PEBBLES_STORAGE_BACKEND", StorageBackend.FILE.value)
    if not isinstance(backend, StorageBackend):
        backend = StorageBackend(backend.strip().lower())

    if location is None:
        env_name, default = _LOCATION_ENV[backend]
        location = os.environ.get(env_name, default)

    if backend == StorageBackend.SQLITE:
        return SQLiteSnapshotRepository(location)
    return FileSnapshotRepository(location)


__all__ = [
    "SnapshotRepository",
    "FileSnapshotRepository",
    "SQLiteSnapshotRepository",
    "StorageBackend",
    "open_snapshot_repository",
]
