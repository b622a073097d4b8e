"""Flask configuration."""

import os
from pathlib import Path


def _optional_int(name: str) -> int | None:
    value = os.environ.get(name)
    return int(value) if value else None


class Config:
    """Base configuration."""

    SECRET_KEY = os.environ.get("SECRET_KEY", "dev-key-change-in-prod")

    # Storage - instance folder is at project root
    PROJECT_ROOT = Path(__file__).parent.parent.parent.parent
    INSTANCE_PATH = PROJECT_ROOT / "instance"
    STORAGE_BACKEND = os.environ.get("PEBBLES_STORAGE_BACKEND", "file")  # 'file' or 'sqlite'
    GAMES_PATH = os.environ.get("PEBBLES_GAMES_PATH", str(INSTANCE_PATH / "games"))
    DATABASE_URI = os.environ.get("PEBBLES_DATABASE_URI", str(INSTANCE_PATH / "pebbles.db"))

    # Randomness - unset means OS entropy
    RANDOM_SEED = _optional_int("PEBBLES_RANDOM_SEED")


class TestConfig(Config):
    """Testing configuration."""

    TESTING = True
    RANDOM_SEED = 1234
