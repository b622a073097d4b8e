"""Pytest fixtures for webapp tests."""

import pytest

from pebbles.storage import FileSnapshotRepository
from pebbles.webapp import create_app
from pebbles.webapp.config import TestConfig
from pebbles.webapp.services.game_service import SERVICE_EXTENSION_KEY, GameService


@pytest.fixture
def app(tmp_path):
    """Create test application storing games under tmp_path."""
    app = create_app(TestConfig)
    app.config["GAMES_PATH"] = str(tmp_path / "games")
    app.config["DATABASE_URI"] = str(tmp_path / "pebbles.db")
    yield app


@pytest.fixture
def client(app):
    """Create test client."""
    return app.test_client()


@pytest.fixture
def install_random(app, scripted_random):
    """Install a game service whose randomness draws are predetermined."""

    def install(*values):
        service = GameService(
            repository=FileSnapshotRepository(app.config["GAMES_PATH"]),
            random_source=scripted_random(*values),
        )
        app.extensions[SERVICE_EXTENSION_KEY] = service
        return service

    return install


@pytest.fixture
def user_first_client(client, install_random):
    """Client whose games always start with the user's move."""
    install_random(0)
    return client


@pytest.fixture
def game_id(user_first_client):
    """Hard game: 7 pebbles, up to 3 per turn, user to move."""
    response = user_first_client.post(
        "/games",
        json={"difficulty": "hard", "pebbles_count": 7, "max_pebbles_per_turn": 3},
    )
    return response.get_json()["game_id"]
