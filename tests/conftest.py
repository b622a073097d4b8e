"""Shared pytest fixtures and markers for all tests."""

import pytest

from pebbles.models.state import DifficultyLevel, PebblesInit
from pebbles.randomness import RandomSource


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )
    config.addinivalue_line(
        "markers", "webapp: marks webapp-specific tests"
    )


class ScriptedRandomSource(RandomSource):
    """Returns the given u32 values in order, repeating the last one."""

    def __init__(self, *values: int):
        self.values = list(values) or [0]
        self.salts: list[bytes] = []

    @property
    def calls(self) -> int:
        return len(self.salts)

    def random(self, salt: bytes) -> bytes:
        value = self.values[min(len(self.salts), len(self.values) - 1)]
        self.salts.append(salt)
        return value.to_bytes(4, "little") + bytes(28)


@pytest.fixture
def scripted_random():
    """Factory for randomness sources with predetermined draws.

    The first draw of a new game decides the first player:
    even -> user, odd -> program.
    """
    return ScriptedRandomSource


@pytest.fixture
def hard_config():
    """Hard game with 7 pebbles, up to 3 per turn."""
    return PebblesInit(difficulty=DifficultyLevel.HARD, pebbles_count=7, max_pebbles_per_turn=3)


@pytest.fixture
def easy_config():
    """Easy game with 20 pebbles, up to 3 per turn."""
    return PebblesInit(difficulty=DifficultyLevel.EASY, pebbles_count=20, max_pebbles_per_turn=3)
