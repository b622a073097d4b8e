"""Randomness collaborator for the Pebbles engine.

The engine never draws entropy on its own. It asks a ``RandomSource`` for a
fresh value salted with an opaque per-call identifier and reads an unsigned
32-bit integer from the first four bytes (little-endian).
"""

from __future__ import annotations

import hashlib
import random
import secrets
import uuid
from abc import ABC, abstractmethod
from typing import Optional

RANDOM_VALUE_SIZE = 32


class RandomnessUnavailableError(RuntimeError):
    """The randomness collaborator could not produce a value."""


class RandomSource(ABC):
    """Abstract source of random values."""

    @abstractmethod
    def random(self, salt: bytes) -> bytes:
        """Return a fresh random value for ``salt``.

        Args:
            salt: Opaque per-call identifier

        Returns:
            At least 4 bytes (normally 32)
        """
        pass


class SystemRandomSource(RandomSource):
    """Operating system entropy mixed with the salt."""

    def random(self, salt: bytes) -> bytes:
        return hashlib.sha256(salt + secrets.token_bytes(RANDOM_VALUE_SIZE)).digest()


class SeededRandomSource(RandomSource):
    """Reproducible values from a seeded ``random.Random``.

    The salt is ignored; the sequence depends only on the seed.
    """

    def __init__(self, seed: Optional[int] = None):
        self.seed = seed
        self._random = random.Random(seed)

    def random(self, salt: bytes) -> bytes:
        return self._random.randbytes(RANDOM_VALUE_SIZE)


def get_random_u32(source: RandomSource, salt: Optional[bytes] = None) -> int:
    """Draw an unsigned 32-bit integer from ``source``.

    Args:
        source: Randomness collaborator
        salt: Per-call identifier (a fresh UUID when omitted)

    Returns:
        Integer in [0, 2**32 - 1]

    Raises:
        RandomnessUnavailableError: If the source fails or returns too few bytes
    """
    if salt is None:
        salt = uuid.uuid4().bytes

    try:
        value = source.random(salt)
    except Exception as exc:
        raise RandomnessUnavailableError(f"random call failed: {exc}") from exc

    if value is None or len(value) < 4:
        raise RandomnessUnavailableError(
            f"random call returned {0 if value is None else len(value)} bytes, need at least 4"
        )

    return int.from_bytes(value[:4], "little")


def get_default_random_source(seed: Optional[int] = None) -> RandomSource:
    """Seeded source when ``seed`` is given, system entropy otherwise."""
    if seed is None:
        return SystemRandomSource()
    return SeededRandomSource(seed)
