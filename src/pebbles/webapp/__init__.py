"""Flask host for Pebbles games."""

from .app import create_app

__all__ = ["create_app"]
