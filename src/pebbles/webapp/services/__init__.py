"""Services for the webapp."""

from .game_service import GameNotFoundError, GameService, get_game_service

__all__ = ["GameService", "GameNotFoundError", "get_game_service"]
