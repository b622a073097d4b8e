"""Route blueprints for the webapp."""

from . import game

__all__ = ["game"]
