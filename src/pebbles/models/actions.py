"""Action and event definitions for Pebbles.

Actions are sent by the user; events are the engine's reply to an action.
Both are tagged unions keyed on a ``type`` field so they decode from plain
JSON payloads:

    {"type": "turn", "pebbles": 2}
    {"type": "give_up"}
    {"type": "restart", "difficulty": "hard", "pebbles_count": 15, "max_pebbles_per_turn": 3}

    {"type": "counter_turn", "pebbles": 3}
    {"type": "won", "player": "user"}
"""

from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, Field, TypeAdapter

from pebbles.models.state import U32_MAX, DifficultyLevel, PebblesInit, Player


class Turn(BaseModel):
    """Remove ``pebbles`` from the pile."""

    type: Literal["turn"] = "turn"
    pebbles: int = Field(..., ge=0, le=U32_MAX)


class GiveUp(BaseModel):
    """Concede the game to the program."""

    type: Literal["give_up"] = "give_up"


class Restart(BaseModel):
    """Start over with a new configuration."""

    type: Literal["restart"] = "restart"
    difficulty: DifficultyLevel = Field(default=DifficultyLevel.EASY)
    pebbles_count: int = Field(..., ge=0, le=U32_MAX)
    max_pebbles_per_turn: int = Field(..., ge=0, le=U32_MAX)

    def to_init(self) -> PebblesInit:
        """Configuration carried by this restart."""
        return PebblesInit(
            difficulty=self.difficulty,
            pebbles_count=self.pebbles_count,
            max_pebbles_per_turn=self.max_pebbles_per_turn,
        )


class CounterTurn(BaseModel):
    """The program answered by removing ``pebbles``."""

    type: Literal["counter_turn"] = "counter_turn"
    pebbles: int = Field(..., ge=0, le=U32_MAX)


class Won(BaseModel):
    """``player`` removed the last pebble (or the user conceded)."""

    type: Literal["won"] = "won"
    player: Player


PebblesAction = Annotated[Union[Turn, GiveUp, Restart], Field(discriminator="type")]
PebblesEvent = Annotated[Union[CounterTurn, Won], Field(discriminator="type")]

_action_adapter: TypeAdapter = TypeAdapter(PebblesAction)
_event_adapter: TypeAdapter = TypeAdapter(PebblesEvent)


def parse_action(payload: Any) -> Turn | GiveUp | Restart:
    """Decode an action from a dict or JSON string.

    Raises:
        pydantic.ValidationError: If the payload is not a known action
    """
    if isinstance(payload, (str, bytes)):
        return _action_adapter.validate_json(payload)
    return _action_adapter.validate_python(payload)


def parse_event(payload: Any) -> CounterTurn | Won:
    """Decode an event from a dict or JSON string."""
    if isinstance(payload, (str, bytes)):
        return _event_adapter.validate_json(payload)
    return _event_adapter.validate_python(payload)


def format_event_for_display(event: CounterTurn | Won) -> str:
    """Human-readable one-liner for an event."""
    if isinstance(event, Won):
        if event.player == Player.USER:
            return "You took the last pebble and won!"
        return "The program won."
    if event.pebbles == 0:
        return "Your move."
    noun = "pebble" if event.pebbles == 1 else "pebbles"
    return f"The program removed {event.pebbles} {noun}."
