"""
Dice Poker - Engine Event Definitions

Event types and payloads emitted by the game engine after each accepted intent.
"""

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any


class GameEvent(Enum):
    """Events that can occur during a game."""

    GAME_STARTED = auto()
    DICE_ROLLED = auto()
    DICE_REROLLED = auto()
    DICE_CONFIRMED = auto()
    CARDS_DRAWN = auto()
    DRAW_FAILED = auto()
    CARDS_PLAYED = auto()
    TURN_ENDED = auto()
    GAME_RESET = auto()


@dataclass
class EventPayload:
    """Wrapper for engine event data."""

    event: GameEvent
    round_number: int
    data: dict[str, Any] = field(default_factory=dict)
