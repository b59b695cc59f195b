"""
Dice Poker Game Engine.

Pure Python game logic with zero UI dependencies.
Handles the deck, dice resolution, the action-point economy and the round flow.
"""

from dice_poker.engine.base import (
    ActionResult,
    Card,
    DiceResolution,
    DiceRoll,
    GamePhase,
    Rank,
    Suit,
)
from dice_poker.engine.cards import DeckEngine
from dice_poker.engine.dice import DiceEngine
from dice_poker.engine.errors import GameError, InsufficientDeckError, InvalidActionError
from dice_poker.engine.events import EventPayload, GameEvent
from dice_poker.engine.game import GameEngine
from dice_poker.engine.state import GameState

__all__ = [
    # Data Classes
    "ActionResult",
    "Card",
    "DiceResolution",
    "DiceRoll",
    "EventPayload",
    "GameState",
    # Enums
    "GameEvent",
    "GamePhase",
    "Rank",
    "Suit",
    # Errors
    "GameError",
    "InsufficientDeckError",
    "InvalidActionError",
    # Engines
    "DeckEngine",
    "DiceEngine",
    "GameEngine",
]
