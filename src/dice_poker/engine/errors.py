"""
Dice Poker - Engine Errors
"""


class GameError(Exception):
    """Base class for game rule errors."""


class InsufficientDeckError(GameError):
    """A draw asked for more cards than the deck holds."""

    def __init__(self, requested: int, available: int) -> None:
        self.requested = requested
        self.available = available
        super().__init__(
            f"Not enough cards in the deck: requested {requested}, {available} left."
        )


class InvalidActionError(GameError):
    """An intent was issued outside the phase that allows it."""

    def __init__(self, action: str, reason: str) -> None:
        self.action = action
        self.reason = reason
        super().__init__(f"Cannot {action}: {reason}")
