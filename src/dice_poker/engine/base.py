"""
Dice Poker - Game Engine Base Classes

This module defines the foundational data structures and enums used throughout
the game engine. Value objects are immutable (frozen dataclasses) so cards and
dice can be shared freely between the deck, the hands and the selection sets.
"""

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import TYPE_CHECKING, Sequence

if TYPE_CHECKING:
    from dice_poker.engine.errors import InsufficientDeckError


class Suit(Enum):
    """Card suits, in canonical deck order."""
    SPADES = "♠"
    CLUBS = "♣"
    HEARTS = "♥"
    DIAMONDS = "♦"


class Rank(IntEnum):
    """Card ranks. Ace is low: A < 2 < ... < K."""
    ACE = 1
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13

    @property
    def label(self) -> str:
        """Face label as printed on the card ("A", "2" ... "10", "J", "Q", "K")."""
        return _RANK_LABELS.get(self, str(self.value))


_RANK_LABELS = {
    Rank.ACE: "A",
    Rank.JACK: "J",
    Rank.QUEEN: "Q",
    Rank.KING: "K",
}


class GamePhase(Enum):
    """Resting phases of a game round."""
    NOT_STARTED = "not_started"
    DEALT = "dealt"
    DICE_ROLLING = "dice_rolling"
    DICE_CONFIRMED = "dice_confirmed"


@dataclass(frozen=True)
class Card:
    """
    Immutable playing card.

    Attributes:
        suit: One of the four suits
        rank: Ordinal rank, ace low
    """
    suit: Suit
    rank: Rank

    @property
    def label(self) -> str:
        return f"{self.rank.label}{self.suit.value}"

    def __str__(self) -> str:
        return self.label


@dataclass(frozen=True)
class DiceRoll:
    """
    Immutable representation of the three round dice.

    Attributes:
        values: Tuple of exactly three face values (1-6)
    """
    values: tuple[int, ...]

    NUM_DICE = 3
    FACES = 6

    def __post_init__(self) -> None:
        """Validate dice count and face range."""
        if len(self.values) != self.NUM_DICE:
            raise ValueError(
                f"A roll has exactly {self.NUM_DICE} dice, got {len(self.values)}."
            )
        for value in self.values:
            if not (1 <= value <= self.FACES):
                raise ValueError(
                    f"Invalid die value {value}. Must be between 1 and {self.FACES}."
                )

    def __len__(self) -> int:
        return len(self.values)

    def __getitem__(self, index: int) -> int:
        return self.values[index]

    def replace_at(self, replacements: dict[int, int]) -> "DiceRoll":
        """Return a new roll with the given positions overwritten."""
        values = list(self.values)
        for index, value in replacements.items():
            values[index] = value
        return DiceRoll.from_sequence(values)

    @classmethod
    def from_sequence(cls, values: Sequence[int]) -> "DiceRoll":
        """Create a DiceRoll from any sequence type."""
        return cls(values=tuple(values))


@dataclass(frozen=True)
class DiceResolution:
    """
    Economy effects of a confirmed roll.

    Attributes:
        currency: Currency gained (one per 1 or 6)
        action_points: Action points for the round (base 1, plus one per 4 or 5)
        bonus_draws: Cards to draw immediately (one per 2 or 3)
    """
    currency: int
    action_points: int
    bonus_draws: int

    def __str__(self) -> str:
        return (
            f"+{self.currency} currency, {self.action_points} action points, "
            f"{self.bonus_draws} bonus draws"
        )


@dataclass(frozen=True)
class ActionResult:
    """
    Outcome of a player intent.

    Truthy when the intent was applied. A rejected intent leaves the game
    state untouched and carries the reason.

    Attributes:
        action: Name of the intent
        accepted: Whether the state changed
        reason: Why the intent was rejected (empty when accepted)
        drawn: Cards moved from the deck into the player hand
        error: Deck exhaustion raised by a draw the intent requested
    """
    action: str
    accepted: bool
    reason: str = ""
    drawn: tuple[Card, ...] = ()
    error: "InsufficientDeckError | None" = None

    def __bool__(self) -> bool:
        return self.accepted

    @classmethod
    def ok(
        cls,
        action: str,
        drawn: tuple[Card, ...] = (),
        error: "InsufficientDeckError | None" = None,
    ) -> "ActionResult":
        return cls(action=action, accepted=True, drawn=drawn, error=error)

    @classmethod
    def rejected(cls, action: str, reason: str) -> "ActionResult":
        return cls(action=action, accepted=False, reason=reason)
