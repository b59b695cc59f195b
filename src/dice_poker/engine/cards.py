"""
Dice Poker - Deck Engine

Builds, shuffles and deals the standard 52-card deck.

Rules:
    - The canonical deck is suit-major, rank-minor (A♠ 2♠ ... K♠ A♣ ... K♦)
    - The initial deal gives 3 cards to the player (sorted) and 3 to the dealer
    - Draws take cards from the top of the deck into the player hand
    - A draw larger than the deck is rejected as a whole, never partial
    - The player hand is always kept sorted by rank, ace low

All methods are class methods operating on immutable tuples. State is passed
in and returned, never stored.
"""

import random
from dataclasses import dataclass
from typing import ClassVar, Iterable, MutableSequence

from dice_poker.engine.base import Card, Rank, Suit
from dice_poker.engine.errors import InsufficientDeckError
from dice_poker.engine.validators import validate_draw_count


@dataclass(frozen=True)
class DealResult:
    """
    Cards after the opening deal.

    Attributes:
        player_hand: Player's 3 cards, sorted by rank
        dealer_hand: Dealer's 3 cards, in deal order
        deck: Remaining 46 cards
    """
    player_hand: tuple[Card, ...]
    dealer_hand: tuple[Card, ...]
    deck: tuple[Card, ...]


@dataclass(frozen=True)
class DrawResult:
    """
    Cards after a draw into the player hand.

    Attributes:
        player_hand: Updated hand, re-sorted by rank
        deck: Remaining deck
        drawn: The cards that were drawn, in deck order
    """
    player_hand: tuple[Card, ...]
    deck: tuple[Card, ...]
    drawn: tuple[Card, ...]


class DeckEngine:
    """Stateless engine for deck management."""

    DECK_SIZE: ClassVar[int] = 52
    HAND_SIZE: ClassVar[int] = 3

    @classmethod
    def build_deck(cls) -> tuple[Card, ...]:
        """Build the canonical, unshuffled 52-card deck."""
        return tuple(Card(suit=suit, rank=rank) for suit in Suit for rank in Rank)

    @classmethod
    def shuffle(
        cls,
        cards: MutableSequence[Card],
        rng: random.Random | None = None,
    ) -> MutableSequence[Card]:
        """
        Shuffle cards in place (Fisher-Yates).

        Walks from the last index down to 1, swapping each position with a
        uniformly chosen index at or below it.

        Args:
            cards: Cards to shuffle in place
            rng: Random source (defaults to the module-level generator)

        Returns:
            The same sequence, shuffled
        """
        source = random if rng is None else rng
        for i in range(len(cards) - 1, 0, -1):
            j = source.randint(0, i)
            cards[i], cards[j] = cards[j], cards[i]
        return cards

    @classmethod
    def sort_hand(cls, cards: Iterable[Card]) -> tuple[Card, ...]:
        """Sort cards by rank, ace low. Equal ranks keep their order."""
        return tuple(sorted(cards, key=lambda card: card.rank))

    @classmethod
    def deal_initial(
        cls,
        deck: Iterable[Card],
        rng: random.Random | None = None,
    ) -> DealResult:
        """
        Shuffle the deck and deal the opening hands.

        Args:
            deck: Cards to deal from (not mutated)
            rng: Random source for the shuffle

        Returns:
            DealResult with both hands and the remaining deck

        Raises:
            InsufficientDeckError: If the deck holds fewer than 6 cards
        """
        shuffled = list(deck)
        needed = cls.HAND_SIZE * 2
        if len(shuffled) < needed:
            raise InsufficientDeckError(requested=needed, available=len(shuffled))

        cls.shuffle(shuffled, rng)
        return DealResult(
            player_hand=cls.sort_hand(shuffled[:cls.HAND_SIZE]),
            dealer_hand=tuple(shuffled[cls.HAND_SIZE:needed]),
            deck=tuple(shuffled[needed:]),
        )

    @classmethod
    def draw(
        cls,
        deck: tuple[Card, ...],
        player_hand: tuple[Card, ...],
        count: int,
    ) -> DrawResult:
        """
        Draw cards from the top of the deck into the player hand.

        Args:
            deck: Current deck, top card first
            player_hand: Current player hand
            count: Number of cards to draw

        Returns:
            DrawResult with the re-sorted hand and the shrunken deck

        Raises:
            ValueError: If count is negative
            InsufficientDeckError: If count exceeds the deck size
        """
        validate_draw_count(count)
        if count > len(deck):
            raise InsufficientDeckError(requested=count, available=len(deck))

        drawn = tuple(deck[:count])
        return DrawResult(
            player_hand=cls.sort_hand(player_hand + drawn),
            deck=tuple(deck[count:]),
            drawn=drawn,
        )
