"""
Dice Poker - Game State

The single immutable record the game engine owns. Every intent produces a new
GameState via dataclasses.replace, so a rejected or failed intent can never
leave a half-applied state behind.
"""

from dataclasses import dataclass, field

from dice_poker.engine.base import Card, DiceRoll, GamePhase
from dice_poker.engine.cards import DeckEngine
from dice_poker.engine.dice import DiceEngine


@dataclass(frozen=True)
class GameState:
    """
    Complete state of a game.

    Attributes:
        deck: Remaining cards, top first
        player_hand: Player's cards, sorted by rank
        dealer_hand: Dealer's cards, in deal order
        dice: Current round dice (None until the first roll of the round)
        roll_count: Roll actions taken this round (0-3)
        dice_confirmed: Whether this round's dice have been resolved
        currency: Currency balance
        action_points: Cards the player may still play this round
        round_number: Current round, starting at 1
        selected_cards: Cards marked for play, in selection order
        selected_dice: Die positions marked for reroll
        game_started: Whether the opening deal has happened
    """
    deck: tuple[Card, ...]
    player_hand: tuple[Card, ...] = ()
    dealer_hand: tuple[Card, ...] = ()
    dice: DiceRoll | None = None
    roll_count: int = 0
    dice_confirmed: bool = False
    currency: int = 0
    action_points: int = DiceEngine.BASE_ACTION_POINTS
    round_number: int = 1
    selected_cards: tuple[Card, ...] = ()
    selected_dice: frozenset[int] = field(default_factory=frozenset)
    game_started: bool = False

    @classmethod
    def initial(cls, starting_currency: int) -> "GameState":
        """State of a freshly constructed (or reset) game."""
        return cls(deck=DeckEngine.build_deck(), currency=starting_currency)

    @property
    def deck_size(self) -> int:
        return len(self.deck)

    @property
    def dice_values(self) -> tuple[int, ...]:
        """Current dice faces, empty before the first roll of the round."""
        return self.dice.values if self.dice is not None else ()

    @property
    def phase(self) -> GamePhase:
        if not self.game_started:
            return GamePhase.NOT_STARTED
        if self.dice_confirmed:
            return GamePhase.DICE_CONFIRMED
        if self.roll_count > 0:
            return GamePhase.DICE_ROLLING
        return GamePhase.DEALT

    @property
    def can_start_game(self) -> bool:
        return not self.game_started

    @property
    def can_roll(self) -> bool:
        return self.game_started and DiceEngine.can_roll(self.roll_count, self.dice_confirmed)

    @property
    def can_reroll_selected(self) -> bool:
        return self.can_roll and self.dice is not None and bool(self.selected_dice)

    @property
    def can_confirm_dice(self) -> bool:
        return self.game_started and self.dice is not None and not self.dice_confirmed

    @property
    def can_play_cards(self) -> bool:
        """Whether a play is allowed at all. The action-point limit is checked separately."""
        return self.dice_confirmed and bool(self.selected_cards)

    @property
    def can_end_turn(self) -> bool:
        return self.dice_confirmed
