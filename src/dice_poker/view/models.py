"""
Dice Poker - Snapshot Models

Pydantic models that mirror the engine's GameState for a presentation layer.
Snapshots are plain data: a renderer reads them and forwards intents back to
the GameEngine, it never mutates them.
"""

from pydantic import BaseModel, Field

from dice_poker.engine.base import Card
from dice_poker.engine.state import GameState


class CardView(BaseModel):
    """A card as the presentation layer sees it."""

    suit: str
    rank: int = Field(ge=1, le=13)
    label: str

    model_config = {"frozen": True}

    @classmethod
    def from_card(cls, card: Card) -> "CardView":
        return cls(suit=card.suit.value, rank=int(card.rank), label=card.label)


class GameSnapshot(BaseModel):
    """Mirrors GameState, minus the deck contents."""

    phase: str
    game_started: bool = False
    deck_size: int = Field(ge=0, le=52)
    player_hand: list[CardView] = Field(default_factory=list)
    dealer_hand: list[CardView] = Field(default_factory=list)
    dice_values: list[int] = Field(default_factory=list)
    reroll_count: int = Field(default=0, ge=0, le=3)
    dice_confirmed: bool = False
    currency: int = 0
    action_points: int = Field(default=1, ge=0)
    round_number: int = Field(default=1, ge=1)
    selected_cards: list[CardView] = Field(default_factory=list)
    selected_dice: list[int] = Field(default_factory=list)
    can_roll: bool = False
    can_reroll_selected: bool = False
    can_confirm_dice: bool = False
    can_play_cards: bool = False
    can_end_turn: bool = False

    model_config = {"frozen": True}

    @classmethod
    def from_state(cls, state: GameState) -> "GameSnapshot":
        """Build a snapshot from the engine's current state."""
        return cls(
            phase=state.phase.value,
            game_started=state.game_started,
            deck_size=state.deck_size,
            player_hand=[CardView.from_card(c) for c in state.player_hand],
            dealer_hand=[CardView.from_card(c) for c in state.dealer_hand],
            dice_values=list(state.dice_values),
            reroll_count=state.roll_count,
            dice_confirmed=state.dice_confirmed,
            currency=state.currency,
            action_points=state.action_points,
            round_number=state.round_number,
            selected_cards=[CardView.from_card(c) for c in state.selected_cards],
            selected_dice=sorted(state.selected_dice),
            can_roll=state.can_roll,
            can_reroll_selected=state.can_reroll_selected,
            can_confirm_dice=state.can_confirm_dice,
            can_play_cards=state.can_play_cards,
            can_end_turn=state.can_end_turn,
        )
