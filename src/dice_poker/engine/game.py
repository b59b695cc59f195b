"""
Dice Poker - Game Engine

The stateful surface of the game: intents in, state out. GameEngine owns one
immutable GameState and swaps it for a new one on every accepted intent.

Round Flow:
    NOT_STARTED -> start_game -> DEALT -> roll_dice -> DICE_ROLLING
    -> confirm_dice_results -> DICE_CONFIRMED -> end_turn -> DEALT (next round)
    reset_game returns to NOT_STARTED from anywhere.

Every intent returns an ActionResult. Rejected intents leave the state
untouched; with strict=True they raise InvalidActionError instead. Running out
of cards never raises out of an intent: the draw is skipped and the
InsufficientDeckError is handed to the on_draw_failed callback.
"""

from __future__ import annotations

import logging
import random
from dataclasses import replace
from typing import TYPE_CHECKING, Callable

from dice_poker.engine.base import ActionResult, Card, GamePhase
from dice_poker.engine.cards import DeckEngine
from dice_poker.engine.dice import DiceEngine
from dice_poker.engine.errors import InsufficientDeckError, InvalidActionError
from dice_poker.engine.events import EventPayload, GameEvent
from dice_poker.engine.state import GameState
from dice_poker.engine.validators import validate_die_index, validate_draw_count

if TYPE_CHECKING:
    from dice_poker.config.settings import Settings
    from dice_poker.view.models import GameSnapshot

logger = logging.getLogger(__name__)

DEFAULT_STARTING_CURRENCY = 10


class GameEngine:
    """Single-player dice-and-card game state machine."""

    def __init__(
        self,
        rng: random.Random | None = None,
        starting_currency: int = DEFAULT_STARTING_CURRENCY,
        strict: bool = False,
        on_draw_failed: Callable[[InsufficientDeckError], None] | None = None,
        on_event: Callable[[EventPayload], None] | None = None,
    ) -> None:
        self._rng = rng if rng is not None else random.Random()
        self._starting_currency = starting_currency
        self._strict = strict
        self._on_draw_failed = on_draw_failed
        self._on_event = on_event
        self._state = GameState.initial(starting_currency)

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        on_draw_failed: Callable[[InsufficientDeckError], None] | None = None,
        on_event: Callable[[EventPayload], None] | None = None,
    ) -> GameEngine:
        """Build an engine seeded and configured from application settings."""
        return cls(
            rng=random.Random(settings.seed),
            starting_currency=settings.starting_currency,
            strict=settings.strict_actions,
            on_draw_failed=on_draw_failed,
            on_event=on_event,
        )

    # ── Queries ─────────────────────────────────────────────────────────

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def phase(self) -> GamePhase:
        return self._state.phase

    @property
    def deck_size(self) -> int:
        return self._state.deck_size

    @property
    def player_hand(self) -> tuple[Card, ...]:
        return self._state.player_hand

    @property
    def dealer_hand(self) -> tuple[Card, ...]:
        return self._state.dealer_hand

    @property
    def dice_values(self) -> tuple[int, ...]:
        return self._state.dice_values

    @property
    def currency(self) -> int:
        return self._state.currency

    @property
    def action_points(self) -> int:
        return self._state.action_points

    @property
    def round_number(self) -> int:
        return self._state.round_number

    @property
    def reroll_count(self) -> int:
        return self._state.roll_count

    @property
    def dice_confirmed(self) -> bool:
        return self._state.dice_confirmed

    @property
    def selected_cards(self) -> tuple[Card, ...]:
        return self._state.selected_cards

    @property
    def selected_dice(self) -> frozenset[int]:
        return self._state.selected_dice

    @property
    def game_started(self) -> bool:
        return self._state.game_started

    def can_roll(self) -> bool:
        """Rolls left this round and dice not yet confirmed."""
        return self._state.can_roll

    def can_reroll_selected(self) -> bool:
        return self._state.can_reroll_selected

    def can_confirm_dice(self) -> bool:
        return self._state.can_confirm_dice

    def can_play_cards(self) -> bool:
        """A selection exists and the dice are confirmed. Does not check action points."""
        return self._state.can_play_cards

    def can_end_turn(self) -> bool:
        return self._state.can_end_turn

    def snapshot(self) -> GameSnapshot:
        """Serializable read model of the current state for a presentation layer."""
        from dice_poker.view.models import GameSnapshot

        return GameSnapshot.from_state(self._state)

    # ── Intents ─────────────────────────────────────────────────────────

    def start_game(self) -> ActionResult:
        """Shuffle and deal the opening hands."""
        action = "start_game"
        if not self._state.can_start_game:
            return self._reject(action, "game already started")

        deal = DeckEngine.deal_initial(self._state.deck, self._rng)
        self._state = replace(
            self._state,
            deck=deal.deck,
            player_hand=deal.player_hand,
            dealer_hand=deal.dealer_hand,
            game_started=True,
        )
        logger.info(
            "Game started: player %s, %d cards left in deck",
            " ".join(map(str, deal.player_hand)), len(deal.deck),
        )
        self._emit(GameEvent.GAME_STARTED, player_hand=list(deal.player_hand))
        return ActionResult.ok(action)

    def roll_dice(self) -> ActionResult:
        """Roll all three dice, spending one roll from the round budget."""
        action = "roll_dice"
        reason = self._roll_blocker()
        if reason:
            return self._reject(action, reason)

        dice = DiceEngine.roll_dice(self._rng)
        self._state = replace(self._state, dice=dice, roll_count=self._state.roll_count + 1)
        logger.debug("Rolled %s (roll %d)", dice.values, self._state.roll_count)
        self._emit(GameEvent.DICE_ROLLED, dice=dice.values)
        return ActionResult.ok(action)

    def reroll_selected_dice(self) -> ActionResult:
        """Reroll the selected dice as one roll action and clear the selection."""
        action = "reroll_selected_dice"
        reason = self._roll_blocker()
        if not reason and self._state.dice is None:
            reason = "dice have not been rolled"
        if not reason and not self._state.selected_dice:
            reason = "no dice selected"
        if reason:
            return self._reject(action, reason)

        indices = self._state.selected_dice
        dice = DiceEngine.reroll(self._state.dice, indices, self._rng)
        self._state = replace(
            self._state,
            dice=dice,
            roll_count=self._state.roll_count + 1,
            selected_dice=frozenset(),
        )
        logger.debug("Rerolled %s -> %s", sorted(indices), dice.values)
        self._emit(GameEvent.DICE_REROLLED, dice=dice.values, indices=sorted(indices))
        return ActionResult.ok(action)

    def confirm_dice_results(self) -> ActionResult:
        """Resolve the dice into currency, action points and bonus draws."""
        action = "confirm_dice_results"
        state = self._state
        if not state.game_started:
            return self._reject(action, "game not started")
        if state.dice_confirmed:
            return self._reject(action, "dice already confirmed")
        if state.dice is None:
            return self._reject(action, "dice have not been rolled")

        resolution = DiceEngine.resolve(state.dice)
        state = replace(
            state,
            currency=state.currency + resolution.currency,
            action_points=resolution.action_points,
            dice_confirmed=True,
        )
        drawn: tuple[Card, ...] = ()
        error = None
        if resolution.bonus_draws > 0:
            state, drawn, error = self._draw_into(state, resolution.bonus_draws)

        self._state = state
        logger.info("Round %d dice %s: %s", state.round_number, state.dice_values, resolution)
        self._emit(
            GameEvent.DICE_CONFIRMED,
            dice=state.dice_values,
            currency=resolution.currency,
            action_points=resolution.action_points,
            bonus_draws=resolution.bonus_draws,
        )
        self._after_draw(drawn, error)
        return ActionResult.ok(action, drawn=drawn, error=error)

    def toggle_card_selection(self, card: Card) -> ActionResult:
        """Mark or unmark a card in the player hand for play."""
        action = "toggle_card_selection"
        if card not in self._state.player_hand:
            return self._reject(action, f"{card} is not in the player hand")

        selected = self._state.selected_cards
        if card in selected:
            selected = tuple(c for c in selected if c != card)
        else:
            selected = selected + (card,)
        self._state = replace(self._state, selected_cards=selected)
        logger.debug("Selected cards: %s", " ".join(map(str, selected)) or "none")
        return ActionResult.ok(action)

    def toggle_die_selection(self, index: int) -> ActionResult:
        """Mark or unmark a die for reroll.

        Raises:
            ValueError: If index is not 0, 1 or 2
        """
        validate_die_index(index)
        selected = self._state.selected_dice ^ {index}
        self._state = replace(self._state, selected_dice=selected)
        logger.debug("Selected dice: %s", sorted(selected))
        return ActionResult.ok("toggle_die_selection")

    def play_selected_cards(self) -> ActionResult:
        """Play the selected cards, one action point each."""
        action = "play_selected_cards"
        state = self._state
        if not state.dice_confirmed:
            return self._reject(action, "dice not confirmed")
        if not state.selected_cards:
            return self._reject(action, "no cards selected")
        count = len(state.selected_cards)
        if count > state.action_points:
            return self._reject(
                action,
                f"{count} cards selected but only {state.action_points} action points left",
            )

        played = state.selected_cards
        self._state = replace(
            state,
            player_hand=tuple(c for c in state.player_hand if c not in played),
            action_points=state.action_points - count,
            selected_cards=(),
        )
        logger.info("Played %s, %d action points left", " ".join(map(str, played)), self._state.action_points)
        self._emit(GameEvent.CARDS_PLAYED, cards=list(played))
        return ActionResult.ok(action)

    def draw_cards(self, count: int) -> ActionResult:
        """Draw cards into the player hand outside the normal round flow.

        A draw larger than the deck is rejected whole and reported through
        on_draw_failed; it never raises InvalidActionError.

        Raises:
            ValueError: If count is negative
        """
        action = "draw_cards"
        validate_draw_count(count)
        if not self._state.game_started:
            return self._reject(action, "game not started")

        state, drawn, error = self._draw_into(self._state, count)
        if error is not None:
            self._after_draw((), error)
            return ActionResult(action=action, accepted=False, reason=str(error), error=error)

        self._state = state
        self._after_draw(drawn, None)
        return ActionResult.ok(action, drawn=drawn)

    def end_turn(self) -> ActionResult:
        """Convert leftover action points into draws and start the next round."""
        action = "end_turn"
        state = self._state
        if not state.dice_confirmed:
            return self._reject(action, "dice not confirmed")

        drawn: tuple[Card, ...] = ()
        error = None
        if state.action_points > 0:
            state, drawn, error = self._draw_into(state, state.action_points)
            state = replace(state, action_points=0)

        finished_round = state.round_number
        self._state = replace(
            state,
            dice=None,
            roll_count=0,
            dice_confirmed=False,
            selected_cards=(),
            selected_dice=frozenset(),
            round_number=finished_round + 1,
        )
        logger.info("Round %d ended, %d cards drawn", finished_round, len(drawn))
        self._emit(GameEvent.TURN_ENDED, finished_round=finished_round)
        self._after_draw(drawn, error)
        return ActionResult.ok(action, drawn=drawn, error=error)

    def reset_game(self) -> ActionResult:
        """Return to the construction-time state with a fresh, unshuffled deck."""
        self._state = GameState.initial(self._starting_currency)
        logger.info("Game reset")
        self._emit(GameEvent.GAME_RESET)
        return ActionResult.ok("reset_game")

    # ── Internals ───────────────────────────────────────────────────────

    def _roll_blocker(self) -> str:
        state = self._state
        if not state.game_started:
            return "game not started"
        if state.dice_confirmed:
            return "dice already confirmed"
        if state.roll_count >= DiceEngine.MAX_ROLLS:
            return f"no rolls left this round ({DiceEngine.MAX_ROLLS} used)"
        return ""

    def _draw_into(
        self, state: GameState, count: int
    ) -> tuple[GameState, tuple[Card, ...], InsufficientDeckError | None]:
        """Apply a draw to state, or return it unchanged with the error."""
        try:
            result = DeckEngine.draw(state.deck, state.player_hand, count)
        except InsufficientDeckError as exc:
            logger.warning("Draw of %d cards skipped: %s", count, exc)
            return state, (), exc
        return replace(state, player_hand=result.player_hand, deck=result.deck), result.drawn, None

    def _after_draw(
        self, drawn: tuple[Card, ...], error: InsufficientDeckError | None
    ) -> None:
        """Report a committed draw, or a skipped one, once the new state is in place."""
        if drawn:
            self._emit(GameEvent.CARDS_DRAWN, cards=list(drawn))
        if error is None:
            return
        self._emit(GameEvent.DRAW_FAILED, requested=error.requested, available=error.available)
        if self._on_draw_failed is not None:
            try:
                self._on_draw_failed(error)
            except Exception:
                logger.exception("Draw failure handler raised")

    def _reject(self, action: str, reason: str) -> ActionResult:
        logger.debug("Rejected %s: %s", action, reason)
        if self._strict:
            raise InvalidActionError(action, reason)
        return ActionResult.rejected(action, reason)

    def _emit(self, event: GameEvent, **data) -> None:
        if self._on_event is None:
            return
        try:
            self._on_event(EventPayload(event=event, round_number=self._state.round_number, data=data))
        except Exception:
            logger.exception("Event handler failed for %s", event.name)
