"""
Dice Poker - Test Configuration and Fixtures

Common fixtures and test data for all test modules.
"""

import random

import pytest

from dice_poker.engine.base import Card, Rank, Suit
from dice_poker.engine.game import GameEngine


class ScriptedRandom(random.Random):
    """Seeded generator whose die rolls can be queued ahead of time.

    Calls to randint(1, 6) pop from the queue while it has values; every
    other draw (shuffles included) falls through to the seeded generator.
    """

    def __init__(self, seed: int = 1234) -> None:
        super().__init__(seed)
        self.queued: list[int] = []

    def queue_dice(self, *values: int) -> None:
        self.queued.extend(values)

    def randint(self, a: int, b: int) -> int:
        if (a, b) == (1, 6) and self.queued:
            return self.queued.pop(0)
        return super().randint(a, b)


def card(label: str) -> Card:
    """Build a card from a short label such as "10H" or "AS"."""
    suits = {"S": Suit.SPADES, "C": Suit.CLUBS, "H": Suit.HEARTS, "D": Suit.DIAMONDS}
    ranks = {r.label: r for r in Rank}
    return Card(suit=suits[label[-1]], rank=ranks[label[:-1]])


@pytest.fixture
def make_card():
    """Card factory taking short labels ("AS", "10H", "KD")."""
    return card


@pytest.fixture
def rng() -> ScriptedRandom:
    return ScriptedRandom()


@pytest.fixture
def engine(rng: ScriptedRandom) -> GameEngine:
    """Fresh, not-started engine with a scripted random source."""
    return GameEngine(rng=rng)


@pytest.fixture
def started_engine(engine: GameEngine) -> GameEngine:
    """Engine right after the opening deal."""
    engine.start_game()
    return engine


@pytest.fixture
def confirm_with(started_engine: GameEngine, rng: ScriptedRandom):
    """Roll the given faces and confirm them."""

    def _confirm(*faces: int) -> GameEngine:
        rng.queue_dice(*faces)
        started_engine.roll_dice()
        started_engine.confirm_dice_results()
        return started_engine

    return _confirm


# =============================================================================
# DICE RESOLUTION TEST DATA
# =============================================================================

@pytest.fixture
def dice_resolutions() -> dict[str, tuple[tuple[int, int, int], int, int, int]]:
    """
    Dice faces with expected (currency, action_points, bonus_draws).
    """
    return {
        "mixed": ((1, 4, 2), 1, 2, 1),
        "all_sixes": ((6, 6, 6), 3, 1, 0),
        "all_ones": ((1, 1, 1), 3, 1, 0),
        "all_fours": ((4, 4, 4), 0, 4, 0),
        "fours_and_fives": ((4, 5, 5), 0, 4, 0),
        "all_twos": ((2, 2, 2), 0, 1, 3),
        "twos_and_threes": ((2, 3, 3), 0, 1, 3),
        "one_of_each": ((6, 5, 3), 1, 2, 1),
    }
