"""
Tests for the deck engine: building, shuffling, dealing and drawing.
"""

import random

import pytest

from dice_poker.engine.base import Card, Rank, Suit
from dice_poker.engine.cards import DeckEngine, DealResult, DrawResult
from dice_poker.engine.errors import InsufficientDeckError


class TestBuildDeck:
    """Tests for DeckEngine.build_deck()."""

    def test_fifty_two_unique_cards(self):
        deck = DeckEngine.build_deck()
        assert len(deck) == 52
        assert len(set(deck)) == 52

    def test_suit_major_rank_minor_order(self):
        deck = DeckEngine.build_deck()
        assert deck[0] == Card(Suit.SPADES, Rank.ACE)
        assert deck[12] == Card(Suit.SPADES, Rank.KING)
        assert deck[13] == Card(Suit.CLUBS, Rank.ACE)
        assert deck[-1] == Card(Suit.DIAMONDS, Rank.KING)

    def test_deterministic(self):
        assert DeckEngine.build_deck() == DeckEngine.build_deck()


class TestShuffle:
    """Tests for DeckEngine.shuffle()."""

    def test_shuffles_in_place(self):
        cards = list(DeckEngine.build_deck())
        result = DeckEngine.shuffle(cards, random.Random(7))
        assert result is cards
        assert sorted(cards, key=lambda c: (c.suit.value, c.rank)) == sorted(
            DeckEngine.build_deck(), key=lambda c: (c.suit.value, c.rank)
        )

    def test_same_seed_same_permutation(self):
        a = DeckEngine.shuffle(list(DeckEngine.build_deck()), random.Random(42))
        b = DeckEngine.shuffle(list(DeckEngine.build_deck()), random.Random(42))
        assert a == b

    def test_different_seeds_differ(self):
        a = DeckEngine.shuffle(list(DeckEngine.build_deck()), random.Random(1))
        b = DeckEngine.shuffle(list(DeckEngine.build_deck()), random.Random(2))
        assert a != b

    def test_empty_and_single(self):
        assert DeckEngine.shuffle([], random.Random(0)) == []
        only = [Card(Suit.HEARTS, Rank.SIX)]
        assert DeckEngine.shuffle(only, random.Random(0)) == only

    def test_roughly_uniform_first_position(self):
        """Every card of a 4-card deck lands on top a fair share of the time."""
        rng = random.Random(99)
        cards = list(DeckEngine.build_deck()[:4])
        counts = {c: 0 for c in cards}
        for _ in range(4000):
            counts[DeckEngine.shuffle(list(cards), rng)[0]] += 1
        for count in counts.values():
            assert 800 < count < 1200


class TestSortHand:
    """Tests for DeckEngine.sort_hand()."""

    def test_sorted_by_rank_ace_low(self, make_card):
        hand = DeckEngine.sort_hand([make_card("KS"), make_card("AH"), make_card("10D")])
        assert [c.rank for c in hand] == [Rank.ACE, Rank.TEN, Rank.KING]

    def test_stable_for_equal_ranks(self, make_card):
        hand = DeckEngine.sort_hand([make_card("5D"), make_card("2S"), make_card("5S")])
        assert hand == (make_card("2S"), make_card("5D"), make_card("5S"))


class TestDealInitial:
    """Tests for DeckEngine.deal_initial()."""

    def test_deal_sizes(self):
        deal = DeckEngine.deal_initial(DeckEngine.build_deck(), random.Random(3))
        assert isinstance(deal, DealResult)
        assert len(deal.player_hand) == 3
        assert len(deal.dealer_hand) == 3
        assert len(deal.deck) == 46

    def test_no_card_lost_or_duplicated(self):
        deal = DeckEngine.deal_initial(DeckEngine.build_deck(), random.Random(3))
        every = deal.player_hand + deal.dealer_hand + deal.deck
        assert len(every) == 52
        assert set(every) == set(DeckEngine.build_deck())

    def test_player_hand_sorted(self):
        for seed in range(20):
            deal = DeckEngine.deal_initial(DeckEngine.build_deck(), random.Random(seed))
            ranks = [c.rank for c in deal.player_hand]
            assert ranks == sorted(ranks)

    def test_same_seed_same_hands(self):
        a = DeckEngine.deal_initial(DeckEngine.build_deck(), random.Random(11))
        b = DeckEngine.deal_initial(DeckEngine.build_deck(), random.Random(11))
        assert a == b

    def test_input_not_mutated(self):
        deck = list(DeckEngine.build_deck())
        DeckEngine.deal_initial(deck, random.Random(5))
        assert tuple(deck) == DeckEngine.build_deck()

    def test_short_deck_raises(self):
        with pytest.raises(InsufficientDeckError):
            DeckEngine.deal_initial(DeckEngine.build_deck()[:5], random.Random(0))


class TestDraw:
    """Tests for DeckEngine.draw()."""

    def test_draw_from_top(self, make_card):
        deck = (make_card("9C"), make_card("2H"), make_card("KS"))
        result = DeckEngine.draw(deck, (make_card("5D"),), 2)
        assert isinstance(result, DrawResult)
        assert result.drawn == (make_card("9C"), make_card("2H"))
        assert result.deck == (make_card("KS"),)

    def test_hand_resorted(self, make_card):
        deck = (make_card("9C"), make_card("2H"))
        result = DeckEngine.draw(deck, (make_card("5D"), make_card("JS")), 2)
        assert [c.label for c in result.player_hand] == ["2♥", "5♦", "9♣", "J♠"]

    def test_draw_zero(self, make_card):
        deck = (make_card("9C"),)
        result = DeckEngine.draw(deck, (), 0)
        assert result.drawn == ()
        assert result.deck == deck

    def test_draw_whole_deck(self, make_card):
        deck = (make_card("9C"), make_card("2H"))
        result = DeckEngine.draw(deck, (), 2)
        assert result.deck == ()
        assert len(result.player_hand) == 2

    def test_insufficient_deck_raises(self, make_card):
        deck = (make_card("9C"),)
        hand = (make_card("5D"),)
        with pytest.raises(InsufficientDeckError) as exc_info:
            DeckEngine.draw(deck, hand, 3)
        assert exc_info.value.requested == 3
        assert exc_info.value.available == 1
        # Inputs are tuples; nothing to roll back
        assert deck == (make_card("9C"),)
        assert hand == (make_card("5D"),)

    def test_negative_count_raises(self):
        with pytest.raises(ValueError, match="cannot be negative"):
            DeckEngine.draw(DeckEngine.build_deck(), (), -1)
