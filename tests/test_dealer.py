"""Tests for dealing to several players (hand_engine/dealer.py)."""

from random import Random

import pytest

from hand_engine.dealer import PlayerHand, deal, winners
from hand_engine.deck import create_deck, shuffle
from hand_engine.hand_evaluator import category_name, compare_scores, evaluate
from tests.helpers.card_utils import make_cards_from_strings


class TestDeal:
    """Test round-robin dealing."""

    def test_four_players_five_cards(self, deck, rng):
        results = deal(deck, 4, 5, rng)
        assert len(results) == 4
        for result in results:
            assert isinstance(result, PlayerHand)
            assert len(result.hand) == 5
            assert result.score == evaluate(result.hand)
            assert result.name == category_name(result.score[0])

    def test_no_card_dealt_twice(self, deck, rng):
        results = deal(deck, 10, 5, rng)
        dealt = [c for r in results for c in r.hand]
        assert len(dealt) == 50
        assert len(set(dealt)) == 50

    def test_round_robin_from_top(self, deck):
        """Each round gives one card per player, taken from the end of the shuffle."""
        num_players, hand_size = 3, 5
        shuffled = shuffle(deck, Random(5))
        results = deal(deck, num_players, hand_size, Random(5))
        for p, result in enumerate(results):
            expected = tuple(
                shuffled[-(1 + r * num_players + p)] for r in range(hand_size)
            )
            assert result.hand == expected

    def test_same_seed_same_deal(self, deck):
        assert deal(deck, 4, 5, Random(11)) == deal(deck, 4, 5, Random(11))

    def test_deck_not_mutated(self, deck, rng):
        original = list(deck)
        deal(deck, 4, 5, rng)
        assert deck == original

    @pytest.mark.parametrize("size", [0, 10, 19])
    def test_insufficient_deck(self, size):
        small_deck = create_deck()[:size]
        assert deal(small_deck, 4, 5) is None

    def test_exact_fit(self, rng):
        small_deck = create_deck()[:20]
        results = deal(small_deck, 4, 5, rng)
        dealt = {c for r in results for c in r.hand}
        assert dealt == set(small_deck)

    def test_float_source(self, deck, float_source):
        results = deal(deck, 2, 5, float_source)
        assert [len(r.hand) for r in results] == [5, 5]

    def test_wrong_size_hands_score_as_sentinel(self, deck, rng):
        results = deal(deck, 2, 3, rng)
        assert all(r.score == (0,) and r.name == "High Card" for r in results)


class TestWinners:
    """Test picking the best dealt hands."""

    def test_winners_are_best(self, deck, rng):
        results = deal(deck, 6, 5, rng)
        best = winners(results)
        assert best
        top = results[best[0]].score
        assert all(results[i].score == top for i in best)
        assert all(compare_scores(r.score, top) <= 0 for r in results)

    def test_split_pot(self):
        a = make_cards_from_strings(["AS", "KH", "QD", "JC", "10S"])
        b = make_cards_from_strings(["AH", "KD", "QC", "JS", "10H"])
        c = make_cards_from_strings(["2S", "2H", "3D", "4C", "5S"])
        results = [
            PlayerHand(hand=tuple(h), score=evaluate(h), name="")
            for h in (a, b, c)
        ]
        assert winners(results) == [0, 1]

    def test_no_players(self, deck):
        assert winners(deal(deck, 0, 5)) == []
