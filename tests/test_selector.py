"""Tests for best-hand selection (hand_engine/selector.py)."""

import pytest

from hand_engine.cards import Card
from hand_engine.hand_evaluator import compare_scores, evaluate
from hand_engine.combinations import combinations
from hand_engine.selector import BestHand, find_best
from tests.helpers.card_utils import make_cards_from_pairs, make_cards_from_strings


class TestFindBest:
    """Test the combinatorial search."""

    def test_royal_flush_in_seven(self):
        cards = make_cards_from_pairs(
            [(14, "S"), (13, "S"), (12, "S"), (11, "S"), (10, "S"), (9, "H"), (8, "H")]
        )
        result = find_best(cards)
        assert isinstance(result, BestHand)
        assert result.score == (8, 14)
        assert len(result.hand) == 5
        assert set(result.hand) == set(cards[:5])
        assert result.category == "Straight Flush"

    @pytest.mark.parametrize(
        "cards,expected",
        [
            (["2C", "2D", "5H", "5S", "9C", "9D", "KH"], (2, 9, 5, 13)),  # best two of three pairs
            (["AC", "AD", "AH", "KS", "KC", "KD", "2H"], (6, 14, 13)),  # two trips
            (["AC", "2D", "3H", "4S", "5C", "8D", "KH"], (4, 5)),  # wheel
            (["6C", "7C", "8C", "9C", "QC", "10S", "2D"], (5, 12, 9, 8, 7, 6)),  # flush over straight
        ],
    )
    def test_best_from_seven(self, cards, expected):
        assert find_best(make_cards_from_strings(cards)).score == expected

    def test_best_matches_exhaustive_max(self):
        cards = make_cards_from_strings(["KS", "QD", "KH", "4C", "4D", "JS", "10S", "9S"])
        best = find_best(cards)
        for combo in combinations(cards, 5):
            assert compare_scores(evaluate(combo), best.score) <= 0

    def test_exactly_five_cards(self):
        cards = make_cards_from_strings(["AS", "KH", "QD", "JC", "9S"])
        result = find_best(cards)
        assert result.hand == tuple(cards)
        assert result.score == evaluate(cards)

    def test_insufficient_cards(self):
        cards = make_cards_from_pairs([(14, "S"), (13, "H"), (12, "D")])
        assert find_best(cards, 5) is None

    def test_tie_keeps_first_in_generation_order(self):
        # Two identical straights; the first subset generated wins
        cards = make_cards_from_strings(["9S", "8H", "7D", "6C", "5S", "5H"])
        result = find_best(cards)
        assert result.score == (4, 9)
        assert result.hand == tuple(cards[:5])

    def test_other_hand_sizes_keep_first_subset(self):
        """Non-five sizes score as the sentinel, so the first subset stays."""
        cards = make_cards_from_strings(["AS", "AH", "2D", "3C"])
        result = find_best(cards, 2)
        assert result.score == (0,)
        assert result.hand == (cards[0], cards[1])

    def test_accepts_tuples(self):
        cards = tuple(make_cards_from_strings(["AS", "AH", "AD", "AC", "KS", "2C"]))
        assert find_best(cards).score == (7, 14, 13)

    def test_str(self):
        result = find_best(make_cards_from_strings(["AS", "KS", "QS", "JS", "10S"]))
        assert str(result) == "Straight Flush: AS KS QS JS 10S"

    def test_result_is_immutable(self):
        result = find_best(make_cards_from_strings(["AS", "KS", "QS", "JS", "10S"]))
        with pytest.raises(AttributeError):
            result.score = (0,)
        assert all(isinstance(c, Card) for c in result.hand)
