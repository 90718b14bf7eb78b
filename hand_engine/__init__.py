"""Five-card poker hand evaluation and best-hand selection."""

from hand_engine.cards import Card, CardParseError, Rank, Suit, parse_card, parse_cards
from hand_engine.combinations import combinations
from hand_engine.dealer import PlayerHand, deal, winners
from hand_engine.deck import create_deck, shuffle
from hand_engine.hand_evaluator import (
    HandCategory,
    HandScore,
    category_name,
    compare_hands,
    compare_scores,
    evaluate,
)
from hand_engine.selector import BestHand, find_best

__all__ = [
    "BestHand",
    "Card",
    "CardParseError",
    "HandCategory",
    "HandScore",
    "PlayerHand",
    "Rank",
    "Suit",
    "category_name",
    "combinations",
    "compare_hands",
    "compare_scores",
    "create_deck",
    "deal",
    "evaluate",
    "find_best",
    "parse_card",
    "parse_cards",
    "shuffle",
    "winners",
]
