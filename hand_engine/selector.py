"""Best-hand selection from a pool of cards."""

import logging
from dataclasses import dataclass
from typing import Sequence

from hand_engine.cards import Card, format_cards
from hand_engine.combinations import iter_combinations
from hand_engine.hand_evaluator import (
    HAND_SIZE,
    HandScore,
    category_name,
    compare_scores,
    evaluate,
)

logger = logging.getLogger(__name__)

# Loses to every real score.
NO_SCORE: HandScore = (-1,)


@dataclass(frozen=True, slots=True)
class BestHand:
    """Strongest subset found in a card pool."""

    hand: tuple[Card, ...]
    score: HandScore

    @property
    def category(self) -> str:
        return category_name(self.score[0])

    def __str__(self) -> str:
        return f"{self.category}: {format_cards(self.hand)}"


def find_best(cards: Sequence[Card], hand_size: int = HAND_SIZE) -> BestHand | None:
    """Find the strongest ``hand_size``-card subset of ``cards``.

    Returns None when there are fewer than ``hand_size`` cards. On ties the
    first subset in generation order wins.
    """
    if len(cards) < hand_size:
        return None

    best_hand: tuple[Card, ...] | None = None
    best_score = NO_SCORE
    examined = 0
    for combo in iter_combinations(list(cards), hand_size):
        examined += 1
        score = evaluate(combo)
        if compare_scores(score, best_score) > 0:
            best_hand = combo
            best_score = score

    if best_hand is None:
        return None
    logger.debug("Examined %d subsets of %d cards, best %s", examined, len(cards), best_score)
    return BestHand(hand=best_hand, score=best_score)
