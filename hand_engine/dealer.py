"""Dealing a shuffled deck to several players."""

import logging
from dataclasses import dataclass
from typing import Sequence

from hand_engine.cards import Card
from hand_engine.deck import RandomSource, shuffle
from hand_engine.hand_evaluator import (
    HAND_SIZE,
    HandScore,
    category_name,
    compare_hands,
    evaluate,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class PlayerHand:
    """One player's dealt cards and how they evaluate."""

    hand: tuple[Card, ...]
    score: HandScore
    name: str


def deal(
    deck: Sequence[Card],
    num_players: int,
    hand_size: int = HAND_SIZE,
    rng: RandomSource | None = None,
) -> list[PlayerHand] | None:
    """Shuffle a copy of ``deck`` and deal ``hand_size`` cards to each player.

    Cards go out one per player per round, taken from the top (end) of the
    shuffled copy. Returns None if the deck cannot cover every hand.
    """
    if len(deck) < num_players * hand_size:
        return None

    shuffled = shuffle(deck, rng)
    hands: list[list[Card]] = [[] for _ in range(num_players)]
    for _ in range(hand_size):
        for player in hands:
            player.append(shuffled.pop())

    results = []
    for cards in hands:
        score = evaluate(cards)
        results.append(PlayerHand(hand=tuple(cards), score=score, name=category_name(score[0])))
    logger.debug(
        "Dealt %d hands of %d from %d cards, %d left", num_players, hand_size, len(deck), len(shuffled)
    )
    return results


def winners(results: Sequence[PlayerHand]) -> list[int]:
    """Indices of the best dealt hands (several on a tie)."""
    return compare_hands([r.score for r in results])
