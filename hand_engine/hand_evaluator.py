"""Five-card hand evaluation and score comparison."""

from collections import Counter
from enum import IntEnum
from typing import Callable, Sequence

from hand_engine.cards import Card, Rank

# Category rank first, then tie-break values in descending significance.
# Length depends on the category.
HandScore = tuple[int, ...]

HAND_SIZE = 5
HIGH_CARD_SENTINEL: HandScore = (0,)
UNKNOWN_CATEGORY = "Unknown"

CATEGORY_NAMES = (
    "High Card",
    "Pair",
    "Two Pair",
    "Three of a Kind",
    "Straight",
    "Flush",
    "Full House",
    "Four of a Kind",
    "Straight Flush",
)

WHEEL = frozenset({2, 3, 4, 5, 14})


class HandCategory(IntEnum):
    """Poker hand categories from lowest to highest."""

    HIGH_CARD = 0
    PAIR = 1
    TWO_PAIR = 2
    THREE_OF_A_KIND = 3
    STRAIGHT = 4
    FLUSH = 5
    FULL_HOUSE = 6
    FOUR_OF_A_KIND = 7
    STRAIGHT_FLUSH = 8

    def __str__(self) -> str:
        return CATEGORY_NAMES[self.value]


def category_name(index: int) -> str:
    """Human-readable name for a category rank, 'Unknown' if out of range."""
    if 0 <= index < len(CATEGORY_NAMES):
        return CATEGORY_NAMES[index]
    return UNKNOWN_CATEGORY


def _is_straight(ranks: Sequence[int]) -> bool:
    unique = sorted(set(ranks))
    if len(unique) != 5:
        return False
    if unique[-1] - unique[0] == 4:
        return True
    return set(unique) == WHEEL


def _straight_high(ranks: Sequence[int]) -> int:
    # The wheel plays as a five-high straight.
    if set(ranks) == WHEEL:
        return 5
    return max(ranks)


def _with_count(rank_counts: Counter, n: int) -> list[int]:
    return sorted((r for r, c in rank_counts.items() if c == n), reverse=True)


def _kickers(ranks: Sequence[int], *exclude: int) -> list[int]:
    return [r for r in ranks if r not in exclude]


def _categorize(ranks: list[int], suits: list) -> HandCategory:
    rank_counts = Counter(ranks)
    counts = sorted(rank_counts.values(), reverse=True) + [0]
    is_flush = len(Counter(suits)) == 1
    is_straight = _is_straight(ranks)

    if is_flush and is_straight:
        return HandCategory.STRAIGHT_FLUSH
    if counts[0] == 4:
        return HandCategory.FOUR_OF_A_KIND
    if counts[0] == 3 and counts[1] == 2:
        return HandCategory.FULL_HOUSE
    if is_flush:
        return HandCategory.FLUSH
    if is_straight:
        return HandCategory.STRAIGHT
    if counts[0] == 3:
        return HandCategory.THREE_OF_A_KIND
    if counts[0] == 2 and counts[1] == 2:
        return HandCategory.TWO_PAIR
    if counts[0] == 2:
        return HandCategory.PAIR
    return HandCategory.HIGH_CARD


def _score_straight_flush(ranks: list[int], rank_counts: Counter) -> tuple[int, ...]:
    return (_straight_high(ranks),)


def _score_four_of_a_kind(ranks: list[int], rank_counts: Counter) -> tuple[int, ...]:
    quad = _with_count(rank_counts, 4)[0]
    return (quad, _kickers(ranks, quad)[0])


def _score_full_house(ranks: list[int], rank_counts: Counter) -> tuple[int, ...]:
    return (_with_count(rank_counts, 3)[0], _with_count(rank_counts, 2)[0])


def _score_flush(ranks: list[int], rank_counts: Counter) -> tuple[int, ...]:
    return tuple(ranks)


def _score_straight(ranks: list[int], rank_counts: Counter) -> tuple[int, ...]:
    return (_straight_high(ranks),)


def _score_three_of_a_kind(ranks: list[int], rank_counts: Counter) -> tuple[int, ...]:
    trips = _with_count(rank_counts, 3)[0]
    return (trips, *_kickers(ranks, trips))


def _score_two_pair(ranks: list[int], rank_counts: Counter) -> tuple[int, ...]:
    high, low = _with_count(rank_counts, 2)
    return (high, low, *_kickers(ranks, high, low))


def _score_pair(ranks: list[int], rank_counts: Counter) -> tuple[int, ...]:
    pair = _with_count(rank_counts, 2)[0]
    return (pair, *_kickers(ranks, pair))


def _score_high_card(ranks: list[int], rank_counts: Counter) -> tuple[int, ...]:
    return tuple(ranks)


_SCORERS: dict[HandCategory, Callable[[list[int], Counter], tuple[int, ...]]] = {
    HandCategory.STRAIGHT_FLUSH: _score_straight_flush,
    HandCategory.FOUR_OF_A_KIND: _score_four_of_a_kind,
    HandCategory.FULL_HOUSE: _score_full_house,
    HandCategory.FLUSH: _score_flush,
    HandCategory.STRAIGHT: _score_straight,
    HandCategory.THREE_OF_A_KIND: _score_three_of_a_kind,
    HandCategory.TWO_PAIR: _score_two_pair,
    HandCategory.PAIR: _score_pair,
    HandCategory.HIGH_CARD: _score_high_card,
}


def classify(hand: Sequence[Card] | None) -> HandCategory:
    """Return the category of a five-card hand (HIGH_CARD if not five cards)."""
    if hand is None or len(hand) != HAND_SIZE:
        return HandCategory.HIGH_CARD
    ranks = sorted((int(c.rank) for c in hand), reverse=True)
    return _categorize(ranks, [c.suit for c in hand])


def evaluate(hand: Sequence[Card] | None) -> HandScore:
    """Score exactly five cards.

    Returns ``(category, *tie_breaks)``. Anything other than five cards
    scores as the bare high-card sentinel ``(0,)`` instead of raising.
    """
    if hand is None or len(hand) != HAND_SIZE:
        return HIGH_CARD_SENTINEL

    ranks = sorted((int(c.rank) for c in hand), reverse=True)
    category = _categorize(ranks, [c.suit for c in hand])
    return (int(category), *_SCORERS[category](ranks, Counter(ranks)))


def compare_scores(a: Sequence[int], b: Sequence[int]) -> int:
    """Compare two scores, returning 1, 0 or -1.

    The shorter score is padded with zeros; it is never truncated.
    """
    for i in range(max(len(a), len(b))):
        left = a[i] if i < len(a) else 0
        right = b[i] if i < len(b) else 0
        if left > right:
            return 1
        if left < right:
            return -1
    return 0


def compare_hands(scores: Sequence[HandScore]) -> list[int]:
    """Compare scores and return indices of winners (handles ties)."""
    if not scores:
        return []

    best = scores[0]
    for score in scores[1:]:
        if compare_scores(score, best) > 0:
            best = score
    return [i for i, s in enumerate(scores) if compare_scores(s, best) == 0]


def _rank_text(value: int) -> str:
    if 2 <= value <= 14:
        return str(Rank(value))
    return str(value)


def describe_score(score: Sequence[int]) -> str:
    """Short description of a score, e.g. 'Full House, A over 10'."""
    if not score:
        return UNKNOWN_CATEGORY
    name = category_name(score[0])
    values = [_rank_text(v) for v in score[1:]]
    if not values or name == UNKNOWN_CATEGORY:
        return name

    category = HandCategory(score[0])
    if category in (HandCategory.STRAIGHT_FLUSH, HandCategory.STRAIGHT, HandCategory.FLUSH):
        return f"{name}, {values[0]} high"
    if category == HandCategory.FULL_HOUSE and len(values) > 1:
        return f"{name}, {values[0]} over {values[1]}"
    if category == HandCategory.TWO_PAIR and len(values) > 1:
        return f"{name}, {values[0]} and {values[1]}"
    if category == HandCategory.FOUR_OF_A_KIND and len(values) > 1:
        return f"{name}, {values[0]} with {values[1]} kicker"
    return f"{name}, {values[0]}"
