"""Standard 52-card deck and Fisher-Yates shuffling."""

import logging
from random import SystemRandom
from typing import Callable, Protocol, Sequence, Union

from hand_engine.cards import Card

logger = logging.getLogger(__name__)

NUM_CARDS = 52


class IntegerSource(Protocol):
    """Anything with ``randrange(n)`` returning a uniform int in [0, n)."""

    def randrange(self, stop: int) -> int: ...


# Either an integer source (random.Random and friends) or a zero-argument
# callable returning a uniform float in [0, 1).
RandomSource = Union[IntegerSource, Callable[[], float]]


def create_deck() -> list[Card]:
    """Return the 52 cards in canonical order.

    Suit-major (S, H, D, C), ranks 2..14 ascending within each suit, so
    ``deck[i] == Card.from_index(i)``.
    """
    return [Card.from_index(i) for i in range(NUM_CARDS)]


def _uniform_index(rng: RandomSource, upper: int) -> int:
    """Draw a uniform integer in [0, upper) from either kind of source."""
    randrange = getattr(rng, "randrange", None)
    if randrange is not None:
        return randrange(upper)
    value = rng()
    if not 0.0 <= value < 1.0:
        raise ValueError(f"Random source returned {value!r}, expected a float in [0, 1)")
    return min(int(value * upper), upper - 1)


def shuffle(deck: Sequence[Card], rng: RandomSource | None = None) -> list[Card]:
    """Return a shuffled copy of ``deck``.

    Fisher-Yates: for i from the last index down to 1, swap element i with a
    uniformly chosen element in [0, i]. Without ``rng`` a non-seedable
    system source is used.
    """
    if rng is None:
        rng = SystemRandom()
    shuffled = list(deck)
    for i in range(len(shuffled) - 1, 0, -1):
        j = _uniform_index(rng, i + 1)
        shuffled[i], shuffled[j] = shuffled[j], shuffled[i]
    logger.debug("Shuffled %d cards with %s", len(shuffled), type(rng).__name__)
    return shuffled
