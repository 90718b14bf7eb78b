"""Card creation helpers for testing."""

from hand_engine.cards import Card


def make_cards_from_strings(card_strings: list[str]) -> list[Card]:
    """Create cards from strings like ['AS', 'KH', '10D']."""
    return [Card.from_string(s) for s in card_strings]


def make_cards_from_pairs(pairs: list[tuple[int, str]]) -> list[Card]:
    """Create cards from (rank, suit letter) pairs like [(14, 'S'), (10, 'D')].

    This is the shape the quiz front end passes in.
    """
    return [Card.from_tuple(p) for p in pairs]


def ranks_of(cards) -> list[int]:
    """Plain integer ranks, in the given order."""
    return [int(c.rank) for c in cards]
