"""Card, Suit, and Rank definitions and their text encoding."""

import re
from dataclasses import dataclass
from enum import Enum, IntEnum


class CardParseError(ValueError):
    """Raised when a card token cannot be decoded."""

    def __init__(self, token: str, reason: str) -> None:
        super().__init__(f"Invalid card {token!r}: {reason}")
        self.token = token
        self.reason = reason


class Suit(Enum):
    """Card suits, in canonical deck order."""

    SPADES = "S"
    HEARTS = "H"
    DIAMONDS = "D"
    CLUBS = "C"

    def __str__(self) -> str:
        return self.value

    @property
    def symbol(self) -> str:
        symbols = {"S": "♠", "H": "♥", "D": "♦", "C": "♣"}
        return symbols[self.value]

    @property
    def order(self) -> int:
        """Position of the suit in canonical deck order (0-3)."""
        return _SUIT_ORDER.index(self)


_SUIT_ORDER = list(Suit)


class Rank(IntEnum):
    """Card ranks (2-14, where 14 is Ace)."""

    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13
    ACE = 14

    def __str__(self) -> str:
        if self.value <= 10:
            return str(self.value)
        return {11: "J", 12: "Q", 13: "K", 14: "A"}[self.value]


RANK_MAP = {str(rank): rank for rank in Rank}
SUIT_MAP = {suit.value: suit for suit in Suit}


@dataclass(frozen=True, slots=True)
class Card:
    """A single playing card."""

    rank: Rank
    suit: Suit

    def __str__(self) -> str:
        return f"{self.rank}{self.suit}"

    def __repr__(self) -> str:
        return f"Card({self.rank.name}, {self.suit.name})"

    def to_index(self) -> int:
        """Convert to 0-51 position in the canonical deck.

        Index = suit_order * 13 + (rank - 2)
        """
        return self.suit.order * 13 + (self.rank - 2)

    @classmethod
    def from_index(cls, index: int) -> "Card":
        """Create card from 0-51 canonical position."""
        if not 0 <= index < 52:
            raise ValueError(f"Card index out of range: {index}")
        suit = _SUIT_ORDER[index // 13]
        rank = Rank((index % 13) + 2)
        return cls(rank=rank, suit=suit)

    def as_tuple(self) -> tuple[int, str]:
        """Plain (rank, suit letter) pair, e.g. (14, 'S')."""
        return int(self.rank), self.suit.value

    @classmethod
    def from_tuple(cls, pair: tuple[int, str]) -> "Card":
        """Build a card from a (rank, suit letter) pair."""
        try:
            rank, suit = pair
            return cls(rank=Rank(rank), suit=Suit(str(suit).upper()))
        except (TypeError, ValueError) as exc:
            raise CardParseError(str(pair), "rank must be 2-14 and suit one of S, H, D, C") from exc

    @classmethod
    def from_string(cls, s: str) -> "Card":
        """Parse card from string like 'AS', '10D', '2c'."""
        return parse_card(s)


def parse_card(token: str) -> Card:
    """Decode a two- or three-character card token.

    The leading character(s) give the rank (2-10, J, Q, K, A) and the last
    character the suit (S, H, D, C). Case is ignored.
    """
    s = token.strip().upper()
    if len(s) not in (2, 3):
        raise CardParseError(token, "expected 2 or 3 characters")
    rank_text, suit_char = s[:-1], s[-1]
    if rank_text not in RANK_MAP:
        raise CardParseError(token, f"unknown rank {rank_text!r}")
    if suit_char not in SUIT_MAP:
        raise CardParseError(token, f"unknown suit {suit_char!r}")
    return Card(rank=RANK_MAP[rank_text], suit=SUIT_MAP[suit_char])


def parse_cards(text: str) -> list[Card]:
    """Parse a whitespace- or comma-separated list of card tokens."""
    return [parse_card(token) for token in re.split(r"[\s,]+", text.strip()) if token]


def format_cards(cards) -> str:
    """Space-separated text encoding of a sequence of cards."""
    return " ".join(str(c) for c in cards)
