"""Core card representation and encoding for Big Two."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import IntEnum
from typing import List

# ============================================================
# Big Two Card System
# ============================================================


class Rank(IntEnum):
    """Card ranks in Big Two order: 3 is the lowest, 2 the highest."""

    THREE = 0
    FOUR = 1
    FIVE = 2
    SIX = 3
    SEVEN = 4
    EIGHT = 5
    NINE = 6
    TEN = 7
    JACK = 8
    QUEEN = 9
    KING = 10
    ACE = 11
    TWO = 12

    @classmethod
    def from_index(cls, index: int) -> Rank:
        if not 0 <= index <= 12:
            raise ValueError(f"Rank not in the range [0,12]: {index}")
        return cls(index)

    @property
    def identifier(self) -> str:
        """One-character identifier (asset lookup key)."""
        return "3456789tjqka2"[self]

    @property
    def code(self) -> str:
        return "3456789TJQKA2"[self]

    @property
    def display_name(self) -> str:
        if self == Rank.TEN:
            return "10"
        if Rank.JACK <= self <= Rank.ACE:
            return self.name.capitalize()
        return self.identifier


class Suit(IntEnum):
    """Suits in ascending strength: ♦ < ♣ < ♥ < ♠."""

    DIAMONDS = 0
    CLUBS = 1
    HEARTS = 2
    SPADES = 3

    @classmethod
    def from_index(cls, index: int) -> Suit:
        if not 0 <= index <= 3:
            raise ValueError(f"Suit not in the range [0,3]: {index}")
        return cls(index)

    @property
    def identifier(self) -> str:
        return "dchs"[self]

    @property
    def code(self) -> str:
        return "DCHS"[self]

    @property
    def symbol(self) -> str:
        return "♦♣♥♠"[self]

    @property
    def display_name(self) -> str:
        return self.name.capitalize()


@dataclass(frozen=True, order=True)
class Card:
    """A playing card. Ordered by ordinal number (rank, then suit).

    The face-up flag is display-only and never takes part in equality,
    hashing or ordering.
    """

    rank: Rank
    suit: Suit
    face_up: bool = field(default=True, compare=False)

    def __post_init__(self) -> None:
        # Coerce plain ints so Card(0, 0) == Card(Rank.THREE, Suit.DIAMONDS)
        object.__setattr__(self, "rank", Rank.from_index(int(self.rank)))
        object.__setattr__(self, "suit", Suit.from_index(int(self.suit)))

    @classmethod
    def from_ordinal(cls, number: int) -> Card:
        """Build one of the 52 standard cards. from_ordinal(n).ordinal == n."""
        if not 0 <= number <= 51:
            raise ValueError(f"Card number not in the range [0,51]: {number}")
        return cls(Rank(number >> 2), Suit(number & 3))

    @classmethod
    def from_code(cls, code: str) -> Card:
        return cls.from_ordinal(string_to_card(code))

    @property
    def ordinal(self) -> int:
        return encode(self.rank, self.suit)

    @property
    def code(self) -> str:
        return self.rank.code + self.suit.code

    def is_same_card(self, other: Card) -> bool:
        return self.rank == other.rank and self.suit == other.suit

    def flipped(self) -> Card:
        return replace(self, face_up=not self.face_up)

    def with_face_up(self, face_up: bool) -> Card:
        return replace(self, face_up=face_up)

    def __str__(self) -> str:
        return f"{self.rank.display_name} of {self.suit.display_name}"


# Ranks: 3(0) < 4(1) < ... < A(11) < 2(12)
RANKS: List[Rank] = list(Rank)
SUITS: List[Suit] = list(Suit)  # ♦,♣,♥,♠

# All 52 cards in ordinal order
ALL_CARDS: List[Card] = [Card(r, s) for r in RANKS for s in SUITS]

# Special cards
THREE_OF_DIAMONDS = Card(Rank.THREE, Suit.DIAMONDS)


def encode(rank: int, suit: int) -> int:
    """Encode card as its ordinal number: (rank<<2)|suit."""
    return int(rank) << 2 | int(suit)


def rank_of(card_code: int) -> int:
    """Extract rank from encoded card."""
    return card_code >> 2


def suit_of(card_code: int) -> int:
    """Extract suit from encoded card."""
    return card_code & 3


def card_to_string(card_code: int) -> str:
    """Convert encoded card to string like '3D', 'AS', etc."""
    if not 0 <= card_code <= 51:
        raise ValueError(f"Card number not in the range [0,51]: {card_code}")
    return Rank(rank_of(card_code)).code + Suit(suit_of(card_code)).code


def string_to_card(card_str: str) -> int:
    """Parse card string like '3D', 'as' into encoded card."""
    text = card_str.strip().upper()
    if len(text) != 2:
        raise ValueError(f"Invalid card format: {card_str!r}")
    rank_char, suit_char = text
    rank_chars = "3456789TJQKA2"
    suit_chars = "DCHS"
    if rank_char not in rank_chars or suit_char not in suit_chars:
        raise ValueError(f"Invalid card: {card_str!r}")
    return encode(rank_chars.index(rank_char), suit_chars.index(suit_char))
