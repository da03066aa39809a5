"""Combination kinds and strength constants for Big Two."""

from __future__ import annotations

from enum import Enum


class CombinationKind(Enum):
    """Structural category of a combination, valued by its card count."""

    PASS = 0
    SINGLE = 1
    DOUBLE = 2
    TRIPLE = 3
    POKER_HAND = 5

    @property
    def length(self) -> int:
        return self.value

    @property
    def display_name(self) -> str:
        return self.name.replace("_", " ").title()

    @classmethod
    def for_length(cls, length: int) -> CombinationKind:
        return cls(length)


class PokerHandType(Enum):
    """Five-card sub-kinds, weakest first."""

    STRAIGHT = 0
    FLUSH = 1
    FULL_HOUSE = 2
    FOUR_OF_A_KIND = 3
    STRAIGHT_FLUSH = 4

    @property
    def display_name(self) -> str:
        return _POKER_NAMES[self]

    def __lt__(self, other: PokerHandType) -> bool:
        return self.value < other.value


_POKER_NAMES = {
    PokerHandType.STRAIGHT: "Straight",
    PokerHandType.FLUSH: "Flush",
    PokerHandType.FULL_HOUSE: "Full House",
    PokerHandType.FOUR_OF_A_KIND: "Four of a Kind",
    PokerHandType.STRAIGHT_FLUSH: "Straight Flush",
}

# Number of distinct values each kind can take over one 52-card deck
NUM_SINGLE = 52
NUM_DOUBLE = 39
NUM_TRIPLE = 13
NUM_STRAIGHT = 36
NUM_FLUSH = 32
NUM_FULL_HOUSE = 13
NUM_FOUR_OF_A_KIND = 13
NUM_STRAIGHT_FLUSH = 36

PASS_VALUE = -1
DOUBLE_BASE = NUM_SINGLE  # 52
TRIPLE_BASE = DOUBLE_BASE + NUM_DOUBLE  # 91
POKER_BASE = TRIPLE_BASE + NUM_TRIPLE  # 104

# Offset of each poker sub-kind above POKER_BASE
POKER_TYPE_BASE = {
    PokerHandType.STRAIGHT: POKER_BASE,
    PokerHandType.FLUSH: POKER_BASE + NUM_STRAIGHT,
    PokerHandType.FULL_HOUSE: POKER_BASE + NUM_STRAIGHT + NUM_FLUSH,
    PokerHandType.FOUR_OF_A_KIND: POKER_BASE + NUM_STRAIGHT + NUM_FLUSH + NUM_FULL_HOUSE,
    PokerHandType.STRAIGHT_FLUSH: POKER_BASE + NUM_STRAIGHT + NUM_FLUSH + NUM_FULL_HOUSE + NUM_FOUR_OF_A_KIND,
}

# Ordinals that can never be the high card of a straight (3..6 ranks) or a flush (3..7 ranks)
STRAIGHT_HIGH_OFFSET = 52 - NUM_STRAIGHT  # 16
FLUSH_HIGH_OFFSET = 52 - NUM_FLUSH  # 20
STRAIGHT_FLUSH_HIGH_OFFSET = 52 - NUM_STRAIGHT_FLUSH  # 16
