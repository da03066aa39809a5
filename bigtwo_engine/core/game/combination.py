"""Combination classification and strength values for Big Two.

A Combination is built only through ``classify``, so holding one means the
cards were already validated: construction is the check. Every combination
gets a single integer ``value``; values never collide across sizes, and
within the five-card size every straight flush beats every four of a kind,
which beats every full house, then flush, then straight.
"""

from __future__ import annotations

import functools
from dataclasses import dataclass
from typing import Iterable, Optional, Sequence, Tuple

from ..cards import Card
from .errors import InvalidCombination
from .types import (
    DOUBLE_BASE,
    FLUSH_HIGH_OFFSET,
    PASS_VALUE,
    POKER_TYPE_BASE,
    STRAIGHT_FLUSH_HIGH_OFFSET,
    STRAIGHT_HIGH_OFFSET,
    TRIPLE_BASE,
    CombinationKind,
    PokerHandType,
)


@functools.total_ordering
@dataclass(frozen=True)
class Combination:
    """An immutable, sorted group of 0, 1, 2, 3 or 5 cards playable in one turn."""

    kind: CombinationKind
    cards: Tuple[Card, ...]
    value: int
    poker_type: Optional[PokerHandType] = None

    @staticmethod
    def pass_() -> Combination:
        return PASS

    @property
    def length(self) -> int:
        return len(self.cards)

    @property
    def is_pass(self) -> bool:
        return self.kind is CombinationKind.PASS

    @property
    def type_name(self) -> str:
        if self.poker_type is not None:
            return self.poker_type.display_name
        return self.kind.display_name

    @property
    def sort_key(self) -> Tuple[int, Tuple[int, ...]]:
        """Strict ordering key: value first, then the cards from the highest down."""
        return self.value, tuple(sorted((c.ordinal for c in self.cards), reverse=True))

    def contains(self, card: Card) -> bool:
        return card in self.cards

    def sum_card_values(self) -> int:
        return sum(c.ordinal for c in self.cards)

    def codes(self) -> Tuple[str, ...]:
        return tuple(c.code for c in self.cards)

    def __lt__(self, other: Combination) -> bool:
        if not isinstance(other, Combination):
            return NotImplemented
        return self.sort_key < other.sort_key

    def __str__(self) -> str:
        return f"{self.type_name}: " + ", ".join(str(c) for c in self.cards)


PASS = Combination(CombinationKind.PASS, (), PASS_VALUE)


def classify(cards: Iterable[Card]) -> Combination:
    """Build the combination formed by `cards`.

    Raises:
        InvalidCombination: the cards do not form a legal grouping
    """
    ordered = tuple(sorted(cards))
    n = len(ordered)

    if len(set(ordered)) != n:
        raise InvalidCombination("A combination cannot contain the same card twice.")

    if n == 0:
        return PASS

    elif n == 1:
        return Combination(CombinationKind.SINGLE, ordered, ordered[0].ordinal)

    elif n == 2:
        c1, c2 = ordered
        if c1.rank != c2.rank:
            raise InvalidCombination("Cards in a double must have the same rank.")
        # The lower card of a pair is never the top suit, so max suit is in [1,3]
        max_suit = max(c1.suit, c2.suit) - 1
        return Combination(CombinationKind.DOUBLE, ordered, DOUBLE_BASE + c1.rank * 3 + max_suit)

    elif n == 3:
        c1, c2, c3 = ordered
        if c1.rank != c2.rank or c1.rank != c3.rank:
            raise InvalidCombination("Cards in a triple must have the same rank.")
        return Combination(CombinationKind.TRIPLE, ordered, TRIPLE_BASE + c1.rank)

    elif n == 5:
        poker_type = classify_five(ordered)
        return Combination(CombinationKind.POKER_HAND, ordered, poker_value(poker_type, ordered), poker_type)

    raise InvalidCombination(f"0, 1, 2, 3 or 5 cards must be selected. {n} cards were selected.")


def is_valid(cards: Iterable[Card]) -> bool:
    try:
        classify(cards)
    except InvalidCombination:
        return False
    return True


# ------------------------------------------------------------
# Five-card hands
# ------------------------------------------------------------


def _consecutive(cards: Sequence[Card]) -> bool:
    return all(cards[i].rank == cards[i - 1].rank + 1 for i in range(1, len(cards)))


def _one_suit(cards: Sequence[Card]) -> bool:
    return all(c.suit == cards[0].suit for c in cards)


def is_straight(cards: Sequence[Card]) -> bool:
    """Five consecutive ranks that are not all one suit."""
    return _consecutive(cards) and not _one_suit(cards)


def is_flush(cards: Sequence[Card]) -> bool:
    """One suit without five consecutive ranks."""
    return _one_suit(cards) and not _consecutive(cards)


def is_straight_flush(cards: Sequence[Card]) -> bool:
    return _consecutive(cards) and _one_suit(cards)


def is_full_house(cards: Sequence[Card]) -> bool:
    r = [c.rank for c in cards]
    if r[0] == r[1] == r[2]:
        return r[3] == r[4]
    if r[2] == r[3] == r[4]:
        return r[0] == r[1]
    return False


def is_four_of_a_kind(cards: Sequence[Card]) -> bool:
    r = [c.rank for c in cards]
    return r[0] == r[1] == r[2] == r[3] or r[1] == r[2] == r[3] == r[4]


def classify_five(cards: Sequence[Card]) -> PokerHandType:
    """Classify five ordinal-sorted cards. The checks are mutually exclusive."""
    if is_straight(cards):
        return PokerHandType.STRAIGHT
    if is_flush(cards):
        return PokerHandType.FLUSH
    if is_full_house(cards):
        return PokerHandType.FULL_HOUSE
    if is_four_of_a_kind(cards):
        return PokerHandType.FOUR_OF_A_KIND
    if is_straight_flush(cards):
        return PokerHandType.STRAIGHT_FLUSH
    raise InvalidCombination("The cards do not form a poker hand.")


def poker_value(poker_type: PokerHandType, cards: Sequence[Card]) -> int:
    """Strength of five ordinal-sorted cards already known to be `poker_type`."""
    base = POKER_TYPE_BASE[poker_type]
    high = cards[4].ordinal

    if poker_type is PokerHandType.STRAIGHT:
        return base + high - STRAIGHT_HIGH_OFFSET
    if poker_type is PokerHandType.FLUSH:
        return base + high - FLUSH_HIGH_OFFSET
    if poker_type is PokerHandType.STRAIGHT_FLUSH:
        return base + high - STRAIGHT_FLUSH_HIGH_OFFSET

    # Full house and four of a kind are ranked by their triple / quad, which
    # sits either at the front or at the back of the sorted cards
    if cards[0].rank == cards[2].rank:
        return base + cards[0].rank
    return base + cards[4].rank
