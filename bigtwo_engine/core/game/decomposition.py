"""Greedy decomposition of a hand into poker hands, triples, doubles and singles.

The search works on an index set over the ordinal-sorted hand: a numpy
boolean mask marks which cards are still available. With ``commit=True``
every step consumes the cards it claims before the next step runs; with
``commit=False`` nothing is consumed and every list reports what it could
find on its own. Both modes share the same step functions.

Step order is fixed, strongest poker sub-kind first, so a straight flush is
pulled out before the plain flush and straight scans can split it:

    straight flush -> four of a kind -> full house -> flush -> straight
    -> triple -> double -> single

The partition is greedy, not optimal. Four-of-a-kind hands are reported once
per possible kicker while only the quad is consumed, and full houses pair
every triple with every double found by the nested search, so those entries
can share cards with each other or with later lists.
"""

from __future__ import annotations

import itertools
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Sequence

import numpy as np

from ..cards import Card
from .combination import Combination, classify

MIN_STRAIGHT = 5


@dataclass
class Decomposition:
    """Result of a search; every list is sorted ascending by strength."""

    poker_hands: List[Combination] = field(default_factory=list)
    triples: List[Combination] = field(default_factory=list)
    doubles: List[Combination] = field(default_factory=list)
    singles: List[Combination] = field(default_factory=list)
    leftover: List[Card] = field(default_factory=list)

    def by_length(self, length: int) -> List[Combination]:
        """List holding combinations of `length` cards (empty for other lengths)."""
        lists: Dict[int, List[Combination]] = {
            5: self.poker_hands,
            3: self.triples,
            2: self.doubles,
            1: self.singles,
        }
        return lists.get(length, [])

    def all_combinations(self) -> List[Combination]:
        return self.poker_hands + self.triples + self.doubles + self.singles

    def containing(self, card: Card) -> Decomposition:
        """Copy keeping only the combinations that include `card`."""

        def keep(combos: List[Combination]) -> List[Combination]:
            return [c for c in combos if c.contains(card)]

        return Decomposition(
            poker_hands=keep(self.poker_hands),
            triples=keep(self.triples),
            doubles=keep(self.doubles),
            singles=keep(self.singles),
            leftover=list(self.leftover),
        )


class DecompositionSearch:
    """Runs the step functions over one hand."""

    def __init__(self, hand: Iterable[Card]):
        self.cards: List[Card] = sorted(hand)
        self.ranks = np.array([c.rank for c in self.cards], dtype=np.int8)
        self.suits = np.array([c.suit for c in self.cards], dtype=np.int8)

    def new_mask(self) -> np.ndarray:
        return np.ones(len(self.cards), dtype=bool)

    def run(self, commit: bool = True) -> Decomposition:
        available = self.new_mask()

        poker_hands: List[Combination] = []
        poker_hands += self.straight_flushes(available, commit)
        poker_hands += self.four_of_a_kinds(available, commit)
        poker_hands += self.full_houses(available, commit)
        poker_hands += self.flushes(available, commit)
        poker_hands += self.straights(available, commit)

        triples = self.triples(available, commit)
        doubles = self.doubles(available, commit)
        singles = self.singles(available, commit)

        return Decomposition(
            poker_hands=sorted(poker_hands),
            triples=sorted(triples),
            doubles=sorted(doubles),
            singles=sorted(singles),
            leftover=self._cards_at(np.flatnonzero(available)),
        )

    # ------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------

    def _cards_at(self, indices: Iterable[int]) -> List[Card]:
        return [self.cards[int(i)] for i in indices]

    def _combine(self, indices: Sequence[int]) -> Combination:
        return classify(self._cards_at(indices))

    def _runs(self, candidates: Sequence[int], available: np.ndarray, commit: bool) -> List[List[int]]:
        """Five-card windows over rank-ascending candidates (one card per rank).

        Every extra consecutive rank re-triggers a window, so without commit a
        run of six gives two overlapping windows. With commit the window is
        consumed and the run starts over.
        """
        windows: List[List[int]] = []
        run: List[int] = []
        for idx in candidates:
            if run and self.ranks[idx] != self.ranks[run[-1]] + 1:
                run = []
            run.append(int(idx))
            if len(run) >= MIN_STRAIGHT:
                window = run[-MIN_STRAIGHT:]
                windows.append(window)
                if commit:
                    available[window] = False
                    run = []
        return windows

    def _groups(self, available: np.ndarray, size: int, commit: bool) -> List[List[int]]:
        """Adjacent equal-rank windows of `size` cards among the available ones."""
        indices = np.flatnonzero(available)
        groups: List[List[int]] = []
        i = 0
        while i + size <= len(indices):
            window = [int(j) for j in indices[i : i + size]]
            if np.all(self.ranks[window] == self.ranks[window[0]]):
                groups.append(window)
                if commit:
                    available[window] = False
                    i += size
                    continue
            i += 1
        return groups

    # ------------------------------------------------------------
    # Steps
    # ------------------------------------------------------------

    def straight_flushes(self, available: np.ndarray, commit: bool) -> List[Combination]:
        found: List[Combination] = []
        for suit in range(4):
            candidates = np.flatnonzero(available & (self.suits == suit))
            for window in self._runs(candidates, available, commit):
                found.append(self._combine(window))
        return found

    def four_of_a_kinds(self, available: np.ndarray, commit: bool) -> List[Combination]:
        found: List[Combination] = []
        for rank in range(13):
            quad = np.flatnonzero(available & (self.ranks == rank))
            if len(quad) != 4:
                continue
            kickers = np.flatnonzero(available & (self.ranks != rank))
            if len(kickers) == 0:
                continue
            for kicker in kickers:
                found.append(self._combine(list(quad) + [kicker]))
            if commit:
                available[quad] = False
        return found

    def full_houses(self, available: np.ndarray, commit: bool) -> List[Combination]:
        # Borrow triples and doubles from a copy so nothing is lost when no pairing exists
        borrowed = available.copy()
        triples = self._groups(borrowed, 3, commit=True)
        doubles = self._groups(borrowed, 2, commit=True)

        found = [self._combine(t + d) for t, d in itertools.product(triples, doubles)]

        if commit and triples and doubles:
            paired = min(len(triples), len(doubles))
            for group in triples[:paired] + doubles[:paired]:
                available[group] = False
        return found

    def flushes(self, available: np.ndarray, commit: bool) -> List[Combination]:
        found: List[Combination] = []
        for suit in range(4):
            same_suit = [int(i) for i in np.flatnonzero(available & (self.suits == suit))]
            if commit:
                while len(same_suit) >= 5:
                    window, same_suit = same_suit[:5], same_suit[5:]
                    found.append(self._combine(window))
                    available[window] = False
            else:
                for j in range(len(same_suit) - 4):
                    found.append(self._combine(same_suit[j : j + 5]))
        return found

    def straights(self, available: np.ndarray, commit: bool) -> List[Combination]:
        found: List[Combination] = []
        while True:
            # Lowest available card of each rank
            candidates: List[int] = []
            for idx in np.flatnonzero(available):
                if not candidates or self.ranks[idx] != self.ranks[candidates[-1]]:
                    candidates.append(int(idx))
            windows = self._runs(candidates, available, commit)
            found.extend(self._combine(w) for w in windows)
            if not commit or not windows:
                return found

    def triples(self, available: np.ndarray, commit: bool) -> List[Combination]:
        return [self._combine(g) for g in self._groups(available, 3, commit)]

    def doubles(self, available: np.ndarray, commit: bool) -> List[Combination]:
        return [self._combine(g) for g in self._groups(available, 2, commit)]

    def singles(self, available: np.ndarray, commit: bool) -> List[Combination]:
        indices = np.flatnonzero(available)
        if commit:
            available[indices] = False
        return [self._combine([i]) for i in indices]


def decompose(hand: Iterable[Card], commit: bool = True) -> Decomposition:
    """Split `hand` into ranked lists of poker hands, triples, doubles and singles.

    Args:
        hand: Cards to analyse, in any order
        commit: Consume claimed cards between steps (the mode used to pick a
            move). Without it every step sees the whole hand.
    """
    return DecompositionSearch(hand).run(commit)
