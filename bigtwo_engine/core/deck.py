"""Deck: an ordered, mutable collection of cards with shuffle, deal, search and sort."""

from __future__ import annotations

from typing import Iterable, Iterator, List, Optional, Protocol, Sequence

import numpy as np

from .cards import ALL_CARDS, Card


class RandomSource(Protocol):
    """Anything that yields uniform permutations; numpy's Generator qualifies."""

    def permutation(self, n: int) -> Sequence[int]: ...


def make_random_source(seed: Optional[int] = None) -> np.random.Generator:
    """Create the default random source. Pass a seed for reproducible games."""
    return np.random.default_rng(seed)


def _rank_sort_num(card: Card) -> int:
    # Face order 2, 3, ..., K, A: the two moves below the three
    num = card.rank + 1
    return 0 if num >= 13 else num


def _suit_sort_num(card: Card) -> int:
    # Spades first, then hearts, clubs, diamonds
    return (3 - card.suit) * 13 + _rank_sort_num(card)


class Deck:
    """Ordered sequence of cards owned by exactly one holder (a hand or a shuffle buffer)."""

    def __init__(self, cards: Optional[Iterable[Card]] = None) -> None:
        self._cards: List[Card] = list(cards) if cards is not None else []

    @classmethod
    def full(cls) -> Deck:
        """A deck holding the 52 standard cards in ordinal order."""
        deck = cls()
        deck.add_full_deck()
        return deck

    def add_full_deck(self) -> None:
        self._cards.extend(ALL_CARDS)

    def add(self, card: Card) -> None:
        self._cards.append(card)

    def add_all(self, cards: Iterable[Card]) -> None:
        self._cards.extend(cards)

    def get(self, index: int) -> Card:
        return self._cards[index]

    def remove(self, card: Card) -> bool:
        """Remove the first same card (face state ignored). Returns whether one was found."""
        try:
            self._cards.remove(card)
        except ValueError:
            return False
        return True

    def clear(self) -> None:
        self._cards.clear()

    def copy(self) -> Deck:
        return Deck(self._cards)

    def to_list(self) -> List[Card]:
        return list(self._cards)

    def shuffle(self, iterations: int = 1, rng: Optional[RandomSource] = None) -> None:
        """Reorder the deck by a uniform random permutation, `iterations` times."""
        if not self._cards:
            return
        if rng is None:
            rng = make_random_source()
        for _ in range(iterations):
            order = rng.permutation(len(self._cards))
            self._cards = [self._cards[int(i)] for i in order]

    def deal(self, index: int = 0) -> Card:
        """Remove and return the card at `index` (the top of the deck by default)."""
        if not 0 <= index < len(self._cards):
            raise IndexError(f"Cannot deal index {index} from a deck of {len(self._cards)} cards")
        return self._cards.pop(index)

    def search_all(self, item: Card, consider_face_up: bool = False, stop_after: int = 0) -> List[int]:
        """Indices of every card that is the same card as `item`.

        Args:
            item: Card to look for (matched by rank and suit)
            consider_face_up: Also require the face-up state to match
            stop_after: Maximum number of indices to return (<= 0 means all)
        """
        indexes: List[int] = []
        for i, card in enumerate(self._cards):
            if card != item:
                continue
            if consider_face_up and card.face_up != item.face_up:
                continue
            indexes.append(i)
            if 0 < stop_after <= len(indexes):
                break
        return indexes

    def search(self, item: Card, consider_face_up: bool = False) -> int:
        """Index of the first matching card, or -1."""
        found = self.search_all(item, consider_face_up, 1)
        return found[0] if found else -1

    def sort(self) -> None:
        """Sort by rank, then suit (ordinal order)."""
        self._cards.sort()

    def sort_by_rank(self) -> None:
        """Sort by rank only (2, 3, ..., K, A); equal ranks keep their order."""
        self._cards.sort(key=_rank_sort_num)

    def sort_by_suit(self) -> None:
        """Sort by suit (♠, ♥, ♣, ♦), then by rank as in sort_by_rank."""
        self._cards.sort(key=_suit_sort_num)

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self._cards)

    def __contains__(self, card: object) -> bool:
        return card in self._cards

    def __getitem__(self, index: int) -> Card:
        return self._cards[index]

    def __repr__(self) -> str:
        return "Deck(" + " ".join(card.code for card in self._cards) + ")"

    def __str__(self) -> str:
        return "{" + ", ".join(str(card) for card in self._cards) + "}"


__all__ = ["Deck", "RandomSource", "make_random_source"]
