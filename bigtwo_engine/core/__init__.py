"""Core Big Two game components."""

from .deck import Deck, RandomSource, make_random_source
from .rendezvous import Rendezvous

__all__ = [
    "Deck",
    "RandomSource",
    "make_random_source",
    "Rendezvous",
]
