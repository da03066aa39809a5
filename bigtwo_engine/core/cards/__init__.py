"""Core Big Two card system."""

from .cards import (
    ALL_CARDS,
    RANKS,
    SUITS,
    THREE_OF_DIAMONDS,
    Card,
    Rank,
    Suit,
    card_to_string,
    encode,
    rank_of,
    string_to_card,
    suit_of,
)

__all__ = [
    # Types
    "Card",
    "Rank",
    "Suit",
    # Constants
    "RANKS",
    "SUITS",
    "ALL_CARDS",
    "THREE_OF_DIAMONDS",
    # Functions
    "encode",
    "rank_of",
    "suit_of",
    "card_to_string",
    "string_to_card",
]
