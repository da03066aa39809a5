"""Card encoding/decoding utilities for human-readable format and 52-card numpy masks."""

from typing import Iterable, List, Optional, Sequence

import numpy as np

from .cards import ALL_CARDS, Card, string_to_card


def hand_to_strings(hand: Iterable[Card]) -> List[str]:
    """Convert cards to readable codes, sorted by ordinal."""
    return [card.code for card in sorted(hand)]


def strings_to_cards(card_strings: Iterable[str]) -> List[Card]:
    """Convert list of card strings to cards."""
    return [Card.from_ordinal(string_to_card(card_str)) for card_str in card_strings]


def format_hand(hand: Iterable[Card]) -> str:
    """Format hand for display."""
    return " ".join(hand_to_strings(hand))


def parse_move_input(input_str: str, hand: Sequence[Card]) -> Optional[np.ndarray]:
    """Parse user input like '3D 3S' into a selection bitmap aligned with `hand`.

    Returns None for a pass (empty input or 'pass').
    """
    if not input_str.strip() or input_str.strip().lower() == "pass":
        return None

    selection = np.zeros(len(hand), dtype=bool)
    try:
        cards = strings_to_cards(input_str.split())
    except ValueError as e:
        raise ValueError(f"Invalid input: {e}") from e
    for card in cards:
        try:
            position = list(hand).index(card)
        except ValueError:
            raise ValueError(f"Invalid input: card {card.code} not in hand") from None
        selection[position] = True
    return selection


# Numpy array conversion functions


def cards_to_mask(cards: Iterable[Card]) -> np.ndarray:
    """Convert cards to a numpy boolean array (shape 52) indexed by ordinal."""
    mask = np.zeros(52, dtype=bool)
    ordinals = [card.ordinal for card in cards]
    mask[ordinals] = True
    return mask


def mask_to_cards(mask: np.ndarray) -> List[Card]:
    """Convert a 52-card boolean array back to cards in ordinal order."""
    mask = np.asarray(mask, dtype=bool)
    if mask.shape != (52,):
        raise ValueError(f"Card mask must have shape (52,), got {mask.shape}")
    return [ALL_CARDS[int(i)] for i in np.flatnonzero(mask)]


def format_mask(mask: np.ndarray) -> str:
    """Format numpy card mask for display."""
    return format_hand(mask_to_cards(mask))
