"""Move legality checks applied where an agent submits its decision."""

from typing import List, Optional, Sequence

import numpy as np

from ..cards import Card
from .combination import Combination, classify
from .errors import InvalidCombination


def check_play(combination: Combination, previous_play: Combination, forced_card: Optional[Card] = None) -> None:
    """Check that `combination` may follow `previous_play`.

    A pass is legal whenever there is something to pass on. Otherwise the
    play must match the previous play's size (unless leading), contain the
    forced card if one is set, and be worth at least as much as the
    previous play.

    Raises:
        InvalidCombination: with a human-readable reason
    """
    leading = previous_play.is_pass

    if combination.is_pass:
        if leading:
            raise InvalidCombination("You cannot pass on a new trick.")
        return

    if not leading and combination.length != previous_play.length:
        raise InvalidCombination("You must play the same number of cards as the cards on the table.")

    if forced_card is not None and not combination.contains(forced_card):
        raise InvalidCombination(f"You must have a {forced_card} in your combination.")

    if combination.value < previous_play.value:
        raise InvalidCombination("The cards selected are of less value than the previously played cards.")


def beats(combination: Combination, previous_play: Combination) -> bool:
    """Whether `combination` strictly outranks `previous_play` (same size, higher value)."""
    if combination.is_pass:
        return False
    if previous_play.is_pass:
        return True
    return combination.length == previous_play.length and combination.value > previous_play.value


def selection_to_cards(hand: Sequence[Card], selection: Sequence[bool]) -> List[Card]:
    """Pick the cards flagged in a selection bitmap aligned with `hand`."""
    flags = np.asarray(selection, dtype=bool)
    if flags.shape != (len(hand),):
        raise ValueError(f"Selection of length {flags.size} does not match a hand of {len(hand)} cards")
    if not flags.any():
        raise InvalidCombination("No cards were selected.")
    return [hand[int(i)] for i in np.flatnonzero(flags)]


def combination_from_selection(
    hand: Sequence[Card],
    selection: Sequence[bool],
    previous_play: Combination,
    forced_card: Optional[Card] = None,
) -> Combination:
    """Turn a selection bitmap into a combination that may follow `previous_play`."""
    cards = selection_to_cards(hand, selection)
    if not previous_play.is_pass and len(cards) != previous_play.length:
        raise InvalidCombination("You must play the same number of cards as the cards on the table.")
    if forced_card is not None and forced_card not in cards:
        raise InvalidCombination(f"You must have a {forced_card} in your combination.")
    combination = classify(cards)
    check_play(combination, previous_play, forced_card)
    return combination
