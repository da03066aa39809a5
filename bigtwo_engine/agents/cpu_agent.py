"""Automated agent that sheds its cheapest combinations."""

import logging
from typing import Iterable, Optional

from ..core.cards import Card
from ..core.game.combination import PASS, Combination, classify
from ..core.game.decomposition import Decomposition, decompose
from .base_agent import BaseAgent

logger = logging.getLogger(__name__)


def choose_play(hand: Iterable[Card], previous_play: Combination, forced_card: Optional[Card] = None) -> Combination:
    """Pick a play for `hand` following `previous_play`.

    When leading, the largest kind available is played (poker hand, then
    triple, double, single), always its weakest entry. When following, the
    weakest same-size combination with a strictly higher value is played,
    otherwise PASS.

    Args:
        hand: Cards held by the agent
        previous_play: Combination on the table (PASS when leading)
        forced_card: Card every candidate must contain, if any
    """
    cards = list(hand)
    if not cards:
        return PASS

    found: Decomposition = decompose(cards, commit=True)
    if forced_card is not None:
        found = found.containing(forced_card)

    if previous_play.is_pass:
        for options in (found.poker_hands, found.triples, found.doubles, found.singles):
            if options:
                return options[0]
        return classify([min(cards)])

    for option in found.by_length(previous_play.length):
        if option.value > previous_play.value:
            return option
    return PASS


class CPUAgent(BaseAgent):
    """Computer player. Stateless: the hand is decomposed again every turn."""

    is_automated = True

    def __init__(self, name: str = "CPU"):
        """Initialize CPU agent.

        Args:
            name: Agent name for identification
        """
        super().__init__(name)

    def do_turn(self, snapshot) -> Combination:
        play = choose_play(snapshot.current_hand, snapshot.previous_play, snapshot.forced_card)
        logger.debug("%s chose %s", self.name, "Pass" if play.is_pass else play)
        return play

    def reset(self) -> None:
        """Reset agent state.

        CPU agent has no internal state to reset.
        """
        pass


# Convenience function
def create_cpu_agent(name: str = "CPU") -> CPUAgent:
    """Create a standard CPU agent."""
    return CPUAgent(name)
