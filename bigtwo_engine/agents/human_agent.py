"""Human agent: waits for a decision delivered from an input thread."""

import logging
import threading
from typing import Any, Optional, Sequence, Tuple

from ..core.cards import Card
from ..core.game.combination import PASS, Combination
from ..core.game.errors import InvalidCombination
from ..core.game.rules import check_play, combination_from_selection
from ..core.game.state import GameSnapshot
from ..core.rendezvous import Rendezvous
from .base_agent import BaseAgent
from .cpu_agent import choose_play

logger = logging.getLogger(__name__)


class HumanAgent(BaseAgent):
    """Interactive agent for a local player.

    ``do_turn`` runs on the engine thread and parks until ``receive_input``
    (called from the UI or console thread) hands over a legal move. Illegal
    input raises InvalidCombination and leaves the turn open so the player
    can try again.
    """

    def __init__(self, name: str = "Player", decision_timeout: Optional[float] = None):
        """Initialize human agent.

        Args:
            name: Agent name for identification
            decision_timeout: Seconds to wait before the CPU policy plays
                for this seat (None waits forever)
        """
        super().__init__(name)
        self.decision_timeout = decision_timeout
        self._rendezvous: Rendezvous[Combination] = Rendezvous()
        self._input_lock = threading.Lock()
        self._snapshot: Optional[GameSnapshot] = None
        self._hand: Tuple[Card, ...] = ()

    @property
    def is_waiting(self) -> bool:
        return self._rendezvous.pending

    @property
    def hand(self) -> Tuple[Card, ...]:
        """The hand as it was when the pending turn began; selections index into it."""
        return self._hand

    @property
    def snapshot(self) -> Optional[GameSnapshot]:
        return self._snapshot

    def do_turn(self, snapshot: GameSnapshot) -> Combination:
        """Wait for the player's decision (or time out into the CPU policy)."""
        self._open_turn(snapshot)
        return self._await_turn(snapshot)

    def _open_turn(self, snapshot: GameSnapshot) -> None:
        with self._input_lock:
            self._snapshot = snapshot
            self._hand = tuple(snapshot.current_hand)
            self._rendezvous.open()

    def _await_turn(self, snapshot: GameSnapshot) -> Combination:
        play = self._rendezvous.receive(self.decision_timeout)
        self._clear_turn()

        if play is None:
            logger.info("%s did not decide within %ss; playing automatically", self.name, self.decision_timeout)
            play = choose_play(snapshot.current_hand, snapshot.previous_play, snapshot.forced_card)
        return play

    def _close_turn(self) -> None:
        """Abandon a turn opened by ``_open_turn`` that will never be awaited."""
        with self._input_lock:
            self._rendezvous.close()
            self._snapshot = None
            self._hand = ()

    def _clear_turn(self) -> None:
        with self._input_lock:
            self._snapshot = None
            self._hand = ()

    def receive_input(self, selection: Any) -> bool:
        """Submit the pending decision.

        Args:
            selection: None to pass, a boolean sequence selecting cards from
                ``hand``, or a Combination

        Returns:
            True when the decision was delivered, False when no turn is pending

        Raises:
            InvalidCombination: the move is not legal; the turn stays open
        """
        with self._input_lock:
            if self._snapshot is None or not self._rendezvous.pending:
                logger.info("%s: input received while no turn is pending, ignoring", self.name)
                return False
            play = self._validate(selection, self._snapshot)
            self._rendezvous.send(play)
        logger.debug("%s submitted %s", self.name, "Pass" if play.is_pass else play)
        return True

    def resolve(self, play: Combination) -> bool:
        """Complete the pending turn with `play`, skipping validation."""
        with self._input_lock:
            if not self._rendezvous.pending:
                logger.info("%s: nothing to resolve", self.name)
                return False
            self._rendezvous.send(play)
        return True

    def _validate(self, selection: Any, snapshot: GameSnapshot) -> Combination:
        try:
            if selection is None:
                check_play(PASS, snapshot.previous_play, snapshot.forced_card)
                return PASS
            if isinstance(selection, Combination):
                self._check_in_hand(selection.cards)
                check_play(selection, snapshot.previous_play, snapshot.forced_card)
                return selection
            return combination_from_selection(self._hand, selection, snapshot.previous_play, snapshot.forced_card)
        except InvalidCombination as e:
            logger.info("%s: rejected input (%s)", self.name, e.reason)
            raise

    def _check_in_hand(self, cards: Sequence[Card]) -> None:
        missing = [c for c in cards if c not in self._hand]
        if missing:
            raise InvalidCombination("You do not hold " + ", ".join(str(c) for c in missing) + ".")

    def reset(self) -> None:
        """Reset agent state for new game."""
        pass  # Nothing to reset for human agent


def create_human_agent(name: str = "Player", decision_timeout: Optional[float] = None) -> HumanAgent:
    """Create a human agent."""
    return HumanAgent(name, decision_timeout)
