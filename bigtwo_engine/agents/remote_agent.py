"""Relay for a player on the other end of a network connection."""

import logging
from typing import Any, Callable, Dict, Optional

from ..core.card_utils import strings_to_cards
from ..core.game.combination import Combination, classify
from ..core.game.state import GameSnapshot
from .human_agent import HumanAgent

logger = logging.getLogger(__name__)

TurnRequest = Dict[str, Any]


class RemoteAgent(HumanAgent):
    """Forwards each turn through `send` and waits for the transport to answer.

    The transport is anything that can deliver a plain-data turn request to
    the remote player and later call ``receive_input`` with the answer: None
    for a pass, a list of card codes such as ``["3D", "3S"]``, a selection
    bitmap over the requested hand, or a Combination.
    """

    def __init__(
        self,
        name: str,
        send: Callable[[TurnRequest], None],
        decision_timeout: Optional[float] = None,
    ):
        super().__init__(name, decision_timeout)
        self.send = send

    def turn_request(self, snapshot: GameSnapshot) -> TurnRequest:
        previous = snapshot.previous_play
        return {
            "type": "turn",
            "seat": self.index,
            "previous_play": {
                "type": previous.type_name,
                "cards": list(previous.codes()),
                "value": previous.value,
            },
            "forced_card": snapshot.forced_card.code if snapshot.forced_card is not None else None,
            "hand": [c.code for c in snapshot.current_hand],
        }

    def do_turn(self, snapshot: GameSnapshot) -> Combination:
        request = self.turn_request(snapshot)
        # Open the turn first so an answer arriving during send() is not dropped
        self._open_turn(snapshot)
        logger.debug("Sending turn request to %s: %s", self.name, request)
        try:
            self.send(request)
        except Exception:
            logger.warning("Turn request to %s could not be sent", self.name)
            self._close_turn()
            raise
        return self._await_turn(snapshot)

    def receive_input(self, selection: Any) -> bool:
        if _is_code_list(selection):
            selection = classify(strings_to_cards(selection))
        return super().receive_input(selection)

    def reset(self) -> None:
        pass


def _is_code_list(selection: Any) -> bool:
    return isinstance(selection, (list, tuple)) and len(selection) > 0 and all(isinstance(s, str) for s in selection)
