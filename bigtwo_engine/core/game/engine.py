"""Big Two turn engine.

Runs the game loop: deals, asks each seat for a play in turn, applies pass
and play transitions, and notifies listeners after every change. Agents
receive a GameSnapshot; only the engine mutates GameState.
"""

from __future__ import annotations

import logging
import threading
import time
from typing import TYPE_CHECKING, Any, Callable, Dict, List, Optional, Sequence, Union

from ...config import EngineConfig
from ..cards import THREE_OF_DIAMONDS
from ..deck import Deck, RandomSource, make_random_source
from .combination import PASS, Combination
from .errors import EngineInvariantError, GameOverError, InvalidCombination
from .rules import check_play
from .state import GameSnapshot, GameState

if TYPE_CHECKING:
    from ...agents.base_agent import BaseAgent

logger = logging.getLogger(__name__)

# Seconds between attempts to wake a replaced agent that has not parked yet
REPLACEMENT_POLL = 0.01

Listener = Union[Callable[[GameSnapshot], Any], Any]


class BigTwoGame:
    """Big Two game engine for 2 or more seats (4 in a standard game)."""

    # Instance variable type hints
    agents: List["BaseAgent"]
    state: GameState
    config: EngineConfig

    def __init__(
        self,
        players: Sequence["BaseAgent"],
        rng: Optional[RandomSource] = None,
        config: Optional[EngineConfig] = None,
    ) -> None:
        self.config = config if config is not None else EngineConfig()
        self.rng = rng if rng is not None else make_random_source(self.config.seed)
        self.agents = list(players)
        for index, agent in enumerate(self.agents):
            agent.index = index
        self.state = GameState([agent.name for agent in self.agents])
        self._listeners: List[Listener] = []
        # Guards seat assignment against set_player calls from other threads
        self._seats = threading.Condition()
        self._replacements: Dict[int, "BaseAgent"] = {}
        self._turn_agent: Optional["BaseAgent"] = None
        self._turn_seat = -1
        self._running = False
        self.new_game()

    @property
    def num_players(self) -> int:
        return len(self.agents)

    def snapshot(self) -> GameSnapshot:
        return self.state.snapshot()

    def is_game_over(self) -> bool:
        return self.state.is_game_over()

    # ------------------------------------------------------------
    # Setup
    # ------------------------------------------------------------

    def new_game(self) -> None:
        """Shuffle, deal and hand the lead to the holder of the three of diamonds."""
        state = self.state
        for hand in state.hands:
            hand.clear()

        deck = Deck.full()
        deck.shuffle(rng=self.rng)
        seat = 0
        while len(deck) > 0:
            state.hands[seat].add(deck.deal())
            seat = (seat + 1) % self.num_players
        for hand in state.hands:
            hand.sort()

        state.reset_passed()
        state.previous_play = PASS
        state.forced_card = None
        state.consecutive_passes = 0
        state.last_player_played = 0
        state.reset_win_order()

        for agent in self.agents:
            agent.reset()

        starter = state.find_card(THREE_OF_DIAMONDS)
        state.set_player(starter if starter != -1 else 0)
        logger.info("New game: %s to lead", state.players[state.current_player])
        self.notify()

    def set_player(self, index: int, agent: "BaseAgent") -> None:
        """Replace the agent at seat `index`.

        While the game runs on its own thread the replacement is queued and
        installed by that thread. If the seat being replaced is in the middle
        of its turn, the old agent is woken and its answer discarded, and the
        replacement decides the turn instead. Returns once the old agent has
        been released.
        """
        if not 0 <= index < self.num_players:
            raise IndexError(f"Seat {index} out of range for {self.num_players} players")
        with self._seats:
            self._replacements[index] = agent
            in_turn = self._turn_agent if self._turn_seat == index else None
            installed = in_turn is None and not self._running and self._install_replacements()
        if installed:
            self.notify()
        if in_turn is None:
            return

        logger.info("Seat %d replaced mid-turn; waking %s", index, in_turn.name)
        with self._seats:
            # The old agent may not be parked yet; keep trying until it is or its turn ends
            while self._turn_agent is in_turn and not in_turn.resolve(PASS):
                self._seats.wait(REPLACEMENT_POLL)

    def _install_replacements(self) -> bool:
        """Seat queued replacements. Caller holds ``self._seats``."""
        if not self._replacements:
            return False
        for index, agent in self._replacements.items():
            agent.index = index
            self.agents[index] = agent
            self.state.players[index] = agent.name
            logger.info("Seat %d is now %s", index, agent.name)
        self._replacements.clear()
        return True

    def record_winner(self, index: int) -> None:
        """Append seat `index` to the finishing order."""
        self.state.add_winner(index)
        self.notify()

    # ------------------------------------------------------------
    # Listeners
    # ------------------------------------------------------------

    def add_listener(self, listener: Listener) -> None:
        """Register `listener` and immediately send it the current state."""
        self._listeners.append(listener)
        self._deliver(listener, self.snapshot())

    def remove_listener(self, listener: Listener) -> bool:
        try:
            self._listeners.remove(listener)
        except ValueError:
            return False
        return True

    def notify(self) -> None:
        snapshot = self.snapshot()
        for listener in list(self._listeners):
            self._deliver(listener, snapshot)

    @staticmethod
    def _deliver(listener: Listener, snapshot: GameSnapshot) -> None:
        if hasattr(listener, "game_state_changed"):
            listener.game_state_changed(snapshot)
        else:
            listener(snapshot)

    # ------------------------------------------------------------
    # Game loop
    # ------------------------------------------------------------

    def step(self) -> Combination:
        """Play one turn and return the play made (PASS included)."""
        state = self.state
        if state.is_game_over():
            raise GameOverError("Game already over")

        with self._seats:
            replaced = self._install_replacements()
        if replaced:
            self.notify()

        seat = state.current_player
        if state.is_done(seat) or state.passed[seat]:
            # Finished or already passed this round: pass without asking
            state.forced_card = None
            play = PASS
        else:
            state.forced_card = THREE_OF_DIAMONDS if THREE_OF_DIAMONDS in state.hands[seat] else None
            self.notify()
            play = self._ask(seat)
            self._verify(seat, play)
            for card in play.cards:
                state.hands[seat].remove(card)

        if play.is_pass:
            self._apply_pass(seat)
        else:
            self._apply_play(seat, play)
        self.notify()
        return play

    def _ask(self, seat: int) -> Any:
        """Get the seat's decision, asking again if the seat is replaced mid-turn."""
        while True:
            with self._seats:
                replaced = self._install_replacements()
                agent = self.agents[seat]
                self._turn_agent, self._turn_seat = agent, seat
            if replaced:
                self.notify()
            if agent.is_automated:
                self._pause()
            try:
                play = agent.do_turn(self.snapshot())
            finally:
                with self._seats:
                    self._turn_agent, self._turn_seat = None, -1
                    self._seats.notify_all()

            with self._seats:
                replaced = seat in self._replacements
            if not replaced:
                return play
            logger.info("Discarding %s from replaced %s", play, agent.name)

    def _verify(self, seat: int, play: Any) -> None:
        state = self.state
        name = state.players[seat]
        if not isinstance(play, Combination):
            raise EngineInvariantError(f"{name} returned {play!r} instead of a Combination")
        try:
            check_play(play, state.previous_play, state.forced_card)
        except InvalidCombination as e:
            raise EngineInvariantError(f"{name} made an illegal play {play}: {e.reason}") from e
        missing = [c for c in play.cards if c not in state.hands[seat]]
        if missing:
            raise EngineInvariantError(f"{name} played cards not in hand: " + ", ".join(c.code for c in missing))

    def _apply_pass(self, seat: int) -> None:
        state = self.state
        state.consecutive_passes += 1
        state.mark_passed(seat)
        logger.debug("%s passes (%d in a row)", state.players[seat], state.consecutive_passes)

        if state.consecutive_passes == self.num_players - 1:
            self.notify()
            self._pause()
            state.previous_play = PASS
            state.consecutive_passes = 0
            state.set_player(state.last_player_played)
            state.reset_passed()
            logger.debug("Round over, %s leads", state.players[state.current_player])
        else:
            state.advance_player()

    def _apply_play(self, seat: int, play: Combination) -> None:
        state = self.state
        state.consecutive_passes = 0
        state.previous_play = play
        logger.info("%s plays %s", state.players[seat], play)

        if state.is_done(seat):
            # Finishing a hand gives the next seat a free lead
            logger.info("%s has no cards left", state.players[seat])
            self.notify()
            self._pause()
            state.advance_player()
            state.previous_play = PASS
            state.reset_passed()
        else:
            state.last_player_played = seat
            state.advance_player()

    def _pause(self) -> None:
        if self.config.cpu_delay > 0:
            time.sleep(self.config.cpu_delay)

    def run(self) -> GameSnapshot:
        """Play until at most one seat holds cards. Blocks while agents deliberate."""
        with self._seats:
            self._running = True
        try:
            while not self.state.is_game_over():
                self.step()
        finally:
            with self._seats:
                self._running = False
                self._install_replacements()
        logger.info("Game over")
        self.notify()
        return self.snapshot()

    def start(self) -> threading.Thread:
        """Run the game on a daemon thread and return the thread."""
        thread = threading.Thread(target=self.run, name="bigtwo-game", daemon=True)
        thread.start()
        return thread


def create_single_player_game(
    name: str = "Player",
    rng: Optional[RandomSource] = None,
    config: Optional[EngineConfig] = None,
) -> BigTwoGame:
    """One human seat plus three CPU agents."""
    from ...agents.cpu_agent import CPUAgent
    from ...agents.human_agent import HumanAgent

    config = config if config is not None else EngineConfig()
    players = [HumanAgent(name, decision_timeout=config.decision_timeout)]
    players += [CPUAgent(f"CPU {i}") for i in range(1, 4)]
    return BigTwoGame(players, rng=rng, config=config)
