"""Tests for the interactive agents."""

import threading
import time

import numpy as np
import pytest

from bigtwo_engine.agents.human_agent import HumanAgent, create_human_agent
from bigtwo_engine.agents.remote_agent import RemoteAgent
from bigtwo_engine.core.cards import THREE_OF_DIAMONDS, Card
from bigtwo_engine.core.game.combination import PASS, classify
from bigtwo_engine.core.game.errors import InvalidCombination
from bigtwo_engine.core.game.state import GameSnapshot


def cards(text):
    return [Card.from_code(code) for code in text.split()]


def combo(text):
    return classify(cards(text))


def make_snapshot(hand, previous_play=PASS, forced_card=None):
    return GameSnapshot(
        players=("Player", "Other"),
        hands=(tuple(cards(hand)), tuple(cards("2S"))),
        previous_play=previous_play,
        current_player=0,
        forced_card=forced_card,
    )


def wait_until(predicate, timeout=5.0):
    deadline = time.monotonic() + timeout
    while not predicate():
        if time.monotonic() > deadline:
            raise AssertionError("Timed out waiting for condition")
        time.sleep(0.01)


class TurnRunner:
    """Runs agent.do_turn on a background thread, like the engine does."""

    def __init__(self, agent, snapshot):
        self.result = None
        self.thread = threading.Thread(target=self._run, args=(agent, snapshot), daemon=True)
        self.thread.start()
        wait_until(lambda: agent.is_waiting)

    def _run(self, agent, snapshot):
        self.result = agent.do_turn(snapshot)

    def join(self):
        self.thread.join(timeout=5)
        assert not self.thread.is_alive(), "do_turn did not return"
        return self.result


class TestHumanAgent:
    """Input validation and the blocking turn."""

    def setup_method(self):
        self.agent = create_human_agent("Player")

    def test_selection_delivers_play(self):
        runner = TurnRunner(self.agent, make_snapshot("3D 5C 5S KH"))
        assert self.agent.hand == tuple(cards("3D 5C 5S KH"))
        assert self.agent.receive_input(np.array([True, False, False, False]))
        assert runner.join() == combo("3D")
        assert not self.agent.is_waiting

    def test_invalid_input_keeps_turn_open(self):
        """A rejected move can be retried."""
        runner = TurnRunner(self.agent, make_snapshot("3D 5C 5S KH", previous_play=combo("9S")))
        with pytest.raises(InvalidCombination, match="less value"):
            self.agent.receive_input([True, False, False, False])
        with pytest.raises(InvalidCombination, match="same number of cards"):
            self.agent.receive_input([False, True, True, False])
        assert self.agent.is_waiting
        assert self.agent.receive_input([False, False, False, True])
        assert runner.join() == combo("KH")

    def test_pass(self):
        runner = TurnRunner(self.agent, make_snapshot("3D 5C", previous_play=combo("9S")))
        assert self.agent.receive_input(None)
        assert runner.join() == PASS

    def test_pass_rejected_when_leading(self):
        runner = TurnRunner(self.agent, make_snapshot("3D 5C"))
        with pytest.raises(InvalidCombination, match="new trick"):
            self.agent.receive_input(None)
        self.agent.receive_input(combo("5C"))
        assert runner.join() == combo("5C")

    def test_forced_card(self):
        runner = TurnRunner(self.agent, make_snapshot("3D 5C", forced_card=THREE_OF_DIAMONDS))
        with pytest.raises(InvalidCombination, match="3 of Diamonds"):
            self.agent.receive_input(combo("5C"))
        self.agent.receive_input(combo("3D"))
        assert runner.join() == combo("3D")

    def test_combination_must_be_in_hand(self):
        runner = TurnRunner(self.agent, make_snapshot("3D 5C"))
        with pytest.raises(InvalidCombination, match="do not hold"):
            self.agent.receive_input(combo("2S"))
        self.agent.receive_input(combo("3D"))
        runner.join()

    def test_input_without_pending_turn_ignored(self):
        assert self.agent.receive_input(None) is False
        assert self.agent.resolve(PASS) is False

    def test_resolve_skips_validation(self):
        runner = TurnRunner(self.agent, make_snapshot("3D 5C"))
        assert self.agent.resolve(combo("5C"))
        assert runner.join() == combo("5C")

    def test_timeout_falls_back_to_cpu_policy(self):
        agent = HumanAgent("Slow", decision_timeout=0.05)
        play = agent.do_turn(make_snapshot("3D 9S", forced_card=THREE_OF_DIAMONDS))
        assert play == combo("3D")
        assert not agent.is_waiting


class TestRemoteAgent:
    """Relay through an injected send callable."""

    def test_request_then_answer_by_codes(self):
        sent = []

        def send(request):
            sent.append(request)
            # Transport answers straight away
            agent.receive_input(["5C", "5S"])

        agent = RemoteAgent("Remote", send)
        agent.index = 2
        play = agent.do_turn(make_snapshot("3D 5C 5S", previous_play=combo("4D 4C")))

        assert play == combo("5C 5S")
        assert len(sent) == 1
        request = sent[0]
        assert request["type"] == "turn"
        assert request["seat"] == 2
        assert request["hand"] == ["3D", "5C", "5S"]
        assert request["previous_play"]["cards"] == ["4D", "4C"]
        assert request["forced_card"] is None

    def test_answer_from_other_thread(self):
        requests = []
        agent = RemoteAgent("Remote", requests.append)
        runner = TurnRunner(agent, make_snapshot("3D 5C", forced_card=THREE_OF_DIAMONDS))
        wait_until(lambda: len(requests) == 1)
        assert requests[0]["forced_card"] == "3D"
        with pytest.raises(InvalidCombination):
            agent.receive_input(["5C"])
        agent.receive_input(["3D"])
        assert runner.join() == combo("3D")

    def test_failed_send_leaves_agent_usable(self):
        attempts = []

        def send(request):
            attempts.append(request)
            if len(attempts) == 1:
                raise ConnectionError("connection reset")
            agent.receive_input(["3D"])

        agent = RemoteAgent("Remote", send)
        snapshot = make_snapshot("3D 5C", forced_card=THREE_OF_DIAMONDS)

        with pytest.raises(ConnectionError):
            agent.do_turn(snapshot)
        assert not agent.is_waiting, "Failed send should not leave a turn open"
        assert agent.snapshot is None
        assert agent.receive_input(["3D"]) is False

        assert agent.do_turn(snapshot) == combo("3D")
        assert len(attempts) == 2
