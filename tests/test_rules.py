"""Unit tests for move legality at the agent boundary."""

import numpy as np
import pytest

from bigtwo_engine.core.cards import THREE_OF_DIAMONDS, Card
from bigtwo_engine.core.game.combination import PASS, classify
from bigtwo_engine.core.game.errors import InvalidCombination
from bigtwo_engine.core.game.rules import beats, check_play, combination_from_selection, selection_to_cards


def cards(text):
    return [Card.from_code(code) for code in text.split()]


def combo(text):
    return classify(cards(text))


class TestCheckPlay:
    """check_play accepts and rejects moves against the previous play."""

    def test_pass_allowed_when_following(self):
        check_play(PASS, combo("3D"))

    def test_pass_rejected_when_leading(self):
        with pytest.raises(InvalidCombination, match="cannot pass on a new trick"):
            check_play(PASS, PASS)

    def test_higher_single_accepted(self):
        check_play(combo("4D"), combo("3D"))

    def test_same_rank_higher_suit_accepted(self):
        """3♣ (value 1) may follow 3♦ (value 0)."""
        check_play(combo("3C"), combo("3D"))

    def test_lower_value_rejected(self):
        with pytest.raises(InvalidCombination, match="less value"):
            check_play(combo("3D"), combo("3C"))

    def test_equal_value_accepted(self):
        """Values are compared with <, so a tie is not rejected."""
        check_play(combo("3H 3S"), combo("3D 3S"))

    def test_size_mismatch_rejected(self):
        with pytest.raises(InvalidCombination, match="same number of cards"):
            check_play(combo("5D 5C"), combo("9S"))

    def test_any_size_when_leading(self):
        for text in ["9S", "5D 5C", "KD KC KH", "3C 4D 5D 6D 7D"]:
            check_play(combo(text), PASS)

    def test_forced_card_required(self):
        with pytest.raises(InvalidCombination, match="3 of Diamonds"):
            check_play(combo("4D"), PASS, THREE_OF_DIAMONDS)
        check_play(combo("3D 3C"), PASS, THREE_OF_DIAMONDS)

    def test_higher_poker_kind_beats_lower(self):
        check_play(combo("3D 4D 5D 6D 8D"), combo("JD QC KH AS 2S"))
        with pytest.raises(InvalidCombination):
            check_play(combo("JD QC KH AS 2S"), combo("3D 4D 5D 6D 8D"))


class TestBeats:
    """Strict beats() helper."""

    def test_strictly_higher(self):
        assert beats(combo("4D"), combo("3D"))
        assert not beats(combo("3D"), combo("4D"))

    def test_tie_does_not_beat(self):
        assert not beats(combo("3H 3S"), combo("3D 3S"))

    def test_leading_and_passing(self):
        assert beats(combo("3D"), PASS)
        assert not beats(PASS, combo("3D"))
        assert not beats(PASS, PASS)

    def test_size_mismatch(self):
        assert not beats(combo("2D 2S"), combo("3D"))


class TestSelection:
    """Selection bitmaps aligned with the hand."""

    def setup_method(self):
        self.hand = cards("3D 4C 4S 9H KD")

    def test_selection_to_cards(self):
        picked = selection_to_cards(self.hand, [False, True, True, False, False])
        assert picked == cards("4C 4S")

    def test_numpy_selection(self):
        selection = np.zeros(5, dtype=bool)
        selection[4] = True
        assert selection_to_cards(self.hand, selection) == cards("KD")

    def test_empty_selection(self):
        with pytest.raises(InvalidCombination, match="No cards were selected"):
            selection_to_cards(self.hand, [False] * 5)

    def test_wrong_length(self):
        with pytest.raises(ValueError):
            selection_to_cards(self.hand, [True, False])

    def test_combination_from_selection(self):
        play = combination_from_selection(self.hand, [False, True, True, False, False], combo("3D 3C"))
        assert play == combo("4C 4S")

    def test_selection_size_mismatch(self):
        with pytest.raises(InvalidCombination, match="same number of cards"):
            combination_from_selection(self.hand, [False, False, False, True, False], combo("3D 3C"))

    def test_selection_missing_forced_card(self):
        with pytest.raises(InvalidCombination, match="3 of Diamonds"):
            combination_from_selection(self.hand, [False, False, False, True, False], PASS, THREE_OF_DIAMONDS)

    def test_selection_not_a_combination(self):
        with pytest.raises(InvalidCombination, match="same rank"):
            combination_from_selection(self.hand, [True, True, False, False, False], PASS)
