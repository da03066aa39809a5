"""Unit tests for combination classification and strength values."""

import itertools

import pytest

from bigtwo_engine.core.cards import ALL_CARDS, Card
from bigtwo_engine.core.game.combination import PASS, Combination, classify, is_valid
from bigtwo_engine.core.game.errors import InvalidCombination
from bigtwo_engine.core.game.types import CombinationKind, PokerHandType


def cards(text):
    return [Card.from_code(code) for code in text.split()]


def combo(text):
    return classify(cards(text))


class TestClassification:
    """Which kind a group of cards forms."""

    def test_pass(self):
        assert classify([]) == PASS
        assert PASS.is_pass
        assert Combination.pass_() == PASS
        assert PASS.value == -1
        assert PASS.length == 0

    def test_single(self):
        c = combo("9H")
        assert c.kind is CombinationKind.SINGLE
        assert c.value == Card.from_code("9H").ordinal

    def test_double(self):
        assert combo("5C 5H").kind is CombinationKind.DOUBLE
        with pytest.raises(InvalidCombination, match="same rank"):
            combo("5C 6H")

    def test_triple(self):
        assert combo("KD KC KS").kind is CombinationKind.TRIPLE
        with pytest.raises(InvalidCombination, match="same rank"):
            combo("KD KC AS")

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("3C 4D 5D 6D 7D", PokerHandType.STRAIGHT),
            ("JD QC KH AS 2D", PokerHandType.STRAIGHT),
            ("3H 5H 8H TH KH", PokerHandType.FLUSH),
            ("4D 4C 4S 9H 9S", PokerHandType.FULL_HOUSE),
            ("4D 4C 9D 9H 9S", PokerHandType.FULL_HOUSE),
            ("7D 7C 7H 7S 3D", PokerHandType.FOUR_OF_A_KIND),
            ("3D 7D 7C 7H 7S", PokerHandType.FOUR_OF_A_KIND),
            ("3D 4D 5D 6D 7D", PokerHandType.STRAIGHT_FLUSH),
        ],
    )
    def test_five_card_hands(self, text, expected):
        c = combo(text)
        assert c.kind is CombinationKind.POKER_HAND
        assert c.poker_type is expected, f"{text} classified as {c.poker_type}"

    def test_same_suit_run_is_straight_flush_only(self):
        """A one-suit run is neither a straight nor a flush."""
        c = combo("3D 4D 5D 6D 7D")
        assert c.poker_type is PokerHandType.STRAIGHT_FLUSH
        assert c.type_name == "Straight Flush"

    def test_straights_do_not_wrap(self):
        with pytest.raises(InvalidCombination, match="poker hand"):
            combo("QD KC AH 2S 3D")

    def test_invalid_five(self):
        with pytest.raises(InvalidCombination, match="poker hand"):
            combo("3D 3C 5H 8S 9D")

    @pytest.mark.parametrize("n", [4, 6, 7])
    def test_invalid_sizes(self, n):
        with pytest.raises(InvalidCombination, match=f"{n} cards were selected"):
            classify(ALL_CARDS[:n])

    def test_duplicate_cards_rejected(self):
        with pytest.raises(InvalidCombination):
            classify(cards("5C 5C"))

    def test_is_valid(self):
        assert is_valid(cards("5C 5H"))
        assert not is_valid(cards("5C 6H"))

    def test_cards_are_sorted(self):
        assert combo("5H 5C").codes() == ("5C", "5H")


class TestValues:
    """Exact strength values and the boundaries between kinds."""

    def test_single_values(self):
        assert combo("3D").value == 0
        assert combo("3C").value == 1
        assert combo("2S").value == 51

    def test_double_values(self):
        assert combo("3D 3C").value == 52
        assert combo("3D 3S").value == 54
        assert combo("2H 2S").value == 90

    def test_triple_values(self):
        assert combo("3D 3C 3H").value == 91
        assert combo("2D 2C 2S").value == 103

    def test_straight_values(self):
        assert combo("3C 4D 5D 6D 7D").value == 104
        assert combo("3D 4C 5H 6S 7S").value == 107
        assert combo("JD QC KH AS 2S").value == 139

    def test_flush_values(self):
        assert combo("3D 4D 5D 6D 8D").value == 140
        assert combo("9S JS KS AS 2S").value == 171

    def test_full_house_values(self):
        assert combo("3D 3C 3H 4D 4C").value == 172
        assert combo("3D 3C 4D 4C 4H").value == 173
        assert combo("AD AC 2D 2C 2H").value == 184

    def test_four_of_a_kind_values(self):
        assert combo("3D 3C 3H 3S 4D").value == 185
        assert combo("3D 4D 4C 4H 4S").value == 186
        assert combo("AD 2D 2C 2H 2S").value == 197

    def test_straight_flush_values(self):
        assert combo("3D 4D 5D 6D 7D").value == 198
        assert combo("JS QS KS AS 2S").value == 233

    def test_poker_hand_hierarchy(self):
        """Every sub-kind outranks every hand of the sub-kinds below it."""
        highest_straight = combo("JD QC KH AS 2S")
        lowest_flush = combo("3D 4D 5D 6D 8D")
        highest_flush = combo("9S JS KS AS 2S")
        lowest_full_house = combo("3D 3C 3H 4D 4C")
        highest_full_house = combo("AD AC 2D 2C 2H")
        lowest_quad = combo("3D 3C 3H 3S 4D")
        highest_quad = combo("AD 2D 2C 2H 2S")
        lowest_straight_flush = combo("3D 4D 5D 6D 7D")

        assert lowest_flush.value == highest_straight.value + 1
        assert lowest_full_house.value == highest_flush.value + 1
        assert lowest_quad.value == highest_full_house.value + 1
        assert lowest_straight_flush.value == highest_quad.value + 1

    def test_sum_card_values(self):
        """Sum of card ordinals, independent of the combination value."""
        assert combo("3D 3S").sum_card_values() == 0 + 3
        assert combo("2S").sum_card_values() == 51
        assert combo("3D 4D 5D 6D 7D").sum_card_values() == 0 + 4 + 8 + 12 + 16
        assert PASS.sum_card_values() == 0

    def test_sizes_do_not_overlap(self):
        assert combo("2S").value < combo("3D 3C").value
        assert combo("2H 2S").value < combo("3D 3C 3H").value
        assert combo("2D 2C 2S").value < combo("3C 4D 5D 6D 7D").value


class TestOrdering:
    """Strict total order within a size."""

    def test_all_doubles_strictly_ordered(self):
        """Distinct doubles are never equal, even when their values tie."""
        doubles = [classify(pair) for pair in itertools.combinations(ALL_CARDS, 2) if pair[0].rank == pair[1].rank]
        assert len(doubles) == 78
        for a, b in itertools.combinations(doubles, 2):
            assert (a < b) != (b < a), f"{a} and {b} are not strictly ordered"

    def test_equal_value_tie_break(self):
        low = combo("3D 3S")
        high = combo("3H 3S")
        assert low.value == high.value
        assert low < high
        assert low != high

    def test_sorting(self):
        hands = [combo("9S"), combo("3D"), combo("KH")]
        assert [c.codes() for c in sorted(hands)] == [("3D",), ("9S",), ("KH",)]

    def test_str(self):
        assert str(combo("JS")) == "Single: Jack of Spades"
