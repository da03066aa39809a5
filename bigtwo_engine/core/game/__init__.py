"""Combinations, rules, search and the turn engine."""

from .combination import PASS, Combination, classify, is_valid
from .decomposition import Decomposition, decompose
from .engine import BigTwoGame, create_single_player_game
from .errors import EngineInvariantError, GameOverError, InvalidCombination
from .rules import beats, check_play, combination_from_selection
from .state import GameSnapshot, GameState
from .types import CombinationKind, PokerHandType

__all__ = [
    "Combination",
    "CombinationKind",
    "PokerHandType",
    "PASS",
    "classify",
    "is_valid",
    "check_play",
    "beats",
    "combination_from_selection",
    "Decomposition",
    "decompose",
    "GameState",
    "GameSnapshot",
    "BigTwoGame",
    "create_single_player_game",
    "InvalidCombination",
    "EngineInvariantError",
    "GameOverError",
]
