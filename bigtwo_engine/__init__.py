"""Big Two Rules Engine

A rules engine for the card game Big Two (Deuces): card and combination
model, a greedy combination search for computer players, and a threaded
turn engine that human, CPU and networked seats plug into.

Main components:
- bigtwo_engine.core: Cards, decks, combinations, rules and the turn engine
- bigtwo_engine.agents: CPU, human and remote agent implementations
- bigtwo_engine.config: Environment-variable driven settings
"""

__version__ = "0.1.0"

from .config import EngineConfig
from .core.cards import THREE_OF_DIAMONDS, Card, Rank, Suit
from .core.deck import Deck, make_random_source
from .core.game import (
    PASS,
    BigTwoGame,
    Combination,
    CombinationKind,
    Decomposition,
    EngineInvariantError,
    GameOverError,
    GameSnapshot,
    GameState,
    InvalidCombination,
    PokerHandType,
    check_play,
    classify,
    create_single_player_game,
    decompose,
)
from .agents import BaseAgent, CPUAgent, HumanAgent, RemoteAgent
from .log import configure_logging

__all__ = [
    # Cards
    "Card",
    "Rank",
    "Suit",
    "THREE_OF_DIAMONDS",
    "Deck",
    "make_random_source",
    # Combinations and rules
    "Combination",
    "CombinationKind",
    "PokerHandType",
    "PASS",
    "classify",
    "check_play",
    "Decomposition",
    "decompose",
    # Engine
    "BigTwoGame",
    "GameState",
    "GameSnapshot",
    "create_single_player_game",
    # Errors
    "InvalidCombination",
    "EngineInvariantError",
    "GameOverError",
    # Agents
    "BaseAgent",
    "CPUAgent",
    "HumanAgent",
    "RemoteAgent",
    # Configuration
    "EngineConfig",
    "configure_logging",
]
