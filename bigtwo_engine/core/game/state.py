"""Mutable game state owned by the engine, and the frozen snapshot handed out."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence, Tuple

import numpy as np

from ..card_utils import cards_to_mask
from ..cards import Card
from ..deck import Deck
from .combination import PASS, Combination


class GameState:
    """Seats, hands and trick bookkeeping for one game.

    Only the engine mutates this object. Agents and observers see a
    GameSnapshot built from it.
    """

    # Instance variable type hints
    players: List[str]
    hands: List[Deck]
    previous_play: Combination
    current_player: int
    passed: List[bool]
    last_player_played: int
    forced_card: Optional[Card]
    win_order: List[int]
    consecutive_passes: int

    def __init__(self, players: Sequence[str]):
        if len(players) < 2:
            raise ValueError(f"Big Two needs at least 2 players, got {len(players)}")
        self.players = list(players)
        self.hands = [Deck() for _ in self.players]
        self.previous_play = PASS
        self.current_player = 0
        self.passed = [False] * self.num_players
        self.last_player_played = 0
        self.forced_card = None
        self.win_order = [-1] * self.num_players
        self.consecutive_passes = 0

    @property
    def num_players(self) -> int:
        return len(self.players)

    @property
    def current_hand(self) -> Deck:
        return self.hands[self.current_player]

    def set_player(self, index: int) -> None:
        if not 0 <= index < self.num_players:
            raise IndexError(f"Seat {index} out of range for {self.num_players} players")
        self.current_player = index

    def advance_player(self) -> int:
        self.current_player = (self.current_player + 1) % self.num_players
        return self.current_player

    def mark_passed(self, index: int) -> None:
        self.passed[index] = True

    def reset_passed(self) -> None:
        self.passed = [False] * self.num_players

    def reset_win_order(self) -> None:
        self.win_order = [-1] * self.num_players

    def add_winner(self, index: int) -> None:
        """Write `index` into the first unfilled win-order slot."""
        if index in self.win_order:
            return
        for place, seat in enumerate(self.win_order):
            if seat == -1:
                self.win_order[place] = index
                return
        raise ValueError("Win order is already complete")

    def find_card(self, card: Card) -> int:
        """Seat holding `card`, or -1 when nobody does."""
        for seat, hand in enumerate(self.hands):
            if card in hand:
                return seat
        return -1

    def is_done(self, index: int) -> bool:
        return len(self.hands[index]) == 0

    def is_game_over(self) -> bool:
        """At most one seat still holds cards."""
        return sum(1 for hand in self.hands if len(hand) > 0) <= 1

    def snapshot(self) -> GameSnapshot:
        return GameSnapshot(
            players=tuple(self.players),
            hands=tuple(tuple(hand) for hand in self.hands),
            previous_play=self.previous_play,
            current_player=self.current_player,
            passed=tuple(self.passed),
            last_player_played=self.last_player_played,
            forced_card=self.forced_card,
            win_order=tuple(self.win_order),
            consecutive_passes=self.consecutive_passes,
            game_over=self.is_game_over(),
        )


@dataclass(frozen=True)
class GameSnapshot:
    """Read-only copy of the game state at one moment."""

    players: Tuple[str, ...]
    hands: Tuple[Tuple[Card, ...], ...]
    previous_play: Combination = PASS
    current_player: int = 0
    passed: Tuple[bool, ...] = field(default_factory=tuple)
    last_player_played: int = 0
    forced_card: Optional[Card] = None
    win_order: Tuple[int, ...] = field(default_factory=tuple)
    consecutive_passes: int = 0
    game_over: bool = False

    @property
    def num_players(self) -> int:
        return len(self.players)

    @property
    def current_hand(self) -> Tuple[Card, ...]:
        return self.hands[self.current_player]

    @property
    def hand_sizes(self) -> Tuple[int, ...]:
        return tuple(len(hand) for hand in self.hands)

    def is_game_over(self) -> bool:
        return self.game_over

    def hand_mask(self, seat: int) -> np.ndarray:
        """52-length boolean mask of the cards held at `seat`."""
        return cards_to_mask(self.hands[seat])

    def to_dict(self) -> Dict[str, Any]:
        """Plain-data view for transports and logs."""
        return {
            "players": list(self.players),
            "hands": [[c.code for c in hand] for hand in self.hands],
            "previous_play": {
                "type": self.previous_play.type_name,
                "cards": list(self.previous_play.codes()),
                "value": self.previous_play.value,
            },
            "current_player": self.current_player,
            "passed": list(self.passed),
            "last_player_played": self.last_player_played,
            "forced_card": self.forced_card.code if self.forced_card is not None else None,
            "win_order": list(self.win_order),
            "consecutive_passes": self.consecutive_passes,
            "game_over": self.game_over,
        }
