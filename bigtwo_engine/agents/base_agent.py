"""Base agent interface for Big Two agents."""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from ..core.game.combination import Combination
    from ..core.game.state import GameSnapshot


class BaseAgent(ABC):
    """Base class for all Big Two agents.

    The engine calls ``do_turn`` exactly once when it is this agent's turn.
    Interactive agents may block in it until ``receive_input`` supplies the
    decision from another thread.
    """

    # Automated agents decide without outside input; the engine paces them
    is_automated = False

    def __init__(self, name: str):
        self.name = name
        self.index = -1
        self.wins = 0
        self.games_played = 0

    @abstractmethod
    def do_turn(self, snapshot: "GameSnapshot") -> "Combination":
        """
        Decide this agent's play.

        Args:
            snapshot: Read-only game state; ``snapshot.current_hand`` is this agent's hand

        Returns:
            Combination: the play, or PASS
        """
        pass

    def receive_input(self, selection: Any) -> bool:
        """Supply a pending decision from outside. Returns whether it was taken."""
        return False

    def resolve(self, play: "Combination") -> bool:
        """Finish a parked ``do_turn`` with `play`, unchecked. Used on seat replacement."""
        return False

    @property
    def is_waiting(self) -> bool:
        """Whether a ``do_turn`` call is parked waiting for input."""
        return False

    @abstractmethod
    def reset(self):
        """Reset agent state for new game."""
        pass

    def record_game_result(self, won: bool):
        """Record result of a game."""
        self.games_played += 1
        if won:
            self.wins += 1

    def get_win_rate(self) -> float:
        """Get current win rate."""
        if self.games_played == 0:
            return 0.0
        return self.wins / self.games_played

    def reset_stats(self):
        """Reset win/loss statistics."""
        self.wins = 0
        self.games_played = 0

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r}, index={self.index})"
