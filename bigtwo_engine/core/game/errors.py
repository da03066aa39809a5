"""Exceptions raised by the Big Two rules engine."""


class InvalidCombination(ValueError):
    """A card grouping or submitted move was rejected. Always recoverable: ask again."""

    def __init__(self, reason: str):
        super().__init__(reason)
        self.reason = reason


class EngineInvariantError(RuntimeError):
    """An agent handed the engine a move that should never have passed validation."""


class GameOverError(RuntimeError):
    """A turn was requested after the game finished."""
