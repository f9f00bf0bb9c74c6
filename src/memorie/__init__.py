"""Memorie - two-player memory-matching game core."""

from memorie.core import ConfigurationError, InvalidOperationError, OutOfRangeError
from memorie.game import GamePhase, GameSession, create_session

__all__ = [
    "ConfigurationError",
    "GamePhase",
    "GameSession",
    "InvalidOperationError",
    "OutOfRangeError",
    "create_session",
]
