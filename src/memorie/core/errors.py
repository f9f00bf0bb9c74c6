"""Exception hierarchy for the game core."""

from __future__ import annotations


class MemorieError(Exception):
    """Base class for all errors raised by the game core."""


class ConfigurationError(MemorieError, ValueError):
    """Bad construction parameters (pair count, palette, lengths, players)."""


class OutOfRangeError(MemorieError, IndexError):
    """A tile index outside the board bounds."""


class InvalidOperationError(MemorieError, RuntimeError):
    """The board was asked to do something its state forbids.

    Not reachable through ``GameSession.select_tile`` / ``resolve``; seeing
    it means the caller bypassed the session.
    """
