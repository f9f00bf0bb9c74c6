"""Shared types for the game layer: session phases and outcomes."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum, auto

# ── Session FSM states ───────────────────────────────────────────────────────


class GamePhase(IntEnum):
    """Finite-state-machine states for a game session."""

    AWAITING_FIRST = auto()
    AWAITING_SECOND = auto()
    RESOLVING = auto()  # second tile revealed, waiting for resolve()
    FINISHED = auto()

    def __str__(self) -> str:
        return self.name.lower()


# ── Outcomes ─────────────────────────────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class Draw:
    """Both players found the same number of pairs."""

    score: int


@dataclass(frozen=True, slots=True)
class Winner:
    """One player found more pairs than the other."""

    player_id: str
    score: int


Outcome = Draw | Winner
