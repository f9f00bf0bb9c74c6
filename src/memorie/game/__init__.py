"""Game management layer - session state machine, players, config.

Quick start::

    from memorie.game import create_session

    session = create_session()
    session.events.on_game_over.append(print)
    session.select_tile(0)
    session.select_tile(5)
    session.resolve()
"""

from memorie.game.config import SessionConfig
from memorie.game.interfaces import Draw, GamePhase, Outcome, Winner
from memorie.game.messages import outcome_text, status_text
from memorie.game.player import Player
from memorie.game.session import (
    GameSession,
    SessionEvents,
    SessionSnapshot,
    TileView,
    create_session,
)

__all__ = [
    # Types
    "Draw",
    "GamePhase",
    "Outcome",
    "Winner",
    # Concrete
    "GameSession",
    "Player",
    "SessionConfig",
    "SessionEvents",
    "SessionSnapshot",
    "TileView",
    "create_session",
    # Messages
    "outcome_text",
    "status_text",
]
