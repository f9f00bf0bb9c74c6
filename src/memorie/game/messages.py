"""Human-readable status lines a host can show next to the board."""

from __future__ import annotations

from memorie.game.interfaces import Draw, Outcome
from memorie.game.session import SessionSnapshot


def status_text(snapshot: SessionSnapshot) -> str:
    """Scores of both players followed by whose turn it is."""
    scores = " ".join(f"{pid}: {score}." for pid, score in snapshot.scores)
    return f"{scores}\nCurrent player: {snapshot.current_player_id}"


def outcome_text(outcome: Outcome) -> str:
    if isinstance(outcome, Draw):
        return f"Game ends in a draw with a score of {outcome.score} each"
    return f"{outcome.player_id} wins, with a score of {outcome.score}"
