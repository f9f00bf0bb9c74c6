"""Player - identity and score."""

from __future__ import annotations


class Player:
    """A game participant.

    The session holds players by reference, so the score seen here is
    always the live one.
    """

    __slots__ = ("_id", "_score")

    def __init__(self, player_id: str) -> None:
        self._id = player_id
        self._score = 0

    @property
    def id(self) -> str:
        return self._id

    @property
    def score(self) -> int:
        return self._score

    def increment_score(self) -> None:
        self._score += 1

    def __repr__(self) -> str:
        return f"Player({self._id!r}, score={self._score})"
