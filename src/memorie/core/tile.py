"""Tile - a single board cell."""

from __future__ import annotations

from collections.abc import Hashable


class Tile:
    """One cell of the board.

    ``id`` and ``color_id`` are fixed at creation. ``face_up`` and
    ``matched`` are independent: a matched tile counts as removed
    from the board whatever its ``face_up`` flag says.
    """

    __slots__ = ("_id", "_position", "_color_id", "face_up", "matched")

    def __init__(self, tile_id: int, position: Hashable, color_id: int) -> None:
        self._id = tile_id
        self._position = position
        self._color_id = color_id
        self.face_up = False
        self.matched = False

    @property
    def id(self) -> int:
        return self._id

    @property
    def position(self) -> Hashable:
        return self._position

    @property
    def color_id(self) -> int:
        return self._color_id

    def flip(self) -> None:
        """Turn a face-down tile up, or a face-up tile down."""
        self.face_up = not self.face_up

    def matches(self, other: Tile) -> bool:
        """True if *other* is a different tile carrying the same color."""
        return self is not other and self._color_id == other._color_id

    def __repr__(self) -> str:
        state = "matched" if self.matched else ("up" if self.face_up else "down")
        return f"Tile({self._id}, {self._color_id!s}, {state})"
