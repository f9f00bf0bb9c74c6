"""Core enumerations for the memory game domain."""

from __future__ import annotations

from enum import IntEnum


class TileColor(IntEnum):
    """Default tile palette: eight colors, one per pair on the 4x4 board."""

    AQUA = 0
    LIME = 1
    TEAL = 2
    BLUE = 3
    NAVY = 4
    YELLOW = 5
    ORANGE = 6
    SILVER = 7

    def __str__(self) -> str:
        return self.name.lower()


DEFAULT_PALETTE: tuple[TileColor, ...] = tuple(TileColor)
