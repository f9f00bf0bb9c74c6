"""Core domain layer - tiles, board and deck, with zero external dependencies.

Quick start::

    import random

    from memorie.core import Board, DEFAULT_PALETTE, generate

    board = Board.standard(generate(8, DEFAULT_PALETTE, random.Random(7)))
    board.flip(0)
"""

from memorie.core.board import GRID_SIZE, Board, GridPosition, grid_positions
from memorie.core.deck import RandomSource, generate
from memorie.core.enums import DEFAULT_PALETTE, TileColor
from memorie.core.errors import (
    ConfigurationError,
    InvalidOperationError,
    MemorieError,
    OutOfRangeError,
)
from memorie.core.tile import Tile

__all__ = [
    # Enums
    "DEFAULT_PALETTE",
    "TileColor",
    # Errors
    "ConfigurationError",
    "InvalidOperationError",
    "MemorieError",
    "OutOfRangeError",
    # Domain objects
    "GRID_SIZE",
    "Board",
    "GridPosition",
    "RandomSource",
    "Tile",
    "generate",
    "grid_positions",
]
