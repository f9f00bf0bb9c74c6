"""Board - the fixed set of tiles plus pair bookkeeping."""

from __future__ import annotations

from collections import Counter
from collections.abc import Hashable, Iterator, Sequence

from memorie.core.errors import (
    ConfigurationError,
    InvalidOperationError,
    OutOfRangeError,
)
from memorie.core.tile import Tile

GRID_SIZE = 4

GridPosition = tuple[int, int]


def grid_positions(
    count: int = GRID_SIZE * GRID_SIZE, cols: int = GRID_SIZE
) -> list[GridPosition]:
    """Row-major ``(row, col)`` coordinates for *count* tiles, *cols* per row."""
    return [divmod(index, cols) for index in range(count)]


class Board:
    """Ordered, fixed-length sequence of tiles.

    Every color id appears on exactly two tiles.  ``pairs_remaining`` drops by
    one on each :meth:`mark_matched` and reaches zero exactly when every tile
    is matched.  The board performs no turn-legality checks; that is the
    session's job.
    """

    __slots__ = ("_tiles", "_pairs_remaining")

    def __init__(self, tiles: Sequence[Tile]) -> None:
        """Wrap already-built tiles.  Prefer :meth:`create` or :meth:`standard`,
        which also check that the colors come in pairs.

        Raises:
            ConfigurationError: no tiles, or an odd number of them.
        """
        if not tiles or len(tiles) % 2:
            raise ConfigurationError(
                f"Board needs a positive even number of tiles, got {len(tiles)}"
            )
        self._tiles: tuple[Tile, ...] = tuple(tiles)
        self._pairs_remaining = sum(1 for t in self._tiles if not t.matched) // 2

    # -- Construction ---------------------------------------------------------

    @classmethod
    def create(
        cls,
        positions: Sequence[Hashable],
        color_assignment: Sequence[int],
    ) -> Board:
        """Pair each position with one color id.

        Raises:
            ConfigurationError: lengths differ, the board would be empty or
                odd-sized, or some color does not appear exactly twice.
        """
        if len(positions) != len(color_assignment):
            raise ConfigurationError(
                f"Got {len(positions)} positions for {len(color_assignment)} colors"
            )
        unpaired = [c for c, n in Counter(color_assignment).items() if n != 2]
        if unpaired:
            raise ConfigurationError(f"Colors not assigned exactly twice: {unpaired!r}")

        tiles = [
            Tile(index, position, color)
            for index, (position, color) in enumerate(zip(positions, color_assignment))
        ]
        return cls(tiles)

    @classmethod
    def standard(cls, color_assignment: Sequence[int]) -> Board:
        """Board laid out row-major on the four-column grid (4x4 for 8 pairs)."""
        return cls.create(grid_positions(len(color_assignment)), color_assignment)

    # -- Element access -------------------------------------------------------

    def tile_at(self, index: int) -> Tile:
        if not 0 <= index < len(self._tiles):
            raise OutOfRangeError(
                f"Tile index {index} out of range for board of {len(self._tiles)}"
            )
        return self._tiles[index]

    def __len__(self) -> int:
        return len(self._tiles)

    def __iter__(self) -> Iterator[Tile]:
        return iter(self._tiles)

    @property
    def tiles(self) -> tuple[Tile, ...]:
        return self._tiles

    @property
    def pair_count(self) -> int:
        return len(self._tiles) // 2

    @property
    def pairs_remaining(self) -> int:
        return self._pairs_remaining

    # -- Mutation -------------------------------------------------------------

    def flip(self, index: int) -> None:
        self.tile_at(index).flip()

    def mark_matched(self, i: int, j: int) -> None:
        """Mark tiles *i* and *j* as a found pair."""
        if i == j:
            raise InvalidOperationError(f"Cannot match tile {i} with itself")
        first, second = self.tile_at(i), self.tile_at(j)
        if first.matched or second.matched:
            raise InvalidOperationError(f"Tile {i} or {j} is already matched")
        first.matched = True
        second.matched = True
        self._pairs_remaining -= 1

    def is_complete(self) -> bool:
        return self._pairs_remaining == 0

    def __repr__(self) -> str:
        return f"Board({len(self._tiles)} tiles, {self._pairs_remaining} pairs left)"
