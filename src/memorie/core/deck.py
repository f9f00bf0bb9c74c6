"""Deck generator - the shuffled color assignment for a new board."""

from __future__ import annotations

import random
from collections.abc import MutableSequence, Sequence
from typing import Any, Protocol

from memorie.core.errors import ConfigurationError


class RandomSource(Protocol):
    """Anything that can shuffle a list in place (``random.Random`` does)."""

    def shuffle(self, x: MutableSequence[Any]) -> None: ...


def generate(
    pair_count: int,
    palette: Sequence[int],
    rng: RandomSource | None = None,
) -> list[int]:
    """Return ``2 * pair_count`` color ids, each used exactly twice, shuffled.

    The first *pair_count* palette entries are taken twice and permuted with
    ``rng.shuffle`` (Fisher-Yates for ``random.Random``), so every ordering of
    the multiset is equally likely.  Pass a seeded ``random.Random`` for a
    reproducible deal.

    Raises:
        ConfigurationError: *pair_count* is not positive, exceeds the palette
            size, or the palette repeats a color.
    """
    if pair_count <= 0:
        raise ConfigurationError(f"Pair count must be positive, got {pair_count}")
    if pair_count > len(palette):
        raise ConfigurationError(
            f"Pair count {pair_count} exceeds palette size {len(palette)}"
        )
    if len(set(palette)) != len(palette):
        raise ConfigurationError(f"Palette contains duplicate colors: {palette!r}")

    colors = list(palette[:pair_count])
    deck = colors + colors
    (rng if rng is not None else random.Random()).shuffle(deck)
    return deck
