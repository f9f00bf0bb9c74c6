"""Session configuration and presets."""

from __future__ import annotations

from collections.abc import Sequence

from memorie.core.enums import DEFAULT_PALETTE
from memorie.core.errors import ConfigurationError

DEFAULT_PAIR_COUNT = 8
DEFAULT_PLAYER_IDS: tuple[str, str] = ("Player One", "Player Two")
DEFAULT_REVEAL_DELAY_MS = 500


class SessionConfig:
    """Immutable game-session settings.

    Args:
        pair_count: Number of pairs dealt; the first *pair_count* palette
            colors are used.
        palette: Distinct color ids to deal from.
        player_ids: Names of the two players; the first one moves first.
        reveal_delay_ms: How long a host keeps a revealed second tile on
            screen before resolving the turn.

    Raises:
        ConfigurationError: on any invalid value.
    """

    __slots__ = ("pair_count", "palette", "player_ids", "reveal_delay_ms")

    def __init__(
        self,
        pair_count: int = DEFAULT_PAIR_COUNT,
        palette: Sequence[int] = DEFAULT_PALETTE,
        player_ids: Sequence[str] = DEFAULT_PLAYER_IDS,
        reveal_delay_ms: int = DEFAULT_REVEAL_DELAY_MS,
    ) -> None:
        if not 0 < pair_count <= len(palette):
            raise ConfigurationError(
                f"Pair count must be in 1..{len(palette)}, got {pair_count}"
            )
        if len(player_ids) != 2:
            raise ConfigurationError(
                f"Exactly two players required, got {player_ids!r}"
            )
        first, second = player_ids
        if not first or not second or first == second:
            raise ConfigurationError(
                f"Player ids must be distinct and non-empty: {player_ids!r}"
            )
        if reveal_delay_ms < 0:
            raise ConfigurationError(
                f"Reveal delay must be >= 0, got {reveal_delay_ms}"
            )

        self.pair_count = pair_count
        self.palette: tuple[int, ...] = tuple(palette)
        self.player_ids: tuple[str, str] = (first, second)
        self.reveal_delay_ms = reveal_delay_ms

    # Presets
    @classmethod
    def standard(cls) -> SessionConfig:
        """4x4 board, eight colors, half-second reveal."""
        return cls()

    @classmethod
    def instant(cls) -> SessionConfig:
        """Standard board, turns resolve as soon as the second tile shows."""
        return cls(reveal_delay_ms=0)

    def __repr__(self) -> str:
        return (
            f"SessionConfig(pairs={self.pair_count}, "
            f"players={self.player_ids}, delay={self.reveal_delay_ms}ms)"
        )
