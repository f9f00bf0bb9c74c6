"""GameSession - the turn/selection state machine.

Coordinates: Board, Players.
Emits events via simple callbacks so a UI host / tests can subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field

from memorie.core.board import Board
from memorie.core.deck import RandomSource, generate
from memorie.core.enums import DEFAULT_PALETTE
from memorie.core.errors import ConfigurationError
from memorie.game.config import DEFAULT_PAIR_COUNT, DEFAULT_PLAYER_IDS, SessionConfig
from memorie.game.interfaces import Draw, GamePhase, Outcome, Winner
from memorie.game.player import Player

_LOGGER = logging.getLogger(__name__)

# ── Snapshots ────────────────────────────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class TileView:
    """What a host may show for one tile; ``color_id`` is None while hidden."""

    index: int
    color_id: int | None
    face_up: bool
    matched: bool


@dataclass(frozen=True, slots=True)
class SessionSnapshot:
    """Read-only picture of a session after a call."""

    tiles: tuple[TileView, ...]
    current_player_id: str
    scores: tuple[tuple[str, int], ...]
    phase: GamePhase
    pairs_remaining: int
    outcome: Outcome | None = None

    def tile(self, index: int) -> TileView:
        return self.tiles[index]

    def score_of(self, player_id: str) -> int:
        for pid, score in self.scores:
            if pid == player_id:
                return score
        raise KeyError(player_id)


# ── Event definitions ────────────────────────────────────────────────────────

StateCallback = Callable[[SessionSnapshot], None]
PhaseCallback = Callable[[GamePhase], None]
MatchCallback = Callable[[int, int, str], None]  # first, second, player id
MismatchCallback = Callable[[int, int], None]  # first, second
GameOverCallback = Callable[[Outcome], None]


@dataclass
class SessionEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_state_changed: list[StateCallback] = field(default_factory=list)
    on_phase_changed: list[PhaseCallback] = field(default_factory=list)
    on_match: list[MatchCallback] = field(default_factory=list)
    on_mismatch: list[MismatchCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)


# ── Session ──────────────────────────────────────────────────────────────────


class GameSession:
    """Two-player memory game on a single board.

    ``select_tile`` reveals tiles; once a second tile is up the session sits
    in ``RESOLVING`` until the host calls ``resolve``, which applies the match
    or flips both tiles back and passes the turn.  Misclicks (matched tiles,
    the already-selected tile, anything during ``RESOLVING`` or after the
    game) are ignored and return the unchanged snapshot.

    Thread-safety: designed to be driven from a single thread, one call at a
    time.  A new game means a new session.
    """

    __slots__ = (
        "_board",
        "_players",
        "_current",
        "_pending",
        "_second",
        "_phase",
        "_outcome",
        "events",
    )

    def __init__(self, board: Board, players: Sequence[Player]) -> None:
        if len(players) != 2:
            raise ConfigurationError(
                f"Exactly two players required, got {len(players)}"
            )
        if players[0].id == players[1].id:
            raise ConfigurationError(f"Player ids must differ: {players[0].id!r}")
        self._board = board
        self._players: tuple[Player, Player] = (players[0], players[1])
        self._current = 0
        self._pending: int | None = None
        self._second: int | None = None
        self._phase = GamePhase.AWAITING_FIRST
        self._outcome: Outcome | None = None
        self.events = SessionEvents()

    @classmethod
    def from_config(
        cls,
        config: SessionConfig,
        rng: RandomSource | None = None,
    ) -> GameSession:
        """Deal a fresh board and seat two new players."""
        board = Board.standard(generate(config.pair_count, config.palette, rng))
        return cls(board, [Player(pid) for pid in config.player_ids])

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def board(self) -> Board:
        return self._board

    @property
    def players(self) -> tuple[Player, Player]:
        return self._players

    @property
    def current_player_index(self) -> int:
        return self._current

    @property
    def current_player(self) -> Player:
        return self._players[self._current]

    @property
    def pending_first_selection(self) -> int | None:
        return self._pending

    @property
    def phase(self) -> GamePhase:
        return self._phase

    @property
    def outcome(self) -> Outcome | None:
        return self._outcome

    @property
    def is_finished(self) -> bool:
        return self._phase == GamePhase.FINISHED

    # ── Transitions ──────────────────────────────────────────────────────

    def select_tile(self, index: int) -> SessionSnapshot:
        """Reveal tile *index* for the current player.

        Raises:
            OutOfRangeError: *index* is not on the board (state unchanged).
        """
        tile = self._board.tile_at(index)

        if self._phase == GamePhase.AWAITING_FIRST:
            if tile.matched:
                _LOGGER.debug("Ignoring selection of matched tile %d", index)
                return self.snapshot()
            self._board.flip(index)
            self._pending = index
            self._set_phase(GamePhase.AWAITING_SECOND)

        elif self._phase == GamePhase.AWAITING_SECOND:
            if index == self._pending or tile.matched:
                _LOGGER.debug("Ignoring second selection of tile %d", index)
                return self.snapshot()
            self._board.flip(index)
            self._second = index
            self._set_phase(GamePhase.RESOLVING)

        else:
            _LOGGER.debug("Ignoring selection of tile %d while %s", index, self._phase)
            return self.snapshot()

        return self._emit_state()

    def resolve(self) -> SessionSnapshot:
        """Apply the consequence of the two revealed tiles.

        Does nothing unless the session is ``RESOLVING``, so a late or
        repeated call from a host timer is harmless.
        """
        if self._phase != GamePhase.RESOLVING:
            return self.snapshot()
        assert self._pending is not None and self._second is not None

        first, second = self._pending, self._second
        self._pending = None
        self._second = None
        mover = self.current_player

        if self._board.tile_at(first).matches(self._board.tile_at(second)):
            self._board.mark_matched(first, second)
            mover.increment_score()
            _LOGGER.debug("%s matched tiles %d and %d", mover.id, first, second)
            self._switch_player()
            self._emit_match(first, second, mover.id)

            if self._board.is_complete():
                self._outcome = self._decide_outcome()
                _LOGGER.info("Game over: %s", self._outcome)
                self._set_phase(GamePhase.FINISHED)
                snapshot = self._emit_state()
                self._emit_game_over(self._outcome)
                return snapshot
        else:
            self._board.flip(first)
            self._board.flip(second)
            _LOGGER.debug("%s missed with tiles %d and %d", mover.id, first, second)
            self._switch_player()
            self._emit_mismatch(first, second)

        self._set_phase(GamePhase.AWAITING_FIRST)
        return self._emit_state()

    # ── Snapshot ─────────────────────────────────────────────────────────

    def snapshot(self) -> SessionSnapshot:
        tiles = tuple(
            TileView(
                index=tile.id,
                color_id=tile.color_id if tile.face_up or tile.matched else None,
                face_up=tile.face_up,
                matched=tile.matched,
            )
            for tile in self._board
        )
        return SessionSnapshot(
            tiles=tiles,
            current_player_id=self.current_player.id,
            scores=tuple((p.id, p.score) for p in self._players),
            phase=self._phase,
            pairs_remaining=self._board.pairs_remaining,
            outcome=self._outcome,
        )

    # ── Internal helpers ─────────────────────────────────────────────────

    def _switch_player(self) -> None:
        self._current = 1 - self._current

    def _decide_outcome(self) -> Outcome:
        one, two = self._players
        if one.score == two.score:
            return Draw(one.score)
        best = one if one.score > two.score else two
        return Winner(best.id, best.score)

    def _set_phase(self, phase: GamePhase) -> None:
        self._phase = phase
        for cb in self.events.on_phase_changed:
            cb(phase)

    def _emit_state(self) -> SessionSnapshot:
        snapshot = self.snapshot()
        for cb in self.events.on_state_changed:
            cb(snapshot)
        return snapshot

    def _emit_match(self, first: int, second: int, player_id: str) -> None:
        for cb in self.events.on_match:
            cb(first, second, player_id)

    def _emit_mismatch(self, first: int, second: int) -> None:
        for cb in self.events.on_mismatch:
            cb(first, second)

    def _emit_game_over(self, outcome: Outcome) -> None:
        for cb in self.events.on_game_over:
            cb(outcome)

    def __repr__(self) -> str:
        return (
            f"GameSession({self._phase}, current={self.current_player.id!r}, "
            f"pairs_left={self._board.pairs_remaining})"
        )


def create_session(
    pair_count: int = DEFAULT_PAIR_COUNT,
    palette: Sequence[int] = DEFAULT_PALETTE,
    rng: RandomSource | None = None,
    *,
    player_ids: Sequence[str] = DEFAULT_PLAYER_IDS,
) -> GameSession:
    """Start a new game.

    Raises:
        ConfigurationError: bad pair count, palette or player ids.
    """
    config = SessionConfig(
        pair_count=pair_count, palette=palette, player_ids=player_ids
    )
    return GameSession.from_config(config, rng)
