"""Qt bridge that drives a GameSession from a UI event loop."""

from __future__ import annotations

import logging

from PyQt6.QtCore import QObject, QTimer, pyqtSignal, pyqtSlot

from memorie.core.deck import RandomSource
from memorie.game.config import SessionConfig
from memorie.game.interfaces import GamePhase, Outcome
from memorie.game.messages import outcome_text, status_text
from memorie.game.session import GameSession, SessionSnapshot

_LOGGER = logging.getLogger(__name__)


class SessionDriver(QObject):
    """Owns the current session and its reveal timer.

    After the second tile of a turn is revealed the driver waits
    ``config.reveal_delay_ms`` before resolving, so the player can see it.
    A zero delay resolves immediately.  ``new_game`` swaps in a brand-new
    session and cancels any reveal still pending from the old one.  The
    timer is a child of the driver, so it dies with it.
    """

    state_changed = pyqtSignal(object)  # SessionSnapshot
    status_changed = pyqtSignal(str)
    game_over = pyqtSignal(object, str)  # Outcome, message

    def __init__(
        self,
        config: SessionConfig | None = None,
        rng: RandomSource | None = None,
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        self._config = config or SessionConfig.standard()
        self._rng = rng
        self._reveal_timer = QTimer(self)
        self._reveal_timer.setSingleShot(True)
        self._reveal_timer.timeout.connect(self._on_reveal_timeout)
        self._session = self._start_session()

    @property
    def session(self) -> GameSession:
        return self._session

    @property
    def config(self) -> SessionConfig:
        return self._config

    @property
    def is_reveal_pending(self) -> bool:
        return self._session.phase == GamePhase.RESOLVING

    # ── Slots ────────────────────────────────────────────────────────────

    @pyqtSlot()
    def new_game(self) -> None:
        """Discard the current session and deal a new one."""
        self._reveal_timer.stop()
        self._session = self._start_session()
        self._publish(self._session.snapshot())

    @pyqtSlot(int)
    def select_tile(self, index: int) -> None:
        was_resolving = self.is_reveal_pending
        self._session.select_tile(index)
        if not was_resolving and self.is_reveal_pending:
            self._schedule_resolve()

    @pyqtSlot()
    def resolve_now(self) -> None:
        """Resolve a pending reveal without waiting for the timer."""
        if not self.is_reveal_pending:
            return
        self._reveal_timer.stop()
        self._session.resolve()

    # ── Internal ─────────────────────────────────────────────────────────

    def _start_session(self) -> GameSession:
        session = GameSession.from_config(self._config, self._rng)
        session.events.on_state_changed.append(self._publish)
        session.events.on_game_over.append(self._on_game_over)
        return session

    def _schedule_resolve(self) -> None:
        delay = self._config.reveal_delay_ms
        if delay == 0:
            self._session.resolve()
            return
        _LOGGER.debug("Resolving turn in %d ms", delay)
        self._reveal_timer.start(delay)

    def _on_reveal_timeout(self) -> None:
        self._session.resolve()

    def _publish(self, snapshot: SessionSnapshot) -> None:
        self.state_changed.emit(snapshot)
        self.status_changed.emit(status_text(snapshot))

    def _on_game_over(self, outcome: Outcome) -> None:
        self.game_over.emit(outcome, outcome_text(outcome))
