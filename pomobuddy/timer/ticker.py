"""One-second tick source for :class:`TimerEngine`.

The scheduler owns exactly one ``QTimer`` and keeps it in lockstep with
the engine: running while the engine is active, stopped otherwise
(paused, reset, or waiting for a phase-end acknowledgement).
"""

from __future__ import annotations

import logging

from PyQt6.QtCore import QObject, QTimer

from .engine import TimerEngine, Phase, TICK_INTERVAL_MS


logger = logging.getLogger(__name__)


class TickScheduler(QObject):
    """Drives ``engine.tick()`` once per interval while the engine runs."""

    def __init__(
        self,
        engine: TimerEngine,
        parent: QObject | None = None,
        *,
        interval_ms: int = TICK_INTERVAL_MS,
    ) -> None:
        super().__init__(parent)
        self._engine = engine
        self._shut_down = False

        self._qt_timer = QTimer(self)
        self._qt_timer.setInterval(interval_ms)
        self._qt_timer.timeout.connect(self._on_timeout)

        engine.active_changed.connect(self._on_active_changed)
        engine.phase_changed.connect(self._on_phase_changed)

        if engine.is_active:
            self._start()

    @property
    def is_running(self) -> bool:
        return self._qt_timer.isActive()

    @property
    def interval_ms(self) -> int:
        return self._qt_timer.interval()

    def shutdown(self) -> None:
        """Stop ticking for good (window closing, app quitting)."""
        if self._shut_down:
            return
        self._shut_down = True
        self._stop()
        self._engine.active_changed.disconnect(self._on_active_changed)
        self._engine.phase_changed.disconnect(self._on_phase_changed)

    # ── slots ─────────────────────────────────────────────────────────────

    def _on_active_changed(self, _active: bool) -> None:
        # Follow the engine, not the argument: a slot connected ahead of
        # this one may already have changed it again.
        if self._engine.is_active:
            self._start()
        else:
            self._stop()

    def _on_phase_changed(self, _phase: Phase) -> None:
        # New phase while running: give it a full first second.
        if self._engine.is_active and self._qt_timer.isActive():
            self._qt_timer.start()

    def _on_timeout(self) -> None:
        self._engine.tick()

    # ── internal ──────────────────────────────────────────────────────────

    def _start(self) -> None:
        if self._shut_down or self._qt_timer.isActive():
            return
        logger.debug("Tick source started")
        self._qt_timer.start()

    def _stop(self) -> None:
        if not self._qt_timer.isActive():
            return
        logger.debug("Tick source stopped")
        self._qt_timer.stop()
