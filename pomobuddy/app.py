"""Main application window for PomoBuddy."""

from __future__ import annotations

import logging
from pathlib import Path

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QAction, QKeySequence
from PyQt6.QtWidgets import QMainWindow, QWidget, QVBoxLayout

from .timer.engine import TimerEngine, Phase, PhaseNotification
from .timer.ticker import TickScheduler
from .ui.timer_widget import TimerWidget
from .ui.phase_dialog import PhaseDialog
from .ui.styles import build_stylesheet, get_palette
from .settings import Settings, load_settings
from .audio.sounds import SoundManager


logger = logging.getLogger(__name__)


class PomoBuddyApp(QMainWindow):
    """Main application window."""

    def __init__(
        self,
        settings: Settings | None = None,
        *,
        sounds_dir: Path | None = None,
    ) -> None:
        super().__init__()
        self.setWindowTitle("PomoBuddy")
        self.setMinimumSize(440, 520)

        # ── settings ──────────────────────────────────────────────────
        self._settings: Settings = settings or load_settings()

        # ── engine + tick source ──────────────────────────────────────
        self._timer_engine = TimerEngine(
            self,
            durations=self._settings.durations(),
            long_break_interval=self._settings.long_break_interval,
        )
        self._scheduler = TickScheduler(self._timer_engine, self)

        # ── sound manager ─────────────────────────────────────────────
        self._sound_manager = SoundManager(parent=self, sounds_dir=sounds_dir)
        self._sound_manager.set_volume(self._settings.sound_volume)
        self._sound_manager.set_enabled(self._settings.sound_enabled)

        # ── widgets ───────────────────────────────────────────────────
        central = QWidget(self)
        layout = QVBoxLayout(central)
        layout.setContentsMargins(24, 24, 24, 24)
        self._timer_widget = TimerWidget(self._timer_engine, central)
        layout.addWidget(self._timer_widget)
        self.setCentralWidget(central)

        self._phase_dialog = PhaseDialog(self)

        self.setStyleSheet(build_stylesheet(get_palette()))
        if self._settings.always_on_top:
            self.setWindowFlag(Qt.WindowType.WindowStaysOnTopHint, True)

        self._connect_signals()
        self._setup_shortcuts()

    # ── accessors ─────────────────────────────────────────────────────────

    @property
    def engine(self) -> TimerEngine:
        return self._timer_engine

    @property
    def scheduler(self) -> TickScheduler:
        return self._scheduler

    @property
    def timer_widget(self) -> TimerWidget:
        return self._timer_widget

    @property
    def phase_dialog(self) -> PhaseDialog:
        return self._phase_dialog

    # ── wiring ────────────────────────────────────────────────────────────

    def _connect_signals(self) -> None:
        self._timer_engine.phase_completed.connect(self._on_phase_completed)
        self._timer_engine.phase_ended.connect(self._on_phase_ended)
        self._phase_dialog.acknowledged.connect(
            self._timer_engine.acknowledge_phase_end,
        )
        self._timer_widget.control_clicked.connect(
            lambda: self._sound_manager.play("click"),
        )

    def _setup_shortcuts(self) -> None:
        """Space toggles start/pause; Ctrl+R resets; Ctrl+K skips."""
        toggle = QAction("Start/Pause", self)
        toggle.setShortcut(QKeySequence(Qt.Key.Key_Space))
        toggle.triggered.connect(self._timer_widget.toggle)
        self.addAction(toggle)

        reset = QAction("Reset", self)
        reset.setShortcut(QKeySequence("Ctrl+R"))
        reset.triggered.connect(self._timer_engine.reset)
        self.addAction(reset)

        skip = QAction("Skip", self)
        skip.setShortcut(QKeySequence("Ctrl+K"))
        skip.triggered.connect(self._timer_engine.skip)
        self.addAction(skip)

        quit_action = QAction("Quit PomoBuddy", self)
        quit_action.setShortcut(QKeySequence("Ctrl+Q"))
        quit_action.triggered.connect(self.close)
        self.addAction(quit_action)

    # ── slots ─────────────────────────────────────────────────────────────

    def _on_phase_completed(self, notification: PhaseNotification) -> None:
        self._phase_dialog.show_notification(notification)

    def _on_phase_ended(self, phase: Phase) -> None:
        logger.debug("Playing phase-end cue after %s", phase.value)
        self._sound_manager.play("phase_end")

    # ══════════════════════════════════════════════════════════════════
    #  WINDOW EVENTS
    # ══════════════════════════════════════════════════════════════════

    def closeEvent(self, event) -> None:  # type: ignore[override]
        """Stop ticking before the window goes away."""
        self._scheduler.shutdown()
        event.accept()
