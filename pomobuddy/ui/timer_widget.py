"""Main timer card.

Layout (top → bottom):
    - Title
    - Phase heading ("Work Time!" / "Break Time!") + phase kind
    - Session counter
    - MM:SS clock + progress bar
    - Start/Pause, Reset, Skip
"""

from __future__ import annotations

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout,
    QLabel, QPushButton, QFrame, QProgressBar,
)

from ..timer.engine import TimerEngine, TimerSnapshot, Phase
from .styles import phase_color


PHASE_HEADINGS: dict[Phase, str] = {
    Phase.WORK:        "Work Time!",
    Phase.SHORT_BREAK: "Break Time!",
    Phase.LONG_BREAK:  "Break Time!",
}

PHASE_KINDS: dict[Phase, str] = {
    Phase.WORK:        "FOCUS",
    Phase.SHORT_BREAK: "SHORT BREAK",
    Phase.LONG_BREAK:  "LONG BREAK",
}


class TimerWidget(QWidget):
    """The timer card: renders snapshots and forwards button presses."""

    control_clicked = pyqtSignal()

    def __init__(self, engine: TimerEngine, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._engine = engine
        self._build_ui()
        self._connect_signals()
        self._render(engine.snapshot())

    # ── build ─────────────────────────────────────────────────────────────

    def _build_ui(self) -> None:
        root = QVBoxLayout(self)
        root.setContentsMargins(0, 0, 0, 0)

        card = QFrame(self)
        card.setObjectName("card")
        root.addWidget(card)

        layout = QVBoxLayout(card)
        layout.setContentsMargins(40, 32, 40, 36)
        layout.setSpacing(8)
        layout.setAlignment(Qt.AlignmentFlag.AlignCenter)

        self._title_label = QLabel("Pomodoro Timer", card)
        self._title_label.setObjectName("titleLabel")
        self._title_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self._title_label)

        layout.addSpacing(16)

        self._phase_label = QLabel(card)
        self._phase_label.setObjectName("phaseLabel")
        self._phase_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self._phase_label)

        self._kind_label = QLabel(card)
        self._kind_label.setObjectName("sessionLabel")
        self._kind_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self._kind_label)

        self._session_label = QLabel(card)
        self._session_label.setObjectName("sessionLabel")
        self._session_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self._session_label)

        layout.addSpacing(16)

        self._clock_label = QLabel(card)
        self._clock_label.setObjectName("clockLabel")
        self._clock_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self._clock_label)

        self._progress = QProgressBar(card)
        self._progress.setRange(0, 1000)
        self._progress.setTextVisible(False)
        layout.addWidget(self._progress)

        layout.addSpacing(20)

        # ── controls ─────────────────────────────────────────────────
        btn_row = QHBoxLayout()
        btn_row.setSpacing(12)
        btn_row.setAlignment(Qt.AlignmentFlag.AlignCenter)

        self._start_pause_btn = QPushButton("Start", card)
        self._start_pause_btn.setObjectName("primaryButton")

        self._reset_btn = QPushButton("Reset", card)
        self._reset_btn.setObjectName("secondaryButton")

        self._skip_btn = QPushButton("Skip", card)
        self._skip_btn.setObjectName("secondaryButton")

        btn_row.addWidget(self._start_pause_btn)
        btn_row.addWidget(self._reset_btn)
        btn_row.addWidget(self._skip_btn)
        layout.addLayout(btn_row)

    # ── signals ───────────────────────────────────────────────────────────

    def _connect_signals(self) -> None:
        self._start_pause_btn.clicked.connect(self.toggle)
        self._reset_btn.clicked.connect(self._engine.reset)
        self._skip_btn.clicked.connect(self._engine.skip)
        for btn in (self._start_pause_btn, self._reset_btn, self._skip_btn):
            btn.clicked.connect(self.control_clicked)

        self._engine.state_changed.connect(self._render)

    # ── slots ─────────────────────────────────────────────────────────────

    def toggle(self) -> None:
        """Start/Pause button: pause when running, start otherwise."""
        if self._engine.is_active:
            self._engine.pause()
        else:
            self._engine.start()

    def _render(self, snap: TimerSnapshot) -> None:
        self._start_pause_btn.setText("Pause" if snap.is_active else "Start")
        # Start does nothing until the phase-end dialog is dismissed
        self._start_pause_btn.setEnabled(snap.pending_notification is None)

        self._phase_label.setText(PHASE_HEADINGS[snap.phase])
        self._phase_label.setStyleSheet(f"color: {phase_color(snap.phase)};")
        self._kind_label.setText(PHASE_KINDS[snap.phase])
        self._session_label.setText(f"Session: {snap.completed_work_sessions}")

        self._clock_label.setText(snap.display)
        self._progress.setValue(round(snap.progress * 1000))

    # ── read-only accessors ──────────────────────────────────────────────

    @property
    def clock_text(self) -> str:
        return self._clock_label.text()

    @property
    def phase_text(self) -> str:
        return self._phase_label.text()

    @property
    def session_text(self) -> str:
        return self._session_label.text()

    @property
    def start_pause_text(self) -> str:
        return self._start_pause_btn.text()
