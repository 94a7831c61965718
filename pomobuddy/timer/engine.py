"""Timer state machine for PomoBuddy.

Transitions
-----------
Idle → Running                    (start, when nothing is pending)
Running → Idle                    (pause)
Running → Idle + notification     (remaining time runs out)
Idle + notification → Running     (acknowledge_phase_end)
Any → Running in next phase       (skip; no notification)
Any → Idle, WORK, 0 sessions      (reset)

Every command is a no-op when its precondition does not hold; nothing
here raises except construction with a bad configuration.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from enum import Enum

from PyQt6.QtCore import QObject, pyqtSignal


logger = logging.getLogger(__name__)


# ── enums ─────────────────────────────────────────────────────────────────


class Phase(Enum):
    WORK = "work"
    SHORT_BREAK = "short_break"
    LONG_BREAK = "long_break"


# ── constants ─────────────────────────────────────────────────────────────

WORK_SECONDS = 60 * 60
SHORT_BREAK_SECONDS = 5 * 60
LONG_BREAK_SECONDS = 15 * 60
LONG_BREAK_INTERVAL = 4
TICK_INTERVAL_MS = 1000

DEFAULT_DURATIONS: dict[Phase, int] = {
    Phase.WORK: WORK_SECONDS,
    Phase.SHORT_BREAK: SHORT_BREAK_SECONDS,
    Phase.LONG_BREAK: LONG_BREAK_SECONDS,
}

PHASE_MESSAGES: dict[Phase, str] = {
    Phase.WORK: "Time to work!",
    Phase.SHORT_BREAK: "Time for a short break!",
    Phase.LONG_BREAK: "Time for a long break!",
}


def format_time(seconds: int) -> str:
    """Render *seconds* as ``MM:SS`` (minutes are not wrapped at 60)."""
    minutes, secs = divmod(max(0, seconds), 60)
    return f"{minutes:02d}:{secs:02d}"


# ── state records ─────────────────────────────────────────────────────────


@dataclass(frozen=True)
class PhaseNotification:
    next_phase: Phase
    message: str


@dataclass
class TimerState:
    """The engine's single mutable record.  Never handed out directly."""

    remaining_seconds: int
    phase: Phase = Phase.WORK
    is_active: bool = False
    completed_work_sessions: int = 0
    pending_notification: PhaseNotification | None = None


@dataclass(frozen=True)
class TimerSnapshot:
    """Read-only copy of :class:`TimerState` for the presentation layer."""

    remaining_seconds: int
    phase: Phase
    is_active: bool
    completed_work_sessions: int
    pending_notification: PhaseNotification | None
    total_seconds: int
    display: str

    @property
    def progress(self) -> float:
        """0.0 → 1.0 elapsed fraction of the current phase."""
        if self.total_seconds <= 0:
            return 0.0
        elapsed = self.total_seconds - self.remaining_seconds
        return max(0.0, min(1.0, elapsed / self.total_seconds))


# ── engine ────────────────────────────────────────────────────────────────


class TimerEngine(QObject):
    """Pomodoro state machine.  Holds no clock of its own; something
    external (see :class:`~pomobuddy.timer.ticker.TickScheduler`) calls
    :meth:`tick` once per second while :attr:`is_active`.

    Signals
    -------
    ticked(remaining_seconds: int)
        Emitted after every one-second decrement.
    state_changed(snapshot: TimerSnapshot)
        Emitted after any command or tick that changed state.
    active_changed(is_active: bool)
        Emitted when the countdown starts or stops.
    phase_changed(phase: Phase)
        Emitted when completion, skip or reset sets the phase.
    phase_completed(notification: PhaseNotification)
        Emitted when a phase runs out and awaits acknowledgement.
    phase_ended(phase: Phase)
        Emitted with the phase that just ran out (audible cue hook).
    """

    ticked = pyqtSignal(int)
    state_changed = pyqtSignal(object)
    active_changed = pyqtSignal(bool)
    phase_changed = pyqtSignal(object)
    phase_completed = pyqtSignal(object)
    phase_ended = pyqtSignal(object)

    def __init__(
        self,
        parent: QObject | None = None,
        *,
        durations: dict[Phase, int] | None = None,
        long_break_interval: int = LONG_BREAK_INTERVAL,
    ) -> None:
        super().__init__(parent)

        # ── configuration ─────────────────────────────────────────────
        self._durations: dict[Phase, int] = dict(DEFAULT_DURATIONS)
        if durations:
            self._durations.update(durations)
        for phase, seconds in self._durations.items():
            if not _is_positive_int(seconds):
                raise ValueError(
                    f"duration for {phase.value} must be a positive integer, "
                    f"got {seconds!r}"
                )
        if not _is_positive_int(long_break_interval):
            raise ValueError(
                f"long_break_interval must be a positive integer, "
                f"got {long_break_interval!r}"
            )
        self._long_break_interval: int = long_break_interval

        # ── state ─────────────────────────────────────────────────────
        self._state = TimerState(remaining_seconds=self._durations[Phase.WORK])
        # Last value sent on active_changed; listeners track this, not _state.
        self._announced_active = False

        # Commands may arrive from overlapping callbacks or threads.  Each
        # one mutates and emits under this lock; re-entrant so a slot may
        # call back into the engine.
        self._lock = threading.RLock()

    # ── public properties ─────────────────────────────────────────────────

    @property
    def is_active(self) -> bool:
        return self._state.is_active

    @property
    def long_break_interval(self) -> int:
        return self._long_break_interval

    def duration_for(self, phase: Phase) -> int:
        return self._durations[phase]

    def snapshot(self) -> TimerSnapshot:
        with self._lock:
            s = self._state
            return TimerSnapshot(
                remaining_seconds=s.remaining_seconds,
                phase=s.phase,
                is_active=s.is_active,
                completed_work_sessions=s.completed_work_sessions,
                pending_notification=s.pending_notification,
                total_seconds=self._durations[s.phase],
                display=format_time(s.remaining_seconds),
            )

    # ── commands ──────────────────────────────────────────────────────────

    def tick(self) -> None:
        """Advance the countdown by one second.  No-op unless running."""
        with self._lock:
            s = self._state
            if not s.is_active or s.pending_notification is not None:
                return
            if s.remaining_seconds > 1:
                s.remaining_seconds -= 1
                remaining = s.remaining_seconds
                self.ticked.emit(remaining)
                self.state_changed.emit(self.snapshot())
                return

            ended = s.phase
            completed = self._complete_phase()

            self._sync_active()
            self.ticked.emit(0)
            self._emit_phase(completed.next_phase)
            self.phase_ended.emit(ended)
            # A slot above may already have acknowledged or reset.
            if self._state.pending_notification is completed:
                self.phase_completed.emit(completed)
            self._sync_active()
            self.state_changed.emit(self.snapshot())

    def start(self) -> None:
        """Begin (or continue) counting down.

        Rejected while a phase-end notification is waiting to be
        acknowledged.
        """
        with self._lock:
            s = self._state
            if s.pending_notification is not None:
                logger.debug("start ignored: phase end not acknowledged")
                return
            if s.is_active:
                return
            s.is_active = True
            self._publish()

    def pause(self) -> None:
        with self._lock:
            if not self._state.is_active:
                return
            self._state.is_active = False
            self._publish()

    def reset(self) -> None:
        """Back to a fresh WORK phase with the session count cleared."""
        with self._lock:
            self._state = TimerState(
                remaining_seconds=self._durations[Phase.WORK],
            )
            logger.info("Timer reset")
            self._sync_active()
            self._emit_phase(Phase.WORK)
            self._publish()

    def skip(self) -> None:
        """Jump to the next phase now and keep running.

        Uses the same session-count and long-break rule as a natural
        completion, but raises no notification and needs no
        acknowledgement.  A notification still pending is dropped.
        """
        with self._lock:
            s = self._state
            left = s.phase
            next_phase = self._advance()
            s.pending_notification = None
            s.is_active = True
            logger.info("Skipped %s → %s", left.value, next_phase.value)
            self._sync_active()
            self._emit_phase(next_phase)
            self._publish()

    def acknowledge_phase_end(self) -> None:
        """Dismiss the pending notification and resume in the new phase."""
        with self._lock:
            s = self._state
            if s.pending_notification is None:
                return
            s.pending_notification = None
            s.is_active = True
            self._publish()

    # ── internal ──────────────────────────────────────────────────────────

    def _publish(self) -> None:
        """Announce the current run state and snapshot.  Caller holds the lock."""
        self._sync_active()
        self.state_changed.emit(self.snapshot())

    def _sync_active(self) -> None:
        """Emit ``active_changed`` only if ``is_active`` differs from what
        listeners last heard, so nested commands never leave a stale value."""
        active = self._state.is_active
        if active != self._announced_active:
            self._announced_active = active
            self.active_changed.emit(active)

    def _emit_phase(self, phase: Phase) -> None:
        if self._state.phase is phase:
            self.phase_changed.emit(phase)

    def _complete_phase(self) -> PhaseNotification:
        """Stop, move to the next phase and raise a notification."""
        s = self._state
        s.is_active = False
        ended = s.phase
        next_phase = self._advance()
        notification = PhaseNotification(
            next_phase=next_phase,
            message=PHASE_MESSAGES[next_phase],
        )
        s.pending_notification = notification
        logger.info(
            "%s complete (%d work sessions) → %s",
            ended.value, s.completed_work_sessions, next_phase.value,
        )
        return notification

    def _advance(self) -> Phase:
        """Move ``phase`` and the session count to the next position and
        load the new phase's full duration."""
        s = self._state
        if s.phase is Phase.WORK:
            s.completed_work_sessions += 1
            if s.completed_work_sessions % self._long_break_interval == 0:
                s.phase = Phase.LONG_BREAK
            else:
                s.phase = Phase.SHORT_BREAK
        else:
            s.phase = Phase.WORK
        s.remaining_seconds = self._durations[s.phase]
        return s.phase


def _is_positive_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value > 0
