"""Timer package."""

from .engine import (
    TimerEngine,
    TimerState,
    TimerSnapshot,
    Phase,
    PhaseNotification,
    DEFAULT_DURATIONS,
    LONG_BREAK_INTERVAL,
    PHASE_MESSAGES,
    format_time,
)
from .ticker import TickScheduler

__all__ = [
    "TimerEngine",
    "TimerState",
    "TimerSnapshot",
    "Phase",
    "PhaseNotification",
    "DEFAULT_DURATIONS",
    "LONG_BREAK_INTERVAL",
    "PHASE_MESSAGES",
    "format_time",
    "TickScheduler",
]
