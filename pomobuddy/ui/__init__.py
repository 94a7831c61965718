"""UI package."""

from .timer_widget import TimerWidget
from .phase_dialog import PhaseDialog

__all__ = [
    "TimerWidget",
    "PhaseDialog",
]
