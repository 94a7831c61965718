"""Shared test helpers for PomoBuddy."""

from pomobuddy.timer.engine import TimerEngine


class SignalCollector:
    """Utility to capture pyqtSignal emissions into a list."""

    def __init__(self):
        self.items: list = []

    def slot(self, *args):
        self.items.append(args if len(args) > 1 else args[0] if args else None)

    def __call__(self, *args):
        self.slot(*args)

    def __len__(self):
        return len(self.items)

    def __getitem__(self, idx):
        return self.items[idx]

    @property
    def last(self):
        return self.items[-1] if self.items else None

    def clear(self):
        self.items.clear()


def complete_phase(engine: TimerEngine) -> None:
    """Fast-complete the current phase by jumping to the last tick.

    Starts the engine first if it is idle with nothing pending.
    """
    engine.start()
    engine._state.remaining_seconds = 1
    engine.tick()


def run_through(engine: TimerEngine) -> None:
    """Complete the current phase and acknowledge it."""
    complete_phase(engine)
    engine.acknowledge_phase_end()
