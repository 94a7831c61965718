"""PomoBuddy: a Pomodoro interval timer."""

__version__ = "0.1.0"
