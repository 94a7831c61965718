"""Shared pytest fixtures for PomoBuddy tests."""

import os
import sys

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PyQt6.QtWidgets import QApplication

from pomobuddy.settings import Settings
from pomobuddy.timer.engine import TimerEngine, Phase
from pomobuddy.timer.ticker import TickScheduler


@pytest.fixture(scope="session")
def qapp():
    """A single QApplication instance shared across the entire test run."""
    app = QApplication.instance() or QApplication(sys.argv)
    yield app


@pytest.fixture
def engine(qapp):
    """Fresh TimerEngine with the default (hour-long work) durations."""
    return TimerEngine(parent=None)


@pytest.fixture
def short_engine(qapp):
    """TimerEngine with tiny durations so whole phases can be ticked out."""
    return TimerEngine(
        parent=None,
        durations={
            Phase.WORK: 5,
            Phase.SHORT_BREAK: 2,
            Phase.LONG_BREAK: 3,
        },
    )


@pytest.fixture
def scheduler(engine):
    """TickScheduler bound to ``engine``."""
    sched = TickScheduler(engine)
    yield sched
    sched.shutdown()


@pytest.fixture
def quiet_settings():
    """Default settings with sound off (no audio device in CI)."""
    return Settings(sound_enabled=False)
