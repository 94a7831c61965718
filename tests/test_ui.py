"""Tests for the presentation layer.

Covers:
- TimerWidget rendering of engine snapshots and button behaviour
- PhaseDialog acknowledgement on close
- PomoBuddyApp wiring: completion → dialog → acknowledge → resume
- Stylesheet builder
"""

from __future__ import annotations

import pytest

from pomobuddy.app import PomoBuddyApp
from pomobuddy.settings import Settings
from pomobuddy.timer.engine import Phase, PhaseNotification
from pomobuddy.ui.phase_dialog import PhaseDialog
from pomobuddy.ui.styles import build_stylesheet, get_palette, phase_color
from pomobuddy.ui.timer_widget import TimerWidget

from helpers import SignalCollector, complete_phase


# ═══════════════════════════════════════════════════════════════════════
#  TIMER WIDGET
# ═══════════════════════════════════════════════════════════════════════


class TestTimerWidget:

    def test_initial_render(self, engine):
        w = TimerWidget(engine)
        assert w.clock_text == "60:00"
        assert w.phase_text == "Work Time!"
        assert w.session_text == "Session: 0"
        assert w.start_pause_text == "Start"

    def test_toggle_starts_and_pauses(self, engine):
        w = TimerWidget(engine)
        w.toggle()
        assert engine.is_active is True
        assert w.start_pause_text == "Pause"
        w.toggle()
        assert engine.is_active is False
        assert w.start_pause_text == "Start"

    def test_tick_updates_clock(self, engine):
        w = TimerWidget(engine)
        engine.start()
        engine.tick()
        assert w.clock_text == "59:59"

    def test_break_render(self, engine):
        w = TimerWidget(engine)
        engine.skip()
        assert w.phase_text == "Break Time!"
        assert w.session_text == "Session: 1"
        assert w.clock_text == "05:00"

    def test_start_button_disabled_while_pending(self, engine):
        w = TimerWidget(engine)
        complete_phase(engine)
        assert w._start_pause_btn.isEnabled() is False
        engine.acknowledge_phase_end()
        assert w._start_pause_btn.isEnabled() is True

    def test_reset_button(self, engine):
        w = TimerWidget(engine)
        engine.skip()
        w._reset_btn.click()
        assert w.phase_text == "Work Time!"
        assert w.session_text == "Session: 0"
        assert engine.is_active is False

    def test_skip_button(self, engine):
        w = TimerWidget(engine)
        w._skip_btn.click()
        assert engine.snapshot().phase == Phase.SHORT_BREAK
        assert engine.is_active is True


# ═══════════════════════════════════════════════════════════════════════
#  PHASE DIALOG
# ═══════════════════════════════════════════════════════════════════════


@pytest.mark.usefixtures("qapp")
class TestPhaseDialog:

    def test_shows_message(self):
        d = PhaseDialog()
        d.show_notification(PhaseNotification(Phase.LONG_BREAK, "Time for a long break!"))
        assert d.message == "Time for a long break!"
        assert d.isVisible()
        d.accept()

    def test_continue_acknowledges(self):
        d = PhaseDialog()
        c = SignalCollector()
        d.acknowledged.connect(c)
        d.show_notification(PhaseNotification(Phase.WORK, "Time to work!"))
        d._continue_btn.click()
        assert len(c) == 1
        assert not d.isVisible()

    def test_reject_also_acknowledges(self):
        d = PhaseDialog()
        c = SignalCollector()
        d.acknowledged.connect(c)
        d.show_notification(PhaseNotification(Phase.WORK, "Time to work!"))
        d.reject()
        assert len(c) == 1

    def test_not_acknowledged_without_notification(self):
        d = PhaseDialog()
        c = SignalCollector()
        d.acknowledged.connect(c)
        d.open()
        d.accept()
        assert len(c) == 0


# ═══════════════════════════════════════════════════════════════════════
#  MAIN WINDOW
# ═══════════════════════════════════════════════════════════════════════


@pytest.fixture
def window(qapp, quiet_settings, tmp_path):
    win = PomoBuddyApp(quiet_settings, sounds_dir=tmp_path)
    yield win
    win.scheduler.shutdown()
    win.deleteLater()


class TestMainWindow:

    def test_engine_uses_settings(self, qapp, tmp_path):
        settings = Settings(
            work_duration=1500, long_break_interval=2, sound_enabled=False,
        )
        win = PomoBuddyApp(settings, sounds_dir=tmp_path)
        try:
            assert win.engine.duration_for(Phase.WORK) == 1500
            assert win.engine.long_break_interval == 2
            assert win.timer_widget.clock_text == "25:00"
        finally:
            win.scheduler.shutdown()

    def test_completion_opens_dialog(self, window):
        complete_phase(window.engine)
        assert window.phase_dialog.isVisible()
        assert window.phase_dialog.message == "Time for a short break!"
        assert window.scheduler.is_running is False

    def test_dialog_continue_resumes_engine(self, window):
        complete_phase(window.engine)
        window.phase_dialog.accept()
        snap = window.engine.snapshot()
        assert snap.pending_notification is None
        assert snap.is_active is True
        assert window.scheduler.is_running is True

    def test_phase_end_plays_cue(self, window, monkeypatch):
        played = []
        monkeypatch.setattr(window._sound_manager, "play", played.append)
        complete_phase(window.engine)
        assert played == ["phase_end"]
        window.phase_dialog.accept()

    def test_control_buttons_click(self, window, monkeypatch):
        played = []
        monkeypatch.setattr(window._sound_manager, "play", played.append)
        window.timer_widget._start_pause_btn.click()
        window.timer_widget._reset_btn.click()
        assert played == ["click", "click"]

    def test_skip_does_not_open_dialog(self, window):
        window.engine.skip()
        assert not window.phase_dialog.isVisible()
        assert window.scheduler.is_running is True

    def test_close_stops_ticking(self, window):
        window.engine.start()
        window.close()
        assert window.scheduler.is_running is False


# ═══════════════════════════════════════════════════════════════════════
#  STYLES
# ═══════════════════════════════════════════════════════════════════════


@pytest.mark.usefixtures("qapp")
class TestStyles:

    def test_stylesheet_uses_palette(self):
        palette = get_palette()
        qss = build_stylesheet(palette)
        assert palette["card"] in qss
        assert "QDialog#phaseDialog" in qss

    def test_get_palette_returns_copy(self):
        p = get_palette()
        p["card"] = "#000000"
        assert get_palette()["card"] != "#000000"

    def test_each_phase_has_colour(self):
        for phase in Phase:
            assert phase_color(phase).startswith("#")
