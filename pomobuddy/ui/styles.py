"""QSS stylesheet and phase colours for PomoBuddy."""

from __future__ import annotations

from ..timer.engine import Phase

# ── phase accents (progress bar chunk + heading) ────────────────────────

PHASE_COLORS: dict[Phase, str] = {
    Phase.WORK:        "#FFFFFF",
    Phase.SHORT_BREAK: "#A7F3D0",   # mint
    Phase.LONG_BREAK:  "#FDE68A",   # warm yellow
}

# ── palette (single fixed blue theme) ────────────────────────────────────

DEFAULT_PALETTE: dict[str, str] = {
    "bg":           "#93C5FD",
    "card":         "#1D4ED8",
    "text":         "#FFFFFF",
    "text_muted":   "#DBEAFE",
    "button_bg":    "#FFFFFF",
    "button_text":  "#1D4ED8",
    "button_hover": "#DBEAFE",
    "dialog_bg":    "#FFFFFF",
    "dialog_title": "#4338CA",
    "dialog_text":  "#1F2937",
    "dialog_button": "#4F46E5",
    "dialog_button_hover": "#4338CA",
}


def get_palette() -> dict[str, str]:
    """Return a copy of the colour palette."""
    return dict(DEFAULT_PALETTE)


def phase_color(phase: Phase) -> str:
    return PHASE_COLORS.get(phase, DEFAULT_PALETTE["text"])


# ── font resolution ───────────────────────────────────────────────────

_resolved_font: str | None = None


def resolve_font_family() -> str:
    """Pick the best available sans-serif.  Must be called after
    QApplication is created (font database needs the app context)."""
    global _resolved_font
    if _resolved_font is None:
        from PyQt6.QtGui import QFontDatabase
        families = set(QFontDatabase.families())
        for candidate in ("Inter", "SF Pro", "Segoe UI", "Cantarell"):
            if candidate in families:
                _resolved_font = candidate
                break
        else:
            _resolved_font = "Helvetica Neue"
    return _resolved_font


# ── QSS builder ───────────────────────────────────────────────────────


def build_stylesheet(palette: dict[str, str]) -> str:
    p = palette
    font = resolve_font_family()
    return f"""
    /* ── global ─────────────────────────────────── */
    QWidget {{
        color: {p['text']};
        font-family: "{font}", "Helvetica Neue", Arial;
        font-size: 14px;
    }}

    QMainWindow {{
        background-color: {p['bg']};
    }}

    /* ── timer card ──────────────────────────────── */
    QFrame#card {{
        background-color: {p['card']};
        border-radius: 24px;
    }}

    QLabel#titleLabel {{
        font-size: 34px;
        font-weight: 800;
    }}

    QLabel#phaseLabel {{
        font-size: 24px;
        font-weight: 600;
    }}

    QLabel#sessionLabel {{
        font-size: 16px;
        color: {p['text_muted']};
    }}

    QLabel#clockLabel {{
        font-size: 72px;
        font-weight: 700;
    }}

    /* ── buttons ─────────────────────────────────── */
    QPushButton {{
        background-color: {p['button_bg']};
        color: {p['button_text']};
        border: none;
        border-radius: 22px;
        padding: 12px 32px;
        font-size: 15px;
        font-weight: 700;
    }}

    QPushButton:hover {{
        background-color: {p['button_hover']};
    }}

    /* ── progress bar ────────────────────────────── */
    QProgressBar {{
        background-color: rgba(255, 255, 255, 40);
        border: none;
        border-radius: 3px;
        max-height: 6px;
        text-align: center;
    }}

    QProgressBar::chunk {{
        background-color: {p['text']};
        border-radius: 3px;
    }}

    /* ── phase-complete dialog ───────────────────── */
    QDialog#phaseDialog {{
        background-color: {p['dialog_bg']};
        border-radius: 12px;
    }}

    QDialog#phaseDialog QLabel#dialogTitle {{
        color: {p['dialog_title']};
        font-size: 26px;
        font-weight: 700;
    }}

    QDialog#phaseDialog QLabel#dialogMessage {{
        color: {p['dialog_text']};
        font-size: 18px;
    }}

    QDialog#phaseDialog QPushButton {{
        background-color: {p['dialog_button']};
        color: #FFFFFF;
    }}

    QDialog#phaseDialog QPushButton:hover {{
        background-color: {p['dialog_button_hover']};
    }}
    """
