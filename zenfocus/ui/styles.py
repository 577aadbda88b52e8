"""QSS stylesheet and per-phase colours for Zen Focus."""

from __future__ import annotations

from ..timer.engine import Phase

# ── phase colours: (accent, badge background) ────────────────────────────

PHASE_COLORS: dict[Phase, tuple[str, str]] = {
    Phase.FOCUS: ("#1E293B", "#F1F5F9"),   # slate
    Phase.BREAK: ("#10B981", "#ECFDF5"),   # emerald
}

PALETTE: dict[str, str] = {
    "bg":         "#F5F5F4",
    "card":       "#FFFFFF",
    "text":       "#1E293B",
    "text_muted": "#64748B",
    "track":      "#F1F5F9",
    "border":     "#E2E8F0",
}


def build_stylesheet(palette: dict[str, str] = PALETTE) -> str:
    p = palette
    return f"""
    QWidget {{
        background-color: {p['bg']};
        color: {p['text']};
        font-family: "Helvetica Neue", Arial;
        font-size: 14px;
    }}

    QFrame#card {{
        background-color: {p['card']};
        border-radius: 24px;
    }}

    QLabel#title {{
        font-size: 32px;
        font-weight: 300;
    }}

    QLabel#subtitle, QLabel#sessionsCaption {{
        color: {p['text_muted']};
        font-size: 13px;
    }}

    QLabel#timeText {{
        background-color: transparent;
        font-size: 88px;
        font-weight: 200;
    }}

    QLabel#sessionsCount {{
        font-size: 22px;
        font-weight: 300;
    }}

    QPushButton {{
        background-color: transparent;
        border: 1px solid {p['border']};
        border-radius: 18px;
        padding: 8px 18px;
    }}

    QProgressBar {{
        background-color: {p['track']};
        border: none;
        max-height: 4px;
    }}
    """


def phase_badge_style(phase: Phase) -> str:
    accent, background = PHASE_COLORS[phase]
    return (
        f"background-color: {background}; color: {accent};"
        " border-radius: 10px; padding: 4px 14px;"
        " font-size: 11px; font-weight: 600; letter-spacing: 1px;"
    )


def primary_button_style(phase: Phase) -> str:
    accent, _ = PHASE_COLORS[phase]
    return (
        f"background-color: {accent}; color: white; border: none;"
        " border-radius: 28px; padding: 14px 28px; font-weight: 600;"
    )


def progress_chunk_style(phase: Phase) -> str:
    accent, _ = PHASE_COLORS[phase]
    return f"QProgressBar::chunk {{ background-color: {accent}; }}"
