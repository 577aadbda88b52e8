"""User preferences for Zen Focus.

Preferences are kept in memory for the lifetime of the process; nothing
is written to disk.

Usage::

    settings = Settings(focus_minutes=50)
    engine = TimerEngine(focus_minutes=settings.focus_minutes)
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Settings:
    """All user-configurable preferences."""

    # ── timer ─────────────────────────────────────────────────────────
    focus_minutes: int = 25
    break_minutes: int = 5

    # ── audio ─────────────────────────────────────────────────────────
    sound_enabled: bool = True
    sound_volume: int = 70                 # 0-100

    # ── window ────────────────────────────────────────────────────────
    window_width: int = 440
    window_height: int = 640
