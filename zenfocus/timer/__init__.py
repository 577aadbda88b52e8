"""Timer package."""

from .engine import (
    TimerEngine,
    TimerSnapshot,
    TickScheduler,
    QtTickScheduler,
    Phase,
    coerce_minutes,
    DEFAULT_DURATIONS,
    FOCUS_RANGE,
    BREAK_RANGE,
    TICK_INTERVAL_MS,
)

__all__ = [
    "TimerEngine",
    "TimerSnapshot",
    "TickScheduler",
    "QtTickScheduler",
    "Phase",
    "coerce_minutes",
    "DEFAULT_DURATIONS",
    "FOCUS_RANGE",
    "BREAK_RANGE",
    "TICK_INTERVAL_MS",
]
