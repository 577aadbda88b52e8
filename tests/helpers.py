"""Shared test helpers for Zen Focus."""

from __future__ import annotations

from typing import Callable

from zenfocus.timer.engine import TimerEngine


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


class ManualScheduler:
    """Tick source driven by the test instead of a clock."""

    def __init__(self):
        self._callback: Callable[[], object] | None = None
        self.starts = 0
        self.stops = 0

    @property
    def active(self) -> bool:
        return self._callback is not None

    def start(self, callback: Callable[[], object]) -> None:
        self._callback = callback
        self.starts += 1

    def stop(self) -> None:
        self._callback = None
        self.stops += 1

    def fire(self, times: int = 1) -> int:
        """Deliver up to *times* ticks; stops early once inactive.

        Returns the number of ticks actually delivered.
        """
        delivered = 0
        for _ in range(times):
            if self._callback is None:
                break
            self._callback()
            delivered += 1
        return delivered


def force_phase_end(engine: TimerEngine) -> None:
    """Put a running engine at the zero boundary and tick once."""
    engine._remaining = 0
    engine._running = True
    engine.advance()
