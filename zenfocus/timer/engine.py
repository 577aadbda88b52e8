"""Focus/break countdown state machine for Zen Focus.

State
-----
FOCUS or BREAK, each either running or paused.  Alongside the phase the
engine keeps the seconds remaining, the number of completed focus
sessions and the two configured phase lengths (whole minutes).

Transitions
-----------
paused → running                     (start)
running → paused                     (pause)
Any → FOCUS, paused, full duration   (reset)
running, remaining hits 0            (advance)
    FOCUS → BREAK, sessions += 1, paused
    BREAK → FOCUS, paused

The engine stops at every phase boundary; the next phase only begins
when the user calls ``start()`` again.

Ticks come from an injected ``TickScheduler``.  The engine never owns a
thread, so tests drive ``advance()`` directly or through a manual
scheduler.
"""

from __future__ import annotations

import logging
import numbers
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Callable, Protocol

from PyQt6.QtCore import QObject, QTimer, pyqtSignal

logger = logging.getLogger(__name__)


# ── enums ─────────────────────────────────────────────────────────────────


class Phase(Enum):
    FOCUS = "focus"
    BREAK = "break"


# ── constants ─────────────────────────────────────────────────────────────

FOCUS_RANGE: tuple[int, int] = (1, 60)  # minutes
BREAK_RANGE: tuple[int, int] = (1, 30)

DEFAULT_DURATIONS: dict[Phase, int] = {
    Phase.FOCUS: 25,
    Phase.BREAK: 5,
}

TICK_INTERVAL_MS = 1000

_RANGES: dict[Phase, tuple[int, int]] = {
    Phase.FOCUS: FOCUS_RANGE,
    Phase.BREAK: BREAK_RANGE,
}


def coerce_minutes(value: object, bounds: tuple[int, int]) -> int | None:
    """Parse *value* as whole minutes and clamp it into *bounds*.

    Integers pass through, floats and ``Decimal``s are truncated, and
    strings such as ``"40"`` or ``" 12.5 "`` are parsed the same way.
    Numeric literals too large for a float still clamp to the nearest
    bound.  Returns ``None`` for anything that is not a finite number
    (booleans, empty strings, ``"abc"``, NaN, infinities, other types).
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, str):
        try:
            number = Decimal(value.strip())
        except InvalidOperation:
            return None
    elif isinstance(value, Decimal):
        number = value
    elif isinstance(value, numbers.Integral):
        number = Decimal(int(value))
    elif isinstance(value, numbers.Real):
        try:
            number = Decimal(float(value))
        except OverflowError:
            return None
    else:
        return None

    if not number.is_finite():
        return None
    low, high = bounds
    return int(max(Decimal(low), min(Decimal(high), number)))


# ── render model ──────────────────────────────────────────────────────────


@dataclass(frozen=True)
class TimerSnapshot:
    """Read-only projection of the engine handed to the presentation layer."""

    phase: Phase
    minutes_remaining: int
    seconds_remaining: int
    running: bool
    sessions_completed: int
    progress_percent: float

    @property
    def remaining(self) -> int:
        """Total seconds left in the phase."""
        return self.minutes_remaining * 60 + self.seconds_remaining

    @property
    def time_text(self) -> str:
        return f"{self.minutes_remaining:02d}:{self.seconds_remaining:02d}"


# ── tick scheduling ───────────────────────────────────────────────────────


class TickScheduler(Protocol):
    """Calls back once per second between ``start()`` and ``stop()``."""

    def start(self, callback: Callable[[], object]) -> None: ...

    def stop(self) -> None: ...

    @property
    def active(self) -> bool: ...


class QtTickScheduler(QObject):
    """``TickScheduler`` backed by a repeating ``QTimer``."""

    def __init__(
        self,
        parent: QObject | None = None,
        *,
        interval_ms: int = TICK_INTERVAL_MS,
    ) -> None:
        super().__init__(parent)
        self._callback: Callable[[], object] | None = None
        self._qt_timer = QTimer(self)
        self._qt_timer.setInterval(interval_ms)
        self._qt_timer.timeout.connect(self._on_timeout)

    @property
    def active(self) -> bool:
        return self._qt_timer.isActive()

    def start(self, callback: Callable[[], object]) -> None:
        self._callback = callback
        self._qt_timer.start()

    def stop(self) -> None:
        self._qt_timer.stop()
        self._callback = None

    def _on_timeout(self) -> None:
        if self._callback is not None:
            self._callback()


# ── engine ────────────────────────────────────────────────────────────────


class TimerEngine(QObject):
    """Two-phase countdown with live reconfiguration and session counting.

    Signals
    -------
    snapshot_changed(snapshot: TimerSnapshot)
        Emitted after every command and every effective tick.
    phase_completed(phase: Phase)
        Emitted exactly once per phase boundary with the phase that just
        finished.  State has already moved on when it fires.
    """

    snapshot_changed = pyqtSignal(object)
    phase_completed = pyqtSignal(object)

    def __init__(
        self,
        parent: QObject | None = None,
        *,
        focus_minutes: int = DEFAULT_DURATIONS[Phase.FOCUS],
        break_minutes: int = DEFAULT_DURATIONS[Phase.BREAK],
        scheduler: TickScheduler | None = None,
    ) -> None:
        super().__init__(parent)

        # ── configuration ─────────────────────────────────────────────
        self._durations: dict[Phase, int] = {
            Phase.FOCUS: self._initial_minutes(Phase.FOCUS, focus_minutes),
            Phase.BREAK: self._initial_minutes(Phase.BREAK, break_minutes),
        }

        # ── countdown state ───────────────────────────────────────────
        self._phase: Phase = Phase.FOCUS
        self._remaining: int = self._durations[Phase.FOCUS] * 60
        self._running: bool = False
        self._sessions_completed: int = 0
        self._disposed: bool = False

        # ── tick source ───────────────────────────────────────────────
        self._scheduler: TickScheduler = (
            scheduler if scheduler is not None else QtTickScheduler(self)
        )

    @staticmethod
    def _initial_minutes(phase: Phase, value: object) -> int:
        minutes = coerce_minutes(value, _RANGES[phase])
        return DEFAULT_DURATIONS[phase] if minutes is None else minutes

    # ══════════════════════════════════════════════════════════════════
    #  PUBLIC PROPERTIES
    # ══════════════════════════════════════════════════════════════════

    @property
    def phase(self) -> Phase:
        return self._phase

    @property
    def remaining(self) -> int:
        """Seconds left on the clock."""
        return self._remaining

    @property
    def is_running(self) -> bool:
        return self._running

    @property
    def sessions_completed(self) -> int:
        return self._sessions_completed

    @property
    def focus_minutes(self) -> int:
        return self._durations[Phase.FOCUS]

    @property
    def break_minutes(self) -> int:
        return self._durations[Phase.BREAK]

    def duration_for(self, phase: Phase) -> int:
        """Configured length of *phase* in seconds."""
        return self._durations[phase] * 60

    def progress_percent(self) -> float:
        """0 → 100 progress through the current phase."""
        total = self.duration_for(self._phase)
        elapsed = total - self._remaining
        return max(0.0, min(100.0, elapsed / total * 100))

    def snapshot(self) -> TimerSnapshot:
        minutes, seconds = divmod(self._remaining, 60)
        return TimerSnapshot(
            phase=self._phase,
            minutes_remaining=minutes,
            seconds_remaining=seconds,
            running=self._running,
            sessions_completed=self._sessions_completed,
            progress_percent=self.progress_percent(),
        )

    # ══════════════════════════════════════════════════════════════════
    #  COMMANDS
    # ══════════════════════════════════════════════════════════════════

    def start(self) -> TimerSnapshot:
        """Resume counting down.  No-op if already running."""
        if not self._running and not self._disposed:
            self._running = True
            self._scheduler.start(self.advance)
            logger.debug("Started %s with %ds left", self._phase.value, self._remaining)
        return self._publish()

    def pause(self) -> TimerSnapshot:
        """Freeze the countdown.  No-op if already paused."""
        if self._running:
            self._stop_ticking()
            logger.debug("Paused %s with %ds left", self._phase.value, self._remaining)
        return self._publish()

    def toggle(self) -> TimerSnapshot:
        """Play/pause button: pause when running, start otherwise."""
        if self._running:
            return self.pause()
        return self.start()

    def reset(self) -> TimerSnapshot:
        """Back to a paused, full-length focus phase.

        Completed sessions and both configured durations are kept.
        """
        self._stop_ticking()
        self._phase = Phase.FOCUS
        self._remaining = self.duration_for(Phase.FOCUS)
        logger.debug("Reset to focus (%ds)", self._remaining)
        return self._publish()

    def configure(
        self,
        focus_duration: object = None,
        break_duration: object = None,
    ) -> TimerSnapshot:
        """Change phase lengths in minutes.

        Each provided value is clamped into its range (focus 1-60, break
        1-30).  Values that are not numbers keep the previous setting.
        When the edited phase is the current one and the engine is paused,
        the countdown jumps to the new length right away; a running
        countdown picks it up at the next reset or transition.
        """
        for phase, value in (
            (Phase.FOCUS, focus_duration),
            (Phase.BREAK, break_duration),
        ):
            if value is None:
                continue
            minutes = coerce_minutes(value, _RANGES[phase])
            if minutes is None:
                logger.debug(
                    "Ignoring %s duration %r; keeping %d min",
                    phase.value, value, self._durations[phase],
                )
                continue

            self._durations[phase] = minutes
            logger.debug("%s duration set to %d min", phase.value, minutes)
            if phase is not self._phase:
                continue
            if not self._running:
                self._remaining = minutes * 60
            else:
                # remaining may never exceed the phase length
                self._remaining = min(self._remaining, minutes * 60)

        return self._publish()

    def dispose(self) -> None:
        """Stop ticking for good.

        Later commands still return snapshots but never restart the
        scheduler or emit signals.
        """
        self._stop_ticking()
        self._disposed = True

    # ══════════════════════════════════════════════════════════════════
    #  TICK
    # ══════════════════════════════════════════════════════════════════

    def advance(self) -> TimerSnapshot:
        """One elapsed second.  Does nothing while paused."""
        if not self._running:
            return self.snapshot()

        if self._remaining > 0:
            self._remaining -= 1
        if self._remaining == 0:
            self._complete_phase()
        return self._publish()

    # ══════════════════════════════════════════════════════════════════
    #  INTERNAL
    # ══════════════════════════════════════════════════════════════════

    def _complete_phase(self) -> None:
        finished = self._phase
        self._stop_ticking()

        if finished is Phase.FOCUS:
            self._sessions_completed += 1
            self._phase = Phase.BREAK
        else:
            self._phase = Phase.FOCUS
        self._remaining = self.duration_for(self._phase)

        logger.info(
            "%s phase complete (%d sessions); next: %s",
            finished.value, self._sessions_completed, self._phase.value,
        )
        if not self._disposed:
            self.phase_completed.emit(finished)

    def _stop_ticking(self) -> None:
        self._running = False
        self._scheduler.stop()

    def _publish(self) -> TimerSnapshot:
        snap = self.snapshot()
        if not self._disposed:
            self.snapshot_changed.emit(snap)
        return snap
