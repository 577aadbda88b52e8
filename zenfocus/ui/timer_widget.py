"""Main timer card.

Layout (top → bottom):
    - Title and phase subtitle
    - Card: progress bar, MM:SS readout, phase badge, control row
    - Completed-sessions counter

The widget only reads ``TimerSnapshot``s and calls engine commands.
"""

from __future__ import annotations

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout,
    QLabel, QPushButton, QFrame, QProgressBar,
)

from ..timer.engine import TimerEngine, TimerSnapshot, Phase
from .styles import phase_badge_style, primary_button_style, progress_chunk_style


PHASE_LABELS: dict[Phase, str] = {
    Phase.FOCUS: "FOCUS TIME",
    Phase.BREAK: "BREAK TIME",
}

PHASE_SUBTITLES: dict[Phase, str] = {
    Phase.FOCUS: "Deep work session",
    Phase.BREAK: "Take a mindful break",
}

_PROGRESS_STEPS = 1000


class TimerWidget(QWidget):
    """Countdown display plus reset / start-pause / settings buttons."""

    settings_requested = pyqtSignal()

    def __init__(self, engine: TimerEngine, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._engine = engine
        self._build_ui()
        self._connect_signals()
        self._refresh_display(engine.snapshot())

    # ── build ─────────────────────────────────────────────────────────────

    def _build_ui(self) -> None:
        root = QVBoxLayout(self)
        root.setContentsMargins(0, 0, 0, 0)
        root.setSpacing(0)
        root.setAlignment(Qt.AlignmentFlag.AlignCenter)

        # ── header ───────────────────────────────────────────────────
        self._title = QLabel("Zen Focus", self)
        self._title.setObjectName("title")
        self._title.setAlignment(Qt.AlignmentFlag.AlignCenter)
        root.addWidget(self._title)

        self._subtitle = QLabel(self)
        self._subtitle.setObjectName("subtitle")
        self._subtitle.setAlignment(Qt.AlignmentFlag.AlignCenter)
        root.addWidget(self._subtitle)

        root.addSpacing(32)

        # ── card ─────────────────────────────────────────────────────
        card = QFrame(self)
        card.setObjectName("card")
        root.addWidget(card)

        layout = QVBoxLayout(card)
        layout.setContentsMargins(0, 0, 0, 32)
        layout.setSpacing(0)

        self._progress = QProgressBar(card)
        self._progress.setRange(0, _PROGRESS_STEPS)
        self._progress.setTextVisible(False)
        layout.addWidget(self._progress)

        layout.addSpacing(32)

        self._time_label = QLabel(card)
        self._time_label.setObjectName("timeText")
        self._time_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self._time_label)

        badge_row = QHBoxLayout()
        badge_row.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self._badge = QLabel(card)
        badge_row.addWidget(self._badge)
        layout.addLayout(badge_row)

        layout.addSpacing(28)

        # ── controls ─────────────────────────────────────────────────
        btn_row = QHBoxLayout()
        btn_row.setSpacing(16)
        btn_row.setAlignment(Qt.AlignmentFlag.AlignCenter)

        self._reset_btn = QPushButton("Reset", card)
        self._reset_btn.setToolTip("Reset")
        self._start_pause_btn = QPushButton("Start", card)
        self._settings_btn = QPushButton("Settings", card)
        self._settings_btn.setToolTip("Settings")

        btn_row.addWidget(self._reset_btn)
        btn_row.addWidget(self._start_pause_btn)
        btn_row.addWidget(self._settings_btn)
        layout.addLayout(btn_row)

        root.addSpacing(24)

        # ── sessions counter ─────────────────────────────────────────
        sessions_row = QHBoxLayout()
        sessions_row.setSpacing(12)
        sessions_row.setAlignment(Qt.AlignmentFlag.AlignCenter)
        caption = QLabel("Sessions completed today", self)
        caption.setObjectName("sessionsCaption")
        self._sessions_label = QLabel(self)
        self._sessions_label.setObjectName("sessionsCount")
        sessions_row.addWidget(caption)
        sessions_row.addWidget(self._sessions_label)
        root.addLayout(sessions_row)

    # ── signals ───────────────────────────────────────────────────────────

    def _connect_signals(self) -> None:
        self._start_pause_btn.clicked.connect(self._engine.toggle)
        self._reset_btn.clicked.connect(self._engine.reset)
        self._settings_btn.clicked.connect(self.settings_requested)

        self._engine.snapshot_changed.connect(self._refresh_display)

    # ── rendering ─────────────────────────────────────────────────────────

    def _refresh_display(self, snap: TimerSnapshot) -> None:
        self._time_label.setText(snap.time_text)
        self._subtitle.setText(PHASE_SUBTITLES[snap.phase])
        self._badge.setText(PHASE_LABELS[snap.phase])
        self._badge.setStyleSheet(phase_badge_style(snap.phase))

        self._start_pause_btn.setText("Pause" if snap.running else "Start")
        self._start_pause_btn.setStyleSheet(primary_button_style(snap.phase))

        self._progress.setStyleSheet(progress_chunk_style(snap.phase))
        self._progress.setValue(round(snap.progress_percent * _PROGRESS_STEPS / 100))

        self._sessions_label.setText(str(snap.sessions_completed))
