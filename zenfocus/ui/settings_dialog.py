"""Settings dialog for Zen Focus.

Duration edits go straight to the engine so a paused countdown shows the
new length immediately.  The engine's clamped value is written back into
the ``Settings`` instance, which the caller keeps.
"""

from __future__ import annotations

from typing import Callable

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import (
    QDialog, QVBoxLayout, QHBoxLayout, QFormLayout,
    QLabel, QSpinBox, QSlider, QCheckBox, QPushButton,
    QWidget,
)

from ..settings import Settings
from ..timer.engine import TimerEngine, FOCUS_RANGE, BREAK_RANGE


class SettingsDialog(QDialog):
    """Modal dialog for timer lengths and sound preferences."""

    def __init__(
        self,
        settings: Settings,
        engine: TimerEngine,
        parent: QWidget | None = None,
        *,
        sound_preview_callback: Callable[[], None] | None = None,
    ) -> None:
        super().__init__(parent)
        self.setWindowTitle("Settings")
        self.setMinimumWidth(360)
        self.setModal(True)

        self._settings = settings
        self._engine = engine
        self._sound_preview = sound_preview_callback

        self._build_ui()
        self._populate()
        self._connect_signals()

    # ══════════════════════════════════════════════════════════════════
    #  BUILD UI
    # ══════════════════════════════════════════════════════════════════

    def _build_ui(self) -> None:
        root = QVBoxLayout(self)
        root.setContentsMargins(24, 20, 24, 20)
        root.setSpacing(16)

        form = QFormLayout()
        form.setContentsMargins(0, 0, 0, 0)
        form.setHorizontalSpacing(20)
        form.setVerticalSpacing(10)

        self._focus_spin = QSpinBox()
        self._focus_spin.setRange(*FOCUS_RANGE)
        self._focus_spin.setSuffix(" min")
        form.addRow("Focus Duration (minutes):", self._focus_spin)

        self._break_spin = QSpinBox()
        self._break_spin.setRange(*BREAK_RANGE)
        self._break_spin.setSuffix(" min")
        form.addRow("Break Duration (minutes):", self._break_spin)

        self._sound_cb = QCheckBox("Play a sound when a phase ends")
        form.addRow("", self._sound_cb)

        vol_row = QHBoxLayout()
        vol_row.setSpacing(10)
        self._vol_slider = QSlider(Qt.Orientation.Horizontal)
        self._vol_slider.setRange(0, 100)
        self._vol_label = QLabel()
        self._vol_label.setMinimumWidth(36)
        vol_row.addWidget(self._vol_slider)
        vol_row.addWidget(self._vol_label)

        vol_wrapper = QWidget()
        vol_wrapper.setLayout(vol_row)
        form.addRow("Volume:", vol_wrapper)

        root.addLayout(form)

        root.addStretch()
        save_btn = QPushButton("Save Changes")
        save_btn.clicked.connect(self.accept)
        root.addWidget(save_btn)

    def _populate(self) -> None:
        s = self._settings
        self._focus_spin.setValue(self._engine.focus_minutes)
        self._break_spin.setValue(self._engine.break_minutes)
        self._sound_cb.setChecked(s.sound_enabled)
        self._vol_slider.setValue(s.sound_volume)
        self._vol_label.setText(f"{s.sound_volume}%")

    def _connect_signals(self) -> None:
        self._focus_spin.valueChanged.connect(self._on_focus_changed)
        self._break_spin.valueChanged.connect(self._on_break_changed)
        self._sound_cb.toggled.connect(self._on_sound_toggled)
        self._vol_slider.valueChanged.connect(self._on_volume_changed)
        self._vol_slider.sliderReleased.connect(self._on_volume_released)

    # ══════════════════════════════════════════════════════════════════
    #  CHANGE HANDLERS
    # ══════════════════════════════════════════════════════════════════

    def _on_focus_changed(self, value: int) -> None:
        self._engine.configure(focus_duration=value)
        self._settings.focus_minutes = self._engine.focus_minutes

    def _on_break_changed(self, value: int) -> None:
        self._engine.configure(break_duration=value)
        self._settings.break_minutes = self._engine.break_minutes

    def _on_sound_toggled(self, checked: bool) -> None:
        self._settings.sound_enabled = checked

    def _on_volume_changed(self, value: int) -> None:
        self._vol_label.setText(f"{value}%")
        self._settings.sound_volume = value

    def _on_volume_released(self) -> None:
        """Preview the new volume when the slider is let go."""
        if self._sound_preview:
            self._sound_preview()

    # ══════════════════════════════════════════════════════════════════
    #  PUBLIC
    # ══════════════════════════════════════════════════════════════════

    @property
    def settings(self) -> Settings:
        return self._settings
