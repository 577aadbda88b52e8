"""Main application window for Zen Focus."""

from __future__ import annotations

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QAction, QKeySequence
from PyQt6.QtWidgets import QMainWindow, QWidget, QVBoxLayout

from .timer.engine import TimerEngine
from .ui.timer_widget import TimerWidget
from .ui.styles import build_stylesheet
from .settings import Settings
from .audio.sounds import SoundManager


class ZenFocusApp(QMainWindow):
    """Main application window."""

    def __init__(
        self,
        settings: Settings | None = None,
        *,
        engine: TimerEngine | None = None,
        sound_manager: SoundManager | None = None,
    ) -> None:
        super().__init__()
        self.setWindowTitle("Zen Focus")

        # ── settings ──────────────────────────────────────────────────
        self._settings: Settings = settings or Settings()
        self.resize(self._settings.window_width, self._settings.window_height)

        # ── engine ────────────────────────────────────────────────────
        if engine is None:
            engine = TimerEngine(
                self,
                focus_minutes=self._settings.focus_minutes,
                break_minutes=self._settings.break_minutes,
            )
        self._timer_engine = engine
        # an injected engine's durations win over the stored preferences
        self._settings.focus_minutes = engine.focus_minutes
        self._settings.break_minutes = engine.break_minutes

        # ── sound manager ─────────────────────────────────────────────
        if sound_manager is None:
            sound_manager = SoundManager(parent=self)
        self._sound_manager = sound_manager
        self._apply_sound_settings()
        self._timer_engine.phase_completed.connect(
            self._sound_manager.on_phase_completed
        )

        # ── central widget ────────────────────────────────────────────
        self.setStyleSheet(build_stylesheet())
        central = QWidget()
        self.setCentralWidget(central)
        layout = QVBoxLayout(central)
        layout.setContentsMargins(24, 32, 24, 32)

        self._timer_widget = TimerWidget(self._timer_engine, central)
        self._timer_widget.settings_requested.connect(self._open_settings)
        layout.addWidget(self._timer_widget)

        self._setup_shortcuts()

    # ══════════════════════════════════════════════════════════════════
    #  SETTINGS
    # ══════════════════════════════════════════════════════════════════

    def _open_settings(self) -> None:
        """Open the settings dialog; durations apply live, sound on close."""
        from .ui.settings_dialog import SettingsDialog

        def _preview_click():
            self._apply_sound_settings()
            self._sound_manager.play("click")

        dlg = SettingsDialog(
            self._settings,
            self._timer_engine,
            parent=self,
            sound_preview_callback=_preview_click,
        )
        dlg.exec()
        self._apply_sound_settings()

    def _apply_sound_settings(self) -> None:
        self._sound_manager.set_volume(self._settings.sound_volume)
        self._sound_manager.set_enabled(self._settings.sound_enabled)

    # ══════════════════════════════════════════════════════════════════
    #  KEYBOARD SHORTCUTS
    # ══════════════════════════════════════════════════════════════════

    def _setup_shortcuts(self) -> None:
        """Ctrl+, opens settings (Space/Esc handled via keyPressEvent)."""
        prefs_action = QAction("Settings…", self)
        prefs_action.setShortcut(QKeySequence("Ctrl+,"))
        prefs_action.triggered.connect(self._open_settings)
        self.addAction(prefs_action)

    def keyPressEvent(self, event) -> None:  # type: ignore[override]
        """Space starts or pauses, Escape resets."""
        key = event.key()
        if key == Qt.Key.Key_Space and not event.modifiers():
            self._timer_engine.toggle()
            event.accept()
            return
        if key == Qt.Key.Key_Escape:
            self._timer_engine.reset()
            event.accept()
            return
        super().keyPressEvent(event)

    # ══════════════════════════════════════════════════════════════════
    #  WINDOW EVENTS
    # ══════════════════════════════════════════════════════════════════

    def closeEvent(self, event) -> None:  # type: ignore[override]
        """Stop the tick source before the window goes away."""
        self._timer_engine.dispose()
        event.accept()

    # ── accessors (tests, embedding) ─────────────────────────────────

    @property
    def engine(self) -> TimerEngine:
        return self._timer_engine

    @property
    def settings(self) -> Settings:
        return self._settings
