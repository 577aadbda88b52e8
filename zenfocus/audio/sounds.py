"""Completion cues synthesised with numpy and played via QSoundEffect.

Each cue is a short sine-wave figure shaped by an ADSR envelope and
written once to a WAV cache, so later launches only load files.

Sound names
-----------
- ``focus_complete`` — soft bell, time for a break
- ``break_complete`` — ascending chime, back to work
- ``click``          — volume preview tick
"""

from __future__ import annotations

import io
import logging
import wave
from pathlib import Path
from typing import Callable

import numpy as np

from PyQt6.QtCore import QObject, QUrl
from PyQt6.QtMultimedia import QSoundEffect

from ..timer.engine import Phase

logger = logging.getLogger(__name__)


# ── paths ────────────────────────────────────────────────────────────────

SOUNDS_DIR = Path.home() / ".cache" / "zenfocus" / "sounds"

SOUND_NAMES = (
    "focus_complete",
    "break_complete",
    "click",
)

PHASE_CUES: dict[Phase, str] = {
    Phase.FOCUS: "focus_complete",
    Phase.BREAK: "break_complete",
}

SAMPLE_RATE = 44100


# ═══════════════════════════════════════════════════════════════════════════
#  WAV SYNTHESIS HELPERS
# ═══════════════════════════════════════════════════════════════════════════


def _make_envelope(
    length: int,
    attack: int = 200,
    decay: int = 400,
    sustain_level: float = 0.7,
    release: int = 800,
) -> np.ndarray:
    """ADSR envelope (all durations in samples)."""
    env = np.full(length, sustain_level, dtype=np.float64)
    a = min(attack, length)
    if a > 0:
        env[:a] = np.linspace(0.0, 1.0, a)
    d_end = min(a + decay, length)
    if d_end > a:
        env[a:d_end] = np.linspace(1.0, sustain_level, d_end - a)
    r_start = max(length - release, d_end)
    if r_start < length:
        env[r_start:] = np.linspace(sustain_level, 0.0, length - r_start)
    return env


def _sine(freq: float, duration_s: float) -> np.ndarray:
    t = np.linspace(0, duration_s, int(SAMPLE_RATE * duration_s), endpoint=False)
    return np.sin(2 * np.pi * freq * t)


def _silence(duration_s: float) -> np.ndarray:
    return np.zeros(int(SAMPLE_RATE * duration_s))


def _to_wav_bytes(samples: np.ndarray) -> bytes:
    """Convert float samples in -1..1 to 16-bit mono PCM WAV bytes."""
    pcm = (np.clip(samples, -1.0, 1.0) * 32767).astype(np.int16)

    buf = io.BytesIO()
    with wave.open(buf, "wb") as wf:
        wf.setnchannels(1)
        wf.setsampwidth(2)
        wf.setframerate(SAMPLE_RATE)
        wf.writeframes(pcm.tobytes())
    return buf.getvalue()


# ═══════════════════════════════════════════════════════════════════════════
#  SOUND GENERATORS
# ═══════════════════════════════════════════════════════════════════════════


def _generate_bell() -> bytes:
    """Focus complete — A4 bell with an octave overtone and a long tail."""
    duration = 1.2
    combined = _sine(440.0, duration) * 0.35 + _sine(880.0, duration) * 0.08
    env = _make_envelope(
        len(combined),
        attack=int(SAMPLE_RATE * 0.05),
        decay=int(SAMPLE_RATE * 0.3),
        sustain_level=0.25,
        release=int(SAMPLE_RATE * 0.7),
    )
    return _to_wav_bytes(combined * env)


def _generate_chime() -> bytes:
    """Break complete — C5, E5, G5 rising, last note held."""
    notes = [523.25, 659.25, 783.99]
    parts: list[np.ndarray] = []
    for i, freq in enumerate(notes):
        last = i == len(notes) - 1
        tone = _sine(freq, 0.4 if last else 0.12) * 0.5
        env = _make_envelope(
            len(tone),
            attack=100,
            decay=200,
            sustain_level=0.45 if last else 0.35,
            release=900 if last else 300,
        )
        parts.append(tone * env)
        if not last:
            parts.append(_silence(0.03))
    return _to_wav_bytes(np.concatenate(parts))


def _generate_click() -> bytes:
    """Volume preview — a very short 1.2 kHz tick."""
    tick = _sine(1200.0, 0.015) * 0.2
    env = _make_envelope(len(tick), attack=20, decay=50, sustain_level=0.0, release=len(tick) - 70)
    # trailing silence keeps QSoundEffect from clipping the tail
    return _to_wav_bytes(np.concatenate([tick * env, _silence(0.03)]))


_GENERATORS: dict[str, Callable[[], bytes]] = {
    "focus_complete": _generate_bell,
    "break_complete": _generate_chime,
    "click": _generate_click,
}


# ═══════════════════════════════════════════════════════════════════════════
#  SOUND MANAGER
# ═══════════════════════════════════════════════════════════════════════════


class SoundManager(QObject):
    """Plays the cue for each finished phase.

    Usage::

        mgr = SoundManager(parent=self)
        engine.phase_completed.connect(mgr.on_phase_completed)
    """

    def __init__(
        self,
        parent: QObject | None = None,
        *,
        sounds_dir: Path | None = None,
    ) -> None:
        super().__init__(parent)
        self._enabled = True
        self._volume = 0.7  # 0.0–1.0
        self._sounds_dir = sounds_dir or SOUNDS_DIR
        self._effects: dict[str, QSoundEffect] = {}

        self._ensure_wav_files()
        self._load_effects()

    # ── public API ────────────────────────────────────────────────────

    def set_volume(self, level: int) -> None:
        """Set volume (0-100).  Updates all loaded effects."""
        self._volume = max(0, min(level, 100)) / 100.0
        for effect in self._effects.values():
            effect.setVolume(self._volume)

    def set_enabled(self, enabled: bool) -> None:
        self._enabled = enabled

    def play(self, name: str) -> None:
        """Play a sound by name.  No-op if disabled or name unknown."""
        if not self._enabled:
            return
        effect = self._effects.get(name)
        if effect is not None:
            effect.play()

    def on_phase_completed(self, phase: Phase) -> None:
        """Slot for ``TimerEngine.phase_completed``.  Never raises."""
        name = PHASE_CUES.get(phase)
        if name is None:
            return
        try:
            self.play(name)
        except Exception:
            logger.exception("Could not play %s cue", name)

    @property
    def volume(self) -> int:
        """Current volume as 0-100 integer."""
        return round(self._volume * 100)

    @property
    def enabled(self) -> bool:
        return self._enabled

    # ── internal ──────────────────────────────────────────────────────

    def _ensure_wav_files(self) -> None:
        """Write any missing WAV files to the cache directory."""
        try:
            self._sounds_dir.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            logger.warning("Sound cache %s unavailable: %s", self._sounds_dir, exc)
            return
        for name, gen_fn in _GENERATORS.items():
            path = self._sounds_dir / f"{name}.wav"
            if path.exists():
                continue
            try:
                path.write_bytes(gen_fn())
            except OSError as exc:
                logger.warning("Could not cache %s: %s", path, exc)

    def _load_effects(self) -> None:
        for name in SOUND_NAMES:
            path = self._sounds_dir / f"{name}.wav"
            if path.exists():
                effect = QSoundEffect(self)
                effect.setSource(QUrl.fromLocalFile(str(path)))
                effect.setVolume(self._volume)
                self._effects[name] = effect
