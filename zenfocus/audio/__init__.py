"""Audio package."""

from .sounds import SoundManager, SOUND_NAMES, PHASE_CUES

__all__ = ["SoundManager", "SOUND_NAMES", "PHASE_CUES"]
