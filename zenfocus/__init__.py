"""Zen Focus — a two-phase focus/break timer."""

__version__ = "0.1.0"
