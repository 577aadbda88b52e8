"""Shared pytest fixtures for Zen Focus tests."""

import os
import sys

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PyQt6.QtWidgets import QApplication

from zenfocus.timer.engine import TimerEngine

from helpers import ManualScheduler


@pytest.fixture(scope="session")
def qapp():
    """A single QApplication instance shared across the entire test run."""
    app = QApplication.instance() or QApplication(sys.argv)
    yield app


@pytest.fixture
def scheduler():
    return ManualScheduler()


@pytest.fixture
def engine(qapp, scheduler):
    """Fresh TimerEngine with default durations and a manual tick source."""
    return TimerEngine(parent=None, scheduler=scheduler)


@pytest.fixture
def short_engine(qapp, scheduler):
    """1-minute focus, 1-minute break."""
    return TimerEngine(
        parent=None, focus_minutes=1, break_minutes=1, scheduler=scheduler,
    )
