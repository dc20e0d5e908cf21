"""
Shared fixtures.

Qt runs on the offscreen platform so the widget tests need no display.
"""
import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest


class FakeClock:
    """Manually advanced clock for deterministic ticker tests."""

    def __init__(self, start: float = 0.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture(scope="session")
def qapp():
    from PySide6.QtWidgets import QApplication

    app = QApplication.instance() or QApplication([])
    yield app
