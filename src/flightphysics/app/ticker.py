"""
Frame Ticker
============
Cooperative per-frame scheduling for the animated visualizations.

Every registered callback receives the time (seconds) elapsed since its OWN
previous frame. Registering a callback resets its baseline, so a stopped and
restarted animation never receives one huge catch-up step.

Classes:
    Ticker: Clock agnostic scheduler, advanced manually by calling `tick()`.
    QtTicker: Ticker driven by a QTimer that only runs while something is registered.
"""
from __future__ import annotations

import logging
import time
from typing import Callable, Optional

from PySide6.QtCore import QObject, Qt, QTimer

from flightphysics.config import FRAME_INTERVAL_MS

logger = logging.getLogger(__name__)

FrameCallback = Callable[[float], None]


class Ticker:
    def __init__(self, clock: Callable[[], float] = time.perf_counter) -> None:
        self._clock = clock
        # callback -> timestamp of its previous frame
        self._callbacks: dict[FrameCallback, float] = {}

    def __len__(self) -> int:
        return len(self._callbacks)

    def register(self, callback: FrameCallback) -> None:
        """Add a frame callback, or reset its baseline if it is already registered."""
        self._callbacks[callback] = self._clock()
        self._registrations_changed()

    def unregister(self, callback: FrameCallback) -> None:
        """Remove a frame callback. Takes effect immediately, even during a frame."""
        if self._callbacks.pop(callback, None) is not None:
            self._registrations_changed()

    def tick(self, now: Optional[float] = None) -> None:
        """Run one frame for every registered callback."""
        if now is None:
            now = self._clock()

        for callback in list(self._callbacks):
            previous = self._callbacks.get(callback)
            if previous is None:
                # unregistered by an earlier callback of this frame
                continue
            self._callbacks[callback] = now
            callback(max(0.0, now - previous))

    def _registrations_changed(self) -> None:
        """Hook for subclasses that own a real timer."""


class QtTicker(Ticker):
    """Runs `tick()` from a QTimer on the GUI thread."""

    def __init__(self, interval_ms: int = FRAME_INTERVAL_MS, parent: Optional[QObject] = None) -> None:
        super().__init__()
        self._timer = QTimer(parent)
        self._timer.setInterval(interval_ms)
        self._timer.setTimerType(Qt.TimerType.PreciseTimer)
        self._timer.timeout.connect(self.tick)

    @property
    def is_active(self) -> bool:
        return self._timer.isActive()

    def _registrations_changed(self) -> None:
        if self._callbacks and not self._timer.isActive():
            self._timer.start()
            logger.debug("Frame timer started")
        elif not self._callbacks and self._timer.isActive():
            self._timer.stop()
            logger.debug("Frame timer stopped")
