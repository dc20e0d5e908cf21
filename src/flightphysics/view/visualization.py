"""
Visualization Base
==================
Common lifecycle of every animated drawing.

Why is this file needed?
------------------------
1. Lifecycle: `start()`, `stop()` and `destroy()` are idempotent and register a
   single frame callback with the shared ticker.
2. Ordering: within a frame the model is always advanced before it is drawn.
3. Robustness: a visualization created without a canvas logs an error and stays
   inert, every later call becomes a no-op instead of raising.

Subclasses set `KEY` and `OPTIONS`, build their model in `create_model()` and
paint it in `render()`.
"""
from __future__ import annotations

import copy
import functools
import logging
from typing import TYPE_CHECKING, Any, Callable, Optional, TypeVar

from PySide6.QtGui import QPainter

if TYPE_CHECKING:
    from flightphysics.app.ticker import Ticker
    from flightphysics.view.canvas import Canvas

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable[..., Any])


def requires_canvas(method: F) -> F:
    """Turns the decorated method into a no-op on an inert visualization."""
    @functools.wraps(method)
    def wrapper(self: Visualization, *args: Any, **kwargs: Any) -> Any:
        if self.is_inert:
            return None
        return method(self, *args, **kwargs)
    return wrapper  # type: ignore[return-value]


class Visualization:
    KEY: str = ""
    OPTIONS: type = object
    ANIMATED: bool = True

    def __init__(self, surface: Optional[Canvas], ticker: Ticker, options: Any = None) -> None:
        self.surface = surface
        self.ticker = ticker
        self.options = copy.copy(options) if options is not None else self.OPTIONS()
        self.model: Any = None
        self._running = False

        if surface is None:
            logger.error(f"Canvas '{self.KEY}' not found, {type(self).__name__} stays inactive")
            return

        self.model = self.create_model(surface.width(), surface.height())
        surface.attach(self)
        logger.info(f"{type(self).__name__} initialized on '{self.KEY}'")
        self.draw()

    # ---- to be implemented by subclasses ----

    def create_model(self, width: float, height: float) -> Any:
        raise NotImplementedError

    def render(self, painter: QPainter, width: float, height: float) -> None:
        raise NotImplementedError

    # ---- state ----

    @property
    def is_running(self) -> bool:
        return self._running

    @property
    def is_inert(self) -> bool:
        return self.model is None

    # ---- lifecycle ----

    @requires_canvas
    def start(self) -> None:
        if self._running or not self.ANIMATED:
            return
        self._running = True
        self.ticker.register(self._on_frame)
        logger.debug(f"{type(self).__name__} started")

    def stop(self) -> None:
        if not self._running:
            return
        self._running = False
        self.ticker.unregister(self._on_frame)
        logger.debug(f"{type(self).__name__} stopped")

    def destroy(self) -> None:
        if self.is_inert:
            return
        self.stop()
        self.release()
        self.model = None
        if self.surface is not None:
            self.surface.detach()
        logger.info(f"{type(self).__name__} destroyed")

    def release(self) -> None:
        """Hook to drop model state before the model itself is released."""

    # ---- frame ----

    def _on_frame(self, dt: float) -> None:
        if self.is_inert:
            return
        self.update(dt)
        self.draw()

    @requires_canvas
    def update(self, dt: float) -> None:
        self.model.update(dt)

    @requires_canvas
    def draw(self) -> None:
        """Schedule a repaint while animating, repaint synchronously when idle."""
        if self._running:
            self.surface.update()
        else:
            self.surface.repaint()

    def redraw_if_idle(self) -> None:
        if not self._running:
            self.draw()

    @requires_canvas
    def paint(self, painter: QPainter, width: float, height: float) -> None:
        self.render(painter, width, height)

    @requires_canvas
    def resize(self, width: float, height: float) -> None:
        if width <= 0 or height <= 0:
            return
        self.model.resize(width, height)
