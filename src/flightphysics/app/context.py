"""
Application Context
===================
Owns every visualization instance for the lifetime of the main window.

Why is this file needed?
------------------------
1. Wiring: It creates one visualization per registered canvas key, but only for
   the canvases that actually exist in the window.
2. Lifecycle: It starts the animated ones, and stops and destroys all of them on
   shutdown.
3. No globals: Panels receive their visualization from this object instead of
   reaching for module-level state.
"""
from __future__ import annotations

import copy
import logging
from typing import TYPE_CHECKING, Any, Iterable, Mapping, Optional

import flightphysics.view.visualizations  # noqa: F401  (registers the visualizations)
from flightphysics.app.registry import create_visualization, list_keys
from flightphysics.app.ticker import QtTicker, Ticker
from flightphysics.config import AUTOSTART, DEFAULT_OPTIONS

if TYPE_CHECKING:
    from flightphysics.view.canvas import Canvas
    from flightphysics.view.panels.base import BasePanel
    from flightphysics.view.visualization import Visualization

logger = logging.getLogger(__name__)


class AppContext:
    def __init__(self, ticker: Optional[Ticker] = None, options: Optional[Mapping[str, Any]] = None) -> None:
        self.ticker = ticker if ticker is not None else QtTicker()
        self.options: dict[str, Any] = copy.deepcopy(dict(DEFAULT_OPTIONS))
        if options:
            self.options.update(options)
        self.visualizations: dict[str, Visualization] = {}

    def bootstrap(self, surfaces: Mapping[str, Canvas], autostart: Iterable[str] = AUTOSTART) -> None:
        """Create the visualizations whose canvas is present and start the animated ones."""
        autostart = set(autostart)
        for key in list_keys():
            surface = surfaces.get(key)
            if surface is None:
                logger.warning(f"No canvas for '{key}', skipping")
                continue
            if key in self.visualizations:
                continue

            visualization = create_visualization(key, surface, self.ticker, self.options.get(key))
            self.visualizations[key] = visualization
            if key in autostart:
                visualization.start()

        logger.info(f"App initialized with {len(self.visualizations)} visualizations")

    def get(self, key: str) -> Optional[Visualization]:
        return self.visualizations.get(key)

    def connect_panel(self, panel: BasePanel) -> None:
        """Hand the panel its visualization, or None so it can disable itself."""
        panel.bind(self.get(panel.KEY))

    def start_all(self) -> None:
        for visualization in self.visualizations.values():
            visualization.start()

    def stop_all(self) -> None:
        for visualization in self.visualizations.values():
            visualization.stop()

    def shutdown(self) -> None:
        for key, visualization in list(self.visualizations.items()):
            visualization.destroy()
            del self.visualizations[key]
        logger.info("All visualizations destroyed")
