"""
Bernoulli Panel
===============
Airspeed slider plus a profile of speed and static pressure along the duct.
"""
from __future__ import annotations

from typing import Optional

import pyqtgraph as pg
from PySide6.QtCore import Slot
from PySide6.QtWidgets import QGridLayout, QGroupBox, QLabel, QVBoxLayout, QWidget

from flightphysics.config import DEFAULT_OPTIONS
from flightphysics.view import painting
from flightphysics.view.panels.base import BasePanel, add_slider, make_plot


class BernoulliPanel(BasePanel):
    KEY = "bernoulli-canvas"

    def __init__(self, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        options = DEFAULT_OPTIONS[self.KEY]

        root = QVBoxLayout(self)

        group = QGroupBox(self.tr("Airflow"), self)
        grid = QGridLayout(group)
        self.slider_airspeed = add_slider(
            grid, 0, self.tr("Airspeed:"), "airspeed", options.base_velocity, " m/s", group
        )
        root.addWidget(group)

        hint = QLabel(self.tr("Air speeds up through the narrow throat and its pressure drops."), self)
        hint.setWordWrap(True)
        root.addWidget(hint)

        self.plot_speed = make_plot(self.tr("Speed (m/s)"), self.tr("Position along duct (-)"), self)
        self.curve_speed = self.plot_speed.plot([], [], pen=pg.mkPen(painting.FLOW, width=2))
        root.addWidget(self.plot_speed)

        self.plot_pressure = make_plot(self.tr("Pressure drop (Pa)"), self.tr("Position along duct (-)"), self)
        self.curve_pressure = self.plot_pressure.plot([], [], pen=pg.mkPen(painting.ACCENT, width=2))
        root.addWidget(self.plot_pressure)

        root.addStretch()

        self.slider_airspeed.valueChanged.connect(self._on_airspeed_changed)

    def on_bound(self) -> None:
        self._on_airspeed_changed(self.slider_airspeed.value())

    @Slot(int)
    def _on_airspeed_changed(self, value: int) -> None:
        if self.visualization is None:
            return
        self.visualization.set_velocity(float(value))
        self._update_profile()

    def _update_profile(self) -> None:
        model = self.visualization.model
        if model is None:
            return
        u, velocity, pressure = model.profile()
        self.curve_speed.setData(u, velocity)
        # drop relative to the entrance, so the throat shows as a peak
        self.curve_pressure.setData(u, pressure[0] - pressure)
