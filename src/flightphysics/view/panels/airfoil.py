"""
Airfoil Panel
=============
Angle of attack slider, airfoil selector and the lift curve of the selected
airfoil with a marker at the current angle.
"""
from __future__ import annotations

from typing import Optional

import pyqtgraph as pg
from PySide6.QtCore import Qt, Slot
from PySide6.QtWidgets import QComboBox, QGridLayout, QGroupBox, QLabel, QVBoxLayout, QWidget

from flightphysics.config import DEFAULT_OPTIONS, SLIDER_RANGES
from flightphysics.model.airfoil import AIRFOIL_TYPES, STALL_ANGLE, lift_coefficient, lift_curve
from flightphysics.view import painting
from flightphysics.view.panels.base import BasePanel, add_slider, make_plot

LABELS = {
    "cambered": "Cambered",
    "symmetric": "Symmetric",
    "flat": "Flat Bottom",
}


class AirfoilPanel(BasePanel):
    KEY = "airfoil-canvas"

    def __init__(self, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        options = DEFAULT_OPTIONS[self.KEY]

        root = QVBoxLayout(self)

        group = QGroupBox(self.tr("Wing Section"), self)
        grid = QGridLayout(group)
        self.slider_angle = add_slider(
            grid, 0, self.tr("Angle of attack:"), "angle_of_attack", options.angle_of_attack, "°", group
        )
        grid.addWidget(QLabel(self.tr("Airfoil type:"), group), 1, 0)
        self.combo_box = QComboBox(group)
        for key in AIRFOIL_TYPES:
            self.combo_box.addItem(self.tr(LABELS.get(key, key)), userData=key)
        self.combo_box.setCurrentIndex(AIRFOIL_TYPES.index(options.airfoil_type))
        grid.addWidget(self.combo_box, 1, 1, 1, 2)
        root.addWidget(group)

        self.plot = make_plot(self.tr("Lift coefficient CL (-)"), self.tr("Angle of attack (°)"), self)
        self.plot.setXRange(*SLIDER_RANGES["angle_of_attack"], padding=0.02)
        self.curve = self.plot.plot([], [], pen=pg.mkPen("k", width=2))
        self.marker = pg.ScatterPlotItem(size=10, brush=pg.mkBrush(painting.ACCENT), pen=pg.mkPen("k"))
        self.plot.addItem(self.marker)
        for angle in (-STALL_ANGLE, STALL_ANGLE):
            line = pg.InfiniteLine(angle, angle=90, pen=pg.mkPen(painting.WARNING, width=1, style=Qt.PenStyle.DashLine))
            self.plot.addItem(line)
        root.addWidget(self.plot)

        root.addStretch()

        self.slider_angle.valueChanged.connect(self._on_angle_changed)
        self.combo_box.currentIndexChanged.connect(self._on_type_changed)
        self._update_curve()

    def on_bound(self) -> None:
        self.visualization.set_airfoil_type(self.current_type())
        self.visualization.set_angle_of_attack(float(self.slider_angle.value()))

    def current_type(self) -> str:
        return self.combo_box.currentData()

    @Slot(int)
    def _on_angle_changed(self, value: int) -> None:
        if self.visualization is not None:
            self.visualization.set_angle_of_attack(float(value))
        self._update_marker()

    @Slot()
    def _on_type_changed(self) -> None:
        if self.visualization is not None:
            self.visualization.set_airfoil_type(self.current_type())
        self._update_curve()

    def _update_curve(self) -> None:
        alphas, cls = lift_curve(self.current_type(), *SLIDER_RANGES["angle_of_attack"])
        self.curve.setData(alphas, cls)
        self._update_marker()

    def _update_marker(self) -> None:
        alpha = float(self.slider_angle.value())
        self.marker.setData([alpha], [lift_coefficient(alpha, self.current_type())])
