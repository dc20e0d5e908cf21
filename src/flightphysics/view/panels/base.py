from __future__ import annotations

from typing import TYPE_CHECKING, Optional

import pyqtgraph as pg
from PySide6.QtCore import Qt
from PySide6.QtWidgets import QGridLayout, QLabel, QSlider, QWidget

from flightphysics.config import SLIDER_RANGES

if TYPE_CHECKING:
    from flightphysics.view.visualization import Visualization


class BasePanel(QWidget):
    """Base class for left-side panels. Holds a reference to the visualization it drives."""
    KEY: str = ""

    def __init__(self, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self.visualization: Optional[Visualization] = None

    def bind(self, visualization: Optional[Visualization]) -> None:
        """Attach the visualization. Without a live one the controls are disabled."""
        self.visualization = visualization
        live = visualization is not None and not visualization.is_inert
        self.setEnabled(live)
        if live:
            self.on_bound()

    def on_bound(self) -> None:
        """Hook to push the current control values into a freshly bound visualization."""


def add_slider(
    grid: QGridLayout, row: int, text: str, range_key: str, value: float, unit: str, parent: QWidget
) -> QSlider:
    """Label, horizontal slider and live value readout on one grid row."""
    minimum, maximum = SLIDER_RANGES[range_key]
    label = QLabel(text, parent)
    slider = QSlider(Qt.Orientation.Horizontal, parent)
    slider.setRange(minimum, maximum)
    slider.setValue(round(value))
    readout = QLabel(f"{slider.value()}{unit}", parent)
    readout.setMinimumWidth(48)
    readout.setAlignment(Qt.AlignmentFlag.AlignRight | Qt.AlignmentFlag.AlignVCenter)
    slider.valueChanged.connect(lambda v: readout.setText(f"{v}{unit}"))

    grid.addWidget(label, row, 0)
    grid.addWidget(slider, row, 1)
    grid.addWidget(readout, row, 2)
    return slider


def make_plot(left: str, bottom: str, parent: Optional[QWidget] = None) -> pg.PlotWidget:
    w = pg.PlotWidget(parent, background="w")
    w.showGrid(x=True, y=True, alpha=0.3)
    w.getAxis("left").setPen("k")
    w.getAxis("bottom").setPen("k")
    w.getAxis("left").setTextPen("k")
    w.getAxis("bottom").setTextPen("k")
    w.setLabel("left", left)
    w.setLabel("bottom", bottom)
    w.setMenuEnabled(False)
    w.setMouseEnabled(x=False, y=False)
    w.setMinimumHeight(180)
    return w
