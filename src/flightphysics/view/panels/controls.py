from __future__ import annotations

import logging
from typing import Optional

from PySide6.QtCore import Slot
from PySide6.QtWidgets import QGridLayout, QGroupBox, QLabel, QPushButton, QSlider, QVBoxLayout, QWidget

from flightphysics.config import DEFAULT_OPTIONS
from flightphysics.view.panels.base import BasePanel, add_slider

logger = logging.getLogger(__name__)

SURFACES = (
    ("aileron", "Ailerons:", "Roll: bank left or right"),
    ("elevator", "Elevator:", "Pitch: nose up or down"),
    ("rudder", "Rudder:", "Yaw: nose left or right"),
)


class ControlsPanel(BasePanel):
    KEY = "controls-canvas"

    def __init__(self, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        options = DEFAULT_OPTIONS[self.KEY]

        root = QVBoxLayout(self)
        group = QGroupBox(self.tr("Deflection"), self)
        grid = QGridLayout(group)

        self.sliders: dict[str, QSlider] = {}
        for row, (name, text, tip) in enumerate(SURFACES):
            slider = add_slider(grid, row, self.tr(text), name, getattr(options, name), "°", group)
            slider.setToolTip(self.tr(tip))
            slider.valueChanged.connect(self._on_controls_changed)
            self.sliders[name] = slider
        root.addWidget(group)

        self.label_summary = QLabel("", self)
        root.addWidget(self.label_summary)

        self.button_reset = QPushButton(self.tr("Reset Controls"), self)
        self.button_reset.clicked.connect(self._on_reset)
        root.addWidget(self.button_reset)
        root.addStretch()

    def on_bound(self) -> None:
        self._on_controls_changed()

    def values(self) -> dict[str, float]:
        return {name: float(slider.value()) for name, slider in self.sliders.items()}

    @Slot()
    def _on_controls_changed(self, *_) -> None:
        if self.visualization is None:
            return
        self.visualization.set_controls(**self.values())
        self.label_summary.setText(self.visualization.model.summary())

    @Slot()
    def _on_reset(self) -> None:
        for slider in self.sliders.values():
            slider.setValue(0)
        if self.visualization is not None:
            self.visualization.reset()
            self.label_summary.setText(self.visualization.model.summary())
        logger.info("Control surfaces reset to neutral")
