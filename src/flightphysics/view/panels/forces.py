from __future__ import annotations

import logging
from typing import Optional

from PySide6.QtCore import Slot
from PySide6.QtWidgets import QGridLayout, QGroupBox, QPushButton, QSlider, QVBoxLayout, QWidget

from flightphysics.config import DEFAULT_OPTIONS
from flightphysics.model.forces import DEFAULT_FORCE
from flightphysics.view.panels.base import BasePanel, add_slider

logger = logging.getLogger(__name__)

FORCES = ("lift", "weight", "thrust", "drag")


class ForcesPanel(BasePanel):
    """Four force sliders, each one drives an arrow on the canvas."""
    KEY = "forces-canvas"

    def __init__(self, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        options = DEFAULT_OPTIONS[self.KEY]

        root = QVBoxLayout(self)
        group = QGroupBox(self.tr("Forces"), self)
        grid = QGridLayout(group)

        self.sliders: dict[str, QSlider] = {}
        for row, name in enumerate(FORCES):
            slider = add_slider(grid, row, f"{name.capitalize()}:", "force", getattr(options, name), "", group)
            slider.valueChanged.connect(self._on_forces_changed)
            self.sliders[name] = slider
        root.addWidget(group)

        self.button_reset = QPushButton(self.tr("Reset to Level Flight"), self)
        self.button_reset.clicked.connect(self._on_reset)
        root.addWidget(self.button_reset)
        root.addStretch()

    def on_bound(self) -> None:
        self._on_forces_changed()

    def values(self) -> dict[str, float]:
        return {name: float(slider.value()) for name, slider in self.sliders.items()}

    @Slot()
    def _on_forces_changed(self, *_) -> None:
        if self.visualization is None:
            return
        self.visualization.set_forces(**self.values())

    @Slot()
    def _on_reset(self) -> None:
        for slider in self.sliders.values():
            slider.setValue(round(DEFAULT_FORCE))
        # the body state is only recentred by reset()
        if self.visualization is not None:
            self.visualization.reset()
        logger.info("Forces reset to level flight")
