"""
Drawing Surface
===============
A plain QWidget that forwards painting and resizing to the visualization
attached to it. The canvas itself holds no simulation state.
"""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional

from PySide6.QtCore import QSize
from PySide6.QtGui import QColor, QPainter
from PySide6.QtWidgets import QSizePolicy, QWidget

from flightphysics.config import CANVAS_MIN_HEIGHT, CANVAS_MIN_WIDTH
from flightphysics.view.painting import BACKGROUND

if TYPE_CHECKING:
    from flightphysics.view.visualization import Visualization

logger = logging.getLogger(__name__)


class Canvas(QWidget):
    def __init__(self, key: str, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self.key = key
        self.setObjectName(key)
        self.setMinimumSize(CANVAS_MIN_WIDTH, CANVAS_MIN_HEIGHT)
        self.resize(CANVAS_MIN_WIDTH, CANVAS_MIN_HEIGHT)
        self.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding)
        self._visualization: Optional[Visualization] = None

    @property
    def visualization(self) -> Optional[Visualization]:
        return self._visualization

    def attach(self, visualization: Visualization) -> None:
        self._visualization = visualization

    def detach(self) -> None:
        self._visualization = None
        self.update()

    def sizeHint(self) -> QSize:
        return QSize(CANVAS_MIN_WIDTH, CANVAS_MIN_HEIGHT)

    def paintEvent(self, event) -> None:
        painter = QPainter(self)
        try:
            painter.setRenderHints(QPainter.RenderHint.Antialiasing | QPainter.RenderHint.TextAntialiasing)
            if self._visualization is None:
                painter.fillRect(self.rect(), QColor(BACKGROUND))
            else:
                self._visualization.paint(painter, self.width(), self.height())
        finally:
            painter.end()

    def resizeEvent(self, event) -> None:
        super().resizeEvent(event)
        if self._visualization is not None:
            size = event.size()
            self._visualization.resize(size.width(), size.height())
