"""
Intro Visualization
===================
A short looping takeoff under a sky with clouds, showing the four forces.
"""
from __future__ import annotations

import logging

from PySide6.QtCore import QPointF, QRectF
from PySide6.QtGui import QColor, QPainter, QPainterPath

from flightphysics.app.registry import register_visualization
from flightphysics.model.intro import CLOUDS, DRAG_ARROW_SCALE, FORCE_ARROW_LENGTH, IntroModel, IntroOptions
from flightphysics.view import painting
from flightphysics.view.visualization import Visualization, requires_canvas

logger = logging.getLogger(__name__)

AIRPLANE_SCALE = 0.5


@register_visualization
class IntroVisualization(Visualization):
    KEY = "intro-canvas"
    OPTIONS = IntroOptions

    def create_model(self, width: float, height: float) -> IntroModel:
        return IntroModel(width, height, self.options)

    @requires_canvas
    def start(self) -> None:
        if not self.is_running:
            self.model.rewind()
        super().start()

    # ---- painting ----

    def render(self, painter: QPainter, width: float, height: float) -> None:
        model: IntroModel = self.model
        ground = model.ground_level

        painter.fillRect(
            QRectF(0, 0, width, height),
            painting.vertical_gradient(0, height, ((0.0, painting.SKY), (1.0, painting.SKY_LOW))),
        )
        self._draw_clouds(painter, width)

        painter.fillRect(
            QRectF(0, ground, width, height - ground),
            painting.vertical_gradient(ground, height, ((0.0, painting.GRASS), (1.0, painting.GRASS_DARK))),
        )
        painter.setPen(painting.pen(painting.HORIZON, 2))
        painter.drawLine(QPointF(0, ground), QPointF(width, ground))

        runway_y = ground - 10
        painter.fillRect(QRectF(0, runway_y, width * 0.6, 20), QColor(painting.RUNWAY))
        painter.setPen(painting.pen("white", 2, dash=(15, 15)))
        painter.drawLine(QPointF(0, runway_y + 10), QPointF(width * 0.6, runway_y + 10))

        pose = model.pose
        painter.save()
        painter.translate(pose.x, pose.y)
        painter.rotate(pose.rotation)
        painting.draw_airliner(painter, AIRPLANE_SCALE, windows=6)
        painter.restore()

        if pose.force_alpha > 0:
            self._draw_forces(painter)

    def _draw_clouds(self, painter: QPainter, width: float) -> None:
        path = QPainterPath()
        for fraction, y, size in CLOUDS:
            x = width * fraction
            path.addEllipse(QPointF(x, y), size * 0.5, size * 0.5)
            path.addEllipse(QPointF(x + size * 0.4, y), size * 0.6, size * 0.6)
            path.addEllipse(QPointF(x + size * 0.8, y), size * 0.4, size * 0.4)
        painter.fillPath(path.simplified(), painting.qcolor("white", 0.7))

    def _draw_forces(self, painter: QPainter) -> None:
        pose = self.model.pose
        alpha = pose.force_alpha
        x, y = pose.x, pose.y
        length = FORCE_ARROW_LENGTH
        arrows = (
            ("Lift", painting.LIFT, x, y - length, 0, -15),
            ("Weight", painting.WEIGHT, x, y + length, 0, 15),
            ("Thrust", painting.THRUST, x + length, y, 20, 0),
            ("Drag", painting.DRAG, x - length * DRAG_ARROW_SCALE, y, -15, 0),
        )
        for label, color, end_x, end_y, dx, dy in arrows:
            painting.draw_arrow(painter, x, y, end_x, end_y, color, head=10, alpha=alpha)
            painting.draw_text(painter, end_x + dx, end_y + dy + 4, label, color, 12, True, "center", alpha)
