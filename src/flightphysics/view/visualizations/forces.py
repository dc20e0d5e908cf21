"""
Four Forces Visualization
=========================
An airplane pushed by lift, weight, thrust and drag arrows. Unbalanced forces
move and pitch the airplane until it reaches the padded border of the canvas.
"""
from __future__ import annotations

import logging
import math

from PySide6.QtCore import QPointF, QRectF
from PySide6.QtGui import QColor, QPainter

from flightphysics.app.registry import register_visualization
from flightphysics.model.forces import STATE_THRESHOLD, ForcesModel, ForcesOptions
from flightphysics.view import painting
from flightphysics.view.visualization import Visualization, requires_canvas

logger = logging.getLogger(__name__)

AIRPLANE_SCALE = 0.7
LABEL_OFFSET = 20.0


@register_visualization
class ForcesVisualization(Visualization):
    KEY = "forces-canvas"
    OPTIONS = ForcesOptions

    def create_model(self, width: float, height: float) -> ForcesModel:
        return ForcesModel(width, height, self.options)

    @requires_canvas
    def set_forces(self, lift: float, weight: float, thrust: float, drag: float) -> None:
        self.model.set_forces(lift, weight, thrust, drag)
        self.redraw_if_idle()

    @requires_canvas
    def reset(self) -> None:
        self.model.reset()
        logger.info("Forces reset to level flight")
        self.redraw_if_idle()

    # ---- painting ----

    def render(self, painter: QPainter, width: float, height: float) -> None:
        painter.fillRect(QRectF(0, 0, width, height), QColor(painting.BACKGROUND))

        painter.setPen(painting.pen(painting.GRID, 1))
        painter.drawLine(QPointF(0, height / 2), QPointF(width, height / 2))
        painter.drawLine(QPointF(width / 2, 0), QPointF(width / 2, height))

        self._draw_force_vectors(painter)

        body = self.model.body
        painter.save()
        painter.translate(body.x, body.y)
        painter.rotate(math.degrees(body.rotation))
        painting.draw_side_view_airplane(painter, AIRPLANE_SCALE)
        painter.restore()

        self._draw_force_values(painter)
        self._draw_flight_state(painter, width)

    def _draw_force_vectors(self, painter: QPainter) -> None:
        body = self.model.body
        for name, dx, dy in self.model.force_vectors():
            color = painting.FORCE_COLORS[name]
            end_x, end_y = body.x + dx, body.y + dy
            painting.draw_arrow(painter, body.x, body.y, end_x, end_y, color)

            label_x = end_x + math.copysign(LABEL_OFFSET, dx) if dx else end_x
            label_y = end_y + math.copysign(LABEL_OFFSET, dy) if dy else end_y
            # vertically centered on the anchor
            painting.draw_text(painter, label_x, label_y + 4, name.capitalize(), color, 12, True, "center")

    def _draw_force_values(self, painter: QPainter) -> None:
        for i, (name, value) in enumerate(self.model.forces.items()):
            painting.draw_text(
                painter, 20, 30 + 22 * i, f"{name.capitalize()}: {value:g}", painting.FORCE_COLORS[name], size=13
            )

    def _draw_flight_state(self, painter: QPainter, width: float) -> None:
        model: ForcesModel = self.model
        box = QRectF(width - 180, 15, 165, 70)
        painting.draw_box(painter, box, painting.qcolor("white", 0.9))

        vertical_color = painting.ACCENT if model.net_vertical < -STATE_THRESHOLD else painting.LIFT
        painting.draw_text(painter, box.x() + 10, box.y() + 20, "Flight State:", size=13, bold=True)
        painting.draw_text(painter, box.x() + 10, box.y() + 40, model.vertical_state(), vertical_color)
        painting.draw_text(painter, box.x() + 10, box.y() + 58, model.horizontal_state(), painting.THRUST)
