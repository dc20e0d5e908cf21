"""
Control Surfaces Visualization
==============================
Top view of an airplane with deflectable ailerons, elevators and rudder.
Redrawn on every input change, there is no animation loop.
"""
from __future__ import annotations

import logging

from PySide6.QtCore import QPointF, QRectF
from PySide6.QtGui import QColor, QPainter

from flightphysics.app.registry import register_visualization
from flightphysics.model.controls import ControlsModel, ControlsOptions
from flightphysics.view import painting
from flightphysics.view.visualization import Visualization, requires_canvas

logger = logging.getLogger(__name__)


def _draw_surface(painter: QPainter, x: float, y: float, angle: float, rect: QRectF) -> None:
    """One movable surface hinged at (x, y), deflected by `angle` degrees."""
    painter.save()
    painter.translate(x, y)
    painter.rotate(angle)
    painter.setPen(painting.pen(painting.SURFACE_EDGE, 2))
    painter.setBrush(QColor(painting.SURFACE_FILL))
    painter.drawRect(rect)
    painter.restore()


@register_visualization
class ControlsVisualization(Visualization):
    KEY = "controls-canvas"
    OPTIONS = ControlsOptions
    ANIMATED = False

    def create_model(self, width: float, height: float) -> ControlsModel:
        return ControlsModel(self.options)

    @requires_canvas
    def set_controls(self, aileron: float, elevator: float, rudder: float) -> None:
        self.model.set_controls(aileron, elevator, rudder)
        self.draw()

    @requires_canvas
    def reset(self) -> None:
        self.model.reset()
        logger.info("Control surfaces reset to neutral")
        self.draw()

    def resize(self, width: float, height: float) -> None:
        # drawn relative to the canvas center, nothing to recompute
        pass

    # ---- painting ----

    def render(self, painter: QPainter, width: float, height: float) -> None:
        painter.fillRect(QRectF(0, 0, width, height), QColor(painting.BACKGROUND))
        cx, cy = width / 2, height / 2

        painter.save()
        painter.translate(cx, cy)
        painter.setPen(painting.pen(painting.LIFT, 2, dash=(10, 5)))
        painter.drawLine(QPointF(-120, 0), QPointF(120, 0))
        painter.setPen(painting.pen(painting.THRUST, 2, dash=(10, 5)))
        painter.drawLine(QPointF(0, -100), QPointF(0, 100))

        painter.rotate(self.model.yaw)
        self._draw_airplane(painter)
        painter.restore()

        self._draw_response(painter)
        self._draw_axis_labels(painter, width, cx, cy)

    def _draw_airplane(self, painter: QPainter) -> None:
        model: ControlsModel = self.model

        painter.setPen(painting.pen(painting.FUSELAGE_EDGE, 2))
        painter.setBrush(painting.vertical_gradient(-10, 10, painting.FUSELAGE_STOPS))
        painter.drawPath(painting.polygon([(60, 0), (50, -8), (-50, -8), (-60, -5), (-60, 5), (-50, 8), (50, 8)]))

        painter.setPen(painting.pen(painting.WING_EDGE, 2))
        painter.setBrush(painting.vertical_gradient(-80, 80, painting.WING_STOPS))
        for side in (-1, 1):
            painter.drawPath(painting.polygon(
                [(0, 8 * side), (-20, 8 * side), (-30, 70 * side), (-20, 75 * side), (5, 15 * side)]
            ))

        # ailerons move in opposite directions
        _draw_surface(painter, -25, -72.5, -model.aileron, QRectF(-3, -6, 6, 12))
        _draw_surface(painter, -25, 72.5, model.aileron, QRectF(-3, -6, 6, 12))

        painter.setPen(painting.pen(painting.WING_EDGE, 2))
        painter.setBrush(QColor("#4A90E2"))
        for side in (-1, 1):
            painter.drawPath(painting.polygon(
                [(-60, 5 * side), (-70, 5 * side), (-75, 25 * side), (-70, 27 * side), (-60, 8 * side)]
            ))

        # both elevators move together
        _draw_surface(painter, -72, -26, model.elevator, QRectF(-4, -3, 8, 6))
        _draw_surface(painter, -72, 26, model.elevator, QRectF(-4, -3, 8, 6))
        _draw_surface(painter, -73, 0, model.rudder, QRectF(-6, -4, 12, 8))

        painting.draw_text(painter, -25, -95, "Aileron", size=10, align="center")
        painting.draw_text(painter, -25, -85, "L", size=10, align="center")
        painting.draw_text(painter, -25, 95, "R", size=10, align="center")
        painting.draw_text(painter, -25, 105, "Aileron", size=10, align="center")
        painting.draw_text(painter, -72, -35, "Elevator", size=10, align="center")
        painting.draw_text(painter, -80, 0, "Rudder", size=10, align="center")

    def _draw_response(self, painter: QPainter) -> None:
        model: ControlsModel = self.model
        box = QRectF(20, 20, 200, 120)
        painting.draw_box(painter, box, painting.qcolor("white", 0.95))
        x, y = box.x(), box.y()

        painting.draw_text(painter, x + 10, y + 22, "Aircraft Response", size=14, bold=True)
        rows = (
            ("Roll:", model.roll_text(), painting.LIFT),
            ("Pitch:", model.pitch_text(), painting.THRUST),
            ("Yaw:", model.yaw_text(), painting.DRAG),
        )
        for i, (label, text, color) in enumerate(rows):
            baseline = y + 35 + 22 * i
            painting.draw_text(painter, x + 10, baseline, label, color)
            painting.draw_text(painter, x + 50, baseline, text, bold=True)

        painting.draw_text(painter, x + 10, y + box.height() - 10, model.summary(), painting.TEXT_MUTED, size=10)

    def _draw_axis_labels(self, painter: QPainter, width: float, cx: float, cy: float) -> None:
        painting.draw_text(painter, cx + 150, cy + 5, "Roll Axis →", painting.LIFT, 11, True, "center")
        painting.draw_text(painter, cx + 5, cy - 110, "↑ Pitch Axis", painting.THRUST, 11, True, "center")

        painter.save()
        painter.translate(width - 30, cy)
        painter.rotate(-90)
        painting.draw_text(painter, 0, 0, "Yaw Axis (out of page) ⊙", painting.DRAG, 11, True, "center")
        painter.restore()
