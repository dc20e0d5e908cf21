"""
Airfoil Visualization
=====================
A wing section at an adjustable angle of attack, with the streamlines bending
around it, the resulting coefficients and a stall warning.
"""
from __future__ import annotations

import logging

from PySide6.QtCore import QPointF, QRectF
from PySide6.QtGui import QColor, QPainter, QPainterPath

from flightphysics.app.registry import register_visualization
from flightphysics.model.airfoil import AirfoilModel, AirfoilOptions
from flightphysics.view import painting
from flightphysics.view.visualization import Visualization, requires_canvas

logger = logging.getLogger(__name__)


@register_visualization
class AirfoilVisualization(Visualization):
    KEY = "airfoil-canvas"
    OPTIONS = AirfoilOptions

    def create_model(self, width: float, height: float) -> AirfoilModel:
        return AirfoilModel(width, height, self.options)

    @requires_canvas
    def set_angle_of_attack(self, alpha: float) -> None:
        self.model.set_angle_of_attack(alpha)
        self.redraw_if_idle()

    @requires_canvas
    def set_airfoil_type(self, airfoil_type: str) -> None:
        self.model.set_airfoil_type(airfoil_type)
        self.redraw_if_idle()

    # ---- painting ----

    def render(self, painter: QPainter, width: float, height: float) -> None:
        painter.fillRect(QRectF(0, 0, width, height), QColor(painting.BACKGROUND))
        self._draw_streamlines(painter)
        self._draw_airfoil(painter)
        self._draw_angle_indicator(painter)
        self._draw_coefficients(painter, width)
        if self.model.is_stalled:
            self._draw_stall_warning(painter, width, height)

    def _draw_streamlines(self, painter: QPainter) -> None:
        painter.setBrush(QColor(0, 0, 0, 0))
        painter.setPen(painting.pen(painting.STREAMLINE, 1.5, dash=(5, 5)))
        for streamline in self.model.streamlines:
            xs, ys = self.model.streamline_path(streamline)
            path = QPainterPath()
            for i, (x, y) in enumerate(zip(xs, ys)):
                if i == 0:
                    path.moveTo(x, y)
                else:
                    path.lineTo(x, y)
            painter.drawPath(path)

    def _draw_airfoil(self, painter: QPainter) -> None:
        model: AirfoilModel = self.model
        cx, cy = model.center
        half_chord = model.chord / 2

        painter.save()
        painter.translate(cx, cy)
        painter.rotate(model.angle_of_attack)

        xs, upper, lower = model.shape_points()
        outline = QPainterPath()
        outline.moveTo(xs[0], upper[0])
        for x, y in zip(xs[1:], upper[1:]):
            outline.lineTo(x, y)
        for x, y in zip(xs[::-1], lower[::-1]):
            outline.lineTo(x, y)
        outline.closeSubpath()

        painter.setPen(painting.pen("#1A237E", 2.5))
        painter.setBrush(painting.vertical_gradient(-20, 20, ((0.0, "#4A90E2"), (1.0, "#2E5F8F"))))
        painter.drawPath(outline)

        painter.setPen(painting.pen(painting.DRAG, 1.5, dash=(5, 5)))
        painter.drawLine(QPointF(-half_chord, 0), QPointF(half_chord, 0))

        for x, label in ((-half_chord, "Leading"), (half_chord, "Trailing")):
            painting.draw_text(painter, x, -25, label, size=11, align="center")
            painting.draw_text(painter, x, -13, "Edge", size=11, align="center")

        painter.restore()

    def _draw_angle_indicator(self, painter: QPainter) -> None:
        cx, cy = self.model.center
        alpha = self.model.angle_of_attack

        painter.save()
        painter.translate(cx, cy)

        painting.draw_arrow(painter, -180, 0, -80, 0, painting.TEXT_MUTED, width=2, head=10)
        painter.setBrush(QColor(0, 0, 0, 0))
        painter.setPen(painting.pen(painting.ACCENT, 2))
        # Qt arc angles are counter-clockwise in 1/16 degree
        painter.drawArc(QRectF(-150, -30, 60, 60), 0, round(alpha * 16))

        painting.draw_text(painter, -120, -45, f"α = {alpha:g}°", painting.ACCENT, 12, True, "center")
        painting.draw_text(painter, -130, 15, "Relative Wind", painting.TEXT_MUTED, 11, align="center")
        painter.restore()

    def _draw_coefficients(self, painter: QPainter, width: float) -> None:
        model: AirfoilModel = self.model
        box = QRectF(width - 180, 20, 160, 100)
        painting.draw_box(painter, box, painting.qcolor("white", 0.95))
        x, y = box.x(), box.y()

        painting.draw_text(painter, x + 10, y + 22, "Coefficients", size=14, bold=True)
        rows = (
            ("CL (Lift):", f"{model.lift_coefficient:.3f}", painting.LIFT),
            ("CD (Drag):", f"{model.drag_coefficient:.3f}", painting.DRAG),
            ("L/D Ratio:", f"{model.lift_to_drag:.1f}", painting.THRUST),
        )
        for i, (label, value, color) in enumerate(rows):
            baseline = y + 48 + 22 * i
            painting.draw_text(painter, x + 10, baseline, label, color, size=13)
            painting.draw_text(painter, x + 80, baseline, value, size=13, bold=True)

    def _draw_stall_warning(self, painter: QPainter, width: float, height: float) -> None:
        box = QRectF((width - 200) / 2, height - 80, 200, 60)
        painting.draw_box(painter, box, QColor(244, 67, 54, 230), border="#C62828", width=3)
        painting.draw_text(painter, width / 2, box.y() + 25, "⚠ STALL WARNING", "white", 16, True, "center")
        painting.draw_text(painter, width / 2, box.y() + 45, "Angle too high - airflow separated", "white", 12, align="center")
