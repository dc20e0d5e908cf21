"""
Flight Phases Visualization
===========================
Side view of a flight profile: the airplane eases between the poses of takeoff,
climb, cruise, descent and landing, either on demand or in auto-play.
"""
from __future__ import annotations

import logging

from PySide6.QtCore import QPointF, QRectF
from PySide6.QtGui import QColor, QPainter

from flightphysics.app.registry import register_visualization
from flightphysics.model.phases import FlightPhasesModel, PhasesOptions
from flightphysics.view import painting
from flightphysics.view.visualization import Visualization, requires_canvas

logger = logging.getLogger(__name__)

AIRPLANE_SCALE = 0.6
ALTITUDE_BAR = QRectF(20, 20, 30, 150)


def _comparison(a: float, b: float) -> str:
    return ">" if a > b else "<" if a < b else "="


@register_visualization
class FlightPhasesVisualization(Visualization):
    KEY = "phases-canvas"
    OPTIONS = PhasesOptions

    def create_model(self, width: float, height: float) -> FlightPhasesModel:
        return FlightPhasesModel(width, height, self.options)

    @property
    def current_phase(self) -> str:
        return "" if self.is_inert else self.model.phase

    @property
    def auto_play(self) -> bool:
        return False if self.is_inert else self.model.auto_play

    @requires_canvas
    def set_phase(self, phase: str) -> None:
        self.model.set_phase(phase)
        logger.info(f"Phase changed to: {phase}")
        self.redraw_if_idle()

    def toggle_auto_play(self) -> bool:
        """Flip auto-play and return the new state. Enabling it also starts the animation."""
        if self.is_inert:
            return False
        enabled = self.model.toggle_auto_play()
        if enabled:
            self.start()
        self.redraw_if_idle()
        return enabled

    # ---- painting ----

    def render(self, painter: QPainter, width: float, height: float) -> None:
        model: FlightPhasesModel = self.model
        painter.fillRect(QRectF(0, 0, width, height), QColor(painting.SKY))
        self._draw_ground(painter, width, height)
        if model.shows_runway:
            self._draw_runway(painter)
        self._draw_altitude(painter)
        self._draw_airplane(painter)
        self._draw_phase_info(painter, width)
        self._draw_force_balance(painter, width, height)

    def _draw_ground(self, painter: QPainter, width: float, height: float) -> None:
        ground = self.model.ground_level
        painter.fillRect(
            QRectF(0, ground, width, height - ground),
            painting.vertical_gradient(ground, height, ((0.0, painting.GRASS), (1.0, painting.GRASS_DARK))),
        )
        painter.setPen(painting.pen(painting.HORIZON, 2))
        painter.drawLine(QPointF(0, ground), QPointF(width, ground))

    def _draw_runway(self, painter: QPainter) -> None:
        start, end = self.model.runway
        y = self.model.ground_level - 15
        painter.fillRect(QRectF(start, y, end - start, 30), QColor(painting.RUNWAY))
        painter.setPen(painting.pen("white", 2, dash=(20, 20)))
        painter.drawLine(QPointF(start, y + 15), QPointF(end, y + 15))

    def _draw_altitude(self, painter: QPainter) -> None:
        model: FlightPhasesModel = self.model
        bar = ALTITUDE_BAR
        painting.draw_box(painter, bar, painting.qcolor("white", 0.9), border=painting.TEXT_MUTED)

        fraction = max(0.0, min(1.0, 1 - model.pose.y / model.ground_level))
        filled = bar.height() * fraction
        top = bar.bottom() - filled
        painter.fillRect(
            QRectF(bar.x(), top, bar.width(), filled),
            painting.vertical_gradient(top, bar.bottom(), ((0.0, "#4A90E2"), (1.0, "#2E5F8F"))),
        )
        center = bar.x() + bar.width() / 2
        painting.draw_text(painter, center, bar.y() - 5, "ALT", size=12, bold=True, align="center")
        painting.draw_text(painter, center, bar.bottom() + 15, f"{model.altitude} ft", size=11, align="center")

    def _draw_airplane(self, painter: QPainter) -> None:
        pose = self.model.pose
        painter.save()
        painter.translate(pose.x, pose.y)
        painter.rotate(pose.rotation)
        painting.draw_airliner(painter, AIRPLANE_SCALE)
        painter.restore()

    def _draw_phase_info(self, painter: QPainter, width: float) -> None:
        model: FlightPhasesModel = self.model
        box = QRectF(width - 220, 20, 200, 100)
        painting.draw_box(painter, box, painting.qcolor("white", 0.95))
        x, y = box.x(), box.y()

        painting.draw_text(painter, x + 10, y + 25, f"Phase: {model.phase.capitalize()}", size=16, bold=True)
        painting.draw_text(painter, x + 10, y + 50, f"Speed: {round(model.pose.speed)} m/s", painting.THRUST)
        painting.draw_text(painter, x + 10, y + 70, f"Pitch: {model.pose.rotation:.1f}°", painting.LIFT)

        if model.auto_play:
            track = QRectF(x + 10, y + 85, box.width() - 20, 6)
            painter.fillRect(track, QColor(painting.GRID))
            painter.fillRect(QRectF(track.x(), track.y(), track.width() * model.progress, 6), QColor(painting.LIFT))

    def _draw_force_balance(self, painter: QPainter, width: float, height: float) -> None:
        forces = self.model.force_balance
        box = QRectF(width / 2 - 100, height - 70, 200, 50)
        painting.draw_box(painter, box, painting.qcolor("white", 0.9))
        x, y = box.x(), box.y()

        painting.draw_text(painter, x + 10, y + 15, "Force Balance:", size=11, bold=True)

        lift_sign = _comparison(forces.lift, forces.weight)
        lift_color = {">": painting.LIFT, "<": painting.WEIGHT}.get(lift_sign, painting.TEXT_MUTED)
        painting.draw_text(painter, x + 10, y + 32, f"L{lift_sign}W", lift_color, size=10)

        thrust_sign = _comparison(forces.thrust, forces.drag)
        thrust_color = {">": painting.THRUST, "<": painting.DRAG}.get(thrust_sign, painting.TEXT_MUTED)
        painting.draw_text(painter, x + 60, y + 32, f"T{thrust_sign}D", thrust_color, size=10)

        painting.draw_text(painter, x + 10, y + 47, forces.status, size=10)
