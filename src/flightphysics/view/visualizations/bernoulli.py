"""
Bernoulli Visualization
=======================
Particles speeding up through the throat of a Venturi tube, with velocity arrows
and pressure bars at the entrance, the throat and the exit.
"""
from __future__ import annotations

import logging

from PySide6.QtCore import QRectF
from PySide6.QtGui import QColor, QPainter, QPainterPath

from flightphysics.app.registry import register_visualization
from flightphysics.model.bernoulli import BernoulliModel, BernoulliOptions
from flightphysics.view import painting
from flightphysics.view.visualization import Visualization, requires_canvas

logger = logging.getLogger(__name__)

BAR_HEIGHT = 80.0
BAR_WIDTH = 35.0
DUCT_SAMPLE_STEP = 4.0  # px


def pressure_color(fraction: float) -> QColor:
    """Red for a large pressure drop, through orange, to green for none."""
    fraction = max(0.0, min(1.0, fraction))
    if fraction < 0.5:
        return QColor(255, int(fraction * 140), 53)
    return QColor(int(255 - fraction * 80), int(100 + fraction * 155), 53)


@register_visualization
class BernoulliVisualization(Visualization):
    KEY = "bernoulli-canvas"
    OPTIONS = BernoulliOptions

    def create_model(self, width: float, height: float) -> BernoulliModel:
        return BernoulliModel(
            width,
            height,
            base_velocity=self.options.base_velocity,
            particle_count=self.options.particle_count,
        )

    @requires_canvas
    def set_velocity(self, velocity: float) -> None:
        self.model.set_velocity(velocity)
        self.redraw_if_idle()

    def release(self) -> None:
        self.model.clear()

    # ---- painting ----

    def render(self, painter: QPainter, width: float, height: float) -> None:
        painter.fillRect(QRectF(0, 0, width, height), QColor(painting.BACKGROUND))
        self._draw_duct(painter)
        self._draw_particles(painter)
        self._draw_velocity_arrows(painter)
        self._draw_pressure_bars(painter)
        painting.draw_text(
            painter, width / 2, height * 0.15, "Velocity →", painting.TEXT_MUTED, size=14, bold=True, align="center"
        )

    def _draw_duct(self, painter: QPainter) -> None:
        model: BernoulliModel = self.model
        xs = [i * DUCT_SAMPLE_STEP for i in range(int(model.width // DUCT_SAMPLE_STEP) + 1)] + [model.width]
        envelope = [model.envelope_at(x) for x in xs]

        upper = QPainterPath()
        lower = QPainterPath()
        for i, (x, (top, bottom)) in enumerate(zip(xs, envelope)):
            if i == 0:
                upper.moveTo(x, top)
                lower.moveTo(x, bottom)
            else:
                upper.lineTo(x, top)
                lower.lineTo(x, bottom)

        channel = QPainterPath(upper)
        for x, (_, bottom) in zip(reversed(xs), reversed(envelope)):
            channel.lineTo(x, bottom)
        channel.closeSubpath()
        painter.fillPath(channel, painting.qcolor("#4A90E2", 0.05))

        painter.setBrush(QColor(0, 0, 0, 0))
        painter.setPen(painting.pen(painting.DUCT, 3))
        painter.drawPath(upper)
        painter.drawPath(lower)

    def _draw_particles(self, painter: QPainter) -> None:
        painter.setPen(QColor(0, 0, 0, 0))
        for particle in self.model.particles:
            painter.setBrush(painting.qcolor(painting.FLOW, particle.opacity))
            painter.drawEllipse(QRectF(
                particle.x - particle.size, particle.y - particle.size, particle.size * 2, particle.size * 2
            ))

    def _draw_velocity_arrows(self, painter: QPainter) -> None:
        for x, length, velocity in self.model.velocity_arrows():
            top, _ = self.model.envelope_at(x)
            y = top - 25
            painting.draw_arrow(painter, x, y, x + length, y, painting.FLOW, width=2, head=6)
            painting.draw_text(painter, x, y - 10, f"{velocity:.1f} m/s", size=11, align="center")

    def _draw_pressure_bars(self, painter: QPainter) -> None:
        model: BernoulliModel = self.model
        _, throat_bottom = model.envelope_at(model.width * 0.5)
        bar_bottom = throat_bottom + 30 + BAR_HEIGHT

        for bar in model.pressure_bars():
            x = bar.x - BAR_WIDTH / 2
            painter.setBrush(QColor(0, 0, 0, 0))
            painter.setPen(painting.pen("#9E9E9E", 2))
            painter.drawRect(QRectF(x, bar_bottom - BAR_HEIGHT, BAR_WIDTH, BAR_HEIGHT))

            filled = BAR_HEIGHT * bar.fraction
            painter.fillRect(QRectF(x, bar_bottom - filled, BAR_WIDTH, filled), pressure_color(bar.fraction))

            painting.draw_text(painter, bar.x, bar_bottom - BAR_HEIGHT - 8, bar.label, size=11, bold=True, align="center")
            painting.draw_text(
                painter, bar.x, bar_bottom + 15, f"{bar.drop / 1000:.2f} kPa", "#424242", size=11, align="center"
            )
            if bar.level == "LOW":
                painting.draw_text(painter, bar.x, bar_bottom + 28, "LOW", painting.WARNING, 10, True, "center")
            elif bar.level == "NORMAL":
                painting.draw_text(painter, bar.x, bar_bottom + 28, "NORMAL", painting.OK, 10, True, "center")

        painting.draw_text(
            painter, model.width / 2, bar_bottom - BAR_HEIGHT - 22, "Pressure Level", "#424242", 12, True, "center"
        )
