"""
Painting Helpers
================
Shared colors and QPainter primitives used by every visualization renderer.

The canvases use screen coordinates (y grows downwards) and logical pixels.
Text is anchored the way a 2D canvas API anchors it: `x` is the left edge,
the center or the right edge depending on `align`, and `y` is the baseline.
"""
from __future__ import annotations

import math
from typing import Iterable, Optional

from PySide6.QtCore import QPointF, QRectF
from PySide6.QtGui import QBrush, QColor, QFont, QFontMetricsF, QLinearGradient, QPainter, QPainterPath, QPen

# ---- palette ----
BACKGROUND = "#FAFAFA"
GRID = "#E0E0E0"
TEXT = "#212121"
TEXT_MUTED = "#757575"

LIFT = "#4CAF50"
WEIGHT = "#F44336"
THRUST = "#2196F3"
DRAG = "#FF9800"
FORCE_COLORS = {"lift": LIFT, "weight": WEIGHT, "thrust": THRUST, "drag": DRAG}

ACCENT = "#FF6B35"
FLOW = "#2196F3"
STREAMLINE = "#90CAF9"
DUCT = "#546E7A"
WARNING = "#D32F2F"
OK = "#388E3C"

FUSELAGE_STOPS = ((0.0, "#90A4AE"), (0.5, "#78909C"), (1.0, "#546E7A"))
FUSELAGE_EDGE = "#37474F"
WING_STOPS = ((0.0, "#5C9FD6"), (0.5, "#4A90E2"), (1.0, "#3B7BC4"))
WING_EDGE = "#2E5F8F"
SURFACE_FILL = "#FF9800"
SURFACE_EDGE = "#E65100"

SKY = "#E3F2FD"
SKY_LOW = "#BBDEFB"
GRASS = "#8BC34A"
GRASS_DARK = "#689F38"
HORIZON = "#558B2F"
RUNWAY = "#616161"

FONT_FAMILY = "Sans Serif"


def qcolor(name: str, alpha: Optional[float] = None) -> QColor:
    """Named or hex color with an optional alpha in [0, 1]."""
    color = QColor(name)
    if alpha is not None:
        color.setAlphaF(max(0.0, min(1.0, alpha)))
    return color


def pen(name: str, width: float = 1.0, alpha: Optional[float] = None, dash: Optional[Iterable[float]] = None) -> QPen:
    p = QPen(qcolor(name, alpha))
    p.setWidthF(width)
    if dash:
        # QPen dash patterns are in units of the pen width
        p.setDashPattern([d / max(width, 1e-6) for d in dash])
    return p


def vertical_gradient(top: float, bottom: float, stops: Iterable[tuple[float, str]]) -> QBrush:
    gradient = QLinearGradient(0, top, 0, bottom)
    for position, name in stops:
        gradient.setColorAt(position, QColor(name))
    return QBrush(gradient)


def font(size: float = 12, bold: bool = False) -> QFont:
    f = QFont(FONT_FAMILY)
    f.setPixelSize(max(1, round(size)))
    f.setBold(bold)
    return f


def draw_text(
    painter: QPainter,
    x: float,
    y: float,
    text: str,
    color: str = TEXT,
    size: float = 12,
    bold: bool = False,
    align: str = "left",
    alpha: Optional[float] = None,
) -> None:
    f = font(size, bold)
    width = QFontMetricsF(f).horizontalAdvance(text)
    if align == "center":
        x -= width / 2
    elif align == "right":
        x -= width
    painter.setFont(f)
    painter.setPen(qcolor(color, alpha))
    painter.drawText(QPointF(x, y), text)


def draw_box(painter: QPainter, rect: QRectF, fill: QColor, border: str = GRID, width: float = 2.0) -> None:
    painter.setPen(pen(border, width))
    painter.setBrush(fill)
    painter.drawRect(rect)


def draw_arrow(
    painter: QPainter,
    x1: float,
    y1: float,
    x2: float,
    y2: float,
    color: str,
    width: float = 3.0,
    head: float = 12.0,
    alpha: Optional[float] = None,
) -> None:
    """Straight arrow from (x1, y1) to (x2, y2) with a filled head."""
    angle = math.atan2(y2 - y1, x2 - x1)
    painter.setPen(pen(color, width, alpha))
    painter.drawLine(QPointF(x1, y1), QPointF(x2, y2))

    head_path = QPainterPath(QPointF(x2, y2))
    head_path.lineTo(x2 - head * math.cos(angle - math.pi / 6), y2 - head * math.sin(angle - math.pi / 6))
    head_path.lineTo(x2 - head * math.cos(angle + math.pi / 6), y2 - head * math.sin(angle + math.pi / 6))
    head_path.closeSubpath()
    painter.fillPath(head_path, qcolor(color, alpha))


def polygon(points: Iterable[tuple[float, float]]) -> QPainterPath:
    path = QPainterPath()
    for i, (x, y) in enumerate(points):
        if i == 0:
            path.moveTo(x, y)
        else:
            path.lineTo(x, y)
    path.closeSubpath()
    return path


def draw_side_view_airplane(painter: QPainter, scale: float = 1.0) -> None:
    """
    Light aircraft seen from the side, nose pointing to +x.

    The painter must already be translated to the aircraft center and rotated.
    """
    painter.save()
    painter.scale(scale, scale)

    fuselage = QPainterPath(QPointF(50, 0))
    fuselage.cubicTo(50, -10, 40, -12, 20, -12)
    fuselage.lineTo(-25, -12)
    fuselage.cubicTo(-35, -12, -42, -10, -45, -8)
    fuselage.lineTo(-45, -4)
    fuselage.cubicTo(-42, 5, -35, 6, -25, 6)
    fuselage.lineTo(20, 6)
    fuselage.cubicTo(40, 6, 50, 4, 50, 0)
    fuselage.closeSubpath()
    painter.setPen(pen(FUSELAGE_EDGE, 2.5))
    painter.setBrush(vertical_gradient(-12, 12, FUSELAGE_STOPS))
    painter.drawPath(fuselage)

    painter.setPen(pen(WING_EDGE, 2))
    painter.setBrush(vertical_gradient(0, 30, WING_STOPS))
    painter.drawPath(polygon([(-5, 4), (-15, 4), (-20, 28), (-12, 30), (5, 6)]))

    painter.setBrush(qcolor("#4A90E2"))
    painter.drawPath(polygon([(-45, -4), (-47, -6), (-50, -24), (-44, -22), (-38, -8)]))
    painter.drawPath(polygon([(-45, -2), (-52, 0), (-53, 3), (-48, 4), (-40, 2)]))

    # cockpit window
    painter.setPen(pen("#1565C0", 1.5))
    painter.setBrush(qcolor("#B3E5FC", 0.9))
    painter.drawPath(polygon([(28, -11), (38, -6), (30, -6), (22, -11)]))

    # propeller hub
    painter.setPen(pen("#1A1A1A", 1))
    painter.setBrush(qcolor("#263238"))
    painter.drawEllipse(QPointF(51, 0), 3, 3)

    painter.restore()


def draw_airliner(painter: QPainter, scale: float = 1.0, windows: int = 8) -> None:
    """
    Simple airliner seen from the side, nose pointing to +x.

    The painter must already be translated to the aircraft center and rotated.
    """
    painter.save()
    painter.scale(scale, scale)

    painter.setPen(pen(DUCT, 2))
    painter.setBrush(vertical_gradient(-15, 15, ((0.0, "#ECEFF1"), (0.5, "#CFD8DC"), (1.0, "#90A4AE"))))
    painter.drawPath(polygon([(50, 0), (40, -8), (-30, -10), (-45, -8), (-45, 8), (-30, 10), (40, 8)]))

    painter.setPen(pen("#1976D2", 2))
    painter.setBrush(vertical_gradient(-5, 5, ((0.0, "#64B5F6"), (1.0, "#42A5F5"))))
    painter.drawPath(polygon([(-10, -10), (15, -10), (20, -2), (-5, -2)]))
    painter.setBrush(QColor("#42A5F5"))
    painter.drawPath(polygon([(-45, -8), (-35, -8), (-33, -3), (-43, -3)]))

    for i in range(windows):
        painter.fillRect(QRectF(25 - i * 6, -5, 3, 3), QColor(DUCT))
    painter.restore()
