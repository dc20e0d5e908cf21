"""
Four Forces Model
=================
An airplane body pushed around by lift, weight, thrust and drag.

The forces are dimensionless display values (0-100). Their vertical and
horizontal imbalance accelerates the body, a per-step damping keeps the speed
bounded and the position is clamped to a padded region of the canvas.
"""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Optional

logger = logging.getLogger(__name__)

DEFAULT_FORCE = 50.0
VELOCITY_SCALE = 0.5
DAMPING = 0.95
PADDING = 100.0  # px
ROTATION_GAIN = 0.003  # rad per unit of net vertical force
ROTATION_SMOOTHING = 0.1
STATE_THRESHOLD = 5.0
ARROW_SCALE = 1.0  # px per force unit
MIN_ARROW_LENGTH = 5.0  # px


@dataclass
class ForcesOptions:
    lift: float = DEFAULT_FORCE
    weight: float = DEFAULT_FORCE
    thrust: float = DEFAULT_FORCE
    drag: float = DEFAULT_FORCE


@dataclass
class BodyState:
    x: float
    y: float
    rotation: float = 0.0  # rad, positive is nose down on screen
    vertical_velocity: float = 0.0  # px/s, positive is up
    horizontal_velocity: float = 0.0  # px/s, positive is right


class ForcesModel:

    def __init__(self, width: float, height: float, options: Optional[ForcesOptions] = None) -> None:
        self.width = float(width)
        self.height = float(height)
        options = options or ForcesOptions()
        self.lift = options.lift
        self.weight = options.weight
        self.thrust = options.thrust
        self.drag = options.drag
        self.body = BodyState(x=self.width / 2, y=self.height / 2)

    def set_forces(self, lift: float, weight: float, thrust: float, drag: float) -> None:
        self.lift = float(lift)
        self.weight = float(weight)
        self.thrust = float(thrust)
        self.drag = float(drag)

    @property
    def forces(self) -> dict[str, float]:
        return {"lift": self.lift, "weight": self.weight, "thrust": self.thrust, "drag": self.drag}

    @property
    def net_vertical(self) -> float:
        return self.lift - self.weight

    @property
    def net_horizontal(self) -> float:
        return self.thrust - self.drag

    def force_vectors(self) -> list[tuple[str, float, float]]:
        """
        Screen vectors (name, dx, dy) of the four forces, anchored at the body.

        Vectors shorter than MIN_ARROW_LENGTH are left out.
        """
        vectors = [
            ("lift", 0.0, -self.lift * ARROW_SCALE),
            ("weight", 0.0, self.weight * ARROW_SCALE),
            ("thrust", self.thrust * ARROW_SCALE, 0.0),
            ("drag", -self.drag * ARROW_SCALE, 0.0),
        ]
        return [v for v in vectors if math.hypot(v[1], v[2]) >= MIN_ARROW_LENGTH]

    def update(self, dt: float) -> None:
        body = self.body
        net_v = self.net_vertical
        net_h = self.net_horizontal

        body.vertical_velocity += net_v * VELOCITY_SCALE * dt
        body.horizontal_velocity += net_h * VELOCITY_SCALE * dt
        body.vertical_velocity *= DAMPING
        body.horizontal_velocity *= DAMPING

        # screen y grows downwards
        body.y -= body.vertical_velocity * dt
        body.x += body.horizontal_velocity * dt
        body.x = self._clamp(body.x, self.width)
        body.y = self._clamp(body.y, self.height)

        target = -net_v * ROTATION_GAIN
        body.rotation += (target - body.rotation) * ROTATION_SMOOTHING

    @staticmethod
    def _clamp(value: float, size: float) -> float:
        upper = max(PADDING, size - PADDING)
        return max(PADDING, min(upper, value))

    def reset(self) -> None:
        """Balanced forces, body centered and at rest."""
        self.set_forces(DEFAULT_FORCE, DEFAULT_FORCE, DEFAULT_FORCE, DEFAULT_FORCE)
        self.body = BodyState(x=self.width / 2, y=self.height / 2)
        logger.debug("Forces model reset")

    def resize(self, width: float, height: float) -> None:
        self.body.x *= width / self.width
        self.body.y *= height / self.height
        self.width = float(width)
        self.height = float(height)

    def vertical_state(self) -> str:
        if self.net_vertical > STATE_THRESHOLD:
            return "Climbing ↑"
        if self.net_vertical < -STATE_THRESHOLD:
            return "Descending ↓"
        return "Level Flight"

    def horizontal_state(self) -> str:
        if self.net_horizontal > STATE_THRESHOLD:
            return "Accelerating →"
        if self.net_horizontal < -STATE_THRESHOLD:
            return "Decelerating ←"
        return "Constant Speed"
