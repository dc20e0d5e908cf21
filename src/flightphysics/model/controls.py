"""
Control Surfaces Model
======================
Maps the deflection of the ailerons, elevator and rudder (degrees) to the
aircraft's roll, pitch and yaw response indicators.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

logger = logging.getLogger(__name__)

ROLL_GAIN = -0.8
PITCH_GAIN = -0.5
YAW_GAIN = 0.6
RESPONSE_THRESHOLD = 2.0  # deg


@dataclass
class ControlsOptions:
    aileron: float = 0.0
    elevator: float = 0.0
    rudder: float = 0.0


class ControlsModel:

    def __init__(self, options: Optional[ControlsOptions] = None) -> None:
        options = options or ControlsOptions()
        self.aileron = 0.0
        self.elevator = 0.0
        self.rudder = 0.0
        self.roll = 0.0
        self.pitch = 0.0
        self.yaw = 0.0
        self.set_controls(options.aileron, options.elevator, options.rudder)

    def set_controls(self, aileron: float, elevator: float, rudder: float) -> None:
        """Set all three deflections at once and derive the response."""
        self.aileron = float(aileron)
        self.elevator = float(elevator)
        self.rudder = float(rudder)

        self.roll = self.aileron * ROLL_GAIN
        self.pitch = self.elevator * PITCH_GAIN
        self.yaw = self.rudder * YAW_GAIN

    def reset(self) -> None:
        self.set_controls(0.0, 0.0, 0.0)
        logger.debug("Control surfaces centered")

    def roll_text(self) -> str:
        if self.roll > RESPONSE_THRESHOLD:
            return "Rolling LEFT ↶"
        if self.roll < -RESPONSE_THRESHOLD:
            return "Rolling RIGHT ↷"
        return "Level"

    def pitch_text(self) -> str:
        if self.pitch > RESPONSE_THRESHOLD:
            return "Nose UP ↑"
        if self.pitch < -RESPONSE_THRESHOLD:
            return "Nose DOWN ↓"
        return "Level"

    def yaw_text(self) -> str:
        if self.yaw > RESPONSE_THRESHOLD:
            return "Nose RIGHT →"
        if self.yaw < -RESPONSE_THRESHOLD:
            return "Nose LEFT ←"
        return "Straight"

    def summary(self) -> str:
        return f"A: {self.aileron:.0f}° | E: {self.elevator:.0f}° | R: {self.rudder:.0f}°"
