"""
Intro Preview Model
===================
A looping takeoff: ground roll, rotation and liftoff, climb out and a fly-out
during which the force arrows fade away.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

logger = logging.getLogger(__name__)

GROUND_OFFSET = 60.0  # px from the bottom of the canvas
FORCE_ARROW_LENGTH = 50.0  # px
DRAG_ARROW_SCALE = 0.6

# (x fraction of width, y, radius)
CLOUDS: tuple[tuple[float, float, float], ...] = (
    (0.15, 40.0, 40.0),
    (0.6, 60.0, 50.0),
    (0.85, 35.0, 35.0),
)


@dataclass
class IntroOptions:
    loop_duration: float = 6.0  # s


@dataclass
class IntroPose:
    x: float
    y: float
    rotation: float  # deg, negative is nose up
    on_ground: bool
    force_alpha: float


class IntroModel:

    def __init__(self, width: float, height: float, options: Optional[IntroOptions] = None) -> None:
        options = options or IntroOptions()
        self.width = float(width)
        self.height = float(height)
        self.loop_duration = options.loop_duration
        self.time = 0.0
        self.pose = self.resting_pose()

    @property
    def ground_level(self) -> float:
        return self.height - GROUND_OFFSET

    @property
    def loop_fraction(self) -> float:
        return (self.time % self.loop_duration) / self.loop_duration

    def resting_pose(self) -> IntroPose:
        """Parked on the runway before the first frame."""
        return IntroPose(self.width * 0.2, self.ground_level - 15, 0.0, True, 0.0)

    def rewind(self) -> None:
        self.time = 0.0

    def update(self, dt: float) -> None:
        self.time += dt
        self.pose = self.pose_at(self.loop_fraction)

    def pose_at(self, t: float) -> IntroPose:
        """Pose at the loop fraction t in [0, 1)."""
        w = self.width
        ground = self.ground_level

        if t < 0.3:
            # ground roll, forces fade in
            p = t / 0.3
            return IntroPose(w * (0.15 + p * 0.15), ground - 15, 0.0, True, min(p * 2, 1.0))
        if t < 0.5:
            # rotation and liftoff
            p = (t - 0.3) / 0.2
            return IntroPose(w * (0.3 + p * 0.1), ground - 15 - p * 40, -p * 12, False, 1.0)
        if t < 0.85:
            p = (t - 0.5) / 0.35
            return IntroPose(w * (0.4 + p * 0.3), ground - 55 - p * 80, -10.0, False, 1.0)
        # fly-out, forces fade out
        p = (t - 0.85) / 0.15
        return IntroPose(w * 0.7 + p * w * 0.2, ground - 135, -5.0, False, 1.0 - p)

    def resize(self, width: float, height: float) -> None:
        self.width = float(width)
        self.height = float(height)
        self.pose = self.pose_at(self.loop_fraction) if self.time else self.resting_pose()
