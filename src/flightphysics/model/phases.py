"""
Flight Phases Model
===================
A five state machine (takeoff, climb, cruise, descent, landing) with an
aircraft pose that eases toward the target pose of the active phase.

Why is this file needed?
------------------------
1. Targets: every phase has a position on the canvas, a pitch angle and a speed.
2. Auto-play: the phases are cycled in order, one every `phase_duration` seconds.
3. Readouts: altitude and the force balance that characterizes each phase.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import NamedTuple, Optional

logger = logging.getLogger(__name__)

PHASES: tuple[str, ...] = ("takeoff", "climb", "cruise", "descent", "landing")
RUNWAY_PHASES = ("takeoff", "landing")

GROUND_OFFSET = 80.0  # px from the bottom of the canvas
RUNWAY_MARGIN = 50.0  # px
SMOOTHING = 0.05  # fraction of the remaining distance covered per frame
MAX_ALTITUDE = 10000  # ft at the top of the canvas


class PhaseTarget(NamedTuple):
    x: float
    y: float
    rotation: float  # deg, negative is nose up
    speed: float  # m/s


class ForceBalance(NamedTuple):
    lift: float
    weight: float
    thrust: float
    drag: float
    status: str


FORCE_BALANCE: dict[str, ForceBalance] = {
    "takeoff": ForceBalance(55, 50, 80, 40, "Accelerating, Rotating"),
    "climb": ForceBalance(60, 50, 70, 45, "Climbing, Accelerating"),
    "cruise": ForceBalance(50, 50, 50, 50, "Level Flight (Balanced)"),
    "descent": ForceBalance(45, 50, 40, 45, "Descending"),
    "landing": ForceBalance(48, 50, 30, 55, "Descending, Decelerating"),
}


def phase_target(phase: str, width: float, height: float) -> PhaseTarget:
    """
    Target pose of a phase on a canvas of the given size.

    Raises:
        ValueError: If the phase is not one of PHASES.
    """
    ground = height - GROUND_OFFSET
    if phase == "takeoff":
        return PhaseTarget(width * 0.2, ground - 20, 0.0, 60.0)
    if phase == "climb":
        return PhaseTarget(width * 0.35, height * 0.4, -15.0, 70.0)
    if phase == "cruise":
        return PhaseTarget(width * 0.5, height * 0.3, 0.0, 80.0)
    if phase == "descent":
        return PhaseTarget(width * 0.65, height * 0.5, 5.0, 65.0)
    if phase == "landing":
        return PhaseTarget(width * 0.8, ground - 20, 3.0, 50.0)
    raise ValueError(f"Unknown flight phase: '{phase}'. Expected one of {', '.join(PHASES)}.")


@dataclass
class PhasesOptions:
    initial_phase: str = "cruise"
    phase_duration: float = 3.0  # s


@dataclass
class AircraftPose:
    x: float
    y: float
    rotation: float
    speed: float


class FlightPhasesModel:

    def __init__(self, width: float, height: float, options: Optional[PhasesOptions] = None) -> None:
        options = options or PhasesOptions()
        self.width = float(width)
        self.height = float(height)
        self.phase_duration = options.phase_duration

        self.auto_play = False
        self.phase = options.initial_phase
        self.phase_index = 0
        self.elapsed = 0.0
        self.progress = 0.0
        self.set_phase(options.initial_phase)

        # first placement is immediate
        self.pose = AircraftPose(*self.target)

    @property
    def ground_level(self) -> float:
        return self.height - GROUND_OFFSET

    @property
    def runway(self) -> tuple[float, float]:
        return RUNWAY_MARGIN, self.width - RUNWAY_MARGIN

    @property
    def shows_runway(self) -> bool:
        return self.phase in RUNWAY_PHASES

    def set_phase(self, phase: str) -> None:
        """Retarget immediately and restart the phase clock."""
        self.target = phase_target(phase, self.width, self.height)
        self.phase = phase
        self.phase_index = PHASES.index(phase)
        self.elapsed = 0.0
        self.progress = 0.0
        logger.debug(f"Flight phase set to '{phase}'")

    def toggle_auto_play(self) -> bool:
        """Flip auto-play. Enabling it restarts the profile at takeoff."""
        self.auto_play = not self.auto_play
        if self.auto_play:
            self.set_phase(PHASES[0])
        logger.info(f"Flight phase auto-play {'enabled' if self.auto_play else 'disabled'}")
        return self.auto_play

    def advance_phase(self) -> None:
        self.set_phase(PHASES[(self.phase_index + 1) % len(PHASES)])

    def update(self, dt: float) -> None:
        if self.auto_play:
            self.elapsed += dt
            if self.elapsed >= self.phase_duration:
                self.advance_phase()
            self.progress = min(self.elapsed / self.phase_duration, 1.0)

        pose, target = self.pose, self.target
        pose.x += (target.x - pose.x) * SMOOTHING
        pose.y += (target.y - pose.y) * SMOOTHING
        pose.rotation += (target.rotation - pose.rotation) * SMOOTHING
        pose.speed += (target.speed - pose.speed) * SMOOTHING

    def resize(self, width: float, height: float) -> None:
        self.pose.x *= width / self.width
        self.pose.y *= height / self.height
        self.width = float(width)
        self.height = float(height)
        self.target = phase_target(self.phase, self.width, self.height)

    @property
    def altitude(self) -> int:
        """Altitude readout in feet, the ground is 0 and the canvas top is 10 000."""
        return max(0, round((1 - self.pose.y / self.ground_level) * MAX_ALTITUDE))

    @property
    def force_balance(self) -> ForceBalance:
        return FORCE_BALANCE[self.phase]
