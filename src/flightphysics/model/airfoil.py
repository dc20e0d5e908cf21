"""
Airfoil Model
=============
Lift and drag of a wing section as a function of its shape and angle of attack,
plus the streamlines bending around it.

Why is this file needed?
------------------------
1. Coefficients: piecewise linear lift curve with a stall region and a simple
   parabolic drag polar.
2. Shape: upper and lower surface offsets of the supported section types.
3. Flow picture: horizontal streamlines deflected near the foil, drifting
   with time.

All angles are in degrees. Screen coordinates are used, so negative offsets are
above the chord line.
"""
from __future__ import annotations

import logging
import math
import random
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

import numpy as np

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)

AIRFOIL_TYPES = ("cambered", "symmetric", "flat")

CHORD_LENGTH = 200.0  # px
SHAPE_SEGMENTS = 50

STALL_ANGLE = 15.0
NEGATIVE_STALL_ANGLE = -10.0
POST_STALL_LIMIT = 20.0
LIFT_SLOPE = 0.1  # per degree
CAMBER_LIFT = 0.2
POST_STALL_LOSS = 0.8
NEGATIVE_STALL_LIFT = -0.5
DEEP_STALL_LIFT = 0.5

PARASITIC_DRAG = 0.02
ASPECT_RATIO = 6.0
STALL_DRAG = 0.3

STREAMLINE_COUNT = 8
STREAMLINE_DRIFT = 20.0  # px/s
STREAMLINE_STEP = 2.0  # px
INFLUENCE_HEIGHT = 150.0  # px
DEFLECTION_DECAY = 40.0  # px
MAX_DEFLECTION = 35.0  # px


def base_lift(airfoil_type: str) -> float:
    """Lift coefficient at zero angle of attack."""
    return CAMBER_LIFT if airfoil_type == "cambered" else 0.0


def lift_coefficient(alpha: float, airfoil_type: str = "cambered") -> float:
    """
    Simplified lift coefficient CL(α).

    Linear between -10° and the stall angle (15°), falls linearly by 0.8 over the
    next 5° and plateaus outside that range.
    """
    base = base_lift(airfoil_type)

    if alpha < NEGATIVE_STALL_ANGLE:
        return NEGATIVE_STALL_LIFT
    if alpha <= STALL_ANGLE:
        return base + LIFT_SLOPE * alpha
    if alpha <= POST_STALL_LIMIT:
        peak = base + LIFT_SLOPE * STALL_ANGLE
        reduction = (alpha - STALL_ANGLE) / (POST_STALL_LIMIT - STALL_ANGLE)
        return peak - reduction * POST_STALL_LOSS
    return DEEP_STALL_LIFT


def drag_coefficient(alpha: float, airfoil_type: str = "cambered") -> float:
    """CD = CD0 + CL²/(π·AR), plus a flat penalty once the flow separates."""
    cl = lift_coefficient(alpha, airfoil_type)
    cd = PARASITIC_DRAG + cl ** 2 / (math.pi * ASPECT_RATIO)
    if is_stalled(alpha):
        cd += STALL_DRAG
    return cd


def lift_to_drag(alpha: float, airfoil_type: str = "cambered") -> float:
    return lift_coefficient(alpha, airfoil_type) / drag_coefficient(alpha, airfoil_type)


def is_stalled(alpha: float) -> bool:
    return abs(alpha) > STALL_ANGLE


def lift_curve(
    airfoil_type: str, alpha_min: float = -15.0, alpha_max: float = 25.0, n_points: int = 161
) -> tuple[npt.NDArray[np.float64], npt.NDArray[np.float64]]:
    """Sampled CL(α) over [alpha_min, alpha_max]."""
    alphas = np.linspace(alpha_min, alpha_max, n_points)
    cls = np.array([lift_coefficient(float(a), airfoil_type) for a in alphas])
    return alphas, cls


def surface_offsets(t: npt.ArrayLike, airfoil_type: str) -> tuple[npt.NDArray[np.float64], npt.NDArray[np.float64]]:
    """
    Upper and lower surface offsets from the chord line.

    Args:
        t: Normalized chord position(s), 0 at the leading edge and 1 at the trailing edge.
        airfoil_type: One of AIRFOIL_TYPES. Anything else collapses to the chord line.

    Returns:
        (upper, lower) offsets in px, screen oriented.
    """
    t = np.asarray(t, dtype=np.float64)
    hump = np.sin(np.pi * t)

    if airfoil_type == "cambered":
        return -15.0 * hump - 5.0 * t, 8.0 * hump - 3.0 * t
    if airfoil_type == "symmetric":
        return -12.0 * hump, 12.0 * hump
    if airfoil_type == "flat":
        return -12.0 * hump, np.full_like(t, 2.0)
    return np.zeros_like(t), np.zeros_like(t)


def shape_points(
    airfoil_type: str, chord: float = CHORD_LENGTH, segments: int = SHAPE_SEGMENTS
) -> tuple[npt.NDArray[np.float64], npt.NDArray[np.float64], npt.NDArray[np.float64]]:
    """
    Outline of the section centered on the chord midpoint.

    Returns:
        (x, upper, lower) with segments + 1 samples each.
    """
    t = np.linspace(0.0, 1.0, segments + 1)
    x = t * chord - chord / 2
    upper, lower = surface_offsets(t, airfoil_type)
    return x, upper, lower


def streamline_deflection(dx: float, dy: float, alpha: float, chord: float = CHORD_LENGTH) -> float:
    """
    Vertical displacement of a streamline sample at (dx, dy) from the foil center.

    Samples on or above the center line are pushed up, samples below are pushed down.
    """
    if abs(dx) >= chord / 1.2 or abs(dy) >= INFLUENCE_HEIGHT:
        return 0.0

    vertical = math.exp(-abs(dy) / DEFLECTION_DECAY)
    along_chord = min(1.0, max(0.0, (dx + chord / 2) / chord))
    horizontal = math.sin(math.pi * along_chord)
    sign = 1.0 if dy > 0 else -1.0

    deflection = sign * vertical * horizontal * MAX_DEFLECTION
    deflection *= 1 + alpha / 20

    if alpha > 0 and dy < 0:
        deflection *= 1.3
    elif alpha > 0 and dy > 0:
        deflection *= 0.8
    return deflection


@dataclass
class AirfoilOptions:
    angle_of_attack: float = 5.0  # deg
    airfoil_type: str = "cambered"


@dataclass
class Streamline:
    y: float
    offset: float  # ripple phase in px


class AirfoilModel:

    def __init__(
        self,
        width: float,
        height: float,
        options: Optional[AirfoilOptions] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        options = options or AirfoilOptions()
        self.width = float(width)
        self.height = float(height)
        self.angle_of_attack = float(options.angle_of_attack)
        self.airfoil_type = options.airfoil_type
        self.chord = CHORD_LENGTH
        self.time = 0.0
        self._rng = rng or random.Random()
        self.streamlines: list[Streamline] = []
        self.create_streamlines()

    @property
    def center(self) -> tuple[float, float]:
        return self.width / 2, self.height / 2

    def create_streamlines(self) -> None:
        spacing = self.height / (STREAMLINE_COUNT + 1)
        self.streamlines = [
            Streamline(y=spacing * i, offset=self._rng.random() * 100) for i in range(1, STREAMLINE_COUNT + 1)
        ]

    def set_angle_of_attack(self, alpha: float) -> None:
        self.angle_of_attack = float(alpha)

    def set_airfoil_type(self, airfoil_type: str) -> None:
        if airfoil_type not in AIRFOIL_TYPES:
            logger.warning(f"Unknown airfoil type '{airfoil_type}', drawing the chord line only")
        self.airfoil_type = airfoil_type

    def update(self, dt: float) -> None:
        self.time += dt

    def resize(self, width: float, height: float) -> None:
        sy = height / self.height
        self.width = float(width)
        self.height = float(height)
        for streamline in self.streamlines:
            streamline.y *= sy

    @property
    def lift_coefficient(self) -> float:
        return lift_coefficient(self.angle_of_attack, self.airfoil_type)

    @property
    def drag_coefficient(self) -> float:
        return drag_coefficient(self.angle_of_attack, self.airfoil_type)

    @property
    def lift_to_drag(self) -> float:
        return lift_to_drag(self.angle_of_attack, self.airfoil_type)

    @property
    def is_stalled(self) -> bool:
        return is_stalled(self.angle_of_attack)

    def shape_points(self) -> tuple[npt.NDArray[np.float64], npt.NDArray[np.float64], npt.NDArray[np.float64]]:
        return shape_points(self.airfoil_type, self.chord)

    def streamline_path(self, streamline: Streamline) -> tuple[npt.NDArray[np.float64], npt.NDArray[np.float64]]:
        """Sampled (x, y) of one streamline at the current time."""
        cx, cy = self.center
        phase = streamline.offset + self.time * STREAMLINE_DRIFT
        dy = streamline.y - cy

        xs = np.arange(0.0, self.width, STREAMLINE_STEP)
        deflection = np.array([streamline_deflection(x - cx, dy, self.angle_of_attack, self.chord) for x in xs])
        ys = streamline.y + deflection + np.sin((xs + phase) / 30) * 2
        return xs, ys
