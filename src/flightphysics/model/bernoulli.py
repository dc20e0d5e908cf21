"""
Venturi Tube Flow Model
=======================
Air flowing through a converging-diverging duct, used to demonstrate
Bernoulli's principle.

Why is this file needed?
------------------------
1. Continuity: the local speed follows A1·v1 = A2·v2, with the channel height
   standing in for the cross-sectional area of a real tube.
2. Energy: the local static pressure is the constant total pressure minus the
   local dynamic pressure (P + ½·ρ·v² = const).
3. Animation: a fixed set of particles travels along the duct at the local speed.

Classes:
    DuctGeometry: Shape of the duct as fractions of the canvas.
    BernoulliOptions: User adjustable inputs.
    Particle: One flow marker.
    FlowSample: Derived quantities at one position along the duct.
    PressureBar: One pressure indicator station.
    BernoulliModel: The simulation state.
"""
from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

import numpy as np

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)

AIR_DENSITY = 1.225  # kg/m³ at sea level
ATMOSPHERIC_PRESSURE = 101325.0  # Pa (1 atm)

# Pressure bars are normalized against the drop reached at the top of the airspeed slider
REFERENCE_VELOCITY = 100.0  # m/s

PARTICLE_RATE = 150.0  # px/s at the entrance speed
PARTICLE_SIZE = 2.5  # px
PARTICLE_SPREAD = 0.8  # fraction of the local channel height used by particles

PRESSURE_STATIONS: tuple[tuple[float, str], ...] = (
    (0.15, "Entrance"),
    (0.5, "Throat"),
    (0.85, "Exit"),
)
LOW_PRESSURE_LEVEL = 0.4
NORMAL_PRESSURE_LEVEL = 0.8
VELOCITY_ARROW_LENGTH = 40.0  # px at the entrance speed


def dynamic_pressure(velocity: float, density: float = AIR_DENSITY) -> float:
    """q = ½·ρ·v²"""
    return 0.5 * density * velocity ** 2


@dataclass(frozen=True)
class DuctGeometry:
    """
    Duct outline as fractions of the canvas height (top/bottom) and width (start/end).

    Three zones: converging entrance [0, throat_start), constant throat
    [throat_start, throat_end] and diverging exit (throat_end, 1].
    """
    tube_top: float = 0.3
    tube_bottom: float = 0.7
    throat_top: float = 0.4
    throat_bottom: float = 0.6
    throat_start: float = 0.35
    throat_end: float = 0.65

    def __post_init__(self) -> None:
        if not self.tube_bottom > self.tube_top:
            raise ValueError("Tube bottom must lie below the tube top.")
        if not self.throat_bottom > self.throat_top:
            raise ValueError("Throat height must be positive.")
        if not self.throat_bottom - self.throat_top < self.tube_bottom - self.tube_top:
            raise ValueError("Throat must be narrower than the tube.")
        if not 0.0 < self.throat_start <= self.throat_end < 1.0:
            raise ValueError("Throat must lie strictly inside the duct.")

    @property
    def entrance_height(self) -> float:
        return self.tube_bottom - self.tube_top

    @property
    def throat_height(self) -> float:
        return self.throat_bottom - self.throat_top

    @property
    def contraction_ratio(self) -> float:
        """Entrance height divided by throat height."""
        return self.entrance_height / self.throat_height

    def envelope(self, u: float) -> tuple[float, float]:
        """
        Normalized (top, bottom) of the channel at the normalized position u.

        Args:
            u: Position along the duct, 0 at the left edge and 1 at the right edge.

        Returns:
            Top and bottom of the channel as fractions of the canvas height.
        """
        if u < self.throat_start:
            t = u / self.throat_start
            top = self.tube_top + (self.throat_top - self.tube_top) * t
            bottom = self.tube_bottom - (self.tube_bottom - self.throat_bottom) * t
            return top, bottom

        if u <= self.throat_end:
            return self.throat_top, self.throat_bottom

        t = (u - self.throat_end) / (1.0 - self.throat_end)
        top = self.throat_top + (self.tube_top - self.throat_top) * t
        bottom = self.throat_bottom + (self.tube_bottom - self.throat_bottom) * t
        return top, bottom

    def envelope_profile(self, u: npt.NDArray[np.float64]) -> tuple[npt.NDArray[np.float64], npt.NDArray[np.float64]]:
        """Vectorized `envelope` for positions inside [0, 1]."""
        knots = [0.0, self.throat_start, self.throat_end, 1.0]
        top = np.interp(u, knots, [self.tube_top, self.throat_top, self.throat_top, self.tube_top])
        bottom = np.interp(u, knots, [self.tube_bottom, self.throat_bottom, self.throat_bottom, self.tube_bottom])
        return top, bottom


@dataclass
class BernoulliOptions:
    base_velocity: float = 50.0  # m/s
    particle_count: int = 150


@dataclass
class Particle:
    x: float
    y: float
    base_y: float  # spawn height, the lateral offset is derived from it
    opacity: float
    size: float = PARTICLE_SIZE


@dataclass(frozen=True)
class FlowSample:
    """Flow quantities at one position along the duct."""
    x: float
    top: float
    bottom: float
    velocity: float
    pressure: float

    @property
    def height(self) -> float:
        return self.bottom - self.top


@dataclass(frozen=True)
class PressureBar:
    """Pressure indicator at one station. `fraction` is the bar fill in [0, 1]."""
    label: str
    x: float
    pressure: float
    drop: float
    fraction: float

    @property
    def level(self) -> str:
        if self.fraction < LOW_PRESSURE_LEVEL:
            return "LOW"
        if self.fraction > NORMAL_PRESSURE_LEVEL:
            return "NORMAL"
        return ""


class BernoulliModel:
    """
    Flow through a Venturi tube drawn on a canvas of `width` x `height` pixels.

    The entrance (left edge) speed is set by the user, everything else is derived.
    """

    def __init__(
        self,
        width: float,
        height: float,
        base_velocity: float = 50.0,
        particle_count: int = 150,
        geometry: Optional[DuctGeometry] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.width = float(width)
        self.height = float(height)
        self.base_velocity = float(base_velocity)
        self.particle_count = particle_count
        self.geometry = geometry or DuctGeometry()
        self._rng = rng or random.Random()
        self.particles: list[Particle] = []
        self.create_particles()

    # ---- geometry ----

    def envelope_at(self, x: float) -> tuple[float, float]:
        """Channel (top, bottom) in pixels at the horizontal pixel position x."""
        top, bottom = self.geometry.envelope(x / self.width)
        return top * self.height, bottom * self.height

    def height_at(self, x: float) -> float:
        top, bottom = self.envelope_at(x)
        return bottom - top

    @property
    def entrance_height(self) -> float:
        return self.geometry.entrance_height * self.height

    # ---- physics ----

    def set_velocity(self, velocity: float) -> None:
        self.base_velocity = float(velocity)

    def speed_ratio_at(self, x: float) -> float:
        """Local speed divided by the entrance speed (continuity)."""
        return self.entrance_height / self.height_at(x)

    def velocity_at(self, x: float) -> float:
        """v2 = v1 · (h1 / h2)"""
        return self.base_velocity * self.speed_ratio_at(x)

    @property
    def total_pressure(self) -> float:
        """Total pressure, constant along the streamline."""
        return ATMOSPHERIC_PRESSURE + dynamic_pressure(self.base_velocity)

    def pressure_at(self, x: float) -> float:
        """Static pressure: total pressure minus the local dynamic pressure."""
        return self.total_pressure - dynamic_pressure(self.velocity_at(x))

    def total_pressure_at(self, x: float) -> float:
        """Static plus dynamic pressure at x."""
        return self.pressure_at(x) + dynamic_pressure(self.velocity_at(x))

    def sample(self, x: float) -> FlowSample:
        top, bottom = self.envelope_at(x)
        return FlowSample(
            x=x,
            top=top,
            bottom=bottom,
            velocity=self.velocity_at(x),
            pressure=self.pressure_at(x),
        )

    def profile(self, n_points: int = 200) -> tuple[npt.NDArray[np.float64], npt.NDArray[np.float64], npt.NDArray[np.float64]]:
        """
        Speed and static pressure sampled along the whole duct.

        Returns:
            (u, velocity, pressure) where u is the normalized position in [0, 1].
        """
        u = np.linspace(0.0, 1.0, n_points)
        top, bottom = self.geometry.envelope_profile(u)
        velocity = self.base_velocity * self.geometry.entrance_height / (bottom - top)
        pressure = self.total_pressure - 0.5 * AIR_DENSITY * velocity ** 2
        return u, velocity, pressure

    @property
    def max_pressure_drop(self) -> float:
        """Entrance-to-throat drop at the reference speed; fixed scale for the bars."""
        throat_velocity = REFERENCE_VELOCITY * self.geometry.contraction_ratio
        return dynamic_pressure(throat_velocity) - dynamic_pressure(REFERENCE_VELOCITY)

    def pressure_bars(self) -> list[PressureBar]:
        entrance_pressure = self.pressure_at(self.width * PRESSURE_STATIONS[0][0])
        max_drop = abs(self.max_pressure_drop)

        bars: list[PressureBar] = []
        for fraction_x, label in PRESSURE_STATIONS:
            x = self.width * fraction_x
            pressure = self.pressure_at(x)
            drop = entrance_pressure - pressure
            drop_ratio = min(1.0, max(0.0, drop / max_drop))
            bars.append(PressureBar(label=label, x=x, pressure=pressure, drop=drop, fraction=1.0 - drop_ratio))
        return bars

    def velocity_arrows(self) -> list[tuple[float, float, float]]:
        """(x, arrow length in px, local speed) at each pressure station."""
        arrows = []
        for fraction_x, _ in PRESSURE_STATIONS:
            x = self.width * fraction_x
            arrows.append((x, self.speed_ratio_at(x) * VELOCITY_ARROW_LENGTH, self.velocity_at(x)))
        return arrows

    # ---- particles ----

    def create_particles(self) -> None:
        self.particles = [self._spawn(self._rng.random() * self.width) for _ in range(self.particle_count)]

    def _spawn(self, x: float) -> Particle:
        top, bottom = self.envelope_at(x)
        y = top + self._rng.random() * (bottom - top)
        return Particle(x=x, y=y, base_y=y, opacity=0.5 + self._rng.random() * 0.5)

    def lateral_offset(self, particle: Particle) -> float:
        """Spawn height as a fraction of the entrance envelope."""
        tube_top = self.height * self.geometry.tube_top
        return (particle.base_y - tube_top) / self.entrance_height

    def update(self, dt: float) -> None:
        """Advance every particle by dt seconds."""
        for particle in self.particles:
            particle.x += self.speed_ratio_at(particle.x) * PARTICLE_RATE * dt

            if particle.x > self.width:
                # wrap to the entrance with a fresh lateral position
                respawned = self._spawn(0.0)
                particle.x = 0.0
                particle.base_y = respawned.base_y

            top, bottom = self.envelope_at(particle.x)
            center = (top + bottom) / 2
            particle.y = center + (self.lateral_offset(particle) - 0.5) * (bottom - top) * PARTICLE_SPREAD

    def resize(self, width: float, height: float) -> None:
        sx = width / self.width
        sy = height / self.height
        self.width = float(width)
        self.height = float(height)
        for particle in self.particles:
            particle.x *= sx
            particle.y *= sy
            particle.base_y *= sy
        logger.debug(f"Bernoulli model resized to {self.width:.0f}x{self.height:.0f}")

    def clear(self) -> None:
        """Drop the particle state."""
        self.particles = []
