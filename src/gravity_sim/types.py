# MIT License (see LICENSE)
"""
Core type definitions for the gravity simulation.

A Body is a point mass moving in the simulation plane:
  dx/dt = v
  dv/dt = a    (a from pairwise gravity, see core/forces.py)
"""
from __future__ import annotations
from dataclasses import dataclass, field
import math

import numpy as np

from .constants import LIGHT_GRAY
from .util import f64

# Smallest marker radius drawn, in pixels.
MIN_DRAW_RADIUS = 3


@dataclass
class Body:
    """
    A point mass with kinematic state and a fixed marker size.

    Attributes:
        position: Position [x, y] in simulation units.
        velocity: Velocity [vx, vy] in simulation units per time unit.
        mass: Gravitational mass. Must be finite and > 0.
        color: RGB marker color.
        display_radius: int(ln(mass) * 2), computed once on construction.
        id: Identifier assigned by Simulation.add_body().

    Raises:
        ValueError: If mass is zero, negative, NaN or infinite. Accelerations
                    divide by mass, so such a body would poison the whole
                    simulation with NaN/Inf.
    """
    position: np.ndarray | tuple[float, float]
    mass: float
    velocity: np.ndarray | tuple[float, float] = (0.0, 0.0)
    color: tuple[int, int, int] = LIGHT_GRAY
    display_radius: int = field(init=False)
    id: int = -1

    def __post_init__(self) -> None:
        mass = float(self.mass)
        if not math.isfinite(mass) or mass <= 0:
            raise ValueError(f"Body mass must be positive and finite, got {self.mass}")
        self.mass = mass
        self.position = f64(self.position)
        self.velocity = f64(self.velocity)
        self.color = tuple(self.color)
        # Truncated, not rounded: matches the (int) cast in the Java GravitySimulation Planet.
        self.display_radius = int(math.log(mass) * 2)

    @property
    def x(self) -> float:
        return float(self.position[0])

    @property
    def y(self) -> float:
        return float(self.position[1])

    @property
    def draw_radius(self) -> int:
        """Radius of the filled marker: half the display radius, at least 3 px."""
        return max(self.display_radius // 2, MIN_DRAW_RADIUS)
