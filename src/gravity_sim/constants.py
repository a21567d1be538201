# MIT License (see LICENSE)
"""
Physical and display constants used throughout the simulation.

The physical constant is in SI units; every other length is in simulation
plane units, which map one-to-one onto window pixels.
"""
from __future__ import annotations

# Newtonian constant of gravitation, G.
# Value: 6.67430 × 10⁻¹¹ m³·kg⁻¹·s⁻²
# Reference: https://physics.nist.gov/cgi-bin/cuu/Value?bg
G: float = 6.67430e-11

# Any pairwise or field-sample distance below this is clamped to it before
# entering an inverse-square term: r → max(r, MIN_DISTANCE).
MIN_DISTANCE: float = 1.0

# Fixed integration step per tick.
DEFAULT_DT: float = 0.05

# Viewport
WIDTH: int = 800
HEIGHT: int = 600

# Field sampling grid
GRID_SPACING: int = 15
MAX_VECTOR_LENGTH: float = 50.0
MAX_INFLUENCE_DISTANCE: float = 300.0

# Milliseconds between physics ticks
TICK_INTERVAL_MS: int = 4

# Colors (RGB)
WHITE: tuple[int, int, int] = (255, 255, 255)
LIGHT_GRAY: tuple[int, int, int] = (192, 192, 192)
