# MIT License (see LICENSE)
"""
Simulation and window configuration.

All values are hard-coded defaults; there is no command line or environment
override. Tests and benchmarks construct their own instances.
"""
from __future__ import annotations
from dataclasses import dataclass
import math

from .constants import (
    DEFAULT_DT,
    GRID_SPACING,
    HEIGHT,
    LIGHT_GRAY,
    MAX_INFLUENCE_DISTANCE,
    MAX_VECTOR_LENGTH,
    MIN_DISTANCE,
    TICK_INTERVAL_MS,
    WHITE,
    WIDTH,
)

SCHEMES = ("pairwise", "accumulate")


@dataclass(frozen=True)
class SimulationConfig:
    """
    Parameters shared by the physics stepper, the field renderer and the window.

    Attributes:
        width: Viewport width in simulation units (pixels).
        height: Viewport height in simulation units (pixels).
        dt: Integration step applied on every tick.
        tick_interval_ms: Wall-clock interval between ticks.
        scheme: Integration scheme, "pairwise" (each pair integrates its two
                bodies immediately) or "accumulate" (sum all accelerations,
                then integrate once).
        grid_spacing: Distance between field sample points.
        max_vector_length: Longest field segment drawn.
        max_influence_distance: Bodies farther than this from a sample point
                                do not contribute to it.
        min_distance: Inverse-square distance clamp.
        background: Window clear color.
        field_color: Color of the field segments.
        body_color: Color of the seeded bodies.
        title: Window caption.
    """
    width: int = WIDTH
    height: int = HEIGHT
    dt: float = DEFAULT_DT
    tick_interval_ms: int = TICK_INTERVAL_MS
    scheme: str = "pairwise"
    grid_spacing: int = GRID_SPACING
    max_vector_length: float = MAX_VECTOR_LENGTH
    max_influence_distance: float = MAX_INFLUENCE_DISTANCE
    min_distance: float = MIN_DISTANCE
    background: tuple[int, int, int] = WHITE
    field_color: tuple[int, int, int] = LIGHT_GRAY
    body_color: tuple[int, int, int] = LIGHT_GRAY
    title: str = "Gravity Simulation"

    def __post_init__(self) -> None:
        # Pixel counts and timer intervals feed range() and pygame.
        for name in ("width", "height", "tick_interval_ms", "grid_spacing"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"{name} must be an int, got {value!r}")
        for name in (
            "width",
            "height",
            "dt",
            "tick_interval_ms",
            "grid_spacing",
            "max_vector_length",
            "max_influence_distance",
            "min_distance",
        ):
            value = getattr(self, name)
            if not math.isfinite(value) or value <= 0:
                raise ValueError(f"{name} must be positive and finite, got {value}")
        if self.scheme not in SCHEMES:
            raise ValueError(f"Unknown integration scheme: {self.scheme}")

    @property
    def bounds(self) -> tuple[int, int]:
        """Viewport size as (width, height)."""
        return self.width, self.height


DEFAULT_CONFIG = SimulationConfig()
