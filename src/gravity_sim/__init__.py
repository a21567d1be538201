# MIT License (see LICENSE)
"""
gravity_sim - A small two-body gravity simulation with field visualization.

Point masses attract each other under Newtonian gravity and are advanced
with a fixed Euler step. Every frame the combined gravitational field is
sampled on a grid and drawn as short clamped segments, with the bodies drawn
on top.

Main entry points:
    - Simulation: Owns the ordered body store; tick() advances it.
    - Body: A point mass with position, velocity and a fixed marker size.
    - SimulationConfig: Viewport, time step and field parameters.

Submodules:
    - core: Pairwise gravity, field sampling, integrators, invariants.
    - renderer: Drawing surfaces, field renderer, frame composition and
      the pygame window.

Example:
    from gravity_sim import Simulation

    sim = Simulation.from_config()
    for _ in range(100):
        sim.tick()

Run the interactive window with ``python -m gravity_sim``.
"""
from .config import SimulationConfig, DEFAULT_CONFIG
from .simulation import Simulation
from .types import Body

__all__ = [
    # Simulation
    "Simulation",
    "Body",
    # Configuration
    "SimulationConfig",
    "DEFAULT_CONFIG",
]
