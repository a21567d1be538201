# MIT License (see LICENSE)
"""
Core physics components.

This subpackage provides:
    - Forces: pairwise gravity and field sampling.
    - Integrators: legacy pairwise and accumulate-then-integrate Euler steps.
    - Invariants: energy and momentum diagnostics.

Typical usage:
    from gravity_sim.core import step

    step(bodies, dt=0.05)
"""
from .forces import gravitational_force, gravitational_acceleration, field_at
from .integrators import euler_step, pairwise_step, accumulate_step, step
from .invariants import kinetic_energy, linear_momentum, potential_energy, total_energy

__all__ = [
    # Forces
    "gravitational_force",
    "gravitational_acceleration",
    "field_at",
    # Integrators
    "euler_step",
    "pairwise_step",
    "accumulate_step",
    "step",
    # Invariants
    "kinetic_energy",
    "linear_momentum",
    "potential_energy",
    "total_energy",
]
