# MIT License (see LICENSE)
"""
Conserved quantities of a body set.

Handy for checking integrator behaviour: with no external forces total
momentum stays constant, and total energy drifts only by integration error
(plus whatever the distance clamp removes at close approach).
"""
from __future__ import annotations
from typing import Sequence

import numpy as np

from ..constants import G, MIN_DISTANCE
from ..types import Body
from ..util import clamped_distance


def kinetic_energy(bodies: Sequence[Body]) -> float:
    """
    Total kinetic energy.

    T = Σ 0.5 * m * v²
    """
    return float(sum(0.5 * b.mass * np.dot(b.velocity, b.velocity) for b in bodies))


def linear_momentum(bodies: Sequence[Body]) -> np.ndarray:
    """
    Total linear momentum.

    P = Σ m * v
    """
    p = np.zeros(2, dtype=np.float64)
    for b in bodies:
        p += b.mass * b.velocity
    return p


def potential_energy(bodies: Sequence[Body], min_distance: float = MIN_DISTANCE) -> float:
    """
    Total gravitational potential energy, using the same distance clamp as the forces.

    U = -Σ_{i<j} G * m_i * m_j / max(r_ij, min_distance)
    """
    u = 0.0
    n = len(bodies)
    for i in range(n):
        for j in range(i + 1, n):
            r = clamped_distance(bodies[j].position - bodies[i].position, min_distance)
            u -= G * bodies[i].mass * bodies[j].mass / r
    return u


def total_energy(bodies: Sequence[Body], min_distance: float = MIN_DISTANCE) -> float:
    """Kinetic plus potential energy."""
    return kinetic_energy(bodies) + potential_energy(bodies, min_distance)
