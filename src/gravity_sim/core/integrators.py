# MIT License (see LICENSE)
"""
Time stepping for point masses under mutual gravity.

Both schemes use semi-implicit (symplectic) Euler per body:
    v(t+dt) = v(t) + a*dt
    x(t+dt) = x(t) + v(t+dt)*dt

Available schemes:
- pairwise: legacy pairwise-immediate integration. Each pair (i, j), i < j,
  integrates both bodies as soon as its acceleration is known, so with three
  or more bodies the result depends on store order.
- accumulate: sum every pairwise acceleration on a body first, then
  integrate each body once. Order independent.

For two bodies the schemes differ only in the order of the two single-body
updates and produce identical states.
"""
from __future__ import annotations
import logging
from typing import Sequence

import numpy as np

from ..constants import MIN_DISTANCE
from ..types import Body
from .forces import gravitational_acceleration

logger = logging.getLogger(__name__)


def euler_step(body: Body, acceleration: np.ndarray, dt: float) -> None:
    """
    Advance a single body by dt under a constant acceleration.

    Args:
        body: Body to integrate (modified in-place).
        acceleration: Acceleration vector [ax, ay].
        dt: Timestep.
    """
    body.velocity += acceleration * dt
    body.position += body.velocity * dt


def pairwise_step(bodies: Sequence[Body], dt: float, min_distance: float = MIN_DISTANCE) -> None:
    """Legacy pairwise-immediate integration (see module docstring)."""
    n = len(bodies)
    for i in range(n):
        for j in range(i + 1, n):
            acc_i, acc_j = gravitational_acceleration(bodies[i], bodies[j], min_distance)
            euler_step(bodies[i], acc_i, dt)
            euler_step(bodies[j], acc_j, dt)


def accumulate_step(bodies: Sequence[Body], dt: float, min_distance: float = MIN_DISTANCE) -> None:
    """Accumulate-then-integrate (see module docstring)."""
    n = len(bodies)
    acc = np.zeros((n, 2), dtype=np.float64)
    for i in range(n):
        for j in range(i + 1, n):
            acc_i, acc_j = gravitational_acceleration(bodies[i], bodies[j], min_distance)
            acc[i] += acc_i
            acc[j] += acc_j

    for body, a in zip(bodies, acc):
        euler_step(body, a, dt)


def step(
    bodies: Sequence[Body],
    dt: float,
    scheme: str = "pairwise",
    min_distance: float = MIN_DISTANCE,
) -> None:
    """
    Advance every body by dt.

    Mutates velocities and positions in place; never reorders or resizes
    the sequence.

    Args:
        bodies: Ordered body store.
        dt: Timestep.
        scheme: "pairwise" or "accumulate".
        min_distance: Distance clamp for the inverse-square term.

    Raises:
        ValueError: If scheme is not recognised.
    """
    if scheme == "pairwise":
        pairwise_step(bodies, dt, min_distance)
    elif scheme == "accumulate":
        accumulate_step(bodies, dt, min_distance)
    else:
        raise ValueError(f"Unknown integration scheme: {scheme}")
    logger.debug("Stepped %d bodies by dt=%g (%s)", len(bodies), dt, scheme)
