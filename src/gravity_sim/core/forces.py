# MIT License (see LICENSE)
"""
Newtonian gravity between point masses.

Implements F = G * m1 * m2 / r² directed along the line joining the bodies,
both for body pairs (used by the integrators) and for a massless probe at an
arbitrary point (used by the field renderer).

Key concepts:
- Every distance below MIN_DISTANCE is clamped to MIN_DISTANCE, so two bodies
  at the same position feel a finite force instead of NaN/Inf.
- Directions come from atan2, which is defined at zero displacement.
- Pairwise gravity is O(N²); the body set here is tiny.
"""
from __future__ import annotations
from typing import Iterable

import numpy as np

from ..constants import G, MAX_INFLUENCE_DISTANCE, MIN_DISTANCE
from ..types import Body
from ..util import clamped_distance, direction, f64, norm


def gravitational_force(a: Body, b: Body, min_distance: float = MIN_DISTANCE) -> np.ndarray:
    """
    Force exerted on body a by body b.

    The force on b is the exact negation (Newton's third law).

    Args:
        a: Body receiving the force.
        b: Body exerting the force.
        min_distance: Distance clamp for the inverse-square term.

    Returns:
        Force vector [Fx, Fy] pointing from a toward b.
    """
    d = b.position - a.position
    r = clamped_distance(d, min_distance)
    magnitude = G * a.mass * b.mass / (r * r)
    return magnitude * direction(d)


def gravitational_acceleration(
    a: Body,
    b: Body,
    min_distance: float = MIN_DISTANCE,
) -> tuple[np.ndarray, np.ndarray]:
    """
    Accelerations of a and b due to their mutual attraction.

    Returns:
        Tuple (acc_a, acc_b) where acc_a = F / m_a points toward b and
        acc_b = -F / m_b points toward a.
    """
    f = gravitational_force(a, b, min_distance)
    return f / a.mass, -f / b.mass


def field_at(
    point,
    bodies: Iterable[Body],
    max_influence_distance: float = MAX_INFLUENCE_DISTANCE,
    min_distance: float = MIN_DISTANCE,
) -> np.ndarray:
    """
    Gravitational field G * m / r² at a point, summed over nearby bodies.

    Bodies farther than max_influence_distance contribute nothing (hard
    cutoff). A body exactly at the cutoff distance still counts.

    Args:
        point: Sample position [x, y].
        bodies: Bodies generating the field.
        max_influence_distance: Cutoff radius.
        min_distance: Distance clamp for the inverse-square term.

    Returns:
        Field vector [gx, gy]; exactly zero when no body is in range.
    """
    p = f64(point)
    total = np.zeros(2, dtype=np.float64)
    for body in bodies:
        d = body.position - p
        if norm(d) > max_influence_distance:
            continue
        r = clamped_distance(d, min_distance)
        total += (G * body.mass / (r * r)) * direction(d)
    return total
