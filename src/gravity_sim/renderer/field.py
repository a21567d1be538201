# MIT License (see LICENSE)
"""
Gravitational field visualization.

The field is sampled on a regular grid over the viewport. At each sample the
field of every body within the influence distance is summed, and the result
is drawn as a segment from the sample point along the field direction, at
most max_vector_length long. The drawing is recomputed from scratch every
frame and never touches the physics state.
"""
from __future__ import annotations
from typing import TYPE_CHECKING, Sequence

import numpy as np

from ..constants import (
    GRID_SPACING,
    LIGHT_GRAY,
    MAX_INFLUENCE_DISTANCE,
    MAX_VECTOR_LENGTH,
    MIN_DISTANCE,
)
from ..core.forces import field_at
from ..types import Body
from ..util import f64, norm

if TYPE_CHECKING:
    from .adapter import RendererAdapter


def field_segment(
    point,
    bodies: Sequence[Body],
    max_vector_length: float = MAX_VECTOR_LENGTH,
    max_influence_distance: float = MAX_INFLUENCE_DISTANCE,
    min_distance: float = MIN_DISTANCE,
) -> tuple[np.ndarray, np.ndarray] | None:
    """
    Segment visualizing the field at one sample point.

    Returns:
        (start, end) as float arrays, with |end - start| equal to the field
        magnitude clamped to max_vector_length, or None when the field
        magnitude is zero.
    """
    start = f64(point)
    g = field_at(start, bodies, max_influence_distance, min_distance)
    magnitude = norm(g)
    if magnitude == 0:
        return None
    length = min(magnitude, max_vector_length)
    return start, start + (g / magnitude) * length


def render_field(
    surface: "RendererAdapter",
    bodies: Sequence[Body],
    bounds: tuple[int, int],
    *,
    grid_spacing: int = GRID_SPACING,
    max_vector_length: float = MAX_VECTOR_LENGTH,
    max_influence_distance: float = MAX_INFLUENCE_DISTANCE,
    min_distance: float = MIN_DISTANCE,
    color: tuple[int, int, int] = LIGHT_GRAY,
) -> int:
    """
    Draw field segments over [0, width) x [0, height).

    Columns are visited left to right, and each column top to bottom.
    Segment endpoints are truncated to integer pixels.

    Args:
        surface: Drawing surface.
        bodies: Bodies generating the field (read only).
        bounds: Viewport (width, height).

    Returns:
        Number of segments drawn.
    """
    width, height = bounds
    drawn = 0
    for x in range(0, width, grid_spacing):
        for y in range(0, height, grid_spacing):
            segment = field_segment((x, y), bodies, max_vector_length,
                                    max_influence_distance, min_distance)
            if segment is None:
                continue
            end = segment[1]
            surface.draw_line((x, y), (int(end[0]), int(end[1])), color)
            drawn += 1
    return drawn
