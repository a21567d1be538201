# MIT License (see LICENSE)
"""Frame composition: field first, then body markers on top."""
from __future__ import annotations
from typing import TYPE_CHECKING, Sequence

from ..types import Body
from .field import render_field

if TYPE_CHECKING:
    from .adapter import RendererAdapter


def draw_body(surface: "RendererAdapter", body: Body) -> None:
    """Filled circle at the body's truncated pixel position."""
    center = (int(body.position[0]), int(body.position[1]))
    surface.fill_circle(center, body.draw_radius, body.color)


def render(surface: "RendererAdapter", bodies: Sequence[Body], bounds: tuple[int, int], **field_options) -> None:
    """
    Draw one frame's content.

    Keyword arguments are passed through to render_field. Bodies are drawn
    in store order, so later bodies end up on top.
    """
    render_field(surface, bodies, bounds, **field_options)
    for body in bodies:
        draw_body(surface, body)
