# MIT License (see LICENSE)
"""
Field and body rendering.

This subpackage provides:
    - RendererAdapter: Abstract drawing surface (lines, filled circles).
    - DebugRenderer: Text output for debugging.
    - NullRenderer: No-op surface for timing.
    - BufferedRenderer: Records primitives per frame.
    - render_field / field_segment: Gravitational field visualization.
    - render / draw_body: Frame composition.

The pygame window lives in renderer.pygame_view and is imported lazily, so
the headless surfaces work without a display.

Typical usage:
    from gravity_sim.renderer import BufferedRenderer

    surface = BufferedRenderer()
    surface.render_scene(simulation)
"""
from .adapter import (
    RendererAdapter,
    DebugRenderer,
    NullRenderer,
    BufferedRenderer,
)
from .compose import render, draw_body
from .field import render_field, field_segment

__all__ = [
    # Surfaces
    "RendererAdapter",
    "DebugRenderer",
    "NullRenderer",
    "BufferedRenderer",
    # Drawing
    "render",
    "draw_body",
    "render_field",
    "field_segment",
]
