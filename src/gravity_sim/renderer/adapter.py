# MIT License (see LICENSE)
"""
Rendering surface abstraction.

The field renderer and the draw/compose step only ever need two
primitives, a line and a filled circle. RendererAdapter declares them plus
frame boundaries; concrete adapters map them onto a backend. The physics
has no rendering dependency.
"""
from __future__ import annotations
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, TextIO
import sys

from .compose import render

if TYPE_CHECKING:
    from ..simulation import Simulation

Point = tuple[int, int]
Color = tuple[int, int, int]


class RendererAdapter(ABC):
    """
    Abstract drawing surface.

    Usage:
        surface = MySurface()
        surface.begin_frame(simulation.time)
        render(surface, simulation.bodies, simulation.bounds)
        surface.end_frame()

    Or use the convenience method:
        surface.render_scene(simulation)
    """

    @abstractmethod
    def begin_frame(self, time: float) -> None:
        """
        Start a new frame.

        Args:
            time: Current simulated time.
        """
        ...

    @abstractmethod
    def draw_line(self, start: Point, end: Point, color: Color) -> None:
        """Draw a one pixel wide line segment between integer points."""
        ...

    @abstractmethod
    def fill_circle(self, center: Point, radius: int, color: Color) -> None:
        """Draw a filled circle."""
        ...

    @abstractmethod
    def end_frame(self) -> None:
        """Finish the frame; everything for it has been drawn."""
        ...

    def render_scene(self, simulation: "Simulation") -> None:
        """
        Draw the field and all bodies of a simulation as one frame.

        Args:
            simulation: The simulation to render, with its configuration.
        """
        cfg = simulation.config
        self.begin_frame(simulation.time)
        render(
            self,
            simulation.bodies,
            simulation.bounds,
            grid_spacing=cfg.grid_spacing,
            max_vector_length=cfg.max_vector_length,
            max_influence_distance=cfg.max_influence_distance,
            min_distance=cfg.min_distance,
            color=cfg.field_color,
        )
        self.end_frame()


class DebugRenderer(RendererAdapter):
    """
    Text surface for development without a display.

    Bodies are always listed; field segments only when verbose, since a full
    800x600 frame has over two thousand of them.

    Output:
        === Frame t=0.0500 ===
        circle @ (266, 300) r=34 color=(192, 192, 192)
        segments: 1412
    """

    def __init__(self, output: TextIO | None = None, verbose: bool = False):
        """
        Args:
            output: Output stream (defaults to sys.stdout).
            verbose: If True, print every field segment.
        """
        self.output = output or sys.stdout
        self.verbose = verbose
        self._segments = 0

    def begin_frame(self, time: float) -> None:
        self._segments = 0
        self.output.write(f"=== Frame t={time:.4f} ===\n")

    def draw_line(self, start: Point, end: Point, color: Color) -> None:
        self._segments += 1
        if self.verbose:
            self.output.write(f"line {start} -> {end}\n")

    def fill_circle(self, center: Point, radius: int, color: Color) -> None:
        self.output.write(f"circle @ {center} r={radius} color={color}\n")

    def end_frame(self) -> None:
        self.output.write(f"segments: {self._segments}\n\n")
        self.output.flush()


class NullRenderer(RendererAdapter):
    """
    Surface that draws nothing.

    Useful for timing the field computation without a backend.
    """

    def begin_frame(self, time: float) -> None:
        pass

    def draw_line(self, start: Point, end: Point, color: Color) -> None:
        pass

    def fill_circle(self, center: Point, radius: int, color: Color) -> None:
        pass

    def end_frame(self) -> None:
        pass


class BufferedRenderer(RendererAdapter):
    """
    Surface that records every primitive, frame by frame.

    Each frame is a dict with the frame time and an ordered list of
    primitives, so draw order can be inspected:

        {"time": 0.05, "primitives": [
            ("line", (0, 0), (3, 1), (192, 192, 192)),
            ("circle", (266, 300), 34, (192, 192, 192)),
        ]}

    Primitives drawn outside begin_frame/end_frame are ignored.
    """

    def __init__(self):
        self.frames: list[dict] = []
        self._current_frame: dict | None = None

    def begin_frame(self, time: float) -> None:
        self._current_frame = {"time": time, "primitives": []}

    def draw_line(self, start: Point, end: Point, color: Color) -> None:
        if self._current_frame is not None:
            self._current_frame["primitives"].append(("line", start, end, color))

    def fill_circle(self, center: Point, radius: int, color: Color) -> None:
        if self._current_frame is not None:
            self._current_frame["primitives"].append(("circle", center, radius, color))

    def end_frame(self) -> None:
        if self._current_frame is not None:
            self.frames.append(self._current_frame)
            self._current_frame = None

    def lines(self, frame: int = -1) -> list[tuple]:
        """Line primitives of a recorded frame."""
        return [p for p in self.frames[frame]["primitives"] if p[0] == "line"]

    def circles(self, frame: int = -1) -> list[tuple]:
        """Circle primitives of a recorded frame."""
        return [p for p in self.frames[frame]["primitives"] if p[0] == "circle"]

    def clear(self) -> None:
        self.frames.clear()
