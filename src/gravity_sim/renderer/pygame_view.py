# MIT License (see LICENSE)
"""
pygame window for the simulation.

A pygame timer posts TICK_EVENT every config.tick_interval_ms milliseconds.
Each time the loop sees one, it runs a full physics tick and then repaints
the whole frame, so a tick and a repaint never overlap. Timer events that
pile up while a frame is being drawn are coalesced into a single tick.
"""
from __future__ import annotations
import logging

import pygame

from ..profiler import Profiler
from ..simulation import Simulation
from .adapter import Color, Point, RendererAdapter

logger = logging.getLogger(__name__)

TICK_EVENT = pygame.USEREVENT + 1


class PygameRenderer(RendererAdapter):
    """Draws onto a pygame Surface (normally the display surface)."""

    def __init__(self, screen: pygame.Surface, background: Color):
        self.screen = screen
        self.background = background

    def begin_frame(self, time: float) -> None:
        self.screen.fill(self.background)

    def draw_line(self, start: Point, end: Point, color: Color) -> None:
        pygame.draw.line(self.screen, color, start, end, 1)

    def fill_circle(self, center: Point, radius: int, color: Color) -> None:
        pygame.draw.circle(self.screen, color, center, radius)

    def end_frame(self) -> None:
        pygame.display.flip()


def _should_quit(event: pygame.event.Event) -> bool:
    if event.type == pygame.QUIT:
        return True
    return event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE


def run_window(simulation: Simulation, profiler: Profiler | None = None) -> None:
    """
    Open the window and drive the simulation until it is closed.

    Args:
        simulation: Simulation to tick and draw.
        profiler: Optional Profiler; repaints are timed under "render".
    """
    cfg = simulation.config
    pygame.init()
    try:
        # No RESIZABLE flag: the viewport is fixed.
        screen = pygame.display.set_mode(cfg.bounds)
        pygame.display.set_caption(cfg.title)
        surface = PygameRenderer(screen, cfg.background)
        pygame.time.set_timer(TICK_EVENT, cfg.tick_interval_ms)
        logger.info("Window opened (%dx%d), tick every %d ms",
                    cfg.width, cfg.height, cfg.tick_interval_ms)

        surface.render_scene(simulation)
        running = True
        while running:
            # Block until something happens, then drain the queue.
            pending = [pygame.event.wait()] + pygame.event.get()
            ticked = False
            for event in pending:
                if _should_quit(event):
                    running = False
                elif event.type == TICK_EVENT:
                    ticked = True
            if not running or not ticked:
                continue

            simulation.tick()
            if profiler:
                with profiler.section("render"):
                    surface.render_scene(simulation)
            else:
                surface.render_scene(simulation)
    finally:
        pygame.time.set_timer(TICK_EVENT, 0)
        pygame.quit()
        logger.info("Window closed after %d ticks (t=%.2f)", simulation.ticks, simulation.time)
