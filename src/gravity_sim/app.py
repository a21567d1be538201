# MIT License (see LICENSE)
"""Process entry point: seed the default system and open the window."""
from __future__ import annotations
import logging

from .config import DEFAULT_CONFIG
from .profiler import Profiler
from .simulation import Simulation

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(module)s - %(message)s"


def main() -> None:
    logging.basicConfig(level=logging.INFO, format=LOG_FORMAT)

    # Deferred so that importing the package never needs pygame.
    from .renderer.pygame_view import run_window

    profiler = Profiler()
    simulation = Simulation.from_config(DEFAULT_CONFIG, profiler=profiler)
    try:
        run_window(simulation, profiler)
    except Exception:
        logger.exception("Simulation aborted at t=%.2f", simulation.time)
        raise
    for name, stats in profiler.stats.summary().items():
        logger.info("%s: n=%d mean=%.3f ms max=%.3f ms",
                    name, stats["n"], stats["mean_ms"], stats["max_ms"])
