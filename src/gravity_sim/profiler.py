# MIT License (see LICENSE)
"""
Lightweight section timing.

Used to measure how long physics ticks and frame renders take, without
external dependencies.

Example:
    profiler = Profiler()
    with profiler.section("physics"):
        simulation.tick()
    print(profiler.stats.summary())
"""
from __future__ import annotations
from contextlib import contextmanager
from dataclasses import dataclass, field
import time


@dataclass
class ProfileStats:
    """Timing samples, in seconds, grouped by section name."""
    samples: dict[str, list[float]] = field(default_factory=dict)

    def add(self, name: str, dt: float) -> None:
        self.samples.setdefault(name, []).append(dt)

    def summary(self) -> dict[str, dict[str, float]]:
        """
        Per-section statistics.

        Returns:
            Dict mapping section name to {'n', 'mean_ms', 'max_ms'}.
        """
        return {
            name: {
                "n": len(times),
                "mean_ms": 1e3 * sum(times) / len(times),
                "max_ms": 1e3 * max(times),
            }
            for name, times in self.samples.items()
            if times
        }


class Profiler:
    """Records the wall-clock duration of named `with` blocks."""

    def __init__(self) -> None:
        self.stats = ProfileStats()

    @contextmanager
    def section(self, name: str):
        t0 = time.perf_counter()
        try:
            yield
        finally:
            self.stats.add(name, time.perf_counter() - t0)
