# MIT License (see LICENSE)
"""
The simulation world and its tick function.

Simulation owns the ordered body store and is the only thing that mutates
it. An external scheduler (the pygame timer in renderer/pygame_view.py, or a
test calling tick() directly) drives it:

    timer fires -> simulation.tick() -> repaint -> next timer event

Bodies are added during setup only; insertion order is both the pairwise
interaction order and the draw order.
"""
from __future__ import annotations
from dataclasses import dataclass, field
import logging

from .config import DEFAULT_CONFIG, SimulationConfig
from .core.integrators import step
from .profiler import Profiler
from .types import Body

logger = logging.getLogger(__name__)

# Seed configuration for the default two-body run.
SEED_MASS = 1e15
SEED_SPEED = 10.0


@dataclass
class Simulation:
    """
    Gravity simulation state.

    Attributes:
        config: Time step, integration scheme, viewport and field parameters.
        bodies: Ordered body store.
        time: Simulated time elapsed.
        ticks: Number of completed ticks.
        profiler: Optional Profiler; ticks are timed under "physics".
    """
    config: SimulationConfig = DEFAULT_CONFIG
    bodies: list[Body] = field(default_factory=list)
    time: float = 0.0
    ticks: int = 0
    profiler: Profiler | None = None

    def __post_init__(self) -> None:
        self._next_id = 1
        for body in self.bodies:
            if body.id < 0:
                body.id = self._next_id
            self._next_id = max(self._next_id, body.id) + 1

    @classmethod
    def from_config(cls, config: SimulationConfig = DEFAULT_CONFIG, profiler: Profiler | None = None) -> Simulation:
        """
        Build the default two-body system.

        Body A starts at (width/3, height/2) moving down the screen, body B at
        (2*width/3, height/2) moving up; both have mass 1e15.
        """
        sim = cls(config=config, profiler=profiler)
        w, h = config.width, config.height
        sim.add_body(Body(position=(w / 3, h / 2), mass=SEED_MASS,
                          velocity=(0.0, SEED_SPEED), color=config.body_color))
        sim.add_body(Body(position=(2 * w / 3, h / 2), mass=SEED_MASS,
                          velocity=(0.0, -SEED_SPEED), color=config.body_color))
        logger.info("Seeded %d bodies in a %dx%d viewport (%s scheme)",
                    len(sim.bodies), w, h, config.scheme)
        return sim

    @property
    def bounds(self) -> tuple[int, int]:
        return self.config.bounds

    def add_body(self, body: Body) -> int:
        """
        Append a body to the store and assign it an id.

        Returns:
            The assigned body id.
        """
        body.id = self._next_id
        self._next_id += 1
        self.bodies.append(body)
        return body.id

    def tick(self) -> None:
        """Run one physics step with the configured dt and scheme."""
        cfg = self.config
        if self.profiler:
            with self.profiler.section("physics"):
                step(self.bodies, cfg.dt, cfg.scheme, cfg.min_distance)
        else:
            step(self.bodies, cfg.dt, cfg.scheme, cfg.min_distance)
        self.time += cfg.dt
        self.ticks += 1
