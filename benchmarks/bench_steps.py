"""
Microbenchmark: tick and full-frame render time vs number of bodies.
Run:
  python benchmarks/bench_steps.py
"""
import time
import numpy as np
from gravity_sim.config import SimulationConfig
from gravity_sim.simulation import Simulation
from gravity_sim.types import Body
from gravity_sim.profiler import Profiler
from gravity_sim.renderer import NullRenderer

def run(n: int, ticks: int = 200, frames: int = 5):
    prof = Profiler()
    sim = Simulation(config=SimulationConfig(scheme="accumulate"), profiler=prof)

    rng = np.random.default_rng(12345)  # determinism (no randomness elsewhere)
    for _ in range(n):
        x = float(rng.uniform(0, sim.config.width))
        y = float(rng.uniform(0, sim.config.height))
        sim.add_body(Body(position=(x, y), mass=1e14 * float(rng.uniform(1, 10))))

    # warmup
    for _ in range(10):
        sim.tick()

    t0 = time.perf_counter()
    for _ in range(ticks):
        sim.tick()
    t1 = time.perf_counter()

    surface = NullRenderer()
    for _ in range(frames):
        with prof.section("render"):
            surface.render_scene(sim)

    return (t1 - t0) / ticks, prof.stats.summary()

if __name__ == "__main__":
    for n in [2, 5, 10, 25, 50]:
        per_tick, summary = run(n)
        print(f"N={n:3d}  tick={1e3*per_tick:8.3f} ms  ticks/s={1/per_tick:8.1f}")
        for k in ["physics", "render"]:
            if k in summary:
                print(" ", k, summary[k])
        print()
