from gravity_sim.config import SimulationConfig
from gravity_sim.simulation import Simulation
from gravity_sim.types import Body

# Same three bodies under both integration schemes; the legacy pairwise
# scheme depends on store order, so the trajectories drift apart.
for scheme in ("pairwise", "accumulate"):
    sim = Simulation(config=SimulationConfig(scheme=scheme))
    sim.add_body(Body(position=(300.0, 300.0), mass=1e15, velocity=(0.0, 5.0)))
    sim.add_body(Body(position=(500.0, 300.0), mass=1e15, velocity=(0.0, -5.0)))
    sim.add_body(Body(position=(400.0, 150.0), mass=5e14, velocity=(5.0, 0.0)))
    for _ in range(400):
        sim.tick()
    print(scheme, [b.position.round(2).tolist() for b in sim.bodies])
