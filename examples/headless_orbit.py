# examples/headless_orbit.py
from gravity_sim.simulation import Simulation
from gravity_sim.core.invariants import total_energy
from gravity_sim.renderer import DebugRenderer

sim = Simulation.from_config()
e0 = total_energy(sim.bodies)

while sim.time < 20.0:
    sim.tick()

DebugRenderer().render_scene(sim)
print("t:", sim.time, "ticks:", sim.ticks)
for b in sim.bodies:
    print(f"body {b.id} pos: {b.position} vel: {b.velocity}")
print("energy drift:", (total_energy(sim.bodies) - e0) / abs(e0))
