import copy

import numpy as np
import pytest

from gravity_sim.constants import G
from gravity_sim.core.integrators import euler_step, step
from gravity_sim.core.invariants import linear_momentum
from gravity_sim.types import Body


def make_pair():
    a = Body(position=(266.67, 300.0), mass=1e15, velocity=(0.0, 10.0))
    b = Body(position=(533.33, 300.0), mass=1e15, velocity=(0.0, -10.0))
    return [a, b]


def test_euler_step_is_semi_implicit():
    b = Body(position=(0.0, 0.0), mass=1.0, velocity=(1.0, 0.0))
    euler_step(b, np.array([2.0, 0.0]), 0.5)
    # v = 1 + 2*0.5 = 2; x = 0 + 2*0.5 = 1
    assert np.allclose(b.velocity, [2.0, 0.0])
    assert np.allclose(b.position, [1.0, 0.0])


def test_single_step_default_pair():
    """
    x(dt) = x0 + v0*dt + a*dt², with a = G*m / r² along x.
    The bodies approach each other in x; y moves by exactly v0*dt.
    """
    dt = 0.05
    bodies = make_pair()
    a, b = bodies
    x0a, x0b = a.position.copy(), b.position.copy()
    r = x0b[0] - x0a[0]
    acc = G * 1e15 / (r * r)

    step(bodies, dt)

    assert a.velocity[0] == pytest.approx(acc * dt)
    assert b.velocity[0] == pytest.approx(-acc * dt)
    assert a.position[0] == pytest.approx(x0a[0] + acc * dt * dt)
    assert b.position[0] == pytest.approx(x0b[0] - acc * dt * dt)
    assert a.position[0] > x0a[0]
    assert b.position[0] < x0b[0]

    # first order: y changes by v*dt, separation in y by 2*v*dt
    assert a.position[1] == pytest.approx(300.0 + 10.0 * dt)
    assert b.position[1] == pytest.approx(300.0 - 10.0 * dt)
    assert a.velocity[1] == pytest.approx(10.0)
    assert b.velocity[1] == pytest.approx(-10.0)


def test_step_keeps_store_order_and_size():
    bodies = make_pair()
    ids = [id(b) for b in bodies]
    step(bodies, 0.05)
    assert [id(b) for b in bodies] == ids
    assert len(bodies) == 2


def test_schemes_agree_for_two_bodies():
    p = make_pair()
    q = copy.deepcopy(p)

    for _ in range(200):
        step(p, 0.05, scheme="pairwise")
        step(q, 0.05, scheme="accumulate")

    for bp, bq in zip(p, q):
        assert np.allclose(bp.position, bq.position, rtol=0, atol=1e-9)
        assert np.allclose(bp.velocity, bq.velocity, rtol=0, atol=1e-9)


def test_pairwise_scheme_is_order_dependent_with_three_bodies():
    """
    With three bodies the legacy scheme moves a body before its later pairs
    are evaluated; accumulate-then-integrate does not.
    """
    def trio():
        return [
            Body(position=(0.0, 0.0), mass=1e15),
            Body(position=(20.0, 0.0), mass=1e15),
            Body(position=(0.0, 20.0), mass=1e15),
        ]

    legacy = trio()
    accumulated = trio()
    step(legacy, 0.05, scheme="pairwise")
    step(accumulated, 0.05, scheme="accumulate")

    assert not np.allclose(legacy[0].position, accumulated[0].position, rtol=0, atol=1e-12)

    # reversing store order changes the legacy result for the middle body
    forward = trio()
    backward = list(reversed(trio()))
    step(forward, 0.05, scheme="pairwise")
    step(backward, 0.05, scheme="pairwise")
    assert not np.allclose(forward[1].position, backward[1].position, rtol=0, atol=1e-12)


def test_accumulate_scheme_is_order_independent():
    def trio():
        return [
            Body(position=(0.0, 0.0), mass=1e15),
            Body(position=(20.0, 0.0), mass=2e15),
            Body(position=(0.0, 20.0), mass=3e15),
        ]

    forward = trio()
    backward = list(reversed(trio()))
    step(forward, 0.05, scheme="accumulate")
    step(backward, 0.05, scheme="accumulate")

    for f, b in zip(forward, reversed(backward)):
        assert np.allclose(f.position, b.position, rtol=1e-12, atol=1e-12)


def test_momentum_conserved_two_bodies():
    bodies = [
        Body(position=(100.0, 300.0), mass=1e15, velocity=(0.0, 10.0)),
        Body(position=(400.0, 250.0), mass=3e15, velocity=(2.0, -1.0)),
    ]
    p0 = linear_momentum(bodies)

    for _ in range(1000):
        step(bodies, 0.05)

    p1 = linear_momentum(bodies)
    assert np.allclose(p1, p0, rtol=1e-9, atol=1e4)


def test_coincident_bodies_stay_finite():
    bodies = [
        Body(position=(50.0, 50.0), mass=1e15),
        Body(position=(50.0, 50.0), mass=1e15),
    ]
    for _ in range(10):
        step(bodies, 0.05)
    for b in bodies:
        assert np.all(np.isfinite(b.position))
        assert np.all(np.isfinite(b.velocity))


def test_unknown_scheme_rejected():
    with pytest.raises(ValueError):
        step(make_pair(), 0.05, scheme="rk4")
