import numpy as np
import pytest

from gravity_sim.constants import G, LIGHT_GRAY
from gravity_sim.renderer import BufferedRenderer, field_segment, render_field
from gravity_sim.types import Body


def record_field(bodies, bounds, **kwargs):
    surface = BufferedRenderer()
    surface.begin_frame(0.0)
    drawn = render_field(surface, bodies, bounds, **kwargs)
    surface.end_frame()
    return surface, drawn


def test_segment_clamped_to_max_length():
    """Raw field here is G*1e15/25 ≈ 2670, far above the 50 px clamp."""
    b = Body(position=(105.0, 100.0), mass=1e15)
    start, end = field_segment((100.0, 100.0), [b])

    assert np.linalg.norm(end - start) == pytest.approx(50.0)
    assert end[0] > start[0]


def test_weak_field_not_stretched():
    b = Body(position=(200.0, 0.0), mass=1e15)
    start, end = field_segment((0.0, 0.0), [b])
    assert np.linalg.norm(end - start) == pytest.approx(G * 1e15 / 200.0 ** 2)


def test_segment_length_never_exceeds_clamp_over_grid():
    b = Body(position=(37.0, 52.0), mass=1e15)
    for x in range(0, 120, 15):
        for y in range(0, 120, 15):
            seg = field_segment((x, y), [b], max_vector_length=50.0)
            assert seg is not None
            start, end = seg
            assert np.linalg.norm(end - start) <= 50.0 + 1e-9


def test_no_body_in_range_draws_nothing():
    far = Body(position=(5000.0, 5000.0), mass=1e20)
    assert field_segment((0.0, 0.0), [far]) is None

    surface, drawn = record_field([far], (90, 60))
    assert drawn == 0
    assert surface.lines() == []


def test_empty_body_list_draws_nothing():
    surface, drawn = record_field([], (800, 600))
    assert drawn == 0
    assert surface.frames[0]["primitives"] == []


def test_grid_covers_half_open_bounds():
    """
    Samples at x in range(0, 45, 15) and y in range(0, 30, 15):
    3 x 2 = 6 points, columns outer, rows inner.
    """
    b = Body(position=(20.0, 20.0), mass=1e15)
    surface, drawn = record_field([b], (45, 30))

    starts = [p[1] for p in surface.lines()]
    assert drawn == 6
    assert starts == [(0, 0), (0, 15), (15, 0), (15, 15), (30, 0), (30, 15)]


def test_segments_use_field_color_and_integer_endpoints():
    b = Body(position=(20.0, 20.0), mass=1e15)
    surface, _ = record_field([b], (45, 30))

    for _, start, end, color in surface.lines():
        assert color == LIGHT_GRAY
        assert all(isinstance(c, int) for c in start + end)


def test_drawn_segment_points_at_body():
    b = Body(position=(60.0, 0.0), mass=1e15)
    surface, _ = record_field([b], (1, 1))

    (_, start, end, _), = surface.lines()
    assert start == (0, 0)
    assert end[0] > 0
    assert end[1] == 0


def test_cutoff_respected_by_renderer():
    # 400 px away from the only sample point at the origin
    b = Body(position=(400.0, 0.0), mass=1e20)
    _, drawn = record_field([b], (1, 1), max_influence_distance=300.0)
    assert drawn == 0
    _, drawn = record_field([b], (1, 1), max_influence_distance=500.0)
    assert drawn == 1


def test_render_field_does_not_touch_bodies():
    b = Body(position=(100.0, 100.0), mass=1e15, velocity=(1.0, -2.0))
    pos, vel = b.position.copy(), b.velocity.copy()

    record_field([b], (300, 300))

    assert np.array_equal(b.position, pos)
    assert np.array_equal(b.velocity, vel)
