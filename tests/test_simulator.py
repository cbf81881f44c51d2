import math

from boidsim.simulator import BaseSet, BoidSimulator
from boidsim.snapshot import BoidSnapshot
from boidsim.vector import Vector2


def _boid(**kwargs):
    kwargs.setdefault("position", Vector2(0.0, 0.0))
    kwargs.setdefault("velocity", Vector2(1.0, 0.0))
    return BoidSnapshot(**kwargs)


def test_base_set_values():
    assert BaseSet(0) is BaseSet.WANDERING
    assert BaseSet(1) is BaseSet.COMBAT


def test_out_of_range_neighbour_ignored():
    boid = _boid()
    far = BoidSnapshot(unique_id=1, position=Vector2(100.0, 0.0))
    step = BoidSimulator().simulate_boid(boid, [far])
    assert step.nearby.in_range == []
    assert step.nearby.in_view == []
    assert step.nearby.in_combat == []


def test_neighbour_exactly_at_view_range_is_excluded():
    boid = _boid()
    edge = BoidSnapshot(unique_id=1, position=Vector2(boid.view_range, 0.0))
    step = BoidSimulator().simulate_boid(boid, [edge])
    assert step.nearby.in_range == []


def test_ahead_is_in_view_behind_is_not():
    boid = _boid()
    ahead = BoidSnapshot(unique_id=1, position=Vector2(10.0, 0.0))
    behind = BoidSnapshot(unique_id=2, position=Vector2(-10.0, 0.0))
    step = BoidSimulator().simulate_boid(boid, [ahead, behind])
    assert step.nearby.in_range == [ahead, behind]
    assert step.nearby.in_view == [ahead]


def test_combat_band_is_subset_of_range():
    boid = _boid()
    close = BoidSnapshot(unique_id=1, position=Vector2(2.0, 0.0))
    mid = BoidSnapshot(unique_id=2, position=Vector2(0.0, 10.0))
    step = BoidSimulator().simulate_boid(boid, [close, mid])
    assert step.nearby.in_combat == [close]
    assert all(b in step.nearby.in_range for b in step.nearby.in_combat)


def test_full_circle_view_sees_everything_in_range():
    boid = _boid(view_angle=2.0 * math.pi)
    others = [
        BoidSnapshot(unique_id=1, position=Vector2(-5.0, 0.0)),
        BoidSnapshot(unique_id=2, position=Vector2(0.0, 5.0)),
    ]
    step = BoidSimulator().simulate_boid(boid, others)
    assert step.nearby.in_view == others


def test_speed_is_limited_and_step_remembered():
    simulator = BoidSimulator()
    boid = _boid(velocity=Vector2(30.0, 40.0))
    step = simulator.simulate_boid(boid, [])
    assert math.isclose(step.velocity.length(), boid.max_speed)
    assert step.velocity.normalized().dot(boid.velocity.normalized()) > 0.999
    assert simulator.last_step is step


def test_slow_velocity_kept():
    boid = _boid(velocity=Vector2(1.0, 2.0))
    step = BoidSimulator().simulate_boid(boid, [])
    assert step.velocity == boid.velocity