import math

from boidsim.snapshot import BoidProfile, BoidSnapshot, NearbyBoids, SimulationStep
from boidsim.vector import Vector2


def test_snapshot_defaults_match_source():
    snap = BoidSnapshot()
    assert snap.view_angle == math.pi
    assert snap.view_range == 20.0
    assert snap.combat_range == 5.0
    assert snap.separation_range == 3.0
    assert snap.max_speed == 10.0
    assert snap.position == Vector2()
    assert snap.velocity == Vector2()


def test_snapshot_keeps_given_values():
    snap = BoidSnapshot(
        unique_id=7, layer_id=1, team_id=2,
        position=Vector2(1.0, 2.0), velocity=Vector2(3.0, 4.0),
    )
    assert (snap.unique_id, snap.layer_id, snap.team_id) == (7, 1, 2)
    assert snap.position == Vector2(1.0, 2.0)
    assert snap.velocity == Vector2(3.0, 4.0)


def test_snapshots_compare_by_value():
    assert BoidSnapshot(unique_id=3) == BoidSnapshot(unique_id=3)
    assert BoidSnapshot(unique_id=3) != BoidSnapshot(unique_id=4)


def test_profile_defaults_match_source():
    profile = BoidProfile()
    assert profile.max_speed == 10.0
    assert profile.view_range == 20.0
    assert profile.view_angle == math.pi
    assert profile.separation_range == 3.0
    assert profile.combat_range == 5.0


def test_nearby_lists_start_empty_and_independent():
    first = NearbyBoids()
    second = NearbyBoids()
    first.in_range.append("a")
    assert first.in_range == ["a"]
    assert second.in_range == []
    assert first.in_view == [] and first.in_combat == []


def test_simulation_step_defaults():
    step = SimulationStep()
    assert step.velocity == Vector2()
    assert step.nearby == NearbyBoids()