import dataclasses

import pytest

from boidsim.boid_data import BoidData, BoidDataSnapshot, WorldBorders

_SIDES = ("left", "right", "top", "bottom")


def _copy_borders(target, source):
    for side in _SIDES:
        setattr(target, side, getattr(source, side))


@pytest.fixture
def shared_borders():
    shared = BoidData.borders
    saved = WorldBorders(
        left=shared.left, right=shared.right, top=shared.top, bottom=shared.bottom
    )
    yield shared
    _copy_borders(shared, saved)


def test_defaults_in_snapshot(shared_borders):
    _copy_borders(shared_borders, WorldBorders())
    snap = BoidData().snapshot()
    assert snap.world_margin == 10.0
    assert snap.self_separation_range == 20.0
    assert snap.combat_range == 5.0
    assert snap.view_angle == 120.0
    assert snap.max_speed == 30.0
    assert snap.right_border == 0.0


def test_snapshot_reflects_instance_values(shared_borders):
    data = BoidData(cohesion_force=3.5, max_speed=12.0)
    data.view_range = 44.0
    snap = data.snapshot()
    assert snap.cohesion_force == 3.5
    assert snap.max_speed == 12.0
    assert snap.view_range == 44.0


def test_borders_are_shared_between_instances(shared_borders):
    _copy_borders(
        shared_borders, WorldBorders(left=1.0, right=640.0, top=2.0, bottom=480.0)
    )
    first = BoidData().snapshot()
    second = BoidData(max_speed=1.0).snapshot()
    assert (first.left_border, first.right_border) == (1.0, 640.0)
    assert (second.top_border, second.bottom_border) == (2.0, 480.0)


def test_border_mutation_seen_by_later_snapshots(shared_borders):
    _copy_borders(shared_borders, WorldBorders())
    data = BoidData()
    before = data.snapshot()
    shared_borders.right = 200.0
    after = data.snapshot()
    assert before.right_border == 0.0
    assert after.right_border == 200.0


def test_snapshot_is_frozen(shared_borders):
    snap = BoidData(max_speed=7.0).snapshot()
    with pytest.raises(dataclasses.FrozenInstanceError):
        snap.max_speed = 1.0
    assert snap.max_speed == 7.0


def test_snapshot_is_independent_of_later_changes(shared_borders):
    data = BoidData()
    snap = data.snapshot()
    data.alignment_force = 99.0
    assert snap.alignment_force == 10.0
    assert isinstance(snap, BoidDataSnapshot) and data.snapshot().alignment_force == 99.0