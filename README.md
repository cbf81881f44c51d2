# boidsim

Building blocks for simulating flocks of boids on a 2-D grid. It is a library
only. It has no commands.

## Modules

- `boidsim.vector`: `Vector2` is an immutable 2-D vector. It supports `+`, `-`,
  scalar `*` and `/`, and unary `-`. It also has `length`, `length_squared`,
  `normalized` and `dot`. Normalizing the zero vector gives the zero vector.
  `PhysicsStep` records what a body found in one step (`in_range`, `in_view`,
  `requested_filters`) and its `new_velocity`.
- `boidsim.spatial_hash`: `SpatialHash` buckets integer boid ids into grid cells
  and is guarded by a lock. By default it has 10 × 5 cells of size 32. Its methods are:
  - `add_boid` ignores duplicates and cells outside the grid.
  - `remove_boid` removes an id from a cell.
  - `nearby_boids(cell, radius)` returns the ids within `radius` rings. The radius
    runs from 0 to `MAX_RADIUS` = 5, and any other radius gives an empty list.
  - `clear` empties every cell.
  - `world_to_grid` clamps to the grid.
  - `grid_to_world` returns the centre of a cell.

  Setting `cell_size`, `n_horizontal_cells` or `n_vertical_cells` to a new
  positive value rebuilds an empty grid. The grid also has the properties
  `world_width`, `world_height` and `world_size`. `neighbourhood_offsets(radius)`
  lists the offsets that are searched, innermost ring first.
- `boidsim.body`: `PhysicsBody` holds a boid's ids, limits, last step and a list
  of requested filters. The methods `add_requested_filter`,
  `remove_requested_filter`, `clear_requested_filters` and
  `has_requested_filter` work on that list, and `requested_filter_count` gives its
  length.
- `boidsim.server`: `BoidServer` registers bodies into slots indexed by
  `unique_id`.
  - `register_boid` assigns the id. It returns `False` if the body is already
    registered.
  - `unregister_boid` frees the id. The most recently freed id is reused first.
  - The other members are `has_boid`, `registered_boids`,
    `registered_boid_count`, `expired_ids`, `clear_expired_ids` and
    `clear_all_boids`.
- `boidsim.units`: `UnitBaseData` provides `add_passive` and `remove_passive`.
  `UnitData` holds a unit's live statistics. `UnitStep.join` adds hurt and heal
  and merges inflictions without adding duplicates.
- `boidsim.boid_data`: `BoidData` holds steering forces, ranges and limits. Its
  view angle is in degrees. The class-wide `BoidData.borders` (`WorldBorders`) is
  shared by every instance. `snapshot()` returns a frozen `BoidDataSnapshot`.
- `boidsim.states`: behaviour states turn a snapshot, a position, a velocity and
  the nearby `Neighbour`s into a `BoidStep`.
  - `SeekingState` applies separation, cohesion, alignment, the world pull, and an
    optional `chase_target` (the origin means no target).
  - `CombatState` applies only separation and the world pull.
  - Both limit the speed to `max_speed`.
  - Both set `next_state` to `StateKind.COMBAT` when any neighbour is within
    combat range, and to `StateKind.SEEKING` otherwise.
  - `world_pull` pushes a boid back from the borders.
- `boidsim.snapshot`: `BoidSnapshot` and `BoidProfile` use a view angle in
  radians. `NearbyBoids` and `SimulationStep` hold the results of a step.
- `boidsim.simulator`: `BoidSimulator.simulate_boid(boid, nearby)` sorts
  neighbours into in-range, in-view and in-combat bands. It returns a
  `SimulationStep` carrying the boid's own velocity, clamped to its maximum speed,
  and keeps that step in `last_step`. `BaseSet` names the built-in behaviour sets.
- `boidsim.bird_unit`: `BirdUnit.apply_boid_step(step, delta)` adopts the step's
  velocity and moves the unit by it.
- `boidsim.oscillator`: `Oscillator.process(delta)` moves a point along a
  Lissajous curve around (10, 10).

## What it does not do

- There is no rule or rule-set layer for filtering forces by team, layer,
  sublayer or range.
- There are no team or layer enumerations.
- `BoidServer` only keeps the registry. It does not run a physics loop, move
  bodies or bucket them into a `SpatialHash`. The caller has to connect these
  pieces and drive the steps.
- There is no rendering.

## Installing

```
pip install .
```

## Example

```python
from boidsim.spatial_hash import SpatialHash
from boidsim.vector import Vector2

grid = SpatialHash()
cell = grid.world_to_grid(Vector2(40.0, 10.0))  # (1, 0)
grid.add_boid(cell, 7)
print(grid.nearby_boids(cell, 1))  # [7]
```

## Running the tests

```
pip install .[test]
pytest
```