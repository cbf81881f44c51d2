"""Uniform grid that buckets boid ids by cell for fast neighbour queries."""

from __future__ import annotations

import math
import threading

from .vector import Vector2

__all__ = ["MAX_RADIUS", "neighbourhood_offsets", "SpatialHash"]

Cell = tuple[int, int]

_RINGS: tuple[tuple[Cell, ...], ...] = (
    ((0, 0),),
    ((1, 0), (-1, 0), (0, 1), (0, -1)),
    ((2, 0), (-2, 0), (0, 2), (0, -2),
     (1, 1), (-1, -1), (1, -1), (-1, 1)),
    ((3, 0), (-3, 0), (0, 3), (0, -3),
     (2, 1), (2, -1), (-2, 1), (-2, -1),
     (1, 2), (-1, 2), (1, -2), (-1, -2)),
    ((4, 0), (-4, 0), (0, 4), (0, -4),
     (3, 1), (3, -1), (-3, 1), (-3, -1),
     (1, 3), (-1, 3), (1, -3), (-1, -3),
     (2, 2), (-2, 2), (2, -2), (-2, -2)),
    ((5, 0), (-5, 0), (0, 5), (0, -5),
     (4, 1), (4, -1), (-4, 1), (-4, -1),
     (1, 4), (-1, 4), (1, -4), (-1, -4),
     (3, 2), (-3, 2), (3, -2), (-3, -2),
     (2, 3), (-2, 3), (2, -3), (-2, -3)),
)

MAX_RADIUS = len(_RINGS) - 1

_FLATTENED: tuple[tuple[Cell, ...], ...] = tuple(
    tuple(offset for ring in _RINGS[: r + 1] for offset in ring)
    for r in range(len(_RINGS))
)


def neighbourhood_offsets(radius: int) -> list[Cell]:
    """Cell offsets within ``radius`` rings of a cell, innermost ring first."""
    if not 0 <= radius <= MAX_RADIUS:
        raise ValueError(f"radius must be between 0 and {MAX_RADIUS}, got {radius}")
    return list(_FLATTENED[radius])


class SpatialHash:
    """Grid of cells holding boid ids; safe to use from several threads."""

    def __init__(
        self,
        cell_size: int = 32,
        n_horizontal_cells: int = 10,
        n_vertical_cells: int = 5,
    ) -> None:
        self._lock = threading.RLock()
        self._cell_size = cell_size
        self._n_horizontal_cells = n_horizontal_cells
        self._n_vertical_cells = n_vertical_cells
        self._grid: list[list[list[int]]] = []
        self._rebuild()

    def _rebuild(self) -> None:
        with self._lock:
            self._grid = [
                [[] for _ in range(self._n_vertical_cells)]
                for _ in range(self._n_horizontal_cells)
            ]

    def _in_bounds(self, cell: Cell) -> bool:
        x, y = cell
        return 0 <= x < self._n_horizontal_cells and 0 <= y < self._n_vertical_cells

    @property
    def cell_size(self) -> int:
        return self._cell_size

    @cell_size.setter
    def cell_size(self, value: int) -> None:
        # Non-positive or unchanged values are ignored; a change empties the grid.
        if value != self._cell_size and value > 0:
            with self._lock:
                self._cell_size = value
                self._rebuild()

    @property
    def n_horizontal_cells(self) -> int:
        return self._n_horizontal_cells

    @n_horizontal_cells.setter
    def n_horizontal_cells(self, value: int) -> None:
        if value != self._n_horizontal_cells and value > 0:
            with self._lock:
                self._n_horizontal_cells = value
                self._rebuild()

    @property
    def n_vertical_cells(self) -> int:
        return self._n_vertical_cells

    @n_vertical_cells.setter
    def n_vertical_cells(self, value: int) -> None:
        if value != self._n_vertical_cells and value > 0:
            with self._lock:
                self._n_vertical_cells = value
                self._rebuild()

    @property
    def world_width(self) -> int:
        return self._n_horizontal_cells * self._cell_size

    @property
    def world_height(self) -> int:
        return self._n_vertical_cells * self._cell_size

    @property
    def world_size(self) -> Vector2:
        return Vector2(float(self.world_width), float(self.world_height))

    def add_boid(self, cell: Cell, boid_id: int) -> None:
        """Put an id into a cell; ignored outside the grid or if already present."""
        if not self._in_bounds(cell):
            return
        x, y = cell
        with self._lock:
            bucket = self._grid[x][y]
            if boid_id not in bucket:
                bucket.append(boid_id)

    def remove_boid(self, cell: Cell, boid_id: int) -> None:
        """Take an id out of a cell; ignored outside the grid."""
        if not self._in_bounds(cell):
            return
        x, y = cell
        with self._lock:
            self._grid[x][y] = [i for i in self._grid[x][y] if i != boid_id]

    def nearby_boids(self, cell: Cell, radius: int) -> list[int]:
        """Ids in the cells within ``radius`` rings; empty for an unsupported radius."""
        if not 0 <= radius <= MAX_RADIUS:
            return []
        cx, cy = cell
        result: list[int] = []
        with self._lock:
            for dx, dy in _FLATTENED[radius]:
                target = (cx + dx, cy + dy)
                if self._in_bounds(target):
                    result.extend(self._grid[target[0]][target[1]])
        return result

    def clear(self) -> None:
        """Empty every cell."""
        with self._lock:
            for column in self._grid:
                for bucket in column:
                    bucket.clear()

    def world_to_grid(self, pos: Vector2) -> Cell:
        """Cell containing a world position, clamped to the grid."""
        gx = math.floor(pos.x / self._cell_size)
        gy = math.floor(pos.y / self._cell_size)
        gx = min(max(gx, 0), self._n_horizontal_cells - 1)
        gy = min(max(gy, 0), self._n_vertical_cells - 1)
        return (gx, gy)

    def grid_to_world(self, cell: Cell) -> Vector2:
        """World position of a cell's centre."""
        x, y = cell
        half = 0.5 * self._cell_size
        return Vector2(x * self._cell_size + half, y * self._cell_size + half)