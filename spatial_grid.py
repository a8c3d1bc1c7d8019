# spatial_grid.py

import numpy as np

# Offsets of the 8 cells surrounding a cell. dx is the outer loop, dy the inner.
NEIGHBOR_OFFSETS = tuple(
    (dx, dy)
    for dx in (-1, 0, 1)
    for dy in (-1, 0, 1)
    if not (dx == 0 and dy == 0)
)


class SpatialHashGrid:
    """
    Broad-phase partition of particles into fixed-size square cells.

    A cell is keyed by (floor(x / cell_size), floor(y / cell_size)). Only
    occupied cells are stored, so the grid is unbounded and particles outside
    the world rectangle still hash correctly.

    Data Contract:
    - Inputs: cell_size (float) - Side length of a cell, > 0.
    - Invariants: After rebuild(), every particle sits in exactly one bucket,
      chosen by its position at rebuild time. Buckets and occupied cells keep
      insertion order.
    """
    def __init__(self, cell_size: float):
        if cell_size <= 0:
            raise ValueError(f"cell_size must be positive, got {cell_size!r}")
        self.cell_size = float(cell_size)
        self._cells = {}

    def __len__(self):
        return len(self._cells)

    def __iter__(self):
        return iter(self._cells)

    def __contains__(self, cell):
        return cell in self._cells

    def cells(self):
        """Occupied cell keys, in the order they were first filled."""
        return list(self._cells)

    def bucket(self, cell):
        """The particles in a cell, or an empty list for an unoccupied one."""
        return self._cells.get(cell, [])

    def particle_count(self) -> int:
        return sum(len(bucket) for bucket in self._cells.values())

    def cell_of(self, position):
        return (
            int(np.floor(position[0] / self.cell_size)),
            int(np.floor(position[1] / self.cell_size)),
        )

    def neighbor_cells(self, cell):
        cell_x, cell_y = cell
        return [(cell_x + dx, cell_y + dy) for dx, dy in NEIGHBOR_OFFSETS]

    def clear(self):
        self._cells.clear()

    def rebuild(self, particles):
        """
        Clears the grid and reinserts every particle by its current position.

        Cell coordinates for the whole population are computed in one
        vectorized pass before bucketing.
        """
        self._cells.clear()
        if not particles:
            return

        positions = np.array([p.position for p in particles], dtype=np.float64)
        cell_coords = np.floor(positions / self.cell_size).astype(np.int64)

        for particle, (cell_x, cell_y) in zip(particles, cell_coords.tolist()):
            self._cells.setdefault((cell_x, cell_y), []).append(particle)

    def for_each_pair_in_and_around_cell(self, cell, visit):
        """
        Calls visit(a, b) for every candidate pair touching the given cell.

        Same-cell pairs are visited once each (i < j). Then every particle in
        the cell is visited against every particle in each of the 8 neighbor
        cells, with the cell's own particle as the first argument. A pair that
        straddles two occupied cells is therefore visited once from each side.
        """
        bucket = self._cells.get(cell)
        if not bucket:
            return

        count = len(bucket)
        for i in range(count):
            for j in range(i + 1, count):
                visit(bucket[i], bucket[j])

        neighbor_buckets = [
            self._cells[neighbor]
            for neighbor in self.neighbor_cells(cell)
            if neighbor in self._cells
        ]
        for particle in bucket:
            for neighbor_bucket in neighbor_buckets:
                for other in neighbor_bucket:
                    visit(particle, other)
