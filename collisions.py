# collisions.py

"""
Narrow-phase collision pass over a built spatial grid.

Pairs are resolved one at a time, in grid visit order, each correction
applied immediately. A particle touching several neighbors in one frame
therefore receives several sequential corrections, and a pair straddling
two occupied cells may be corrected twice.
"""

from constants import EPSILON


def resolve_collisions(grid, epsilon: float = EPSILON) -> int:
    """
    Resolves every candidate pair the grid yields.

    - Inputs:
        - grid (SpatialHashGrid): A grid rebuilt from the current positions.
        - epsilon (float): Degenerate-distance threshold for the pair test.
    - Outputs: The number of pair visits that applied a correction.
    - Side Effects: Mutates positions and velocities of colliding particles.
    """
    resolved = 0

    def visit(particle, other):
        nonlocal resolved
        if particle.resolve_collision(other, epsilon):
            resolved += 1

    for cell in grid.cells():
        grid.for_each_pair_in_and_around_cell(cell, visit)

    return resolved
