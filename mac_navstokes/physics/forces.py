"""
External body forces
"""

from ..core.fields import CellType
from ..core.grid import GridState

GRAVITY = 9.8


def apply_gravity(grid: GridState, dt: float, gravity: float = GRAVITY):
    """
    Accelerate v downwards for every interior cell above a fluid cell

    Only the neighbour below is checked, so a solid cell resting on fluid is
    accelerated too; the obstacle re-stamp that follows in a step overwrites
    it. u is not touched.
    """
    v = grid.v2d
    below_is_fluid = grid.s2d[2:, 1:-1] == CellType.FLUID
    v[1:-1, 1:-1][below_is_fluid] += gravity * dt
