"""
Boundary extrapolation onto the solid border ring
"""

from ..core.fields import Field, check_field
from ..core.grid import GridState


def extrapolate_boundary(grid: GridState, field: Field):
    """
    Copy each border value from its nearest interior cell

    Corners take the diagonally adjacent interior corner, the remaining
    top/bottom cells the cell below/above them, and the remaining left/right
    cells the cell to their right/left. This makes bilinear sampling next to
    the walls well defined.

    Args:
        grid: Grid to modify in place
        field: Which field to extrapolate

    Raises:
        InvalidFieldError: if `field` is not a Field member
    """
    check_field(field, "extrapolate")
    f = grid.field(field).reshape(grid.num_y, grid.num_x)

    f[0, 0] = f[1, 1]
    f[-1, 0] = f[-2, 1]
    f[0, -1] = f[1, -2]
    f[-1, -1] = f[-2, -2]

    f[0, 1:-1] = f[1, 1:-1]
    f[-1, 1:-1] = f[-2, 1:-1]

    f[1:-1, 0] = f[1:-1, 1]
    f[1:-1, -1] = f[1:-1, -2]
