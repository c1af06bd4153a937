"""
Bilinear sampling of staggered fields
"""

import numpy as np
from typing import Tuple, Union
from ..core.fields import Field, check_field
from ..core.grid import GridState

ArrayLike = Union[float, np.ndarray]


def _anchor(coord: np.ndarray, h: float, half_offset: bool,
            edge_offset: int) -> Tuple[np.ndarray, np.ndarray]:
    """
    Lower sample index along one axis and the fractional offset from it

    Samples at half offsets live at (k + 0.5) * h; samples on whole cell
    boundaries live at (k + edge_offset) * h.
    """
    if half_offset:
        k = np.floor(coord / h + 0.5).astype(np.intp) - 1
        origin = (k + 0.5) * h
    else:
        k = np.floor(coord / h).astype(np.intp) - edge_offset
        origin = (k + edge_offset) * h
    return k, (coord - origin) / h


def _clip_anchor(k: np.ndarray, t: np.ndarray, n: int) -> Tuple[np.ndarray, np.ndarray]:
    """Keep the 2-point stencil [k, k+1] inside [0, n)"""
    k_clipped = np.clip(k, 0, n - 2)
    t = np.clip(t + (k - k_clipped), 0.0, 1.0)
    return k_clipped, t


def sample_field(grid: GridState, x: ArrayLike, y: ArrayLike, field: Field) -> ArrayLike:
    """
    Bilinear sample of a field at physical positions

    Positions are clamped to [0.5h, num*h - 1] on each axis first. The
    anchors depend on where the field lives:

        HORIZONTAL: whole cells in x, half cells in y
        VERTICAL:   half cells in x, whole cells in y (bottom edges)
        DENSITY:    half cells in both

    Args:
        grid: Grid to read from
        x: Horizontal position(s), scalar or array
        y: Vertical position(s), same shape as x
        field: Field to sample

    Returns:
        Interpolated value(s); a float for scalar input

    Raises:
        InvalidFieldError: if `field` is not a Field member
    """
    field = check_field(field, "interpolate")
    h = grid.h
    scalar = np.ndim(x) == 0 and np.ndim(y) == 0

    x = np.maximum(np.minimum(np.asarray(x, dtype=float), grid.num_x * h - 1), 0.5 * h)
    y = np.maximum(np.minimum(np.asarray(y, dtype=float), grid.num_y * h - 1), 0.5 * h)

    if field is Field.HORIZONTAL:
        col, tx = _anchor(x, h, half_offset=False, edge_offset=0)
        row, ty = _anchor(y, h, half_offset=True, edge_offset=0)
    elif field is Field.VERTICAL:
        col, tx = _anchor(x, h, half_offset=True, edge_offset=0)
        row, ty = _anchor(y, h, half_offset=False, edge_offset=1)
    else:
        col, tx = _anchor(x, h, half_offset=True, edge_offset=0)
        row, ty = _anchor(y, h, half_offset=True, edge_offset=0)

    col, tx = _clip_anchor(col, tx, grid.num_x)
    row, ty = _clip_anchor(row, ty, grid.num_y)

    f = grid.field(field)
    c = grid.num_x
    k = row * c + col

    value = ((1 - ty) * ((1 - tx) * f[k] + tx * f[k + 1]) +
             ty * ((1 - tx) * f[k + c] + tx * f[k + c + 1]))

    if scalar:
        return float(value)
    return value
