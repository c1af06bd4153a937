"""
Semi-Lagrangian advection of velocity and density

Every fluid sample is traced backwards along the flow for one timestep and
replaced by the old field's value at the departure point. Results go to the
scratch arrays and are committed after the full sweep, so all reads see the
pre-advection field.
"""

import numpy as np
from ..core.fields import Field
from ..core.grid import GridState
from .interpolation import sample_field


def _fluid_indices(grid: GridState):
    """Rows, columns and flat indices of interior fluid cells"""
    fluid = np.zeros((grid.num_y, grid.num_x), dtype=bool)
    fluid[1:-1, 1:-1] = grid.fluid_mask()[1:-1, 1:-1]
    rows, cols = np.nonzero(fluid)
    return rows, cols, rows * grid.num_x + cols


def advect_velocity(grid: GridState, dt: float):
    """
    Advect u and v by their own velocity field

    For the u sample of a cell the missing vertical component is the
    occupancy-weighted mean of the four surrounding v samples, and vice
    versa for the v sample.
    """
    h = grid.h
    c = grid.num_x
    u, v, s = grid.u, grid.v, grid.s

    grid.u_temp[:] = u
    grid.v_temp[:] = v

    rows, cols, k = _fluid_indices(grid)
    if k.size == 0:
        return

    # horizontal component, sampled at the left edge
    x = cols * h
    y = rows * h + 0.5 * h
    weight = s[k - 1] + s[k - c - 1] + s[k - c] + s[k]
    v_local = (v[k - 1] * s[k - 1] + v[k - c - 1] * s[k - c - 1] +
               v[k - c] * s[k - c] + v[k] * s[k]) / weight
    grid.u_temp[k] = sample_field(grid, x - dt * u[k], y - dt * v_local, Field.HORIZONTAL)

    # vertical component, sampled at the bottom edge
    x = cols * h + 0.5 * h
    y = (rows + 1) * h
    weight = s[k] + s[k + c] + s[k + 1] + s[k + c + 1]
    u_local = (u[k] * s[k] + u[k + c] * s[k + c] +
               u[k + 1] * s[k + 1] + u[k + c + 1] * s[k + c + 1]) / weight
    grid.v_temp[k] = sample_field(grid, x - dt * u_local, y - dt * v[k], Field.VERTICAL)

    grid.u[:] = grid.u_temp
    grid.v[:] = grid.v_temp


def advect_density(grid: GridState, dt: float):
    """Advect the passive density using the cell-center velocity"""
    h = grid.h
    c = grid.num_x
    u, v = grid.u, grid.v

    grid.d_temp[:] = grid.d

    rows, cols, k = _fluid_indices(grid)
    if k.size == 0:
        return

    x = cols * h + 0.5 * h
    y = rows * h + 0.5 * h
    u_center = (u[k] + u[k + 1]) * 0.5
    v_center = (v[k] + v[k - c]) * 0.5

    grid.d_temp[k] = sample_field(grid, x - dt * u_center, y - dt * v_center, Field.DENSITY)
    grid.d[:] = grid.d_temp
