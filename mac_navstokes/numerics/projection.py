"""
Pressure projection by in-place divergence relaxation

Each sweep visits the interior fluid cells in row-major order and pushes
the cell's net outflow onto its fluid neighbours' faces. Updates are
Gauss-Seidel: later cells of a sweep see the faces written by earlier ones,
so the traversal order is part of the numerical result.
"""

import logging
import numpy as np
from dataclasses import dataclass, field
from typing import List
from ..core.fields import CellType
from ..core.grid import GridState


@dataclass
class ProjectionResult:
    """
    Outcome of one projection call

    Attributes:
        sweeps: Number of sweeps performed
        converged: Whether the early exit check fired
        divergence_sums: Signed divergence sum accumulated in each sweep
    """
    sweeps: int = 0
    converged: bool = False
    divergence_sums: List[float] = field(default_factory=list)

    @property
    def final_sum(self) -> float:
        return self.divergence_sums[-1] if self.divergence_sums else 0.0


def _interior_fluid_cells(grid: GridState) -> List[int]:
    """Flat indices of interior fluid cells, row-major"""
    fluid = np.zeros((grid.num_y, grid.num_x), dtype=bool)
    fluid[1:-1, 1:-1] = grid.s2d[1:-1, 1:-1] == CellType.FLUID
    return np.flatnonzero(fluid).tolist()


def project(grid: GridState, iterations: int = 30, tolerance: float = 1e-7) -> ProjectionResult:
    """
    Drive the velocity field towards zero divergence

    Per fluid cell:
        div = u[right] - u[here] + v[here] - v[above]
    is spread over the fluid neighbours (occupancy weight 1 each, divided by
    their count). Fully enclosed cells are skipped. Faces shared with solid
    cells never change.

    The sweep loop stops early once |sum of div over the sweep| < tolerance.
    This is a global check on the signed sum, not a per-cell bound.

    Args:
        grid: Grid to modify in place
        iterations: Maximum number of sweeps
        tolerance: Early exit threshold

    Returns:
        ProjectionResult with sweep count and per-sweep divergence sums
    """
    c = grid.num_x
    cells = _interior_fluid_cells(grid)

    u = grid.u.tolist()
    v = grid.v.tolist()
    s = grid.s.tolist()
    div_out = grid.div.tolist()

    result = ProjectionResult()

    for _ in range(iterations):
        total_div = 0.0
        for k in cells:
            div = u[k + 1] - u[k] + v[k] - v[k - c]
            total_div += div
            div_out[k] = div

            s_left = s[k - 1]
            s_right = s[k + 1]
            s_above = s[k - c]
            s_below = s[k + c]
            n = s_left + s_right + s_above + s_below
            if n == 0:
                continue

            u[k] += div * s_left / n
            v[k] -= div * s_below / n
            u[k + 1] -= div * s_right / n
            v[k - c] += div * s_above / n

        result.sweeps += 1
        result.divergence_sums.append(total_div)

        if abs(total_div) < tolerance:
            result.converged = True
            logging.debug("projection converged after %d sweeps", result.sweeps)
            break

    grid.u[:] = u
    grid.v[:] = v
    grid.div[:] = div_out

    return result


def compute_divergence(grid: GridState) -> np.ndarray:
    """
    Current divergence of every cell as a (num_y, num_x) array

    Solid and border cells report zero. The grid is not modified.
    """
    u = grid.u2d
    v = grid.v2d
    div = np.zeros((grid.num_y, grid.num_x))
    div[1:-1, 1:-1] = (u[1:-1, 2:] - u[1:-1, 1:-1] +
                       v[1:-1, 1:-1] - v[:-2, 1:-1])
    div[grid.s2d == CellType.SOLID] = 0.0
    return div


def total_divergence(grid: GridState) -> float:
    """Signed sum of the current divergence over all fluid cells"""
    return float(np.sum(compute_divergence(grid)))
