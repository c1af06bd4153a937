"""
Construction of a simulation context and the fixed-order step
"""

import logging
from ..core.config import SimulationConfig
from ..core.fields import Field
from ..core.grid import GridState
from ..numerics.boundary import extrapolate_boundary
from ..numerics.projection import project
from ..numerics.advection import advect_velocity, advect_density
from .forces import apply_gravity


def new_simulation(num_x: int, num_y: int, cell_size: float, dt: float,
                   **settings) -> GridState:
    """
    Create a seeded wind tunnel grid

    Args:
        num_x: Number of cells in x, border included
        num_y: Number of cells in y, border included
        cell_size: Physical length of a cell
        dt: Fixed timestep
        **settings: Overrides for any other SimulationConfig field

    Raises:
        ConfigurationError: on invalid dimensions, cell size, timestep or settings
    """
    return GridState(num_x, num_y, cell_size, dt, **settings)


def simulation_from_config(config: SimulationConfig) -> GridState:
    """Create a grid from a complete configuration"""
    return GridState.from_config(config)


def step(grid: GridState, dt: float):
    """
    Advance the grid by one tick, in place

    Stages, in this order:
        1. gravity on v
        2. re-stamp the obstacle at its current position
        3. pressure projection
        4. boundary extrapolation of u
        5. velocity advection
        6. density advection

    The projection outcome is kept on `grid.last_projection` for diagnostics.
    """
    config = grid.config

    apply_gravity(grid, dt, config.gravity)
    grid.set_obstacle(grid.obstacle.x, grid.obstacle.y, grid.obstacle.r)
    grid.last_projection = project(grid, config.projection_iterations,
                                   config.convergence_tolerance)
    extrapolate_boundary(grid, Field.HORIZONTAL)
    advect_velocity(grid, dt)
    advect_density(grid, dt)

    grid.step_count += 1
    grid.time += dt
    logging.debug("step %d: %d projection sweeps, divergence sum %g",
                 grid.step_count, grid.last_projection.sweeps,
                 grid.last_projection.final_sum)


def set_obstacle(grid: GridState, x: float, y: float, r: float):
    """Move the obstacle to (x, y) with radius r, in grid cells"""
    grid.set_obstacle(x, y, r)


def clear_obstacle(grid: GridState):
    """Release the cells under the obstacle back to the fluid"""
    grid.clear_obstacle()
