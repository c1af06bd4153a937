"""
Simulation configuration

All tunable constants of the wind tunnel live here so that a grid can be
rebuilt (reset) from exactly the same settings.
"""

import numbers
from dataclasses import dataclass, replace as _replace
from .errors import ConfigurationError


@dataclass(frozen=True)
class SimulationConfig:
    """
    Settings for one simulation context

    Attributes:
        num_x: Number of cells in the x direction (including the solid border)
        num_y: Number of cells in the y direction (including the solid border)
        h: Physical length of a cell
        dt: Fixed timestep in seconds
        gravity: Downward acceleration applied to v every step
        inflow_speed: Horizontal velocity seeded on the inlet column
        pipe_fraction: Half-height of the density inlet as a fraction of num_y
        obstacle_x_fraction: Initial obstacle center, fraction of num_x
        obstacle_y_fraction: Initial obstacle center, fraction of num_y
        obstacle_radius_fraction: Initial obstacle radius, fraction of num_x
        projection_iterations: Relaxation sweeps per pressure projection
        convergence_tolerance: Early exit threshold on the signed divergence sum
    """
    num_x: int = 160
    num_y: int = 160
    h: float = 0.4
    dt: float = 1.0 / 30
    gravity: float = 9.8
    inflow_speed: float = 50.0
    pipe_fraction: float = 0.1
    obstacle_x_fraction: float = 0.3
    obstacle_y_fraction: float = 0.5
    obstacle_radius_fraction: float = 0.04
    projection_iterations: int = 30
    convergence_tolerance: float = 1e-7

    def __post_init__(self):
        for name in ('num_x', 'num_y'):
            value = getattr(self, name)
            if not _is_int(value) or value <= 0:
                raise ConfigurationError(f"{name} must be a positive integer, got {value!r}")
            if value < 3:
                raise ConfigurationError(
                    f"{name} must be at least 3 so the grid has an interior, got {value}"
                )

        for name in ('h', 'dt'):
            value = getattr(self, name)
            if not _is_real(value) or not value > 0:
                raise ConfigurationError(f"{name} must be a positive number, got {value!r}")

        if not _is_int(self.projection_iterations) or self.projection_iterations <= 0:
            raise ConfigurationError(
                f"projection_iterations must be a positive integer, got {self.projection_iterations!r}"
            )
        if not _is_real(self.convergence_tolerance) or self.convergence_tolerance < 0:
            raise ConfigurationError(
                f"convergence_tolerance must be non-negative, got {self.convergence_tolerance!r}"
            )
        if not _is_real(self.pipe_fraction) or not 0 <= self.pipe_fraction <= 1:
            raise ConfigurationError(f"pipe_fraction must lie in [0, 1], got {self.pipe_fraction!r}")

    def replace(self, **changes) -> 'SimulationConfig':
        """Return a validated copy with some settings changed"""
        return _replace(self, **changes)


def _is_int(value) -> bool:
    return isinstance(value, numbers.Integral) and not isinstance(value, bool)


def _is_real(value) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, bool)
