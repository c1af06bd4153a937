"""
Staggered-grid Navier-Stokes wind tunnel

An incompressible 2D fluid solver on a MAC grid: Gauss-Seidel pressure
projection, semi-Lagrangian advection of velocity and density, and a
draggable circular obstacle.
"""

from .core import (
    SimulationConfig,
    SimulationError,
    ConfigurationError,
    InvalidFieldError,
    CellType,
    Field,
    Obstacle,
    GridState
)
from .physics import new_simulation, step, set_obstacle, clear_obstacle

__version__ = "0.1.0"

__all__ = [
    'SimulationConfig',
    'SimulationError',
    'ConfigurationError',
    'InvalidFieldError',
    'CellType',
    'Field',
    'Obstacle',
    'GridState',
    'new_simulation',
    'step',
    'set_obstacle',
    'clear_obstacle'
]
