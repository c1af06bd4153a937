"""Forces and time stepping"""

from .forces import apply_gravity, GRAVITY
from .simulation import (
    new_simulation,
    simulation_from_config,
    step,
    set_obstacle,
    clear_obstacle
)

__all__ = [
    'apply_gravity',
    'GRAVITY',
    'new_simulation',
    'simulation_from_config',
    'step',
    'set_obstacle',
    'clear_obstacle'
]
