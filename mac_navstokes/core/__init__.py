"""Grid data model, configuration and errors"""

from .errors import SimulationError, ConfigurationError, InvalidFieldError
from .config import SimulationConfig
from .fields import CellType, Field
from .obstacle import Obstacle
from .grid import GridState, CellSample

__all__ = [
    'SimulationError',
    'ConfigurationError',
    'InvalidFieldError',
    'SimulationConfig',
    'CellType',
    'Field',
    'Obstacle',
    'GridState',
    'CellSample'
]
