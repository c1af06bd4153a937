"""Interactive collaborators: run loop and pointer input"""

from .controller import SimulationController
from .interaction import PointerInput, canvas_width_for

__all__ = [
    'SimulationController',
    'PointerInput',
    'canvas_width_for'
]
