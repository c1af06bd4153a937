"""
Pointer input: dragging the obstacle with a mouse
"""

from typing import Tuple
from ..core.config import SimulationConfig
from ..core.errors import ConfigurationError
from ..core.grid import GridState


class PointerInput:
    """
    Converts canvas pixels to grid cells and drags the obstacle

    A drag only starts when the press lands inside the obstacle. While the
    drag is active, every move clears the old disc and stamps a new one of
    the same radius at the pointer.
    """

    def __init__(self, grid: GridState, canvas_width_px: float):
        """
        Args:
            grid: Grid the pointer acts on
            canvas_width_px: Width of the drawing surface in pixels
        """
        if not canvas_width_px > 0:
            raise ConfigurationError(f"canvas width must be positive, got {canvas_width_px!r}")
        self.canvas_width_px = canvas_width_px
        self.dragging = False
        self.bind(grid)

    def bind(self, grid: GridState):
        """Attach to a (new) grid, e.g. after a reset"""
        self.grid = grid
        self.pixels_per_cell = self.canvas_width_px / grid.num_x
        self.cells_per_pixel = 1.0 / self.pixels_per_cell
        self.dragging = False

    def to_cells(self, px: float, py: float) -> Tuple[float, float]:
        """Pixel offsets from the canvas origin to grid-cell coordinates"""
        return px * self.cells_per_pixel, py * self.cells_per_pixel

    def press(self, px: float, py: float) -> bool:
        x, y = self.to_cells(px, py)
        self.dragging = self.grid.obstacle.contains(x, y)
        return self.dragging

    def move(self, px: float, py: float) -> bool:
        """Returns whether the obstacle was moved"""
        if not self.dragging:
            return False
        x, y = self.to_cells(px, py)
        self.grid.clear_obstacle()
        self.grid.set_obstacle(x, y, self.grid.obstacle.r)
        return True

    def release(self):
        self.dragging = False


def canvas_width_for(config: SimulationConfig, pixels_per_cell: float) -> float:
    """Canvas width that gives `pixels_per_cell` for this configuration"""
    return config.num_x * pixels_per_cell
