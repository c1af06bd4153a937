"""
Staggered grid state for the 2D wind tunnel

Coordinate system:
    - Arrays are flat and row-major, index = row * num_x + col
    - The origin is the upper left corner, rows grow downwards
    - u is located at the midpoint of the cell's left edge (positive = right)
    - v is located at the midpoint of the cell's bottom edge (positive = down)
"""

import logging
import math
import numpy as np
from typing import NamedTuple, Optional
from .config import SimulationConfig
from .fields import CellType, Field, check_field
from .obstacle import Obstacle


class CellSample(NamedTuple):
    """Values of one cell as seen by a renderer"""
    u: float
    v: float
    cell_type: CellType
    density: float


class GridState:
    """
    Owner of every per-cell array of the simulation

    Occupancy is stored as a 0/1 weight in `s` (0 = solid, 1 = fluid) so the
    solver can multiply by it directly.
    """

    def __init__(self, num_x: int, num_y: int, h: float, dt: float,
                 config: Optional[SimulationConfig] = None, **settings):
        """
        Allocate and seed a grid

        Args:
            num_x: Number of cells in the x direction
            num_y: Number of cells in the y direction
            h: Physical cell size
            dt: Fixed timestep
            config: Base configuration for the remaining settings
            **settings: Overrides for any other SimulationConfig field

        Raises:
            ConfigurationError: if any setting is invalid (nothing is allocated)
        """
        base = config if config is not None else SimulationConfig()
        self.config = base.replace(num_x=num_x, num_y=num_y, h=h, dt=dt, **settings)

        self.num_x = self.config.num_x
        self.num_y = self.config.num_y
        self.h = float(self.config.h)
        self.dt = float(self.config.dt)
        self.num_cells = self.num_x * self.num_y

        size = self.num_cells
        self.u = np.zeros(size)
        self.v = np.zeros(size)
        self.s = np.zeros(size)
        self.d = np.zeros(size)
        self.div = np.zeros(size)
        self.u_temp = np.zeros(size)
        self.v_temp = np.zeros(size)
        self.d_temp = np.zeros(size)

        self.step_count = 0
        self.time = 0.0
        self.last_projection = None

        self._seed()

        self.obstacle = Obstacle(
            self.config.obstacle_x_fraction * self.num_x,
            self.config.obstacle_y_fraction * self.num_y,
            self.config.obstacle_radius_fraction * self.num_x,
        )
        self.set_obstacle(self.obstacle.x, self.obstacle.y, self.obstacle.r)

    @classmethod
    def from_config(cls, config: SimulationConfig) -> 'GridState':
        """Build a grid from a complete configuration"""
        return cls(config.num_x, config.num_y, config.h, config.dt, config=config)

    def _seed(self):
        """Solid border, fluid interior, inlet jet and density pipe"""
        s = self.s2d
        s[1:-1, 1:-1] = CellType.FLUID

        self.u2d[:, 1] = self.config.inflow_speed

        rows = np.arange(self.num_y)
        half_width = self.num_y * self.config.pipe_fraction
        in_pipe = np.abs(rows - 0.5 * self.num_y) < half_width
        self.d2d[in_pipe, 0] = 1.0

    # ------------------------------------------------------------------
    # Addressing and read access
    # ------------------------------------------------------------------

    def index(self, row: int, col: int) -> int:
        """Flat index of the cell at (row, col)"""
        if not (0 <= row < self.num_y and 0 <= col < self.num_x):
            raise IndexError(f"Cell ({row}, {col}) outside {self.num_y}x{self.num_x} grid")
        return row * self.num_x + col

    def cell(self, row: int, col: int) -> CellSample:
        """Velocity, occupancy and density of one cell"""
        k = self.index(row, col)
        return CellSample(float(self.u[k]), float(self.v[k]),
                          CellType(int(self.s[k])), float(self.d[k]))

    def is_solid(self, row: int, col: int) -> bool:
        return self.s[self.index(row, col)] == CellType.SOLID

    def field(self, field: Field) -> np.ndarray:
        """Backing array of a field"""
        field = check_field(field)
        if field is Field.HORIZONTAL:
            return self.u
        elif field is Field.VERTICAL:
            return self.v
        return self.d

    def _view(self, array: np.ndarray) -> np.ndarray:
        return array.reshape(self.num_y, self.num_x)

    @property
    def u2d(self) -> np.ndarray:
        return self._view(self.u)

    @property
    def v2d(self) -> np.ndarray:
        return self._view(self.v)

    @property
    def s2d(self) -> np.ndarray:
        return self._view(self.s)

    @property
    def d2d(self) -> np.ndarray:
        return self._view(self.d)

    @property
    def div2d(self) -> np.ndarray:
        return self._view(self.div)

    def border_mask(self) -> np.ndarray:
        """Boolean (num_y, num_x) mask of the outer ring"""
        mask = np.ones((self.num_y, self.num_x), dtype=bool)
        mask[1:-1, 1:-1] = False
        return mask

    def fluid_mask(self) -> np.ndarray:
        """Boolean (num_y, num_x) mask of fluid cells"""
        return self.s2d == CellType.FLUID

    def copy(self) -> 'GridState':
        """Deep snapshot of the grid, obstacle included"""
        clone = object.__new__(GridState)
        clone.__dict__.update(self.__dict__)
        for name in ('u', 'v', 's', 'd', 'div', 'u_temp', 'v_temp', 'd_temp'):
            setattr(clone, name, getattr(self, name).copy())
        clone.obstacle = Obstacle(self.obstacle.x, self.obstacle.y, self.obstacle.r)
        return clone

    # ------------------------------------------------------------------
    # Obstacle
    # ------------------------------------------------------------------

    def _disc_cells(self, x: int, y: int, r: int) -> np.ndarray:
        """Flat indices of the interior cells covered by a disc"""
        row_lo, row_hi = max(y - r, 1), min(y + r, self.num_y - 1)
        col_lo, col_hi = max(x - r, 1), min(x + r, self.num_x - 1)
        if row_lo >= row_hi or col_lo >= col_hi:
            return np.empty(0, dtype=np.intp)

        rows, cols = np.meshgrid(np.arange(row_lo, row_hi),
                                 np.arange(col_lo, col_hi), indexing='ij')
        inside = (rows - y)**2 + (cols - x)**2 < r**2
        return (rows[inside] * self.num_x + cols[inside]).ravel()

    def set_obstacle(self, x: float, y: float, r: float):
        """
        Move the obstacle and carve it into the grid

        The obstacle velocity is the displacement since the previous stamp
        divided by dt; covered cells become solid, take that velocity and
        lose their density. Cells on the outer ring are never touched.
        """
        x = int(math.floor(x))
        y = int(math.floor(y))
        r = int(math.ceil(r))

        vx = (x - self.obstacle.x) / self.dt
        vy = (y - self.obstacle.y) / self.dt
        logging.debug("obstacle at (%d, %d) r=%d velocity (%g, %g)", x, y, r, vx, vy)

        self.obstacle.x = x
        self.obstacle.y = y
        self.obstacle.r = r

        cells = self._disc_cells(x, y, r)
        self.s[cells] = CellType.SOLID
        self.u[cells] = vx
        self.v[cells] = vy
        self.d[cells] = 0.0

    def clear_obstacle(self):
        """Turn the cells of the current disc back into fluid"""
        x = int(math.floor(self.obstacle.x))
        y = int(math.floor(self.obstacle.y))
        r = int(math.ceil(self.obstacle.r))
        self.s[self._disc_cells(x, y, r)] = CellType.FLUID
