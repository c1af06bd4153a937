"""
Rendering of the staggered grid
"""

import numpy as np
import matplotlib.pyplot as plt
import matplotlib.animation as animation
from typing import List, Optional, Tuple
from ..core.fields import CellType
from ..core.grid import GridState
from ..numerics.projection import compute_divergence

SOLID_COLOR = (1.0, 0.0, 0.0)


class GridVisualizer:
    """
    Draw cells, occupancy and velocity arrows of a grid

    Coordinates are grid cells with the origin in the upper left corner,
    matching the solver's layout (rows grow downwards).
    """

    def __init__(self, figsize: Tuple[int, int] = (8, 8), max_arrows: int = 40):
        """
        Args:
            figsize: Figure size
            max_arrows: Maximum number of arrows drawn along each axis
        """
        self.figsize = figsize
        self.max_arrows = max_arrows

    def cell_colors(self, grid: GridState, show_occupancy: bool = True,
                    show_density: bool = True) -> np.ndarray:
        """
        RGB image of the grid, shape (num_y, num_x, 3)

        Solid cells are red when occupancy is shown; otherwise cells are
        white, or grey with 1 - density when density is shown.
        """
        image = np.ones((grid.num_y, grid.num_x, 3))

        if show_density:
            grey = np.clip(1.0 - grid.d2d, 0.0, 1.0)
            image[...] = grey[..., None]

        if show_occupancy:
            image[grid.s2d == CellType.SOLID] = SOLID_COLOR

        return image

    def _draw_cells(self, ax, grid: GridState, show_occupancy: bool, show_density: bool):
        ax.imshow(self.cell_colors(grid, show_occupancy, show_density),
                  extent=(0, grid.num_x, grid.num_y, 0),
                  interpolation='nearest', origin='upper')

    def _draw_velocity(self, ax, grid: GridState, scale: float):
        skip = max(1, max(grid.num_x, grid.num_y) // self.max_arrows)
        rows, cols = np.nonzero(grid.fluid_mask())
        keep = (rows % skip == 0) & (cols % skip == 0)
        rows, cols = rows[keep], cols[keep]

        u = grid.u2d[rows, cols] * scale
        v = grid.v2d[rows, cols] * scale
        zeros = np.zeros_like(u)

        # u at left-edge midpoints, v at bottom-edge midpoints
        ax.quiver(cols, rows + 0.5, u, zeros, color='blue',
                  angles='xy', scale_units='xy', scale=1.0, width=0.002)
        ax.quiver(cols + 0.5, rows + 1.0, zeros, v, color='blue',
                  angles='xy', scale_units='xy', scale=1.0, width=0.002)

    def plot_grid(self, grid: GridState,
                  show_occupancy: bool = True,
                  show_density: bool = True,
                  show_velocity: bool = False,
                  scale: float = 0.1) -> plt.Figure:
        """
        Plot the grid as the interactive demo draws it

        Args:
            grid: Grid to draw
            show_occupancy: Paint solid cells red
            show_density: Shade fluid cells by density
            show_velocity: Draw u and v arrows for fluid cells
            scale: Arrow length in cells per unit of velocity

        Returns:
            Figure object
        """
        fig, ax = plt.subplots(figsize=self.figsize)
        self._draw_cells(ax, grid, show_occupancy, show_density)
        if show_velocity:
            self._draw_velocity(ax, grid, scale)

        ax.set_xlim(0, grid.num_x)
        ax.set_ylim(grid.num_y, 0)
        ax.set_xlabel('column')
        ax.set_ylabel('row')
        ax.set_title(f'Step {grid.step_count} (t={grid.time:.3f})')
        return fig

    def plot_divergence(self, grid: GridState) -> plt.Figure:
        """Plot the current per-cell divergence"""
        fig, ax = plt.subplots(figsize=self.figsize)
        div = compute_divergence(grid)
        d_max = np.max(np.abs(div))

        if d_max > 1e-10:
            im = ax.imshow(div, cmap='RdBu_r', vmin=-d_max, vmax=d_max,
                           extent=(0, grid.num_x, grid.num_y, 0))
            plt.colorbar(im, ax=ax, label='divergence')
        else:
            ax.text(0.5, 0.5, 'Zero divergence', transform=ax.transAxes,
                    ha='center', va='center')

        ax.set_title(f'Divergence (step {grid.step_count})')
        return fig

    def animate(self, frames: List[GridState],
                filename: Optional[str] = None,
                interval: int = 33,
                show_occupancy: bool = True,
                show_density: bool = True) -> animation.FuncAnimation:
        """
        Animate a sequence of grid snapshots

        Args:
            frames: Grid snapshots, e.g. from GridState.copy()
            filename: Save animation to file; the figure is closed once saved
            interval: Milliseconds between frames

        Returns:
            Animation object
        """
        fig, ax = plt.subplots(figsize=self.figsize)
        first = frames[0]
        im = ax.imshow(self.cell_colors(first, show_occupancy, show_density),
                       extent=(0, first.num_x, first.num_y, 0),
                       interpolation='nearest')
        title = ax.set_title(f'Step {first.step_count}')

        def update(frame):
            grid = frames[frame]
            im.set_data(self.cell_colors(grid, show_occupancy, show_density))
            title.set_text(f'Step {grid.step_count}')
            return [im, title]

        anim = animation.FuncAnimation(fig, update, frames=len(frames),
                                       interval=interval, blit=False)

        if filename is not None:
            anim.save(filename, writer='pillow')
            plt.close(fig)

        return anim
