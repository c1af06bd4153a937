"""
Diagnostic recording and plotting for wind tunnel runs
"""

import json
import numpy as np
import matplotlib.pyplot as plt
from typing import List, Dict, Optional
from ..core.grid import GridState
from ..numerics.projection import ProjectionResult, compute_divergence


class DiagnosticRecorder:
    """
    Record scalar diagnostics of a grid after each step
    """

    KEYS = ('time', 'step', 'total_density', 'max_speed',
            'max_divergence', 'divergence_sum', 'projection_sweeps')

    def __init__(self):
        self.history: Dict[str, List[float]] = {key: [] for key in self.KEYS}

    def update(self, grid: GridState, projection: Optional[ProjectionResult] = None):
        """
        Append the current diagnostics of a grid

        Args:
            grid: Grid after a step
            projection: Projection outcome, defaults to grid.last_projection
        """
        if projection is None:
            projection = grid.last_projection

        fluid = grid.fluid_mask()
        speed = np.hypot(grid.u2d, grid.v2d)[fluid]
        div = compute_divergence(grid)

        self.history['time'].append(grid.time)
        self.history['step'].append(grid.step_count)
        self.history['total_density'].append(float(np.sum(grid.d2d[fluid])))
        self.history['max_speed'].append(float(speed.max()) if speed.size else 0.0)
        self.history['max_divergence'].append(float(np.max(np.abs(div))))
        self.history['divergence_sum'].append(float(np.sum(div)))
        self.history['projection_sweeps'].append(
            projection.sweeps if projection is not None else 0
        )

    def __len__(self):
        return len(self.history['time'])

    def plot_time_series(self) -> plt.Figure:
        """
        Plot time series of the recorded quantities

        Returns:
            Figure object
        """
        fig, axes = plt.subplots(2, 2, figsize=(12, 8))
        axes = axes.flatten()

        t = np.array(self.history['time'])

        ax = axes[0]
        ax.plot(t, self.history['total_density'], 'b-', linewidth=2)
        ax.set_xlabel('Time')
        ax.set_ylabel('Density')
        ax.set_title('Total Density in Fluid Cells')
        ax.grid(True, alpha=0.3)

        ax = axes[1]
        ax.plot(t, self.history['max_speed'], 'g-', linewidth=2)
        ax.set_xlabel('Time')
        ax.set_ylabel('Max |u|')
        ax.set_title('Maximum Speed')
        ax.grid(True, alpha=0.3)

        ax = axes[2]
        ax.plot(t, self.history['max_divergence'], 'r-', linewidth=2)
        ax.set_xlabel('Time')
        ax.set_ylabel('Max |div|')
        ax.set_title('Maximum Divergence after Step')
        ax.grid(True, alpha=0.3)

        ax = axes[3]
        ax.plot(t, self.history['projection_sweeps'], 'm.-', linewidth=1)
        ax.set_xlabel('Time')
        ax.set_ylabel('Sweeps')
        ax.set_title('Projection Sweeps')
        ax.grid(True, alpha=0.3)

        plt.tight_layout()
        return fig

    def save(self, filename: str):
        """Save the history as JSON"""
        data = {key: [float(v) for v in values] for key, values in self.history.items()}
        with open(filename, 'w') as f:
            json.dump(data, f, indent=2)

    def load(self, filename: str):
        """Replace the history with one saved by `save`"""
        with open(filename, 'r') as f:
            data = json.load(f)
        self.history = {key: list(data.get(key, [])) for key in self.KEYS}
