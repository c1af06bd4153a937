"""
Play / pause / step / reset loop around a simulation context
"""

import logging
from typing import Optional
from ..core.config import SimulationConfig
from ..core.grid import GridState
from ..physics.simulation import simulation_from_config, step


class SimulationController:
    """
    Owns a grid and the running flag that the solver itself knows nothing of

    `tick()` is called once per animation frame and only steps while
    running; `step_once()` is the explicit step command and only works
    while paused.
    """

    def __init__(self, config: Optional[SimulationConfig] = None):
        self.config = config if config is not None else SimulationConfig()
        self.grid = simulation_from_config(self.config)
        self.running = False
        self.frames = 0

    def play(self):
        self.running = True
        logging.info("simulation running")

    def pause(self):
        self.running = False
        logging.info("simulation paused at step %d", self.frames)

    def toggle(self) -> bool:
        """Switch between running and paused, returns the new state"""
        if self.running:
            self.pause()
        else:
            self.play()
        return self.running

    def _advance(self):
        step(self.grid, self.grid.dt)
        self.frames += 1

    def tick(self) -> bool:
        """One animation frame; returns whether a step was taken"""
        if not self.running:
            return False
        self._advance()
        return True

    def step_once(self) -> bool:
        """
        Explicit single step

        Returns:
            False without stepping while the loop is running
        """
        if self.running:
            logging.info("step request ignored while running")
            return False
        self._advance()
        return True

    def reset(self) -> GridState:
        """Rebuild the grid from the same configuration"""
        self.grid = simulation_from_config(self.config)
        self.frames = 0
        logging.info("simulation reset (%dx%d)", self.config.num_x, self.config.num_y)
        return self.grid
