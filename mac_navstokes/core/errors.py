"""
Exceptions raised by the grid solver
"""


class SimulationError(Exception):
    """Base class for all solver errors"""


class ConfigurationError(SimulationError, ValueError):
    """Invalid grid dimensions, cell size, timestep or solver settings"""


class InvalidFieldError(SimulationError, ValueError):
    """A field selector that is not one of the staggered grid fields"""

    def __init__(self, field, operation: str = "access"):
        self.field = field
        self.operation = operation
        super().__init__(f"Unable to {operation} grid feature {field!r}. Invalid feature.")
