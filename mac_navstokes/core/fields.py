"""
Field selectors and cell occupancy states for the staggered grid
"""

from enum import Enum, IntEnum
from .errors import InvalidFieldError


class CellType(IntEnum):
    """
    Occupancy of a cell

    The numeric values double as the weight used by the projector and the
    advector: solid neighbours contribute nothing.
    """
    SOLID = 0
    FLUID = 1


class Field(Enum):
    """
    Per-cell quantities that can be sampled or extrapolated

    Attributes:
        HORIZONTAL: u, stored at the midpoint of each cell's left edge
        VERTICAL: v, stored at the midpoint of each cell's bottom edge
        DENSITY: d, stored at cell centers
    """
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"
    DENSITY = "density"


def check_field(field, operation: str = "access") -> "Field":
    """Return `field` if it is a Field member, raise InvalidFieldError otherwise"""
    if not isinstance(field, Field):
        raise InvalidFieldError(field, operation)
    return field
