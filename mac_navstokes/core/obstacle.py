"""
Circular obstacle that can be dragged through the flow
"""

from dataclasses import dataclass


@dataclass
class Obstacle:
    """
    A solid disc in grid-cell coordinates

    Attributes:
        x: Column coordinate of the center
        y: Row coordinate of the center
        r: Radius in cells
    """
    x: float
    y: float
    r: float

    def contains(self, x: float, y: float) -> bool:
        """Euclidean disc test used by pointer input before a drag"""
        return (x - self.x)**2 + (y - self.y)**2 <= self.r**2
