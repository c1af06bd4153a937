"""Numerical kernels of the staggered grid solver"""

from .boundary import extrapolate_boundary
from .interpolation import sample_field
from .projection import ProjectionResult, project, compute_divergence, total_divergence
from .advection import advect_velocity, advect_density

__all__ = [
    'extrapolate_boundary',
    'sample_field',
    'ProjectionResult',
    'project',
    'compute_divergence',
    'total_divergence',
    'advect_velocity',
    'advect_density'
]
