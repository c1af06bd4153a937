"""Visualization tools for the wind tunnel"""

from .grid_viz import GridVisualizer
from .diagnostics import DiagnosticRecorder

__all__ = [
    'GridVisualizer',
    'DiagnosticRecorder'
]
