"""
Utility functions for gridcalc.

- frames: pandas DataFrame export of display grids
- visualization: Text-based tree rendering of cell dependencies
"""

from .frames import grid_to_frame
from .visualization import visualize_dependencies

__all__ = [
    'grid_to_frame',
    'visualize_dependencies',
]
