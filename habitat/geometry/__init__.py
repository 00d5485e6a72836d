"""
habitat/geometry - Habitat shape and derived totals.

Provides:
- Supported hull shapes
- Closed-form volume and surface area
- Floor footprint extent for placement conversion
"""

from habitat.geometry.habitat import (
    HabitatShape,
    HabitatGeometry,
    SHAPE_DIMENSIONS,
)

__all__ = [
    'HabitatShape',
    'HabitatGeometry',
    'SHAPE_DIMENSIONS',
]
