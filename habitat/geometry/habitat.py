"""
habitat.py - Habitat pressure-vessel geometry

Closed-form volume and surface area for the supported hull shapes, and the
floor footprint used to convert percentage placements into metres.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Tuple
import logging
import math

from habitat.core.constants import DEFAULT_HABITAT_DIMENSIONS
from habitat.core.input_checks import check_positive, raise_if_any
from habitat.errors.taxonomy import (
    ErrorCode,
    HabitatInputError,
    create_geometry_error,
)

__all__ = [
    'HabitatShape',
    'HabitatGeometry',
    'SHAPE_DIMENSIONS',
]

logger = logging.getLogger(__name__)


class HabitatShape(Enum):
    """Supported habitat hull shapes."""

    SPHERE = "sphere"
    CYLINDER = "cylinder"  # Vertical axis
    CUBOID = "cuboid"


# Dimensions each shape reads (m)
SHAPE_DIMENSIONS: Dict[HabitatShape, Tuple[str, ...]] = {
    HabitatShape.SPHERE: ("radius",),
    HabitatShape.CYLINDER: ("radius", "height"),
    HabitatShape.CUBOID: ("width", "height", "depth"),
}


@dataclass
class HabitatGeometry:
    """
    Shape and principal dimensions of a habitat.

    Attributes:
        shape: Hull shape
        dimensions: Shape-specific dimensions in metres (radius; radius and
            height; width, height and depth). Missing entries fall back to
            DEFAULT_HABITAT_DIMENSIONS.
    """

    shape: HabitatShape
    dimensions: Dict[str, float] = field(default_factory=dict)

    def __post_init__(self):
        if not isinstance(self.shape, HabitatShape):
            try:
                self.shape = HabitatShape(self.shape)
            except ValueError:
                raise HabitatInputError.single(create_geometry_error(
                    f"Unknown habitat shape '{self.shape}'",
                    source="geometry",
                    path="habitat.shape",
                    actual=self.shape,
                    code=ErrorCode.GEO_UNKNOWN_SHAPE,
                )) from None

        raise_if_any(
            check_positive(value, f"habitat.dimensions.{name}", "geometry")
            for name, value in self.dimensions.items()
            if name in SHAPE_DIMENSIONS[self.shape]
        )

    def dimension(self, name: str) -> float:
        """Get a dimension (m), falling back to the default value."""
        return float(self.dimensions.get(name, DEFAULT_HABITAT_DIMENSIONS[name]))

    def volume(self) -> float:
        """Internal volume (m³)."""
        if self.shape == HabitatShape.SPHERE:
            r = self.dimension("radius")
            return (4.0 / 3.0) * math.pi * r ** 3
        if self.shape == HabitatShape.CYLINDER:
            r = self.dimension("radius")
            return math.pi * r ** 2 * self.dimension("height")
        return self.dimension("width") * self.dimension("height") * self.dimension("depth")

    def surface_area(self) -> float:
        """Surface area (m²)."""
        if self.shape == HabitatShape.SPHERE:
            r = self.dimension("radius")
            return 4.0 * math.pi * r ** 2
        if self.shape == HabitatShape.CYLINDER:
            r = self.dimension("radius")
            h = self.dimension("height")
            return 2.0 * math.pi * r ** 2 + 2.0 * math.pi * r * h
        w = self.dimension("width")
        h = self.dimension("height")
        d = self.dimension("depth")
        return 2.0 * (w * h + w * d + h * d)

    def footprint_dimensions(self) -> Tuple[float, float]:
        """
        Floor plan extent (x, y) in metres.

        Spheres and vertical cylinders use the bounding square of the
        equator / base circle; cuboids use width by depth.
        """
        if self.shape in (HabitatShape.SPHERE, HabitatShape.CYLINDER):
            diameter = 2.0 * self.dimension("radius")
            return (diameter, diameter)
        return (self.dimension("width"), self.dimension("depth"))

    def footprint_area(self) -> float:
        """Floor plan extent area (m²)."""
        x, y = self.footprint_dimensions()
        return x * y

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to dictionary."""
        return {
            "shape": self.shape.value,
            "dimensions": dict(self.dimensions),
            "volume_m3": self.volume(),
            "surface_area_m2": self.surface_area(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "HabitatGeometry":
        """Deserialize from dictionary."""
        return cls(
            shape=data["shape"],
            dimensions=dict(data.get("dimensions", {})),
        )
