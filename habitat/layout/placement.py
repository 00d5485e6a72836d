"""
placement.py - Area placement schema

A placement is one concrete instance of a functional area inside a
habitat layout. All measurements are absolute: metres for footprint
position and size, m² for area, m³ for volume. Percent-of-footprint input
from a drawing surface must go through placement_from_footprint first.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple, TYPE_CHECKING
import logging
import time

from habitat.core.constants import DEFAULT_DECK_HEIGHT_M
from habitat.core.input_checks import (
    check_finite,
    check_non_negative,
    check_percentage,
    check_positive,
    raise_if_any,
)
from habitat.errors.taxonomy import create_validation_error

if TYPE_CHECKING:
    from habitat.geometry.habitat import HabitatGeometry

__all__ = [
    'AreaPlacement',
    'generate_placement_id',
    'placement_from_footprint',
]

logger = logging.getLogger(__name__)


def generate_placement_id(area_type_id: str) -> str:
    """Placement id from type key and creation time (ms); unique enough for a session."""
    return f"{area_type_id}-{int(time.time() * 1000)}"


@dataclass
class AreaPlacement:
    """
    A functional area placed in a habitat layout.

    Attributes:
        placement_id: Unique identifier within the layout
        area_type_id: Catalog id of the functional area type
        area_m2: Floor area (m²)
        volume_m3: Volume (m³)
        x_m: Footprint origin x (m)
        y_m: Footprint origin y (m)
        width_m: Footprint extent along x (m)
        length_m: Footprint extent along y (m)

    Placements supplied by a design manifest may carry only area and
    volume; placements drawn on the floor plan also carry a footprint
    rectangle, which geometric adjacency rules need.
    """

    placement_id: str
    area_type_id: str
    area_m2: float
    volume_m3: float

    # Footprint rectangle
    x_m: float = 0.0
    y_m: float = 0.0
    width_m: Optional[float] = None
    length_m: Optional[float] = None

    def __post_init__(self):
        path = f"placement[{self.placement_id}]"
        errors = [
            check_non_negative(self.area_m2, f"{path}.area_m2", "placement"),
            check_non_negative(self.volume_m3, f"{path}.volume_m3", "placement"),
            check_finite(self.x_m, f"{path}.x_m", "placement"),
            check_finite(self.y_m, f"{path}.y_m", "placement"),
        ]
        if self.width_m is not None:
            errors.append(check_positive(self.width_m, f"{path}.width_m", "placement"))
        if self.length_m is not None:
            errors.append(check_positive(self.length_m, f"{path}.length_m", "placement"))
        if (self.width_m is None) != (self.length_m is None):
            errors.append(create_validation_error(
                f"{path}: width_m and length_m must be given together",
                source="placement",
                path=f"{path}.width_m",
            ))
        if not isinstance(self.area_type_id, str):
            errors.append(create_validation_error(
                f"{path}: area_type_id must be a string",
                source="placement",
                path=f"{path}.area_type_id",
                actual=self.area_type_id,
            ))
        elif not self.area_type_id:
            errors.append(create_validation_error(
                f"{path}: area_type_id is required",
                source="placement",
                path=f"{path}.area_type_id",
            ))
        raise_if_any(errors)

    @classmethod
    def create(
        cls,
        area_type_id: str,
        width_m: float,
        length_m: float,
        x_m: float = 0.0,
        y_m: float = 0.0,
        deck_height_m: float = DEFAULT_DECK_HEIGHT_M,
        placement_id: Optional[str] = None,
    ) -> "AreaPlacement":
        """
        Create a placement from its footprint rectangle.

        Area is width × length; volume is area × deck height.
        """
        raise_if_any([
            check_positive(width_m, "width_m", "placement"),
            check_positive(length_m, "length_m", "placement"),
            check_positive(deck_height_m, "deck_height_m", "placement"),
        ])
        area = width_m * length_m
        return cls(
            placement_id=placement_id or generate_placement_id(area_type_id),
            area_type_id=area_type_id,
            area_m2=area,
            volume_m3=area * deck_height_m,
            x_m=x_m,
            y_m=y_m,
            width_m=width_m,
            length_m=length_m,
        )

    @property
    def has_footprint(self) -> bool:
        return self.width_m is not None and self.length_m is not None

    @property
    def bounds(self) -> Optional[Tuple[float, float, float, float]]:
        """Footprint as (x_min, y_min, x_max, y_max), or None."""
        if not self.has_footprint:
            return None
        return (self.x_m, self.y_m, self.x_m + self.width_m, self.y_m + self.length_m)

    def resize(
        self,
        width_m: float,
        length_m: float,
        deck_height_m: float = DEFAULT_DECK_HEIGHT_M,
    ) -> None:
        """Resize the footprint in place, recomputing area and volume."""
        raise_if_any([
            check_positive(width_m, "width_m", "placement"),
            check_positive(length_m, "length_m", "placement"),
            check_positive(deck_height_m, "deck_height_m", "placement"),
        ])
        self.width_m = width_m
        self.length_m = length_m
        self.area_m2 = width_m * length_m
        self.volume_m3 = self.area_m2 * deck_height_m

    def move_to(self, x_m: float, y_m: float) -> None:
        """Move the footprint origin in place."""
        raise_if_any([
            check_finite(x_m, "x_m", "placement"),
            check_finite(y_m, "y_m", "placement"),
        ])
        self.x_m = x_m
        self.y_m = y_m

    def distance_to(self, other: "AreaPlacement") -> Optional[float]:
        """
        Edge-to-edge distance (m) between two footprints.

        Touching or overlapping rectangles are 0 apart. None when either
        placement has no footprint.
        """
        a = self.bounds
        b = other.bounds
        if a is None or b is None:
            return None
        dx = max(0.0, b[0] - a[2], a[0] - b[2])
        dy = max(0.0, b[1] - a[3], a[1] - b[3])
        return (dx ** 2 + dy ** 2) ** 0.5

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to dictionary."""
        return {
            "placement_id": self.placement_id,
            "area_type_id": self.area_type_id,
            "area_m2": self.area_m2,
            "volume_m3": self.volume_m3,
            "x_m": self.x_m,
            "y_m": self.y_m,
            "width_m": self.width_m,
            "length_m": self.length_m,
        }

    @classmethod
    def from_dict(
        cls,
        data: Dict[str, Any],
        deck_height_m: float = DEFAULT_DECK_HEIGHT_M,
    ) -> "AreaPlacement":
        """
        Deserialize from dictionary.

        When area_m2 or volume_m3 is absent the footprint (width_m, length_m) and
        deck_height_m (record value, else the argument) are used to derive area and volume.
        """
        footprint = "width_m" in data and "length_m" in data
        if footprint and ("area_m2" not in data or "volume_m3" not in data):
            return cls.create(
                area_type_id=data["area_type_id"],
                width_m=data["width_m"],
                length_m=data["length_m"],
                x_m=data.get("x_m", 0.0),
                y_m=data.get("y_m", 0.0),
                deck_height_m=data.get("deck_height_m", deck_height_m),
                placement_id=data.get("placement_id"),
            )
        return cls(
            placement_id=data.get("placement_id") or generate_placement_id(data["area_type_id"]),
            area_type_id=data["area_type_id"],
            area_m2=data["area_m2"],
            volume_m3=data["volume_m3"],
            x_m=data.get("x_m", 0.0),
            y_m=data.get("y_m", 0.0),
            width_m=data.get("width_m"),
            length_m=data.get("length_m"),
        )


def placement_from_footprint(
    area_type_id: str,
    x_pct: float,
    y_pct: float,
    width_pct: float,
    height_pct: float,
    geometry: "HabitatGeometry",
    deck_height_m: float = DEFAULT_DECK_HEIGHT_M,
    placement_id: Optional[str] = None,
) -> AreaPlacement:
    """
    Convert a percent-of-footprint placement into absolute units.

    Drawing surfaces position areas as percentages of the habitat floor
    plan. This scales them by the habitat's footprint extent so the
    resulting area can be compared against m² minimums.

    Args:
        area_type_id: Catalog id
        x_pct, y_pct: Origin as % of footprint extent (0-100)
        width_pct, height_pct: Size as % of footprint extent (0-100)
        geometry: Habitat geometry providing the footprint extent
        deck_height_m: Deck height for volume derivation
        placement_id: Optional explicit id

    Returns:
        AreaPlacement in metres
    """
    raise_if_any([
        check_percentage(x_pct, "x_pct", "placement"),
        check_percentage(y_pct, "y_pct", "placement"),
        check_percentage(width_pct, "width_pct", "placement")
        or check_positive(width_pct, "width_pct", "placement"),
        check_percentage(height_pct, "height_pct", "placement")
        or check_positive(height_pct, "height_pct", "placement"),
    ])

    extent_x, extent_y = geometry.footprint_dimensions()
    return AreaPlacement.create(
        area_type_id=area_type_id,
        width_m=extent_x * width_pct / 100.0,
        length_m=extent_y * height_pct / 100.0,
        x_m=extent_x * x_pct / 100.0,
        y_m=extent_y * y_pct / 100.0,
        deck_height_m=deck_height_m,
        placement_id=placement_id,
    )
