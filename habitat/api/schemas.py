"""
schemas.py - Request/response models for the layout API

Request bodies are validated by pydantic before they reach the core; the
core's own precondition checks still run and surface as 422 responses.
"""

from typing import Any, Dict, List, Optional, Tuple

from pydantic import BaseModel, Field, model_validator

from habitat.core.constants import DEFAULT_DECK_HEIGHT_M
from habitat.geometry.habitat import HabitatGeometry
from habitat.layout.placement import AreaPlacement

__all__ = [
    'PlacementModel',
    'HabitatModel',
    'ValidateRequest',
    'MetricsRequest',
    'AssessRequest',
    'ValidateResponse',
    'CatalogResponse',
]


# =============================================================================
# REQUEST MODELS
# =============================================================================

class PlacementModel(BaseModel):
    """
    One placed area.

    Either area_m2 and volume_m3, or a footprint (width_m, length_m) from
    which they are derived with the deck height.
    """
    placement_id: Optional[str] = None
    area_type_id: str = Field(..., min_length=1)
    area_m2: Optional[float] = Field(default=None, ge=0)
    volume_m3: Optional[float] = Field(default=None, ge=0)
    x_m: float = 0.0
    y_m: float = 0.0
    width_m: Optional[float] = Field(default=None, gt=0)
    length_m: Optional[float] = Field(default=None, gt=0)

    @model_validator(mode="after")
    def _check_size(self) -> "PlacementModel":
        has_totals = self.area_m2 is not None and self.volume_m3 is not None
        has_footprint = self.width_m is not None and self.length_m is not None
        if not has_totals and not has_footprint:
            raise ValueError("placement needs area_m2 and volume_m3, or width_m and length_m")
        return self

    def to_placement(self, deck_height_m: float = DEFAULT_DECK_HEIGHT_M) -> AreaPlacement:
        return AreaPlacement.from_dict(self.model_dump(exclude_none=True), deck_height_m=deck_height_m)


class HabitatModel(BaseModel):
    """Habitat as shape + dimensions, or as explicit totals."""
    shape: Optional[str] = None
    dimensions: Dict[str, float] = Field(default_factory=dict)
    volume: Optional[float] = Field(default=None, ge=0)
    surface_area: Optional[float] = Field(default=None, ge=0)

    @model_validator(mode="after")
    def _check_source(self) -> "HabitatModel":
        if self.shape is None and (self.volume is None or self.surface_area is None):
            raise ValueError("habitat needs a shape, or both volume and surface_area")
        return self

    def to_geometry(self) -> Optional[HabitatGeometry]:
        if self.shape is None:
            return None
        return HabitatGeometry(shape=self.shape, dimensions=dict(self.dimensions))

    def totals(self) -> Tuple[float, float]:
        """(volume, surface_area); geometry takes precedence."""
        geometry = self.to_geometry()
        if geometry is not None:
            return geometry.volume(), geometry.surface_area()
        return self.volume, self.surface_area


class ValidateRequest(BaseModel):
    """Request to validate placements for a crew."""
    crew_size: int = Field(..., ge=1)
    placements: List[PlacementModel] = Field(default_factory=list)
    enforce_adjacency_rules: Optional[bool] = None


class MetricsRequest(BaseModel):
    """Request to compute compliance metrics."""
    crew_size: int = Field(..., ge=1)
    habitat: HabitatModel
    placements: List[PlacementModel] = Field(default_factory=list)


class AssessRequest(BaseModel):
    """
    Request for a combined assessment.

    Deliberately loose: malformed placements are reported in the response
    body instead of rejected by the schema.
    """
    crew_size: Any = None
    habitat: Dict[str, Any] = Field(default_factory=dict)
    placements: List[Dict[str, Any]] = Field(default_factory=list)
    enforce_adjacency_rules: Optional[bool] = None


# =============================================================================
# RESPONSE MODELS
# =============================================================================

class ValidateResponse(BaseModel):
    """Response from validation."""
    is_valid: bool
    errors_count: int
    warnings_count: int
    constraints: List[Dict[str, Any]]


class CatalogResponse(BaseModel):
    """Catalog listing."""
    count: int
    areas: List[Dict[str, Any]]
