"""
layout_session.py - Editable habitat layout

Owns the mutable placement list for one design session. Every read used
for validation or metrics is taken from a deep-copied snapshot so core
computations never observe a list that is being edited.
"""

from __future__ import annotations
from typing import Dict, List, Optional
import copy
import logging

from habitat.catalog.library import FUNCTIONAL_AREA_CATALOG, FunctionalAreaCatalog
from habitat.compliance.assessment import LayoutAssessment, assess_layout
from habitat.compliance.engine import (
    ComplianceEngine,
    ComplianceMetrics,
    RecommendationThresholds,
)
from habitat.core.constants import DEFAULT_DECK_HEIGHT_M
from habitat.core.input_checks import check_crew_size, check_positive, raise_if_any
from habitat.geometry.habitat import HabitatGeometry
from habitat.layout.constraints import LayoutConstraint
from habitat.layout.placement import AreaPlacement
from habitat.layout.validator import LayoutValidator

__all__ = [
    'LayoutSession',
]

logger = logging.getLogger(__name__)


class LayoutSession:
    """
    Editable layout for a habitat and crew.

    Example:
        session = LayoutSession(crew_size=4, geometry=HabitatGeometry("cylinder"))
        galley = session.add_area("galley", width_m=4.0, length_m=3.0)
        session.resize_area(galley.placement_id, 5.0, 4.0)
        constraints = session.validate()
    """

    def __init__(
        self,
        crew_size: int,
        geometry: HabitatGeometry,
        catalog: Optional[FunctionalAreaCatalog] = None,
        deck_height_m: float = DEFAULT_DECK_HEIGHT_M,
        validator: Optional[LayoutValidator] = None,
        thresholds: Optional[RecommendationThresholds] = None,
    ):
        raise_if_any([
            check_crew_size(crew_size, source="session"),
            check_positive(deck_height_m, "deck_height_m", "session"),
        ])
        self.crew_size = crew_size
        self.geometry = geometry
        self.catalog = catalog if catalog is not None else FUNCTIONAL_AREA_CATALOG
        self.deck_height_m = deck_height_m
        self.validator = validator or LayoutValidator(self.catalog)
        self.thresholds = thresholds
        self._placements: Dict[str, AreaPlacement] = {}

    def __len__(self) -> int:
        return len(self._placements)

    def __contains__(self, placement_id: object) -> bool:
        return placement_id in self._placements

    # =========================================================================
    # EDITING
    # =========================================================================

    def add_area(
        self,
        area_type_id: str,
        width_m: float,
        length_m: float,
        x_m: float = 0.0,
        y_m: float = 0.0,
        placement_id: Optional[str] = None,
    ) -> AreaPlacement:
        """
        Place a new functional area.

        Raises:
            KeyError: if area_type_id is not in the catalog, or
                placement_id is already in use
            HabitatInputError: on invalid footprint values
        """
        area_type = self.catalog.get(area_type_id)
        if placement_id is not None and placement_id in self._placements:
            raise KeyError(f"Placement '{placement_id}' already exists")

        placement = AreaPlacement.create(
            area_type_id=area_type.id,
            width_m=width_m,
            length_m=length_m,
            x_m=x_m,
            y_m=y_m,
            deck_height_m=self.deck_height_m,
            placement_id=placement_id,
        )
        # Millisecond ids can collide when areas are added in a tight loop
        base_id = placement.placement_id
        suffix = 1
        while placement.placement_id in self._placements:
            placement.placement_id = f"{base_id}-{suffix}"
            suffix += 1

        self._placements[placement.placement_id] = placement
        logger.debug(f"Added {area_type.name} as {placement.placement_id} ({placement.area_m2:.1f}m²)")
        return copy.deepcopy(placement)

    def remove_area(self, placement_id: str) -> AreaPlacement:
        """Remove a placement; KeyError if absent."""
        placement = self._placements.pop(placement_id)
        logger.debug(f"Removed {placement_id}")
        return placement

    def resize_area(self, placement_id: str, width_m: float, length_m: float) -> AreaPlacement:
        """Resize a placement's footprint; area and volume follow."""
        placement = self._placements[placement_id]
        placement.resize(width_m, length_m, self.deck_height_m)
        return copy.deepcopy(placement)

    def move_area(self, placement_id: str, x_m: float, y_m: float) -> AreaPlacement:
        """Move a placement's footprint origin."""
        placement = self._placements[placement_id]
        placement.move_to(x_m, y_m)
        return copy.deepcopy(placement)

    def clear(self) -> None:
        self._placements.clear()

    # =========================================================================
    # READS
    # =========================================================================

    def snapshot(self) -> List[AreaPlacement]:
        """Deep copies of the placements in insertion order."""
        return copy.deepcopy(list(self._placements.values()))

    def validate(self) -> List[LayoutConstraint]:
        return self.validator.validate(self.snapshot(), self.crew_size)

    def metrics(self) -> ComplianceMetrics:
        engine = ComplianceEngine(catalog=self.catalog, thresholds=self.thresholds)
        return engine.compute(
            self.snapshot(),
            self.crew_size,
            self.geometry.volume(),
            self.geometry.surface_area(),
        )

    def assess(self) -> LayoutAssessment:
        return assess_layout(
            self.snapshot(),
            self.crew_size,
            geometry=self.geometry,
            catalog=self.catalog,
            thresholds=self.thresholds,
            validator=self.validator,
        )
