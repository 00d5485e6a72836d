"""
rules.py - Built-in layout validation rules

Sizing rules (evaluated by default):
- MinimumAreaRule: placement area vs. per-person minimum × crew
- MinimumVolumeRule: placement volume vs. per-person minimum × crew

Arrangement rules (opt-in), driven by the catalog's adjacency, noise and
privacy classification. Two placements are adjacent when both have a
footprint and the edge-to-edge distance between them is at most
adjacency_distance_m.
"""

from __future__ import annotations
from typing import Iterator, List, Sequence, Tuple, TYPE_CHECKING
import logging

from habitat.catalog.enums import NoiseLevel, PrivacyLevel
from habitat.core.constants import DEFAULT_ADJACENCY_DISTANCE_M

from .constraints import (
    ConstraintKind,
    ConstraintSeverity,
    LayoutConstraint,
    LayoutRule,
    PlacementRule,
)

if TYPE_CHECKING:
    from habitat.catalog.library import FunctionalAreaCatalog
    from habitat.catalog.schema import FunctionalAreaType
    from habitat.layout.placement import AreaPlacement

__all__ = [
    'MinimumAreaRule',
    'MinimumVolumeRule',
    'AdjacencyRule',
    'NoiseSeparationRule',
    'PrivacyRule',
    'DEFAULT_PLACEMENT_RULES',
    'EXTENDED_LAYOUT_RULES',
    'build_layout_rules',
]

logger = logging.getLogger(__name__)


# =============================================================================
# SIZING RULES
# =============================================================================

class MinimumAreaRule(PlacementRule):
    """Placement area must meet min_area_per_person × crew_size."""

    @property
    def rule_id(self) -> str:
        return "min_area"

    def check(
        self,
        placement: "AreaPlacement",
        area_type: "FunctionalAreaType",
        crew_size: int,
    ) -> List[LayoutConstraint]:
        required = area_type.required_area(crew_size)
        if placement.area_m2 >= required:
            return []
        return [LayoutConstraint(
            kind=ConstraintKind.AREA,
            area_placement_id=placement.placement_id,
            message=(
                f"{area_type.name} is too small. "
                f"Required: {required:.1f}m², Current: {placement.area_m2:.1f}m²"
            ),
            severity=ConstraintSeverity.ERROR,
            area_type_id=area_type.id,
            rule_id=self.rule_id,
            required_value=required,
            actual_value=placement.area_m2,
        )]


class MinimumVolumeRule(PlacementRule):
    """Placement volume must meet min_volume_per_person × crew_size."""

    @property
    def rule_id(self) -> str:
        return "min_volume"

    def check(
        self,
        placement: "AreaPlacement",
        area_type: "FunctionalAreaType",
        crew_size: int,
    ) -> List[LayoutConstraint]:
        required = area_type.required_volume(crew_size)
        if placement.volume_m3 >= required:
            return []
        return [LayoutConstraint(
            kind=ConstraintKind.VOLUME,
            area_placement_id=placement.placement_id,
            message=(
                f"{area_type.name} volume is insufficient. "
                f"Required: {required:.1f}m³, Current: {placement.volume_m3:.1f}m³"
            ),
            severity=ConstraintSeverity.ERROR,
            area_type_id=area_type.id,
            rule_id=self.rule_id,
            required_value=required,
            actual_value=placement.volume_m3,
        )]


# =============================================================================
# ARRANGEMENT RULES
# =============================================================================

ResolvedPair = Tuple["AreaPlacement", "FunctionalAreaType", "AreaPlacement", "FunctionalAreaType"]


class _PairwiseRule(LayoutRule):
    """Shared pair iteration for arrangement rules."""

    def __init__(self, adjacency_distance_m: float = DEFAULT_ADJACENCY_DISTANCE_M):
        self.adjacency_distance_m = adjacency_distance_m

    def _resolved(
        self,
        placements: Sequence["AreaPlacement"],
        catalog: "FunctionalAreaCatalog",
    ) -> List[Tuple["AreaPlacement", "FunctionalAreaType"]]:
        resolved = []
        for placement in placements:
            area_type = catalog.lookup(placement.area_type_id)
            if area_type is not None and placement.has_footprint:
                resolved.append((placement, area_type))
        return resolved

    def is_adjacent(self, a: "AreaPlacement", b: "AreaPlacement") -> bool:
        distance = a.distance_to(b)
        return distance is not None and distance <= self.adjacency_distance_m

    def adjacent_pairs(
        self,
        placements: Sequence["AreaPlacement"],
        catalog: "FunctionalAreaCatalog",
    ) -> Iterator[ResolvedPair]:
        """Yield each adjacent unordered pair once, first-listed placement first."""
        resolved = self._resolved(placements, catalog)
        for i, (a, a_type) in enumerate(resolved):
            for b, b_type in resolved[i + 1:]:
                if self.is_adjacent(a, b):
                    yield a, a_type, b, b_type


class AdjacencyRule(_PairwiseRule):
    """
    Neighbour preference rule.

    - Adjacent pair where either type avoids the other: warning
    - Placement whose preferred neighbour types are present in the layout
      but none of them adjacent: info
    """

    @property
    def rule_id(self) -> str:
        return "adjacency"

    def check(
        self,
        placements: Sequence["AreaPlacement"],
        catalog: "FunctionalAreaCatalog",
        crew_size: int,
    ) -> List[LayoutConstraint]:
        constraints: List[LayoutConstraint] = []

        for a, a_type, b, b_type in self.adjacent_pairs(placements, catalog):
            if a_type.avoids(b_type.id) or b_type.avoids(a_type.id):
                constraints.append(LayoutConstraint(
                    kind=ConstraintKind.ADJACENCY,
                    area_placement_id=a.placement_id,
                    message=f"{a_type.name} should not be adjacent to {b_type.name}",
                    severity=ConstraintSeverity.WARNING,
                    area_type_id=a_type.id,
                    rule_id=self.rule_id,
                    related_placement_id=b.placement_id,
                ))

        resolved = self._resolved(placements, catalog)
        for placement, area_type in resolved:
            if not area_type.adjacency.preferred:
                continue
            candidates = [
                other for other, other_type in resolved
                if other is not placement and area_type.prefers(other_type.id)
            ]
            if candidates and not any(self.is_adjacent(placement, c) for c in candidates):
                names = ", ".join(sorted({
                    catalog.get(c.area_type_id).name for c in candidates
                }))
                constraints.append(LayoutConstraint(
                    kind=ConstraintKind.ADJACENCY,
                    area_placement_id=placement.placement_id,
                    message=f"{area_type.name} would be better placed next to {names}",
                    severity=ConstraintSeverity.INFO,
                    area_type_id=area_type.id,
                    rule_id=self.rule_id,
                ))

        return constraints


class NoiseSeparationRule(_PairwiseRule):
    """Loud areas must not be adjacent to quiet areas."""

    @property
    def rule_id(self) -> str:
        return "noise_separation"

    def check(
        self,
        placements: Sequence["AreaPlacement"],
        catalog: "FunctionalAreaCatalog",
        crew_size: int,
    ) -> List[LayoutConstraint]:
        constraints: List[LayoutConstraint] = []
        for a, a_type, b, b_type in self.adjacent_pairs(placements, catalog):
            levels = {a_type.noise_level, b_type.noise_level}
            if levels == {NoiseLevel.LOUD, NoiseLevel.QUIET}:
                loud, quiet = (a_type, b_type) if a_type.noise_level == NoiseLevel.LOUD else (b_type, a_type)
                constraints.append(LayoutConstraint(
                    kind=ConstraintKind.NOISE,
                    area_placement_id=a.placement_id,
                    message=f"Loud area {loud.name} is adjacent to quiet area {quiet.name}",
                    severity=ConstraintSeverity.WARNING,
                    area_type_id=a_type.id,
                    rule_id=self.rule_id,
                    related_placement_id=b.placement_id,
                ))
        return constraints


class PrivacyRule(_PairwiseRule):
    """Private areas should not open directly onto public areas."""

    @property
    def rule_id(self) -> str:
        return "privacy"

    def check(
        self,
        placements: Sequence["AreaPlacement"],
        catalog: "FunctionalAreaCatalog",
        crew_size: int,
    ) -> List[LayoutConstraint]:
        constraints: List[LayoutConstraint] = []
        for a, a_type, b, b_type in self.adjacent_pairs(placements, catalog):
            levels = {a_type.privacy, b_type.privacy}
            if levels == {PrivacyLevel.PRIVATE, PrivacyLevel.PUBLIC}:
                private, public = (a_type, b_type) if a_type.privacy == PrivacyLevel.PRIVATE else (b_type, a_type)
                constraints.append(LayoutConstraint(
                    kind=ConstraintKind.PRIVACY,
                    area_placement_id=a.placement_id,
                    message=f"Private area {private.name} is adjacent to public area {public.name}",
                    severity=ConstraintSeverity.INFO,
                    area_type_id=a_type.id,
                    rule_id=self.rule_id,
                    related_placement_id=b.placement_id,
                ))
        return constraints


# =============================================================================
# RULE SETS
# =============================================================================

DEFAULT_PLACEMENT_RULES: Tuple[PlacementRule, ...] = (
    MinimumAreaRule(),
    MinimumVolumeRule(),
)


def build_layout_rules(
    adjacency_distance_m: float = DEFAULT_ADJACENCY_DISTANCE_M,
) -> Tuple[LayoutRule, ...]:
    """Arrangement rules sharing one adjacency distance."""
    return (
        AdjacencyRule(adjacency_distance_m),
        NoiseSeparationRule(adjacency_distance_m),
        PrivacyRule(adjacency_distance_m),
    )


EXTENDED_LAYOUT_RULES: Tuple[LayoutRule, ...] = build_layout_rules()
