"""
constraints.py - Layout constraint schema

Constraint records emitted by the layout validator, and the two rule
interfaces the validator evaluates: per-placement rules and whole-layout
rules.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional, Sequence, TYPE_CHECKING

if TYPE_CHECKING:
    from habitat.catalog.library import FunctionalAreaCatalog
    from habitat.catalog.schema import FunctionalAreaType
    from habitat.layout.placement import AreaPlacement

__all__ = [
    'ConstraintKind',
    'ConstraintSeverity',
    'LayoutConstraint',
    'PlacementRule',
    'LayoutRule',
]


# =============================================================================
# ENUMS
# =============================================================================

class ConstraintKind(Enum):
    """What aspect of the layout a constraint concerns."""

    AREA = "area"
    VOLUME = "volume"
    ADJACENCY = "adjacency"
    NOISE = "noise"
    PRIVACY = "privacy"


class ConstraintSeverity(Enum):
    """Severity levels for constraints."""

    ERROR = "error"       # Requirement not met
    WARNING = "warning"   # Poor arrangement
    INFO = "info"         # Advisory


# =============================================================================
# LAYOUT CONSTRAINT
# =============================================================================

@dataclass(frozen=True)
class LayoutConstraint:
    """
    A single constraint violation found in a layout.

    Attributes:
        kind: Aspect of the layout concerned
        area_placement_id: Placement the constraint is attributed to
        message: Human-readable description
        severity: Severity level
        area_type_id: Catalog id of the placement's area type
        rule_id: Rule that produced the constraint
        required_value: Threshold the placement failed (area/volume rules)
        actual_value: Placement's measured value (area/volume rules)
        related_placement_id: Other placement involved (pairwise rules)
    """

    kind: ConstraintKind
    area_placement_id: str
    message: str
    severity: ConstraintSeverity

    area_type_id: Optional[str] = None
    rule_id: Optional[str] = None
    required_value: Optional[float] = None
    actual_value: Optional[float] = None
    related_placement_id: Optional[str] = None

    @property
    def is_error(self) -> bool:
        return self.severity == ConstraintSeverity.ERROR

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to dictionary."""
        return {
            "kind": self.kind.value,
            "area_placement_id": self.area_placement_id,
            "message": self.message,
            "severity": self.severity.value,
            "area_type_id": self.area_type_id,
            "rule_id": self.rule_id,
            "required_value": self.required_value,
            "actual_value": self.actual_value,
            "related_placement_id": self.related_placement_id,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "LayoutConstraint":
        """Deserialize from dictionary."""
        return cls(
            kind=ConstraintKind(data["kind"]),
            area_placement_id=data["area_placement_id"],
            message=data["message"],
            severity=ConstraintSeverity(data["severity"]),
            area_type_id=data.get("area_type_id"),
            rule_id=data.get("rule_id"),
            required_value=data.get("required_value"),
            actual_value=data.get("actual_value"),
            related_placement_id=data.get("related_placement_id"),
        )


# =============================================================================
# RULE INTERFACES
# =============================================================================

class PlacementRule(ABC):
    """Rule evaluated once per placement whose area type is in the catalog."""

    @property
    @abstractmethod
    def rule_id(self) -> str:
        """Identifier recorded on emitted constraints."""
        pass

    @abstractmethod
    def check(
        self,
        placement: "AreaPlacement",
        area_type: "FunctionalAreaType",
        crew_size: int,
    ) -> List[LayoutConstraint]:
        """
        Evaluate a placement against its catalog entry.

        Args:
            placement: Placement to check
            area_type: Resolved catalog entry
            crew_size: Crew size (>= 1)

        Returns:
            Constraints found, possibly empty
        """
        pass


class LayoutRule(ABC):
    """Rule evaluated once per layout, typically over placement pairs."""

    @property
    @abstractmethod
    def rule_id(self) -> str:
        """Identifier recorded on emitted constraints."""
        pass

    @abstractmethod
    def check(
        self,
        placements: Sequence["AreaPlacement"],
        catalog: "FunctionalAreaCatalog",
        crew_size: int,
    ) -> List[LayoutConstraint]:
        """
        Evaluate the whole layout.

        Placements whose area type is not in the catalog must be skipped.
        """
        pass
