"""
schema.py - Functional area type schema

Defines the immutable catalog entry describing one kind of habitat space
and its per-person sizing requirements.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, FrozenSet, Iterable

from .enums import AreaCategory, AreaPriority, NoiseLevel, PrivacyLevel

__all__ = [
    'AdjacencyPreferences',
    'FunctionalAreaType',
]


@dataclass(frozen=True)
class AdjacencyPreferences:
    """Catalog ids an area type prefers or avoids as neighbours."""

    preferred: FrozenSet[str] = field(default_factory=frozenset)
    avoided: FrozenSet[str] = field(default_factory=frozenset)

    @classmethod
    def of(cls, preferred: Iterable[str] = (), avoided: Iterable[str] = ()) -> "AdjacencyPreferences":
        return cls(preferred=frozenset(preferred), avoided=frozenset(avoided))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "preferred": sorted(self.preferred),
            "avoided": sorted(self.avoided),
        }


@dataclass(frozen=True)
class FunctionalAreaType:
    """
    Catalog entry for a functional area.

    Attributes:
        id: Unique catalog key
        name: Display name
        category: High-level category
        min_area_per_person: Minimum floor area per crew member (m²)
        min_volume_per_person: Minimum volume per crew member (m³)
        priority: Informational weighting
        noise_level: Acoustic classification
        privacy: Privacy classification
        adjacency: Preferred / avoided neighbour ids
        description: Display text
        icon: Display glyph
    """

    id: str
    name: str
    category: AreaCategory
    min_area_per_person: float
    min_volume_per_person: float
    priority: AreaPriority
    noise_level: NoiseLevel
    privacy: PrivacyLevel
    adjacency: AdjacencyPreferences = field(default_factory=AdjacencyPreferences)
    description: str = ""
    icon: str = ""

    def required_area(self, crew_size: int) -> float:
        """Minimum area (m²) for the given crew."""
        return self.min_area_per_person * crew_size

    def required_volume(self, crew_size: int) -> float:
        """Minimum volume (m³) for the given crew."""
        return self.min_volume_per_person * crew_size

    def prefers(self, other_id: str) -> bool:
        return other_id in self.adjacency.preferred

    def avoids(self, other_id: str) -> bool:
        return other_id in self.adjacency.avoided

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to dictionary."""
        return {
            "id": self.id,
            "name": self.name,
            "category": self.category.value,
            "min_area_per_person": self.min_area_per_person,
            "min_volume_per_person": self.min_volume_per_person,
            "priority": self.priority.value,
            "noise_level": self.noise_level.value,
            "privacy": self.privacy.value,
            "adjacency": self.adjacency.to_dict(),
            "description": self.description,
            "icon": self.icon,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "FunctionalAreaType":
        """Deserialize from dictionary."""
        adjacency = data.get("adjacency", {})
        return cls(
            id=data["id"],
            name=data["name"],
            category=AreaCategory(data["category"]),
            min_area_per_person=float(data["min_area_per_person"]),
            min_volume_per_person=float(data["min_volume_per_person"]),
            priority=AreaPriority(data["priority"]),
            noise_level=NoiseLevel(data["noise_level"]),
            privacy=PrivacyLevel(data["privacy"]),
            adjacency=AdjacencyPreferences.of(
                adjacency.get("preferred", ()),
                adjacency.get("avoided", ()),
            ),
            description=data.get("description", ""),
            icon=data.get("icon", ""),
        )
