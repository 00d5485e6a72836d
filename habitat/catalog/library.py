"""
Functional Area Catalog Library

Read-only keyed repository of functional area types. Built once from the
built-in definitions at import; alternative catalogs can be loaded from
JSON files whose records are validated with pydantic.
"""

from __future__ import annotations
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Iterable, Iterator, List, Mapping, Optional, Union
import json
import logging

from pydantic import BaseModel, Field, ValidationError

from habitat.errors.taxonomy import (
    CatalogError,
    ErrorCode,
    HabitatError,
    create_catalog_error,
)

from .data import FUNCTIONAL_AREAS
from .enums import AreaCategory, AreaPriority, NoiseLevel, PrivacyLevel
from .schema import AdjacencyPreferences, FunctionalAreaType

logger = logging.getLogger(__name__)


# =============================================================================
# FILE RECORD SCHEMA
# =============================================================================

class AdjacencyRecord(BaseModel):
    """Neighbour preferences as stored in a catalog file."""

    preferred: List[str] = Field(default_factory=list)
    avoided: List[str] = Field(default_factory=list)


class FunctionalAreaRecord(BaseModel):
    """One functional area type as stored in a catalog file."""

    id: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    category: AreaCategory
    min_area_per_person: float = Field(..., gt=0, description="m² per person")
    min_volume_per_person: float = Field(..., gt=0, description="m³ per person")
    priority: AreaPriority
    noise_level: NoiseLevel
    privacy: PrivacyLevel
    adjacency: AdjacencyRecord = Field(default_factory=AdjacencyRecord)
    description: str = ""
    icon: str = ""

    def to_area_type(self) -> FunctionalAreaType:
        return FunctionalAreaType(
            id=self.id,
            name=self.name,
            category=self.category,
            min_area_per_person=self.min_area_per_person,
            min_volume_per_person=self.min_volume_per_person,
            priority=self.priority,
            noise_level=self.noise_level,
            privacy=self.privacy,
            adjacency=AdjacencyPreferences.of(
                self.adjacency.preferred,
                self.adjacency.avoided,
            ),
            description=self.description,
            icon=self.icon,
        )


# =============================================================================
# CATALOG
# =============================================================================

class FunctionalAreaCatalog:
    """
    Immutable repository of functional area types.

    Entries are checked on construction: ids must be unique, minimums
    positive, and every adjacency reference must name a catalog entry.
    Lookups of unknown ids return None rather than raising so callers can
    skip placements whose type has drifted out of the catalog.
    """

    def __init__(self, area_types: Iterable[FunctionalAreaType]):
        entries = list(area_types)
        self._check_integrity(entries)

        self._entries: Mapping[str, FunctionalAreaType] = MappingProxyType(
            {entry.id: entry for entry in entries}
        )
        self._order = tuple(entry.id for entry in entries)

    @staticmethod
    def _check_integrity(entries: List[FunctionalAreaType]) -> None:
        errors: List[HabitatError] = []
        seen = set()

        for index, entry in enumerate(entries):
            path = f"catalog[{index}]"
            if entry.id in seen:
                errors.append(create_catalog_error(
                    f"Duplicate functional area id '{entry.id}'",
                    source="catalog",
                    path=f"{path}.id",
                    actual=entry.id,
                    code=ErrorCode.CAT_DUPLICATE_ID,
                ))
            seen.add(entry.id)

            if not entry.min_area_per_person > 0:
                errors.append(create_catalog_error(
                    f"{entry.id}: min_area_per_person must be positive",
                    source="catalog",
                    path=f"{path}.min_area_per_person",
                    actual=entry.min_area_per_person,
                ))
            if not entry.min_volume_per_person > 0:
                errors.append(create_catalog_error(
                    f"{entry.id}: min_volume_per_person must be positive",
                    source="catalog",
                    path=f"{path}.min_volume_per_person",
                    actual=entry.min_volume_per_person,
                ))

        for index, entry in enumerate(entries):
            dangling = (entry.adjacency.preferred | entry.adjacency.avoided) - seen
            for ref in sorted(dangling):
                errors.append(create_catalog_error(
                    f"{entry.id}: adjacency references unknown area type '{ref}'",
                    source="catalog",
                    path=f"catalog[{index}].adjacency",
                    actual=ref,
                    code=ErrorCode.CAT_UNKNOWN_AREA_TYPE,
                ))

        if errors:
            raise CatalogError(errors)

    # -------------------------------------------------------------------------
    # Lookup
    # -------------------------------------------------------------------------

    def lookup(self, area_type_id: str) -> Optional[FunctionalAreaType]:
        """Get area type by id, or None if the catalog has no such entry."""
        return self._entries.get(area_type_id)

    def get(self, area_type_id: str) -> FunctionalAreaType:
        """Get area type by id, raising KeyError if unknown."""
        try:
            return self._entries[area_type_id]
        except KeyError:
            raise KeyError(f"Unknown functional area type: {area_type_id}") from None

    def __contains__(self, area_type_id: object) -> bool:
        return isinstance(area_type_id, str) and area_type_id in self._entries

    def __len__(self) -> int:
        return len(self._order)

    def __iter__(self) -> Iterator[FunctionalAreaType]:
        return (self._entries[aid] for aid in self._order)

    def ids(self) -> List[str]:
        """Area type ids in declaration order."""
        return list(self._order)

    def by_category(self, category: AreaCategory) -> List[FunctionalAreaType]:
        """Get all area types in a category."""
        return [entry for entry in self if entry.category == category]

    def by_priority(self, priority: AreaPriority) -> List[FunctionalAreaType]:
        """Get all area types with a priority."""
        return [entry for entry in self if entry.priority == priority]

    def to_list(self) -> List[Dict[str, Any]]:
        """Serialize all entries in declaration order."""
        return [entry.to_dict() for entry in self]

    # -------------------------------------------------------------------------
    # Construction
    # -------------------------------------------------------------------------

    @classmethod
    def from_records(cls, records: Iterable[Dict[str, Any]]) -> "FunctionalAreaCatalog":
        """
        Build a catalog from raw records (e.g. parsed JSON).

        Raises:
            CatalogError: if any record fails schema validation or the
                resulting set fails the integrity checks
        """
        area_types: List[FunctionalAreaType] = []
        errors: List[HabitatError] = []

        for index, record in enumerate(records):
            try:
                area_types.append(FunctionalAreaRecord.model_validate(record).to_area_type())
            except ValidationError as e:
                for detail in e.errors():
                    location = ".".join(str(part) for part in detail["loc"])
                    error = create_catalog_error(
                        f"catalog[{index}].{location}: {detail['msg']}",
                        source="catalog.loader",
                        path=f"catalog[{index}].{location}",
                        actual=detail.get("input"),
                    )
                    error.code = ErrorCode.VAL_SCHEMA
                    errors.append(error)

        if errors:
            raise CatalogError(errors)

        return cls(area_types)


def load_catalog(filepath: Union[str, Path]) -> FunctionalAreaCatalog:
    """
    Load a functional area catalog from a JSON file.

    The file holds either an array of area type records or an object with
    an "areas" array.

    Args:
        filepath: Path to the JSON file

    Returns:
        FunctionalAreaCatalog built from the file
    """
    path = Path(filepath)
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        raise CatalogError([create_catalog_error(
            f"Cannot read catalog file {path}: {e}",
            source="catalog.library",
            path=str(path),
        )]) from e

    records = data.get("areas", []) if isinstance(data, dict) else data
    if not isinstance(records, list):
        raise CatalogError([create_catalog_error(
            f"Catalog file {path} must hold an array of area types or an object with an \"areas\" array",
            source="catalog.library",
            path=str(path),
            actual=type(records).__name__,
        )])
    catalog = FunctionalAreaCatalog.from_records(records)
    logger.info(f"Loaded {len(catalog)} functional area types from {path}")
    return catalog


# Process-wide catalog of the built-in area types
FUNCTIONAL_AREA_CATALOG = FunctionalAreaCatalog(FUNCTIONAL_AREAS)


def lookup(area_type_id: str) -> Optional[FunctionalAreaType]:
    """Look up an area type in the built-in catalog."""
    return FUNCTIONAL_AREA_CATALOG.lookup(area_type_id)
