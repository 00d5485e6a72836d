"""
Functional Area Catalog

Static reference table of habitat area types with per-person minimum
area/volume, priority, noise and privacy classification, and neighbour
preferences.
"""

from .enums import (
    AreaCategory,
    AreaPriority,
    NoiseLevel,
    PrivacyLevel,
)

from .schema import (
    AdjacencyPreferences,
    FunctionalAreaType,
)

from .data import FUNCTIONAL_AREAS

from .library import (
    AdjacencyRecord,
    FunctionalAreaRecord,
    FunctionalAreaCatalog,
    FUNCTIONAL_AREA_CATALOG,
    load_catalog,
    lookup,
)

__all__ = [
    # Enums
    "AreaCategory",
    "AreaPriority",
    "NoiseLevel",
    "PrivacyLevel",
    # Schema
    "AdjacencyPreferences",
    "FunctionalAreaType",
    # Data
    "FUNCTIONAL_AREAS",
    # Library
    "AdjacencyRecord",
    "FunctionalAreaRecord",
    "FunctionalAreaCatalog",
    "FUNCTIONAL_AREA_CATALOG",
    "load_catalog",
    "lookup",
]
