"""
errors/ - Error Taxonomy

Structured error classification for layout inputs, habitat geometry
and catalog data, plus aggregation for reporting.
"""

from .taxonomy import (
    ErrorSeverity,
    ErrorCategory,
    ErrorCode,
    HabitatError,
    HabitatInputError,
    CatalogError,
    create_validation_error,
    create_bounds_error,
    create_geometry_error,
    create_catalog_error,
)

from .aggregator import (
    ErrorReport,
    ErrorAggregator,
)

__all__ = [
    # Taxonomy
    "ErrorSeverity",
    "ErrorCategory",
    "ErrorCode",
    "HabitatError",
    "HabitatInputError",
    "CatalogError",
    "create_validation_error",
    "create_bounds_error",
    "create_geometry_error",
    "create_catalog_error",
    # Aggregator
    "ErrorReport",
    "ErrorAggregator",
]
