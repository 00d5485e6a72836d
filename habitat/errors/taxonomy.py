"""
errors/taxonomy.py - Error classification system

Structured errors for layout inputs, habitat geometry and catalog data.
Core functions raise HabitatInputError / CatalogError; callers that must
not abort (the assessment entry point, the API) unpack the HabitatError
records they carry.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence
from datetime import datetime, timezone
from enum import Enum
import math
import uuid


class ErrorSeverity(Enum):
    """Error severity levels."""
    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(Enum):
    """Error categories."""
    # Validation errors (1xxx)
    VALIDATION = "validation"

    # Bounds errors (3xxx)
    BOUNDS = "bounds"

    # Geometry errors (4xxx)
    GEOMETRY = "geometry"

    # Catalog errors (6xxx)
    CATALOG = "catalog"

    # Configuration errors (6xxx)
    CONFIGURATION = "configuration"


class ErrorCode(Enum):
    """Specific error codes."""

    # Validation (1xxx)
    VAL_FAILED = 1001
    VAL_SCHEMA = 1002
    VAL_MISSING_FIELD = 1003
    VAL_TYPE_MISMATCH = 1004

    # Bounds (3xxx)
    BND_MINIMUM = 3002
    BND_MAXIMUM = 3003
    BND_NOT_FINITE = 3004

    # Geometry (4xxx)
    GEO_UNKNOWN_SHAPE = 4001
    GEO_DEGENERATE = 4002

    # Catalog / configuration (6xxx)
    CAT_UNKNOWN_AREA_TYPE = 6001
    CAT_DUPLICATE_ID = 6002
    CAT_INVALID_ENTRY = 6003
    SYS_CONFIG = 6101


@dataclass
class HabitatError:
    """Structured error representation."""

    error_id: str = field(default_factory=lambda: uuid.uuid4().hex[:8])

    code: ErrorCode = ErrorCode.VAL_FAILED
    category: ErrorCategory = ErrorCategory.VALIDATION
    severity: ErrorSeverity = ErrorSeverity.ERROR

    message: str = ""

    # Context
    source: str = ""  # Module or rule that raised
    path: Optional[str] = None  # Input field, e.g. "placements[2].width_m"

    # Values
    actual_value: Any = None
    expected_value: Any = None

    recoverable: bool = True

    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "error_id": self.error_id,
            "code": self.code.value,
            "category": self.category.value,
            "severity": self.severity.value,
            "message": self.message,
            "source": self.source,
            "path": self.path,
            "actual_value": _json_safe(self.actual_value),
            "expected_value": _json_safe(self.expected_value),
            "recoverable": self.recoverable,
        }


def _json_safe(value: Any) -> Any:
    if value is None or isinstance(value, (bool, int, str)):
        return value
    if isinstance(value, float):
        # NaN/inf are not valid JSON
        return value if math.isfinite(value) else str(value)
    return str(value)


class HabitatInputError(ValueError):
    """Raised when layout, crew or geometry input violates a precondition."""

    def __init__(self, errors: Sequence[HabitatError]):
        self.errors: List[HabitatError] = list(errors)
        super().__init__("; ".join(e.message for e in self.errors))

    @classmethod
    def single(cls, error: HabitatError) -> "HabitatInputError":
        return cls([error])


class CatalogError(ValueError):
    """Raised when functional area catalog data is malformed."""

    def __init__(self, errors: Sequence[HabitatError]):
        self.errors: List[HabitatError] = list(errors)
        super().__init__("; ".join(e.message for e in self.errors))


def create_validation_error(
    message: str,
    source: str,
    path: str = None,
    actual: Any = None,
    expected: Any = None,
) -> HabitatError:
    """Factory for validation errors."""
    return HabitatError(
        code=ErrorCode.VAL_FAILED,
        category=ErrorCategory.VALIDATION,
        severity=ErrorSeverity.ERROR,
        message=message,
        source=source,
        path=path,
        actual_value=actual,
        expected_value=expected,
    )


def create_bounds_error(
    message: str,
    source: str,
    path: str,
    actual: Any,
    min_val: Any = None,
    max_val: Any = None,
) -> HabitatError:
    """Factory for bounds errors."""
    if isinstance(actual, float) and not math.isfinite(actual):
        code = ErrorCode.BND_NOT_FINITE
    elif min_val is not None and actual <= min_val:
        code = ErrorCode.BND_MINIMUM
    else:
        code = ErrorCode.BND_MAXIMUM

    return HabitatError(
        code=code,
        category=ErrorCategory.BOUNDS,
        severity=ErrorSeverity.ERROR,
        message=message,
        source=source,
        path=path,
        actual_value=actual,
        expected_value=f"[{min_val}, {max_val}]",
    )


def create_geometry_error(
    message: str,
    source: str,
    path: str = None,
    actual: Any = None,
    code: ErrorCode = ErrorCode.GEO_DEGENERATE,
) -> HabitatError:
    """Factory for habitat geometry errors."""
    return HabitatError(
        code=code,
        category=ErrorCategory.GEOMETRY,
        severity=ErrorSeverity.ERROR,
        message=message,
        source=source,
        path=path,
        actual_value=actual,
    )


def create_catalog_error(
    message: str,
    source: str,
    path: str = None,
    actual: Any = None,
    code: ErrorCode = ErrorCode.CAT_INVALID_ENTRY,
    severity: ErrorSeverity = ErrorSeverity.ERROR,
) -> HabitatError:
    """Factory for catalog errors (unknown references are warnings)."""
    return HabitatError(
        code=code,
        category=ErrorCategory.CATALOG,
        severity=severity,
        message=message,
        source=source,
        path=path,
        actual_value=actual,
        recoverable=severity != ErrorSeverity.CRITICAL,
    )
