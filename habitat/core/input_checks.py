"""
habitat/core/input_checks.py - Precondition checks for core inputs.

Each check returns None when the value is acceptable, or a HabitatError
describing the violation. Callers collect the results and raise a single
HabitatInputError so every problem is reported at once.
"""

from typing import Any, Iterable, List, Optional
import math
import numbers

from habitat.errors.taxonomy import (
    ErrorCode,
    HabitatError,
    HabitatInputError,
    create_bounds_error,
    create_validation_error,
)


def _is_real(value: Any) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def check_crew_size(crew_size: Any, source: str, path: str = "crew_size") -> Optional[HabitatError]:
    """Crew size must be an integer >= 1."""
    if not isinstance(crew_size, numbers.Integral) or isinstance(crew_size, bool):
        error = create_validation_error(
            f"Crew size must be an integer, got {crew_size!r}",
            source=source,
            path=path,
            actual=crew_size,
            expected="integer >= 1",
        )
        error.code = ErrorCode.VAL_TYPE_MISMATCH
        return error
    if crew_size < 1:
        return create_bounds_error(
            f"Crew size must be at least 1, got {crew_size}",
            source=source,
            path=path,
            actual=crew_size,
            min_val=1,
        )
    return None


def check_positive(value: Any, path: str, source: str) -> Optional[HabitatError]:
    """Value must be a finite real number > 0."""
    if not _is_real(value):
        return create_validation_error(
            f"{path} must be a number, got {value!r}",
            source=source,
            path=path,
            actual=value,
            expected="finite number > 0",
        )
    if not math.isfinite(value) or value <= 0:
        return create_bounds_error(
            f"{path} must be a finite number greater than 0, got {value}",
            source=source,
            path=path,
            actual=float(value),
            min_val=0,
        )
    return None


def check_non_negative(value: Any, path: str, source: str) -> Optional[HabitatError]:
    """Value must be a finite real number >= 0."""
    if not _is_real(value):
        return create_validation_error(
            f"{path} must be a number, got {value!r}",
            source=source,
            path=path,
            actual=value,
            expected="finite number >= 0",
        )
    if not math.isfinite(value) or value < 0:
        return create_bounds_error(
            f"{path} must be a finite number of at least 0, got {value}",
            source=source,
            path=path,
            actual=float(value),
            min_val=0,
        )
    return None


def check_finite(value: Any, path: str, source: str) -> Optional[HabitatError]:
    """Value must be a finite real number."""
    if not _is_real(value):
        return create_validation_error(
            f"{path} must be a number, got {value!r}",
            source=source,
            path=path,
            actual=value,
            expected="finite number",
        )
    if not math.isfinite(value):
        return create_bounds_error(
            f"{path} must be finite, got {value}",
            source=source,
            path=path,
            actual=float(value),
        )
    return None


def check_percentage(value: Any, path: str, source: str) -> Optional[HabitatError]:
    """Value must be a finite real number within [0, 100]."""
    error = check_finite(value, path, source)
    if error is not None:
        return error
    if value < 0 or value > 100:
        return create_bounds_error(
            f"{path} must be between 0 and 100, got {value}",
            source=source,
            path=path,
            actual=float(value),
            min_val=0,
            max_val=100,
        )
    return None


def raise_if_any(errors: Iterable[Optional[HabitatError]]) -> None:
    """Raise HabitatInputError carrying every non-None error."""
    found: List[HabitatError] = [e for e in errors if e is not None]
    if found:
        raise HabitatInputError(found)
