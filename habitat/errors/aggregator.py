"""
errors/aggregator.py - Collect input problems found while assessing a layout

The assessment entry point never raises on bad input; it gathers the
HabitatError records here and reports how many block the assessment and
how many placements were skipped for an unknown area type.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, List

from .taxonomy import HabitatError, ErrorCode, ErrorSeverity


BLOCKING_SEVERITIES = (ErrorSeverity.ERROR, ErrorSeverity.CRITICAL)


@dataclass
class ErrorReport:
    """Input problems of one layout assessment."""

    total: int = 0
    blocking: int = 0
    warnings: int = 0
    unknown_area_types: int = 0
    by_code: Dict[str, int] = field(default_factory=dict)
    summary: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {
            "total": self.total,
            "blocking": self.blocking,
            "warnings": self.warnings,
            "unknown_area_types": self.unknown_area_types,
            "by_code": dict(self.by_code),
            "summary": self.summary,
        }


class ErrorAggregator:
    """Ordered collection of the input problems of one assessment."""

    def __init__(self):
        self._errors: List[HabitatError] = []

    def add(self, error: HabitatError) -> None:
        self._errors.append(error)

    def add_all(self, errors: List[HabitatError]) -> None:
        self._errors.extend(errors)

    @property
    def errors(self) -> List[HabitatError]:
        return list(self._errors)

    def has_errors(self) -> bool:
        """True when any problem is blocking (warnings alone are not)."""
        return any(e.severity in BLOCKING_SEVERITIES for e in self._errors)

    def generate_report(self) -> ErrorReport:
        report = ErrorReport(total=len(self._errors))

        for error in self._errors:
            if error.severity in BLOCKING_SEVERITIES:
                report.blocking += 1
            elif error.severity == ErrorSeverity.WARNING:
                report.warnings += 1
            if error.code == ErrorCode.CAT_UNKNOWN_AREA_TYPE:
                report.unknown_area_types += 1
            report.by_code[error.code.name] = report.by_code.get(error.code.name, 0) + 1

        parts = []
        if report.blocking:
            parts.append(f"{report.blocking} blocking input error(s)")
        if report.unknown_area_types:
            parts.append(f"{report.unknown_area_types} unknown area type(s) ignored")
        other_warnings = report.warnings - report.unknown_area_types
        if other_warnings > 0:
            parts.append(f"{other_warnings} warning(s)")
        report.summary = ", ".join(parts) if parts else "No input problems"

        return report
