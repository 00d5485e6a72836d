"""
cli/commands.py - CLI command implementations
"""

from __future__ import annotations
from typing import Any, Dict, List, Optional, Tuple
import argparse
import json
import logging
from pathlib import Path

from habitat.catalog.enums import AreaCategory
from habitat.compliance.assessment import assess_layout_data
from habitat.compliance.engine import ComplianceEngine, ComplianceMetrics
from habitat.core.input_checks import check_crew_size, check_non_negative, raise_if_any
from habitat.errors.taxonomy import (
    ErrorCode,
    HabitatInputError,
    create_validation_error,
)
from habitat.geometry.habitat import HabitatGeometry
from habitat.layout.constraints import LayoutConstraint
from habitat.layout.placement import AreaPlacement
from habitat.layout.rules import build_layout_rules
from habitat.layout.validator import LayoutValidator

from .core import (
    CLICommand,
    CLIContext,
    CommandResult,
    EXIT_CONSTRAINT_ERRORS,
    EXIT_INVALID_INPUT,
)

logger = logging.getLogger(__name__)


# =============================================================================
# LAYOUT FILES
# =============================================================================

def _file_error(message: str, path: str, code: ErrorCode = ErrorCode.VAL_SCHEMA) -> HabitatInputError:
    error = create_validation_error(message, source="cli", path=path)
    error.code = code
    return HabitatInputError.single(error)


def load_layout_file(path: str) -> Dict[str, Any]:
    """
    Read a layout document from a JSON file.

    Raises:
        HabitatInputError: if the file is missing, not JSON, or not an object
    """
    filepath = Path(path)
    if not filepath.exists():
        raise _file_error(f"Layout file not found: {path}", path=str(path))

    try:
        with open(filepath, encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise _file_error(f"Layout file {path} is not valid JSON: {e}", path=str(path)) from e
    except (OSError, UnicodeDecodeError) as e:
        raise _file_error(f"Cannot read layout file {path}: {e}", path=str(path)) from e

    if not isinstance(data, dict):
        raise _file_error(f"Layout file {path} must contain a JSON object", path=str(path))
    return data


def build_placements(data: Dict[str, Any], deck_height_m: float) -> List[AreaPlacement]:
    """Placements from a layout document; raises HabitatInputError on bad records."""
    placements = []
    for index, record in enumerate(data.get("placements") or []):
        if not isinstance(record, dict):
            raise _file_error(f"placements[{index}] must be an object", path=f"placements[{index}]")
        try:
            placements.append(AreaPlacement.from_dict(record, deck_height_m=deck_height_m))
        except KeyError as e:
            raise _file_error(
                f"placements[{index}] is missing field {e.args[0]!r}",
                path=f"placements[{index}].{e.args[0]}",
                code=ErrorCode.VAL_MISSING_FIELD,
            ) from e
    return placements


def habitat_totals(data: Dict[str, Any]) -> Tuple[float, float]:
    """(volume, surface_area) from a layout document's habitat section."""
    habitat = data.get("habitat")
    if not isinstance(habitat, dict):
        raise _file_error("Layout document has no habitat section", path="habitat",
                          code=ErrorCode.VAL_MISSING_FIELD)

    if "shape" in habitat:
        geometry = HabitatGeometry.from_dict(habitat)
        return geometry.volume(), geometry.surface_area()

    volume = habitat.get("volume")
    surface_area = habitat.get("surface_area")
    raise_if_any([
        check_non_negative(volume, "habitat.volume", "cli"),
        check_non_negative(surface_area, "habitat.surface_area", "cli"),
    ])
    return volume, surface_area


def _validator(ctx: CLIContext, enforce: bool) -> LayoutValidator:
    layout_rules = ()
    if enforce or ctx.config.layout.enforce_adjacency_rules:
        layout_rules = build_layout_rules(ctx.config.layout.adjacency_distance_m)
    return LayoutValidator(ctx.catalog, layout_rules=layout_rules)


def _constraint_lines(constraints: List[LayoutConstraint]) -> List[str]:
    return [f"  [{c.severity.value}] {c.message}" for c in constraints]


def _metrics_lines(metrics: ComplianceMetrics) -> List[str]:
    def pct(value: Optional[float]) -> str:
        return "n/a" if value is None else f"{value:.1f}%"

    lines = [
        f"  Total area: {metrics.total_area:.1f}m² ({pct(metrics.area_utilization_pct)} of habitat)",
        f"  Total volume: {metrics.total_volume:.1f}m³ ({pct(metrics.volume_utilization_pct)} of habitat)",
        f"  Per person: {metrics.area_per_person:.1f}m², {metrics.volume_per_person:.1f}m³",
    ]
    for entry in metrics.area_compliance:
        lines.append(
            f"  {entry.name}: area {entry.area_compliance_pct:.0f}%, "
            f"volume {entry.volume_compliance_pct:.0f}% ({entry.level.value})"
        )
    for rec in metrics.recommendations:
        lines.append(f"  * {rec.message}")
    return lines


# =============================================================================
# COMMANDS
# =============================================================================

class CatalogCommand(CLICommand):
    """List functional area types."""

    name = "catalog"
    description = "List functional area types"

    def configure_parser(self, parser: argparse.ArgumentParser) -> None:
        parser.add_argument(
            "--category",
            choices=[c.value for c in AreaCategory],
            default=None,
            help="Only list this category",
        )

    def execute(self, ctx: CLIContext, args: argparse.Namespace) -> CommandResult:
        if args.category:
            entries = ctx.catalog.by_category(AreaCategory(args.category))
        else:
            entries = list(ctx.catalog)

        return CommandResult(
            message=f"{len(entries)} functional area type(s)",
            data=[e.to_dict() for e in entries],
            lines=[
                f"  {e.id:<18} {e.name:<28} {e.min_area_per_person:>5.1f}m²/p "
                f"{e.min_volume_per_person:>5.1f}m³/p  {e.priority.value}"
                for e in entries
            ],
        )


class ValidateCommand(CLICommand):
    """Validate a layout file against catalog minimums."""

    name = "validate"
    description = "Validate placements in a layout file"

    def configure_parser(self, parser: argparse.ArgumentParser) -> None:
        parser.add_argument("file", help="Layout JSON file")
        parser.add_argument(
            "--adjacency",
            action="store_true",
            help="Also check adjacency, noise and privacy rules",
        )

    def execute(self, ctx: CLIContext, args: argparse.Namespace) -> CommandResult:
        data = load_layout_file(args.file)
        raise_if_any([check_crew_size(data.get("crew_size"), source="cli")])
        placements = build_placements(data, ctx.config.layout.deck_height_m)

        constraints = _validator(ctx, args.adjacency).validate(placements, data["crew_size"])
        errors = [c for c in constraints if c.is_error]

        return CommandResult(
            success=not errors,
            message=f"{len(constraints)} constraint(s) found, {len(errors)} error(s)",
            error=f"{len(errors)} constraint error(s)" if errors else None,
            data=[c.to_dict() for c in constraints],
            lines=_constraint_lines(constraints),
            exit_code=EXIT_CONSTRAINT_ERRORS if errors else 0,
        )


class MetricsCommand(CLICommand):
    """Compute compliance metrics for a layout file."""

    name = "metrics"
    description = "Compute utilisation and compliance metrics"

    def configure_parser(self, parser: argparse.ArgumentParser) -> None:
        parser.add_argument("file", help="Layout JSON file")

    def execute(self, ctx: CLIContext, args: argparse.Namespace) -> CommandResult:
        data = load_layout_file(args.file)
        raise_if_any([check_crew_size(data.get("crew_size"), source="cli")])
        placements = build_placements(data, ctx.config.layout.deck_height_m)
        volume, surface_area = habitat_totals(data)

        engine = ComplianceEngine(ctx.catalog, ctx.config.thresholds.to_thresholds())
        metrics = engine.compute(placements, data["crew_size"], volume, surface_area)

        return CommandResult(
            message=f"Compliance metrics for crew of {metrics.crew_size}",
            data=metrics.to_dict(),
            lines=_metrics_lines(metrics),
        )


class AssessCommand(CLICommand):
    """Full assessment of a layout file."""

    name = "assess"
    description = "Validate, compute metrics and run mission readiness checks"

    def configure_parser(self, parser: argparse.ArgumentParser) -> None:
        parser.add_argument("file", help="Layout JSON file")
        parser.add_argument(
            "--adjacency",
            action="store_true",
            help="Also check adjacency, noise and privacy rules",
        )

    def execute(self, ctx: CLIContext, args: argparse.Namespace) -> CommandResult:
        data = load_layout_file(args.file)
        assessment = assess_layout_data(
            data,
            catalog=ctx.catalog,
            thresholds=ctx.config.thresholds.to_thresholds(),
            validator=_validator(ctx, args.adjacency),
            min_volume_per_crew_m3=ctx.config.thresholds.min_volume_per_crew_m3,
            deck_height_m=ctx.config.layout.deck_height_m,
        )

        lines = [f"  ! {e.message}" for e in assessment.errors]
        lines += _constraint_lines(assessment.constraints)
        if assessment.metrics is not None:
            lines += _metrics_lines(assessment.metrics)
        if assessment.mission is not None:
            for check in assessment.mission.checks:
                mark = "PASS" if check.passed else "FAIL"
                lines.append(f"  {mark} {check.name}: {check.message}")

        if assessment.ok:
            exit_code = 0
        elif assessment.error_constraints:
            exit_code = EXIT_CONSTRAINT_ERRORS
        else:
            exit_code = EXIT_INVALID_INPUT

        return CommandResult(
            success=assessment.ok,
            message="Layout OK" if assessment.ok else "Layout has problems",
            error=None if assessment.ok else "Layout has problems",
            data=assessment.to_dict(),
            lines=lines,
            exit_code=exit_code,
        )


ALL_COMMANDS = [
    CatalogCommand(),
    ValidateCommand(),
    MetricsCommand(),
    AssessCommand(),
]
