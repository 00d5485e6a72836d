"""
Combined Layout Assessment

One call that validates a layout, computes its compliance metrics and runs
mission readiness checks. Input problems are collected into an
ErrorAggregator instead of raised, so callers serving user input (HTTP,
CLI) always get a structured result back.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple, Union
import copy
import logging

from habitat.catalog.library import FUNCTIONAL_AREA_CATALOG, FunctionalAreaCatalog
from habitat.core.constants import DEFAULT_DECK_HEIGHT_M, MIN_VOLUME_PER_CREW_M3
from habitat.core.input_checks import check_crew_size, check_non_negative
from habitat.errors.aggregator import ErrorAggregator
from habitat.errors.taxonomy import (
    ErrorCode,
    ErrorSeverity,
    HabitatError,
    HabitatInputError,
    create_catalog_error,
    create_validation_error,
)
from habitat.geometry.habitat import HabitatGeometry
from habitat.layout.constraints import LayoutConstraint
from habitat.layout.placement import AreaPlacement
from habitat.layout.validator import LayoutValidator

from .engine import ComplianceEngine, ComplianceMetrics, RecommendationThresholds
from .mission import MissionAssessment, assess_mission_readiness

logger = logging.getLogger(__name__)

PlacementInput = Union[AreaPlacement, Mapping[str, Any]]


@dataclass
class LayoutAssessment:
    """
    Everything known about a layout after assessment.

    metrics and mission are None when the inputs they need were invalid;
    the reasons are in errors.
    """

    constraints: List[LayoutConstraint] = field(default_factory=list)
    metrics: Optional[ComplianceMetrics] = None
    mission: Optional[MissionAssessment] = None
    errors: List[HabitatError] = field(default_factory=list)
    unknown_area_types: List[str] = field(default_factory=list)

    @property
    def error_constraints(self) -> List[LayoutConstraint]:
        return [c for c in self.constraints if c.is_error]

    @property
    def ok(self) -> bool:
        """No blocking input errors and no error-severity constraints."""
        blocking = any(
            e.severity in (ErrorSeverity.ERROR, ErrorSeverity.CRITICAL) for e in self.errors
        )
        return not blocking and not self.error_constraints

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to dictionary."""
        return {
            "ok": self.ok,
            "constraints": [c.to_dict() for c in self.constraints],
            "metrics": self.metrics.to_dict() if self.metrics else None,
            "mission": self.mission.to_dict() if self.mission else None,
            "errors": [e.to_dict() for e in self.errors],
            "unknown_area_types": list(self.unknown_area_types),
        }


def _resolve_placements(
    placements: Sequence[PlacementInput],
    aggregator: ErrorAggregator,
    deck_height_m: float = DEFAULT_DECK_HEIGHT_M,
) -> List[AreaPlacement]:
    """Private copies of the placements; malformed records are reported and dropped."""
    resolved: List[AreaPlacement] = []
    for index, item in enumerate(placements):
        if isinstance(item, AreaPlacement):
            resolved.append(copy.deepcopy(item))
            continue
        try:
            resolved.append(AreaPlacement.from_dict(dict(item), deck_height_m=deck_height_m))
        except HabitatInputError as e:
            aggregator.add_all(e.errors)
        except KeyError as e:
            error = create_validation_error(
                f"placements[{index}] is missing field {e.args[0]!r}",
                source="compliance.assessment",
                path=f"placements[{index}].{e.args[0]}",
            )
            error.code = ErrorCode.VAL_MISSING_FIELD
            aggregator.add(error)
        except (TypeError, ValueError) as e:
            aggregator.add(create_validation_error(
                f"placements[{index}] is malformed: {e}",
                source="compliance.assessment",
                path=f"placements[{index}]",
            ))
    return resolved


def _resolve_totals(
    geometry: Optional[Union[HabitatGeometry, Mapping[str, Any]]],
    habitat_volume: Optional[float],
    habitat_surface_area: Optional[float],
    aggregator: ErrorAggregator,
) -> Optional[Tuple[float, float]]:
    """Habitat (volume, surface_area) from geometry or explicit totals."""
    if geometry is not None:
        try:
            if not isinstance(geometry, HabitatGeometry):
                geometry = HabitatGeometry.from_dict(dict(geometry))
            return geometry.volume(), geometry.surface_area()
        except HabitatInputError as e:
            aggregator.add_all(e.errors)
            return None
        except KeyError as e:
            aggregator.add(create_validation_error(
                f"habitat is missing field {e.args[0]!r}",
                source="compliance.assessment",
                path=f"habitat.{e.args[0]}",
            ))
            return None
        except (TypeError, ValueError) as e:
            aggregator.add(create_validation_error(
                f"habitat is malformed: {e}",
                source="compliance.assessment",
                path="habitat",
            ))
            return None

    if habitat_volume is None or habitat_surface_area is None:
        aggregator.add(create_validation_error(
            "Habitat geometry or both habitat_volume and habitat_surface_area are required",
            source="compliance.assessment",
            path="habitat",
        ))
        return None

    errors = [
        check_non_negative(habitat_volume, "habitat_volume", "compliance.assessment"),
        check_non_negative(habitat_surface_area, "habitat_surface_area", "compliance.assessment"),
    ]
    found = [e for e in errors if e is not None]
    if found:
        aggregator.add_all(found)
        return None
    return habitat_volume, habitat_surface_area


def assess_layout(
    placements: Sequence[PlacementInput],
    crew_size: int,
    geometry: Optional[Union[HabitatGeometry, Mapping[str, Any]]] = None,
    habitat_volume: Optional[float] = None,
    habitat_surface_area: Optional[float] = None,
    catalog: Optional[FunctionalAreaCatalog] = None,
    thresholds: Optional[RecommendationThresholds] = None,
    validator: Optional[LayoutValidator] = None,
    min_volume_per_crew_m3: float = MIN_VOLUME_PER_CREW_M3,
    deck_height_m: float = DEFAULT_DECK_HEIGHT_M,
) -> LayoutAssessment:
    """
    Validate, measure and readiness-check a layout in one pass.

    Args:
        placements: AreaPlacement objects or placement dictionaries
        crew_size: Number of crew, >= 1
        geometry: Habitat geometry (object or dictionary); takes precedence
            over explicit totals
        habitat_volume: Explicit habitat volume (m³) when no geometry
        habitat_surface_area: Explicit habitat surface area (m²) when no geometry
        catalog: Catalog to use (defaults to FUNCTIONAL_AREA_CATALOG)
        thresholds: Recommendation thresholds
        validator: Validator to use (defaults to area/volume rules over catalog)
        min_volume_per_crew_m3: Mission readiness volume minimum
        deck_height_m: Deck height for placements given only as a footprint

    Returns:
        LayoutAssessment; never raises on invalid input
    """
    catalog = catalog if catalog is not None else FUNCTIONAL_AREA_CATALOG
    validator = validator or LayoutValidator(catalog)
    aggregator = ErrorAggregator()
    assessment = LayoutAssessment()

    resolved = _resolve_placements(placements, aggregator, deck_height_m)
    totals = _resolve_totals(geometry, habitat_volume, habitat_surface_area, aggregator)

    crew_error = check_crew_size(crew_size, source="compliance.assessment")
    if crew_error is not None:
        aggregator.add(crew_error)

    for placement in resolved:
        type_id = placement.area_type_id
        if type_id not in catalog and type_id not in assessment.unknown_area_types:
            assessment.unknown_area_types.append(type_id)
            aggregator.add(create_catalog_error(
                f"Unknown area type '{type_id}' ignored",
                source="compliance.assessment",
                path=f"placement[{placement.placement_id}].area_type_id",
                actual=type_id,
                code=ErrorCode.CAT_UNKNOWN_AREA_TYPE,
                severity=ErrorSeverity.WARNING,
            ))

    if crew_error is None:
        assessment.constraints = validator.validate(resolved, crew_size)
        assessment.mission = assess_mission_readiness(
            resolved, crew_size, catalog, min_volume_per_crew_m3
        )
        if totals is not None:
            engine = ComplianceEngine(catalog=catalog, thresholds=thresholds)
            assessment.metrics = engine.compute(resolved, crew_size, *totals)

    assessment.errors = aggregator.errors
    if aggregator.has_errors():
        logger.warning(f"Layout assessment input errors: {aggregator.generate_report().summary}")

    logger.info(
        f"Layout assessed: ok={assessment.ok}, "
        f"{len(assessment.constraints)} constraint(s), "
        f"{len(assessment.errors)} input issue(s)"
    )
    return assessment


def assess_layout_data(
    data: Mapping[str, Any],
    catalog: Optional[FunctionalAreaCatalog] = None,
    thresholds: Optional[RecommendationThresholds] = None,
    validator: Optional[LayoutValidator] = None,
    min_volume_per_crew_m3: float = MIN_VOLUME_PER_CREW_M3,
    deck_height_m: float = DEFAULT_DECK_HEIGHT_M,
) -> LayoutAssessment:
    """
    Assess a layout document.

    The document has the form::

        {
            "crew_size": 4,
            "habitat": {"shape": "cylinder", "dimensions": {"radius": 5, "height": 10}},
            "placements": [{"area_type_id": "galley", "area_m2": 12, "volume_m3": 30}]
        }

    where "habitat" may instead give explicit {"volume": ..., "surface_area": ...}.
    """
    habitat = data.get("habitat") or {}
    if not isinstance(habitat, Mapping):
        habitat = {}
    geometry = habitat if "shape" in habitat else None
    return assess_layout(
        data.get("placements") or [],
        data.get("crew_size"),
        geometry=geometry,
        habitat_volume=habitat.get("volume"),
        habitat_surface_area=habitat.get("surface_area"),
        catalog=catalog,
        thresholds=thresholds,
        validator=validator,
        min_volume_per_crew_m3=min_volume_per_crew_m3,
        deck_height_m=deck_height_m,
    )
