"""
Quantitative Compliance Engine

Computes habitat utilisation, per-person allocation and per-area
compliance against catalog minimums, and derives qualitative
recommendations from fixed thresholds.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence, TYPE_CHECKING
import logging

from habitat.catalog.library import FUNCTIONAL_AREA_CATALOG, FunctionalAreaCatalog
from habitat.core.constants import (
    FULL_COMPLIANCE_PCT,
    MIN_COMFORT_AREA_PER_PERSON_M2,
    OVER_DENSITY_PCT,
    UNDER_UTILIZED_PCT,
    UNDERSIZED_THRESHOLD_PCT,
)
from habitat.core.input_checks import check_crew_size, check_non_negative, raise_if_any

from .enums import ComplianceLevel, RecommendationKind, RecommendationSeverity

if TYPE_CHECKING:
    from habitat.layout.placement import AreaPlacement

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RecommendationThresholds:
    """Fixed thresholds for recommendation rules."""

    over_density_pct: float = OVER_DENSITY_PCT
    min_comfort_area_per_person: float = MIN_COMFORT_AREA_PER_PERSON_M2
    undersized_threshold_pct: float = UNDERSIZED_THRESHOLD_PCT
    under_utilized_pct: float = UNDER_UTILIZED_PCT

    def to_dict(self) -> Dict[str, float]:
        return {
            "over_density_pct": self.over_density_pct,
            "min_comfort_area_per_person": self.min_comfort_area_per_person,
            "undersized_threshold_pct": self.undersized_threshold_pct,
            "under_utilized_pct": self.under_utilized_pct,
        }


DEFAULT_THRESHOLDS = RecommendationThresholds()


@dataclass(frozen=True)
class AreaCompliance:
    """Required vs. actual allocation for one placement."""

    placement_id: str
    area_type_id: str
    name: str
    category: str
    priority: str
    actual_area: float
    required_area: float
    actual_volume: float
    required_volume: float
    area_compliance_pct: float
    volume_compliance_pct: float
    level: ComplianceLevel

    def to_dict(self) -> Dict[str, Any]:
        return {
            "placement_id": self.placement_id,
            "area_type_id": self.area_type_id,
            "name": self.name,
            "category": self.category,
            "priority": self.priority,
            "actual_area": self.actual_area,
            "required_area": self.required_area,
            "actual_volume": self.actual_volume,
            "required_volume": self.required_volume,
            "area_compliance_pct": self.area_compliance_pct,
            "volume_compliance_pct": self.volume_compliance_pct,
            "level": self.level.value,
        }


@dataclass(frozen=True)
class Recommendation:
    """Qualitative flag derived from the metrics."""

    kind: RecommendationKind
    severity: RecommendationSeverity
    message: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "kind": self.kind.value,
            "severity": self.severity.value,
            "message": self.message,
        }


@dataclass
class ComplianceMetrics:
    """
    Utilisation and compliance figures for one layout.

    area_utilization_pct / volume_utilization_pct are None when the
    corresponding habitat total is zero (collapsed geometry).
    """

    crew_size: int
    habitat_volume: float
    habitat_surface_area: float

    total_area: float = 0.0
    total_volume: float = 0.0
    area_utilization_pct: Optional[float] = None
    volume_utilization_pct: Optional[float] = None
    area_per_person: float = 0.0
    volume_per_person: float = 0.0

    area_compliance: List[AreaCompliance] = field(default_factory=list)
    recommendations: List[Recommendation] = field(default_factory=list)

    def has_recommendation(self, kind: RecommendationKind) -> bool:
        return any(r.kind == kind for r in self.recommendations)

    def get_undersized(self, threshold_pct: float = UNDERSIZED_THRESHOLD_PCT) -> List[AreaCompliance]:
        """Per-area entries whose area compliance is below threshold."""
        return [a for a in self.area_compliance if a.area_compliance_pct < threshold_pct]

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to dictionary."""
        return {
            "crew_size": self.crew_size,
            "habitat_volume": self.habitat_volume,
            "habitat_surface_area": self.habitat_surface_area,
            "total_area": self.total_area,
            "total_volume": self.total_volume,
            "area_utilization_pct": self.area_utilization_pct,
            "volume_utilization_pct": self.volume_utilization_pct,
            "area_per_person": self.area_per_person,
            "volume_per_person": self.volume_per_person,
            "area_compliance": [a.to_dict() for a in self.area_compliance],
            "recommendations": [r.to_dict() for r in self.recommendations],
        }


class ComplianceEngine:
    """
    Quantitative compliance engine.

    Pure function of its inputs: no state is kept between calls and the
    placements passed in are never modified.
    """

    def __init__(
        self,
        catalog: Optional[FunctionalAreaCatalog] = None,
        thresholds: Optional[RecommendationThresholds] = None,
    ):
        """
        Initialize compliance engine.

        Args:
            catalog: Catalog to resolve area types (defaults to FUNCTIONAL_AREA_CATALOG)
            thresholds: Recommendation thresholds (defaults to DEFAULT_THRESHOLDS)
        """
        self.catalog = catalog if catalog is not None else FUNCTIONAL_AREA_CATALOG
        self.thresholds = thresholds or DEFAULT_THRESHOLDS

    def compute(
        self,
        placements: Sequence["AreaPlacement"],
        crew_size: int,
        habitat_volume: float,
        habitat_surface_area: float,
    ) -> ComplianceMetrics:
        """
        Compute compliance metrics for a layout.

        Args:
            placements: Placements in the layout
            crew_size: Number of crew, >= 1
            habitat_volume: Habitat internal volume (m³), >= 0
            habitat_surface_area: Habitat surface area (m²), >= 0

        Returns:
            ComplianceMetrics

        Raises:
            HabitatInputError: on invalid crew size or non-finite /
                negative habitat totals
        """
        raise_if_any([
            check_crew_size(crew_size, source="compliance.engine"),
            check_non_negative(habitat_volume, "habitat_volume", "compliance.engine"),
            check_non_negative(habitat_surface_area, "habitat_surface_area", "compliance.engine"),
        ])

        metrics = ComplianceMetrics(
            crew_size=crew_size,
            habitat_volume=habitat_volume,
            habitat_surface_area=habitat_surface_area,
        )

        metrics.total_area = sum(p.area_m2 for p in placements)
        metrics.total_volume = sum(p.volume_m3 for p in placements)

        metrics.area_utilization_pct = _percent(metrics.total_area, habitat_surface_area)
        metrics.volume_utilization_pct = _percent(metrics.total_volume, habitat_volume)
        if metrics.area_utilization_pct is None or metrics.volume_utilization_pct is None:
            logger.warning(
                f"Degenerate habitat geometry (volume={habitat_volume}, "
                f"surface_area={habitat_surface_area}); utilization undefined"
            )

        metrics.area_per_person = metrics.total_area / crew_size
        metrics.volume_per_person = metrics.total_volume / crew_size

        for placement in placements:
            entry = self._area_compliance(placement, crew_size)
            if entry is not None:
                metrics.area_compliance.append(entry)

        metrics.recommendations = self.recommend(metrics)

        logger.info(
            f"Compliance computed: {len(placements)} placement(s), "
            f"total_area={metrics.total_area:.1f}m², "
            f"{len(metrics.recommendations)} recommendation(s)"
        )
        return metrics

    def _area_compliance(self, placement: "AreaPlacement", crew_size: int) -> Optional[AreaCompliance]:
        area_type = self.catalog.lookup(placement.area_type_id)
        if area_type is None:
            logger.debug(
                f"No compliance entry for {placement.placement_id}: "
                f"unknown area type '{placement.area_type_id}'"
            )
            return None

        required_area = area_type.required_area(crew_size)
        required_volume = area_type.required_volume(crew_size)
        # Catalog minimums are positive and crew_size >= 1, so never None
        area_pct = _percent(placement.area_m2, required_area)
        volume_pct = _percent(placement.volume_m3, required_volume)

        return AreaCompliance(
            placement_id=placement.placement_id,
            area_type_id=area_type.id,
            name=area_type.name,
            category=area_type.category.value,
            priority=area_type.priority.value,
            actual_area=placement.area_m2,
            required_area=required_area,
            actual_volume=placement.volume_m3,
            required_volume=required_volume,
            area_compliance_pct=area_pct,
            volume_compliance_pct=volume_pct,
            level=self._level(min(area_pct, volume_pct)),
        )

    def _level(self, compliance_pct: float) -> ComplianceLevel:
        if compliance_pct >= FULL_COMPLIANCE_PCT:
            return ComplianceLevel.COMPLIANT
        if compliance_pct >= self.thresholds.undersized_threshold_pct:
            return ComplianceLevel.MARGINAL
        return ComplianceLevel.NON_COMPLIANT

    def recommend(self, metrics: ComplianceMetrics) -> List[Recommendation]:
        """Derive qualitative recommendations from computed metrics."""
        t = self.thresholds
        recommendations: List[Recommendation] = []
        utilization = metrics.area_utilization_pct

        # Inclusive: utilization exactly at the threshold is over-density
        if utilization is not None and utilization >= t.over_density_pct:
            recommendations.append(Recommendation(
                kind=RecommendationKind.OVER_DENSITY,
                severity=RecommendationSeverity.WARNING,
                message="High area utilization - consider expanding habitat or reducing area requirements",
            ))

        if metrics.area_per_person < t.min_comfort_area_per_person:
            recommendations.append(Recommendation(
                kind=RecommendationKind.CREW_COMFORT_RISK,
                severity=RecommendationSeverity.WARNING,
                message="Low area per person - may impact crew comfort and safety",
            ))

        if any(a.area_compliance_pct < t.undersized_threshold_pct for a in metrics.area_compliance):
            recommendations.append(Recommendation(
                kind=RecommendationKind.UNDERSIZED_AREAS,
                severity=RecommendationSeverity.ADVISORY,
                message="Some areas are undersized - review critical systems first",
            ))

        if (
            utilization is not None
            and utilization < t.under_utilized_pct
            and all(a.area_compliance_pct >= FULL_COMPLIANCE_PCT for a in metrics.area_compliance)
        ):
            recommendations.append(Recommendation(
                kind=RecommendationKind.COMFORTABLE_MARGIN,
                severity=RecommendationSeverity.POSITIVE,
                message="Good utilization with adequate area compliance",
            ))

        return recommendations


def _percent(numerator: float, denominator: float) -> Optional[float]:
    if denominator <= 0:
        return None
    return numerator / denominator * 100.0


def compute_metrics(
    placements: Sequence["AreaPlacement"],
    crew_size: int,
    habitat_volume: float,
    habitat_surface_area: float,
    catalog: Optional[FunctionalAreaCatalog] = None,
    thresholds: Optional[RecommendationThresholds] = None,
) -> ComplianceMetrics:
    """
    Compute utilisation and compliance metrics for a layout.

    Args:
        placements: Placements in the layout
        crew_size: Number of crew, >= 1
        habitat_volume: Habitat internal volume (m³)
        habitat_surface_area: Habitat surface area (m²)
        catalog: Catalog to use (defaults to FUNCTIONAL_AREA_CATALOG)
        thresholds: Recommendation thresholds (defaults to DEFAULT_THRESHOLDS)

    Returns:
        ComplianceMetrics
    """
    engine = ComplianceEngine(catalog=catalog, thresholds=thresholds)
    return engine.compute(placements, crew_size, habitat_volume, habitat_surface_area)
