"""
Mission Readiness Checks

Heuristic pass/fail checks run over a finished layout: habitable volume
per crew member and presence of the systems a crewed habitat cannot
operate without.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence, TYPE_CHECKING
import logging

from habitat.catalog.enums import AreaCategory
from habitat.catalog.library import FUNCTIONAL_AREA_CATALOG, FunctionalAreaCatalog
from habitat.core.constants import MIN_VOLUME_PER_CREW_M3
from habitat.core.input_checks import check_crew_size, raise_if_any

if TYPE_CHECKING:
    from habitat.layout.placement import AreaPlacement

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MissionCheck:
    """Outcome of one readiness check."""

    name: str
    passed: bool
    message: str

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "passed": self.passed, "message": self.message}


@dataclass
class MissionAssessment:
    """Readiness checks for a layout."""

    checks: List[MissionCheck] = field(default_factory=list)
    volume_per_crew: float = 0.0

    @property
    def passed(self) -> bool:
        return all(c.passed for c in self.checks)

    @property
    def safety_score(self) -> float:
        """Fraction of checks passed (0.0 - 1.0)."""
        if not self.checks:
            return 0.0
        return sum(1 for c in self.checks if c.passed) / len(self.checks)

    @property
    def failed_checks(self) -> List[MissionCheck]:
        return [c for c in self.checks if not c.passed]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "passed": self.passed,
            "safety_score": self.safety_score,
            "volume_per_crew": self.volume_per_crew,
            "checks": [c.to_dict() for c in self.checks],
        }


def assess_mission_readiness(
    placements: Sequence["AreaPlacement"],
    crew_size: int,
    catalog: Optional[FunctionalAreaCatalog] = None,
    min_volume_per_crew_m3: float = MIN_VOLUME_PER_CREW_M3,
) -> MissionAssessment:
    """
    Run mission readiness checks over a layout.

    Args:
        placements: Placements in the layout
        crew_size: Number of crew, >= 1
        catalog: Catalog to resolve area types (defaults to FUNCTIONAL_AREA_CATALOG)
        min_volume_per_crew_m3: Minimum total volume per crew member

    Returns:
        MissionAssessment

    Raises:
        HabitatInputError: if crew_size is not an integer >= 1
    """
    raise_if_any([check_crew_size(crew_size, source="compliance.mission")])
    catalog = catalog if catalog is not None else FUNCTIONAL_AREA_CATALOG

    present_ids = {p.area_type_id for p in placements}
    present_categories = {
        area_type.category
        for area_type in (catalog.lookup(type_id) for type_id in present_ids)
        if area_type is not None
    }

    volume_per_crew = sum(p.volume_m3 for p in placements) / crew_size
    assessment = MissionAssessment(volume_per_crew=volume_per_crew)

    if volume_per_crew >= min_volume_per_crew_m3:
        message = f"{volume_per_crew:.1f}m³ per crew member (adequate)"
    else:
        message = (
            f"{volume_per_crew:.1f}m³ per crew member "
            f"(insufficient, min {min_volume_per_crew_m3:.0f}m³)"
        )
    assessment.checks.append(MissionCheck(
        name="Minimum Volume per Crew",
        passed=volume_per_crew >= min_volume_per_crew_m3,
        message=message,
    ))

    has_life_support = AreaCategory.LIFE_SUPPORT in present_categories
    assessment.checks.append(MissionCheck(
        name="Life Support Systems",
        passed=has_life_support,
        message="ECLSS present" if has_life_support else "Missing life support system",
    ))

    has_medical = "medical" in present_ids
    assessment.checks.append(MissionCheck(
        name="Medical Facilities",
        passed=has_medical,
        message="Medical facilities present" if has_medical else "Missing medical facilities",
    ))

    has_comms = "communication" in present_ids
    assessment.checks.append(MissionCheck(
        name="Communication Systems",
        passed=has_comms,
        message="Communication systems present" if has_comms else "Missing communication systems",
    ))

    logger.info(
        f"Mission readiness: {len(assessment.checks) - len(assessment.failed_checks)}"
        f"/{len(assessment.checks)} checks passed"
    )
    return assessment
