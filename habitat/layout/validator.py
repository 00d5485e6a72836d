"""
validator.py - Layout validator

Evaluates area placements against the functional area catalog for a
given crew size and returns the constraint violations found.
"""

from __future__ import annotations
from typing import Iterable, List, Optional, Sequence, TYPE_CHECKING
import logging

from habitat.catalog.library import FUNCTIONAL_AREA_CATALOG, FunctionalAreaCatalog
from habitat.core.input_checks import check_crew_size, raise_if_any

from .constraints import LayoutConstraint, LayoutRule, PlacementRule
from .rules import DEFAULT_PLACEMENT_RULES

if TYPE_CHECKING:
    from habitat.layout.placement import AreaPlacement

__all__ = [
    'LayoutValidator',
    'validate_layout',
]

logger = logging.getLogger(__name__)


class LayoutValidator:
    """
    Layout validator with a pluggable rule set.

    Placement rules run for each placement in list order, in rule order;
    layout rules then run once over the whole layout. Placements whose
    area type is missing from the catalog produce no constraints.

    The validator holds no per-call state; one instance may be shared
    across threads and requests.
    """

    def __init__(
        self,
        catalog: Optional[FunctionalAreaCatalog] = None,
        placement_rules: Optional[Iterable[PlacementRule]] = None,
        layout_rules: Optional[Iterable[LayoutRule]] = None,
    ):
        """
        Initialize validator.

        Args:
            catalog: Catalog to resolve area types (defaults to FUNCTIONAL_AREA_CATALOG)
            placement_rules: Per-placement rules (defaults to area and volume minimums)
            layout_rules: Whole-layout rules (defaults to none)
        """
        self.catalog = catalog if catalog is not None else FUNCTIONAL_AREA_CATALOG
        self.placement_rules = tuple(
            DEFAULT_PLACEMENT_RULES if placement_rules is None else placement_rules
        )
        self.layout_rules = tuple(layout_rules or ())

    @property
    def rule_ids(self) -> List[str]:
        return [r.rule_id for r in self.placement_rules] + [r.rule_id for r in self.layout_rules]

    def validate(
        self,
        placements: Sequence["AreaPlacement"],
        crew_size: int,
    ) -> List[LayoutConstraint]:
        """
        Validate placements for a crew.

        Args:
            placements: Placements to validate (not modified)
            crew_size: Number of crew, >= 1

        Returns:
            Constraints in placement order, rule order within a placement,
            followed by layout rule constraints

        Raises:
            HabitatInputError: if crew_size is not an integer >= 1
        """
        raise_if_any([check_crew_size(crew_size, source="layout.validator")])

        constraints: List[LayoutConstraint] = []
        skipped = 0

        for placement in placements:
            area_type = self.catalog.lookup(placement.area_type_id)
            if area_type is None:
                skipped += 1
                logger.debug(
                    f"Skipping placement {placement.placement_id}: "
                    f"unknown area type '{placement.area_type_id}'"
                )
                continue

            for rule in self.placement_rules:
                constraints.extend(rule.check(placement, area_type, crew_size))

        for rule in self.layout_rules:
            found = rule.check(placements, self.catalog, crew_size)
            logger.debug(f"Layout rule {rule.rule_id}: {len(found)} constraint(s)")
            constraints.extend(found)

        logger.info(
            f"Validated {len(placements)} placement(s) for crew of {crew_size}: "
            f"{len(constraints)} constraint(s), {skipped} unknown area type(s) skipped"
        )
        return constraints


_DEFAULT_VALIDATOR = LayoutValidator()


def validate_layout(
    placements: Sequence["AreaPlacement"],
    crew_size: int,
    catalog: Optional[FunctionalAreaCatalog] = None,
) -> List[LayoutConstraint]:
    """
    Validate placements against catalog area and volume minimums.

    Args:
        placements: Placements to validate
        crew_size: Number of crew, >= 1
        catalog: Catalog to use (defaults to FUNCTIONAL_AREA_CATALOG)

    Returns:
        List of LayoutConstraint, empty when every placement meets its
        minimums
    """
    validator = _DEFAULT_VALIDATOR if catalog is None else LayoutValidator(catalog)
    return validator.validate(placements, crew_size)
