"""
routes.py - Layout REST API routes

Endpoints:
- GET /api/v1/layout/catalog - List functional area types
- GET /api/v1/layout/catalog/{area_type_id} - Get one area type
- POST /api/v1/layout/validate - Validate placements for a crew
- POST /api/v1/layout/metrics - Compute compliance metrics
- POST /api/v1/layout/assess - Combined validation, metrics and readiness

Every request builds its own placement objects from the request body; no
state is shared between requests apart from the read-only catalog.
"""

from typing import Any, Dict, Optional
import logging

from fastapi import APIRouter, HTTPException, Query

from habitat.bootstrap.config import HabitatConfig, get_config
from habitat.catalog.enums import AreaCategory
from habitat.catalog.library import FUNCTIONAL_AREA_CATALOG, FunctionalAreaCatalog
from habitat.compliance.assessment import assess_layout_data
from habitat.compliance.engine import ComplianceEngine
from habitat.errors.taxonomy import HabitatInputError
from habitat.layout.constraints import ConstraintSeverity
from habitat.layout.rules import build_layout_rules
from habitat.layout.validator import LayoutValidator

from .schemas import (
    AssessRequest,
    CatalogResponse,
    MetricsRequest,
    ValidateRequest,
    ValidateResponse,
)

__all__ = [
    'create_layout_router',
]

logger = logging.getLogger(__name__)


def _input_error(e: HabitatInputError) -> HTTPException:
    return HTTPException(
        status_code=422,
        detail={"message": str(e), "errors": [err.to_dict() for err in e.errors]},
    )


def create_layout_router(
    catalog: Optional[FunctionalAreaCatalog] = None,
    config: Optional[HabitatConfig] = None,
) -> APIRouter:
    """
    Create FastAPI router for layout endpoints.

    Args:
        catalog: Functional area catalog (defaults to FUNCTIONAL_AREA_CATALOG)
        config: Configuration (defaults to get_config())

    Returns:
        FastAPI APIRouter
    """
    catalog = catalog if catalog is not None else FUNCTIONAL_AREA_CATALOG
    config = config or get_config()
    deck_height_m = config.layout.deck_height_m
    thresholds = config.thresholds.to_thresholds()
    arrangement_rules = build_layout_rules(config.layout.adjacency_distance_m)

    sizing_validator = LayoutValidator(catalog)
    full_validator = LayoutValidator(catalog, layout_rules=arrangement_rules)

    def _validator(enforce: Optional[bool]) -> LayoutValidator:
        if enforce is None:
            enforce = config.layout.enforce_adjacency_rules
        return full_validator if enforce else sizing_validator

    router = APIRouter(
        prefix="/api/v1/layout",
        tags=["layout"],
    )

    # =========================================================================
    # CATALOG ENDPOINTS
    # =========================================================================

    @router.get("/catalog", response_model=CatalogResponse)
    async def list_area_types(
        category: Optional[str] = Query(default=None, description="Filter by category"),
    ) -> CatalogResponse:
        """List functional area types, optionally filtered by category."""
        if category is None:
            entries = list(catalog)
        else:
            try:
                entries = catalog.by_category(AreaCategory(category))
            except ValueError:
                raise HTTPException(status_code=422, detail=f"Unknown category '{category}'")
        return CatalogResponse(count=len(entries), areas=[e.to_dict() for e in entries])

    @router.get("/catalog/{area_type_id}")
    async def get_area_type(area_type_id: str) -> Dict[str, Any]:
        """Get one functional area type."""
        area_type = catalog.lookup(area_type_id)
        if area_type is None:
            raise HTTPException(status_code=404, detail=f"Unknown area type '{area_type_id}'")
        return area_type.to_dict()

    # =========================================================================
    # VALIDATION ENDPOINT
    # =========================================================================

    @router.post("/validate", response_model=ValidateResponse)
    async def validate_layout(request: ValidateRequest) -> ValidateResponse:
        """
        Validate placements against catalog minimums.

        Arrangement rules (adjacency, noise, privacy) run when
        enforce_adjacency_rules is set, or by configuration.
        """
        try:
            placements = [p.to_placement(deck_height_m) for p in request.placements]
            constraints = _validator(request.enforce_adjacency_rules).validate(
                placements, request.crew_size
            )
        except HabitatInputError as e:
            raise _input_error(e)

        errors_count = sum(1 for c in constraints if c.severity == ConstraintSeverity.ERROR)
        warnings_count = sum(1 for c in constraints if c.severity == ConstraintSeverity.WARNING)
        return ValidateResponse(
            is_valid=errors_count == 0,
            errors_count=errors_count,
            warnings_count=warnings_count,
            constraints=[c.to_dict() for c in constraints],
        )

    # =========================================================================
    # METRICS ENDPOINT
    # =========================================================================

    @router.post("/metrics")
    async def compute_layout_metrics(request: MetricsRequest) -> Dict[str, Any]:
        """Compute utilisation, per-area compliance and recommendations."""
        try:
            placements = [p.to_placement(deck_height_m) for p in request.placements]
            volume, surface_area = request.habitat.totals()
            metrics = ComplianceEngine(catalog, thresholds).compute(
                placements, request.crew_size, volume, surface_area
            )
        except HabitatInputError as e:
            raise _input_error(e)
        return metrics.to_dict()

    # =========================================================================
    # ASSESSMENT ENDPOINT
    # =========================================================================

    @router.post("/assess")
    async def assess(request: AssessRequest) -> Dict[str, Any]:
        """
        Combined assessment.

        Input problems are returned in the body's "errors" list with a 200
        status; "ok" is false when any of them is blocking.
        """
        assessment = assess_layout_data(
            request.model_dump(),
            catalog=catalog,
            thresholds=thresholds,
            validator=_validator(request.enforce_adjacency_rules),
            min_volume_per_crew_m3=config.thresholds.min_volume_per_crew_m3,
            deck_height_m=deck_height_m,
        )
        return assessment.to_dict()

    return router
