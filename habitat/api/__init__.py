"""
habitat/api - HTTP API for layout validation and compliance metrics.
"""

from habitat.api.schemas import (
    PlacementModel,
    HabitatModel,
    ValidateRequest,
    MetricsRequest,
    AssessRequest,
    ValidateResponse,
    CatalogResponse,
)

from habitat.api.routes import create_layout_router
from habitat.api.app import create_app

__all__ = [
    # Schemas
    'PlacementModel',
    'HabitatModel',
    'ValidateRequest',
    'MetricsRequest',
    'AssessRequest',
    'ValidateResponse',
    'CatalogResponse',
    # Router / app
    'create_layout_router',
    'create_app',
]
