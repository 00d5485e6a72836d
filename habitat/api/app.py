"""
app.py - FastAPI application factory for the layout API
"""

from typing import Optional
import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from habitat.bootstrap.config import HabitatConfig, get_config
from habitat.catalog.library import FUNCTIONAL_AREA_CATALOG, FunctionalAreaCatalog, load_catalog
from habitat.errors.taxonomy import CatalogError, HabitatInputError

from .routes import create_layout_router

__all__ = [
    'create_app',
]

logger = logging.getLogger(__name__)


def create_app(
    config: Optional[HabitatConfig] = None,
    catalog: Optional[FunctionalAreaCatalog] = None,
) -> FastAPI:
    """
    Create FastAPI application.

    Args:
        config: Configuration (defaults to get_config())
        catalog: Catalog to serve (defaults to config.layout.catalog_file,
            else FUNCTIONAL_AREA_CATALOG)

    Returns:
        FastAPI application instance
    """
    config = config or get_config()
    if catalog is None:
        if config.layout.catalog_file:
            catalog = load_catalog(config.layout.catalog_file)
        else:
            catalog = FUNCTIONAL_AREA_CATALOG

    app = FastAPI(
        title="Habitat Layout API",
        description="Space habitat interior layout validation and compliance metrics",
        version=config.version,
        docs_url=config.api.docs_url if config.api.enable_docs else None,
        redoc_url="/redoc" if config.api.enable_docs else None,
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.api.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(HabitatInputError)
    async def habitat_input_error_handler(request: Request, exc: HabitatInputError) -> JSONResponse:
        logger.info(f"Rejected {request.url.path}: {exc}")
        return JSONResponse(
            status_code=422,
            content={"detail": {"message": str(exc), "errors": [e.to_dict() for e in exc.errors]}},
        )

    @app.exception_handler(CatalogError)
    async def catalog_error_handler(request: Request, exc: CatalogError) -> JSONResponse:
        logger.warning(f"Catalog error on {request.url.path}: {exc}")
        return JSONResponse(
            status_code=422,
            content={"detail": {"message": str(exc), "errors": [e.to_dict() for e in exc.errors]}},
        )

    app.include_router(create_layout_router(catalog=catalog, config=config))

    @app.get("/health")
    async def health_check():
        """Health check endpoint."""
        return {
            "status": "healthy",
            "version": config.version,
            "catalog_size": len(catalog),
        }

    logger.info(f"Layout API created with {len(catalog)} area types")
    return app
