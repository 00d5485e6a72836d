"""
bootstrap/ - Configuration and application entry points

Provides:
- Configuration loading (file, environment, defaults)
- Logging setup
- API server entry point
"""

from .config import (
    HabitatConfig,
    LayoutConfig,
    ThresholdConfig,
    APIConfig,
    LoggingConfig,
    load_config,
    get_config,
    reset_config,
)

from .entrypoints import (
    JSONFormatter,
    setup_logging,
    api_main,
    run_api,
)


__all__ = [
    # Config
    "HabitatConfig",
    "LayoutConfig",
    "ThresholdConfig",
    "APIConfig",
    "LoggingConfig",
    "load_config",
    "get_config",
    "reset_config",
    # Entry Points
    "JSONFormatter",
    "setup_logging",
    "api_main",
    "run_api",
]
