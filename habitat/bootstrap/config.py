"""
bootstrap/config.py - Application configuration

Provides configuration loading from files, environment variables, and defaults.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional
from pathlib import Path
import os
import json
import logging

from habitat.core.constants import (
    DEFAULT_ADJACENCY_DISTANCE_M,
    DEFAULT_DECK_HEIGHT_M,
    MIN_COMFORT_AREA_PER_PERSON_M2,
    MIN_VOLUME_PER_CREW_M3,
    OVER_DENSITY_PCT,
    UNDER_UTILIZED_PCT,
    UNDERSIZED_THRESHOLD_PCT,
)
from habitat.compliance.engine import RecommendationThresholds
from habitat.errors.taxonomy import (
    ErrorCategory,
    ErrorCode,
    HabitatError,
    HabitatInputError,
)

logger = logging.getLogger(__name__)


@dataclass
class LayoutConfig:
    """Layout editing and validation settings."""

    deck_height_m: float = DEFAULT_DECK_HEIGHT_M
    adjacency_distance_m: float = DEFAULT_ADJACENCY_DISTANCE_M
    enforce_adjacency_rules: bool = False
    catalog_file: Optional[str] = None

    @classmethod
    def from_env(cls) -> "LayoutConfig":
        return cls(
            deck_height_m=float(os.getenv("HABITAT_DECK_HEIGHT_M", str(DEFAULT_DECK_HEIGHT_M))),
            adjacency_distance_m=float(
                os.getenv("HABITAT_ADJACENCY_DISTANCE_M", str(DEFAULT_ADJACENCY_DISTANCE_M))
            ),
            enforce_adjacency_rules=os.getenv("HABITAT_ENFORCE_ADJACENCY", "false").lower() == "true",
            catalog_file=os.getenv("HABITAT_CATALOG_FILE"),
        )


@dataclass
class ThresholdConfig:
    """Recommendation and mission readiness thresholds."""

    over_density_pct: float = OVER_DENSITY_PCT
    min_comfort_area_per_person: float = MIN_COMFORT_AREA_PER_PERSON_M2
    undersized_threshold_pct: float = UNDERSIZED_THRESHOLD_PCT
    under_utilized_pct: float = UNDER_UTILIZED_PCT
    min_volume_per_crew_m3: float = MIN_VOLUME_PER_CREW_M3

    @classmethod
    def from_env(cls) -> "ThresholdConfig":
        return cls(
            over_density_pct=float(os.getenv("HABITAT_OVER_DENSITY_PCT", str(OVER_DENSITY_PCT))),
            min_comfort_area_per_person=float(
                os.getenv("HABITAT_MIN_COMFORT_AREA", str(MIN_COMFORT_AREA_PER_PERSON_M2))
            ),
            undersized_threshold_pct=float(
                os.getenv("HABITAT_UNDERSIZED_PCT", str(UNDERSIZED_THRESHOLD_PCT))
            ),
            under_utilized_pct=float(os.getenv("HABITAT_UNDER_UTILIZED_PCT", str(UNDER_UTILIZED_PCT))),
            min_volume_per_crew_m3=float(
                os.getenv("HABITAT_MIN_VOLUME_PER_CREW", str(MIN_VOLUME_PER_CREW_M3))
            ),
        )

    def to_thresholds(self) -> RecommendationThresholds:
        return RecommendationThresholds(
            over_density_pct=self.over_density_pct,
            min_comfort_area_per_person=self.min_comfort_area_per_person,
            undersized_threshold_pct=self.undersized_threshold_pct,
            under_utilized_pct=self.under_utilized_pct,
        )


@dataclass
class APIConfig:
    """API server configuration."""

    host: str = "0.0.0.0"
    port: int = 8000
    workers: int = 1
    enable_docs: bool = True
    docs_url: str = "/docs"
    cors_origins: List[str] = field(default_factory=lambda: ["*"])

    @classmethod
    def from_env(cls) -> "APIConfig":
        cors = os.getenv("HABITAT_API_CORS_ORIGINS", "*")
        return cls(
            host=os.getenv("HABITAT_API_HOST", "0.0.0.0"),
            port=int(os.getenv("HABITAT_API_PORT", "8000")),
            workers=int(os.getenv("HABITAT_API_WORKERS", "1")),
            enable_docs=os.getenv("HABITAT_API_ENABLE_DOCS", "true").lower() == "true",
            docs_url=os.getenv("HABITAT_API_DOCS_URL", "/docs"),
            cors_origins=cors.split(",") if cors else ["*"],
        )


@dataclass
class LoggingConfig:
    """Logging configuration."""

    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    log_file: Optional[str] = None
    json_logs: bool = False

    @classmethod
    def from_env(cls) -> "LoggingConfig":
        return cls(
            level=os.getenv("HABITAT_LOG_LEVEL", "INFO"),
            format=os.getenv("HABITAT_LOG_FORMAT", "%(asctime)s - %(name)s - %(levelname)s - %(message)s"),
            log_file=os.getenv("HABITAT_LOG_FILE"),
            json_logs=os.getenv("HABITAT_JSON_LOGS", "false").lower() == "true",
        )


@dataclass
class HabitatConfig:
    """Root configuration for the habitat layout tools."""

    environment: str = "development"
    debug: bool = False
    version: str = "1.0.0"

    layout: LayoutConfig = field(default_factory=LayoutConfig)
    thresholds: ThresholdConfig = field(default_factory=ThresholdConfig)
    api: APIConfig = field(default_factory=APIConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    # Additional settings
    settings: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_env(cls) -> "HabitatConfig":
        """Create configuration from environment variables."""
        try:
            return cls(
                environment=os.getenv("HABITAT_ENVIRONMENT", "development"),
                debug=os.getenv("HABITAT_DEBUG", "false").lower() == "true",
                layout=LayoutConfig.from_env(),
                thresholds=ThresholdConfig.from_env(),
                api=APIConfig.from_env(),
                logging=LoggingConfig.from_env(),
            )
        except ValueError as e:
            raise HabitatInputError.single(_config_error(f"Invalid environment setting: {e}")) from e

    @classmethod
    def from_file(cls, filepath: str) -> "HabitatConfig":
        """Load configuration from JSON file."""
        path = Path(filepath)
        if not path.exists():
            logger.warning(f"Config file not found: {filepath}, using defaults")
            return cls.from_env()

        try:
            with open(path) as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise HabitatInputError.single(
                _config_error(f"Config file {filepath} is not valid JSON: {e}", path=str(filepath))
            ) from e

        return cls._from_dict(data)

    @classmethod
    def _from_dict(cls, data: Dict[str, Any]) -> "HabitatConfig":
        """Create config from dictionary."""
        config = cls.from_env()

        # Override with file values
        if "environment" in data:
            config.environment = data["environment"]
        if "debug" in data:
            config.debug = data["debug"]

        for section in ("layout", "thresholds", "api", "logging"):
            if section in data:
                target = getattr(config, section)
                for key, value in data[section].items():
                    if hasattr(target, key):
                        setattr(target, key, value)
                    else:
                        logger.warning(f"Ignoring unknown config key: {section}.{key}")

        if "settings" in data:
            config.settings.update(data["settings"])

        return config

    def to_dict(self) -> Dict[str, Any]:
        """Serialize config to dictionary."""
        return {
            "environment": self.environment,
            "debug": self.debug,
            "version": self.version,
            "layout": {
                "deck_height_m": self.layout.deck_height_m,
                "adjacency_distance_m": self.layout.adjacency_distance_m,
                "enforce_adjacency_rules": self.layout.enforce_adjacency_rules,
                "catalog_file": self.layout.catalog_file,
            },
            "thresholds": {
                "over_density_pct": self.thresholds.over_density_pct,
                "min_comfort_area_per_person": self.thresholds.min_comfort_area_per_person,
                "undersized_threshold_pct": self.thresholds.undersized_threshold_pct,
                "under_utilized_pct": self.thresholds.under_utilized_pct,
                "min_volume_per_crew_m3": self.thresholds.min_volume_per_crew_m3,
            },
            "api": {
                "host": self.api.host,
                "port": self.api.port,
                "workers": self.api.workers,
            },
            "logging": {
                "level": self.logging.level,
                "log_file": self.logging.log_file,
                "json_logs": self.logging.json_logs,
            },
        }


def _config_error(message: str, path: Optional[str] = None) -> HabitatError:
    return HabitatError(
        code=ErrorCode.SYS_CONFIG,
        category=ErrorCategory.CONFIGURATION,
        message=message,
        source="bootstrap.config",
        path=path,
        recoverable=False,
    )


# Global config instance
_config: Optional[HabitatConfig] = None


def load_config(filepath: str = None) -> HabitatConfig:
    """
    Load configuration from file or environment.

    Args:
        filepath: Optional path to JSON config file

    Returns:
        HabitatConfig instance
    """
    global _config

    if filepath:
        _config = HabitatConfig.from_file(filepath)
    else:
        # Try default locations
        default_paths = [
            "./habitat.json",
            "./config/habitat.json",
            os.path.expanduser("~/.habitat/config.json"),
        ]

        for path in default_paths:
            if Path(path).exists():
                logger.info(f"Loading config from: {path}")
                _config = HabitatConfig.from_file(path)
                return _config

        # Fall back to environment
        _config = HabitatConfig.from_env()

    logger.info(f"Configuration loaded: environment={_config.environment}")
    return _config


def get_config() -> HabitatConfig:
    """Get current configuration, loading if needed."""
    global _config
    if _config is None:
        _config = load_config()
    return _config


def reset_config() -> None:
    """Drop the cached global configuration."""
    global _config
    _config = None
