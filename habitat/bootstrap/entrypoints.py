"""
bootstrap/entrypoints.py - Logging setup and server entry point
"""

from __future__ import annotations
from typing import Optional, TextIO, TYPE_CHECKING
import argparse
import json
import logging
import sys

if TYPE_CHECKING:
    from .config import HabitatConfig

logger = logging.getLogger(__name__)

DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class JSONFormatter(logging.Formatter):
    """One JSON object per log record."""

    def format(self, record):
        payload = {
            "timestamp": self.formatTime(record),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload)


def setup_logging(
    level: str = "INFO",
    log_file: str = None,
    json_format: bool = False,
    fmt: str = DEFAULT_LOG_FORMAT,
    stream: TextIO = None,
) -> None:
    """
    Configure application logging.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR)
        log_file: Optional log file path
        json_format: Use JSON format for logs
        fmt: Format string for plain-text logs
        stream: Console stream (defaults to stdout)
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    if json_format:
        formatter = JSONFormatter()
    else:
        formatter = logging.Formatter(fmt)

    # Console handler
    console_handler = logging.StreamHandler(stream or sys.stdout)
    console_handler.setFormatter(formatter)
    console_handler.setLevel(log_level)

    # Root logger; handlers from an earlier call are replaced
    root_logger = logging.getLogger()
    for handler in list(root_logger.handlers):
        if getattr(handler, "_habitat_handler", False):
            root_logger.removeHandler(handler)
            handler.close()
    console_handler._habitat_handler = True
    root_logger.setLevel(log_level)
    root_logger.addHandler(console_handler)

    # File handler
    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(formatter)
        file_handler.setLevel(log_level)
        file_handler._habitat_handler = True
        root_logger.addHandler(file_handler)

    # Reduce noise from third-party libraries
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


def api_main(args: list = None) -> None:
    """
    API server entry point.

    Args:
        args: Command line arguments
    """
    parser = argparse.ArgumentParser(
        description="Habitat Layout API Server",
        prog="habitat-api",
    )

    parser.add_argument(
        "-c", "--config",
        help="Path to configuration file",
        default=None,
    )
    parser.add_argument(
        "-p", "--port",
        type=int,
        help="API port",
        default=None,
    )
    parser.add_argument(
        "-H", "--host",
        help="API host",
        default=None,
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=None,
        help="Log level",
    )

    parsed = parser.parse_args(args)

    from .config import load_config

    config = load_config(parsed.config)
    setup_logging(
        level=parsed.log_level or config.logging.level,
        log_file=config.logging.log_file,
        json_format=config.logging.json_logs,
        fmt=config.logging.format,
    )

    # Override config with CLI args
    if parsed.port:
        config.api.port = parsed.port
    if parsed.host:
        config.api.host = parsed.host

    run_api(config)


def run_api(config: Optional["HabitatConfig"] = None) -> None:
    """Serve the layout API with uvicorn."""
    import uvicorn

    from habitat.api.app import create_app
    from .config import get_config

    config = config or get_config()
    app = create_app(config)

    logger.info(f"Starting API server on {config.api.host}:{config.api.port}")
    try:
        uvicorn.run(
            app,
            host=config.api.host,
            port=config.api.port,
        )
    except KeyboardInterrupt:
        print("\nShutting down...")
