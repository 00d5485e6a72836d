"""
cli/core.py - Core CLI infrastructure
"""

from __future__ import annotations
from typing import Any, Dict, List, Optional
from dataclasses import dataclass, field
from enum import Enum
from abc import ABC, abstractmethod
import argparse
import json
import logging

from habitat.bootstrap.config import HabitatConfig
from habitat.catalog.library import FUNCTIONAL_AREA_CATALOG, FunctionalAreaCatalog

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_CONSTRAINT_ERRORS = 1
EXIT_INVALID_INPUT = 2


class OutputFormat(Enum):
    """Output format options."""
    TEXT = "text"
    JSON = "json"


@dataclass
class CLIContext:
    """Context for CLI operations."""

    config: HabitatConfig = field(default_factory=HabitatConfig)
    catalog: FunctionalAreaCatalog = FUNCTIONAL_AREA_CATALOG

    # Output settings
    output_format: OutputFormat = OutputFormat.TEXT


@dataclass
class CommandResult:
    """Result of a CLI command execution."""

    success: bool = True
    message: str = ""
    data: Any = None
    error: Optional[str] = None

    # Text-mode detail lines
    lines: List[str] = field(default_factory=list)
    exit_code: int = EXIT_OK

    def to_dict(self) -> Dict[str, Any]:
        return {
            "success": self.success,
            "message": self.message,
            "data": self.data,
            "error": self.error,
        }


class CLICommand(ABC):
    """Base class for CLI commands."""

    name: str = "command"
    description: str = "Base command"

    @abstractmethod
    def execute(self, ctx: CLIContext, args: argparse.Namespace) -> CommandResult:
        """Execute the command."""
        pass

    def configure_parser(self, parser: argparse.ArgumentParser) -> None:
        """Configure argument parser for this command."""
        pass


class CommandRegistry:
    """Registry for CLI commands."""

    def __init__(self):
        self._commands: Dict[str, CLICommand] = {}

    def register(self, command: CLICommand) -> None:
        """Register a command."""
        self._commands[command.name] = command

    def get(self, name: str) -> Optional[CLICommand]:
        """Get command by name."""
        return self._commands.get(name)

    def list_commands(self) -> List[str]:
        """List all command names."""
        return list(self._commands.keys())


def format_output(result: CommandResult, format: OutputFormat) -> str:
    """Format command result for display."""
    if format == OutputFormat.JSON:
        return json.dumps(result.to_dict(), indent=2, default=str)

    if result.success:
        return "\n".join([result.message] + result.lines)
    return "\n".join([f"Error: {result.error}"] + result.lines)
