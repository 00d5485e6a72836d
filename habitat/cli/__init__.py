"""
cli/ - habitat-layout command line interface
"""

from .core import (
    OutputFormat,
    CLIContext,
    CommandResult,
    CLICommand,
    CommandRegistry,
    format_output,
)

from .commands import (
    CatalogCommand,
    ValidateCommand,
    MetricsCommand,
    AssessCommand,
    load_layout_file,
)

from .main import main

__all__ = [
    "OutputFormat",
    "CLIContext",
    "CommandResult",
    "CLICommand",
    "CommandRegistry",
    "format_output",
    "CatalogCommand",
    "ValidateCommand",
    "MetricsCommand",
    "AssessCommand",
    "load_layout_file",
    "main",
]
