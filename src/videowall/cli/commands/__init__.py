"""CLI command implementations for the videowall application.

This package contains subcommands for the videowall CLI, including:
- validate: Validate a calculation request file
"""

from videowall.cli.commands.validate import validate as validate_command

__all__ = ["validate_command"]
