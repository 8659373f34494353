"""Validate command for checking calculation request files.

This module provides the `validate` command that checks a JSON request file
for syntax and schema errors without running the search.
"""

from pathlib import Path
from typing import Annotated

import typer

from videowall.application.config import ConfigError, load_config


def validate(
    request_file: Annotated[
        Path,
        typer.Argument(help="Path to the JSON request file to validate"),
    ],
) -> None:
    """Validate a calculation request file.

    Exit codes:
        0 - Request file is valid
        1 - Request file has errors

    Example:
        videowall validate lobby-wall.json
    """
    typer.echo(f"Validating {request_file}...")
    typer.echo()

    try:
        config = load_config(request_file)
    except ConfigError as e:
        _display_load_error(e)
        raise typer.Exit(code=1)

    supplied = [
        name
        for name in ("aspect_ratio", "height", "width", "diagonal")
        if getattr(config.inputs, name) is not None
    ]
    typer.echo(f"Cabinet type: {config.cabinet_type}")
    typer.echo(f"Unit: {config.unit.value}")
    typer.echo(f"Inputs: {', '.join(supplied)}")
    typer.echo()
    typer.echo("Validation passed.")


def _display_load_error(error: ConfigError) -> None:
    """Display a request file loading error.

    Args:
        error: The ConfigError to display
    """
    typer.echo("Errors:", err=True)
    if error.error_type == "file_not_found":
        typer.echo(f"  File not found: {error.path}", err=True)
    elif error.error_type == "json_parse":
        typer.echo("  Invalid JSON syntax", err=True)
        for detail in error.details:
            line = detail.get("line", "?")
            column = detail.get("column", "?")
            message = detail.get("message", "Unknown error")
            typer.echo(f"    Line {line}, Column {column}: {message}", err=True)
    elif error.error_type == "validation":
        for detail in error.details:
            path = detail.get("path") or "(root)"
            message = detail.get("message", "Unknown error")
            typer.echo(f"  {path}: {message}", err=True)
    else:
        typer.echo(f"  {error.message}", err=True)

    typer.echo()
    typer.echo("Validation failed.", err=True)
