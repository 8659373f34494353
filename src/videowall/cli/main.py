"""Typer CLI for video wall sizing."""

import logging
from pathlib import Path
from typing import Annotated

import typer

from videowall.application import CalculateWallCommand, CalculationInput
from videowall.application.config import ConfigError, config_to_input, load_config
from videowall.cli.commands import validate_command
from videowall.domain import list_cabinet_types, parse_aspect_ratio
from videowall.infrastructure import (
    CatalogFormatter,
    JsonResultExporter,
    ResultTableFormatter,
)

app = typer.Typer(
    name="videowall",
    help="Size a video wall from fixed-size cabinets.",
)

app.command(name="validate")(validate_command)


def _build_input(
    config_file: Path | None,
    cabinet_type: str | None,
    unit: str | None,
    aspect_ratio: float | None,
    height: float | None,
    width: float | None,
    diagonal: float | None,
) -> CalculationInput:
    """Build the command input from a request file and/or CLI options.

    Options given on the command line take precedence over the request
    file. Any target option replaces the file's inputs as a whole.
    """
    targets_given = any(v is not None for v in (aspect_ratio, height, width, diagonal))

    if config_file is not None:
        try:
            calculation_input = config_to_input(load_config(config_file))
        except ConfigError as e:
            typer.echo(f"Error: {e}", err=True)
            raise typer.Exit(code=1)
    else:
        if cabinet_type is None:
            typer.echo("Error: --cabinet-type is required without --config", err=True)
            raise typer.Exit(code=1)
        calculation_input = CalculationInput(cabinet_type=cabinet_type)

    if cabinet_type is not None:
        calculation_input.cabinet_type = cabinet_type
    if unit is not None:
        calculation_input.unit = unit
    if targets_given:
        calculation_input.aspect_ratio = aspect_ratio
        calculation_input.height = height
        calculation_input.width = width
        calculation_input.diagonal = diagonal
    return calculation_input


@app.command()
def calculate(
    config_file: Annotated[
        Path | None,
        typer.Option("--config", "-c", help="Path to JSON request file"),
    ] = None,
    cabinet_type: Annotated[
        str | None,
        typer.Option("--cabinet-type", "-t", help="Cabinet type: 16:9 or 1:1"),
    ] = None,
    unit: Annotated[
        str | None,
        typer.Option("--unit", "-u", help="Unit of inputs and results: mm, m, ft, in"),
    ] = None,
    aspect_ratio: Annotated[
        str | None,
        typer.Option("--aspect-ratio", "-a", help="Target aspect ratio, e.g. 16:9 or 1.7778"),
    ] = None,
    height: Annotated[
        float | None,
        typer.Option("--height", "-h", help="Target height"),
    ] = None,
    width: Annotated[
        float | None,
        typer.Option("--width", "-w", help="Target width"),
    ] = None,
    diagonal: Annotated[
        float | None,
        typer.Option("--diagonal", "-d", help="Target diagonal"),
    ] = None,
    output_format: Annotated[
        str,
        typer.Option("--format", "-f", help="Output format: table, json"),
    ] = "table",
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Log search details to stderr"),
    ] = False,
) -> None:
    """Find the closest wall configurations below and above a target.

    Give exactly two of --aspect-ratio, --height, --width, --diagonal, or a
    request file with --config.

    Example:
        videowall calculate -t 16:9 -a 16:9 -w 4800
    """
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    if output_format not in ("table", "json"):
        typer.echo(f"Unknown format: {output_format}. Available: table, json", err=True)
        raise typer.Exit(code=1)

    ratio: float | None = None
    if aspect_ratio is not None:
        try:
            ratio = parse_aspect_ratio(aspect_ratio)
        except ValueError as e:
            typer.echo(f"Error: {e}", err=True)
            raise typer.Exit(code=1)

    calculation_input = _build_input(
        config_file, cabinet_type, unit, ratio, height, width, diagonal
    )
    result = CalculateWallCommand().execute(calculation_input)

    if not result.is_valid:
        for error in result.errors:
            typer.echo(f"Error: {error}", err=True)
        raise typer.Exit(code=1)

    if output_format == "json":
        typer.echo(JsonResultExporter().export(result))
    else:
        typer.echo(ResultTableFormatter().format(result))


@app.command()
def catalog() -> None:
    """Show cabinet types, units and aspect ratio presets."""
    typer.echo(CatalogFormatter().format(list_cabinet_types()))


if __name__ == "__main__":
    app()
