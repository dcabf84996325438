"""Command Line Interface for the Concept Plan Renderer.

This module provides a simple CLI for rendering concept plans to SVG or
raster images, printing their room schedule, checking their geometry and
converting lengths.
"""

import logging
from pathlib import Path
from typing import NoReturn, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from .config import SUPERSAMPLING_FACTOR
from .core.model import UNIT_SYSTEMS, ConceptPlan
from .core.schedule import build_schedule
from .core.units import convert_length
from .engine.validators import validate_plan
from .io.parser import load_plan
from .visualization.generator import generate_plan_image, generate_plan_svg
from .visualization.raster import RasterizationError

app = typer.Typer(
    name="plan-renderer",
    help="A CLI tool for rendering architectural concept floor plans",
    no_args_is_help=True,
)
console = Console()


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.ERROR,
        format="%(message)s",
        handlers=[RichHandler(show_path=verbose)],
        force=True,
    )


def _check_unit(unit: Optional[str]) -> None:
    if unit is not None and unit not in UNIT_SYSTEMS:
        raise ValueError(f"Unknown unit {unit!r} (use one of: {', '.join(UNIT_SYSTEMS)})")


def _load(plan: Path) -> ConceptPlan:
    plan_obj = load_plan(str(plan))
    console.print(f"[green]✓[/green] Loaded plan '{plan_obj.project_name}' from {plan}")
    return plan_obj


def _fail(message: str) -> NoReturn:
    console.print(f"[red]Error: {escape(message)}[/red]")
    raise typer.Exit(1)


@app.command()
def render(
    plan: Path = typer.Option(..., "--plan", "-p", help="Path to concept plan JSON file"),
    output: Path = typer.Option(..., "--out", "-o", help="Path to output SVG file"),
    unit: Optional[str] = typer.Option(None, "--unit", "-u", help="Display unit (m or ft)"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show detailed output"),
):
    """Render a concept plan to an SVG drawing."""
    _configure_logging(verbose)
    try:
        _check_unit(unit)
        plan_obj = _load(plan)
        path = generate_plan_svg(plan_obj, output, unit)
    except FileNotFoundError as e:
        _fail(f"File not found - {e}")
    except ValueError as e:
        _fail(str(e))

    console.print(f"[green]✓[/green] Drawing saved to {path}")


@app.command()
def export(
    plan: Path = typer.Option(..., "--plan", "-p", help="Path to concept plan JSON file"),
    output: Path = typer.Option(..., "--out", "-o", help="Path to output PNG or JPEG file"),
    image_format: Optional[str] = typer.Option(
        None, "--format", "-f", help="Image format (png or jpeg, default: from file suffix)"
    ),
    scale: float = typer.Option(SUPERSAMPLING_FACTOR, "--scale", help="Supersampling factor"),
    unit: Optional[str] = typer.Option(None, "--unit", "-u", help="Display unit (m or ft)"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show detailed output"),
):
    """Render a concept plan to a raster image on a white background."""
    _configure_logging(verbose)
    try:
        _check_unit(unit)
        plan_obj = _load(plan)
        image = generate_plan_image(plan_obj, output, image_format, unit, scale)
    except FileNotFoundError as e:
        _fail(f"File not found - {e}")
    except (ValueError, RasterizationError) as e:
        _fail(str(e))

    console.print(
        f"[green]✓[/green] {image.image_format.upper()} image "
        f"({image.width}x{image.height}) saved to {output}"
    )


@app.command()
def schedule(
    plan: Path = typer.Option(..., "--plan", "-p", help="Path to concept plan JSON file"),
    unit: Optional[str] = typer.Option(None, "--unit", "-u", help="Display unit (m or ft)"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show detailed output"),
):
    """Show the room schedule of a concept plan."""
    _configure_logging(verbose)
    try:
        _check_unit(unit)
        plan_obj = _load(plan)
    except FileNotFoundError as e:
        _fail(f"File not found - {e}")
    except ValueError as e:
        _fail(str(e))

    table = Table(title=f"Room Schedule: {plan_obj.project_name}")
    table.add_column("Room", style="cyan")
    table.add_column("Dimensions", justify="center")
    table.add_column("Zone", style="green")
    table.add_column("Notes")
    for row in build_schedule(plan_obj, unit):
        table.add_row(row.name, row.dimensions, row.zone, row.notes)
    console.print(table)

    if verbose and plan_obj.concept_description:
        console.print(f"\n[bold]Concept:[/bold] {plan_obj.concept_description}")
    if verbose and plan_obj.circulation_notes:
        console.print(f"[bold]Circulation:[/bold] {plan_obj.circulation_notes}")


@app.command()
def check(
    plan: Path = typer.Option(..., "--plan", "-p", help="Path to concept plan JSON file"),
    strict: bool = typer.Option(False, "--strict", help="Exit with code 1 if any warning is found"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show detailed output"),
):
    """Check a concept plan for geometry the renderer only tolerates."""
    _configure_logging(verbose)
    try:
        plan_obj = _load(plan)
    except FileNotFoundError as e:
        _fail(f"File not found - {e}")
    except ValueError as e:
        _fail(str(e))

    warnings = validate_plan(plan_obj)
    if not warnings:
        console.print("\n[bold green]✓ No problems found[/bold green]")
        return

    table = Table(title="Plan Warnings")
    table.add_column("Code", style="yellow")
    table.add_column("Room", style="cyan")
    table.add_column("Message")
    for warning in warnings:
        table.add_row(warning.code, warning.room or "-", warning.message)
    console.print(table)
    console.print(f"\n[bold yellow]{len(warnings)} warning(s)[/bold yellow]")

    if strict:
        raise typer.Exit(1)


@app.command()
def convert(
    value: float = typer.Argument(..., help="Length to convert"),
    from_unit: str = typer.Option(..., "--from", help="Source unit (m or ft)"),
    to_unit: str = typer.Option(..., "--to", help="Target unit (m or ft)"),
):
    """Convert a length between meters and feet."""
    try:
        result = convert_length(value, from_unit, to_unit)
    except ValueError as e:
        _fail(str(e))

    console.print(f"{value:g} {from_unit} = [bold]{result:g} {to_unit}[/bold]")


def main():
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
