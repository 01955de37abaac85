"""Main CLI application for FunFood."""

import sys

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from funfood import __version__
from funfood.domain.exceptions import ValidationError
from funfood.domain.services.delivery_fee import DistanceFeeCalculator
from funfood.domain.value_objects.geo_coordinate import GeoCoordinate
from funfood.shared.config.settings import get_settings
from funfood.shared.formatters import format_currency, format_distance
from funfood.shared.logging_config import setup_logging

# Fix Windows console encoding
if sys.platform == "win32":
    sys.stdout.reconfigure(encoding="utf-8", errors="replace")
    sys.stderr.reconfigure(encoding="utf-8", errors="replace")

app = typer.Typer(
    name="funfood",
    help="FunFood client core utilities",
    add_completion=False,
)
console = Console()


@app.callback()
def main(verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output")):
    """Configure logging before running a command."""
    settings = get_settings().logging
    if verbose:
        settings = settings.model_copy(update={"level": "DEBUG"})
    setup_logging(settings)


@app.command()
def version():
    """Show version information."""
    console.print(Panel(
        Text(f"FunFood v{__version__}\nFood ordering client core", justify="center"),
        title="Version Info",
        border_style="blue"
    ))


@app.command()
def fee(
    from_lat: float = typer.Argument(..., help="Origin latitude"),
    from_lon: float = typer.Argument(..., help="Origin longitude"),
    to_lat: float = typer.Argument(..., help="Destination latitude"),
    to_lon: float = typer.Argument(..., help="Destination longitude"),
):
    """Estimate the delivery fee between two coordinates."""
    try:
        origin = GeoCoordinate(from_lat, from_lon)
        destination = GeoCoordinate(to_lat, to_lon)
        calculator = DistanceFeeCalculator(get_settings().delivery.to_schedule())
    except ValidationError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(code=1)

    distance_km = calculator.distance(
        origin.latitude, origin.longitude, destination.latitude, destination.longitude
    )
    console.print(f"[bold]Distance:[/bold] {format_distance(distance_km)}")
    console.print(f"[bold green]Delivery fee:[/bold green] {format_currency(calculator.delivery_fee(distance_km))}")


@app.command()
def config():
    """Show the effective configuration."""
    settings = get_settings()
    table = Table(title=f"{settings.app_name} configuration")
    table.add_column("Section", style="cyan")
    table.add_column("Key")
    table.add_column("Value", style="green")
    for section in ("api", "storage", "pagination", "delivery", "logging"):
        for key, value in getattr(settings, section).model_dump().items():
            table.add_row(section, key, str(value))
    console.print(table)


if __name__ == "__main__":
    app()
