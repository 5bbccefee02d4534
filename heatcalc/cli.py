"""
heatcalc CLI.

Command-line interface for UK dwelling heat loss and heating system costs.

Usage:
    heatcalc estimate "SW1A 1AA" victorian_terrace
    heatcalc estimate M11AA semi_1930s --no-grants --json
    heatcalc upgrades EH1 1YZ newbuild --package deep_retrofit
    heatcalc templates
    heatcalc regions --coldest 5
"""

from __future__ import annotations

import json
from typing import Optional

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from .analysis.heat_loss import EMITTER_MARGINS, UPGRADE_PACKAGES, HeatLossCalculator
from .baseline.property_templates import PROPERTY_TEMPLATES, calculate_floor_area
from .climate.regions import get_all_regions, get_coldest_regions
from .core.config import settings
from .pipeline import EstimateResult, estimate as run_estimate
from .utils.logging_config import setup_logging
from .utils.validation import ValidationError

app = typer.Typer(
    name="heatcalc",
    help="heatcalc - Room-by-room heat loss and heating system costs for UK homes",
    add_completion=False,
)
console = Console()


def _fail(error: Exception) -> None:
    console.print(f"[red]Error:[/red] {error}")
    suggestions = getattr(error, "suggestions", None)
    if suggestions:
        console.print(f"[dim]Valid options: {', '.join(suggestions)}[/dim]")
    raise typer.Exit(code=1)


@app.callback()
def main_callback(
    log_level: str = typer.Option(settings.log_level, "--log-level", help="Log level"),
):
    """Configure logging for every command."""
    setup_logging(log_level, log_to_file=settings.log_to_file)


@app.command()
def estimate(
    postcode: str = typer.Argument(..., help="UK postcode, e.g. 'SW1A 1AA'"),
    property_type: str = typer.Argument(..., help="Property template id (see 'heatcalc templates')"),
    no_grants: bool = typer.Option(False, "--no-grants", help="Ignore the Boiler Upgrade Scheme grant"),
    emitter: Optional[str] = typer.Option(
        None, "--emitter", "-e", help="Sizing margin: radiator, underfloor or heatpump"
    ),
    as_json: bool = typer.Option(False, "--json", help="Print the full result as JSON"),
):
    """
    Estimate heat loss and heating system costs for a property.
    """
    if emitter is not None and emitter not in EMITTER_MARGINS:
        _fail(ValidationError(f"Unknown emitter type: '{emitter}'", field="emitter",
                              suggestions=list(EMITTER_MARGINS)))

    try:
        result = run_estimate(
            postcode,
            property_type,
            include_grants=not no_grants and settings.include_grants,
            emitter_type=emitter,
        )
    except ValidationError as e:
        _fail(e)

    if as_json:
        typer.echo(json.dumps(result.to_dict(), indent=2))
        return

    _print_estimate(result)


def _print_estimate(result: EstimateResult) -> None:
    building = result.building
    climate = result.climate

    region = climate.name + (" (default)" if climate.is_default else "")
    console.print(Panel.fit(
        f"[bold blue]{building.property_name}[/bold blue] ({building.era})\n"
        f"{result.postcode} - {region}, design {climate.external_design_temp}°C",
        border_style="blue",
    ))

    rooms = Table(title="Room Heat Loss")
    rooms.add_column("Room", style="cyan")
    rooms.add_column("Floor")
    rooms.add_column("Area", justify="right")
    rooms.add_column("Temp", justify="right")
    rooms.add_column("Loss (W)", justify="right")

    for floor in building.floors.values():
        for space in floor.spaces:
            rooms.add_row(
                space.name,
                floor.name,
                f"{space.floor_area:.1f} m²",
                f"{space.heat_loss.internal_temp:.0f}°C",
                f"{space.heat_loss.total:,.0f}",
            )
    console.print(rooms)

    totals = result.breakdown.totals
    summary = Table(title="Summary")
    summary.add_column("Item", style="cyan")
    summary.add_column("Value", style="white")
    summary.add_row("Floor area", f"{building.get_total_floor_area():.1f} m²")
    summary.add_row("Fabric loss", f"{totals.fabric_loss:,.0f} W")
    summary.add_row("Ventilation loss", f"{totals.ventilation_loss:,.0f} W")
    summary.add_row("Thermal bridging", f"{totals.thermal_bridging:,.0f} W")
    summary.add_row("Total heat loss", f"{building.total_heat_loss:.2f} kW")
    summary.add_row("Peak load", f"{result.breakdown.peak_load / 1000:.2f} kW")
    summary.add_row("Heat loss per m²", f"{result.heat_loss_per_area:.0f} W/m²")
    summary.add_row("Recommended size", f"{result.recommended_size['recommendedSize']} kW")
    console.print(summary)

    costs = Table(title="System Costs")
    costs.add_column("System", style="cyan")
    costs.add_column("Installed", justify="right")
    costs.add_column("Grant", justify="right")
    costs.add_column("Final", justify="right", style="green")
    costs.add_column("Range", justify="right")
    costs.add_column("Running/yr", justify="right")

    for label, key, cost in (
        ("Heat pump", "heatPump", result.heat_pump_cost),
        ("Gas boiler", "boiler", result.boiler_cost),
    ):
        cost_range = result.cost_ranges[key]
        costs.add_row(
            f"{label} {cost['capacity']} kW",
            f"£{cost['totalCost']:,.0f}",
            f"£{cost['grantAmount']:,.0f}",
            f"£{cost['finalCost']:,.0f}",
            f"£{cost_range['low']:,.0f}-£{cost_range['high']:,.0f}",
            f"£{result.running_costs[key]['annualCost']:,.0f}",
        )
    console.print(costs)


@app.command()
def upgrades(
    postcode: str = typer.Argument(..., help="UK postcode"),
    property_type: str = typer.Argument(..., help="Property template id"),
    package: Optional[str] = typer.Option(
        None, "--package", "-p", help="basic, intermediate or deep_retrofit (default: all)"
    ),
):
    """
    Compare heat loss savings of the fabric upgrade packages.
    """
    if package is not None and package not in UPGRADE_PACKAGES:
        _fail(ValidationError(f"Unknown upgrade package: '{package}'", field="package",
                              suggestions=list(UPGRADE_PACKAGES)))

    try:
        result = run_estimate(postcode, property_type)
    except ValidationError as e:
        _fail(e)

    calculator = HeatLossCalculator(result.climate.to_design_conditions(settings))
    keys = [package] if package else list(UPGRADE_PACKAGES)

    table = Table(title=f"Upgrade Packages - {result.building.property_name}")
    table.add_column("Package", style="cyan")
    table.add_column("Heat loss", justify="right")
    table.add_column("Savings", justify="right", style="green")
    table.add_column("%", justify="right")

    table.add_row("Current", f"{result.total_heat_loss:.2f} kW", "-", "-")
    for key in keys:
        impact = calculator.calculate_upgrade_impact(result.building, UPGRADE_PACKAGES[key].upgrades)
        table.add_row(
            UPGRADE_PACKAGES[key].name,
            f"{impact['newLoss']:.2f} kW",
            f"{impact['savings']:.2f} kW",
            f"{impact['savingsPercent']:.0f}%",
        )

    console.print(table)


@app.command()
def templates():
    """List the property templates."""
    table = Table(title="Property Templates")
    table.add_column("ID", style="cyan")
    table.add_column("Name")
    table.add_column("Era")
    table.add_column("Beds", justify="right")
    table.add_column("Floor area", justify="right")

    for template_id, template in PROPERTY_TEMPLATES.items():
        table.add_row(
            template_id,
            template["name"],
            template["era"],
            str(template["commonBedrooms"]),
            f"{calculate_floor_area(template):.1f} m²",
        )

    console.print(table)


@app.command()
def regions(
    coldest: Optional[int] = typer.Option(None, "--coldest", "-c", help="Show only the N coldest regions"),
):
    """List UK climate regions and their design conditions."""
    rows = get_coldest_regions(coldest) if coldest else get_all_regions()

    table = Table(title="Climate Regions")
    table.add_column("Key", style="cyan")
    table.add_column("Region")
    table.add_column("Design temp", justify="right")
    table.add_column("Degree days", justify="right")

    for region in rows:
        table.add_row(
            region["key"],
            region["name"],
            f"{region['externalDesignTemp']}°C",
            f"{region['heatingDegreeDays']:,}",
        )

    console.print(table)


@app.command()
def version():
    """Show version information."""
    from . import __version__
    console.print(f"heatcalc v{__version__}")


def main():
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
