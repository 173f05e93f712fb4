"""Command-line interface for nav log calculations.

Reads a JSON flight plan, prints the nav log table and totals and optionally
writes the complete trip as JSON.
"""

from dataclasses import replace
from datetime import datetime
from pathlib import Path
from typing import Optional
import logging

import click

from ..core.exceptions import FlightPlannerError
from ..core.routes import RouteTrip
from .config import load_plan
from .navlog import calculate_nav_log


def _format_totals(trip: RouteTrip) -> str:
    fuel = trip.fuel_breakdown
    lines = [
        f"Total distance: {trip.total_distance} nm",
        f"Total duration: {trip.total_duration} min",
        f"Trip fuel: {fuel.trip} l, reserve: {fuel.reserve} l",
        f"Total fuel required: {trip.total_trip_fuel} l",
    ]
    if fuel.alternate is not None:
        lines.append(f"Alternate fuel: {fuel.alternate} l")
    if trip.arrival_date is not None:
        lines.append(f"Arrival: {trip.arrival_date.isoformat(timespec='minutes')}")
    return "\n".join(lines)


@click.command()
@click.argument("plan_file", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--altitude",
    type=float,
    default=None,
    help="Default altitude in feet for intermediate waypoints without one.",
)
@click.option(
    "--departure",
    type=str,
    default=None,
    help="Departure time in ISO format (e.g., 2024-06-01T09:30+00:00).",
)
@click.option(
    "--reserve-duration",
    type=float,
    default=None,
    help="Reserve fuel duration in minutes.",
)
@click.option(
    "--output",
    type=click.Path(dir_okay=False),
    default=None,
    help="Write the nav log as JSON to this file.",
)
def main(
    plan_file: str,
    altitude: Optional[float],
    departure: Optional[str],
    reserve_duration: Optional[float],
    output: Optional[str],
):
    """Calculate the nav log of the flight plan in PLAN_FILE."""
    logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")

    overrides = {}
    if altitude is not None:
        overrides["altitude"] = altitude
    if departure is not None:
        try:
            overrides["departure_date"] = datetime.fromisoformat(departure)
        except ValueError as err:
            raise click.BadParameter(str(err), param_hint="--departure") from err
    if reserve_duration is not None:
        overrides["reserve_fuel_duration"] = reserve_duration

    try:
        plan = load_plan(plan_file)
        trip = calculate_nav_log(
            plan.segments,
            aircraft=plan.aircraft,
            options=replace(plan.options, **overrides),
        )
    except FlightPlannerError as err:
        raise click.ClickException(err.message) from err

    click.echo(trip.data_frame.to_string(index=False))
    click.echo()
    click.echo(_format_totals(trip))

    if output is not None:
        trip.dump_json(Path(output))
        click.echo(f"Nav log saved to {output}")

    return trip


if __name__ == "__main__":
    main()
