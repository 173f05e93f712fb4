from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
import json
from pathlib import Path
from typing import Tuple

from ..core.config import Aircraft, DEFAULT_RESERVE_FUEL_DURATION_MIN
from ..core.exceptions import PlanFileError
from ..core.routes import RouteSegment
from ..core.waypoints import Waypoint


@dataclass(frozen=True)
class NavLogOptions:
    """Options of a nav log calculation.

    Altitudes in feet, durations in minutes, fuel in liters. Without a
    departure date the time of the calculation is used.
    """

    departure_date: datetime | None = None
    altitude: float | None = None
    alternate_segment: RouteSegment | None = None
    reserve_fuel_duration: float = DEFAULT_RESERVE_FUEL_DURATION_MIN
    reserve_fuel: float | None = None
    taxi_fuel: float | None = None
    takeoff_fuel: float | None = None
    landing_fuel: float | None = None


@dataclass(frozen=True)
class FlightPlan:
    """Everything needed to calculate a nav log, as read from a plan file."""

    segments: Tuple[RouteSegment, ...]
    aircraft: Aircraft = Aircraft()
    options: NavLogOptions = NavLogOptions()


def _segment_from_dict(data: dict) -> RouteSegment:
    data = dict(data)
    altitude = data.pop("altitude", None)
    return RouteSegment(
        waypoint=Waypoint.from_dict(data),
        altitude=float(altitude) if altitude is not None else None,
    )


def plan_from_dict(data: dict) -> FlightPlan:
    """Construct a flight plan from a dict.

    Expected keys are ``waypoints`` (list of waypoint dicts, each with an
    optional ``altitude``), and optionally ``alternate``, ``aircraft`` and
    ``options``.
    """
    try:
        segments = tuple(_segment_from_dict(wp) for wp in data["waypoints"])
        alternate = data.get("alternate")
        options = dict(data.get("options", {}))
        departure_date = options.pop("departure_date", None)
        if departure_date is not None:
            departure_date = datetime.fromisoformat(departure_date)
        if "reserve_fuel_duration" in options:
            options["reserve_fuel_duration"] = float(options["reserve_fuel_duration"])
        return FlightPlan(
            segments=segments,
            aircraft=Aircraft(**data.get("aircraft", {})),
            options=NavLogOptions(
                departure_date=departure_date,
                alternate_segment=(
                    _segment_from_dict(alternate) if alternate is not None else None
                ),
                **options,
            ),
        )
    except (KeyError, TypeError, ValueError) as err:
        raise PlanFileError(f"Invalid flight plan: {err!r}") from err


def load_plan(path: Path | str) -> FlightPlan:
    """Read a flight plan from a JSON file."""
    path = Path(path)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as err:
        raise PlanFileError(f"{path} is not valid JSON: {err}") from err
    return plan_from_dict(data)
