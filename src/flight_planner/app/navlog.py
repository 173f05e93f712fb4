from __future__ import annotations

from dataclasses import replace
from datetime import datetime, timedelta, timezone
import logging
from typing import Iterable, Sequence

import numpy as np

from ..algorithms.performance import calculate_route_leg
from ..core.config import Aircraft
from ..core.exceptions import InsufficientWaypointsError
from ..core.routes import FuelBreakdown, RouteSegment, RouteTrip, round_half_up
from ..core.waypoints import Waypoint
from .config import NavLogOptions


def waypoints_to_segments(
    waypoints: Iterable[Waypoint] = None, altitude: float | None = None
) -> tuple:
    """Route segments for waypoints, all at the same optional altitude."""
    return tuple(RouteSegment(waypoint=wp, altitude=altitude) for wp in waypoints)


def _endpoint_segment(segment: RouteSegment) -> RouteSegment:
    """Endpoints fly at the elevation of their waypoint where known."""
    if segment.waypoint.elevation is not None:
        return replace(segment, altitude=segment.waypoint.elevation)
    return segment


def _round_altitude(segment: RouteSegment) -> RouteSegment:
    if segment.altitude is None:
        return segment
    return replace(segment, altitude=round_half_up(segment.altitude))


def prepare_segments(
    segments: Sequence[RouteSegment] = None, altitude: float | None = None
) -> tuple:
    """Assign altitudes to a copy of the segments.

    Departure and destination take the elevation of their waypoint where
    known, regardless of the default altitude. Intermediate segments
    without altitude take the default altitude. All altitudes are rounded
    to whole feet.
    """
    last = len(segments) - 1
    prepared = []
    for n, segment in enumerate(segments):
        if n in (0, last):
            segment = _endpoint_segment(segment)
        elif segment.altitude is None and altitude is not None:
            segment = replace(segment, altitude=altitude)
        prepared.append(_round_altitude(segment))
    return tuple(prepared)


def reserve_fuel_required(
    aircraft: Aircraft | None = None, options: NavLogOptions = NavLogOptions()
) -> float:
    """Reserve fuel in liters.

    An explicit reserve wins; otherwise the reserve duration is flown at the
    aircraft's fuel consumption. Without either the reserve is zero.
    """
    if options.reserve_fuel is not None:
        return options.reserve_fuel
    if aircraft is not None and aircraft.fuel_consumption:
        return aircraft.fuel_consumption * options.reserve_fuel_duration / 60.0
    return 0.0


def calculate_nav_log(
    segments: Sequence[RouteSegment] = None,
    aircraft: Aircraft | None = None,
    options: NavLogOptions = NavLogOptions(),
) -> RouteTrip:
    """Calculate the nav log of a route.

    Parameters
    ----------
    segments : sequence of RouteSegment
        Route from departure to destination. The segments are not modified.
    aircraft : Aircraft, optional
        Without a cruise speed no leg gets performance figures.
    options : NavLogOptions
        Departure date, default altitude, alternate and fuel policy.

    Returns
    -------
    RouteTrip
        Legs with unrounded values and rounded totals.

    Raises
    ------
    InsufficientWaypointsError
        If fewer than two segments are given.

    Notes
    -----
    Totals are summed from unrounded leg values and rounded afterwards.
    Arrival dates are cumulative over the legs with performance; legs
    without performance have no arrival date and add no time. The
    alternate segment takes the default altitude if it has none, like an
    intermediate segment, and ignores its elevation. The alternate leg's fuel is reported in the breakdown but not included in
    the total trip fuel.
    """
    segments = tuple(segments)
    if len(segments) < 2:
        raise InsufficientWaypointsError(len(segments))

    departure_date = options.departure_date or datetime.now(timezone.utc)
    segments = prepare_segments(segments, altitude=options.altitude)

    legs = [
        calculate_route_leg(start, end, aircraft)
        for start, end in zip(segments[:-1], segments[1:])
    ]

    route_alternate = None
    if options.alternate_segment is not None:
        alternate_segment = options.alternate_segment
        if alternate_segment.altitude is None and options.altitude is not None:
            alternate_segment = replace(alternate_segment, altitude=options.altitude)
        alternate_segment = _round_altitude(alternate_segment)
        route_alternate = calculate_route_leg(segments[-1], alternate_segment, aircraft)

    distances = np.array([leg.course.distance for leg in legs])
    durations = np.array(
        [leg.performance.duration if leg.performance else 0.0 for leg in legs]
    )
    fuels = np.array(
        [
            (leg.performance.fuel_consumption or 0.0) if leg.performance else 0.0
            for leg in legs
        ]
    )
    elapsed_minutes = np.cumsum(durations)

    legs = tuple(
        (
            replace(
                leg, arrival_date=departure_date + timedelta(minutes=float(elapsed))
            )
            if leg.performance is not None
            else leg
        )
        for leg, elapsed in zip(legs, elapsed_minutes)
    )

    total_distance = float(distances.sum())
    total_duration = float(durations.sum())
    trip_fuel = float(fuels.sum())

    reserve_fuel = reserve_fuel_required(aircraft=aircraft, options=options)
    total_trip_fuel = (
        trip_fuel
        + reserve_fuel
        + (options.takeoff_fuel or 0.0)
        + (options.landing_fuel or 0.0)
        + (options.taxi_fuel or 0.0)
    )

    alternate_fuel = None
    if route_alternate is not None and route_alternate.performance is not None:
        alternate_fuel = route_alternate.performance.fuel_consumption

    fuel_breakdown = FuelBreakdown(
        trip=round_half_up(trip_fuel),
        reserve=round_half_up(reserve_fuel),
        takeoff=round_half_up(options.takeoff_fuel),
        landing=round_half_up(options.landing_fuel),
        taxi=round_half_up(options.taxi_fuel),
        alternate=round_half_up(alternate_fuel),
    )

    missing = sum(leg.performance is None for leg in legs)
    logging.info(
        "nav log with %d legs: %.1f nm, %.1f min, %.1f l trip fuel "
        "(%d legs without performance)",
        len(legs),
        total_distance,
        total_duration,
        total_trip_fuel,
        missing,
    )

    return RouteTrip(
        route=legs,
        route_alternate=route_alternate,
        total_distance=round_half_up(total_distance),
        total_duration=round_half_up(total_duration),
        total_trip_fuel=round_half_up(total_trip_fuel),
        fuel_breakdown=fuel_breakdown,
        departure_date=departure_date,
        arrival_date=departure_date + timedelta(minutes=total_duration),
        generated_at=datetime.now(timezone.utc),
    )
