"""Per-leg flight performance from aircraft data and winds."""

from __future__ import annotations

import logging

from ..core.config import Aircraft
from ..core.exceptions import WindTriangleError
from ..core.geodesics import normalize_degrees
from ..core.routes import CourseVector, RouteLeg, RouteLegPerformance, RouteSegment
from ..core.wind import Wind, solve_wind_triangle
from .course import calculate_course


def calculate_performance(
    aircraft: Aircraft = None,
    course: CourseVector = None,
    wind: Wind = None,
) -> RouteLegPerformance:
    """Heading, groundspeed, duration and fuel for one leg.

    The cruise speed is used as true airspeed without any correction for
    altitude or temperature.

    Parameters
    ----------
    aircraft : Aircraft
        Aircraft with a cruise speed in knots and optionally a fuel
        consumption in liters per hour.
    course : CourseVector
        Course of the leg.
    wind : Wind
        Wind encountered on the leg.

    Returns
    -------
    RouteLegPerformance

    Raises
    ------
    WindTriangleError
        If the wind does not allow holding the track at cruise speed.
    """
    true_airspeed = aircraft.cruise_speed
    triangle = solve_wind_triangle(
        wind=wind, true_track=course.track, true_airspeed=true_airspeed
    )
    wca = triangle.wind_correction_angle
    duration = course.distance / triangle.ground_speed * 60.0
    fuel_consumption = (
        aircraft.fuel_consumption * duration / 60.0
        if aircraft.fuel_consumption is not None
        else None
    )
    return RouteLegPerformance(
        head_wind=triangle.wind_vector.headwind,
        cross_wind=triangle.wind_vector.crosswind,
        true_airspeed=true_airspeed,
        wind_correction_angle=wca,
        true_heading=triangle.true_heading,
        magnetic_heading=normalize_degrees(course.magnetic_track + wca),
        ground_speed=triangle.ground_speed,
        duration=duration,
        fuel_consumption=fuel_consumption,
    )


def calculate_route_leg(
    start: RouteSegment = None,
    end: RouteSegment = None,
    aircraft: Aircraft | None = None,
) -> RouteLeg:
    """Course and, where possible, performance of the leg start to end.

    The wind attached to the end waypoint is used for the leg. Performance
    is left out when the aircraft has no cruise speed or no wind is known.
    If the wind triangle has no solution, performance is left out as well
    and the reason is recorded in ``performance_issue``.
    """
    course = calculate_course(start.waypoint, end.waypoint)
    wind = end.waypoint.wind

    if aircraft is None or not aircraft.has_cruise_speed or wind is None:
        return RouteLeg(start=start, end=end, course=course, wind=wind)

    try:
        performance = calculate_performance(aircraft=aircraft, course=course, wind=wind)
    except WindTriangleError as err:
        logging.warning(
            "leg %s -> %s: %s", start.waypoint, end.waypoint, err.message
        )
        return RouteLeg(
            start=start,
            end=end,
            course=course,
            wind=wind,
            performance_issue=err.issue,
        )
    return RouteLeg(
        start=start, end=end, course=course, wind=wind, performance=performance
    )
