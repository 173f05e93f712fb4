"""Exceptions raised by the flight planner."""

from __future__ import annotations


class FlightPlannerError(Exception):
    """Base class of all flight planner errors.

    Each error carries a short machine-readable ``code``.
    """

    code = "FLIGHT_PLANNER_ERROR"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InsufficientWaypointsError(FlightPlannerError, ValueError):
    """A route needs at least a departure and an arrival."""

    code = "INSUFFICIENT_WAYPOINTS"

    def __init__(self, provided_count: int = 0):
        self.provided_count = provided_count
        super().__init__(
            "At least departure and arrival waypoints are required. "
            f"Provided: {provided_count} waypoint(s)"
        )


class WindTriangleError(FlightPlannerError, ValueError):
    """The wind triangle has no physical solution."""

    code = "WIND_TRIANGLE_ERROR"
    issue = "wind_triangle"


class CourseNotHoldableError(WindTriangleError):
    """Crosswind exceeds true airspeed, no heading holds the track."""

    code = "COURSE_NOT_HOLDABLE"
    issue = "cannot_hold_course"

    def __init__(self, cross_wind: float, true_airspeed: float):
        self.cross_wind = cross_wind
        self.true_airspeed = true_airspeed
        super().__init__(
            f"Crosswind of {abs(cross_wind):.1f} kt exceeds true airspeed "
            f"of {true_airspeed:.1f} kt, course cannot be maintained"
        )


class ZeroGroundSpeedError(WindTriangleError):
    """Groundspeed collapses to zero, the leg would never end."""

    code = "ZERO_GROUND_SPEED"
    issue = "zero_ground_speed"

    def __init__(self, ground_speed: float):
        self.ground_speed = ground_speed
        super().__init__(
            f"Groundspeed of {ground_speed:.1f} kt, leg cannot be completed"
        )


class PlanFileError(FlightPlannerError, ValueError):
    """A plan file could not be turned into segments and options."""

    code = "PLAN_FILE_ERROR"
