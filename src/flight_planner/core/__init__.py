"""Core layer: waypoints, winds, legs, trips, geodesics and altitude rules."""

from .config import Aircraft, EARTH_RADIUS_METERS, DEFAULT_RESERVE_FUEL_DURATION_MIN
from .exceptions import (
    FlightPlannerError,
    InsufficientWaypointsError,
    WindTriangleError,
    CourseNotHoldableError,
    ZeroGroundSpeedError,
    PlanFileError,
)
from .geodesics import (
    get_distance_nm,
    get_initial_bearing_degrees,
    get_point_to_segment_distance_nm,
    move_fwd,
    normalize_degrees,
    meters_to_nautical_miles,
    nautical_miles_to_meters,
)
from .wind import (
    Wind,
    WindVector,
    WindTriangle,
    CALM,
    calculate_wind_vector,
    calculate_wind_correction_angle,
    calculate_ground_speed,
    solve_wind_triangle,
)
from .altitude import (
    is_eastbound,
    is_westbound,
    calculate_vfr_cruising_altitude,
    flight_level,
)
from .waypoints import (
    Waypoint,
    WaypointKind,
    Runway,
    Frequency,
    RunwayWindVector,
    create_waypoint,
    calculate_runway_wind_vector,
    favored_runway,
    waypoint_qfe,
)
from .routes import (
    RouteSegment,
    CourseVector,
    RouteLegPerformance,
    RouteLeg,
    FuelBreakdown,
    RouteTrip,
    round_half_up,
)

__all__ = [
    "Aircraft",
    "EARTH_RADIUS_METERS",
    "DEFAULT_RESERVE_FUEL_DURATION_MIN",
    "FlightPlannerError",
    "InsufficientWaypointsError",
    "WindTriangleError",
    "CourseNotHoldableError",
    "ZeroGroundSpeedError",
    "PlanFileError",
    "get_distance_nm",
    "get_initial_bearing_degrees",
    "get_point_to_segment_distance_nm",
    "move_fwd",
    "normalize_degrees",
    "meters_to_nautical_miles",
    "nautical_miles_to_meters",
    "Wind",
    "WindVector",
    "WindTriangle",
    "CALM",
    "calculate_wind_vector",
    "calculate_wind_correction_angle",
    "calculate_ground_speed",
    "solve_wind_triangle",
    "is_eastbound",
    "is_westbound",
    "calculate_vfr_cruising_altitude",
    "flight_level",
    "Waypoint",
    "WaypointKind",
    "Runway",
    "Frequency",
    "RunwayWindVector",
    "create_waypoint",
    "calculate_runway_wind_vector",
    "favored_runway",
    "waypoint_qfe",
    "RouteSegment",
    "CourseVector",
    "RouteLegPerformance",
    "RouteLeg",
    "FuelBreakdown",
    "RouteTrip",
    "round_half_up",
]
