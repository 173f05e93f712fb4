from ..core.geodesics import (
    get_distance_nm,
    get_initial_bearing_degrees,
    normalize_degrees,
)
from ..core.routes import CourseVector
from ..core.waypoints import Waypoint


def magnetic_declination(start: Waypoint = None, end: Waypoint = None) -> float:
    """Declination of the start waypoint, else of the end waypoint, else 0."""
    for wp in (start, end):
        if wp is not None and wp.declination is not None:
            return wp.declination
    return 0.0


def calculate_course(start: Waypoint = None, end: Waypoint = None) -> CourseVector:
    """Course vector of the great circle from start to end.

    The magnetic track subtracts the declination (east positive) from the
    true track. Both tracks are normalized into [0, 360).
    """
    track = get_initial_bearing_degrees(
        lon_start=start.lon,
        lat_start=start.lat,
        lon_end=end.lon,
        lat_end=end.lat,
    )
    return CourseVector(
        distance=get_distance_nm(
            lon_start=start.lon,
            lat_start=start.lat,
            lon_end=end.lon,
            lat_end=end.lat,
        ),
        track=track,
        magnetic_track=normalize_degrees(track - magnetic_declination(start, end)),
    )
