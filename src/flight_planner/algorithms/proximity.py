"""Where on a route is a given position."""

from __future__ import annotations

from ..core.geodesics import get_distance_nm, get_point_to_segment_distance_nm
from ..core.routes import RouteLeg, RouteTrip
from ..core.waypoints import Waypoint


def closest_waypoint(trip: RouteTrip = None, location: tuple = None) -> Waypoint | None:
    """Waypoint of the trip nearest to a (lon, lat) location.

    Returns None if the trip has no legs.
    """
    if trip is None or len(trip.route) == 0:
        return None
    lon, lat = location
    return min(
        trip.waypoints,
        key=lambda wp: get_distance_nm(
            lon_start=lon, lat_start=lat, lon_end=wp.lon, lat_end=wp.lat
        ),
    )


def closest_route_leg(trip: RouteTrip = None, location: tuple = None) -> RouteLeg | None:
    """Leg of the trip whose great-circle segment is nearest to a location.

    Returns None if the trip has no legs.
    """
    if trip is None or len(trip.route) == 0:
        return None
    lon, lat = location
    return min(
        trip.route,
        key=lambda leg: get_point_to_segment_distance_nm(
            lon=lon,
            lat=lat,
            lon_start=leg.start.waypoint.lon,
            lat_start=leg.start.waypoint.lat,
            lon_end=leg.end.waypoint.lon,
            lat_end=leg.end.waypoint.lat,
        ),
    )
