"""Great-circle geometry on a spherical earth.

Distances are in nautical miles and angles in degrees throughout. All
functions share one spherical ``pyproj.Geod`` so that distances, bearings and
forward moves are consistent with each other.
"""

import numpy as np
import pint
import pyproj

from .config import EARTH_RADIUS_METERS

# Create unit registry and sphere once at module level
_ureg = pint.UnitRegistry()
_geod = pyproj.Geod(a=EARTH_RADIUS_METERS, b=EARTH_RADIUS_METERS)


def meters_to_nautical_miles(distance_meters: float) -> float:
    """Convert distance from meters to nautical miles."""
    return float((distance_meters * _ureg.meter) / _ureg.nautical_mile)


def nautical_miles_to_meters(distance_nm: float) -> float:
    """Convert distance from nautical miles to meters."""
    return float((distance_nm * _ureg.nautical_mile) / _ureg.meter)


def normalize_degrees(angle: float) -> float:
    """Map an angle in degrees into [0, 360)."""
    normalized = float(np.mod(angle, 360.0))
    # np.mod(-1e-17, 360.0) rounds to 360.0
    return 0.0 if normalized >= 360.0 else normalized


def _inverse(lon_start, lat_start, lon_end, lat_end):
    fwd_az, _, distance_meters = _geod.inv(
        lons1=lon_start,
        lats1=lat_start,
        lons2=lon_end,
        lats2=lat_end,
    )
    return fwd_az, distance_meters


def get_distance_nm(
    lon_start: float = None,
    lat_start: float = None,
    lon_end: float = None,
    lat_end: float = None,
) -> float:
    """Calculate great-circle distance between two points.

    Parameters
    ----------
    lon_start : float
        Starting longitude in degrees
    lat_start : float
        Starting latitude in degrees
    lon_end : float
        Ending longitude in degrees
    lat_end : float
        Ending latitude in degrees

    Returns
    -------
    float
        Distance in nautical miles
    """
    _, distance_meters = _inverse(lon_start, lat_start, lon_end, lat_end)
    return meters_to_nautical_miles(distance_meters)


def get_initial_bearing_degrees(
    lon_start: float = None,
    lat_start: float = None,
    lon_end: float = None,
    lat_end: float = None,
) -> float:
    """Calculate the initial true bearing from start to end.

    Parameters
    ----------
    lon_start : float
        Starting longitude in degrees
    lat_start : float
        Starting latitude in degrees
    lon_end : float
        Ending longitude in degrees
    lat_end : float
        Ending latitude in degrees

    Returns
    -------
    float
        Bearing in degrees, normalized into [0, 360). Coincident points
        have no defined bearing and yield 0.
    """
    fwd_az, distance_meters = _inverse(lon_start, lat_start, lon_end, lat_end)
    if distance_meters == 0:
        return 0.0
    return normalize_degrees(fwd_az)


def move_fwd(
    lon: float = None,
    lat: float = None,
    azimuth_degrees: float = None,
    distance_nm: float = None,
) -> tuple:
    """Move forward from a point along a great circle.

    Parameters
    ----------
    lon : float
        Starting longitude in degrees
    lat : float
        Starting latitude in degrees
    azimuth_degrees : float
        Forward azimuth in degrees
    distance_nm : float
        Distance to move in nautical miles

    Returns
    -------
    tuple of float
        New (longitude, latitude) in degrees
    """
    lon_new, lat_new, _ = _geod.fwd(
        lons=lon,
        lats=lat,
        az=azimuth_degrees,
        dist=nautical_miles_to_meters(distance_nm),
        radians=False,
    )
    return lon_new, lat_new


def get_point_to_segment_distance_nm(
    lon: float = None,
    lat: float = None,
    lon_start: float = None,
    lat_start: float = None,
    lon_end: float = None,
    lat_end: float = None,
) -> float:
    """Distance from a point to the great-circle segment start-end.

    The point is projected onto the great circle through start and end using
    the cross-track and along-track distances. If the projection falls
    outside the segment, the distance to the nearer endpoint is returned.

    Parameters
    ----------
    lon, lat : float
        Point in degrees
    lon_start, lat_start : float
        Segment start in degrees
    lon_end, lat_end : float
        Segment end in degrees

    Returns
    -------
    float
        Distance in nautical miles
    """
    az_segment, length_meters = _inverse(lon_start, lat_start, lon_end, lat_end)
    az_point, dist_start_meters = _inverse(lon_start, lat_start, lon, lat)
    _, dist_end_meters = _inverse(lon_end, lat_end, lon, lat)

    if length_meters == 0 or dist_start_meters == 0:
        return meters_to_nautical_miles(min(dist_start_meters, dist_end_meters))

    # angular distances on the unit sphere
    delta_point = dist_start_meters / EARTH_RADIUS_METERS
    delta_segment = length_meters / EARTH_RADIUS_METERS
    theta = np.deg2rad(az_point - az_segment)

    delta_cross = np.arcsin(np.clip(np.sin(delta_point) * np.sin(theta), -1.0, 1.0))
    delta_along = np.arccos(
        np.clip(np.cos(delta_point) / np.cos(delta_cross), -1.0, 1.0)
    ) * np.sign(np.cos(theta))

    if delta_along <= 0:
        return meters_to_nautical_miles(dist_start_meters)
    if delta_along >= delta_segment:
        return meters_to_nautical_miles(dist_end_meters)
    return meters_to_nautical_miles(abs(delta_cross) * EARTH_RADIUS_METERS)
