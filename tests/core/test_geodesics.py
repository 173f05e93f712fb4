from flight_planner.core.geodesics import (
    get_distance_nm,
    get_initial_bearing_degrees,
    get_point_to_segment_distance_nm,
    meters_to_nautical_miles,
    move_fwd,
    nautical_miles_to_meters,
    normalize_degrees,
)

import numpy as np

import pytest


def test_nautical_mile_conversion():
    """Test conversion between meters and nautical miles."""
    assert np.isclose(meters_to_nautical_miles(1852.0), 1.0)
    assert np.isclose(nautical_miles_to_meters(1.0), 1852.0)
    assert meters_to_nautical_miles(0.0) == 0.0


@pytest.mark.parametrize(
    "angle, expected",
    [(0, 0), (360, 0), (-90, 270), (450, 90), (-720, 0), (359.5, 359.5)],
)
def test_normalize_degrees(angle, expected):
    assert np.isclose(normalize_degrees(angle), expected)
    assert 0 <= normalize_degrees(angle) < 360


def test_normalize_degrees_tiny_negative():
    """Tiny negative angles must not map to 360."""
    assert normalize_degrees(-1e-17) < 360.0


def test_one_degree_along_equator():
    """One degree of arc is about 60 nm."""
    distance = get_distance_nm(lon_start=0, lat_start=0, lon_end=1, lat_end=0)
    np.testing.assert_almost_equal(distance, 60.04, decimal=2)


def test_one_degree_along_meridian():
    distance = get_distance_nm(lon_start=0, lat_start=0, lon_end=0, lat_end=1)
    np.testing.assert_almost_equal(distance, 60.04, decimal=2)


@pytest.mark.parametrize(
    "start, end",
    [
        ((8.645, 49.961), (9.064, 49.939)),
        ((-0.46, 51.47), (2.55, 49.01)),
        ((10.0, -30.0), (-20.0, 10.0)),
    ],
)
def test_distance_is_symmetric(start, end):
    forward = get_distance_nm(*start, *end)
    backward = get_distance_nm(*end, *start)
    np.testing.assert_almost_equal(forward, backward, decimal=6)


def test_distance_of_coincident_points():
    assert get_distance_nm(5.0, 45.0, 5.0, 45.0) == 0


@pytest.mark.parametrize(
    "end, expected",
    [((1, 0), 90), ((0, 1), 0), ((-1, 0), 270), ((0, -1), 180)],
)
def test_bearing_cardinal_directions(end, expected):
    bearing = get_initial_bearing_degrees(0, 0, *end)
    np.testing.assert_almost_equal(bearing, expected, decimal=6)


def test_bearing_of_coincident_points_is_zero():
    assert get_initial_bearing_degrees(8.0, 50.0, 8.0, 50.0) == 0.0


def test_reciprocal_bearings_at_equator():
    """Along the equator the return bearing is exactly reciprocal."""
    outbound = get_initial_bearing_degrees(0, 0, 3, 0)
    inbound = get_initial_bearing_degrees(3, 0, 0, 0)
    np.testing.assert_almost_equal(normalize_degrees(inbound - outbound), 180)


def test_reciprocal_bearings_short_leg():
    """On short legs the return bearing is reciprocal within a degree."""
    outbound = get_initial_bearing_degrees(8.645, 49.961, 9.064, 49.939)
    inbound = get_initial_bearing_degrees(9.064, 49.939, 8.645, 49.961)
    assert abs(normalize_degrees(inbound - outbound) - 180) < 1.0


def test_move_fwd_round_trip_with_distance():
    lon, lat = move_fwd(lon=0, lat=0, azimuth_degrees=90, distance_nm=60)
    np.testing.assert_almost_equal(lat, 0, decimal=6)
    np.testing.assert_almost_equal(
        get_distance_nm(0, 0, lon, lat), 60.0, decimal=6
    )


def test_point_to_segment_distance_abeam():
    """A point one degree north of the middle of an equator segment."""
    distance = get_point_to_segment_distance_nm(
        lon=1, lat=1, lon_start=0, lat_start=0, lon_end=2, lat_end=0
    )
    np.testing.assert_almost_equal(distance, 60.04, decimal=2)


def test_point_to_segment_distance_on_segment():
    distance = get_point_to_segment_distance_nm(
        lon=1, lat=0, lon_start=0, lat_start=0, lon_end=2, lat_end=0
    )
    assert distance < 1e-6


def test_point_to_segment_distance_beyond_end():
    """Beyond the end the distance is the one to the end point."""
    distance = get_point_to_segment_distance_nm(
        lon=3, lat=0, lon_start=0, lat_start=0, lon_end=2, lat_end=0
    )
    np.testing.assert_almost_equal(distance, get_distance_nm(2, 0, 3, 0), decimal=6)


def test_point_to_segment_distance_before_start():
    distance = get_point_to_segment_distance_nm(
        lon=-1, lat=0.5, lon_start=0, lat_start=0, lon_end=2, lat_end=0
    )
    np.testing.assert_almost_equal(
        distance, get_distance_nm(0, 0, -1, 0.5), decimal=6
    )


def test_point_to_degenerate_segment():
    distance = get_point_to_segment_distance_nm(
        lon=0, lat=1, lon_start=0, lat_start=0, lon_end=0, lat_end=0
    )
    np.testing.assert_almost_equal(distance, 60.04, decimal=2)
