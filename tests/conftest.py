"""Pytest configuration and shared fixtures."""

import pytest

from flight_planner.core import (
    Aircraft,
    CALM,
    RouteSegment,
    Runway,
    Waypoint,
)


@pytest.fixture
def aircraft():
    """Trainer cruising at 120 kt and burning 24 l/h."""
    return Aircraft(
        registration="D-EABC",
        manufacturer="Cessna",
        model="172",
        cruise_speed=120.0,
        fuel_consumption=24.0,
        fuel_capacity=150.0,
    )


@pytest.fixture
def equator_segments():
    """One degree eastbound along the equator with calm wind at the end."""
    return (
        RouteSegment(waypoint=Waypoint(name="A", lon=0.0, lat=0.0)),
        RouteSegment(waypoint=Waypoint(name="B", lon=1.0, lat=0.0, wind=CALM)),
    )


@pytest.fixture
def three_aerodrome_route():
    """Departure and destination aerodromes with a reporting point between."""
    departure = Waypoint.aerodrome(
        name="Egelsbach",
        icao="EDFE",
        lon=8.645,
        lat=49.961,
        elevation=384.0,
        runways=(Runway(designator="09", heading=86.0), Runway("27", 266.0)),
        wind=CALM,
    )
    via = Waypoint.reporting_point(
        name="ROXIL", lon=9.2, lat=50.1, compulsory=True, wind=CALM
    )
    destination = Waypoint.aerodrome(
        name="Aschaffenburg",
        icao="EDFC",
        lon=9.064,
        lat=49.939,
        elevation=410.0,
        wind=CALM,
    )
    return departure, via, destination
