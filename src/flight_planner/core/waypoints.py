from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Iterable, Tuple

from shapely.geometry import Point

from .geodesics import get_distance_nm, get_initial_bearing_degrees
from .wind import Wind, calculate_wind_vector

# Standard pressure lapse near the surface, feet per hPa
PRESSURE_LAPSE_FT_PER_HPA = 27.0


class WaypointKind(Enum):
    WAYPOINT = "waypoint"
    REPORTING_POINT = "reporting_point"
    AERODROME = "aerodrome"


@dataclass(frozen=True)
class Runway:
    """Runway with its designator and magnetic heading in degrees."""

    designator: str
    heading: float
    length: str | None = None
    surface: str | None = None
    is_active: bool = True


@dataclass(frozen=True)
class Frequency:
    type: str
    name: str
    value: str


@dataclass(frozen=True)
class RunwayWindVector:
    """Rounded wind components on a runway."""

    runway: Runway
    wind_angle: float
    headwind: int
    crosswind: int


@dataclass(frozen=True)
class Waypoint:
    """Named location on a route.

    One record covers plain waypoints, reporting points and aerodromes; the
    ``kind`` tells them apart and only the matching variant fields are
    meaningful. The attached ``wind`` is filled in by whoever resolves the
    weather, through ``with_wind``.
    """

    name: str
    lon: float
    lat: float
    kind: WaypointKind = WaypointKind.WAYPOINT
    icao: str | None = None
    iata: str | None = None
    elevation: float | None = None
    declination: float | None = None
    wind: Wind | None = None
    # aerodromes
    runways: Tuple[Runway, ...] = ()
    frequencies: Tuple[Frequency, ...] = ()
    ppr: bool = False
    # reporting points
    compulsory: bool = False

    @classmethod
    def aerodrome(
        cls,
        name: str = None,
        lon: float = None,
        lat: float = None,
        icao: str | None = None,
        runways: Iterable[Runway] = (),
        frequencies: Iterable[Frequency] = (),
        **kwargs,
    ):
        """Construct an aerodrome waypoint."""
        return cls(
            name=name,
            lon=lon,
            lat=lat,
            kind=WaypointKind.AERODROME,
            icao=icao,
            runways=tuple(runways),
            frequencies=tuple(frequencies),
            **kwargs,
        )

    @classmethod
    def reporting_point(
        cls,
        name: str = None,
        lon: float = None,
        lat: float = None,
        compulsory: bool = False,
        **kwargs,
    ):
        """Construct a reporting point."""
        return cls(
            name=name,
            lon=lon,
            lat=lat,
            kind=WaypointKind.REPORTING_POINT,
            compulsory=compulsory,
            **kwargs,
        )

    @property
    def is_aerodrome(self) -> bool:
        return self.kind is WaypointKind.AERODROME

    @property
    def is_reporting_point(self) -> bool:
        return self.kind is WaypointKind.REPORTING_POINT

    @property
    def has_runways(self) -> bool:
        return self.is_aerodrome and len(self.runways) > 0

    @property
    def location(self) -> tuple:
        """(lon, lat) in degrees."""
        return self.lon, self.lat

    @property
    def point(self):
        """Point geometry with x=lon and y=lat."""
        return Point(self.lon, self.lat)

    def with_wind(self, wind: Wind | None):
        """Copy of this waypoint with a wind observation attached."""
        return replace(self, wind=wind)

    def distance_to(self, other: Waypoint) -> float:
        """Great-circle distance to other in nautical miles."""
        return get_distance_nm(
            lon_start=self.lon,
            lat_start=self.lat,
            lon_end=other.lon,
            lat_end=other.lat,
        )

    def bearing_to(self, other: Waypoint) -> float:
        """Initial true bearing to other in degrees."""
        return get_initial_bearing_degrees(
            lon_start=self.lon,
            lat_start=self.lat,
            lon_end=other.lon,
            lat_end=other.lat,
        )

    def __str__(self):
        return self.icao or self.name

    @classmethod
    def from_dict(cls, data: dict):
        """Construct waypoint from dict as found in plan files."""
        data = dict(data)
        if "location" in data:
            lon, lat = data.pop("location")
        else:
            lon, lat = data.pop("lon"), data.pop("lat")
        kind = WaypointKind(data.pop("kind", WaypointKind.WAYPOINT.value))
        wind = data.pop("wind", None)
        runways = tuple(Runway(**r) for r in data.pop("runways", ()))
        frequencies = tuple(Frequency(**f) for f in data.pop("frequencies", ()))
        return cls(
            lon=float(lon),
            lat=float(lat),
            kind=kind,
            wind=Wind.from_dict(wind) if wind is not None else None,
            runways=runways,
            frequencies=frequencies,
            **data,
        )

    def to_dict(self) -> dict:
        """Simple dict representation of the waypoint."""
        return {
            "name": self.name,
            "kind": self.kind.value,
            "icao": self.icao,
            "location": [self.lon, self.lat],
            "elevation": self.elevation,
            "declination": self.declination,
            "wind": self.wind.to_dict() if self.wind is not None else None,
        }


def create_waypoint(location: tuple = None, name: str = "locationPoint") -> Waypoint:
    """Plain waypoint at a (lon, lat) location."""
    lon, lat = location
    return Waypoint(name=name, lon=lon, lat=lat)


def calculate_runway_wind_vector(runway: Runway, wind: Wind) -> RunwayWindVector:
    """Wind components on a runway, rounded to whole knots."""
    wind_vector = calculate_wind_vector(wind, runway.heading)
    return RunwayWindVector(
        runway=runway,
        wind_angle=wind_vector.angle,
        headwind=int(round(wind_vector.headwind)),
        crosswind=int(round(wind_vector.crosswind)),
    )


def favored_runway(runways: Iterable[Runway], wind: Wind) -> Runway | None:
    """Runway with the largest headwind component, None without runways."""
    best_runway = None
    max_headwind = -float("inf")
    for runway in runways:
        headwind = calculate_wind_vector(wind, runway.heading).headwind
        if headwind > max_headwind:
            max_headwind = headwind
            best_runway = runway
    return best_runway


def waypoint_qfe(waypoint: Waypoint, qnh: float | None) -> float | None:
    """QFE in hPa at the waypoint elevation, None if elevation or QNH is unknown."""
    if waypoint.elevation is None or qnh is None:
        return None
    return round(qnh - waypoint.elevation / PRESSURE_LAPSE_FT_PER_HPA, 2)
