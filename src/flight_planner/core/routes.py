from __future__ import annotations

from dataclasses import dataclass, asdict, replace
from datetime import datetime
import json
from pathlib import Path
from typing import Any, Literal, Tuple

import numpy as np
import pandas as pd
from shapely.geometry import LineString

from .waypoints import Waypoint
from .wind import Wind

PerformanceIssue = Literal["cannot_hold_course", "zero_ground_speed"]


def round_half_up(value):
    """Round to an integer with halves rounded up, passing None through."""
    return None if value is None else int(np.floor(value + 0.5))


@dataclass(frozen=True)
class RouteSegment:
    """A waypoint with an optional altitude in feet."""

    waypoint: Waypoint
    altitude: float | None = None

    def to_dict(self) -> dict[str, Any]:
        return {"waypoint": self.waypoint.to_dict(), "altitude": self.altitude}


@dataclass(frozen=True)
class CourseVector:
    """Distance in nautical miles with true and magnetic track in degrees."""

    distance: float
    track: float
    magnetic_track: float

    def rounded(self):
        return CourseVector(
            distance=round_half_up(self.distance),
            track=round_half_up(self.track) % 360,
            magnetic_track=round_half_up(self.magnetic_track) % 360,
        )


@dataclass(frozen=True)
class RouteLegPerformance:
    """Flight performance on one leg.

    Winds and speeds in knots, angles in degrees, duration in minutes and
    fuel in liters.
    """

    head_wind: float
    cross_wind: float
    true_airspeed: float
    wind_correction_angle: float
    true_heading: float
    magnetic_heading: float
    ground_speed: float
    duration: float
    fuel_consumption: float | None = None

    def rounded(self):
        """Copy with all values rounded for display."""
        return RouteLegPerformance(
            head_wind=round_half_up(self.head_wind),
            cross_wind=round_half_up(self.cross_wind),
            true_airspeed=round_half_up(self.true_airspeed),
            wind_correction_angle=round_half_up(self.wind_correction_angle),
            true_heading=round_half_up(self.true_heading) % 360,
            magnetic_heading=round_half_up(self.magnetic_heading) % 360,
            ground_speed=round_half_up(self.ground_speed),
            duration=round_half_up(self.duration),
            fuel_consumption=round_half_up(self.fuel_consumption),
        )


@dataclass(frozen=True)
class RouteLeg:
    """A leg connecting two route segments."""

    start: RouteSegment
    end: RouteSegment
    course: CourseVector
    wind: Wind | None = None
    arrival_date: datetime | None = None
    performance: RouteLegPerformance | None = None
    performance_issue: PerformanceIssue | None = None

    @property
    def line_string(self):
        """LineString geometry with x=lon and y=lat."""
        return LineString((self.start.waypoint.point, self.end.waypoint.point))

    def rounded(self):
        """Copy with course and performance rounded for display.

        Never sum rounded legs; totals are computed from the raw legs.
        """
        return replace(
            self,
            course=self.course.rounded(),
            performance=(
                self.performance.rounded() if self.performance is not None else None
            ),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "start": self.start.to_dict(),
            "end": self.end.to_dict(),
            "course": asdict(self.course),
            "wind": self.wind.to_dict() if self.wind is not None else None,
            "arrival_date": self.arrival_date,
            "performance": (
                asdict(self.performance) if self.performance is not None else None
            ),
            "performance_issue": self.performance_issue,
        }


@dataclass(frozen=True)
class FuelBreakdown:
    """Fuel figures in whole liters."""

    trip: int | None = None
    reserve: int | None = None
    takeoff: int | None = None
    landing: int | None = None
    taxi: int | None = None
    alternate: int | None = None


@dataclass(frozen=True)
class RouteTrip:
    """A complete nav log.

    Legs keep their unrounded values; the totals are rounded to whole
    nautical miles, minutes and liters.
    """

    route: Tuple[RouteLeg, ...]
    total_distance: int
    total_duration: int
    generated_at: datetime
    route_alternate: RouteLeg | None = None
    total_trip_fuel: int | None = None
    fuel_breakdown: FuelBreakdown = FuelBreakdown()
    departure_date: datetime | None = None
    arrival_date: datetime | None = None

    @property
    def waypoints(self) -> Tuple[Waypoint, ...]:
        """Unique waypoints of all legs in route order.

        Waypoints are identified by name; the first occurrence wins.
        """
        unique = {}
        for leg in self.route:
            for wp in (leg.start.waypoint, leg.end.waypoint):
                unique.setdefault(wp.name, wp)
        return tuple(unique.values())

    @property
    def departure_waypoint(self) -> Waypoint:
        return self.route[0].start.waypoint

    @property
    def arrival_waypoint(self) -> Waypoint:
        return self.route[-1].end.waypoint

    @property
    def line_string(self):
        """LineString geometry through all waypoints with x=lon and y=lat."""
        return LineString(
            [self.route[0].start.waypoint.point]
            + [leg.end.waypoint.point for leg in self.route]
        )

    @property
    def data_frame(self):
        """Nav log with one row per leg and display-rounded values."""
        records = []
        for leg in self.route:
            shown = leg.rounded()
            perf = shown.performance
            records.append(
                {
                    "from": str(leg.start.waypoint),
                    "to": str(leg.end.waypoint),
                    "altitude": round_half_up(leg.end.altitude),
                    "distance": shown.course.distance,
                    "track": shown.course.track,
                    "magnetic_track": shown.course.magnetic_track,
                    "wind": _format_wind(leg.wind),
                    "wca": perf.wind_correction_angle if perf else None,
                    "true_heading": perf.true_heading if perf else None,
                    "magnetic_heading": perf.magnetic_heading if perf else None,
                    "ground_speed": perf.ground_speed if perf else None,
                    "duration": perf.duration if perf else None,
                    "fuel": perf.fuel_consumption if perf else None,
                    "arrival": leg.arrival_date,
                    "issue": leg.performance_issue,
                }
            )
        return pd.DataFrame.from_records(records)

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-friendly representation."""
        return {
            "route": [leg.to_dict() for leg in self.route],
            "route_alternate": (
                self.route_alternate.to_dict()
                if self.route_alternate is not None
                else None
            ),
            "total_distance": self.total_distance,
            "total_duration": self.total_duration,
            "total_trip_fuel": self.total_trip_fuel,
            "fuel_breakdown": asdict(self.fuel_breakdown),
            "departure_date": self.departure_date,
            "arrival_date": self.arrival_date,
            "generated_at": self.generated_at,
        }

    def dump_json(self, path: Path | str, *, indent: int = 2) -> None:
        """Write the trip as JSON."""

        def _default(obj: Any):
            if isinstance(obj, np.generic):
                return obj.item()
            if isinstance(obj, datetime):
                return obj.isoformat()
            raise TypeError(f"Object of type {type(obj)!r} is not serialisable")

        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(self.to_dict(), indent=indent, default=_default))


def _format_wind(wind: Wind | None) -> str | None:
    if wind is None:
        return None
    direction = "VRB" if wind.direction is None else f"{int(round(wind.direction)) % 360:03d}"
    gust = f"G{int(round(wind.gust)):02d}" if wind.gust else ""
    return f"{direction}{int(round(wind.speed)):02d}{gust}KT"
