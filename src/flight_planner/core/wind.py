"""Wind observations and the wind triangle.

Sign conventions
----------------
The relative wind angle is ``direction - track`` and is not normalized.
Positive headwind opposes the motion, negative headwind is a tailwind.
Positive crosswind blows from the right of the track. A wind from the right
yields a positive wind correction angle, i.e. the heading is turned right of
the track: ``heading = track + wca``.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from .exceptions import CourseNotHoldableError, ZeroGroundSpeedError
from .geodesics import normalize_degrees


@dataclass(frozen=True)
class Wind:
    """Resolved wind observation.

    ``direction`` is the true direction the wind blows from in degrees, or
    None for calm and variable winds. Speeds are in knots.
    """

    speed: float = 0.0
    direction: float | None = None
    gust: float | None = None
    direction_min: float | None = None
    direction_max: float | None = None

    @property
    def is_calm(self) -> bool:
        return self.speed == 0

    @property
    def is_variable(self) -> bool:
        return self.direction is None and not self.is_calm

    def direction_for_track(self, track: float) -> float:
        """Direction to use against a track.

        Calm wind has no effect whatever its direction. Variable wind is
        taken as a direct headwind on the track.
        """
        if self.direction is None:
            return track
        return self.direction

    @classmethod
    def from_dict(cls, data: dict) -> Wind:
        return cls(
            speed=float(data.get("speed", 0.0)),
            direction=data.get("direction"),
            gust=data.get("gust"),
            direction_min=data.get("direction_min"),
            direction_max=data.get("direction_max"),
        )

    def to_dict(self) -> dict:
        return {
            "speed": self.speed,
            "direction": self.direction,
            "gust": self.gust,
            "direction_min": self.direction_min,
            "direction_max": self.direction_max,
        }


CALM = Wind(speed=0.0, direction=0.0)


@dataclass(frozen=True)
class WindVector:
    """Wind resolved against a reference direction."""

    angle: float
    headwind: float
    crosswind: float


@dataclass(frozen=True)
class WindTriangle:
    """Solution of the wind triangle for one track."""

    wind_vector: WindVector
    wind_correction_angle: float
    true_heading: float
    ground_speed: float


def calculate_wind_vector(wind: Wind = None, track: float = None) -> WindVector:
    """Resolve a wind into headwind and crosswind components.

    Parameters
    ----------
    wind : Wind
        Wind observation.
    track : float
        Reference direction in degrees (track, heading or runway heading).

    Returns
    -------
    WindVector
        With the unnormalized angle ``direction - track``.
    """
    angle = wind.direction_for_track(track) - track
    angle_rad = np.deg2rad(angle)
    return WindVector(
        angle=angle,
        headwind=float(wind.speed * np.cos(angle_rad)),
        crosswind=float(wind.speed * np.sin(angle_rad)),
    )


def calculate_wind_correction_angle(
    wind: Wind = None,
    true_track: float = None,
    true_airspeed: float = None,
) -> float:
    """Wind correction angle in degrees, positive for wind from the right.

    Raises
    ------
    CourseNotHoldableError
        If the crosswind exceeds the true airspeed.
    """
    crosswind = calculate_wind_vector(wind, true_track).crosswind
    if true_airspeed <= 0 or abs(crosswind) > true_airspeed:
        raise CourseNotHoldableError(
            cross_wind=crosswind, true_airspeed=true_airspeed
        )
    return float(np.rad2deg(np.arcsin(crosswind / true_airspeed)))


def calculate_ground_speed(
    wind: Wind = None,
    true_airspeed: float = None,
    true_heading: float = None,
) -> float:
    """Groundspeed in knots from the law of cosines over the wind triangle.

    The headwind is resolved against the true heading. A negative value
    under the radical is treated as zero groundspeed.
    """
    headwind = calculate_wind_vector(wind, true_heading).headwind
    ground_speed_squared = (
        true_airspeed**2 + wind.speed**2 - 2 * true_airspeed * headwind
    )
    return float(np.sqrt(max(ground_speed_squared, 0.0)))


def solve_wind_triangle(
    wind: Wind = None,
    true_track: float = None,
    true_airspeed: float = None,
) -> WindTriangle:
    """Heading and groundspeed needed to hold a true track.

    Parameters
    ----------
    wind : Wind
        Wind observation.
    true_track : float
        True track to hold in degrees.
    true_airspeed : float
        True airspeed in knots.

    Returns
    -------
    WindTriangle

    Raises
    ------
    CourseNotHoldableError
        If the crosswind exceeds the true airspeed.
    ZeroGroundSpeedError
        If the groundspeed on the track is not positive. This includes
        headwinds stronger than the airspeed, for which the law of cosines
        alone would report the (positive) speed of drifting backwards.
    """
    if wind.is_variable:
        # a variable wind is held against the track, not the heading
        wind = Wind(speed=wind.speed, direction=true_track, gust=wind.gust)
    wind_vector = calculate_wind_vector(wind, true_track)
    wca = calculate_wind_correction_angle(wind, true_track, true_airspeed)
    true_heading = normalize_degrees(true_track + wca)
    ground_speed = calculate_ground_speed(wind, true_airspeed, true_heading)
    along_track_speed = true_airspeed * np.cos(np.deg2rad(wca)) - wind_vector.headwind
    if ground_speed <= 0 or along_track_speed <= 0:
        raise ZeroGroundSpeedError(ground_speed=min(ground_speed, along_track_speed))
    return WindTriangle(
        wind_vector=wind_vector,
        wind_correction_angle=wca,
        true_heading=true_heading,
        ground_speed=ground_speed,
    )
