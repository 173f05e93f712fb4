"""Algorithms layer: courses, leg performance and proximity queries."""

from .course import calculate_course, magnetic_declination
from .performance import calculate_performance, calculate_route_leg
from .proximity import closest_waypoint, closest_route_leg

__all__ = [
    "calculate_course",
    "magnetic_declination",
    "calculate_performance",
    "calculate_route_leg",
    "closest_waypoint",
    "closest_route_leg",
]
