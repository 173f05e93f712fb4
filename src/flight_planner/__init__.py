"""
VFR flight planning package.

Three-layer architecture:
- core: Waypoints, winds, legs, trips, geodesics and altitude rules
- algorithms: Courses, leg performance and proximity queries
- app: Nav log assembly, flight plan files and command-line interface

Examples
--------
>>> from flight_planner.core import Waypoint, Wind, RouteSegment, Aircraft
>>> from flight_planner.algorithms import calculate_route_leg, closest_route_leg
>>> from flight_planner.app import calculate_nav_log, NavLogOptions
"""

__version__ = "2025dev"
