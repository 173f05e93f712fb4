"""User-facing/app layer: nav log assembly, plan files and CLI."""

from .config import (
    NavLogOptions,
    FlightPlan,
    plan_from_dict,
    load_plan,
)
from .navlog import (
    calculate_nav_log,
    prepare_segments,
    reserve_fuel_required,
    waypoints_to_segments,
)

__all__ = [
    "NavLogOptions",
    "FlightPlan",
    "plan_from_dict",
    "load_plan",
    "calculate_nav_log",
    "prepare_segments",
    "reserve_fuel_required",
    "waypoints_to_segments",
]
