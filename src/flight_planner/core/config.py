from __future__ import annotations

from dataclasses import dataclass

# Mean earth radius (IUGG), used for all great-circle computations.
EARTH_RADIUS_METERS = 6_371_008.8

DEFAULT_RESERVE_FUEL_DURATION_MIN = 30.0


@dataclass(frozen=True)
class Aircraft:
    """Aircraft identity and the performance subset used for nav logs.

    Speeds are in knots, fuel consumption in liters per hour.
    """

    registration: str | None = None
    manufacturer: str | None = None
    model: str | None = None
    cruise_speed: float | None = None
    fuel_consumption: float | None = None
    fuel_capacity: float | None = None

    @property
    def has_cruise_speed(self) -> bool:
        return self.cruise_speed is not None and self.cruise_speed > 0

    @property
    def endurance_minutes(self) -> float | None:
        """Minutes of flight on full tanks, if capacity and burn are known."""
        if not self.fuel_capacity or not self.fuel_consumption:
            return None
        return self.fuel_capacity / self.fuel_consumption * 60.0
