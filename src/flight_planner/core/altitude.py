"""Semicircular VFR cruising altitudes."""

from .geodesics import normalize_degrees

EASTBOUND_BASE_ALTITUDE_FT = 3500
WESTBOUND_BASE_ALTITUDE_FT = 4500
ALTITUDE_STEP_FT = 2000


def is_eastbound(track: float) -> bool:
    """True for tracks in [0, 179] degrees after normalization."""
    return 0 <= normalize_degrees(track) <= 179


def is_westbound(track: float) -> bool:
    """True for tracks in [180, 359] degrees after normalization."""
    return not is_eastbound(track)


def calculate_vfr_cruising_altitude(track: float = None, altitude: float = None) -> int:
    """Lowest VFR cruising altitude at or above a minimum altitude.

    Eastbound tracks use odd thousands plus 500 ft (3500, 5500, ...),
    westbound tracks even thousands plus 500 ft (4500, 6500, ...).

    Parameters
    ----------
    track : float
        True track in degrees.
    altitude : float
        Minimum desired altitude in feet.

    Returns
    -------
    int
        Cruising altitude in feet.
    """
    if is_eastbound(track):
        altitude_level = EASTBOUND_BASE_ALTITUDE_FT
    else:
        altitude_level = WESTBOUND_BASE_ALTITUDE_FT
    while altitude_level < altitude:
        altitude_level += ALTITUDE_STEP_FT
    return altitude_level


def flight_level(altitude: float) -> int:
    """Flight level for an altitude in feet, in thousands of feet."""
    return int(altitude // 1000)
