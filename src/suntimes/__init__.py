"""Sunrise and sunset times from the 1990 USNO Almanac for Computers."""

from .core import (
    ZENITH_ASTRONOMICAL,
    ZENITH_CIVIL,
    ZENITH_NAUTICAL,
    ZENITH_OFFICIAL,
    Daylight,
    PolarState,
    SunEvent,
    compute_sunrise,
    compute_sunset,
    sunrise_utc,
    sunset_utc,
)
from .model.coordinates import GeoCoordinate, InvalidCoordinateError

__version__ = "0.1.0"

__all__ = [
    "ZENITH_ASTRONOMICAL",
    "ZENITH_CIVIL",
    "ZENITH_NAUTICAL",
    "ZENITH_OFFICIAL",
    "Daylight",
    "PolarState",
    "SunEvent",
    "compute_sunrise",
    "compute_sunset",
    "sunrise_utc",
    "sunset_utc",
    "GeoCoordinate",
    "InvalidCoordinateError",
]
