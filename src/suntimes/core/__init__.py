"""Sun position and sunrise/sunset computation."""

from .almanac import (
    ZENITH_ASTRONOMICAL,
    ZENITH_CIVIL,
    ZENITH_NAUTICAL,
    ZENITH_OFFICIAL,
    SunEvent,
    compute_sunrise,
    compute_sunset,
    hour_angle_cosine,
    sun_time_utc,
    sunrise_utc,
    sunset_utc,
)
from .daylight import Daylight, PolarState
from .localize import to_local
from .timebase import Timebase

__all__ = [
    "ZENITH_ASTRONOMICAL",
    "ZENITH_CIVIL",
    "ZENITH_NAUTICAL",
    "ZENITH_OFFICIAL",
    "SunEvent",
    "compute_sunrise",
    "compute_sunset",
    "hour_angle_cosine",
    "sun_time_utc",
    "sunrise_utc",
    "sunset_utc",
    "Daylight",
    "PolarState",
    "to_local",
    "Timebase",
]
