"""Sunrise and sunset from the 1990 Almanac for Computers.

Nautical Almanac Office, United States Naval Observatory, Washington, DC 20392.
All angles are in degrees; conversion to radians happens at each trig call.
"""

from datetime import date, datetime, timedelta, timezone, tzinfo
from enum import Enum
from typing import Optional, Union
import logging
import math

from ..model.coordinates import validate_coordinates
from .localize import to_local

logger = logging.getLogger(__name__)

DateLike = Union[date, datetime]

# Zenith angles for the horizon crossing
ZENITH_OFFICIAL = 90 + 50 / 60.0
ZENITH_CIVIL = 96.0
ZENITH_NAUTICAL = 102.0
ZENITH_ASTRONOMICAL = 108.0

# Sun's mean anomaly
MEAN_ANOMALY_RATE = 0.9856
MEAN_ANOMALY_OFFSET = 3.289

# Sun's true longitude
TRUE_LONGITUDE_COEFF_1 = 1.916
TRUE_LONGITUDE_COEFF_2 = 0.020
TRUE_LONGITUDE_OFFSET = 282.634

RIGHT_ASCENSION_COEFF = 0.91764
DECLINATION_COEFF = 0.39782

# Local mean time of rising or setting
LOCAL_TIME_RATE = 0.06571
LOCAL_TIME_OFFSET = 6.622


class SunEvent(str, Enum):
  SUNRISE = "sunrise"
  SUNSET = "sunset"


def _wrap(value: float, period: float) -> float:
  # result always in [0, period)
  value = math.fmod(value, period)
  if value < 0:
    value += period
  return value if value < period else 0.0


def utc_date(when: DateLike) -> date:
  """Calendar date of `when` in UTC. Naive datetimes are taken as UTC."""
  if isinstance(when, datetime):
    if when.tzinfo is not None:
      when = when.astimezone(timezone.utc)
    return when.date()
  return when


def _approximate_time(day: date, longitude: float, event: SunEvent) -> float:
  lng_hour = longitude / 15
  base = 6 if event is SunEvent.SUNRISE else 18
  return day.timetuple().tm_yday + (base - lng_hour) / 24


def _sun_position(t: float) -> tuple[float, float, float]:
  """Return (right ascension in hours, sin declination, cos declination)."""
  m = MEAN_ANOMALY_RATE * t - MEAN_ANOMALY_OFFSET

  true_lng = (m + TRUE_LONGITUDE_COEFF_1 * math.sin(math.radians(m))
              + TRUE_LONGITUDE_COEFF_2 * math.sin(math.radians(2 * m))
              + TRUE_LONGITUDE_OFFSET)
  true_lng = _wrap(true_lng, 360)

  ra = math.degrees(math.atan(RIGHT_ASCENSION_COEFF * math.tan(math.radians(true_lng))))
  ra = _wrap(ra, 360)
  # same quadrant as the true longitude
  ra += math.floor(true_lng / 90) * 90 - math.floor(ra / 90) * 90
  ra /= 15

  sin_dec = DECLINATION_COEFF * math.sin(math.radians(true_lng))
  cos_dec = math.cos(math.asin(sin_dec))
  return ra, sin_dec, cos_dec


def _cos_hour_angle(sin_dec: float, cos_dec: float, latitude: float, zenith: float) -> float:
  return ((math.cos(math.radians(zenith)) - sin_dec * math.sin(math.radians(latitude)))
          / (cos_dec * math.cos(math.radians(latitude))))


def hour_angle_cosine(when: DateLike, latitude: float, longitude: float,
                      event: SunEvent, zenith: float = ZENITH_OFFICIAL) -> float:
  """Cosine of the sun's local hour angle at the event.

  Above 1 the sun never rises on that date; below -1 it never sets.
  """
  t = _approximate_time(utc_date(when), longitude, event)
  _, sin_dec, cos_dec = _sun_position(t)
  return _cos_hour_angle(sin_dec, cos_dec, latitude, zenith)


def sun_time_utc(when: DateLike, latitude: float, longitude: float,
                 event: SunEvent, zenith: float = ZENITH_OFFICIAL) -> Optional[datetime]:
  """Compute a sunrise or sunset as an aware UTC datetime.

  Returns None when the event does not happen on that date at that
  latitude (polar day or polar night). Coordinates are not validated.
  """
  day = utc_date(when)
  lng_hour = longitude / 15
  t = _approximate_time(day, longitude, event)
  ra, sin_dec, cos_dec = _sun_position(t)

  cos_h = _cos_hour_angle(sin_dec, cos_dec, latitude, zenith)
  if cos_h > 1:
    logger.debug("No %s on %s at %.4f, %.4f: sun never rises", event.value, day, latitude, longitude)
    return None
  if cos_h < -1:
    logger.debug("No %s on %s at %.4f, %.4f: sun never sets", event.value, day, latitude, longitude)
    return None

  if event is SunEvent.SUNRISE:
    h = 360 - math.degrees(math.acos(cos_h))
  else:
    h = math.degrees(math.acos(cos_h))
  h /= 15

  local_mean = h + ra - LOCAL_TIME_RATE * t - LOCAL_TIME_OFFSET
  ut = _wrap(local_mean - lng_hour, 24)

  midnight = datetime(day.year, day.month, day.day, tzinfo=timezone.utc)
  return midnight + timedelta(hours=ut)


def sunrise_utc(when: DateLike, latitude: float, longitude: float,
                zenith: float = ZENITH_OFFICIAL) -> Optional[datetime]:
  return sun_time_utc(when, latitude, longitude, SunEvent.SUNRISE, zenith)


def sunset_utc(when: DateLike, latitude: float, longitude: float,
               zenith: float = ZENITH_OFFICIAL) -> Optional[datetime]:
  return sun_time_utc(when, latitude, longitude, SunEvent.SUNSET, zenith)


def compute_sunrise(when: DateLike, latitude: float, longitude: float,
                    tz: Optional[tzinfo] = None,
                    zenith: float = ZENITH_OFFICIAL) -> Optional[datetime]:
  """Sunrise in local time for a UTC date and geocoordinates.

  Args:
    when: Date, or datetime in UTC; only the calendar day is used
    latitude: Latitude in degrees, north positive
    longitude: Longitude in degrees, east positive
    tz: Target zone (default: the host's configured zone)
    zenith: Zenith angle defining the horizon crossing

  Returns:
    The sunrise instant, or None if the sun does not rise that day

  Raises:
    InvalidCoordinateError: latitude or longitude out of range
  """
  validate_coordinates(latitude, longitude)
  return to_local(sunrise_utc(when, latitude, longitude, zenith), tz)


def compute_sunset(when: DateLike, latitude: float, longitude: float,
                   tz: Optional[tzinfo] = None,
                   zenith: float = ZENITH_OFFICIAL) -> Optional[datetime]:
  """Sunset in local time for a UTC date and geocoordinates.

  Same arguments and errors as compute_sunrise; None if the sun does not set.
  """
  validate_coordinates(latitude, longitude)
  return to_local(sunset_utc(when, latitude, longitude, zenith), tz)
