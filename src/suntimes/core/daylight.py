from dataclasses import dataclass
from datetime import date, datetime, timedelta
from enum import Enum
from typing import Optional

from .almanac import ZENITH_OFFICIAL, SunEvent, hour_angle_cosine, sunrise_utc, sunset_utc


class PolarState(str, Enum):
  POLAR_DAY = "polar_day"
  POLAR_NIGHT = "polar_night"


@dataclass
class Daylight:
  latitude: float
  longitude: float
  zenith: float = ZENITH_OFFICIAL

  def sunrise_sunset(self, d: date) -> tuple[Optional[datetime], Optional[datetime]]:
    sunrise = sunrise_utc(d, self.latitude, self.longitude, self.zenith)
    sunset = sunset_utc(d, self.latitude, self.longitude, self.zenith)
    return sunrise, sunset

  def day_length(self, d: date) -> Optional[timedelta]:
    # Both events fall on the same UTC date, so a sunset "before" sunrise
    # belongs to the following day.
    sunrise, sunset = self.sunrise_sunset(d)
    if sunrise is None or sunset is None:
      return None
    length = sunset - sunrise
    if length < timedelta(0):
      length += timedelta(days=1)
    return length

  def polar_state(self, d: date) -> Optional[PolarState]:
    # Classified at the approximate time of rising.
    cos_h = hour_angle_cosine(d, self.latitude, self.longitude, SunEvent.SUNRISE, self.zenith)
    if cos_h > 1:
      return PolarState.POLAR_NIGHT
    if cos_h < -1:
      return PolarState.POLAR_DAY
    return None
