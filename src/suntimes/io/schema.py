from datetime import date, datetime, timedelta
from typing import Optional

from pydantic import BaseModel

from ..core.daylight import Daylight


class SunEventRow(BaseModel):
  date: str
  location: str
  latitude: float
  longitude: float
  sunrise: Optional[str]
  sunset: Optional[str]
  day_length_s: Optional[int]
  polar_state: Optional[str]


def _iso(ts: Optional[datetime]) -> Optional[str]:
  return ts.isoformat() if ts is not None else None


def build_row(location: str, daylight: Daylight, d: date) -> SunEventRow:
  sunrise, sunset = daylight.sunrise_sunset(d)
  length: Optional[timedelta] = daylight.day_length(d)
  state = daylight.polar_state(d)
  return SunEventRow(
    date=d.isoformat(),
    location=location,
    latitude=daylight.latitude,
    longitude=daylight.longitude,
    sunrise=_iso(sunrise),
    sunset=_iso(sunset),
    day_length_s=int(length.total_seconds()) if length is not None else None,
    polar_state=state.value if state is not None else None,
  )
