import math
from datetime import date, datetime, timedelta, timezone

import pytest

from suntimes import (
  ZENITH_CIVIL,
  InvalidCoordinateError,
  compute_sunrise,
  compute_sunset,
  sunrise_utc,
  sunset_utc,
)
from suntimes.core.almanac import SunEvent, hour_angle_cosine, utc_date

MONTREAL = (45.5019, -73.5674)
EDT = timezone(timedelta(hours=-4))
EQUINOX = date(2025, 3, 20)


def test_repeated_calls_are_identical():
  first = (sunrise_utc(EQUINOX, *MONTREAL), sunset_utc(EQUINOX, *MONTREAL))
  for _ in range(3):
    assert (sunrise_utc(EQUINOX, *MONTREAL), sunset_utc(EQUINOX, *MONTREAL)) == first


def test_montreal_equinox_falls_in_daylight_window():
  sunrise = compute_sunrise(EQUINOX, *MONTREAL, tz=EDT)
  sunset = compute_sunset(EQUINOX, *MONTREAL, tz=EDT)
  assert 4 <= sunrise.hour < 8
  assert 16 <= sunset.hour < 20
  assert sunrise.date() == sunset.date() == EQUINOX
  assert sunrise < sunset


def test_equator_sunrise_precedes_sunset():
  sunrise = compute_sunrise(EQUINOX, 0.0, 0.0, tz=timezone.utc)
  sunset = compute_sunset(EQUINOX, 0.0, 0.0, tz=timezone.utc)
  assert 5 <= sunrise.hour < 7
  assert 17 <= sunset.hour < 19
  assert sunrise < sunset
  assert sunrise.date() == sunset.date()


def test_results_are_utc_on_input_date():
  sunrise = sunrise_utc(EQUINOX, *MONTREAL)
  assert sunrise.tzinfo == timezone.utc
  assert sunrise.date() == EQUINOX
  # raw UT for this sunset is negative and must wrap onto the same day
  sunset = sunset_utc(EQUINOX, *MONTREAL)
  assert sunset.date() == EQUINOX
  assert sunset.hour >= 22


def test_time_of_day_is_ignored():
  late = datetime(2025, 3, 20, 23, 59, tzinfo=timezone.utc)
  naive = datetime(2025, 3, 20, 8, 30)
  expected = sunrise_utc(EQUINOX, *MONTREAL)
  assert sunrise_utc(late, *MONTREAL) == expected
  assert sunrise_utc(naive, *MONTREAL) == expected


def test_aware_input_is_converted_to_utc_first():
  ahead = datetime(2025, 1, 1, 1, 0, tzinfo=timezone(timedelta(hours=5)))
  assert utc_date(ahead) == date(2024, 12, 31)
  assert sunrise_utc(ahead, *MONTREAL) == sunrise_utc(date(2024, 12, 31), *MONTREAL)


def test_year_boundary_uses_each_years_ordinal():
  dec31 = sunrise_utc(date(2024, 12, 31), *MONTREAL)
  jan1 = sunrise_utc(date(2025, 1, 1), *MONTREAL)
  assert dec31.date() == date(2024, 12, 31)
  assert jan1.date() == date(2025, 1, 1)
  assert abs((jan1 - dec31) - timedelta(days=1)) < timedelta(minutes=3)


@pytest.mark.parametrize("longitude", [-180.0, 0.0, 180.0])
@pytest.mark.parametrize("latitude", [0.0, 45.0, -45.0])
def test_longitude_boundaries_are_finite(latitude, longitude):
  for fn in (sunrise_utc, sunset_utc):
    event = fn(EQUINOX, latitude, longitude)
    assert event is not None
    assert event.date() == EQUINOX
  cos_h = hour_angle_cosine(EQUINOX, latitude, longitude, SunEvent.SUNRISE)
  assert math.isfinite(cos_h)


@pytest.mark.parametrize("when,latitude", [
  (date(2025, 6, 21), 75.0),
  (date(2025, 12, 21), 75.0),
  (date(2025, 12, 21), -75.0),
  (date(2025, 6, 21), -75.0),
])
def test_polar_dates_have_no_events(when, latitude):
  assert compute_sunrise(when, latitude, 15.0) is None
  assert compute_sunset(when, latitude, 15.0) is None


def test_polar_day_and_night_hour_angle():
  assert hour_angle_cosine(date(2025, 6, 21), 75.0, 15.0, SunEvent.SUNSET) < -1
  assert hour_angle_cosine(date(2025, 12, 21), 75.0, 15.0, SunEvent.SUNRISE) > 1


def test_poles_do_not_raise():
  assert compute_sunrise(date(2025, 6, 21), 90.0, 0.0) is None
  assert compute_sunset(date(2025, 12, 21), -90.0, 0.0) is None


def test_civil_twilight_starts_before_sunrise():
  official = sunrise_utc(EQUINOX, *MONTREAL)
  civil = sunrise_utc(EQUINOX, *MONTREAL, zenith=ZENITH_CIVIL)
  assert timedelta(minutes=15) < official - civil < timedelta(minutes=45)


def test_default_zone_is_host_local():
  local = compute_sunrise(EQUINOX, *MONTREAL)
  assert local.utcoffset() is not None
  assert local == sunrise_utc(EQUINOX, *MONTREAL)


@pytest.mark.parametrize("latitude,longitude", [(90.5, 0.0), (-91.0, 0.0), (0.0, 180.5), (0.0, -200.0)])
def test_out_of_range_coordinates_raise(latitude, longitude):
  with pytest.raises(InvalidCoordinateError):
    compute_sunrise(EQUINOX, latitude, longitude)
  with pytest.raises(ValueError):
    compute_sunset(EQUINOX, latitude, longitude)
