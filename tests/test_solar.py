import math

import pytest

from sunwatch.core import solar
from sunwatch.core.solar import NoSunEventError

BATH = (51.38, 2.36)


def test_julian_date_reference_points():
  assert solar.julian_date(2000, 1, 1) == 2451544.5
  assert solar.julian_date(2004, 11, 28) == 2453337.5
  # Jan/Feb belong to the previous year in the month shift
  assert solar.julian_date(2004, 3, 1) - solar.julian_date(2004, 2, 28) == 2.0


def test_julian_century():
  assert solar.julian_century(2451545.0) == 0.0
  assert solar.julian_century(2451545.0 + 36525.0) == 1.0
  assert solar.jd_from_julian_century(solar.julian_century(2453337.5)) == pytest.approx(2453337.5)


def test_mean_longitude_normalised():
  assert solar.geom_mean_long_sun(0.0) == pytest.approx(280.46646)
  for t in (-0.5, -0.01, 0.049, 0.2, 1.0):
    assert 0 <= solar.geom_mean_long_sun(t) < 361


def test_mean_longitude_keeps_values_below_361():
  # only the integer part is compared against 360
  t = (360.5 - 280.46646) / 36000.76983
  L = solar.geom_mean_long_sun(t)
  assert 360 < L < 361


def test_mean_obliquity_at_j2000():
  assert solar.mean_obliquity_of_ecliptic(0.0) == pytest.approx(23.0 + (26.0 + 21.448/60.0)/60.0)


def test_orbital_values_for_reference_date():
  t = solar.julian_century(solar.julian_date(2004, 11, 28))
  assert solar.eccentricity_earth_orbit(t) == pytest.approx(0.0167066, abs=1e-6)
  assert solar.sun_declination(t) == pytest.approx(-21.33, abs=0.05)
  assert solar.equation_of_time(t) == pytest.approx(12.07, abs=0.1)


def test_hour_angle_symmetry():
  for lat in (-60.0, -23.5, 0.0, 12.3, 51.38, 65.0):
    for dec in (-23.44, -10.0, 0.0, 7.5, 23.44):
      assert solar.hour_angle_sunset(lat, dec) == -solar.hour_angle_sunrise(lat, dec)


def test_hour_angle_uses_refraction_horizon():
  # at the equator on an equinox the sun is up slightly longer than 12h
  ha = math.degrees(solar.hour_angle_sunrise(0.0, 0.0))
  assert ha == pytest.approx(90.833)


def test_bath_reference_values():
  jd = solar.julian_date(2004, 11, 28)
  assert solar.sunrise_utc(jd, *BATH) == pytest.approx(468.35, abs=1.0)
  assert solar.sunset_utc(jd, *BATH) == pytest.approx(966.33, abs=1.0)


def test_deterministic():
  jd = solar.julian_date(2021, 3, 14)
  assert solar.sunrise_utc(jd, *BATH) == solar.sunrise_utc(jd, *BATH)
  assert solar.sunset_utc(jd, *BATH) == solar.sunset_utc(jd, *BATH)


def test_summer_day_longer_than_winter_day():
  summer = solar.julian_date(2004, 6, 21)
  winter = solar.julian_date(2004, 12, 21)
  summer_len = solar.sunset_utc(summer, *BATH) - solar.sunrise_utc(summer, *BATH)
  winter_len = solar.sunset_utc(winter, *BATH) - solar.sunrise_utc(winter, *BATH)
  assert summer_len > winter_len
  assert summer_len > 16 * 60
  assert winter_len < 8 * 60 + 30


def test_equator_day_is_about_twelve_hours():
  for month in range(1, 13):
    jd = solar.julian_date(2023, month, 15)
    length = solar.sunset_utc(jd, 0.0, 0.0) - solar.sunrise_utc(jd, 0.0, 0.0)
    assert abs(length - 720) < 10


def test_refinement_changes_the_first_estimate():
  jd = solar.julian_date(2004, 11, 28)
  t = solar.julian_century(jd)
  first = 720 + 4 * (BATH[1] - math.degrees(solar.hour_angle_sunrise(BATH[0], solar.sun_declination(t)))) \
    - solar.equation_of_time(t)
  refined = solar.sunrise_utc(jd, *BATH)
  assert first != refined
  assert abs(first - refined) < 5


def test_polar_day_raises():
  jd = solar.julian_date(2024, 6, 21)
  with pytest.raises(NoSunEventError) as exc:
    solar.sunrise_utc(jd, 89.0, 0.0)
  assert exc.value.kind == "polar_day"
  assert exc.value.argument < -1
  with pytest.raises(NoSunEventError):
    solar.sunset_utc(jd, 89.0, 0.0)


def test_polar_night_raises():
  jd = solar.julian_date(2024, 12, 21)
  with pytest.raises(NoSunEventError) as exc:
    solar.sunset_utc(jd, 89.0, 0.0)
  assert exc.value.kind == "polar_night"
  assert isinstance(exc.value, ValueError)
