"""NOAA solar geometry: sunrise and sunset as UTC minutes of the day.

All formula outputs are degrees unless noted; every trig call site converts
with math.radians / math.degrees. Longitudes are west-positive.
"""
import math

# Zenith of the sun's upper limb at apparent sunrise/sunset: 90 deg plus
# atmospheric refraction and the solar disk radius.
SUNRISE_ZENITH_DEG = 90.833

J2000_JD = 2451545.0
DAYS_PER_CENTURY = 36525.0
MINUTES_PER_DAY = 1440.0


class NoSunEventError(ValueError):
  """The sun does not cross the horizon on this day at this latitude."""

  def __init__(self, latitude: float, declination: float, argument: float):
    self.latitude = latitude
    self.declination = declination
    self.argument = argument
    # acos argument below -1: sun stays up; above +1: sun stays down
    self.kind = "polar_day" if argument < -1.0 else "polar_night"
    super().__init__(
      f"no sunrise/sunset at latitude {latitude:.3f} (declination {declination:.3f}): {self.kind}"
    )


def julian_date(year: int, month: int, day: int) -> float:
  if month <= 2:
    year -= 1
    month += 12
  a = math.floor(year / 100)
  b = 2 - a + math.floor(a / 4)
  return (math.floor(365.25 * (year + 4716))
          + math.floor(30.6001 * (month + 1))
          + day + b - 1524.5)


def julian_century(jd: float) -> float:
  return (jd - J2000_JD) / DAYS_PER_CENTURY


def jd_from_julian_century(t: float) -> float:
  return t * DAYS_PER_CENTURY + J2000_JD


def geom_mean_long_sun(t: float) -> float:
  L = 280.46646 + t * (36000.76983 + 0.0003032 * t)
  # integer part compared, so 360.x stays as is
  while int(L) > 360:
    L -= 360.0
  while L < 0:
    L += 360.0
  return L


def geom_mean_anomaly_sun(t: float) -> float:
  return 357.52911 + t * (35999.05029 - 0.0001537 * t)


def eccentricity_earth_orbit(t: float) -> float:
  return 0.016708634 - t * (0.000042037 + 0.0000001267 * t)


def sun_eq_of_center(t: float) -> float:
  mrad = math.radians(geom_mean_anomaly_sun(t))
  return (math.sin(mrad) * (1.914602 - t * (0.004817 + 0.000014 * t))
          + math.sin(2 * mrad) * (0.019993 - 0.000101 * t)
          + math.sin(3 * mrad) * 0.000289)


def sun_true_long(t: float) -> float:
  return geom_mean_long_sun(t) + sun_eq_of_center(t)


def _omega(t: float) -> float:
  # longitude of the moon's ascending node, drives nutation
  return 125.04 - 1934.136 * t


def sun_apparent_long(t: float) -> float:
  return sun_true_long(t) - 0.00569 - 0.00478 * math.sin(math.radians(_omega(t)))


def mean_obliquity_of_ecliptic(t: float) -> float:
  seconds = 21.448 - t * (46.8150 + t * (0.00059 - t * 0.001813))
  return 23.0 + (26.0 + seconds / 60.0) / 60.0


def obliquity_correction(t: float) -> float:
  return mean_obliquity_of_ecliptic(t) + 0.00256 * math.cos(math.radians(_omega(t)))


def sun_declination(t: float) -> float:
  eps = math.radians(obliquity_correction(t))
  lam = math.radians(sun_apparent_long(t))
  return math.degrees(math.asin(math.sin(eps) * math.sin(lam)))


def equation_of_time(t: float) -> float:
  """Apparent minus mean solar time, in minutes."""
  y = math.tan(math.radians(obliquity_correction(t)) / 2.0) ** 2
  l0 = math.radians(geom_mean_long_sun(t))
  e = eccentricity_earth_orbit(t)
  m = math.radians(geom_mean_anomaly_sun(t))
  etime = (y * math.sin(2 * l0)
           - 2 * e * math.sin(m)
           + 4 * e * y * math.sin(m) * math.cos(2 * l0)
           - 0.5 * y * y * math.sin(4 * l0)
           - 1.25 * e * e * math.sin(2 * m))
  return math.degrees(etime) * 4.0


def _hour_angle(lat: float, solar_dec: float) -> float:
  lat_rad = math.radians(lat)
  dec_rad = math.radians(solar_dec)
  arg = (math.cos(math.radians(SUNRISE_ZENITH_DEG)) / (math.cos(lat_rad) * math.cos(dec_rad))
         - math.tan(lat_rad) * math.tan(dec_rad))
  if not -1.0 <= arg <= 1.0:
    raise NoSunEventError(lat, solar_dec, arg)
  return math.acos(arg)


def hour_angle_sunrise(lat: float, solar_dec: float) -> float:
  """Hour angle of sunrise in radians (positive)."""
  return _hour_angle(lat, solar_dec)


def hour_angle_sunset(lat: float, solar_dec: float) -> float:
  """Hour angle of sunset in radians (negative)."""
  return -_hour_angle(lat, solar_dec)


def _event_time(t: float, latitude: float, longitude: float, hour_angle_fn) -> float:
  eq_time = equation_of_time(t)
  hour_angle = hour_angle_fn(latitude, sun_declination(t))
  return 720 + 4 * (longitude - math.degrees(hour_angle)) - eq_time


def _refined_event_utc(jd: float, latitude: float, longitude: float, hour_angle_fn) -> float:
  t = julian_century(jd)
  # first pass at the start of the day, second at the estimated event time
  first = _event_time(t, latitude, longitude, hour_angle_fn)
  newt = julian_century(jd_from_julian_century(t) + first / MINUTES_PER_DAY)
  return _event_time(newt, latitude, longitude, hour_angle_fn)


def sunrise_utc(jd: float, latitude: float, longitude: float) -> float:
  """Sunrise in minutes after 00:00 UTC of the day starting at ``jd``.

  Not normalised to [0, 1440). Raises NoSunEventError on polar day/night.
  """
  return _refined_event_utc(jd, latitude, longitude, hour_angle_sunrise)


def sunset_utc(jd: float, latitude: float, longitude: float) -> float:
  """Sunset in minutes after 00:00 UTC; see sunrise_utc."""
  return _refined_event_utc(jd, latitude, longitude, hour_angle_sunset)
