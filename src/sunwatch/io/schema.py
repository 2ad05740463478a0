from datetime import date
from typing import Optional

from pydantic import BaseModel

from ..core.daylight import Daylight
from ..core.solar import NoSunEventError


class SunEventRow(BaseModel):
  day: date
  latitude: float
  longitude: float
  julian_date: float
  sunrise_utc_min: Optional[float]
  sunset_utc_min: Optional[float]
  day_length_min: Optional[float]
  polar: Optional[str] = None


def sun_event_row(daylight: Daylight, d: date) -> SunEventRow:
  jd = daylight.julian_date(d)
  try:
    rise, set_ = daylight.utc_minutes(d)
  except NoSunEventError as e:
    return SunEventRow(
      day=d, latitude=daylight.latitude, longitude=daylight.longitude, julian_date=jd,
      sunrise_utc_min=None, sunset_utc_min=None,
      day_length_min=1440.0 if e.kind == "polar_day" else 0.0,
      polar=e.kind,
    )
  return SunEventRow(
    day=d, latitude=daylight.latitude, longitude=daylight.longitude, julian_date=jd,
    sunrise_utc_min=rise, sunset_utc_min=set_, day_length_min=set_ - rise,
  )
