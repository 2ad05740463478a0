from dataclasses import dataclass
from datetime import date, datetime, timedelta, timezone, tzinfo
from typing import Optional, Tuple

from .solar import NoSunEventError, julian_date, sunrise_utc, sunset_utc


@dataclass(frozen=True)
class Daylight:
  latitude: float
  longitude: float  # degrees, west positive

  def julian_date(self, d: date) -> float:
    return julian_date(d.year, d.month, d.day)

  def utc_minutes(self, d: date) -> Tuple[float, float]:
    jd = self.julian_date(d)
    return (sunrise_utc(jd, self.latitude, self.longitude),
            sunset_utc(jd, self.latitude, self.longitude))

  def day_length(self, d: date) -> float:
    rise, set_ = self.utc_minutes(d)
    return set_ - rise

  def sunrise_sunset(
    self,
    d: date,
    tz: Optional[tzinfo] = None,
    hour_offset: float = 0.0,
  ) -> Tuple[datetime, datetime]:
    # Minutes count from 00:00 UTC of d; the caller's zone only changes how
    # the instant is displayed, never which instant it is.
    rise, set_ = self.utc_minutes(d)
    midnight = datetime(d.year, d.month, d.day, tzinfo=timezone.utc)
    shift = timedelta(hours=hour_offset)
    sunrise = midnight + timedelta(minutes=rise) + shift
    sunset = midnight + timedelta(minutes=set_) + shift
    return sunrise.astimezone(tz), sunset.astimezone(tz)

  def is_dark(self, now: datetime, hour_offset: float = 0.0, on: Optional[date] = None) -> bool:
    """Dark until (sunrise + offset), light until (sunset + offset), then dark.

    ``now`` must be timezone aware. The events are those of ``on``, by
    default the UTC date of ``now``. Polar day counts as light and polar
    night as dark.
    """
    now_utc = now.astimezone(timezone.utc)
    try:
      sunrise, sunset = self.sunrise_sunset(on or now_utc.date(), timezone.utc, hour_offset)
    except NoSunEventError as e:
      return e.kind == "polar_night"
    return not (sunrise < now_utc <= sunset)
