from datetime import timedelta, timezone
from pathlib import Path
from typing import Optional, Union

import yaml
from pydantic import BaseModel, Field

from .location import DEFAULT_LOCATION, Location, resolve_location

# day-month-year time
DEFAULT_TIME_FORMAT = "%d-%m-%Y  %T"


class Settings(BaseModel):
  # a bundled location name, or an inline {latitude, longitude} mapping
  location: Union[str, Location] = DEFAULT_LOCATION
  latitude: Optional[float] = Field(default=None, ge=-90, le=90)
  longitude: Optional[float] = Field(default=None, ge=-180, le=180)
  time_format: str = DEFAULT_TIME_FORMAT
  hour_offset: float = 0.0
  utc_offset: Optional[float] = Field(default=None, ge=-14, le=14)
  log_level: str = "WARNING"

  def resolve_location(self) -> Location:
    # Explicit coordinates override the named location one axis at a time.
    if self.latitude is not None and self.longitude is not None:
      return Location(name=None, latitude=self.latitude, longitude=self.longitude)
    if isinstance(self.location, Location):
      base = self.location
    else:
      base = resolve_location(self.location)
    return Location(
      name=base.name if self.latitude is None and self.longitude is None else None,
      latitude=base.latitude if self.latitude is None else self.latitude,
      longitude=base.longitude if self.longitude is None else self.longitude,
    )

  def tz(self) -> Optional[timezone]:
    """Fixed display zone, or None for the system local zone."""
    if self.utc_offset is None:
      return None
    return timezone(timedelta(hours=self.utc_offset))


def load_settings(path: Optional[Union[str, Path]] = None, **overrides) -> Settings:
  cfg = {}
  if path:
    cfg = yaml.safe_load(Path(path).read_text(encoding="utf-8")) or {}
  if overrides.get("location") is not None:
    # a location picked on the command line replaces the file's coordinates
    cfg.pop("latitude", None)
    cfg.pop("longitude", None)
  cfg.update({k: v for k, v in overrides.items() if v is not None})
  return Settings(**cfg)
