from pathlib import Path
from typing import Dict, Optional

import yaml
from pydantic import BaseModel, Field

from ..core.daylight import Daylight

LOCATIONS_PATH = Path(__file__).parent.parent / "config" / "locations.yaml"
DEFAULT_LOCATION = "bath"


class Location(BaseModel):
  name: Optional[str] = None
  latitude: float = Field(ge=-90, le=90)
  # west positive, as the solar formulas expect
  longitude: float = Field(ge=-180, le=180)

  def daylight(self) -> Daylight:
    return Daylight(latitude=self.latitude, longitude=self.longitude)


def load_locations(path: Optional[Path] = None) -> Dict[str, Location]:
  raw = yaml.safe_load(Path(path or LOCATIONS_PATH).read_text(encoding="utf-8"))
  return {k: Location(name=k, **v) for k, v in raw["locations"].items()}


def resolve_location(name: str, path: Optional[Path] = None) -> Location:
  locations = load_locations(path)
  key = name.lower()
  if key not in locations:
    raise KeyError(f"unknown location {name!r}; known: {', '.join(sorted(locations))}")
  return locations[key]
