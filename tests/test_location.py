from datetime import timedelta

import pytest
from pydantic import ValidationError

from sunwatch.model.location import Location, load_locations, resolve_location
from sunwatch.model.settings import DEFAULT_TIME_FORMAT, Settings, load_settings


def test_bundled_locations_include_bath():
  locations = load_locations()
  bath = locations["bath"]
  assert bath.name == "bath"
  assert (bath.latitude, bath.longitude) == (51.38, 2.36)
  assert all(-90 <= loc.latitude <= 90 for loc in locations.values())


def test_location_bounds():
  with pytest.raises(ValidationError):
    Location(latitude=95, longitude=0)
  with pytest.raises(ValidationError):
    Location(latitude=0, longitude=181)


def test_resolve_location_is_case_insensitive():
  assert resolve_location("Reykjavik").name == "reykjavik"
  with pytest.raises(KeyError):
    resolve_location("atlantis")


def test_location_daylight():
  d = resolve_location("bath").daylight()
  assert (d.latitude, d.longitude) == (51.38, 2.36)


def test_settings_defaults():
  s = Settings()
  assert s.time_format == DEFAULT_TIME_FORMAT
  assert s.hour_offset == 0.0
  assert s.tz() is None
  assert s.resolve_location().name == "bath"


def test_settings_coordinates_override_named_location():
  s = Settings(location="bath", latitude=10.0)
  loc = s.resolve_location()
  assert (loc.latitude, loc.longitude) == (10.0, 2.36)
  assert loc.name is None
  loc = Settings(latitude=1.0, longitude=2.0).resolve_location()
  assert (loc.latitude, loc.longitude) == (1.0, 2.0)


def test_fixed_utc_offset():
  assert Settings(utc_offset=-5).tz().utcoffset(None) == timedelta(hours=-5)


def test_load_settings_file_and_overrides(tmp_path):
  path = tmp_path / "sunwatch.yaml"
  path.write_text("location: tromso\nhour_offset: 1\ntime_format: '%H:%M'\n", encoding="utf-8")
  s = load_settings(path)
  assert s.location == "tromso"
  assert s.hour_offset == 1.0
  assert s.time_format == "%H:%M"
  s = load_settings(path, hour_offset=-2, location=None)
  assert s.hour_offset == -2.0
  assert s.location == "tromso"


def test_load_settings_rejects_bad_values(tmp_path):
  path = tmp_path / "bad.yaml"
  path.write_text("latitude: 123\n", encoding="utf-8")
  with pytest.raises(ValidationError):
    load_settings(path)


def test_command_line_location_replaces_file_coordinates(tmp_path):
  path = tmp_path / "sunwatch.yaml"
  path.write_text("latitude: 51.38\nlongitude: 2.36\n", encoding="utf-8")
  loc = load_settings(path, location="reykjavik").resolve_location()
  assert loc.name == "reykjavik"
  assert (loc.latitude, loc.longitude) == (64.1466, 21.9426)
  # coordinates given alongside the name still win on their axis
  loc = load_settings(path, location="reykjavik", latitude=10.0).resolve_location()
  assert (loc.latitude, loc.longitude) == (10.0, 21.9426)


def test_inline_location_mapping(tmp_path):
  path = tmp_path / "sunwatch.yaml"
  path.write_text("location:\n  latitude: 40.0\n  longitude: 105.0\n", encoding="utf-8")
  loc = load_settings(path).resolve_location()
  assert (loc.latitude, loc.longitude) == (40.0, 105.0)
  assert load_settings(path, location="bath").resolve_location().name == "bath"
