from pathlib import Path

import click
import numpy as np

from ..core.timebase import Timebase
from ..io.formatting import format_duration, format_minutes
from ..io.schema import sun_event_row
from ..io.write_jsonl import write_jsonl
from ..io.write_parquet import write_rows_parquet
from ..model.settings import load_settings
from ..runtime.clock import Clock


def day_length_summary(rows) -> dict:
  lengths = np.array([r.day_length_min for r in rows], dtype=float)
  if lengths.size == 0:
    return {}
  return {
    "min": float(lengths.min()),
    "mean": float(lengths.mean()),
    "max": float(lengths.max()),
    "shortest": rows[int(lengths.argmin())].day,
    "longest": rows[int(lengths.argmax())].day,
  }


@click.command()
@click.option("--location", help="Named location (default: bath).")
@click.option("-l", "--latitude", type=float)
@click.option("-o", "--longitude", type=float, help="Degrees WEST positive.")
@click.option("-y", "--year", type=int, help="Year (default: this year, UTC).")
@click.option("-m", "--month", type=int, help="Month; omit for the whole year.")
@click.option("--utc-offset", type=float, help="Hours added to the UTC times shown (default: 0, or the config file's).")
@click.option("--config", type=click.Path(exists=True))
@click.option("--export", "export_path", type=click.Path(dir_okay=False), help="Write rows to .jsonl or .parquet.")
def main(location, latitude, longitude, year, month, utc_offset, config, export_path):
  try:
    settings = load_settings(
      config, location=location, latitude=latitude, longitude=longitude, utc_offset=utc_offset,
    )
    loc = settings.resolve_location()
  except (KeyError, ValueError) as e:
    raise click.UsageError(str(e))
  if month is not None and not 1 <= month <= 12:
    raise click.BadParameter("month must be 1-12", param_hint="'-m'")
  year = year or Clock().today().year
  daylight = loc.daylight()
  try:
    rows = [sun_event_row(daylight, d) for d in Timebase(year, month).days()]
  except ValueError as e:
    raise click.BadParameter(str(e), param_hint="'-y'")
  utc_offset = settings.utc_offset or 0.0
  shift = utc_offset * 60
  label = loc.name or f"{loc.latitude:.2f}, {loc.longitude:.2f}"
  click.echo(f"{label} (UTC{utc_offset:+g})")
  click.echo("Date       | Rise  | Set   | Length")
  click.echo("-----------|-------|-------|--------")
  for r in rows:
    if r.polar:
      click.echo(f"{r.day.isoformat()} | --:-- | --:-- | {r.polar.replace('_', ' ')}")
      continue
    click.echo(
      f"{r.day.isoformat()} | {format_minutes(r.sunrise_utc_min + shift)} | "
      f"{format_minutes(r.sunset_utc_min + shift)} | {format_duration(r.day_length_min)}"
    )
  summary = day_length_summary(rows)
  if summary:
    click.echo(
      f"Day length min {format_duration(summary['min'])} ({summary['shortest']}), "
      f"mean {format_duration(summary['mean'])}, "
      f"max {format_duration(summary['max'])} ({summary['longest']})"
    )
  if export_path:
    suffix = Path(export_path).suffix.lower()
    if suffix == ".parquet":
      write_rows_parquet(rows, export_path)
    elif suffix in (".jsonl", ".json"):
      write_jsonl(rows, export_path)
    else:
      raise click.BadParameter("export file must end in .jsonl or .parquet", param_hint="'--export'")
    click.echo(f"Wrote {len(rows)} rows to {export_path}")


if __name__ == "__main__":
  main()
