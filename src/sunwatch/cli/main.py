"""CLI command printing today's sunrise/sunset or the daylight status."""

from datetime import date, datetime
import logging
import click

from ..core.solar import NoSunEventError
from ..io.formatting import format_instant
from ..model.settings import load_settings
from ..runtime.clock import Clock

logger = logging.getLogger(__name__)


def _parse_now(ctx, param, value):
    if value is None:
        return None
    try:
        return datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError as e:
        raise click.BadParameter(str(e))


def _print_usage(ctx, param, value):
    if not value or ctx.resilient_parsing:
        return
    click.echo(ctx.get_help(), err=True)
    ctx.exit(2)


@click.command()
@click.option("-b", "--sunrise", "rise", is_flag=True, help="Beginning of day. Print sunrise time.")
@click.option("-e", "--sunset", "set_", is_flag=True, help="End of day. Print sunset time.")
@click.option("-t", "--format", "time_format", help='Print times using a strftime format (default "%d-%m-%Y  %T").')
@click.option("-s", "--status", is_flag=True, help="Print nothing; exit 0 in daylight, 1 in darkness.")
@click.option(
    "-h",
    "--hour-offset",
    type=float,
    help="Hour offset added to sunrise and sunset, e.g. -s -h 1 stays dark until an hour after sunrise.",
)
@click.option("-d", "--day", type=int, help="Day of month (default: today, UTC).")
@click.option("-m", "--month", type=int, help="Month (default: this month, UTC).")
@click.option("-y", "--year", type=int, help="Year (default: this year, UTC).")
@click.option("-l", "--latitude", type=float, help="Latitude, degrees north.")
@click.option("-o", "--longitude", type=float, help="Longitude, degrees WEST positive.")
@click.option("--location", help="Named location from the bundled list (default: bath).")
@click.option("--config", type=click.Path(exists=True), help="YAML settings file.")
@click.option("--utc-offset", type=float, help="Show times at this fixed UTC offset instead of the local zone.")
@click.option("--now", callback=_parse_now, help="Pretend the current time is this ISO timestamp.")
@click.option("--debug", is_flag=True, help="Log intermediate values.")
@click.option(
    "-u",
    "--usage",
    is_flag=True,
    expose_value=False,
    is_eager=True,
    callback=_print_usage,
    help="Print this usage text.",
)
@click.pass_context
def main(ctx, rise, set_, time_format, status, hour_offset, day, month, year,
         latitude, longitude, location, config, utc_offset, now, debug):
    """Print sunrise/sunset times for today.

    With neither -b nor -e both times are printed, sunrise first.

    Examples:
        # Sunrise in Bath today
        sunwatch -b

        # Is it dark in Reykjavik?  (exit status 0 = daylight, 1 = darkness)
        sunwatch -s --location reykjavik

        # Sunset on 28 Nov 2004 at 51.38N 2.36W, shown in UTC
        sunwatch -e -y 2004 -m 11 -d 28 -l 51.38 -o 2.36 --utc-offset 0
    """
    try:
        settings = load_settings(
            config,
            location=location,
            latitude=latitude,
            longitude=longitude,
            time_format=time_format,
            hour_offset=hour_offset,
            utc_offset=utc_offset,
            log_level="DEBUG" if debug else None,
        )
        loc = settings.resolve_location()
    except (KeyError, ValueError) as e:
        raise click.UsageError(str(e))

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    clock = Clock(fixed_time=now)
    today = clock.today()
    try:
        target = date(year or today.year, month or today.month, day or today.day)
    except ValueError as e:
        raise click.BadParameter(str(e), param_hint="'-y' / '-m' / '-d'")

    daylight = loc.daylight()
    logger.debug(f"Location {loc.name or '-'}: lat={loc.latitude} lon={loc.longitude}")
    logger.debug(f"Julian Date {daylight.julian_date(target):f}")

    if status:
        dark = daylight.is_dark(clock.now(), settings.hour_offset, on=target)
        logger.debug(f"now={clock.now().isoformat()} dark={dark}")
        ctx.exit(1 if dark else 0)

    try:
        rise_min, set_min = daylight.utc_minutes(target)
        logger.debug(f"Sunrise timeUTC {rise_min:f}")
        logger.debug(f"Sunset  timeUTC {set_min:f}")
        sunrise, sunset = daylight.sunrise_sunset(target, settings.tz(), settings.hour_offset)
    except NoSunEventError as e:
        click.echo(f"No sunrise or sunset on {target.isoformat()}: {e.kind.replace('_', ' ')}", err=True)
        ctx.exit(2)

    if not rise and not set_:
        rise = set_ = True
    if rise:
        click.echo(format_instant(sunrise, settings.time_format))
    if set_:
        click.echo(format_instant(sunset, settings.time_format))


if __name__ == "__main__":
    main()
