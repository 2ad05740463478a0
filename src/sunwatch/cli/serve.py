"""CLI command to start the sunwatch REST server."""

from datetime import datetime
import logging
import click
import uvicorn

from ..api import SunRestAPI
from ..model.settings import load_settings
from ..runtime.clock import Clock

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@click.command()
@click.option(
    "--config",
    type=click.Path(exists=True),
    help="YAML settings file (default location, hour offset, UTC offset)",
)
@click.option(
    "--location",
    help="Default named location (default: bath)",
)
@click.option(
    "--host",
    default="127.0.0.1",
    help="Host to bind to (default: 127.0.0.1)",
)
@click.option(
    "--port",
    default=8080,
    type=int,
    help="Port to bind to (default: 8080)",
)
@click.option(
    "--fixed-time",
    type=str,
    help="Answer every request as if it were this time (ISO format)",
)
def main(config, location, host, port, fixed_time):
    """Start the sunwatch API server.

    Examples:
        # Serve with the bundled default location
        sunwatch-serve

        # Serve Reykjavik on all interfaces
        sunwatch-serve --location reykjavik --host 0.0.0.0
    """
    start_dt = None
    if fixed_time:
        try:
            start_dt = datetime.fromisoformat(fixed_time.replace("Z", "+00:00"))
        except ValueError as e:
            click.echo(f"Error parsing fixed time: {e}", err=True)
            return

    try:
        settings = load_settings(config, location=location)
        api = SunRestAPI(Clock(fixed_time=start_dt), settings)
    except (KeyError, ValueError) as e:
        click.echo(f"Error loading configuration: {e}", err=True)
        logger.exception("Configuration error")
        return

    loc = api.default_location
    logger.info(f"Default location {loc.name or '-'}: lat={loc.latitude} lon={loc.longitude}")
    click.echo(f"Starting API server on http://{host}:{port}")
    click.echo(f"   • Sun times: http://{host}:{port}/api/sun")
    click.echo(f"   • Status:    http://{host}:{port}/api/status")
    click.echo(f"   • API Docs:  http://{host}:{port}/docs")

    uvicorn.run(
        api.get_app(),
        host=host,
        port=port,
        log_level="info",
    )


if __name__ == "__main__":
    main()
