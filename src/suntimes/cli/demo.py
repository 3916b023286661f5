"""CLI command printing today's sunrise and sunset for a location."""

from datetime import datetime, timezone
import logging
import sys

import click

from ..core.almanac import compute_sunrise, compute_sunset
from ..model.coordinates import InvalidCoordinateError
from ..model.locations import DEFAULT_LOCATION, load_locations

logger = logging.getLogger(__name__)


def _format(event):
    return event.isoformat(sep=" ", timespec="seconds") if event is not None else "none"


@click.command()
@click.option(
    "--date",
    "date_str",
    type=str,
    help="UTC date or datetime (ISO format, default: now)",
)
@click.option(
    "--location",
    default=DEFAULT_LOCATION,
    help=f"Configured location name (default: {DEFAULT_LOCATION})",
)
@click.option("--lat", type=float, help="Latitude in degrees, overrides --location")
@click.option("--lon", type=float, help="Longitude in degrees, overrides --location")
@click.option(
    "--locations",
    "locations_path",
    type=click.Path(exists=True),
    help="YAML file with named locations",
)
@click.option(
    "--log-level",
    default="WARNING",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Logging level (default: WARNING)",
)
def main(date_str, location, lat, lon, locations_path, log_level):
    """Print sunrise and sunset in local time.

    Examples:
        # Montreal, today
        suntimes-demo

        # Explicit coordinates on a given date
        suntimes-demo --lat 51.4769 --lon 0 --date 2025-06-21
    """
    logging.basicConfig(
        level=log_level.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    when = datetime.now(timezone.utc)
    if date_str:
        try:
            when = datetime.fromisoformat(date_str.replace("Z", "+00:00"))
        except ValueError as e:
            click.echo(f"Error parsing date: {e}", err=True)
            sys.exit(2)

    if lat is None or lon is None:
        locations = load_locations(locations_path)
        if location not in locations:
            click.echo(f"Unknown location: {location}", err=True)
            sys.exit(2)
        loc = locations[location]
        lat = loc.latitude if lat is None else lat
        lon = loc.longitude if lon is None else lon
        logger.info("Using location %s (%s, %s)", loc.name, lat, lon)

    try:
        sunrise = compute_sunrise(when, lat, lon)
        sunset = compute_sunset(when, lat, lon)
    except InvalidCoordinateError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(2)

    click.echo(f"Sunrise: {_format(sunrise)}")
    click.echo(f"Sunset: {_format(sunset)}")


if __name__ == "__main__":
    main()
