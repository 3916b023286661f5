import logging
import sys
from datetime import date
from pathlib import Path

import click

from ..core.almanac import ZENITH_ASTRONOMICAL, ZENITH_CIVIL, ZENITH_NAUTICAL, ZENITH_OFFICIAL
from ..core.daylight import Daylight
from ..core.timebase import Timebase
from ..io.manifest import month_stats, write_manifest
from ..io.schema import build_row
from ..io.write_jsonl import write_jsonl
from ..io.write_parquet import write_parquet
from ..model.locations import DEFAULT_LOCATION, load_locations

logger = logging.getLogger(__name__)

ZENITHS = {
  "official": ZENITH_OFFICIAL,
  "civil": ZENITH_CIVIL,
  "nautical": ZENITH_NAUTICAL,
  "astronomical": ZENITH_ASTRONOMICAL,
}


@click.command()
@click.option("--location", default=DEFAULT_LOCATION)
@click.option("--locations", "locations_path", type=click.Path(exists=True))
@click.option("--year", type=int)
@click.option("--start", type=click.DateTime(formats=["%Y-%m-%d"]))
@click.option("--end", type=click.DateTime(formats=["%Y-%m-%d"]))
@click.option("--zenith", type=click.Choice(list(ZENITHS)), default="official")
@click.option("--format", "fmt", type=click.Choice(["jsonl", "parquet"]), default="jsonl")
@click.option("--out", "out_dir", default="out/", type=click.Path(file_okay=False))
@click.option("--log-level", default="INFO")
def main(location, locations_path, year, start, end, zenith, fmt, out_dir, log_level):
  logging.basicConfig(level=log_level.upper(), format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")
  locations = load_locations(locations_path)
  if location not in locations:
    click.echo(f"ERROR: unknown location {location}", err=True)
    sys.exit(1)
  loc = locations[location]
  if start or end:
    if not (start and end):
      click.echo("ERROR: --start and --end go together", err=True)
      sys.exit(1)
    try:
      tb = Timebase(start.date(), end.date())
    except ValueError as e:
      click.echo(f"ERROR: {e}", err=True)
      sys.exit(1)
  else:
    tb = Timebase.for_year(year or date.today().year)
  daylight = Daylight(latitude=loc.latitude, longitude=loc.longitude, zenith=ZENITHS[zenith])
  rows = [build_row(location, daylight, d) for d in tb.days()]
  logger.info("Computed %d days for %s from %s to %s", len(rows), loc.name, tb.start, tb.end)
  out = Path(out_dir) / location
  data_path = out / f"sun_events_{tb.start:%Y%m%d}_{tb.end:%Y%m%d}.{fmt}"
  if fmt == "parquet":
    write_parquet(rows, str(data_path))
  else:
    write_jsonl(rows, str(data_path))
  meta = {
    "location": location,
    "latitude": loc.latitude,
    "longitude": loc.longitude,
    "zenith": zenith,
    "start": tb.start.isoformat(),
    "end": tb.end.isoformat(),
    "rows": len(rows),
    "data": data_path.name,
    "months": month_stats(rows),
  }
  write_manifest(str(out / "manifest.json"), meta)
  click.echo(f"Done. Wrote {len(rows)} rows to {data_path}")


if __name__ == "__main__":
  main()
