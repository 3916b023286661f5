import json
from pathlib import Path

import click


def _hhmm(seconds: float) -> str:
  minutes = int(round(seconds / 60))
  return f"{minutes // 60:02d}:{minutes % 60:02d}"


@click.command()
@click.option("--manifest", required=True, type=click.Path(exists=True))
def main(manifest):
  m = json.loads(Path(manifest).read_text(encoding="utf-8"))
  months = m.get("months", {})
  rows = sorted(months.items())
  width = max(len(k) for k, _ in rows) if rows else 7
  click.echo("Month".ljust(width) + " | Days | Mean daylight | Polar day | Polar night")
  click.echo("-" * width + "-|------|---------------|-----------|------------")
  for k, v in rows:
    mean = _hhmm(v["daylight_s"] / v["daylight_days"]) if v.get("daylight_days") else "--:--"
    click.echo(
      k.ljust(width)
      + f" | {v['days']:>4} | {mean:>13} | {v.get('polar_day', 0):>9} | {v.get('polar_night', 0):>11}"
    )
  click.echo(f"Location: {m.get('location')}, {m.get('start')} to {m.get('end')}")


if __name__ == "__main__":
  main()
