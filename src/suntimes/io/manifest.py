import hashlib
import json
import os
from typing import Iterable

from .schema import SunEventRow


def dataset_hash(meta: dict) -> str:
  s = json.dumps(meta, sort_keys=True).encode()
  return hashlib.sha256(s).hexdigest()[:16]


def month_stats(rows: Iterable[SunEventRow]) -> dict:
  """Per-month counts of days, sunrises, sunsets and polar days/nights."""
  months = {}
  for r in rows:
    m = months.setdefault(r.date[:7], {
      "days": 0, "sunrises": 0, "sunsets": 0, "polar_day": 0, "polar_night": 0, "daylight_days": 0, "daylight_s": 0,
    })
    m["days"] += 1
    m["sunrises"] += int(r.sunrise is not None)
    m["sunsets"] += int(r.sunset is not None)
    if r.polar_state:
      m[r.polar_state] += 1
    if r.day_length_s is not None:
      m["daylight_days"] += 1
      m["daylight_s"] += r.day_length_s
  return months


def write_manifest(path: str, meta: dict) -> dict:
  os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
  meta["dataset_hash"] = dataset_hash(meta)
  with open(path, "w", encoding="utf-8") as f:
    json.dump(meta, f, indent=2)
  return meta
