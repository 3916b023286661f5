from pathlib import Path
from typing import Dict, Optional, Union

import yaml
from pydantic import BaseModel, Field

DEFAULT_LOCATIONS = Path(__file__).parent.parent / "config" / "locations.yaml"
DEFAULT_LOCATION = "montreal"


class Location(BaseModel):
  name: str
  latitude: float = Field(ge=-90, le=90)
  longitude: float = Field(ge=-180, le=180)
  timezone: Optional[str] = None


def load_locations(path: Optional[Union[str, Path]] = None) -> Dict[str, Location]:
  """
  Read named locations from a YAML file with a top-level `locations` mapping.
  Falls back to the packaged defaults.
  """
  source = Path(path) if path else DEFAULT_LOCATIONS
  data = yaml.safe_load(source.read_text(encoding="utf-8")) or {}
  return {
    key: Location(**{"name": key, **value})
    for key, value in (data.get("locations") or {}).items()
  }
