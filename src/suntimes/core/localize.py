from datetime import datetime, tzinfo
from typing import Optional


def to_local(instant: Optional[datetime], tz: Optional[tzinfo] = None) -> Optional[datetime]:
  """Convert an aware UTC instant to `tz`, or to the host's zone when tz is None."""
  if instant is None:
    return None
  if tz is None:
    return instant.astimezone()
  return instant.astimezone(tz)
