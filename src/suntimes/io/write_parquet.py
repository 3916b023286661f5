import os
from typing import Iterable

import pyarrow as pa
import pyarrow.parquet as pq

from .schema import SunEventRow

SUN_EVENT_SCHEMA = pa.schema([
  ("date", pa.string()),
  ("location", pa.string()),
  ("latitude", pa.float64()),
  ("longitude", pa.float64()),
  ("sunrise", pa.string()),
  ("sunset", pa.string()),
  ("day_length_s", pa.int64()),
  ("polar_state", pa.string()),
])


def write_parquet(rows_iter: Iterable[SunEventRow], path: str) -> int:
  os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
  rows = [r.model_dump() for r in rows_iter]
  table = pa.Table.from_pylist(rows, schema=SUN_EVENT_SCHEMA)
  pq.write_table(table, path, compression="snappy")
  return table.num_rows
