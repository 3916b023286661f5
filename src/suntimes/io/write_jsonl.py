import json
import os
from typing import Iterable

from .schema import SunEventRow


def write_jsonl(rows_iter: Iterable[SunEventRow], path: str) -> int:
  os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
  count = 0
  with open(path, "w", encoding="utf-8") as f:
    for r in rows_iter:
      f.write(json.dumps(r.model_dump(), ensure_ascii=False) + "\n")
      count += 1
  return count
