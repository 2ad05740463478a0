import json
import os
from typing import Iterable

from .schema import SunEventRow


def write_jsonl(rows_iter: Iterable[SunEventRow], path: str):
  parent = os.path.dirname(path)
  if parent:
    os.makedirs(parent, exist_ok=True)
  with open(path, "w", encoding="utf-8") as f:
    for r in rows_iter:
      f.write(json.dumps(r.model_dump(mode="json"), ensure_ascii=False) + "\n")
