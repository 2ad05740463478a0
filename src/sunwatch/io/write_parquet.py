import os
from typing import Iterable

import pyarrow as pa
import pyarrow.parquet as pq

from .schema import SunEventRow


def write_rows_parquet(rows_iter: Iterable[SunEventRow], path: str):
  parent = os.path.dirname(path)
  if parent:
    os.makedirs(parent, exist_ok=True)
  rows = [r.model_dump() for r in rows_iter]
  if not rows:
    return
  table = pa.Table.from_pylist(rows)
  pq.write_table(table, path, compression="snappy")
