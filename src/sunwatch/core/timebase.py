from dataclasses import dataclass
from datetime import date, timedelta
from typing import Optional


@dataclass
class Timebase:
  year: int
  month: Optional[int] = None

  def days(self):
    d = date(self.year, self.month or 1, 1)
    while d.year == self.year and (self.month is None or d.month == self.month):
      yield d
      d += timedelta(days=1)
