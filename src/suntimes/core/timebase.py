from dataclasses import dataclass
from datetime import date, timedelta


@dataclass
class Timebase:
  start: date
  end: date

  def __post_init__(self):
    if self.end < self.start:
      raise ValueError(f"end {self.end} is before start {self.start}")

  @classmethod
  def for_year(cls, year: int) -> "Timebase":
    return cls(date(year, 1, 1), date(year, 12, 31))

  def days(self):
    d = self.start
    while d <= self.end:
      yield d
      d += timedelta(days=1)

  def __len__(self) -> int:
    return (self.end - self.start).days + 1
