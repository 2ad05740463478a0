from datetime import datetime


def format_instant(dt: datetime, fmt: str) -> str:
  return dt.strftime(fmt)


def format_minutes(m: float) -> str:
  # wrap into the day first; UTC minutes can fall outside [0, 1440)
  total = int(round(m)) % 1440
  return f"{total // 60:02d}:{total % 60:02d}"


def format_duration(m: float) -> str:
  total = int(round(m))
  return f"{total // 60}h{total % 60:02d}m"
