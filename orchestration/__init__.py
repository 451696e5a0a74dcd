"""Daily, weekly and offseason evaluation cycles."""

from .cycle import run_daily_cycle, run_offseason_cycle, run_weekly_cycle
from .types import DailyReport, OffseasonReport, WeeklyReport

__all__ = [
    "run_daily_cycle",
    "run_weekly_cycle",
    "run_offseason_cycle",
    "DailyReport",
    "WeeklyReport",
    "OffseasonReport",
]
