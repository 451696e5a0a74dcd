from __future__ import annotations

import datetime as _dt
from dataclasses import dataclass
from typing import Any, Dict

# Season N's trade deadline falls on January 6 of year N+1.
TRADE_DEADLINE_MONTH = 1
TRADE_DEADLINE_DAY = 6


def parse_game_date(value: Any, *, field: str = "date") -> _dt.date:
    """
    Coerce an in-game date (date, datetime, or ISO string) to ``date``.
    Fail-loud. Never fall back to the OS clock.
    """
    if value is None:
        raise ValueError(f"{field} is required (in-game date; OS clock disabled)")
    if isinstance(value, _dt.datetime):
        return value.date()
    if isinstance(value, _dt.date):
        return value
    s = str(value).strip()[:10]
    try:
        return _dt.date.fromisoformat(s)
    except ValueError as exc:
        raise ValueError(f"Invalid {field}: {value!r}") from exc


def require_date_iso(value: Any, *, field: str = "date_iso") -> str:
    return parse_game_date(value, field=field).isoformat()


def add_days(value: Any, days: int) -> _dt.date:
    return parse_game_date(value) + _dt.timedelta(days=int(days))


@dataclass(frozen=True, slots=True)
class TradeDeadline:
    month: int
    day: int
    year: int

    def as_date(self) -> _dt.date:
        return _dt.date(self.year, self.month, self.day)

    def to_dict(self) -> Dict[str, int]:
        return {"month": self.month, "day": self.day, "year": self.year}


def get_trade_deadline(season_year: int) -> TradeDeadline:
    # Season 2025 tips off in October 2025; its deadline is 2026-01-06.
    return TradeDeadline(month=TRADE_DEADLINE_MONTH, day=TRADE_DEADLINE_DAY, year=int(season_year) + 1)


def is_before_deadline(current_date: Any, season_year: int) -> bool:
    """True while trades are allowed (the deadline day itself still counts)."""
    return parse_game_date(current_date, field="current_date") <= get_trade_deadline(season_year).as_date()


def days_until_deadline(current_date: Any, season_year: int) -> int:
    """Signed day count; negative once the deadline has passed."""
    today = parse_game_date(current_date, field="current_date")
    return (get_trade_deadline(season_year).as_date() - today).days
