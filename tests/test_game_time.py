from __future__ import annotations

import datetime as dt

import pytest

import game_time


def test_deadline_for_2025_season_is_january_sixth_2026():
    deadline = game_time.get_trade_deadline(2025)
    assert deadline.to_dict() == {"month": 1, "day": 6, "year": 2026}
    assert deadline.as_date() == dt.date(2026, 1, 6)


def test_deadline_day_itself_is_still_open():
    assert game_time.is_before_deadline("2026-01-06", 2025)
    assert not game_time.is_before_deadline("2026-01-07", 2025)
    assert game_time.is_before_deadline(dt.date(2025, 10, 20), 2025)


def test_days_until_deadline_is_signed():
    assert game_time.days_until_deadline("2025-12-07", 2025) == 30
    assert game_time.days_until_deadline("2026-01-06", 2025) == 0
    assert game_time.days_until_deadline("2026-01-10", 2025) == -4


def test_parse_game_date_accepts_dates_datetimes_and_iso_prefixes():
    assert game_time.parse_game_date("2025-11-01") == dt.date(2025, 11, 1)
    assert game_time.parse_game_date("2025-11-01T19:30:00") == dt.date(2025, 11, 1)
    assert game_time.parse_game_date(dt.datetime(2025, 11, 1, 8, 0)) == dt.date(2025, 11, 1)
    assert game_time.require_date_iso(dt.date(2025, 11, 1)) == "2025-11-01"
    assert game_time.add_days("2025-12-30", 3) == dt.date(2026, 1, 2)


def test_parse_game_date_never_falls_back_to_the_os_clock():
    with pytest.raises(ValueError):
        game_time.parse_game_date(None, field="current_date")
    with pytest.raises(ValueError):
        game_time.parse_game_date("not-a-date")
