from __future__ import annotations

import pytest

from league import Direction
from team_direction import (
    analyze_roster,
    analyze_team_direction,
    assess_team_direction,
    get_trade_interest,
    is_eliminated,
    record_weight,
)


def test_deep_roster_with_solid_record_is_win_now(make_roster, make_team, make_context):
    # Ten 82s, nobody at 85: half star credits only. 11-9 after 30 league games.
    roster = make_roster("AAA", [82] * 10)
    team = make_team("AAA", roster)
    ctx = make_context({"AAA": (11, 9), "BBB": (15, 15)})

    assessment = assess_team_direction(team, roster, ctx)

    assert assessment.direction is Direction.WIN_NOW
    assert assessment.override == ""
    assert assessment.record_weight == pytest.approx(0.5)
    assert assessment.scores[Direction.WIN_NOW] == pytest.approx(0.675)
    assert assessment.scores[Direction.TITLE_CONTENDER] == pytest.approx(0.5375)
    assert assessment.scores[Direction.ASCENDING] == pytest.approx(0.425)


def test_elite_roster_and_record_overrides_to_title_contender(make_roster, make_team, make_context):
    roster = make_roster("AAA", [88] * 10)
    team = make_team("AAA", roster)
    ctx = make_context({"AAA": (12, 3)}, games_played=15)

    assessment = assess_team_direction(team, roster, ctx)
    assert assessment.direction is Direction.TITLE_CONTENDER
    assert assessment.override == "elite_roster_and_record"


def test_eliminated_team_rebuilds_regardless_of_roster(make_roster, make_team, make_context):
    roster = make_roster("AAA", [88] * 10)
    team = make_team("AAA", roster)
    ctx = make_context({"AAA": (5, 30)})

    assessment = assess_team_direction(team, roster, ctx)
    assert assessment.direction is Direction.REBUILDING
    assert assessment.override == "eliminated"
    assert get_trade_interest(team, roster, ctx) == "high"


def test_preseason_classification_is_roster_only(make_roster, make_team, make_context):
    weak = make_roster("AAA", [65] * 10, age=21)
    assert analyze_team_direction(make_team("AAA", weak), weak, make_context()) is Direction.REBUILDING

    young = make_roster("BBB", [72] * 10, age=22)
    assert analyze_team_direction(make_team("BBB", young), young, make_context()) is Direction.ASCENDING


def test_missing_context_is_treated_as_preseason(make_roster, make_team):
    roster = make_roster("AAA", [72] * 10, age=22)
    assert analyze_team_direction(make_team("AAA", roster), roster, None) is Direction.ASCENDING


def test_is_eliminated_waits_for_twenty_games():
    assert not is_eliminated(2, 17)
    assert is_eliminated(5, 30)
    assert not is_eliminated(20, 20)


def test_finished_season_is_not_an_elimination():
    assert not is_eliminated(10, 44)
    assert not is_eliminated(20, 40)


def test_record_weight_caps_at_seventy_percent():
    assert record_weight(0) == 0.0
    assert record_weight(30) == pytest.approx(0.5)
    assert record_weight(54) == pytest.approx(0.7)


def test_roster_metrics(make_roster):
    empty = analyze_roster([])
    assert empty.star_power == 0.0
    assert empty.avg_overall == 75.0

    roster = make_roster("AAA", [90, 86, 83, 70, 70, 60])
    m = analyze_roster(roster)
    # 1 + 1 + 0.5 credits over a norm of 2
    assert m.star_power == 1.0
    assert m.avg_overall == pytest.approx(76.5)
    assert m.core_alignment == 1.0
