from __future__ import annotations

import datetime as dt

import pytest

from league import (
    BAD_PAYLOAD,
    MISSING_COLLABORATOR,
    EngineError,
    LeagueLookups,
    MotivationCategory,
    PickAsset,
    PlayerAsset,
    ProposalStatus,
    SeasonStats,
    Team,
    TeamRecord,
    build_context,
    cap_situation,
    expected_salary,
    team_payroll,
)
from league.normalize import asset_from_mapping, player_from_mapping, proposal_from_mapping, team_from_mapping


# ---------------------------------------------------------------------------
# normalize
# ---------------------------------------------------------------------------


def test_player_spellings_normalize_to_the_same_record():
    camel = {
        "id": "p1",
        "firstName": "Ada",
        "lastName": "Stone",
        "teamAbbreviation": "BOS",
        "overallRating": 81,
        "contractSalary": 12_000_000,
        "contractYearsRemaining": 2,
        "yearsWithTeam": 3,
        "isInjured": True,
    }
    snake = {
        "id": "p1",
        "first_name": "Ada",
        "last_name": "Stone",
        "team_abbreviation": "BOS",
        "overall_rating": 81,
        "contract_salary": 12_000_000,
        "contract_years_remaining": 2,
        "years_with_team": 3,
        "is_injured": True,
    }
    assert player_from_mapping(camel) == player_from_mapping(snake)
    p = player_from_mapping(camel)
    assert p.name == "Ada Stone"
    assert p.is_injured and not p.is_free_agent


def test_player_missing_optionals_stay_unset():
    p = player_from_mapping({"id": 7})
    assert p.id == "7"
    assert p.overall_rating is None
    assert p.contract_years_remaining is None
    assert p.years_with_team == 1
    assert p.is_free_agent


def test_player_on_fa_team_is_a_free_agent():
    assert player_from_mapping({"id": "x", "teamAbbreviation": "FA"}).is_free_agent
    assert not player_from_mapping({"id": "y", "teamAbbreviation": "NYK"}).is_free_agent


def test_player_motivations_and_traits_are_parsed():
    p = player_from_mapping(
        {
            "id": "m",
            "motivations": {"money": {"weight": 0.9, "satisfaction": 0.2}, "bogus": {"weight": 1}},
            "personality": {"traits": ["leader"]},
        }
    )
    assert set(p.motivations) == {MotivationCategory.MONEY}
    assert p.motivations[MotivationCategory.MONEY].weight == pytest.approx(0.9)
    assert p.traits == ("leader",)


def test_player_without_id_is_a_bad_payload():
    with pytest.raises(EngineError) as exc:
        player_from_mapping({"firstName": "Nobody"})
    assert exc.value.code == BAD_PAYLOAD
    with pytest.raises(EngineError):
        player_from_mapping("not a mapping")


def test_team_normalization_reads_roster_objects_and_picks():
    team = team_from_mapping(
        {
            "teamId": "t1",
            "abbreviation": "BOS",
            "conference": "East",
            "roster": [{"id": "a"}, "b"],
            "draftPicks": [{"id": "bos-2026-1", "year": 2026, "round": 1}],
            "tradingBlock": ["b"],
        }
    )
    assert team.id == "t1" and team.abbreviation == "BOS"
    assert team.conference == "east"
    assert team.roster_ids == ("a", "b")
    assert team.draft_picks[0].year == 2026
    assert team.trading_block == ("b",)


def test_assets_require_a_known_type():
    assert asset_from_mapping({"type": "player", "playerId": "p1"}) == PlayerAsset("p1")
    assert asset_from_mapping({"type": "pick", "pickId": "k1"}) == PickAsset("k1")
    with pytest.raises(EngineError):
        asset_from_mapping({"type": "cash", "amount": 5})


def test_proposal_reads_nested_packages_and_dates():
    p = proposal_from_mapping(
        {
            "id": "abc",
            "proposingTeamId": "AAA",
            "status": "rejected",
            "proposal": {
                "aiGives": [{"type": "player", "playerId": "a1"}],
                "aiReceives": [{"type": "player", "playerId": "u1"}],
            },
            "createdAt": "2025-11-01",
            "expiresAt": "2025-11-04",
            "resolvedAt": "2025-11-02",
        }
    )
    assert p.status is ProposalStatus.REJECTED
    assert p.ai_gives == (PlayerAsset("a1"),)
    assert p.ai_receives == (PlayerAsset("u1"),)
    assert p.created_at == dt.date(2025, 11, 1)
    assert p.resolved_at == dt.date(2025, 11, 2)


def test_proposal_with_bad_date_is_a_bad_payload():
    with pytest.raises(EngineError) as exc:
        proposal_from_mapping({"id": "x", "proposingTeamId": "AAA", "expiresAt": "soon"})
    assert exc.value.code == BAD_PAYLOAD


# ---------------------------------------------------------------------------
# context
# ---------------------------------------------------------------------------


def test_build_context_flattens_conferences_by_abbreviation():
    teams = [Team(id="1", abbreviation="BOS"), Team(id="2", abbreviation="NYK")]
    standings = {
        "east": [
            {"teamId": "1", "wins": 10, "losses": 5},
            {"team_id": 2, "wins": 4, "losses": 12},
        ],
        "west": [{"abbreviation": "LAL", "wins": 9, "losses": 9}],
    }
    ctx = build_context(standings, teams, "regular_season")
    assert ctx.record_for("BOS") == TeamRecord(10, 5)
    assert ctx.record_for("NYK") == TeamRecord(4, 12)
    assert ctx.record_for("LAL") == TeamRecord(9, 9)
    assert ctx.games_played == 18
    assert ctx.record_for("SEA").win_pct == 0.5


# ---------------------------------------------------------------------------
# salary
# ---------------------------------------------------------------------------


@pytest.mark.parametrize(
    "rating, salary",
    [(95, 40_000_000), (90, 40_000_000), (86, 30_000_000), (80, 20_000_000), (77, 10_000_000), (70, 5_000_000), (69, 2_000_000)],
)
def test_expected_salary_tiers(rating, salary):
    assert expected_salary(rating) == salary


def test_expected_salary_production_adjustment_is_clamped():
    hot = SeasonStats(games_played=10, points=270.0)
    assert expected_salary(80, hot) == pytest.approx(24_000_000)

    cold = SeasonStats(games_played=10, points=90.0)
    assert expected_salary(80, cold) == pytest.approx(16_000_000)

    too_few_games = SeasonStats(games_played=4, points=200.0)
    assert expected_salary(80, too_few_games) == 20_000_000


def test_cap_situation(make_player):
    roster = [make_player(f"p{i}", contract_salary=17_000_000.0) for i in range(10)]
    cap = cap_situation(roster)
    assert team_payroll(roster) == 170_000_000.0
    assert cap.over_cap and cap.over_tax
    assert cap.cap_space == 0.0


# ---------------------------------------------------------------------------
# lookups
# ---------------------------------------------------------------------------


def test_lookups_require_player_and_roster_accessors():
    lookups = LeagueLookups()
    with pytest.raises(EngineError) as exc:
        lookups.roster("BOS")
    assert exc.value.code == MISSING_COLLABORATOR
    with pytest.raises(EngineError):
        lookups.player("p1")
    assert lookups.stats("p1") is None
    assert lookups.pick_value("any") == 5.0


def test_snapshot_roster_follows_team_order(make_player, make_team):
    a, b, c = make_player("a"), make_player("b"), make_player("c", team_abbreviation="NYK")
    team = make_team("AAA", [b, a])
    lookups = LeagueLookups.from_snapshot([a, b, c], [team], pick_values={"k": 12})
    assert [p.id for p in lookups.roster("AAA")] == ["b", "a"]
    assert [p.id for p in lookups.roster("NYK")] == ["c"]
    assert lookups.pick_value("k") == 12.0
