from __future__ import annotations

import datetime as dt
from dataclasses import replace

import pytest

from league import (
    LUXURY_TAX_LINE,
    Direction,
    DraftPick,
    LeagueContext,
    PickAsset,
    PlayerAsset,
    ProposalStatus,
    TradeProposal,
)
from trades import AiMarketConfig
from trades.generation import (
    NeedKind,
    TradePattern,
    TradeNeed,
    build_ai_offer,
    find_target_players,
    generate_weekly_proposals,
    identify_need,
    match_ai_trades,
    proposal_id,
    proposal_probability,
)

NOV_1 = dt.date(2025, 11, 1)


# ---------------------------------------------------------------------------
# need / offer helpers
# ---------------------------------------------------------------------------


def test_buyer_need_is_the_weakest_starting_spot(make_roster):
    roster = make_roster("AAA", [90, 80, 78, 76, 75])
    need = identify_need(Direction.WIN_NOW, roster)
    assert need.kind is NeedKind.POSITION
    assert need.position == "C"
    assert need.min_rating == 77


def test_buyer_with_no_hole_shops_for_a_star(make_roster):
    need = identify_need(Direction.TITLE_CONTENDER, make_roster("AAA", [90, 88, 86, 84, 82]))
    assert need.kind is NeedKind.STAR
    assert need.min_rating == 80


def test_rebuilder_and_ascending_needs(make_roster):
    young = identify_need(Direction.REBUILDING, make_roster("AAA", [60] * 5))
    assert young.kind is NeedKind.YOUNG
    assert young.max_age == 24

    ascending = identify_need(Direction.ASCENDING, make_roster("AAA", [60] * 5))
    assert ascending.kind is NeedKind.POSITION
    assert ascending.min_rating == 72


def test_offer_skips_the_core_and_sweetens_light_packages(make_roster, make_player):
    roster = make_roster("AAA", [90, 85, 84, 70, 60])
    pick = DraftPick("aaa-2026-1", year=2026)

    fair = build_ai_offer(roster, make_player("t", overall_rating=74), Direction.WIN_NOW, [pick])
    assert fair == (PlayerAsset("aaa3"),)

    light = build_ai_offer(roster, make_player("t", overall_rating=95), Direction.WIN_NOW, [pick])
    assert light == (PlayerAsset("aaa3"), PickAsset("aaa-2026-1"))

    pricey = make_player("t", trade_value=150.0)
    assert build_ai_offer(roster, pricey, Direction.WIN_NOW, [pick]) == (PickAsset("aaa-2026-1"),)
    assert build_ai_offer(roster, pricey, Direction.WIN_NOW) is None


def test_proposal_probability_rises_near_the_deadline():
    assert proposal_probability(Direction.REBUILDING, 60) == pytest.approx(0.15)
    assert proposal_probability(Direction.WIN_NOW, 20) == pytest.approx(0.45)
    assert proposal_probability(Direction.ASCENDING, 20) == pytest.approx(0.30)
    assert proposal_probability(Direction.WIN_NOW, -1) == pytest.approx(0.15)


def test_proposal_ids_are_stable():
    assert proposal_id("AAA", NOV_1, "u1") == proposal_id("AAA", NOV_1, "u1")
    assert len(proposal_id("AAA", NOV_1, "u1")) == 16
    assert proposal_id("AAA", NOV_1, "u1") != proposal_id("AAA", NOV_1, "u2")


def test_targets_on_cooldown_do_not_crowd_out_eligible_ones(make_roster):
    user_roster = make_roster("USR", [80, 78, 76, 74, 72, 70], age=22)
    need = TradeNeed(kind=NeedKind.YOUNG, min_rating=70, max_age=24)

    # The best match (usr0) is never targeted; equal retention keeps value order.
    open_targets = find_target_players(user_roster, need)
    assert [p.id for p in open_targets] == ["usr1", "usr2", "usr3"]

    cooled = find_target_players(user_roster, need, excluded=["usr1", "usr2", "usr3"])
    assert [p.id for p in cooled] == ["usr4", "usr5"]


# ---------------------------------------------------------------------------
# weekly proposals
# ---------------------------------------------------------------------------


@pytest.fixture
def pitch_league(make_roster, make_player, make_team, make_lookups):
    # A veteran rebuilder shopping for young talent.
    ai_roster = make_roster("AAA", [72, 70, 68, 66, 66, 65, 65, 64, 64, 62], age=30)
    user_roster = [
        make_player("u0", team_abbreviation="USR", position="PG", overall_rating=80, age=23),
        make_player(
            "u1",
            team_abbreviation="USR",
            position="SG",
            overall_rating=74,
            age=22,
            contract_salary=3_000_000.0,
            contract_years_remaining=3,
        ),
    ] + [
        make_player(f"u{i}", team_abbreviation="USR", position="SF", overall_rating=70, age=29)
        for i in range(2, 7)
    ]
    ai_team = make_team("AAA", ai_roster)
    user_team = make_team("USR", user_roster)
    lookups = make_lookups(ai_roster + user_roster, [ai_team, user_team])
    return ai_team, user_team, lookups


def _pitch(league, rng, **kw):
    ai_team, user_team, lookups = league
    args = dict(
        ai_teams=[ai_team, user_team],
        user_team=user_team,
        context=LeagueContext(),
        lookups=lookups,
        current_date=NOV_1,
        season_year=2025,
        rng=rng,
    )
    args.update(kw)
    return generate_weekly_proposals(**args)


def test_rebuilder_pitches_a_veteran_for_young_talent(pitch_league, fixed_rng):
    proposals = _pitch(pitch_league, fixed_rng(0.0))

    assert len(proposals) == 1
    p = proposals[0]
    # u0 is the user's best young match and stays off limits.
    assert p.target_player_id == "u1"
    assert p.ai_receives == (PlayerAsset("u1"),)
    assert p.ai_gives == (PlayerAsset("aaa0"),)
    assert p.proposing_team_id == "AAA"
    assert p.receiving_team_id == "USR"
    assert p.status is ProposalStatus.PENDING
    assert p.created_at == NOV_1
    assert p.expires_at == dt.date(2025, 11, 4)
    assert p.id == proposal_id("AAA", NOV_1, "u1")
    assert p.reason


def test_failed_probability_roll_sends_nothing(pitch_league, fixed_rng):
    assert _pitch(pitch_league, fixed_rng(0.99)) == []


def test_no_pitches_after_the_deadline(pitch_league, fixed_rng):
    assert _pitch(pitch_league, fixed_rng(0.0), current_date="2026-01-07") == []


def test_pending_pitch_puts_team_on_cooldown(pitch_league, fixed_rng):
    pending = TradeProposal(
        id="old",
        proposing_team_id="AAA",
        ai_gives=(PlayerAsset("aaa1"),),
        ai_receives=(PlayerAsset("u2"),),
        created_at=NOV_1 - dt.timedelta(days=2),
        expires_at=NOV_1 + dt.timedelta(days=1),
    )
    assert _pitch(pitch_league, fixed_rng(0.0), existing_proposals=[pending]) == []


# ---------------------------------------------------------------------------
# AI <-> AI market
# ---------------------------------------------------------------------------


@pytest.fixture
def market(make_roster, make_team, make_lookups):
    buyer = make_roster(
        "BUY",
        [88, 86, 84, 80, 78, 76, 75, 74, 72, 70],
        age=28,
        contract_salary=10_000_000.0,
        contract_years_remaining=3,
    )
    seller = make_roster(
        "REB",
        [76, 70, 68, 66, 66, 65, 65, 64, 64, 62],
        age=30,
        contract_salary=10_000_000.0,
        contract_years_remaining=3,
    )
    buy = make_team("BUY", buyer, draft_picks=(DraftPick("buy-2026-1", year=2026, round=1, original_team_id="BUY"),))
    reb = make_team("REB", seller, trading_block=("reb0",))
    lookups = make_lookups(buyer + seller, [buy, reb], pick_values={"buy-2026-1": 40.0})
    return buy, reb, lookups


def _match(market, rng, **kw):
    buy, reb, lookups = market
    args = dict(
        teams=[buy, reb],
        context=LeagueContext(),
        lookups=lookups,
        current_date=NOV_1,
        season_year=2025,
        rng=rng,
    )
    args.update(kw)
    return match_ai_trades(**args)


def test_contender_buys_a_listed_veteran_with_a_pick(market, fixed_rng):
    deals = _match(market, fixed_rng(0.0))

    assert len(deals) == 1
    deal = deals[0]
    assert deal.pattern is TradePattern.PLAYER_FOR_PICKS
    assert deal.team_a_id == "BUY"
    assert deal.team_b_id == "REB"
    assert deal.team_a_gives == (PickAsset("buy-2026-1"),)
    assert deal.team_b_gives == (PlayerAsset("reb0"),)
    assert deal.team_a_payroll_after == pytest.approx(110_000_000.0)
    assert deal.team_b_payroll_after == pytest.approx(90_000_000.0)
    assert all(e.accepted for e in deal.evaluations)


def test_tax_line_blocks_the_deal(market, fixed_rng):
    assert _match(market, fixed_rng(0.0), config=AiMarketConfig(luxury_tax_line=100_000_000.0)) == []


def test_excluded_teams_are_not_paired(market, fixed_rng):
    assert _match(market, fixed_rng(0.0), exclude_team_ids=["REB"]) == []


def test_market_closes_at_the_deadline(market, fixed_rng):
    assert _match(market, fixed_rng(0.0), current_date="2026-01-07") == []


def test_deal_cap_is_respected(market, fixed_rng):
    assert _match(market, fixed_rng(0.0), config=AiMarketConfig(max_deals=0)) == []
    assert _match(market, fixed_rng(0.5)) == []


def _market_deal(teams, lookups, fixed_rng):
    deals = match_ai_trades(
        teams=teams,
        context=LeagueContext(),
        lookups=lookups,
        current_date=NOV_1,
        season_year=2025,
        rng=fixed_rng(0.0),
    )
    assert len(deals) == 1
    deal = deals[0]
    assert all(e.accepted for e in deal.evaluations)
    assert deal.team_a_payroll_after <= LUXURY_TAX_LINE
    assert deal.team_b_payroll_after <= LUXURY_TAX_LINE
    return deal


def test_rebuilders_swap_young_players_of_equal_value(make_roster, make_team, make_lookups, fixed_rng):
    ratings = [76, 75, 74, 72, 70, 68, 66, 65, 64, 62]
    # One 22-year-old power forward each; everyone else is a 30-year-old veteran.
    aaa = make_roster("AAA", ratings, age=30)
    bbb = make_roster("BBB", ratings, age=30)
    aaa[3] = replace(aaa[3], age=22)
    bbb[3] = replace(bbb[3], age=22)
    teams = [make_team("AAA", aaa), make_team("BBB", bbb)]

    deal = _market_deal(teams, make_lookups(aaa + bbb, teams), fixed_rng)

    assert deal.pattern is TradePattern.SWAP
    assert {deal.team_a_id, deal.team_b_id} == {"AAA", "BBB"}
    assert sorted(a.player_id for a in deal.team_a_gives + deal.team_b_gives) == ["aaa3", "bbb3"]
    assert len(deal.team_a_gives) == len(deal.team_b_gives) == 1
    assert deal.team_a_payroll_after == pytest.approx(50_000_000.0)


def test_rebuilder_adds_a_pick_to_reach_a_young_starter(make_roster, make_team, make_lookups, fixed_rng):
    veterans = make_roster("REB", [74, 72, 70, 66, 65, 64, 63, 62, 61, 60], age=30)
    prospects = make_roster("ASC", [80, 78, 77, 76, 75, 70, 68, 66, 65, 64], age=22)
    pick = DraftPick("reb-2026-1", year=2026, round=1, original_team_id="REB")
    reb = make_team("REB", veterans, draft_picks=(pick,))
    asc = make_team("ASC", prospects)
    lookups = make_lookups(veterans + prospects, [reb, asc], pick_values={"reb-2026-1": 90.0})

    deal = _market_deal([asc, reb], lookups, fixed_rng)

    assert deal.pattern is TradePattern.PLAYER_PLUS_PICK_FOR_PLAYER
    assert deal.team_a_id == "REB"
    assert deal.team_a_gives == (PlayerAsset("reb3"), PickAsset("reb-2026-1"))
    assert deal.team_b_gives == (PlayerAsset("asc0"),)
    assert [e.team_direction for e in deal.evaluations] == [Direction.REBUILDING, Direction.ASCENDING]
