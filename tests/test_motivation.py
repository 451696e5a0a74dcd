from __future__ import annotations

import random

import pytest

from league import Motivation, MotivationCategory as C, SeasonStats
from motivation import (
    ArchetypeKey,
    CareerEvents,
    MarketSize,
    RetentionContext,
    apply_weight_shifts,
    archetype_label,
    archetype_pool,
    calculate_retention_score,
    generate_motivations,
    get_market_size,
    recalculate_satisfaction,
    retention_context_for_team,
    with_motivations,
)


def test_generation_covers_every_category_within_bounds(make_player):
    out = generate_motivations(make_player("p1"), random.Random(11))
    assert set(out) == set(C)
    for m in out.values():
        assert 0.05 <= m.weight <= 1.0
        assert m.satisfaction == 0.5


def test_generation_is_reproducible_under_a_seed(make_player):
    p = make_player("p1")
    assert generate_motivations(p, random.Random(3)) == generate_motivations(p, random.Random(3))


def test_lowest_draw_picks_balanced_with_full_negative_jitter(make_player, fixed_rng):
    out = generate_motivations(make_player("p1"), fixed_rng(0.0))
    assert out[C.MONEY].weight == pytest.approx(0.45)
    assert out[C.LOYALTY].weight == pytest.approx(0.35)
    assert out[C.MARKET].weight == pytest.approx(0.15)


def test_archetype_pool_tilts_with_traits_age_and_rating(make_player):
    base = archetype_pool(make_player("p", age=25, overall_rating=75))
    assert base[ArchetypeKey.BALANCED] == 40

    vet_star = archetype_pool(make_player("v", age=33, overall_rating=88, traits=("competitor",)))
    assert vet_star[ArchetypeKey.RING_CHASER] == 30
    assert vet_star[ArchetypeKey.MAX_CONTRACT_HUNTER] == 20
    assert vet_star[ArchetypeKey.COMPETITOR] == 40


def test_retention_is_neutral_without_motivations(make_player):
    assert calculate_retention_score(make_player("p1")) == 50


def test_retention_adds_incumbent_bonus_and_clamps(make_player):
    loyal = make_player("p1", motivations={C.LOYALTY: Motivation(weight=1.0)})
    assert calculate_retention_score(loyal, RetentionContext(years_with_team=3)) == 77
    assert calculate_retention_score(loyal, RetentionContext(years_with_team=10)) == 100


def test_salary_override_changes_money_satisfaction_only(make_player):
    p = make_player("p1", motivations={C.MONEY: Motivation(weight=1.0)})
    ctx = RetentionContext(contract_salary=2_000_000.0, expected_salary=20_000_000.0)
    assert calculate_retention_score(p, ctx) == 22
    assert calculate_retention_score(p, ctx, salary_override=20_000_000.0) == 100


@pytest.mark.parametrize("seed", range(8))
def test_retention_stays_in_range_for_random_profiles(make_player, seed):
    rng = random.Random(seed)
    for i in range(25):
        p = make_player(f"p{i}")
        if i % 2:
            motivations = generate_motivations(p, rng)
        else:
            motivations = {c: Motivation(weight=rng.random(), satisfaction=rng.random()) for c in C}
        p = with_motivations(p, motivations)
        ctx = RetentionContext(
            team_win_pct=rng.random(),
            made_playoffs=rng.random() < 0.5,
            years_with_team=int(rng.random() * 12),
            coach_stability=rng.random() < 0.5,
            contract_salary=rng.random() * 40_000_000.0,
            expected_salary=rng.random() * 40_000_000.0,
        )
        score = calculate_retention_score(p, ctx)
        assert isinstance(score, int)
        assert 0 <= score <= 100


def test_recalculate_satisfaction_is_pure(make_player, make_roster):
    motivations = {
        C.LOYALTY: Motivation(weight=0.7),
        C.COACHING: Motivation(weight=0.3),
        C.MARKET: Motivation(weight=0.4),
        C.STAR_PAIRING: Motivation(weight=0.5),
    }
    p = make_player("p1", motivations=dict(motivations))
    teammates = make_roster("AAA", [84, 81, 70])
    ctx = RetentionContext(
        years_with_team=4,
        coach_stability=False,
        team_market_size=MarketSize.LARGE,
        team_roster=tuple(teammates),
    )

    out = recalculate_satisfaction(p, ctx)

    assert p.motivations == motivations
    assert out[C.LOYALTY] == Motivation(weight=0.7, satisfaction=pytest.approx(0.8))
    assert out[C.COACHING].satisfaction == 0.4
    assert out[C.MARKET].satisfaction == 0.8
    assert out[C.STAR_PAIRING].satisfaction == 0.8
    assert set(out) == set(motivations)


def test_role_satisfaction_tracks_minutes(make_player):
    p = make_player("p1", motivations={C.ROLE: Motivation(weight=1.0)})
    starter = recalculate_satisfaction(p, RetentionContext(player_stats=SeasonStats(games_played=10, minutes=330.0)))
    bench = recalculate_satisfaction(p, RetentionContext(player_stats=SeasonStats(games_played=10, minutes=30.0)))
    assert starter[C.ROLE].satisfaction == 1.0
    assert bench[C.ROLE].satisfaction == 0.2
    assert recalculate_satisfaction(p)[C.ROLE].satisfaction == pytest.approx(0.5)


def test_weight_shifts_for_aging_trade_and_title(make_player):
    p = make_player(
        "p1",
        age=33,
        motivations={
            C.WINNING: Motivation(weight=0.5, satisfaction=0.9),
            C.LOYALTY: Motivation(weight=0.1),
            C.MONEY: Motivation(weight=0.5),
        },
    )
    out = apply_weight_shifts(p, CareerEvents(was_traded=True, won_championship=True))
    assert out[C.WINNING].weight == pytest.approx(0.52)
    assert out[C.WINNING].satisfaction == 0.9
    assert out[C.LOYALTY].weight == pytest.approx(0.05)
    assert out[C.MONEY].weight == pytest.approx(0.55)


def test_weight_shifts_leave_young_untouched_players_alone(make_player):
    p = make_player("p1", age=24, motivations={C.WINNING: Motivation(weight=0.5)})
    assert apply_weight_shifts(p) == {C.WINNING: Motivation(weight=0.5)}


def test_retention_context_reads_league_state(make_player, make_context):
    p = make_player("p1", team_abbreviation="NYK", overall_rating=80, contract_salary=15_000_000.0, years_with_team=2)
    ctx = retention_context_for_team(p, [p], make_context({"NYK": (30, 10)}), made_playoffs=True)
    assert ctx.team_win_pct == pytest.approx(0.75)
    assert ctx.team_market_size is MarketSize.LARGE
    assert ctx.expected_salary == 20_000_000
    assert ctx.years_with_team == 2
    assert ctx.made_playoffs


def test_unknown_market_is_medium():
    assert get_market_size("ZZZ") is MarketSize.MEDIUM
    assert get_market_size(None) is MarketSize.MEDIUM


def test_archetype_label(make_player, fixed_rng):
    p = make_player("p1")
    assert archetype_label(p) == "Unknown"
    p = with_motivations(p, generate_motivations(p, fixed_rng(0.0)))
    assert archetype_label(p) == "Balanced"
