# motivation/logic.py
"""Motivation generation, satisfaction and retention scoring.

Weight vs satisfaction
----------------------
- weight: how much a player cares about a category. Set once by
  ``generate_motivations`` and only nudged by ``apply_weight_shifts``.
- satisfaction: how well the current situation serves that category.
  Recomputed from a RetentionContext on every ``recalculate_satisfaction`` call.

Every function here is pure. Players are immutable snapshots; callers persist
the returned motivations themselves (see ``with_motivations``).
"""

from __future__ import annotations

import dataclasses
import logging
from typing import Dict, Mapping, Optional, Sequence

from league.rng import RandomSource, ensure_rng, weighted_choice
from league.salary import expected_salary as _expected_salary
from league.types import LeagueContext, Motivation, MotivationCategory, Player, SeasonStats

from . import config as cfg
from .archetypes import ARCHETYPES, BASE_POOL, ArchetypeKey
from .config import MarketSize
from .types import CareerEvents, RetentionContext

logger = logging.getLogger(__name__)

C = MotivationCategory


def _clamp(x: float, lo: float, hi: float) -> float:
    if x < lo:
        return lo
    if x > hi:
        return hi
    return float(x)


def _clamp01(x: float) -> float:
    return _clamp(x, 0.0, 1.0)


def _clamp_weight(x: float) -> float:
    return _clamp(x, cfg.WEIGHT_MIN, cfg.WEIGHT_MAX)


# -----------------------------------------------------------------------------
# Labels / lookups
# -----------------------------------------------------------------------------
def get_market_size(team_abbreviation: Optional[str]) -> MarketSize:
    return cfg.MARKET_SIZE_MAP.get(str(team_abbreviation or ""), MarketSize.MEDIUM)


def motivation_label(category: MotivationCategory) -> str:
    return cfg.MOTIVATION_LABELS[MotivationCategory(category)]


def archetype_label(player: Player) -> str:
    """Label of the archetype whose base weights are closest (L1) to the player's."""
    if not player.motivations:
        return "Unknown"
    best_key = ArchetypeKey.BALANCED
    best_distance = float("inf")
    for key, archetype in ARCHETYPES.items():
        distance = 0.0
        for cat, base in archetype.weights.items():
            m = player.motivations.get(cat)
            distance += abs((m.weight if m is not None else 0.5) - base)
        if distance < best_distance:
            best_distance = distance
            best_key = key
    return ARCHETYPES[best_key].label


def with_motivations(player: Player, motivations: Mapping[MotivationCategory, Motivation]) -> Player:
    return dataclasses.replace(player, motivations=dict(motivations))


# -----------------------------------------------------------------------------
# Generation
# -----------------------------------------------------------------------------
def archetype_pool(player: Player) -> Dict[ArchetypeKey, int]:
    pool = dict(BASE_POOL)
    traits = set(player.traits)
    if "competitor" in traits:
        pool[ArchetypeKey.COMPETITOR] += cfg.TRAIT_BOOST
    if "leader" in traits:
        pool[ArchetypeKey.FRANCHISE_CORNERSTONE] += cfg.TRAIT_BOOST

    age = player.age if player.age is not None else cfg.DEFAULT_AGE
    if age >= cfg.VETERAN_AGE:
        pool[ArchetypeKey.RING_CHASER] += cfg.VETERAN_RING_CHASER_BOOST

    rating = player.overall_rating if player.overall_rating is not None else cfg.DEFAULT_RATING
    if rating >= cfg.STAR_RATING:
        pool[ArchetypeKey.MAX_CONTRACT_HUNTER] += cfg.STAR_BOOST
        pool[ArchetypeKey.FRANCHISE_CORNERSTONE] += cfg.STAR_BOOST
    return pool


def generate_motivations(player: Player, rng: Optional[RandomSource] = None) -> Dict[MotivationCategory, Motivation]:
    rng = ensure_rng(rng)
    key = weighted_choice(archetype_pool(player), rng, default=ArchetypeKey.BALANCED)
    archetype = ARCHETYPES[key]

    out: Dict[MotivationCategory, Motivation] = {}
    for cat, base in archetype.weights.items():
        jitter = (rng.random() - 0.5) * 2.0 * cfg.WEIGHT_JITTER
        out[cat] = Motivation(weight=round(_clamp_weight(base + jitter), 2), satisfaction=cfg.INITIAL_SATISFACTION)

    logger.debug("motivations generated player=%s archetype=%s", player.id, key.value)
    return out


# -----------------------------------------------------------------------------
# Satisfaction
# -----------------------------------------------------------------------------
def _role_satisfaction(stats: Optional[SeasonStats]) -> float:
    if stats is not None and stats.games_played > 0:
        mpg = stats.minutes / stats.games_played
    else:
        mpg = cfg.ROLE_DEFAULT_MPG
    return _clamp(mpg / cfg.ROLE_FULL_MPG, cfg.ROLE_FLOOR, 1.0)


def _star_pairing_satisfaction(player: Player, roster: Sequence[Player]) -> float:
    stars = sum(
        1
        for t in roster
        if t.id != player.id and (t.overall_rating or 0) >= cfg.STAR_TEAMMATE_RATING
    )
    if stars >= 3:
        return 1.0
    if stars == 2:
        return 0.8
    if stars == 1:
        return 0.5
    return 0.2


def _satisfaction_for(cat: MotivationCategory, player: Player, ctx: RetentionContext) -> float:
    if cat is C.MONEY:
        salary = ctx.offer_salary if ctx.offer_salary is not None else ctx.contract_salary
        if ctx.expected_salary <= 0:
            return 0.5
        return _clamp01(float(salary) / float(ctx.expected_salary))
    if cat is C.WINNING:
        return ctx.team_win_pct * 0.7 + (0.3 if ctx.made_playoffs else 0.0)
    if cat is C.LOYALTY:
        return min(1.0, ctx.years_with_team * 0.15 + 0.2)
    if cat is C.ROLE:
        return _role_satisfaction(ctx.player_stats)
    if cat is C.STAR_PAIRING:
        return _star_pairing_satisfaction(player, ctx.team_roster)
    if cat is C.COACHING:
        return 0.7 if ctx.coach_stability else 0.4
    if cat is C.MARKET:
        return cfg.MARKET_SATISFACTION[ctx.team_market_size]
    if cat is C.LEGACY:
        if ctx.has_championship:
            return 0.9
        return 0.5 if ctx.team_win_pct > 0.6 else 0.3
    raise ValueError(f"unknown motivation category: {cat!r}")


def recalculate_satisfaction(
    player: Player, context: Optional[RetentionContext] = None
) -> Dict[MotivationCategory, Motivation]:
    """Return a new motivations mapping with satisfaction recomputed.

    Only categories the player already has are returned. Weights are carried
    over untouched. The player is not modified.
    """
    ctx = context or RetentionContext()
    return {
        cat: Motivation(weight=m.weight, satisfaction=_satisfaction_for(cat, player, ctx))
        for cat, m in player.motivations.items()
    }


def calculate_retention_score(
    player: Player,
    context: Optional[RetentionContext] = None,
    salary_override: Optional[float] = None,
) -> int:
    """0-100 likelihood the player stays with their current team."""
    if not player.motivations:
        return cfg.NEUTRAL_RETENTION

    ctx = context or RetentionContext()
    if salary_override is not None:
        ctx = dataclasses.replace(ctx, offer_salary=float(salary_override))

    weighted_sum = 0.0
    total_weight = 0.0
    for m in recalculate_satisfaction(player, ctx).values():
        weighted_sum += m.weight * m.satisfaction
        total_weight += m.weight
    if total_weight <= 0.0:
        return cfg.NEUTRAL_RETENTION

    score = (weighted_sum / total_weight) * 100.0 + cfg.INCUMBENT_BONUS
    return int(round(_clamp(score, 0.0, 100.0)))


def retention_context_for_team(
    player: Player,
    team_roster: Sequence[Player],
    context: Optional[LeagueContext] = None,
    *,
    stats: Optional[SeasonStats] = None,
    made_playoffs: bool = False,
    coach_stability: bool = True,
    has_championship: bool = False,
) -> RetentionContext:
    """Build a RetentionContext for a player on their current team from league state."""
    ctx = context or LeagueContext()
    abbr = player.team_abbreviation or ""
    rating = player.overall_rating if player.overall_rating is not None else cfg.DEFAULT_RATING
    return RetentionContext(
        team_win_pct=ctx.record_for(abbr).win_pct,
        made_playoffs=bool(made_playoffs),
        player_stats=stats,
        team_roster=tuple(team_roster),
        team_market_size=get_market_size(abbr),
        years_with_team=player.years_with_team,
        coach_stability=bool(coach_stability),
        has_championship=bool(has_championship),
        contract_salary=float(player.contract_salary or 0.0),
        expected_salary=_expected_salary(rating, stats),
    )


# -----------------------------------------------------------------------------
# Career events
# -----------------------------------------------------------------------------
def apply_weight_shifts(player: Player, events: Optional[CareerEvents] = None) -> Dict[MotivationCategory, Motivation]:
    """Return motivations with event-driven weight shifts applied.

    Satisfaction values are carried over untouched.
    """
    ev = events or CareerEvents()
    age = ev.age if ev.age is not None else (player.age if player.age is not None else cfg.DEFAULT_AGE)

    deltas: Dict[MotivationCategory, float] = {}
    if age >= cfg.VETERAN_AGE:
        deltas[C.WINNING] = deltas.get(C.WINNING, 0.0) + cfg.AGING_WINNING_SHIFT
    if ev.was_traded:
        deltas[C.LOYALTY] = deltas.get(C.LOYALTY, 0.0) + cfg.TRADED_LOYALTY_SHIFT
    if ev.won_championship:
        deltas[C.MONEY] = deltas.get(C.MONEY, 0.0) + cfg.CHAMPION_MONEY_SHIFT
        deltas[C.WINNING] = deltas.get(C.WINNING, 0.0) + cfg.CHAMPION_WINNING_SHIFT

    out: Dict[MotivationCategory, Motivation] = {}
    for cat, m in player.motivations.items():
        d = deltas.get(cat)
        if d is None:
            out[cat] = m
        else:
            out[cat] = Motivation(weight=round(_clamp_weight(m.weight + d), 4), satisfaction=m.satisfaction)
    return out
