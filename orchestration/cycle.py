"""Evaluation cycles.

Three cadences drive every AI decision:

- daily: pre-game lineup refresh for each AI team
- weekly: proposal expiry, deadline news, AI -> user pitches, AI <-> AI deals
- offseason: motivation upkeep, then cuts / extensions / signings / backfill

Cycles only sequence the component calls and collect their results into a
report. Applying the report (persisting proposals, moving players) is the
caller's job.
"""

from __future__ import annotations

import logging
from typing import Any, Iterable, Mapping, Optional, Sequence, Tuple, Union

import game_time
from contracts import run_ai_roster_management
from league.lookups import LeagueLookups
from league.rng import RandomSource, ensure_rng
from league.types import LeagueContext, Player, Team, TradeProposal
from lineup import refresh_all_team_lineups
from motivation import CareerEvents, apply_weight_shifts, generate_motivations, with_motivations
from trades.config import AiMarketConfig, DEFAULT_AI_MARKET, Difficulty
from trades.generation import generate_weekly_proposals, match_ai_trades
from trades.maintenance import DeadlineFlags, expire_stale_proposals, process_trade_deadline_events

from .types import DailyReport, OffseasonReport, WeeklyReport

logger = logging.getLogger(__name__)


def run_daily_cycle(
    *,
    ai_teams: Sequence[Team],
    lookups: LeagueLookups,
    current_date: Any,
    current_starters: Mapping[str, Sequence[Optional[str]]],
    rng: Optional[RandomSource] = None,
) -> DailyReport:
    today = game_time.require_date_iso(current_date, field="current_date")
    report = DailyReport(game_date=today)
    report.lineups = refresh_all_team_lineups(ai_teams, lookups, current_starters, rng)
    return report


def run_weekly_cycle(
    *,
    ai_teams: Sequence[Team],
    user_team: Team,
    context: LeagueContext,
    lookups: LeagueLookups,
    current_date: Any,
    season_year: int,
    proposals: Iterable[TradeProposal] = (),
    deadline_flags: DeadlineFlags = DeadlineFlags(),
    difficulty: Union[str, Difficulty, None] = Difficulty.PRO,
    market_config: AiMarketConfig = DEFAULT_AI_MARKET,
    rng: Optional[RandomSource] = None,
) -> WeeklyReport:
    today = game_time.parse_game_date(current_date, field="current_date")
    rng = ensure_rng(rng)

    expiry = expire_stale_proposals(proposals, today)
    deadline = process_trade_deadline_events(today, season_year, deadline_flags)
    report = WeeklyReport(
        game_date=today.isoformat(),
        proposals=expiry.proposals,
        expired=expiry.expired,
        news=deadline.news,
        deadline_flags=deadline.flags,
        trade_window_open=game_time.is_before_deadline(today, season_year),
    )
    if not report.trade_window_open:
        logger.info("weekly cycle date=%s trade window closed", report.game_date)
        return report

    new = generate_weekly_proposals(
        ai_teams=ai_teams,
        user_team=user_team,
        context=context,
        lookups=lookups,
        current_date=today,
        season_year=season_year,
        difficulty=difficulty,
        existing_proposals=expiry.proposals,
        rng=rng,
    )
    report.new_proposals = tuple(new)
    report.proposals = expiry.proposals + report.new_proposals

    report.ai_trades = tuple(
        match_ai_trades(
            teams=ai_teams,
            context=context,
            lookups=lookups,
            current_date=today,
            season_year=season_year,
            difficulty=difficulty,
            config=market_config,
            exclude_team_ids=(user_team.id,),
            rng=rng,
        )
    )
    logger.info(
        "weekly cycle date=%s expired=%d proposals=%d ai_trades=%d news=%d",
        report.game_date,
        len(report.expired),
        len(report.new_proposals),
        len(report.ai_trades),
        len(report.news),
    )
    return report


def _motivation_upkeep(
    players: Sequence[Player],
    career_events: Mapping[str, CareerEvents],
    rng: RandomSource,
    report: OffseasonReport,
) -> Tuple[Player, ...]:
    out = []
    for p in players:
        if not p.motivations:
            p = with_motivations(p, generate_motivations(p, rng))
            report.motivations_generated += 1
        events = career_events.get(p.id)
        if events is not None:
            p = with_motivations(p, apply_weight_shifts(p, events))
            report.motivations_shifted += 1
        out.append(p)
    return tuple(out)


def run_offseason_cycle(
    *,
    ai_teams: Sequence[Team],
    players: Sequence[Player],
    season_year: int,
    context: Optional[LeagueContext] = None,
    lookups: Optional[LeagueLookups] = None,
    career_events: Optional[Mapping[str, CareerEvents]] = None,
    rng: Optional[RandomSource] = None,
) -> OffseasonReport:
    """Season-boundary pass.

    Players without motivations get a profile first; players with career
    events get their weights shifted. Roster management then runs on the
    updated snapshot.
    """
    report = OffseasonReport(season_year=int(season_year))
    refreshed = _motivation_upkeep(players, career_events or {}, ensure_rng(rng), report)
    report.roster = run_ai_roster_management(
        ai_teams=ai_teams,
        players=refreshed,
        context=context,
        lookups=lookups,
        season_year=season_year,
    )
    logger.info(
        "offseason cycle season=%d generated=%d shifted=%d",
        report.season_year,
        report.motivations_generated,
        report.motivations_shifted,
    )
    return report
