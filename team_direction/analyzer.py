# team_direction/analyzer.py
"""Team direction classifier (roster + record -> strategic archetype).

The classifier blends two views of a team:
- Roster: star power, core age alignment, youth and average rating of the
  top-5 "core".
- Record: win percentage, weighted more heavily as the season progresses
  (capped so the roster always keeps a 30% say).

Four fixed linear scores are computed, with two hard overrides for clear-cut
cases (mathematical elimination, an elite roster with an elite record).

Pure and deterministic: identical inputs always classify the same way.
"""

from __future__ import annotations

import logging
import math
from typing import Dict, List, Optional, Sequence

from league.types import Direction, LeagueContext, Player, Team

from . import config as cfg
from .types import DirectionAssessment, RosterMetrics

logger = logging.getLogger(__name__)


def _clamp01(x: float) -> float:
    if x < 0.0:
        return 0.0
    if x > 1.0:
        return 1.0
    return float(x)


def _rating(p: Player) -> int:
    return p.overall_rating if p.overall_rating is not None else cfg.DEFAULT_RATING


def _age(p: Player) -> int:
    return p.age if p.age is not None else cfg.DEFAULT_AGE


def core_players(roster: Sequence[Player], size: int = cfg.CORE_SIZE) -> List[Player]:
    """Top ``size`` players by rating (stable for equal ratings)."""
    return sorted(roster, key=_rating, reverse=True)[:size]


# -----------------------------------------------------------------------------
# Roster metrics
# -----------------------------------------------------------------------------
def analyze_roster(roster: Sequence[Player]) -> RosterMetrics:
    if not roster:
        return RosterMetrics(
            star_power=0.0,
            core_alignment=cfg.NEUTRAL_SCORE,
            youth_score=cfg.NEUTRAL_SCORE,
            avg_overall=cfg.EMPTY_AVG_RATING,
            avg_core_age=cfg.EMPTY_CORE_AGE,
        )

    core = core_players(roster)

    credits = 0.0
    for p in core:
        r = _rating(p)
        if r >= cfg.STAR_FULL_RATING:
            credits += 1.0
        elif r >= cfg.STAR_HALF_RATING:
            credits += 0.5
    star_power = min(1.0, credits / cfg.STAR_CREDIT_NORM)

    ages = [_age(p) for p in core]
    core_alignment = cfg.NEUTRAL_SCORE
    if len(ages) >= 2:
        age_range = max(ages) - min(ages)
        core_alignment = _clamp01(1.0 - (age_range - cfg.ALIGN_FREE_RANGE) / cfg.ALIGN_SPAN)

    avg_core_age = sum(ages) / len(ages)
    youth = _clamp01((cfg.YOUTH_AGE_CEIL - avg_core_age) / cfg.YOUTH_AGE_SPAN)
    avg_overall = sum(_rating(p) for p in roster) / len(roster)

    return RosterMetrics(
        star_power=round(star_power, 2),
        core_alignment=round(core_alignment, 2),
        youth_score=round(youth, 2),
        avg_overall=round(avg_overall, 1),
        avg_core_age=round(avg_core_age, 1),
    )


# -----------------------------------------------------------------------------
# Direction
# -----------------------------------------------------------------------------
def record_weight(games_played: int) -> float:
    return min(cfg.RECORD_WEIGHT_MAX, (float(games_played) / cfg.SEASON_GAMES) * cfg.RECORD_WEIGHT_SLOPE)


def _direction_scores(m: RosterMetrics, win_pct: float, rec_w: float) -> Dict[Direction, float]:
    roster_w = 1.0 - rec_w
    sp = m.star_power
    avg = m.avg_overall

    contender = (sp * 0.5 + min(1.0, (avg - 72.0) / 10.0) * 0.3) * roster_w + (
        win_pct if win_pct > 0.6 else win_pct * 0.5
    ) * rec_w
    win_now = (sp * 0.35 + min(1.0, (avg - 70.0) / 10.0) * 0.3) * roster_w + (
        0.7 if 0.45 < win_pct <= 0.65 else win_pct * 0.4
    ) * rec_w
    ascending = (m.youth_score * 0.5 + (1.0 - sp) * 0.2) * roster_w + (
        0.6 if 0.35 <= win_pct <= 0.55 else 0.3
    ) * rec_w
    rebuilding = ((1.0 - min(1.0, (avg - 68.0) / 12.0)) * 0.4 + (1.0 - sp) * 0.3) * roster_w + (
        (1.0 - win_pct) if win_pct < 0.4 else 0.2
    ) * rec_w

    return {
        Direction.TITLE_CONTENDER: contender,
        Direction.WIN_NOW: win_now,
        Direction.ASCENDING: ascending,
        Direction.REBUILDING: rebuilding,
    }


def is_eliminated(wins: int, losses: int, season_games: int = cfg.SEASON_GAMES) -> bool:
    """True once a .500 finish is out of reach (only after ELIMINATION_MIN_GAMES)."""
    played = wins + losses
    if played < cfg.ELIMINATION_MIN_GAMES:
        return False
    remaining = season_games - played
    if remaining <= 0:
        return False
    wins_needed = math.ceil(season_games / 2) - wins
    return remaining < wins_needed


def assess_team_direction(team: Team, roster: Sequence[Player], context: Optional[LeagueContext]) -> DirectionAssessment:
    ctx = context or LeagueContext()
    record = ctx.record_for(team.abbreviation)
    win_pct = record.win_pct
    rec_w = record_weight(ctx.games_played)
    metrics = analyze_roster(roster)
    scores = _direction_scores(metrics, win_pct, rec_w)

    def _result(direction: Direction, override: str = "") -> DirectionAssessment:
        return DirectionAssessment(
            direction=direction,
            metrics=metrics,
            scores=scores,
            win_pct=win_pct,
            record_weight=rec_w,
            override=override,
        )

    if is_eliminated(record.wins, record.losses):
        return _result(Direction.REBUILDING, "eliminated")

    if (
        metrics.star_power >= cfg.TITLE_STAR_POWER
        and win_pct >= cfg.TITLE_WIN_PCT
        and ctx.games_played >= cfg.TITLE_MIN_GAMES
    ):
        return _result(Direction.TITLE_CONTENDER, "elite_roster_and_record")

    best = max(scores.values())
    leaders = [d for d, s in scores.items() if s == best]
    if len(leaders) != 1:
        # Any tie at the top resolves to the development posture.
        return _result(Direction.ASCENDING, "tie")
    return _result(leaders[0])


def analyze_team_direction(team: Team, roster: Sequence[Player], context: Optional[LeagueContext]) -> Direction:
    assessment = assess_team_direction(team, roster, context)
    logger.debug(
        "direction team=%s direction=%s override=%s win_pct=%.3f",
        team.abbreviation,
        assessment.direction.value,
        assessment.override or "-",
        assessment.win_pct,
    )
    return assessment.direction


_TRADE_INTEREST: Dict[Direction, str] = {
    Direction.REBUILDING: "high",
    Direction.ASCENDING: "medium",
    Direction.WIN_NOW: "medium",
    Direction.TITLE_CONTENDER: "low",
}


def get_trade_interest(team: Team, roster: Sequence[Player], context: Optional[LeagueContext]) -> str:
    """Display-level trade appetite: high / medium / low."""
    return _TRADE_INTEREST[analyze_team_direction(team, roster, context)]
