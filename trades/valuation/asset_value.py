# trades/valuation/asset_value.py
"""Asset pricing from one team's point of view.

Both entry points fold over an asset list:

- calculate_receiving_value: what incoming assets are worth to a team with a
  given direction (timeline fit, positional need, expiring-contract upside,
  flight risk on one-year deals).
- calculate_giving_value: what outgoing assets cost the team (star
  protection scaled by difficulty, young/veteran ease).

Player base value is the explicit trade value when present, otherwise the
overall rating. Both results are rounded to 2 decimals.

Unknown player ids are skipped. A missing player lookup raises
EngineError(MISSING_COLLABORATOR) through LeagueLookups.
"""

from __future__ import annotations

import dataclasses
import logging
from typing import Iterable, Optional, Sequence

from league.lookups import LeagueLookups
from league.salary import expected_salary
from league.types import Asset, Direction, LeagueContext, PickAsset, Player, PlayerAsset
from motivation import calculate_retention_score, retention_context_for_team
from team_direction import analyze_roster

from .. import config as cfg
from ..config import DIRECTION_MULTIPLIERS, DifficultyConfig

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# Player field resolution (trade defaults)
# -----------------------------------------------------------------------------
def rating_of(p: Player) -> int:
    return p.overall_rating if p.overall_rating is not None else cfg.DEFAULT_RATING


def age_of(p: Player) -> int:
    return p.age if p.age is not None else cfg.DEFAULT_AGE


def years_of(p: Player) -> int:
    return p.contract_years_remaining if p.contract_years_remaining is not None else cfg.DEFAULT_CONTRACT_YEARS


def player_trade_value(p: Player) -> float:
    return float(p.trade_value) if p.trade_value is not None else float(rating_of(p))


def is_star(p: Player) -> bool:
    return rating_of(p) >= cfg.STAR_RATING


def is_young(p: Player) -> bool:
    return age_of(p) <= cfg.YOUNG_MAX_AGE


def is_veteran(p: Player) -> bool:
    return age_of(p) >= cfg.VETERAN_MIN_AGE


# -----------------------------------------------------------------------------
# Curves
# -----------------------------------------------------------------------------
def young_player_premium(age: int) -> float:
    if age <= 22:
        return 1.25
    if age <= 25:
        return 1.15
    if age <= 27:
        return 1.0
    if age <= 30:
        return 0.90
    return 0.75


def contract_value_multiplier(actual_salary: float, expected: float) -> float:
    """Bargain contracts are worth more; overpaid ones less."""
    if expected <= 0:
        return 1.0
    ratio = float(actual_salary) / float(expected)
    if ratio <= 0.5:
        return 1.30
    if ratio <= 0.75:
        return 1.15
    if ratio <= 1.0:
        return 1.0
    if ratio <= 1.25:
        return 0.95
    if ratio <= 1.5:
        return 0.85
    return 0.70


def expiring_contract_bonus(years_remaining: int, salary: float, direction: Direction) -> float:
    if direction not in (Direction.REBUILDING, Direction.ASCENDING):
        return 0.0
    if years_remaining > 1:
        return 0.0
    return min(cfg.EXPIRING_BONUS_CAP, float(salary) * cfg.EXPIRING_BONUS_RATE / 1_000_000.0)


def timeline_fit(age: int, direction: Direction, team_roster: Sequence[Player]) -> float:
    if direction is Direction.REBUILDING:
        return 1.0
    core_age = analyze_roster(team_roster).avg_core_age
    diff = abs(age - core_age)
    if diff <= 2:
        return 1.10
    if diff <= 4:
        return 1.0
    if diff <= 7:
        return 0.92
    return 0.85


def has_positional_need(team_roster: Iterable[Player], position: Optional[str]) -> bool:
    if not position:
        return False
    count = sum(1 for p in team_roster if p.plays(position))
    return count <= cfg.POSITIONAL_NEED_MAX_COUNT


def retention_risk_factor(retention: float) -> float:
    """0.5 at zero retention up to 1.0 at full retention."""
    return 0.5 + (float(retention) / 100.0) * 0.5


def _contract_factor(p: Player, lookups: LeagueLookups) -> float:
    expected = expected_salary(rating_of(p), lookups.stats(p.id))
    return contract_value_multiplier(float(p.contract_salary or 0.0), expected)


def _retention_with(
    p: Player,
    team_roster: Sequence[Player],
    team_abbreviation: Optional[str],
    context: Optional[LeagueContext],
    lookups: LeagueLookups,
) -> int:
    # Score as if already on the receiving team (no tenure there yet).
    moved = p
    if team_abbreviation and p.team_abbreviation != team_abbreviation:
        moved = dataclasses.replace(p, team_abbreviation=team_abbreviation, years_with_team=0)
    rctx = retention_context_for_team(moved, team_roster, context, stats=lookups.stats(p.id))
    return calculate_retention_score(moved, rctx)


# -----------------------------------------------------------------------------
# Entry points
# -----------------------------------------------------------------------------
def calculate_receiving_value(
    assets: Iterable[Asset],
    *,
    direction: Direction,
    team_roster: Sequence[Player],
    diff_config: DifficultyConfig,
    lookups: LeagueLookups,
    team_abbreviation: Optional[str] = None,
    context: Optional[LeagueContext] = None,
) -> float:
    mults = DIRECTION_MULTIPLIERS[direction]
    total = 0.0

    for asset in assets:
        if isinstance(asset, PlayerAsset):
            p = lookups.player(asset.player_id)
            if p is None:
                logger.debug("receiving value: unknown player %s skipped", asset.player_id)
                continue
            age = age_of(p)
            years = years_of(p)

            v = player_trade_value(p)
            v *= young_player_premium(age)
            v *= _contract_factor(p, lookups)
            v += expiring_contract_bonus(years, float(p.contract_salary or 0.0), direction)
            v *= timeline_fit(age, direction, team_roster)

            if is_star(p):
                v *= mults.star_receive_premium
            if is_young(p):
                v *= mults.young_receive_discount
            if is_veteran(p):
                v *= mults.vet_receive_premium

            if has_positional_need(team_roster, p.position):
                v *= cfg.POSITIONAL_NEED_BONUS

            if years <= 1:
                v *= retention_risk_factor(_retention_with(p, team_roster, team_abbreviation, context, lookups))

            total += v

        elif isinstance(asset, PickAsset):
            total += lookups.pick_value(asset.pick_id) * mults.pick_receive_discount * diff_config.pick_sensitivity

    return round(total, 2)


def calculate_giving_value(
    assets: Iterable[Asset],
    *,
    direction: Direction,
    diff_config: DifficultyConfig,
    lookups: LeagueLookups,
) -> float:
    mults = DIRECTION_MULTIPLIERS[direction]
    total = 0.0

    for asset in assets:
        if isinstance(asset, PlayerAsset):
            p = lookups.player(asset.player_id)
            if p is None:
                logger.debug("giving value: unknown player %s skipped", asset.player_id)
                continue
            v = player_trade_value(p)
            v *= young_player_premium(age_of(p))
            v *= _contract_factor(p, lookups)

            if is_star(p):
                v *= mults.star_give_protection
                v *= diff_config.star_protection
            if is_young(p):
                v *= mults.young_give_ease
            if is_veteran(p):
                v *= mults.vet_give_ease

            total += v

        elif isinstance(asset, PickAsset):
            total += lookups.pick_value(asset.pick_id) * mults.pick_give_sensitivity * diff_config.pick_sensitivity

    return round(total, 2)
