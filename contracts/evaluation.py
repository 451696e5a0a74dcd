# contracts/evaluation.py
"""Per-player contract decisions.

Pure predicates and calculators used by the offseason pass:
- evaluate_resigning: keep an expiring player?
- evaluate_free_agent_signing: pursue a free agent?
- calculate_contract_offer: years + salary for either of the above
- evaluate_player_contract: value score + cut recommendation
- assess_draft_capital: how pick-rich a team is (drives cut/resign appetite)

Direction mapping: the buyer directions (title_contender, win_now) play the
"contending" role throughout.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, Optional, Sequence

from league.salary import CapSituation, expected_salary
from league.types import Direction, DraftPick, Player, SeasonStats, Team

from . import config as cfg
from .types import ContractEvaluation, ContractOffer, DraftCapital


def rating_of(p: Player) -> int:
    return p.overall_rating if p.overall_rating is not None else cfg.DEFAULT_RATING


def age_of(p: Player) -> int:
    return p.age if p.age is not None else cfg.DEFAULT_AGE


def years_of(p: Player) -> int:
    return p.contract_years_remaining if p.contract_years_remaining is not None else cfg.DEFAULT_CONTRACT_YEARS


def is_expiring(p: Player) -> bool:
    return years_of(p) <= cfg.EXPIRING_YEARS


def _ppg(stats: Optional[SeasonStats]) -> Optional[float]:
    if stats is None or stats.games_played < cfg.PERFORMING_MIN_GAMES:
        return None
    return stats.per_game(stats.points)


def matches_direction(age: int, rating: int, direction: Direction) -> bool:
    if direction is Direction.REBUILDING:
        return age <= 28 or rating >= 80
    if direction.is_buyer:
        return rating >= 72
    return True


def position_count(roster: Iterable[Player], position: str) -> int:
    return sum(1 for p in roster if (p.position or cfg.DEFAULT_POSITION) == position)


# -----------------------------------------------------------------------------
# Re-signing
# -----------------------------------------------------------------------------
def evaluate_resigning(
    player: Player,
    direction: Direction,
    stats: Optional[SeasonStats] = None,
    roster_count: int = cfg.ROSTER_TARGET,
    cap: Optional[CapSituation] = None,
    draft_capital: Optional[DraftCapital] = None,
) -> bool:
    rating = rating_of(player)
    age = age_of(player)
    salary = float(player.contract_salary or 0.0)

    ppg = _ppg(stats)
    performing = rating >= cfg.PERFORMING_RATING or (ppg is not None and ppg >= cfg.PERFORMING_MIN_PPG)
    overpaid = salary > expected_salary(rating, stats) * cfg.OVERPAID_RATIO
    needs_players = roster_count < cfg.ROSTER_TARGET

    if cap is not None and cap.over_tax and salary > cfg.TAX_ROLE_SALARY and rating < cfg.TAX_ROLE_RATING:
        return False

    if (
        draft_capital is not None
        and direction is Direction.REBUILDING
        and draft_capital.draft_richness > cfg.DRAFT_RICH_RESIGN
        and age > cfg.DRAFT_RICH_MAX_AGE
        and rating < cfg.DRAFT_RICH_KEEP_RATING
    ):
        return False

    if overpaid and not needs_players:
        return False
    if not matches_direction(age, rating, direction) and rating < cfg.MISMATCH_KEEP_RATING:
        return False
    return performing or needs_players


# -----------------------------------------------------------------------------
# Free agency
# -----------------------------------------------------------------------------
def evaluate_free_agent_signing(
    player: Player,
    direction: Direction,
    team_roster: Sequence[Player],
    cap: Optional[CapSituation] = None,
) -> bool:
    rating = rating_of(player)
    age = age_of(player)
    at_position = position_count(team_roster, player.position or cfg.DEFAULT_POSITION)
    has_need = at_position < cfg.POSITION_NEED_BELOW
    short_handed = len(team_roster) < cfg.MIN_ROSTER

    if at_position >= cfg.POSITION_SATURATED and not short_handed:
        return False
    if short_handed and rating >= cfg.SHORT_HANDED_MIN_RATING:
        return True

    if cap is not None and cap.over_tax:
        return rating >= cfg.TAX_TEAM_MIN_RATING and has_need

    if direction is Direction.REBUILDING:
        upside = age <= cfg.REBUILD_UPSIDE_AGE and rating >= cfg.REBUILD_UPSIDE_RATING
        ready = age <= cfg.REBUILD_MAX_AGE and rating >= cfg.REBUILD_MIN_RATING
        return (upside or ready) and has_need

    if direction.is_buyer:
        if rating >= cfg.BUYER_MIN_RATING and has_need:
            return True
        return rating >= cfg.BUYER_DEPTH_RATING and len(team_roster) < cfg.ROSTER_TARGET

    return rating >= cfg.DEFAULT_MIN_RATING and has_need


# -----------------------------------------------------------------------------
# Offers
# -----------------------------------------------------------------------------
def contract_years(age: int, direction: Direction) -> int:
    if age >= 34:
        years = 1
    elif age >= 30:
        years = 1 if direction is Direction.REBUILDING else 2
    elif age >= 27:
        years = 2 if direction is Direction.REBUILDING else 3
    else:
        years = 3 if direction.is_buyer else 4
    return min(years, cfg.MAX_CONTRACT_YEARS)


def calculate_contract_offer(
    player: Player,
    direction: Direction,
    cap: Optional[CapSituation] = None,
) -> ContractOffer:
    rating = rating_of(player)
    age = age_of(player)

    salary = expected_salary(rating)
    if age <= cfg.YOUTH_PREMIUM_AGE:
        salary *= cfg.YOUTH_PREMIUM
    elif age >= cfg.VETERAN_DISCOUNT_AGE:
        salary *= cfg.VETERAN_DISCOUNT

    if cap is not None:
        if cap.over_tax:
            salary *= cfg.TAX_TEAM_OFFER
        elif cap.over_cap:
            salary *= cfg.OVER_CAP_OFFER
        elif direction.is_buyer:
            salary *= cfg.CONTENDER_CAP_ROOM_OFFER

    return ContractOffer(years=contract_years(age, direction), salary=int(math.floor(salary)))


# -----------------------------------------------------------------------------
# Contract value / cuts
# -----------------------------------------------------------------------------
@dataclass(frozen=True, slots=True)
class RosterContractContext:
    roster_size: int
    over_tax: bool
    # Player ids ordered by rating, best first.
    ranked_ids: Sequence[str] = ()


def evaluate_player_contract(
    player: Player,
    direction: Direction,
    stats: Optional[SeasonStats],
    roster_ctx: RosterContractContext,
) -> ContractEvaluation:
    rating = rating_of(player)
    age = age_of(player)
    salary = float(player.contract_salary or 0.0)
    years = years_of(player)
    expected = expected_salary(rating)

    score = rating * 0.6
    if age > 30:
        score -= (age - 30) * 5
    if age < 25:
        score += (25 - age) * 5

    ppg = _ppg(stats)
    if ppg is not None:
        if ppg > 8:
            score += 10
        elif ppg > 4:
            score += 5

    ratio = salary / expected if expected > 0 else 1.0
    if ratio <= 1.0:
        score += 10
    elif ratio <= 1.3:
        pass
    elif ratio <= 1.5:
        score -= 10
    else:
        score -= 20

    if direction is Direction.REBUILDING:
        if age <= 25:
            score += 10
        if age >= 30 and rating < 80:
            score -= 10
    elif direction.is_buyer and rating >= 78:
        score += 10

    score = max(0.0, min(100.0, float(score)))

    ranked = list(roster_ctx.ranked_ids)
    top3 = player.id in ranked[: cfg.CUT_PROTECTED_TOP]
    top5 = player.id in ranked[: cfg.CUT_CORE_SIZE]
    too_small = roster_ctx.roster_size - 1 < cfg.MIN_ROSTER

    reason: Optional[str] = None
    if top3 or too_small:
        reason = None
    elif score < cfg.LOW_VALUE_SCORE and salary > cfg.LOW_VALUE_MIN_SALARY and years >= cfg.CUT_MIN_YEARS:
        reason = "low_value_overpaid"
    elif (
        direction is Direction.REBUILDING
        and age >= cfg.VETERAN_CUT_AGE
        and salary > cfg.VETERAN_CUT_MIN_SALARY
        and years >= cfg.CUT_MIN_YEARS
    ):
        reason = "rebuilding_veteran_cut"
    elif roster_ctx.over_tax and score < cfg.TAX_RELIEF_SCORE and not top5:
        reason = "luxury_tax_relief"

    return ContractEvaluation(player_id=player.id, value_score=score, should_cut=reason is not None, cut_reason=reason)


# -----------------------------------------------------------------------------
# Draft capital
# -----------------------------------------------------------------------------
def assess_draft_capital(team: Team, season_year: int, picks: Optional[Iterable[DraftPick]] = None) -> DraftCapital:
    source = team.draft_picks if picks is None else picks
    owned = [pk for pk in source if pk.current_owner_id in (None, team.id)]

    near_firsts = 0
    other_firsts = 0
    seconds = 0
    for pk in owned:
        offset = int(pk.year) - int(season_year)
        if pk.round == 1:
            if 0 <= offset <= 1:
                near_firsts += 1
            else:
                other_firsts += 1
        else:
            seconds += 1

    richness = min(1.0, near_firsts * 0.3 + other_firsts * 0.15 + seconds * 0.05)
    return DraftCapital(total_picks=len(owned), first_round_picks=near_firsts + other_firsts, draft_richness=richness)
