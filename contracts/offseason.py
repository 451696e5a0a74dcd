"""Offseason contract handling for AI teams.

Every function takes the league-wide player snapshot and hands back a new
one; nothing is written anywhere. Order per team:

1) cuts (contract value, never the top 3, never below the roster floor)
2) extensions for expiring players
3) free-agent signings up to the roster target
4) minimum-salary backfill
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from league.errors import EngineError
from league.lookups import LeagueLookups
from league.salary import LUXURY_TAX_LINE, CapSituation, cap_situation, team_payroll
from league.types import Direction, LeagueContext, Player, SeasonStats, Team
from team_direction import analyze_team_direction

from . import config as cfg
from .evaluation import (
    RosterContractContext,
    assess_draft_capital,
    calculate_contract_offer,
    evaluate_free_agent_signing,
    evaluate_player_contract,
    evaluate_resigning,
    is_expiring,
    rating_of,
)
from .types import (
    ContractOffer,
    ContractSigning,
    CutDecision,
    DraftCapital,
    RosterManagementResult,
    TeamContractResult,
)

logger = logging.getLogger(__name__)
_WARN_COUNTS: Dict[str, int] = {}


def _warn_limited(code: str, msg: str, *, limit: int = 5) -> None:
    n = _WARN_COUNTS.get(code, 0)
    if n < limit:
        logger.warning("%s %s", code, msg, exc_info=True)
    _WARN_COUNTS[code] = n + 1


# ---------------------------------------------------------------------------
# Snapshot helpers
# ---------------------------------------------------------------------------

def is_available_free_agent(p: Player) -> bool:
    if p.is_draft_prospect:
        return False
    return p.is_free_agent or p.team_abbreviation in (None, cfg.FREE_AGENT_TEAM_ID)


def team_roster(players: Iterable[Player], team_abbreviation: str) -> List[Player]:
    return [p for p in players if not p.is_free_agent and p.team_abbreviation == team_abbreviation]


def free_agent_pool(players: Iterable[Player]) -> List[Player]:
    """Eligible free agents, best first (ties keep snapshot order)."""
    pool = [p for p in players if is_available_free_agent(p)]
    pool.sort(key=lambda p: -rating_of(p))
    return pool


def _replace_player(players: Sequence[Player], updated: Player) -> Tuple[Player, ...]:
    return tuple(updated if p.id == updated.id else p for p in players)


def _sign(p: Player, team: Team, offer: ContractOffer) -> Player:
    return replace(
        p,
        team_abbreviation=team.abbreviation,
        is_free_agent=False,
        contract_salary=float(offer.salary),
        contract_years_remaining=int(offer.years),
        years_with_team=0,
    )


def _release(p: Player) -> Player:
    return replace(p, team_abbreviation=cfg.FREE_AGENT_TEAM_ID, is_free_agent=True)


def _stats_fn(lookups: Optional[LeagueLookups]):
    if lookups is None:
        return lambda _pid: None
    return lookups.stats


# ---------------------------------------------------------------------------
# Cuts
# ---------------------------------------------------------------------------

def max_cuts(direction: Direction, cap: CapSituation, draft_capital: DraftCapital) -> int:
    if direction is Direction.REBUILDING and draft_capital.draft_richness > cfg.DRAFT_RICH_CUTS:
        return cfg.MAX_CUTS_DRAFT_RICH_REBUILD
    if direction is Direction.REBUILDING or cap.over_tax:
        return cfg.MAX_CUTS_REBUILD_OR_TAX
    return cfg.MAX_CUTS_DEFAULT


def process_team_cuts(
    team: Team,
    players: Sequence[Player],
    direction: Direction,
    *,
    lookups: Optional[LeagueLookups] = None,
    draft_capital: Optional[DraftCapital] = None,
) -> Tuple[Tuple[CutDecision, ...], Tuple[Player, ...]]:
    roster = team_roster(players, team.abbreviation)
    cap = cap_situation(roster)
    capital = draft_capital or DraftCapital()
    stats_for = _stats_fn(lookups)

    ranked = sorted(roster, key=lambda p: -rating_of(p))
    roster_ctx = RosterContractContext(
        roster_size=len(roster),
        over_tax=cap.over_tax,
        ranked_ids=tuple(p.id for p in ranked),
    )

    evaluations = [(p, evaluate_player_contract(p, direction, stats_for(p.id), roster_ctx)) for p in roster]
    evaluations.sort(key=lambda pe: pe[1].value_score)

    limit = max_cuts(direction, cap, capital)
    cuts: List[CutDecision] = []
    out = tuple(players)
    for p, ev in evaluations:
        if len(cuts) >= limit or len(roster) - len(cuts) <= cfg.MIN_ROSTER:
            break
        if not ev.should_cut:
            continue
        out = _replace_player(out, _release(p))
        cuts.append(
            CutDecision(
                team=team.abbreviation,
                player_id=p.id,
                player_name=p.name,
                salary=float(p.contract_salary or 0.0),
                reason=str(ev.cut_reason),
            )
        )
    return tuple(cuts), out


# ---------------------------------------------------------------------------
# Extensions / signings
# ---------------------------------------------------------------------------

def process_team_extensions(
    team: Team,
    players: Sequence[Player],
    direction: Direction,
    *,
    lookups: Optional[LeagueLookups] = None,
    draft_capital: Optional[DraftCapital] = None,
) -> Tuple[Tuple[ContractSigning, ...], Tuple[str, ...], Tuple[Player, ...]]:
    """Re-sign or let walk every expiring player. Returns (extensions, departing ids, players)."""
    roster = team_roster(players, team.abbreviation)
    cap = cap_situation(roster)
    stats_for = _stats_fn(lookups)

    extensions: List[ContractSigning] = []
    departing: List[str] = []
    out = tuple(players)
    for p in roster:
        if not is_expiring(p):
            continue
        stats: Optional[SeasonStats] = stats_for(p.id)
        if not evaluate_resigning(p, direction, stats, len(roster), cap, draft_capital):
            departing.append(p.id)
            continue
        offer = calculate_contract_offer(p, direction, cap)
        out = _replace_player(out, replace(p, contract_salary=float(offer.salary), contract_years_remaining=offer.years))
        extensions.append(
            ContractSigning(
                kind="extension",
                team=team.abbreviation,
                team_id=team.id,
                player_id=p.id,
                player_name=p.name,
                offer=offer,
            )
        )
    return tuple(extensions), tuple(departing), out


def process_team_signings(
    team: Team,
    players: Sequence[Player],
    direction: Direction,
    *,
    departing: Iterable[str] = (),
) -> Tuple[Tuple[ContractSigning, ...], Tuple[Player, ...]]:
    """Fill open roster spots from the free-agent pool, best first.

    ``departing`` players still sit on the roster snapshot but do not count
    toward it.
    """
    gone = set(departing)
    roster = [p for p in team_roster(players, team.abbreviation) if p.id not in gone]
    slots = min(cfg.MAX_NEW_SIGNINGS, cfg.ROSTER_TARGET - len(roster))
    if slots <= 0:
        return (), tuple(players)

    signings: List[ContractSigning] = []
    out = tuple(players)
    for fa in free_agent_pool(players):
        if len(signings) >= slots:
            break
        cap = cap_situation(roster)
        if not evaluate_free_agent_signing(fa, direction, roster, cap):
            continue
        offer = calculate_contract_offer(fa, direction, cap)
        if team_payroll(roster) + offer.salary > LUXURY_TAX_LINE and not direction.is_buyer:
            continue
        signed = _sign(fa, team, offer)
        out = _replace_player(out, signed)
        roster.append(signed)
        signings.append(
            ContractSigning(
                kind="free_agent",
                team=team.abbreviation,
                team_id=team.id,
                player_id=fa.id,
                player_name=fa.name,
                offer=offer,
            )
        )
    return tuple(signings), out


def process_team_contracts(
    team: Team,
    players: Sequence[Player],
    direction: Direction,
    *,
    lookups: Optional[LeagueLookups] = None,
    draft_capital: Optional[DraftCapital] = None,
) -> TeamContractResult:
    """Re-sign expiring players first, then sign free agents into open spots."""
    extensions, departing, out = process_team_extensions(
        team, players, direction, lookups=lookups, draft_capital=draft_capital
    )
    signings, out = process_team_signings(team, out, direction, departing=departing)
    logger.debug(
        "contracts team=%s direction=%s extensions=%d signings=%d departing=%d",
        team.abbreviation,
        direction.value,
        len(extensions),
        len(signings),
        len(departing),
    )
    return TeamContractResult(extensions=extensions, signings=signings, departing=departing, players=out)


# ---------------------------------------------------------------------------
# Backfill
# ---------------------------------------------------------------------------

def _backfill_team(team: Team, players: Sequence[Player], target: int) -> Tuple[List[ContractSigning], Tuple[Player, ...]]:
    needed = target - len(team_roster(players, team.abbreviation))
    signings: List[ContractSigning] = []
    if needed <= 0:
        return signings, tuple(players)

    offer = ContractOffer(years=cfg.BACKFILL_YEARS, salary=cfg.BACKFILL_SALARY)
    out = tuple(players)
    for fa in free_agent_pool(players):
        if len(signings) >= needed or rating_of(fa) < cfg.BACKFILL_MIN_RATING:
            break
        out = _replace_player(out, _sign(fa, team, offer))
        signings.append(
            ContractSigning(
                kind="backfill",
                team=team.abbreviation,
                team_id=team.id,
                player_id=fa.id,
                player_name=fa.name,
                offer=offer,
            )
        )
    return signings, out


def ensure_minimum_rosters(
    teams: Sequence[Team],
    players: Sequence[Player],
    *,
    target: int = cfg.BACKFILL_TARGET,
) -> Tuple[Tuple[ContractSigning, ...], Tuple[Player, ...]]:
    """Top every team up to ``target`` with minimum one-year deals.

    Runs after expired contracts are released. Teams are served in the given
    order, so earlier teams get the better free agents.
    """
    signings: List[ContractSigning] = []
    out = tuple(players)
    for team in teams:
        try:
            team_signings, out = _backfill_team(team, out, target)
        except EngineError:
            raise
        except Exception:
            _warn_limited("BACKFILL_FAILED", f"team={team.abbreviation}")
            continue
        signings.extend(team_signings)
    if signings:
        logger.info("roster backfill teams=%d signings=%d", len(teams), len(signings))
    return tuple(signings), out


# ---------------------------------------------------------------------------
# League-wide pass
# ---------------------------------------------------------------------------

def _manage_team(
    team: Team,
    players: Tuple[Player, ...],
    context: Optional[LeagueContext],
    lookups: Optional[LeagueLookups],
    season_year: int,
) -> Tuple[Tuple[CutDecision, ...], TeamContractResult, List[ContractSigning]]:
    direction = analyze_team_direction(team, team_roster(players, team.abbreviation), context)
    picks = lookups.picks(team) if lookups is not None else None
    capital = assess_draft_capital(team, season_year, picks)

    cuts, out = process_team_cuts(team, players, direction, lookups=lookups, draft_capital=capital)
    contracts = process_team_contracts(team, out, direction, lookups=lookups, draft_capital=capital)
    backfill, out = _backfill_team(team, contracts.players, cfg.BACKFILL_TARGET)
    return cuts, replace(contracts, players=out), backfill


def run_ai_roster_management(
    *,
    ai_teams: Sequence[Team],
    players: Sequence[Player],
    context: Optional[LeagueContext] = None,
    lookups: Optional[LeagueLookups] = None,
    season_year: int,
) -> RosterManagementResult:
    """Cuts, extensions, signings and backfill for every AI team in order.

    Each team sees the snapshot left behind by the teams before it. A team
    whose pass fails is skipped with a warning and leaves the snapshot as is.
    """
    cuts: List[CutDecision] = []
    extensions: List[ContractSigning] = []
    signings: List[ContractSigning] = []
    out = tuple(players)

    for team in ai_teams:
        try:
            team_cuts, result, backfill = _manage_team(team, out, context, lookups, season_year)
        except EngineError:
            raise
        except Exception:
            _warn_limited("ROSTER_MANAGEMENT_FAILED", f"team={team.abbreviation}")
            continue
        cuts.extend(team_cuts)
        extensions.extend(result.extensions)
        signings.extend(result.signings)
        signings.extend(backfill)
        out = result.players

    logger.info(
        "ai roster management teams=%d cuts=%d extensions=%d signings=%d",
        len(ai_teams),
        len(cuts),
        len(extensions),
        len(signings),
    )
    return RosterManagementResult(
        cuts=tuple(cuts),
        extensions=tuple(extensions),
        signings=tuple(signings),
        players=out,
    )
