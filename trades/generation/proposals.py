# trades/generation/proposals.py
"""AI -> user trade proposals (weekly cadence).

Pipeline per AI team
--------------------
1) Cooldown: skip teams with a pending pitch or a recent rejection.
2) Probability gate: 15% per week, tripled for buyers and doubled for
   everyone else inside the last 30 days before the deadline.
3) Need: weakest starting spot (buyers, ascending) or young talent (rebuilders).
4) Targets: user players that fill the need, minus the user's best match,
   filtered by the availability gate, flight risks first.
5) Offer: a value-comparable non-core player or a pick, sweetened when light.
6) Self-check: the AI must accept its own offer under the current difficulty.

Failures are isolated per team: an unexpected error skips that team with a
rate-limited warning. EngineError (contract violations) always propagates.
"""

from __future__ import annotations

import hashlib
import logging
from datetime import date
from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple, Union

import game_time
from league.errors import EngineError
from league.lookups import LeagueLookups
from league.rng import RandomSource, ensure_rng, roll
from league.types import (
    POSITIONS,
    Asset,
    Direction,
    DraftPick,
    LeagueContext,
    PickAsset,
    Player,
    PlayerAsset,
    Team,
    TradeProposal,
)
from team_direction import analyze_team_direction

from .. import config as cfg
from ..availability import is_player_available, retention_scorer
from ..config import Difficulty
from ..cooldown import CooldownIndex, build_cooldown_index
from ..valuation import evaluate_trade
from ..valuation.asset_value import age_of, player_trade_value, rating_of
from .types import PROPOSAL_REASONS, NeedKind, TradeNeed

logger = logging.getLogger(__name__)
_WARN_COUNTS: Dict[str, int] = {}


def _warn_limited(code: str, msg: str, *, limit: int = 5) -> None:
    n = _WARN_COUNTS.get(code, 0)
    if n < limit:
        logger.warning("%s %s", code, msg, exc_info=True)
    _WARN_COUNTS[code] = n + 1


# -----------------------------------------------------------------------------
# Need identification
# -----------------------------------------------------------------------------
def _weakest_position(roster: Sequence[Player]) -> Tuple[Optional[str], int]:
    weakest: Optional[str] = None
    weakest_rating = 100
    for pos in POSITIONS:
        best = max((rating_of(p) for p in roster if p.plays(pos)), default=0)
        if best < weakest_rating:
            weakest_rating = best
            weakest = pos
    return weakest, weakest_rating


def identify_need(direction: Direction, roster: Sequence[Player]) -> Optional[TradeNeed]:
    if direction.is_buyer:
        pos, best = _weakest_position(roster)
        if pos is not None and best < cfg.STAR_NEED_RATING:
            return TradeNeed(kind=NeedKind.POSITION, position=pos, min_rating=best + 2)
        return TradeNeed(kind=NeedKind.STAR, min_rating=cfg.STAR_NEED_RATING)

    if direction is Direction.REBUILDING:
        return TradeNeed(kind=NeedKind.YOUNG, min_rating=cfg.YOUNG_NEED_MIN_RATING, max_age=cfg.YOUNG_MAX_AGE)

    pos, best = _weakest_position(roster)
    if pos is None:
        return None
    return TradeNeed(kind=NeedKind.POSITION, position=pos, min_rating=max(cfg.ASCENDING_NEED_FLOOR, best + 2))


def fills_need(p: Player, need: TradeNeed) -> bool:
    rating = rating_of(p)
    if need.kind is NeedKind.POSITION:
        return p.plays(need.position) and rating >= need.min_rating
    if need.kind is NeedKind.STAR:
        return rating >= need.min_rating
    max_age = need.max_age if need.max_age is not None else cfg.YOUNG_MAX_AGE
    return age_of(p) <= max_age and rating >= need.min_rating


# -----------------------------------------------------------------------------
# Targets
# -----------------------------------------------------------------------------
def find_target_players(
    user_roster: Sequence[Player],
    need: TradeNeed,
    *,
    trading_block: Iterable[str] = (),
    excluded: Iterable[str] = (),
    context: Optional[LeagueContext] = None,
    lookups: Optional[LeagueLookups] = None,
    limit: int = cfg.MAX_TARGETS,
) -> List[Player]:
    """User players that fill ``need``, most likely to leave first.

    The user's single most valuable match is never targeted unless it is the
    only one. ``excluded`` ids (pairs on cooldown) are dropped before the
    list is cut to ``limit``.
    """
    matches = sorted((p for p in user_roster if fills_need(p, need)), key=player_trade_value, reverse=True)
    if len(matches) > 1:
        matches = matches[1:]

    block = set(trading_block)
    skip = set(excluded)
    retention = retention_scorer(user_roster, context, lookups)
    scored: List[Tuple[int, Player]] = []
    for p in matches:
        if p.id in skip:
            continue
        r = retention(p)
        if is_player_available(p, trading_block=block, retention=r):
            scored.append((r, p))

    scored.sort(key=lambda t: t[0])
    return [p for _, p in scored[: max(0, int(limit))]]


# -----------------------------------------------------------------------------
# Offer construction
# -----------------------------------------------------------------------------
def build_ai_offer(
    ai_roster: Sequence[Player],
    target: Player,
    direction: Direction,
    team_picks: Sequence[DraftPick] = (),
) -> Optional[Tuple[Asset, ...]]:
    target_value = player_trade_value(target)
    ranked = sorted(ai_roster, key=rating_of, reverse=True)

    if direction is Direction.REBUILDING:
        vets = [p for p in ranked if age_of(p) >= cfg.REBUILD_OFFER_MIN_AGE]
        candidates = vets or ranked
    else:
        candidates = ranked[cfg.OFFER_PROTECTED_TOP:] or ranked[1:]

    assets: List[Asset] = []
    offered_value = 0.0
    for c in candidates:
        v = player_trade_value(c)
        if target_value * cfg.OFFER_VALUE_MIN <= v <= target_value * cfg.OFFER_VALUE_MAX:
            assets.append(PlayerAsset(player_id=c.id))
            offered_value = v
            break

    if not assets:
        if team_picks:
            assets.append(PickAsset(pick_id=team_picks[0].id))
    elif offered_value < target_value * cfg.OFFER_SWEETEN_BELOW and team_picks:
        assets.append(PickAsset(pick_id=team_picks[0].id))

    return tuple(assets) if assets else None


def generate_proposal_reason(direction: Direction, target: Player) -> str:
    return PROPOSAL_REASONS[direction].format(name=target.name)


def proposal_id(team_id: str, current_date: date, target_id: str) -> str:
    raw = f"{team_id}|{current_date.isoformat()}|{target_id}"
    return hashlib.sha1(raw.encode("utf-8")).hexdigest()[:16]


def proposal_probability(direction: Direction, days_until_deadline: int) -> float:
    p = cfg.PROPOSAL_BASE_PROBABILITY
    if 0 <= days_until_deadline <= cfg.DEADLINE_WINDOW_DAYS:
        p *= cfg.DEADLINE_BUYER_BOOST if direction.is_buyer else cfg.DEADLINE_OTHER_BOOST
    return p


# -----------------------------------------------------------------------------
# Weekly entry point
# -----------------------------------------------------------------------------
def _proposal_for_team(
    ai_team: Team,
    *,
    user_team: Team,
    user_roster: Sequence[Player],
    context: LeagueContext,
    lookups: LeagueLookups,
    today: date,
    days_left: int,
    difficulty: Union[str, Difficulty, None],
    cooldowns: CooldownIndex,
    rng: RandomSource,
) -> Optional[TradeProposal]:
    ai_roster = lookups.roster(ai_team.abbreviation)
    if not ai_roster:
        return None

    direction = analyze_team_direction(ai_team, ai_roster, context)
    if not roll(rng, proposal_probability(direction, days_left)):
        return None

    need = identify_need(direction, ai_roster)
    if need is None:
        return None

    on_cooldown = [p.id for p in user_roster if cooldowns.pair_blocked(ai_team.id, p.id)]
    targets = find_target_players(
        user_roster,
        need,
        trading_block=user_team.trading_block,
        excluded=on_cooldown,
        context=context,
        lookups=lookups,
    )
    if not targets:
        return None
    target = targets[0]

    offer = build_ai_offer(ai_roster, target, direction, lookups.picks(ai_team))
    if offer is None:
        return None

    receives = (PlayerAsset(player_id=target.id),)
    verdict = evaluate_trade(
        ai_gives=offer,
        ai_receives=receives,
        team=ai_team,
        team_roster=ai_roster,
        context=context,
        lookups=lookups,
        difficulty=difficulty,
    )
    if not verdict.accepted:
        logger.debug("proposal self-check rejected team=%s target=%s", ai_team.abbreviation, target.id)
        return None

    return TradeProposal(
        id=proposal_id(ai_team.id, today, target.id),
        proposing_team_id=ai_team.id,
        proposing_team_abbreviation=ai_team.abbreviation,
        proposing_team_name=ai_team.full_name,
        receiving_team_id=user_team.id,
        ai_gives=offer,
        ai_receives=receives,
        reason=generate_proposal_reason(direction, target),
        created_at=today,
        expires_at=game_time.add_days(today, cfg.PROPOSAL_EXPIRY_DAYS),
        target_player_id=target.id,
    )


def generate_weekly_proposals(
    *,
    ai_teams: Sequence[Team],
    user_team: Team,
    context: LeagueContext,
    lookups: LeagueLookups,
    current_date: Any,
    season_year: int,
    difficulty: Union[str, Difficulty, None] = Difficulty.PRO,
    existing_proposals: Iterable[TradeProposal] = (),
    rng: Optional[RandomSource] = None,
) -> List[TradeProposal]:
    today = game_time.parse_game_date(current_date, field="current_date")
    if not game_time.is_before_deadline(today, season_year):
        return []

    user_roster = lookups.roster(user_team.abbreviation)
    if not user_roster:
        return []

    rng = ensure_rng(rng)
    days_left = game_time.days_until_deadline(today, season_year)
    cooldowns = build_cooldown_index(existing_proposals, today)

    out: List[TradeProposal] = []
    for ai_team in ai_teams:
        if ai_team.id == user_team.id or cooldowns.team_blocked(ai_team.id):
            continue
        try:
            proposal = _proposal_for_team(
                ai_team,
                user_team=user_team,
                user_roster=user_roster,
                context=context,
                lookups=lookups,
                today=today,
                days_left=days_left,
                difficulty=difficulty,
                cooldowns=cooldowns,
                rng=rng,
            )
        except EngineError:
            raise
        except Exception:
            _warn_limited("PROPOSAL_GENERATION_FAILED", f"team={ai_team.abbreviation}")
            continue
        if proposal is not None:
            out.append(proposal)

    logger.info("weekly proposals date=%s teams=%d generated=%d", today.isoformat(), len(ai_teams), len(out))
    return out
