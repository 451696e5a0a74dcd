from __future__ import annotations

"""Trade availability gate and AI trading blocks.

``is_player_available`` decides whether another team may target a player at
all. Stars (rating >= 82) are protected unless their owner has listed them,
they are unhappy (morale < 50), in the last year of their deal, or a flight
risk (retention < 40).

``compute_ai_trading_block`` is what an AI front office would list on its own
block given its direction. Returned entries carry a machine-readable reason so
the caller can surface them.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Collection, Dict, List, Optional, Sequence, Tuple

from league.lookups import LeagueLookups
from league.salary import expected_salary
from league.types import Direction, LeagueContext, Player, Team
from motivation import calculate_retention_score, retention_context_for_team

from . import config as cfg
from .valuation.asset_value import age_of, rating_of, years_of

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class TradingBlockEntry:
    player_id: str
    reason: str

    def to_dict(self) -> Dict[str, str]:
        return {"player_id": self.player_id, "reason": self.reason}


RetentionFn = Callable[[Player], int]


def is_player_available(
    player: Player,
    *,
    trading_block: Collection[str] = (),
    retention: Optional[int] = None,
) -> bool:
    if rating_of(player) < cfg.PROTECTED_RATING:
        return True
    if player.id in trading_block:
        return True
    if player.morale is not None and player.morale < cfg.LOW_MORALE:
        return True
    if player.contract_years_remaining is not None and player.contract_years_remaining <= 1:
        return True
    if retention is not None and retention < cfg.LOW_RETENTION:
        return True
    return False


def retention_scorer(
    roster: Sequence[Player],
    context: Optional[LeagueContext],
    lookups: Optional[LeagueLookups] = None,
) -> RetentionFn:
    """Closure scoring each player's retention with the given roster as their team."""
    roster_t = tuple(roster)

    def _score(p: Player) -> int:
        stats = lookups.stats(p.id) if lookups is not None else None
        return calculate_retention_score(p, retention_context_for_team(p, roster_t, context, stats=stats))

    return _score


def compute_ai_trading_block(
    team: Team,
    roster: Sequence[Player],
    direction: Direction,
    context: Optional[LeagueContext] = None,
    lookups: Optional[LeagueLookups] = None,
) -> Tuple[TradingBlockEntry, ...]:
    ranked = sorted(roster, key=rating_of, reverse=True)
    protected = {p.id for p in ranked[: cfg.BLOCK_PROTECTED_TOP]}
    core = {p.id for p in ranked[: cfg.BLOCK_CORE_SIZE]}
    retention = retention_scorer(roster, context, lookups)
    rebuilding_side = direction in (Direction.REBUILDING, Direction.ASCENDING)

    entries: List[TradingBlockEntry] = []
    for p in ranked:
        if len(entries) >= cfg.BLOCK_MAX_SIZE:
            break
        if p.id in protected:
            continue

        rating = rating_of(p)
        reason: Optional[str] = None
        if years_of(p) <= 1:
            r = retention(p)
            if rebuilding_side:
                if rating >= cfg.BLOCK_LIKELY_RESIGN_RATING and r > cfg.BLOCK_LIKELY_RESIGN_RETENTION:
                    # Likely to re-sign: kept off the block entirely.
                    continue
                reason = "expiring_contract"
            elif r < cfg.BLOCK_FLIGHT_RISK_RETENTION and rating < cfg.STAR_RATING:
                reason = "flight_risk"

        if (
            reason is None
            and direction is Direction.REBUILDING
            and age_of(p) >= cfg.BLOCK_VETERAN_MIN_AGE
            and rating < cfg.STAR_RATING
            and years_of(p) >= cfg.BLOCK_VETERAN_MIN_YEARS
        ):
            reason = "veteran_for_rebuild"

        if reason is None and p.id not in core:
            stats = lookups.stats(p.id) if lookups is not None else None
            if float(p.contract_salary or 0.0) > cfg.BLOCK_OVERPAID_RATIO * expected_salary(rating, stats):
                reason = "overpaid"

        if reason is not None:
            entries.append(TradingBlockEntry(player_id=p.id, reason=reason))

    logger.debug("trading block team=%s direction=%s size=%d", team.abbreviation, direction.value, len(entries))
    return tuple(entries)
