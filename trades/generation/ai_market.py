# trades/generation/ai_market.py
"""AI <-> AI trade matching (weekly cadence).

Teams are shuffled and paired off two by two, so each team appears in at
most one pairing per round and the number of deals stays bounded. For every
pairing that passes the probability gate, patterns are tried in a fixed
priority order (swap, player_for_picks, player_plus_pick_for_player), each
with the earlier-shuffled team as initiator first. The first candidate that
passes every check becomes the deal:

- neither roster ends above ``max_roster``
- neither recomputed payroll ends above the luxury-tax line
- both teams' ``evaluate_trade`` accept their side independently

Rosters are read once per round (pre-trade snapshot); a team that has already
dealt this round is not paired again.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Dict, FrozenSet, Iterable, List, Optional, Sequence, Tuple, Union

import game_time
from league.errors import EngineError
from league.lookups import LeagueLookups
from league.rng import RandomSource, ensure_rng, roll, shuffled
from league.salary import LUXURY_TAX_LINE, team_payroll
from league.types import Asset, Direction, DraftPick, LeagueContext, PickAsset, Player, PlayerAsset, Team
from team_direction import analyze_team_direction

from ..availability import RetentionFn, compute_ai_trading_block, is_player_available, retention_scorer
from ..config import DEFAULT_AI_MARKET, AiMarketConfig, Difficulty
from ..valuation import evaluate_trade
from ..valuation.asset_value import player_trade_value, rating_of
from .proposals import fills_need, identify_need
from .types import PATTERN_ORDER, AiTrade, TradePattern

logger = logging.getLogger(__name__)
_WARN_COUNTS: Dict[str, int] = {}


def _warn_limited(code: str, msg: str, *, limit: int = 5) -> None:
    n = _WARN_COUNTS.get(code, 0)
    if n < limit:
        logger.warning("%s %s", code, msg, exc_info=True)
    _WARN_COUNTS[code] = n + 1


@dataclass(frozen=True, slots=True)
class _Side:
    team: Team
    roster: Tuple[Player, ...]
    direction: Direction
    picks: Tuple[DraftPick, ...]
    block: FrozenSet[str]
    retention: RetentionFn

    @property
    def protected(self) -> FrozenSet[str]:
        ranked = sorted(self.roster, key=rating_of, reverse=True)
        return frozenset(p.id for p in ranked[:3])

    def tradeable(self) -> List[Player]:
        """Non-core players this side would send out, best first."""
        protected = self.protected
        return [p for p in sorted(self.roster, key=rating_of, reverse=True) if p.id not in protected]


Candidate = Tuple[Tuple[Asset, ...], Tuple[Asset, ...]]


# -----------------------------------------------------------------------------
# Pattern builders: x is the initiator (receives the target), y the partner
# -----------------------------------------------------------------------------
def _target_for(x: _Side, y: _Side) -> Optional[Player]:
    need = identify_need(x.direction, x.roster)
    if need is None:
        return None
    pool = [
        p
        for p in y.roster
        if fills_need(p, need) and is_player_available(p, trading_block=y.block, retention=y.retention(p))
    ]
    if not pool:
        return None
    return max(pool, key=player_trade_value)


def _swap(x: _Side, y: _Side, cfg: AiMarketConfig) -> Optional[Candidate]:
    target = _target_for(x, y)
    if target is None:
        return None
    tv = player_trade_value(target)
    fits = [
        p for p in x.tradeable() if tv * cfg.swap_value_min <= player_trade_value(p) <= tv * cfg.swap_value_max
    ]
    if not fits:
        return None
    back = min(fits, key=lambda p: abs(player_trade_value(p) - tv))
    return (PlayerAsset(back.id),), (PlayerAsset(target.id),)


def _player_for_picks(x: _Side, y: _Side, cfg: AiMarketConfig) -> Optional[Candidate]:
    if not x.direction.is_buyer or y.direction is not Direction.REBUILDING:
        return None
    listed = [p for p in y.roster if p.id in y.block]
    if not listed:
        return None
    target = max(listed, key=rating_of)
    count = 2 if rating_of(target) >= cfg.two_pick_rating else 1
    if len(x.picks) < count:
        return None
    return tuple(PickAsset(pk.id) for pk in x.picks[:count]), (PlayerAsset(target.id),)


def _player_plus_pick_for_player(x: _Side, y: _Side, cfg: AiMarketConfig) -> Optional[Candidate]:
    if not x.picks:
        return None
    target = _target_for(x, y)
    if target is None:
        return None
    tv = player_trade_value(target)
    fits = [
        p for p in x.tradeable() if tv * cfg.return_value_min <= player_trade_value(p) <= tv * cfg.return_value_max
    ]
    if not fits:
        return None
    back = max(fits, key=player_trade_value)
    return (PlayerAsset(back.id), PickAsset(x.picks[0].id)), (PlayerAsset(target.id),)


_BUILDERS: Dict[TradePattern, Callable[[_Side, _Side, AiMarketConfig], Optional[Candidate]]] = {
    TradePattern.SWAP: _swap,
    TradePattern.PLAYER_FOR_PICKS: _player_for_picks,
    TradePattern.PLAYER_PLUS_PICK_FOR_PLAYER: _player_plus_pick_for_player,
}


# -----------------------------------------------------------------------------
# Checks
# -----------------------------------------------------------------------------
def _player_ids(assets: Iterable[Asset]) -> List[str]:
    return [a.player_id for a in assets if isinstance(a, PlayerAsset)]


def payroll_after(roster: Sequence[Player], gives: Sequence[Asset], receives: Sequence[Asset], lookups: LeagueLookups) -> float:
    out_ids = set(_player_ids(gives))
    kept = [p for p in roster if p.id not in out_ids]
    incoming = [p for p in (lookups.player(pid) for pid in _player_ids(receives)) if p is not None]
    return team_payroll(kept) + team_payroll(incoming)


def _roster_after(roster: Sequence[Player], gives: Sequence[Asset], receives: Sequence[Asset]) -> int:
    return len(roster) - len(_player_ids(gives)) + len(_player_ids(receives))


# -----------------------------------------------------------------------------
# Entry point
# -----------------------------------------------------------------------------
def _try_pair(
    a: _Side,
    b: _Side,
    *,
    context: LeagueContext,
    lookups: LeagueLookups,
    difficulty: Union[str, Difficulty, None],
    cfg: AiMarketConfig,
    tax_line: float,
) -> Optional[AiTrade]:
    for pattern in PATTERN_ORDER:
        for x, y in ((a, b), (b, a)):
            cand = _BUILDERS[pattern](x, y, cfg)
            if cand is None:
                continue
            x_gives, y_gives = cand

            if _roster_after(x.roster, x_gives, y_gives) > cfg.max_roster:
                continue
            if _roster_after(y.roster, y_gives, x_gives) > cfg.max_roster:
                continue

            x_pay = payroll_after(x.roster, x_gives, y_gives, lookups)
            y_pay = payroll_after(y.roster, y_gives, x_gives, lookups)
            if x_pay > tax_line or y_pay > tax_line:
                logger.debug("ai trade %s %s<->%s blocked by tax line", pattern.value, x.team.abbreviation, y.team.abbreviation)
                continue

            x_eval = evaluate_trade(
                ai_gives=x_gives, ai_receives=y_gives, team=x.team, team_roster=x.roster,
                context=context, lookups=lookups, difficulty=difficulty,
            )
            if not x_eval.accepted:
                continue
            y_eval = evaluate_trade(
                ai_gives=y_gives, ai_receives=x_gives, team=y.team, team_roster=y.roster,
                context=context, lookups=lookups, difficulty=difficulty,
            )
            if not y_eval.accepted:
                continue

            return AiTrade(
                pattern=pattern,
                team_a_id=x.team.id,
                team_b_id=y.team.id,
                team_a_gives=x_gives,
                team_b_gives=y_gives,
                team_a_payroll_after=x_pay,
                team_b_payroll_after=y_pay,
                evaluations=(x_eval, y_eval),
            )
    return None


def _side(team: Team, context: LeagueContext, lookups: LeagueLookups) -> _Side:
    roster = tuple(lookups.roster(team.abbreviation))
    direction = analyze_team_direction(team, roster, context)
    block = {e.player_id for e in compute_ai_trading_block(team, roster, direction, context, lookups)}
    block.update(team.trading_block)
    return _Side(
        team=team,
        roster=roster,
        direction=direction,
        picks=tuple(lookups.picks(team)),
        block=frozenset(block),
        retention=retention_scorer(roster, context, lookups),
    )


def match_ai_trades(
    *,
    teams: Sequence[Team],
    context: LeagueContext,
    lookups: LeagueLookups,
    current_date: object,
    season_year: int,
    difficulty: Union[str, Difficulty, None] = Difficulty.PRO,
    config: AiMarketConfig = DEFAULT_AI_MARKET,
    exclude_team_ids: Iterable[str] = (),
    rng: Optional[RandomSource] = None,
) -> List[AiTrade]:
    today = game_time.parse_game_date(current_date, field="current_date")
    if not game_time.is_before_deadline(today, season_year):
        return []

    rng = ensure_rng(rng)
    tax_line = float(config.luxury_tax_line if config.luxury_tax_line is not None else LUXURY_TAX_LINE)
    days_left = game_time.days_until_deadline(today, season_year)
    near_deadline = 0 <= days_left <= config.deadline_window_days

    excluded = {str(t) for t in exclude_team_ids}
    order = shuffled([t for t in teams if t.id not in excluded], rng)

    deals: List[AiTrade] = []
    for i in range(0, len(order) - 1, 2):
        if len(deals) >= config.max_deals:
            break
        team_a, team_b = order[i], order[i + 1]
        try:
            a = _side(team_a, context, lookups)
            b = _side(team_b, context, lookups)
            if len(a.roster) < config.min_roster or len(b.roster) < config.min_roster:
                continue

            p = config.base_probability
            if near_deadline and (a.direction.is_buyer or b.direction.is_buyer):
                p *= config.deadline_buyer_boost
            if not roll(rng, p):
                continue

            deal = _try_pair(a, b, context=context, lookups=lookups, difficulty=difficulty, cfg=config, tax_line=tax_line)
        except EngineError:
            raise
        except Exception:
            _warn_limited("AI_MARKET_PAIR_FAILED", f"pair={team_a.abbreviation}-{team_b.abbreviation}")
            continue

        if deal is not None:
            deals.append(deal)
            logger.debug("ai trade %s %s<->%s", deal.pattern.value, team_a.abbreviation, team_b.abbreviation)

    logger.info("ai market date=%s pairs=%d deals=%d", today.isoformat(), len(order) // 2, len(deals))
    return deals
