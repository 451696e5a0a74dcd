from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, List, Mapping, Optional, Sequence

from league.errors import EngineError
from league.lookups import LeagueLookups
from league.rng import RandomSource, ensure_rng, roll
from league.types import POSITIONS, Player, Team

from . import config as lu_cfg
from .types import LineupChange, LineupPlan, Starters, SubstitutionStrategy

logger = logging.getLogger(__name__)
_WARN_COUNTS: Dict[str, int] = {}


def _warn_limited(code: str, msg: str, *, limit: int = 5) -> None:
    n = _WARN_COUNTS.get(code, 0)
    if n < limit:
        logger.warning("%s %s", code, msg, exc_info=True)
    _WARN_COUNTS[code] = n + 1


EMPTY_STARTERS: Starters = (None,) * len(POSITIONS)


# ---------------------------------------------------------------------------
# Effective rating
# ---------------------------------------------------------------------------


def _rating(p: Player) -> int:
    return p.overall_rating if p.overall_rating is not None else lu_cfg.DEFAULT_RATING


def calculate_effective_rating(rating: float, fatigue: float) -> float:
    """Rating minus 0.5 per fatigue point above the caution line, floored at 0."""
    if fatigue <= lu_cfg.FATIGUE_CAUTION_THRESHOLD:
        return float(rating)
    penalty = (float(fatigue) - lu_cfg.FATIGUE_CAUTION_THRESHOLD) * lu_cfg.FATIGUE_RATING_PENALTY
    return max(0.0, float(rating) - penalty)


def should_rest(p: Player) -> bool:
    return float(p.fatigue or 0.0) >= lu_cfg.FATIGUE_REST_THRESHOLD


@dataclass(frozen=True, slots=True)
class _Rated:
    player: Player
    effective: float
    rest: bool

    @property
    def id(self) -> str:
        return self.player.id


def _rate(p: Player) -> _Rated:
    return _Rated(player=p, effective=calculate_effective_rating(_rating(p), p.fatigue or 0.0), rest=should_rest(p))


# ---------------------------------------------------------------------------
# Selection
# ---------------------------------------------------------------------------


def select_best_lineup(roster: Sequence[Player]) -> Starters:
    """Five starter ids in position order.

    Pass one fills each position with the best fresh player who lists it as
    primary or secondary, keeping a resting player only as that slot's
    fallback. Pass two fills what is left with the best remaining healthy
    player. Injured players never start; a player never fills two slots.
    """
    ranked = sorted((_rate(p) for p in roster if p.id), key=lambda r: -r.effective)
    healthy = [r for r in ranked if not r.player.is_injured]

    lineup: Dict[str, str] = {}
    used: set = set()

    for pos in POSITIONS:
        fallback: Optional[_Rated] = None
        chosen: Optional[_Rated] = None
        for r in healthy:
            if r.id in used or not r.player.plays(pos):
                continue
            if not r.rest:
                chosen = r
                break
            if fallback is None:
                fallback = r
        pick = chosen or fallback
        if pick is not None:
            lineup[pos] = pick.id
            used.add(pick.id)

    for pos in POSITIONS:
        if pos in lineup:
            continue
        for r in healthy:
            if r.id not in used:
                lineup[pos] = r.id
                used.add(r.id)
                break

    return tuple(lineup.get(pos) for pos in POSITIONS)


def find_replacement(roster: Sequence[Player], current_starters: Sequence[Optional[str]], position: str) -> Optional[str]:
    """Best healthy non-starter for ``position``.

    Position matches (primary or secondary) are preferred; if nobody matches,
    any healthy bench player qualifies. Ranking: fresh before resting, then
    primary position, then effective rating.
    """
    starters = set(s for s in current_starters if s)
    bench = [_rate(p) for p in roster if p.id and p.id not in starters and not p.is_injured]

    candidates = [r for r in bench if r.player.plays(position)] or bench
    if not candidates:
        return None

    best = min(
        candidates,
        key=lambda r: (r.rest, r.player.position != position, -r.effective),
    )
    return best.id


def handle_injured_starter(
    starters: Optional[Sequence[Optional[str]]],
    injured_player_id: str,
    roster: Sequence[Player],
) -> LineupChange:
    """Swap an injured starter out, keeping the slot."""
    if not starters:
        return LineupChange(starters=select_best_lineup(roster), changed=True)

    current = tuple(starters)
    if injured_player_id not in current:
        return LineupChange(starters=current, changed=False)

    index = current.index(injured_player_id)
    replacement = find_replacement(roster, current, POSITIONS[index])
    if replacement is None:
        return LineupChange(starters=current, changed=False)

    updated = list(current)
    updated[index] = replacement
    return LineupChange(starters=tuple(updated), changed=True)


def select_substitution_strategy(
    roster: Sequence[Player],
    starters: Sequence[Optional[str]],
    rng: Optional[RandomSource] = None,
) -> SubstitutionStrategy:
    starter_ids = set(s for s in starters if s)
    starter_ratings = sorted((_rating(p) for p in roster if p.id in starter_ids), reverse=True)
    bench_ratings = sorted((_rating(p) for p in roster if p.id not in starter_ids), reverse=True)

    depth = sum(1 for p in roster if _rating(p) >= lu_cfg.DEEP_BENCH_RATING)
    if depth >= lu_cfg.DEEP_BENCH_MIN_PLAYERS:
        return SubstitutionStrategy.DEEP_BENCH

    star = lu_cfg.TIGHT_ROTATION_STAR_RATING
    if len(starter_ratings) >= 2 and starter_ratings[0] >= star and starter_ratings[1] >= star:
        top_bench = bench_ratings[0] if bench_ratings else 0
        if starter_ratings[1] - top_bench > lu_cfg.TIGHT_ROTATION_BENCH_GAP:
            return SubstitutionStrategy.TIGHT_ROTATION

    if roll(ensure_rng(rng), lu_cfg.PLATOON_PROBABILITY):
        return SubstitutionStrategy.PLATOON
    return SubstitutionStrategy.STAGGERED


# ---------------------------------------------------------------------------
# Team-level entry points
# ---------------------------------------------------------------------------


def _by_rating(roster: Sequence[Player]) -> List[Player]:
    return sorted(roster, key=lambda p: -_rating(p))


def initialize_team_lineup(roster: Sequence[Player], rng: Optional[RandomSource] = None) -> LineupPlan:
    if not roster:
        return LineupPlan(starters=EMPTY_STARTERS)
    ordered = _by_rating(roster)
    starters = select_best_lineup(ordered)
    return LineupPlan(starters=starters, strategy=select_substitution_strategy(ordered, starters, rng))


def initialize_user_team_lineup(roster: Sequence[Player]) -> Starters:
    """Starters only; the user team sets its substitution strategy by hand."""
    if not roster:
        return ()
    return select_best_lineup(_by_rating(roster))


def refresh_team_lineup(
    current_starters: Optional[Sequence[Optional[str]]],
    roster: Sequence[Player],
    rng: Optional[RandomSource] = None,
) -> LineupChange:
    """Pre-game refresh: rest tired starters and pull injured ones.

    A starter at the rest line is swapped only for a replacement at least 20
    fatigue points fresher. An injured starter is swapped for anyone.
    """
    if not current_starters:
        return LineupChange(starters=initialize_team_lineup(roster, rng).starters, changed=True)
    current = tuple(current_starters)
    if not roster:
        return LineupChange(starters=current, changed=False)

    by_id: Dict[str, Player] = {p.id: p for p in roster if p.id}
    updated = list(current)
    changed = False

    for index, pos in enumerate(POSITIONS):
        if index >= len(updated):
            break
        starter = by_id.get(updated[index]) if updated[index] else None
        if starter is None:
            continue
        fatigue = float(starter.fatigue or 0.0)
        if not (starter.is_injured or fatigue >= lu_cfg.FATIGUE_REST_THRESHOLD):
            continue

        replacement_id = find_replacement(roster, updated, pos)
        replacement = by_id.get(replacement_id) if replacement_id else None
        if replacement is None or replacement.id == starter.id:
            continue
        fresher = fatigue - float(replacement.fatigue or 0.0) >= lu_cfg.REFRESH_MIN_FATIGUE_GAP
        if starter.is_injured or fresher:
            updated[index] = replacement.id
            changed = True

    return LineupChange(starters=tuple(updated), changed=changed)


# ---------------------------------------------------------------------------
# League-wide passes
# ---------------------------------------------------------------------------


def initialize_all_team_lineups(
    ai_teams: Sequence[Team],
    lookups: LeagueLookups,
    rng: Optional[RandomSource] = None,
) -> Dict[str, LineupPlan]:
    rng = ensure_rng(rng)
    out: Dict[str, LineupPlan] = {}
    for team in ai_teams:
        try:
            out[team.id] = initialize_team_lineup(lookups.roster(team.abbreviation), rng)
        except EngineError:
            raise
        except Exception:
            _warn_limited("LINEUP_INIT_FAILED", f"team={team.abbreviation}")
    logger.info("lineups initialized teams=%d", len(out))
    return out


def refresh_all_team_lineups(
    ai_teams: Sequence[Team],
    lookups: LeagueLookups,
    current_starters: Mapping[str, Sequence[Optional[str]]],
    rng: Optional[RandomSource] = None,
) -> Dict[str, LineupChange]:
    """Refresh every AI team before a game day, keyed by team id."""
    rng = ensure_rng(rng)
    out: Dict[str, LineupChange] = {}
    for team in ai_teams:
        try:
            out[team.id] = refresh_team_lineup(current_starters.get(team.id), lookups.roster(team.abbreviation), rng)
        except EngineError:
            raise
        except Exception:
            _warn_limited("LINEUP_REFRESH_FAILED", f"team={team.abbreviation}")
    changed = sum(1 for c in out.values() if c.changed)
    logger.info("lineups refreshed teams=%d changed=%d", len(out), changed)
    return out
