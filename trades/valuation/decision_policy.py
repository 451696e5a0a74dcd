from __future__ import annotations

"""
decision_policy.py

Accept/reject policy for a trade seen from one AI team's side.

- Direction is recomputed from the supplied roster + context on every call.
- net = receiving - giving; accept iff net >= -max(giving * threshold_pct * fairness_mult, 1).
- A rejection carries a human-readable reason chosen from what the incoming
  package is missing for this team's direction (stars / young talent /
  veterans / picks).

Pure: no state is read or written, so the same inputs always produce the same
verdict and value analysis.
"""

import logging
from typing import Optional, Sequence, Union

from league.lookups import LeagueLookups
from league.types import Asset, Direction, LeagueContext, PickAsset, Player, PlayerAsset, Team
from team_direction import analyze_team_direction

from ..config import Difficulty, get_difficulty_config
from .asset_value import calculate_giving_value, calculate_receiving_value, is_star, is_veteran, is_young
from .types import DealVerdict, TradeEvaluation, ValueAnalysis

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# Package composition checks
# -----------------------------------------------------------------------------
def _players(assets: Sequence[Asset], lookups: LeagueLookups) -> list:
    out = []
    for a in assets:
        if isinstance(a, PlayerAsset):
            p = lookups.player(a.player_id)
            if p is not None:
                out.append(p)
    return out


def _has_picks(assets: Sequence[Asset]) -> bool:
    return any(isinstance(a, PickAsset) for a in assets)


def rejection_reason(direction: Direction, ai_receives: Sequence[Asset], lookups: LeagueLookups) -> str:
    incoming = _players(ai_receives, lookups)
    picks = _has_picks(ai_receives)
    stars = any(is_star(p) for p in incoming)
    young = any(is_young(p) for p in incoming)
    vets = any(is_veteran(p) for p in incoming)

    if direction is Direction.REBUILDING:
        if not picks:
            return "We're looking to acquire draft picks in any deal."
        if vets:
            return "We're focused on building for the future with young talent."
        return "We'd need more young talent or draft compensation to make this work."

    if direction is Direction.TITLE_CONTENDER:
        if not stars:
            return "We need proven stars who can help us compete for a championship."
        return "The return doesn't match the caliber of player we'd be giving up."

    if direction is Direction.WIN_NOW:
        if not stars:
            return "We need proven players who can help us win now."
        return "The value isn't there for a win-now team like us."

    # ascending
    if vets and not picks:
        return "We're building something special with our young core. We need picks or young talent."
    if not young and not picks:
        return "We're focused on acquiring young talent and draft capital for our future."
    return "We don't see enough upside in this deal for our timeline."


def fairness_threshold(giving: float, difficulty: Union[str, Difficulty, None]) -> float:
    dc = get_difficulty_config(difficulty)
    return max(float(giving) * dc.threshold_pct * dc.fairness_mult, 1.0)


# -----------------------------------------------------------------------------
# Entry point
# -----------------------------------------------------------------------------
def evaluate_trade(
    *,
    ai_gives: Sequence[Asset],
    ai_receives: Sequence[Asset],
    team: Team,
    team_roster: Sequence[Player],
    context: Optional[LeagueContext],
    lookups: LeagueLookups,
    difficulty: Union[str, Difficulty, None] = Difficulty.PRO,
) -> TradeEvaluation:
    diff_config = get_difficulty_config(difficulty)
    direction = analyze_team_direction(team, team_roster, context)

    receiving = calculate_receiving_value(
        ai_receives,
        direction=direction,
        team_roster=team_roster,
        diff_config=diff_config,
        lookups=lookups,
        team_abbreviation=team.abbreviation,
        context=context,
    )
    giving = calculate_giving_value(ai_gives, direction=direction, diff_config=diff_config, lookups=lookups)

    net = round(receiving - giving, 2)
    threshold = fairness_threshold(giving, difficulty)
    analysis = ValueAnalysis(receiving=receiving, giving=giving, net=net, threshold=round(threshold, 2))

    if net >= -threshold:
        verdict = TradeEvaluation(DealVerdict.ACCEPT, None, direction, analysis)
    else:
        verdict = TradeEvaluation(DealVerdict.REJECT, rejection_reason(direction, ai_receives, lookups), direction, analysis)

    logger.debug(
        "evaluate_trade team=%s direction=%s receiving=%.2f giving=%.2f net=%.2f decision=%s",
        team.abbreviation,
        direction.value,
        receiving,
        giving,
        net,
        verdict.decision.value,
    )
    return verdict
