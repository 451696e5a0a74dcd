from __future__ import annotations

"""Proposal cooldowns.

An AI team does not pitch the user again while it has a pending proposal or
had one rejected in the last TEAM_COOLDOWN_DAYS. Independently, a team does
not re-target the same player within PLAYER_COOLDOWN_DAYS of a pending or
rejected pitch targeting that player.

Timestamps: ``resolved_at`` when present, else ``created_at``.
"""

from dataclasses import dataclass
from datetime import date
from typing import FrozenSet, Iterable, Optional, Set, Tuple

from league.types import PlayerAsset, ProposalStatus, TradeProposal

from . import config as cfg


@dataclass(frozen=True, slots=True)
class CooldownIndex:
    blocked_teams: FrozenSet[str] = frozenset()
    blocked_pairs: FrozenSet[Tuple[str, str]] = frozenset()

    def team_blocked(self, team_id: str) -> bool:
        return str(team_id) in self.blocked_teams

    def pair_blocked(self, team_id: str, player_id: str) -> bool:
        return (str(team_id), str(player_id)) in self.blocked_pairs


def _targets(p: TradeProposal) -> Tuple[str, ...]:
    if p.target_player_id:
        return (p.target_player_id,)
    return tuple(a.player_id for a in p.ai_receives if isinstance(a, PlayerAsset))


def _within(ts: Optional[date], today: date, days: int) -> bool:
    if ts is None:
        return False
    age = (today - ts).days
    return 0 <= age < int(days)


def build_cooldown_index(
    proposals: Iterable[TradeProposal],
    current_date: date,
    *,
    team_days: int = cfg.TEAM_COOLDOWN_DAYS,
    player_days: int = cfg.PLAYER_COOLDOWN_DAYS,
) -> CooldownIndex:
    teams: Set[str] = set()
    pairs: Set[Tuple[str, str]] = set()

    for p in proposals:
        team_id = str(p.proposing_team_id)
        if p.status is ProposalStatus.PENDING:
            teams.add(team_id)
            pairs.update((team_id, pid) for pid in _targets(p))
            continue
        if p.status is not ProposalStatus.REJECTED:
            continue
        ts = p.resolved_at or p.created_at
        if _within(ts, current_date, team_days):
            teams.add(team_id)
        if _within(ts, current_date, player_days):
            pairs.update((team_id, pid) for pid in _targets(p))

    return CooldownIndex(blocked_teams=frozenset(teams), blocked_pairs=frozenset(pairs))
