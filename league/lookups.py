"""Collaborator bundle the decision components read league state through.

The engine never owns the system of record. Callers hand in accessor
functions; ``from_snapshot`` builds them from in-memory lists for the HTTP
surface and the tests.

``get_player`` and ``get_team_roster`` are required by any component that
resolves assets or rosters. A missing one is a programming-contract violation
and raises EngineError(MISSING_COLLABORATOR) at first use. The remaining
accessors have neutral defaults (no stats, pick value 5.0, the team's own
picks).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Iterable, List, Mapping, Optional, Sequence

from .errors import MISSING_COLLABORATOR, EngineError
from .types import DraftPick, Player, SeasonStats, Team

DEFAULT_PICK_VALUE: float = 5.0

PlayerFn = Callable[[str], Optional[Player]]
RosterFn = Callable[[str], Sequence[Player]]
StatsFn = Callable[[str], Optional[SeasonStats]]
PickValueFn = Callable[[str], float]
TeamPicksFn = Callable[[Team], Sequence[DraftPick]]


def _no_stats(_player_id: str) -> Optional[SeasonStats]:
    return None


def _default_pick_value(_pick_id: str) -> float:
    return DEFAULT_PICK_VALUE


def _own_picks(team: Team) -> Sequence[DraftPick]:
    return team.draft_picks


@dataclass(frozen=True, slots=True)
class LeagueLookups:
    get_player: Optional[PlayerFn] = None
    get_team_roster: Optional[RosterFn] = None
    get_player_stats: StatsFn = _no_stats
    get_pick_value: PickValueFn = _default_pick_value
    get_team_picks: TeamPicksFn = _own_picks

    # ------------------------------------------------------------------
    # Checked accessors
    # ------------------------------------------------------------------
    def player(self, player_id: str) -> Optional[Player]:
        if self.get_player is None:
            raise EngineError(MISSING_COLLABORATOR, "get_player is required to resolve player assets")
        return self.get_player(str(player_id))

    def roster(self, team_abbreviation: str) -> List[Player]:
        if self.get_team_roster is None:
            raise EngineError(MISSING_COLLABORATOR, "get_team_roster is required to load rosters")
        return list(self.get_team_roster(str(team_abbreviation)) or ())

    def stats(self, player_id: str) -> Optional[SeasonStats]:
        return self.get_player_stats(str(player_id))

    def pick_value(self, pick_id: str) -> float:
        return float(self.get_pick_value(str(pick_id)))

    def picks(self, team: Team) -> List[DraftPick]:
        return list(self.get_team_picks(team) or ())

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------
    @classmethod
    def from_snapshot(
        cls,
        players: Iterable[Player],
        teams: Iterable[Team] = (),
        *,
        stats: Optional[Mapping[str, SeasonStats]] = None,
        pick_values: Optional[Mapping[str, float]] = None,
    ) -> "LeagueLookups":
        """Build lookups over in-memory lists.

        A team's roster follows its ``roster_ids`` order when the team is known
        (so the canonical starters stay first); otherwise it is every player
        whose ``team_abbreviation`` matches.
        """
        by_id: Dict[str, Player] = {p.id: p for p in players}
        by_abbr: Dict[str, Team] = {t.abbreviation: t for t in teams}
        stats_map = dict(stats or {})
        pick_map = {str(k): float(v) for k, v in (pick_values or {}).items()}

        def get_player(player_id: str) -> Optional[Player]:
            return by_id.get(player_id)

        def get_team_roster(abbr: str) -> List[Player]:
            team = by_abbr.get(abbr)
            if team is not None and team.roster_ids:
                return [by_id[pid] for pid in team.roster_ids if pid in by_id]
            return [p for p in by_id.values() if p.team_abbreviation == abbr]

        def get_player_stats(player_id: str) -> Optional[SeasonStats]:
            return stats_map.get(player_id)

        def get_pick_value(pick_id: str) -> float:
            return pick_map.get(pick_id, DEFAULT_PICK_VALUE)

        return cls(
            get_player=get_player,
            get_team_roster=get_team_roster,
            get_player_stats=get_player_stats,
            get_pick_value=get_pick_value,
        )
