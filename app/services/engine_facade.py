from __future__ import annotations

import os
import random
from dataclasses import dataclass
from datetime import date
from typing import Dict, List, Optional, Sequence, Tuple

from fastapi.responses import JSONResponse

import game_time
from league import EngineError, LeagueContext, LeagueLookups, Player, SeasonStats, Team, build_context
from league.errors import BAD_PAYLOAD
from league.normalize import player_from_mapping, stats_from_mapping, team_from_mapping
from trades.config import Difficulty, resolve_difficulty

from app.schemas.common import LeagueSnapshotRequest


def _engine_error_response(error: EngineError) -> JSONResponse:
    payload = {
        "ok": False,
        "error": {
            "code": error.code,
            "message": error.message,
            "details": error.details,
        },
    }
    return JSONResponse(status_code=400, content=payload)


def default_difficulty() -> Difficulty:
    return resolve_difficulty(os.environ.get("FRANCHISE_AI_DEFAULT_DIFFICULTY") or Difficulty.PRO)


def request_difficulty(name: Optional[str]) -> Difficulty:
    return resolve_difficulty(name) if name else default_difficulty()


def request_date(value: Optional[str]) -> date:
    try:
        return game_time.parse_game_date(value, field="current_date")
    except ValueError as exc:
        raise EngineError(BAD_PAYLOAD, str(exc), {"field": "current_date"}) from exc


def request_rng(seed: Optional[int]) -> random.Random:
    return random.Random(seed) if seed is not None else random.Random()


@dataclass(frozen=True, slots=True)
class LeagueSnapshot:
    players: Tuple[Player, ...]
    teams: Tuple[Team, ...]
    context: LeagueContext
    lookups: LeagueLookups

    def find_team(self, team_id: Optional[str]) -> Optional[Team]:
        for t in self.teams:
            if t.id == team_id or t.abbreviation == team_id:
                return t
        return None

    def team(self, team_id: str) -> Team:
        found = self.find_team(team_id)
        if found is not None:
            return found
        raise EngineError(BAD_PAYLOAD, f"unknown team {team_id!r}", {"team_id": team_id})

    def roster(self, team: Team) -> List[Player]:
        return self.lookups.roster(team.abbreviation)

    def teams_except(self, excluded: Sequence[Optional[str]]) -> List[Team]:
        skip = {x for x in excluded if x}
        return [t for t in self.teams if t.id not in skip and t.abbreviation not in skip]


def load_snapshot(req: LeagueSnapshotRequest) -> LeagueSnapshot:
    players = tuple(player_from_mapping(p) for p in req.players)
    teams = tuple(team_from_mapping(t) for t in req.teams)
    stats: Dict[str, SeasonStats] = {}
    for pid, raw in req.stats.items():
        s = stats_from_mapping(raw)
        if s is not None:
            stats[str(pid)] = s
    return LeagueSnapshot(
        players=players,
        teams=teams,
        context=build_context(req.standings, teams, req.season_phase),
        lookups=LeagueLookups.from_snapshot(players, teams, stats=stats, pick_values=req.pick_values),
    )
