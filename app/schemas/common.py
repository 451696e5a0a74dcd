from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field


class LeagueSnapshotRequest(BaseModel):
    """League state carried by every engine call (the server keeps none)."""

    players: List[Dict[str, Any]] = Field(default_factory=list)
    teams: List[Dict[str, Any]] = Field(default_factory=list)
    # {"east": [{teamId, wins, losses}], "west": [...]}
    standings: Dict[str, List[Dict[str, Any]]] = Field(default_factory=dict)
    season_phase: str = "regular_season"
    # player_id -> {gamesPlayed, points, ...}
    stats: Dict[str, Dict[str, Any]] = Field(default_factory=dict)
    pick_values: Dict[str, float] = Field(default_factory=dict)


class DirectionRequest(LeagueSnapshotRequest):
    team_ids: Optional[List[str]] = None


class RetentionRequest(LeagueSnapshotRequest):
    player_id: str
    made_playoffs: bool = False
    coach_stability: bool = True
    has_championship: bool = False
    offer_salary: Optional[float] = None
