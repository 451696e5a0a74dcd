from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from app.schemas.common import LeagueSnapshotRequest


class TradeEvaluateRequest(LeagueSnapshotRequest):
    team_id: str
    ai_gives: List[Dict[str, Any]] = Field(default_factory=list)
    ai_receives: List[Dict[str, Any]] = Field(default_factory=list)
    difficulty: Optional[str] = None


class TradeProposalsRequest(LeagueSnapshotRequest):
    user_team_id: str
    current_date: str  # in-game date (YYYY-MM-DD)
    season_year: int
    difficulty: Optional[str] = None
    existing_proposals: List[Dict[str, Any]] = Field(default_factory=list)
    seed: Optional[int] = None


class AiMarketRequest(LeagueSnapshotRequest):
    current_date: str
    season_year: int
    user_team_id: Optional[str] = None
    difficulty: Optional[str] = None
    seed: Optional[int] = None


class ExpireProposalsRequest(BaseModel):
    current_date: str
    proposals: List[Dict[str, Any]] = Field(default_factory=list)
