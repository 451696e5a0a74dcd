from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field


class LineupSelectRequest(BaseModel):
    roster: List[Dict[str, Any]] = Field(default_factory=list)
    seed: Optional[int] = None


class LineupRefreshRequest(BaseModel):
    roster: List[Dict[str, Any]] = Field(default_factory=list)
    current_starters: List[Optional[str]] = Field(default_factory=list)
    # When set, handle this injury instead of a full fatigue refresh.
    injured_player_id: Optional[str] = None
    seed: Optional[int] = None
